"""
結果表示モジュール

検索結果を固定幅の表として出力します。
"""

import sys
from typing import Iterable, Optional, TextIO

from .models import FileMatch


# 列幅（最小幅。長い値は切り詰めない）
FLAGS_WIDTH = 8
FILENAME_WIDTH = 25
MODEL_WIDTH = 23
DATE_WIDTH = 20


def format_match_flags(match: FileMatch) -> str:
    """
    一致した条件を3文字で表す（n: ファイル名、d: 撮影日、c: カメラモデル）

    Args:
        match: 検索結果

    Returns:
        例: "n-c"
    """
    return ''.join([
        'n' if match.matched_by_name else '-',
        'd' if match.matched_by_date else '-',
        'c' if match.matched_by_model else '-',
    ])


def format_match_line(match: FileMatch) -> str:
    """検索結果1件を表の1行に整形"""
    return (
        f"{format_match_flags(match):<{FLAGS_WIDTH}} "
        f"{match.filename:<{FILENAME_WIDTH}} "
        f"{match.metadata.camera_model:<{MODEL_WIDTH}} "
        f"{match.metadata.capture_date:<{DATE_WIDTH}}"
    )


def render_report(matches: Iterable[FileMatch], stream: Optional[TextIO] = None) -> None:
    """
    検索結果の表を出力

    Args:
        matches: 検索結果
        stream: 出力先（省略時は標準出力）
    """
    stream = stream or sys.stdout
    for match in matches:
        stream.write(format_match_line(match) + '\n')
