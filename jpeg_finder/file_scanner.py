"""
ファイルスキャナー

ディレクトリを再帰的に走査して通常ファイルを列挙する機能を提供します。
"""

import os
from pathlib import Path
from typing import Callable, Iterator, Optional, Set

from .wildcard import ascii_lower


class FileScanner:
    """ディレクトリを走査してファイルを検索するクラス"""

    # JPEG拡張子（小文字で比較）
    JPEG_EXTENSIONS: Set[str] = {
        '.jpg',
        '.jpeg',
    }

    def walk_files(self, directory: Path,
                   on_error: Optional[Callable[[OSError], None]] = None) -> Iterator[Path]:
        """
        ディレクトリを再帰的に走査して通常ファイルを列挙

        ディレクトリのシンボリックリンクは辿りません。
        サブディレクトリの読み取りに失敗した場合は on_error に通知し、
        残りのディレクトリの走査を継続します。

        Args:
            directory: 走査するディレクトリ
            on_error: 走査エラー時に呼ばれるコールバック

        Yields:
            見つかった通常ファイルのパス（走査順、ソートなし）
        """
        for dirpath, _dirnames, filenames in os.walk(directory, onerror=on_error):
            for filename in filenames:
                file_path = Path(dirpath) / filename
                if file_path.is_file():
                    yield file_path

    def is_jpeg_file(self, file_path: Path) -> bool:
        """
        ファイルがJPEGファイルかどうかを判定（大文字小文字を区別しない）

        名前が拡張子のみのファイル（例: `.jpg`）も対象に含めます。

        Args:
            file_path: ファイルパス

        Returns:
            JPEGファイルの場合True
        """
        return ascii_lower(file_path.name).endswith(tuple(self.JPEG_EXTENSIONS))
