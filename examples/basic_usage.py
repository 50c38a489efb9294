#!/usr/bin/env python3
"""
JPEG EXIF Finder - 基本的な使用例

このスクリプトは、JPEG EXIF Finderをプログラムから直接呼び出す例を示します。
"""

import sys
from pathlib import Path

from jpeg_finder import (
    FileFinder, MatchCriteria, create_default_logger, find_matches, render_report
)


def example_simple_search(photo_directory: Path):
    """簡易インターフェースで検索する例"""
    print("=" * 60)
    print("例1: Canonで撮影した写真を検索")
    print("=" * 60)

    matches = find_matches(photo_directory, model_filter="Canon*")

    if not matches:
        print("一致するファイルがありません。")
        return

    render_report(matches)
    print()


def example_combined_criteria(photo_directory: Path):
    """複数の条件と詳細ログを使う例"""
    print("=" * 60)
    print("例2: ファイル名・撮影日・カメラモデルの組み合わせ")
    print("=" * 60)

    progress_logger = create_default_logger(verbose=True)
    criteria = MatchCriteria(
        name_pattern="img_*",
        capture_date="2023:05:01",
        model_pattern="*eos*",
    )

    finder = FileFinder(progress_logger=progress_logger)
    progress_logger.log_scan_start(photo_directory, criteria)
    matches = finder.find_matches(photo_directory, criteria)
    progress_logger.log_scan_complete(finder.stats, 0.0)

    for match in matches:
        print(f"{match.path}  ({match.metadata.camera_model}, {match.metadata.capture_date})")

    if finder.stats.errors:
        print(f"⚠️  読み取れなかったディレクトリ: {len(finder.stats.errors)}件")
    print()


def main():
    """メイン関数"""
    # 例用のディレクトリパス（実際の使用時は適切なパスに変更してください）
    photo_directory = Path(sys.argv[1] if len(sys.argv) > 1 else "~/Pictures").expanduser()

    if not photo_directory.is_dir():
        print(f"⚠️  ディレクトリが存在しません: {photo_directory}")
        return 1

    example_simple_search(photo_directory)
    example_combined_criteria(photo_directory)
    return 0


if __name__ == "__main__":
    sys.exit(main())
