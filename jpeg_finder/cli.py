"""
コマンドラインインターフェース

JPEG EXIF Finderのメインエントリーポイントです。
最初の引数を検索ディレクトリとして扱い、残りの引数をオプションとして解析します。
最初の引数がオプションの場合、検索ディレクトリはカレントディレクトリになります。
"""

import argparse
import sys
import time
from pathlib import Path
from typing import List, Optional, Tuple

from .exceptions import ProcessingError, ValidationError
from .finder import FileFinder
from .logger import create_default_logger
from .models import MatchCriteria
from .path_validator import PathValidator
from .report import render_report


# 値を取るオプション（次の引数を値として消費する）
VALUE_FLAGS = {
    '-n': '--name', '--name': '--name',
    '-d': '--date', '--date': '--date',
    '-c': '--camera', '--camera': '--camera',
}

SWITCH_FLAGS = (
    '-v', '--verbose',
    '-h', '--help',
)

# 最初の引数がこれらのいずれかの場合、ディレクトリはカレントディレクトリとみなす
OPTION_FLAGS = tuple(VALUE_FLAGS) + SWITCH_FLAGS


class OptionalValueAction(argparse.Action):
    """値が省略された場合は何もしないアクション（既存の値を保持）"""

    def __call__(self, parser, namespace, values, option_string=None):
        if values is not None:
            setattr(namespace, self.dest, values)


def create_parser() -> argparse.ArgumentParser:
    """
    コマンドライン引数パーサーを作成

    ヘルプと不明なオプションはmain()で処理するため、
    add_help=False と allow_abbrev=False を指定します。

    Returns:
        設定済みのArgumentParser
    """
    parser = argparse.ArgumentParser(
        prog='jpeg-finder',
        usage='%(prog)s DIRECTORY [OPTIONS]',
        description='Find JPEG files by name, capture date and camera model.',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        add_help=False,
        allow_abbrev=False,
        epilog="""
Output format:
  MATCHES  FILENAME                  CAMERA_MODEL            CAPTURE_DATE

Examples:
  jpeg-finder ~/Pictures --camera "Canon*"
  jpeg-finder ~/Pictures -n "img_*.jpg" -d 2023:05:01
  jpeg-finder --date 2021:01:01
        """
    )

    parser.add_argument(
        '-n', '--name',
        dest='name',
        nargs='?',
        default='',
        action=OptionalValueAction,
        metavar='PATTERN',
        help='Match filename (case-insensitive, supports * wildcard)'
    )
    parser.add_argument(
        '-d', '--date',
        dest='date',
        nargs='?',
        default='',
        action=OptionalValueAction,
        metavar='DATE',
        help='Match exact capture date (YYYY:MM:DD)'
    )
    parser.add_argument(
        '-c', '--camera',
        dest='camera',
        nargs='?',
        default='',
        action=OptionalValueAction,
        metavar='PATTERN',
        help='Match camera model (case-insensitive, supports * wildcard)'
    )
    parser.add_argument(
        '-v', '--verbose',
        action='store_true',
        help='Show debug log and scan summary on stderr'
    )
    parser.add_argument(
        '-h', '--help',
        action='store_true',
        help='Display this help message'
    )

    return parser


def parse_arguments(argv: List[str],
                    parser: Optional[argparse.ArgumentParser] = None
                    ) -> Tuple[str, argparse.Namespace, List[str]]:
    """
    コマンドライン引数を解析

    値を取るオプションは、次の引数が `-` で始まっていても値として消費します。
    `-nfoo` や `--name=foo` のような連結形式は不明なオプションとして扱います。

    Args:
        argv: プログラム名を除いた引数（1つ以上）
        parser: 使用するパーサー（省略時は新規作成）

    Returns:
        (検索ディレクトリ, 解析済みオプション, 不明な引数のリスト)
    """
    parser = parser or create_parser()

    first = argv[0]
    if first in OPTION_FLAGS:
        directory, options = '.', argv
    else:
        directory, options = first, argv[1:]

    tokens, unknown = _normalize_options(options)
    args, extras = parser.parse_known_args(tokens)
    return directory, args, unknown + extras


def _normalize_options(options: List[str]) -> Tuple[List[str], List[str]]:
    """
    オプションをargparseに渡す形式に変換

    値を取るオプションと次の引数を `--name=<値>` の1トークンにまとめ、
    argparseが `-` で始まる値をオプションと解釈しないようにします。

    Returns:
        (argparseに渡すトークン, 不明な引数のリスト)
    """
    tokens = []
    unknown = []
    i = 0
    while i < len(options):
        option = options[i]
        if option in VALUE_FLAGS:
            if i + 1 < len(options):
                tokens.append(f"{VALUE_FLAGS[option]}={options[i + 1]}")
                i += 2
                continue
            # 値が省略された場合は既存の値を保持
            tokens.append(option)
        elif option in SWITCH_FLAGS:
            tokens.append(option)
        else:
            unknown.append(option)
        i += 1
    return tokens, unknown


def main(argv: Optional[List[str]] = None) -> int:
    """
    メインエントリーポイント

    Returns:
        終了コード（0: 一致あり、1: エラーまたは一致なし）
    """
    if argv is None:
        argv = sys.argv[1:]

    parser = create_parser()

    if not argv:
        parser.print_help(sys.stderr)
        return 1

    directory, args, unknown = parse_arguments(argv, parser)

    # ヘルプはディレクトリ検証より優先
    if args.help:
        parser.print_help(sys.stdout)
        return 0

    if unknown:
        print(f"Unknown option: {unknown[0]}", file=sys.stderr)
        parser.print_help(sys.stderr)
        return 1

    root = Path(directory)
    try:
        PathValidator.validate_directory(root)
    except ValidationError as e:
        print(e, file=sys.stderr)
        return 1

    progress_logger = create_default_logger(verbose=args.verbose)
    criteria = MatchCriteria(
        name_pattern=args.name,
        capture_date=args.date,
        model_pattern=args.camera,
    )

    try:
        finder = FileFinder(progress_logger=progress_logger)
        progress_logger.log_scan_start(root, criteria)
        start_time = time.time()

        matches = finder.find_matches(root, criteria)

        progress_logger.log_scan_complete(finder.stats, time.time() - start_time)
    except ProcessingError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if not matches:
        print("No files found", file=sys.stderr)
        return 1

    render_report(matches, sys.stdout)
    return 0


if __name__ == '__main__':
    sys.exit(main())
