"""
ロギングシステム

JPEG EXIF Finderのロギング機能を提供します。
標準出力は検索結果の表に使用するため、コンソールログは標準エラー出力に書き込みます。
"""

import logging
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from .models import MatchCriteria, ScanStats


LOGGER_NAME = 'jpeg_finder'
EXIFREAD_LOGGER_NAME = 'exifread'


@dataclass
class LogConfig:
    """ログ設定"""
    console_level: int = logging.WARNING
    file_level: int = logging.DEBUG
    log_file: Optional[Path] = None
    verbose: bool = False


class ProgressLogger:
    """スキャンの進捗とエラーのロギングを管理するクラス"""

    def __init__(self, config: LogConfig):
        self.config = config
        self.logger = self._setup_logger()

    def _setup_logger(self) -> logging.Logger:
        """パッケージロガーのセットアップ"""
        logger = logging.getLogger(LOGGER_NAME)
        logger.setLevel(logging.DEBUG)

        # 既存のハンドラーをクリア
        for handler in list(logger.handlers):
            logger.removeHandler(handler)
            handler.close()

        console_formatter = logging.Formatter('%(message)s')
        file_formatter = logging.Formatter(
            '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
        )

        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setLevel(self.config.console_level)
        console_handler.setFormatter(console_formatter)
        logger.addHandler(console_handler)

        if self.config.log_file:
            self.config.log_file.parent.mkdir(parents=True, exist_ok=True)

            file_handler = logging.FileHandler(self.config.log_file, encoding='utf-8')
            file_handler.setLevel(self.config.file_level)
            file_handler.setFormatter(file_formatter)
            logger.addHandler(file_handler)

        self._setup_exifread_logger(logger.handlers)
        return logger

    def _setup_exifread_logger(self, handlers):
        """
        exifreadのロガーをパッケージのハンドラーに接続

        exifreadは非JPEGや破損ファイルで警告を出力するため、
        verbose時以外は表示しません。
        """
        exifread_logger = logging.getLogger(EXIFREAD_LOGGER_NAME)
        exifread_logger.setLevel(logging.WARNING if self.config.verbose else logging.CRITICAL)
        exifread_logger.propagate = False

        for handler in list(exifread_logger.handlers):
            exifread_logger.removeHandler(handler)
        for handler in handlers:
            exifread_logger.addHandler(handler)

    def log_scan_start(self, root: Path, criteria: MatchCriteria):
        """スキャン開始のログ"""
        self.logger.debug(f"Scanning: {root}")
        self.logger.debug(f"  name:   {criteria.name_pattern or '(any)'}")
        self.logger.debug(f"  date:   {criteria.capture_date or '(any)'}")
        self.logger.debug(f"  camera: {criteria.model_pattern or '(any)'}")

    def log_scan_complete(self, stats: ScanStats, processing_time: float):
        """スキャン完了時のサマリー（verbose時のみ表示）"""
        if not self.config.verbose:
            return

        self.logger.info("=" * 40)
        self.logger.info(f"Files seen:       {stats.files_seen}")
        self.logger.info(f"JPEG files:       {stats.jpeg_files_found}")
        self.logger.info(f"Without EXIF:     {stats.metadata_missing}")
        self.logger.info(f"Matches:          {stats.matches_found}")
        self.logger.info(f"Traversal errors: {len(stats.errors)}")
        self.logger.info(f"Elapsed:          {processing_time:.2f}s")
        self.logger.info("=" * 40)

    def log_error(self, file_path: Path, error_message: str, exception: Optional[Exception] = None):
        """エラーログの詳細記録"""
        error_msg = f"Error: {file_path}: {error_message}"

        if exception:
            error_msg += f" ({type(exception).__name__}: {exception})"

        self.logger.error(error_msg)

        # スタックトレースはファイルログのみに記録
        if exception and self.config.log_file:
            self.logger.debug("Traceback:", exc_info=exception)

    def log_warning(self, message: str):
        self.logger.warning(f"Warning: {message}")

    def log_info(self, message: str):
        self.logger.info(message)

    def log_debug(self, message: str):
        self.logger.debug(message)


def create_default_logger(verbose: bool = False, log_file: Optional[Path] = None) -> ProgressLogger:
    """デフォルトのロガーを作成"""
    config = LogConfig(
        console_level=logging.DEBUG if verbose else logging.WARNING,
        file_level=logging.DEBUG,
        log_file=log_file,
        verbose=verbose
    )
    return ProgressLogger(config)
