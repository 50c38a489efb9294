"""
検索処理モジュール

ディレクトリツリー内のJPEGファイルを、ファイル名・撮影日・カメラモデルの
3つの条件で絞り込む機能を提供します。各条件は空文字列の場合は無効です。
"""

import logging
from pathlib import Path
from typing import List, Optional

from .exceptions import ExifReadError
from .exif_reader import ExifReader
from .file_scanner import FileScanner
from .logger import ProgressLogger
from .models import FileMatch, ImageMetadata, MatchCriteria, ScanStats
from .wildcard import ascii_lower, match_wildcard


class FileFinder:
    """条件に一致するJPEGファイルを検索するクラス"""

    def __init__(self, exif_reader: Optional[ExifReader] = None,
                 file_scanner: Optional[FileScanner] = None,
                 progress_logger: Optional[ProgressLogger] = None):
        """
        FileFinderを初期化

        Args:
            exif_reader: Exif情報読み取りオブジェクト
            file_scanner: ファイル走査オブジェクト
            progress_logger: 走査エラーの出力先（省略時はモジュールロガー）
        """
        self.exif_reader = exif_reader or ExifReader()
        self.file_scanner = file_scanner or FileScanner()
        self.progress_logger = progress_logger
        self.logger = logging.getLogger(__name__)
        self.stats = ScanStats()

    def find_matches(self, root: Path, criteria: MatchCriteria) -> List[FileMatch]:
        """
        条件に一致するJPEGファイルを検索

        走査中のエラーはサブツリー単位で記録され、残りの走査は継続されます。

        Args:
            root: 検索するディレクトリ
            criteria: 検索条件

        Returns:
            一致したファイルのリスト（走査順）
        """
        self.stats = ScanStats()
        matches = []

        for file_path in self.file_scanner.walk_files(Path(root), on_error=self._handle_walk_error):
            self.stats.files_seen += 1
            filename = ascii_lower(file_path.name)

            if not self.file_scanner.is_jpeg_file(file_path):
                continue
            self.stats.jpeg_files_found += 1

            if criteria.name_pattern and not match_wildcard(criteria.name_pattern, filename):
                continue

            metadata = self._read_metadata(file_path)
            if metadata is None:
                self.stats.metadata_missing += 1
                continue

            if not self._meets_criteria(metadata, criteria):
                continue

            matches.append(FileMatch(
                filename=filename,
                metadata=metadata,
                matched_by_name=bool(criteria.name_pattern),
                matched_by_date=bool(criteria.capture_date),
                matched_by_model=bool(criteria.model_pattern),
                path=file_path,
            ))
            self.logger.debug(f"Match: {file_path}")

        self.stats.matches_found = len(matches)
        return matches

    def _read_metadata(self, file_path: Path) -> Optional[ImageMetadata]:
        """メタデータを読み取る（読み取れないファイルはNone）"""
        try:
            return self.exif_reader.read_metadata(file_path)
        except ExifReadError as e:
            self.logger.debug(f"Skipped: {e}")
            return None

    @staticmethod
    def _meets_criteria(metadata: ImageMetadata, criteria: MatchCriteria) -> bool:
        """撮影日とカメラモデルの条件をすべて満たすか判定"""
        if criteria.capture_date and criteria.capture_date != metadata.capture_date:
            return False
        if criteria.model_pattern and not match_wildcard(criteria.model_pattern, metadata.camera_model):
            return False
        return True

    def _handle_walk_error(self, error: OSError) -> None:
        """走査エラーを記録（走査は継続）"""
        location = error.filename or ''
        self.stats.errors.append((str(location), error.strerror or str(error)))

        if self.progress_logger:
            self.progress_logger.log_error(Path(location), "cannot read directory", error)
        else:
            self.logger.error(f"Error: {error}")


def find_matches(root: Path, date_filter: str = '', model_filter: str = '',
                 name_filter: str = '') -> List[FileMatch]:
    """
    条件に一致するJPEGファイルを検索（FileFinderの簡易インターフェース）

    Args:
        root: 検索するディレクトリ
        date_filter: 撮影日（YYYY:MM:DD、完全一致）
        model_filter: カメラモデルのワイルドカードパターン
        name_filter: ファイル名のワイルドカードパターン

    Returns:
        一致したファイルのリスト
    """
    criteria = MatchCriteria(
        name_pattern=name_filter,
        capture_date=date_filter,
        model_pattern=model_filter,
    )
    return FileFinder().find_matches(root, criteria)
