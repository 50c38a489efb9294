"""
Exif情報読み取りモジュール

JPEGファイルから撮影日とカメラモデルを読み取る機能を提供します。
Exifの解析には exifread ライブラリを使用します。
読み取り結果はキャッシュせず、呼び出しごとにファイルを読み直します。
"""

import logging
from pathlib import Path
from typing import Optional

import exifread

from .exceptions import ExifReadError
from .models import ImageMetadata


# 撮影日時（"YYYY:MM:DD HH:MM:SS"）のうち日付部分の長さ
DATE_LENGTH = 10


def trim_time_from_date(full_datetime: str) -> str:
    """
    Exif日時文字列から日付部分（YYYY:MM:DD）を取り出す

    Args:
        full_datetime: Exif日時文字列（例: "2023:12:25 14:30:45"）

    Returns:
        先頭10文字。10文字未満の場合は元の文字列をそのまま返す
    """
    if len(full_datetime) >= DATE_LENGTH:
        return full_datetime[:DATE_LENGTH]
    return full_datetime


class ExifReader:
    """exifread を使用したExif情報読み取りクラス"""

    DATETIME_TAG = 'Image DateTime'
    MODEL_TAG = 'Image Model'

    def __init__(self):
        """ExifReaderを初期化"""
        self.logger = logging.getLogger(__name__)

    def read_metadata(self, file_path: Path) -> Optional[ImageMetadata]:
        """
        ファイルから撮影日とカメラモデルを読み取る

        Args:
            file_path: 読み取り対象のファイルパス

        Returns:
            メタデータ（Exifコンテナが存在しない・解析できない場合はNone）

        Raises:
            ExifReadError: ファイル自体を開けない場合
        """
        try:
            with open(file_path, 'rb') as fh:
                tags = self._process_file(fh, file_path)
        except OSError as e:
            raise ExifReadError(f"Cannot read file: {file_path} - {e}") from e

        if not tags:
            self.logger.debug(f"No EXIF data: {file_path}")
            return None

        metadata = ImageMetadata(
            capture_date=trim_time_from_date(self._tag_value(tags, self.DATETIME_TAG)),
            camera_model=self._tag_value(tags, self.MODEL_TAG),
        )
        self.logger.debug(f"EXIF read: {file_path} -> {metadata}")
        return metadata

    def _process_file(self, fh, file_path: Path) -> dict:
        """exifreadでタグを解析（解析できない場合は空の辞書）"""
        try:
            return exifread.process_file(fh, details=False)
        except OSError:
            raise
        except Exception as e:
            # 破損したExifはメタデータなしとして扱う
            self.logger.debug(f"EXIF parse error: {file_path} - {e}")
            return {}

    @staticmethod
    def _tag_value(tags: dict, tag_name: str) -> str:
        """タグの表示用文字列を取得（存在しない場合は空文字列）"""
        tag = tags.get(tag_name)
        if tag is None:
            return ''
        return str(tag.printable).strip('\x00')
