"""
データモデル定義

JPEG EXIF Finderで使用するデータクラスを定義します。
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional, Tuple


@dataclass(frozen=True)
class ImageMetadata:
    """JPEGファイルから読み取ったメタデータ"""
    capture_date: str = ''  # YYYY:MM:DD 形式（取得できない場合は空文字列）
    camera_model: str = ''


@dataclass
class MatchCriteria:
    """検索条件（空文字列の条件は無効）"""
    name_pattern: str = ''
    capture_date: str = ''
    model_pattern: str = ''

    @property
    def is_empty(self) -> bool:
        return not (self.name_pattern or self.capture_date or self.model_pattern)


@dataclass
class FileMatch:
    """条件に一致したファイル"""
    filename: str  # 小文字化したファイル名
    metadata: ImageMetadata
    matched_by_name: bool = False
    matched_by_date: bool = False
    matched_by_model: bool = False
    path: Optional[Path] = None


@dataclass
class ScanStats:
    """スキャン統計情報"""
    files_seen: int = 0
    jpeg_files_found: int = 0
    metadata_missing: int = 0
    matches_found: int = 0
    errors: List[Tuple[str, str]] = field(default_factory=list)  # (path, error_message)
