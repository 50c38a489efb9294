# JPEG EXIF Finder
# A Python tool to find JPEG files by filename, capture date and camera model

from .models import ImageMetadata, FileMatch, MatchCriteria, ScanStats
from .exceptions import ProcessingError, ValidationError, ExifReadError
from .wildcard import match_wildcard
from .path_validator import PathValidator
from .file_scanner import FileScanner
from .exif_reader import ExifReader, trim_time_from_date
from .logger import ProgressLogger, LogConfig, create_default_logger
from .finder import FileFinder, find_matches
from .report import format_match_flags, format_match_line, render_report

__version__ = '1.0.0'

__all__ = [
    'ImageMetadata',
    'FileMatch',
    'MatchCriteria',
    'ScanStats',
    'ProcessingError',
    'ValidationError',
    'ExifReadError',
    'match_wildcard',
    'PathValidator',
    'FileScanner',
    'ExifReader',
    'trim_time_from_date',
    'ProgressLogger',
    'LogConfig',
    'create_default_logger',
    'FileFinder',
    'find_matches',
    'format_match_flags',
    'format_match_line',
    'render_report',
]
