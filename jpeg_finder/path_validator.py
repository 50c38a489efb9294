"""
パス検証ユーティリティ

コマンドラインで指定されたディレクトリパスの検証を提供します。
"""

from pathlib import Path

from .exceptions import ValidationError


class PathValidator:
    """パス検証を行うユーティリティクラス"""

    @staticmethod
    def validate_directory(path: Path) -> None:
        """
        ディレクトリの存在を検証

        Args:
            path: 検証するディレクトリパス

        Raises:
            ValidationError: ディレクトリが存在しない、またはディレクトリではない場合
        """
        if not path.exists():
            raise ValidationError(f"Error: Directory '{path}' does not exist")

        if not path.is_dir():
            raise ValidationError(f"Error: '{path}' is not a directory")
