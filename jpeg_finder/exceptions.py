"""
カスタム例外クラス定義

JPEG EXIF Finderで使用する例外クラスを定義します。
"""


class ProcessingError(Exception):
    """処理エラーの基底クラス"""
    pass


class ValidationError(ProcessingError):
    """入力パスの検証エラー"""
    pass


class ExifReadError(ProcessingError):
    """Exif読取エラー（ファイル自体を読み取れない場合）"""
    pass
