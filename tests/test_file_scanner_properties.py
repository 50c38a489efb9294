"""
FileScannerのプロパティベーステスト

Property 6: JPEG拡張子判定の一貫性
Property 7: 再帰走査の完全性
を検証します。
"""

import os
import tempfile
from pathlib import Path

from hypothesis import given, strategies as st
from hypothesis import settings
import pytest

from jpeg_finder.file_scanner import FileScanner


# ファイルシステムで安全に使用できる文字のストラテジー
safe_filename_strategy = st.text(
    alphabet=st.characters(
        whitelist_categories=('Lu', 'Ll', 'Nd'),
        min_codepoint=32,
        max_codepoint=126
    ),
    min_size=1,
    max_size=30
).filter(lambda x: x.strip() and not any(c in x for c in '<>:"|?*\\/.'))


@settings(max_examples=100)
@given(
    safe_filename_strategy,
    st.sampled_from(['.jpg', '.JPG', '.jpeg', '.JPEG', '.Jpg', '.jPeG'])
)
def test_jpeg_extension_detection_property(basename, extension):
    """
    **Feature: jpeg-finder, Property 6: JPEG拡張子判定の一貫性**

    大文字小文字に関わらず .jpg / .jpeg の拡張子を持つファイルはJPEGと判定されるべきである。
    """
    scanner = FileScanner()

    assert scanner.is_jpeg_file(Path(f"/test/path/{basename}{extension}"))


@settings(max_examples=100)
@given(
    safe_filename_strategy,
    st.sampled_from(['.png', '.gif', '.PNG', '.cr2', '.jpe', '.jpg.bak', '.txt', ''])
)
def test_non_jpeg_extension_rejected_property(basename, extension):
    """
    **Feature: jpeg-finder, Property 6: JPEG拡張子判定の一貫性**

    .jpg / .jpeg 以外の拡張子（拡張子なしを含む）はJPEGと判定されないべきである。
    """
    scanner = FileScanner()

    assert not scanner.is_jpeg_file(Path(f"/test/path/{basename}{extension}"))


@settings(max_examples=30)
@given(st.lists(safe_filename_strategy, min_size=1, max_size=8, unique_by=lambda x: x.lower()))
def test_recursive_walk_completeness_property(names):
    """
    **Feature: jpeg-finder, Property 7: 再帰走査の完全性**

    ネストしたディレクトリ内のすべての通常ファイルが1回ずつ列挙されるべきである。
    """
    scanner = FileScanner()

    with tempfile.TemporaryDirectory() as temp_dir:
        root = Path(temp_dir)
        expected = set()
        for depth, name in enumerate(names):
            directory = root.joinpath(*[f"level{i}" for i in range(depth)])
            directory.mkdir(parents=True, exist_ok=True)
            file_path = directory / f"{name}.txt"
            file_path.write_text('x')
            expected.add(file_path)

        found = list(scanner.walk_files(root))

        assert len(found) == len(expected)
        assert set(found) == expected


class TestJpegFileDetection:
    """is_jpeg_fileの境界値テスト"""

    @pytest.mark.parametrize('name', ['.jpg', '.JPEG', '.Jpg'])
    def test_extension_only_name_is_jpeg(self, name):
        """拡張子のみの名前もJPEGと判定される"""
        assert FileScanner().is_jpeg_file(Path(f"/test/path/{name}"))

    def test_non_ascii_uppercase_name(self):
        """ASCII以外の文字を含む名前でも拡張子で判定される"""
        assert FileScanner().is_jpeg_file(Path("/test/path/ÉTÉ.JPG"))


class TestFileScannerWalk:
    """walk_filesの動作テスト"""

    def test_directories_are_not_yielded(self, tmp_path):
        """ディレクトリ自体は列挙されない"""
        (tmp_path / 'album.jpg').mkdir()
        (tmp_path / 'album.jpg' / 'inner.jpg').write_bytes(b'x')

        found = list(FileScanner().walk_files(tmp_path))

        assert found == [tmp_path / 'album.jpg' / 'inner.jpg']

    def test_empty_directory(self, tmp_path):
        """空のディレクトリでは何も列挙されない"""
        assert list(FileScanner().walk_files(tmp_path)) == []

    def test_missing_root_reports_error(self, tmp_path):
        """存在しないディレクトリはエラーとして通知される"""
        errors = []

        found = list(FileScanner().walk_files(tmp_path / 'missing', on_error=errors.append))

        assert found == []
        assert len(errors) == 1
        assert isinstance(errors[0], OSError)

    @pytest.mark.skipif(not hasattr(os, 'geteuid') or os.geteuid() == 0,
                        reason="権限テストはroot以外のUnixでのみ有効")
    def test_unreadable_subdirectory_does_not_stop_walk(self, tmp_path):
        """読み取れないサブディレクトリがあっても他のファイルは列挙される"""
        (tmp_path / 'ok').mkdir()
        (tmp_path / 'ok' / 'a.jpg').write_bytes(b'x')
        locked = tmp_path / 'locked'
        locked.mkdir()
        (locked / 'b.jpg').write_bytes(b'x')
        (tmp_path / 'c.jpg').write_bytes(b'x')
        locked.chmod(0o000)

        errors = []
        try:
            found = set(FileScanner().walk_files(tmp_path, on_error=errors.append))
        finally:
            locked.chmod(0o755)

        assert found == {tmp_path / 'ok' / 'a.jpg', tmp_path / 'c.jpg'}
        assert len(errors) == 1
