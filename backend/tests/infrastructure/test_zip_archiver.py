"""Tests for ZIP archives and the attachment store."""

import io
import zipfile

import pytest

from infrastructure.reporting import ZipArchiver
from infrastructure.storage import LocalAttachmentStore


class TestZipArchiver:
    """Test archive building."""

    def test_archive_directory_contains_files(self, tmp_path):
        (tmp_path / "张三-1-A.pdf").write_bytes(b"a")
        (tmp_path / "nested").mkdir()

        content = ZipArchiver().archive_directory(tmp_path)

        with zipfile.ZipFile(io.BytesIO(content)) as archive:
            assert archive.namelist() == ["张三-1-A.pdf"]
            assert archive.read("张三-1-A.pdf") == b"a"

    def test_empty_archive_is_valid(self):
        with zipfile.ZipFile(io.BytesIO(ZipArchiver().archive({}))) as archive:
            assert archive.namelist() == []


class TestLocalAttachmentStore:
    """Test reading uploaded files."""

    def test_reads_file(self, tmp_path):
        (tmp_path / "a1b2c3.pdf").write_bytes(b"%PDF")
        assert LocalAttachmentStore(str(tmp_path)).read("a1b2c3.pdf") == b"%PDF"

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            LocalAttachmentStore(str(tmp_path)).read("missing.pdf")

    def test_path_outside_base_is_refused(self, tmp_path):
        (tmp_path / "secret.txt").write_bytes(b"x")
        base = tmp_path / "private"
        base.mkdir()
        with pytest.raises(FileNotFoundError):
            LocalAttachmentStore(str(base)).read("../secret.txt")
