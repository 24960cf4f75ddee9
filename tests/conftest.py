"""Pytest configuration and fixtures."""

import pytest
from pathlib import Path

from fstools.config.options import CopyOptions
from fstools.config.settings import FileMode, FolderMode, OpMode
from fstools.filesystem.host import LocalFileSystem, OpResult


class RecordingFileSystem(LocalFileSystem):
    """
    LocalFileSystem that records primitive calls and can be told to fail.

    Attributes:
        calls: (primitive name, first path) tuples in call order.
        fail_rename: If True, rename reports a cross-device failure.
        fail_delete: If True, delete and delete_recursive do nothing.
        fail_mkdirs: If True, mkdirs does nothing.
    """

    def __init__(self) -> None:
        self.calls = []
        self.fail_rename = False
        self.fail_delete = False
        self.fail_mkdirs = False

    def count(self, name: str) -> int:
        return sum(1 for call, _ in self.calls if call == name)

    def mkdirs(self, path: Path) -> None:
        self.calls.append(("mkdirs", path))
        if not self.fail_mkdirs:
            super().mkdirs(path)

    def delete(self, path: Path) -> OpResult:
        self.calls.append(("delete", path))
        if self.fail_delete:
            return OpResult.failure("permission denied")
        return super().delete(path)

    def delete_recursive(self, path: Path) -> OpResult:
        self.calls.append(("delete_recursive", path))
        if self.fail_delete:
            return OpResult.failure("permission denied")
        return super().delete_recursive(path)

    def rename(self, src: Path, dst: Path) -> OpResult:
        self.calls.append(("rename", src))
        if self.fail_rename:
            return OpResult.failure("Invalid cross-device link")
        return super().rename(src, dst)

    def copy_file(self, src, dest_dir, dest_name, overwrite=False) -> OpResult:
        self.calls.append(("copy_file", src))
        return super().copy_file(src, dest_dir, dest_name, overwrite)


@pytest.fixture
def recording_fs():
    """Local filesystem recording every primitive call."""
    return RecordingFileSystem()


@pytest.fixture
def local_fs():
    """Plain local filesystem."""
    return LocalFileSystem()


@pytest.fixture
def make_options():
    """Factory for resolved options with a fixed timestamp."""
    def _make(
        op_mode=OpMode.COPY,
        file_mode=FileMode.ABORT,
        fldr_mode=FolderMode.ABORT,
        recursive=True,
        timestamp=1636490640569,
    ):
        return CopyOptions(
            op_mode=op_mode,
            file_mode=file_mode,
            fldr_mode=fldr_mode,
            recursive=recursive,
            timestamp=timestamp,
        )
    return _make


@pytest.fixture
def source_tree(tmp_path):
    """
    Create a populated source folder.

    src/
        a.txt
        b.dat
        sub/
            c.txt
            deeper/
                d.txt
    """
    src = tmp_path / "src"
    (src / "sub" / "deeper").mkdir(parents=True)
    (src / "a.txt").write_text("alpha")
    (src / "b.dat").write_bytes(b"\x00\x01\x02")
    (src / "sub" / "c.txt").write_text("gamma")
    (src / "sub" / "deeper" / "d.txt").write_text("delta")
    return src
