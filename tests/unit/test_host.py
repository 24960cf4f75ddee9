"""Tests for the local filesystem primitives."""

import errno
import pytest
from pathlib import Path
from unittest.mock import patch

from fstools.filesystem.host import LocalFileSystem, OpResult


class TestOpResult:
    """Tests for OpResult."""

    def test_success(self):
        """success() has no error."""
        outcome = OpResult.success()
        assert outcome.ok is True
        assert outcome.error is None

    def test_failure(self):
        """failure() carries the detail."""
        outcome = OpResult.failure("boom")
        assert outcome.ok is False
        assert outcome.error == "boom"


class TestQueries:
    """Tests for existence and type queries."""

    def test_exists(self, tmp_path, local_fs):
        """exists() reflects the filesystem."""
        (tmp_path / "f").touch()
        assert local_fs.exists(tmp_path / "f")
        assert not local_fs.exists(tmp_path / "missing")

    def test_file_and_dir(self, tmp_path, local_fs):
        """is_file() and is_dir() classify entries."""
        (tmp_path / "f").touch()
        (tmp_path / "d").mkdir()

        assert local_fs.is_file(tmp_path / "f")
        assert not local_fs.is_dir(tmp_path / "f")
        assert local_fs.is_dir(tmp_path / "d")
        assert not local_fs.is_file(tmp_path / "d")

    def test_children(self, tmp_path, local_fs):
        """children() lists immediate entries only."""
        (tmp_path / "a").touch()
        (tmp_path / "sub").mkdir()
        (tmp_path / "sub" / "nested").touch()

        children = local_fs.children(tmp_path)

        assert sorted(children) == [tmp_path / "a", tmp_path / "sub"]

    def test_children_of_missing_folder(self, tmp_path, local_fs):
        """An unlistable folder gives None instead of raising."""
        assert local_fs.children(tmp_path / "missing") is None

    def test_children_permission_denied(self, tmp_path, local_fs):
        """A permission error while listing gives None."""
        with patch.object(Path, "iterdir", side_effect=PermissionError("denied")):
            assert local_fs.children(tmp_path) is None


class TestMkdirs:
    """Tests for mkdirs."""

    def test_creates_parents(self, tmp_path, local_fs):
        """Missing ancestors are created."""
        target = tmp_path / "a" / "b" / "c"
        local_fs.mkdirs(target)
        assert target.is_dir()

    def test_idempotent(self, tmp_path, local_fs):
        """Existing folder is accepted."""
        local_fs.mkdirs(tmp_path)
        assert tmp_path.is_dir()

    def test_failure_does_not_raise(self, tmp_path, local_fs):
        """A file in the way leaves the folder absent without raising."""
        (tmp_path / "blocker").touch()
        local_fs.mkdirs(tmp_path / "blocker" / "child")
        assert not (tmp_path / "blocker" / "child").exists()


class TestDelete:
    """Tests for delete and delete_recursive."""

    def test_delete_file(self, tmp_path, local_fs):
        """Deletes a file."""
        target = tmp_path / "f"
        target.touch()
        assert local_fs.delete(target).ok
        assert not target.exists()

    def test_delete_empty_folder(self, tmp_path, local_fs):
        """Deletes an empty folder."""
        target = tmp_path / "d"
        target.mkdir()
        assert local_fs.delete(target).ok
        assert not target.exists()

    def test_delete_non_empty_folder_fails(self, tmp_path, local_fs):
        """Non-empty folder is not deleted by delete()."""
        target = tmp_path / "d"
        target.mkdir()
        (target / "f").touch()

        outcome = local_fs.delete(target)

        assert not outcome.ok
        assert outcome.error
        assert target.exists()

    def test_delete_recursive(self, tmp_path, local_fs):
        """delete_recursive removes the whole tree."""
        target = tmp_path / "d"
        (target / "x" / "y").mkdir(parents=True)
        (target / "x" / "y" / "f").touch()

        assert local_fs.delete_recursive(target).ok
        assert not target.exists()

    def test_delete_missing(self, tmp_path, local_fs):
        """Deleting a missing path reports failure."""
        assert not local_fs.delete(tmp_path / "missing").ok


class TestRename:
    """Tests for rename."""

    def test_renames_file(self, tmp_path, local_fs):
        """Renames a file and creates the parent folder."""
        src = tmp_path / "a.txt"
        src.write_text("content")
        dst = tmp_path / "new" / "b.txt"

        assert local_fs.rename(src, dst).ok
        assert not src.exists()
        assert dst.read_text() == "content"

    def test_refuses_existing_destination(self, tmp_path, local_fs):
        """Never replaces an existing destination."""
        src = tmp_path / "a.txt"
        src.write_text("new")
        dst = tmp_path / "b.txt"
        dst.write_text("old")

        outcome = local_fs.rename(src, dst)

        assert not outcome.ok
        assert src.exists()
        assert dst.read_text() == "old"

    def test_refuses_existing_empty_folder(self, tmp_path, local_fs):
        """An existing empty folder is not replaced."""
        src = tmp_path / "src"
        src.mkdir()
        dst = tmp_path / "dst"
        dst.mkdir()

        assert not local_fs.rename(src, dst).ok
        assert src.exists()

    def test_cross_device_reports_failure(self, tmp_path, local_fs):
        """EXDEV from the OS becomes a failed OpResult."""
        src = tmp_path / "a.txt"
        src.touch()
        error = OSError(errno.EXDEV, "Invalid cross-device link")

        with patch("fstools.filesystem.host.os.rename", side_effect=error):
            outcome = local_fs.rename(src, tmp_path / "b.txt")

        assert not outcome.ok
        assert "cross-device" in outcome.error
        assert src.exists()


class TestCopyFile:
    """Tests for copy_file."""

    def test_copies_file(self, tmp_path, local_fs):
        """Copies content under the given name."""
        src = tmp_path / "a.txt"
        src.write_text("content")

        outcome = local_fs.copy_file(src, tmp_path / "out", "b.txt")

        assert outcome.ok
        assert (tmp_path / "out" / "b.txt").read_text() == "content"
        assert src.exists()

    def test_no_overwrite(self, tmp_path, local_fs):
        """Existing target is kept when overwrite is False."""
        src = tmp_path / "a.txt"
        src.write_text("new")
        (tmp_path / "b.txt").write_text("old")

        outcome = local_fs.copy_file(src, tmp_path, "b.txt", overwrite=False)

        assert not outcome.ok
        assert (tmp_path / "b.txt").read_text() == "old"

    def test_overwrite(self, tmp_path, local_fs):
        """Existing target is replaced when overwrite is True."""
        src = tmp_path / "a.txt"
        src.write_text("new")
        (tmp_path / "b.txt").write_text("old")

        assert local_fs.copy_file(src, tmp_path, "b.txt", overwrite=True).ok
        assert (tmp_path / "b.txt").read_text() == "new"

    def test_os_error_reports_failure(self, tmp_path, local_fs):
        """OS errors do not propagate."""
        src = tmp_path / "a.txt"
        src.touch()

        with patch("fstools.filesystem.host.shutil.copy2", side_effect=OSError("disk full")):
            outcome = local_fs.copy_file(src, tmp_path / "out", "b.txt")

        assert not outcome.ok
        assert outcome.error == "disk full"
