"""Host filesystem primitives consumed by the copy/move engine.

The engine only talks to a ``FileSystem``. ``LocalFileSystem`` implements it
on top of ``os``/``shutil`` and reports failures as ``OpResult`` values
instead of raising.
"""

import os
import shutil
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional, Protocol

from loguru import logger


@dataclass(frozen=True)
class OpResult:
    """
    Outcome of a single primitive call.

    Attributes:
        ok: True if the primitive did what was asked.
        error: Error detail when ok is False.
    """

    ok: bool
    error: Optional[str] = None

    @classmethod
    def success(cls) -> "OpResult":
        return cls(True)

    @classmethod
    def failure(cls, error: str) -> "OpResult":
        return cls(False, error)


class FileSystem(Protocol):
    """Primitive operations supplied by the embedding environment."""

    def exists(self, path: Path) -> bool: ...

    def is_file(self, path: Path) -> bool: ...

    def is_dir(self, path: Path) -> bool: ...

    def children(self, path: Path) -> Optional[List[Path]]: ...

    def mkdirs(self, path: Path) -> None: ...

    def delete(self, path: Path) -> OpResult: ...

    def delete_recursive(self, path: Path) -> OpResult: ...

    def rename(self, src: Path, dst: Path) -> OpResult: ...

    def copy_file(
        self, src: Path, dest_dir: Path, dest_name: str, overwrite: bool = False
    ) -> OpResult: ...


class LocalFileSystem:
    """FileSystem backed by the local operating system."""

    def exists(self, path: Path) -> bool:
        return os.path.lexists(path)

    def is_file(self, path: Path) -> bool:
        return path.is_file()

    def is_dir(self, path: Path) -> bool:
        return path.is_dir()

    def children(self, path: Path) -> Optional[List[Path]]:
        """Immediate children in directory listing order, None if unreadable."""
        try:
            return list(path.iterdir())
        except OSError as e:
            logger.warning(f"Cannot list folder {path}: {e}")
            return None

    def mkdirs(self, path: Path) -> None:
        """Create path and missing parents; failures leave the path absent."""
        try:
            path.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            logger.warning(f"Cannot create folder {path}: {e}")

    def delete(self, path: Path) -> OpResult:
        """Delete a file or an empty folder."""
        try:
            if path.is_dir() and not path.is_symlink():
                path.rmdir()
            else:
                path.unlink()
        except OSError as e:
            return OpResult.failure(str(e))
        return OpResult.success()

    def delete_recursive(self, path: Path) -> OpResult:
        """Delete a folder with all its contents, or a single file."""
        try:
            if path.is_dir() and not path.is_symlink():
                shutil.rmtree(path)
            else:
                path.unlink()
        except OSError as e:
            return OpResult.failure(str(e))
        return OpResult.success()

    def rename(self, src: Path, dst: Path) -> OpResult:
        """
        Atomically rename src to dst.

        Never replaces an existing dst. Fails (without raising) when src and
        dst are on different devices.

        Args:
            src: Existing file or folder.
            dst: New location, parent folders are created.

        Returns:
            OpResult of the rename.
        """
        if self.exists(dst):
            return OpResult.failure(f"destination exists: {dst}")
        try:
            dst.parent.mkdir(parents=True, exist_ok=True)
            os.rename(src, dst)
        except OSError as e:
            return OpResult.failure(str(e))
        return OpResult.success()

    def copy_file(
        self, src: Path, dest_dir: Path, dest_name: str, overwrite: bool = False
    ) -> OpResult:
        """
        Copy a single file into dest_dir under dest_name.

        Args:
            src: Source file.
            dest_dir: Destination folder, created if missing.
            dest_name: File name inside dest_dir.
            overwrite: If False, an existing target is a failure.

        Returns:
            OpResult of the copy.
        """
        target = dest_dir / dest_name
        if not overwrite and self.exists(target):
            return OpResult.failure(f"destination exists: {target}")
        try:
            dest_dir.mkdir(parents=True, exist_ok=True)
            shutil.copy2(src, target)
        except OSError as e:
            return OpResult.failure(str(e))
        return OpResult.success()
