"""Filesystem primitives and the file/folder copy-move engines."""

from fstools.filesystem.host import (
    FileSystem,
    LocalFileSystem,
    OpResult,
)
from fstools.filesystem.paths import (
    normalize_path,
    split_extension,
    timestamped_file,
    timestamped_folder,
)
from fstools.filesystem.file_ops import resolve_file
from fstools.filesystem.folder_ops import resolve_folder

__all__ = [
    "FileSystem",
    "LocalFileSystem",
    "OpResult",
    "normalize_path",
    "split_extension",
    "timestamped_file",
    "timestamped_folder",
    "resolve_file",
    "resolve_folder",
]
