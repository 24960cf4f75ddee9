"""Configuration: modes, defaults and option resolution."""

from fstools.config.settings import (
    OpMode,
    FileMode,
    FolderMode,
    VALID_OPMODES,
    VALID_FILEMODES,
    VALID_FLDRMODES,
    DEFAULT_OPTIONS,
    MAX_FOLDER_DEPTH,
)
from fstools.config.options import (
    CopyOptions,
    current_timestamp,
    merge_options,
    resolve_options,
)

__all__ = [
    "OpMode",
    "FileMode",
    "FolderMode",
    "VALID_OPMODES",
    "VALID_FILEMODES",
    "VALID_FLDRMODES",
    "DEFAULT_OPTIONS",
    "MAX_FOLDER_DEPTH",
    "CopyOptions",
    "current_timestamp",
    "merge_options",
    "resolve_options",
]
