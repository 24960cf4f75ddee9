"""Configuration settings and constants for the fstools package."""

from enum import Enum
from typing import Any, Dict, Set


class OpMode(str, Enum):
    """Operation performed on the source."""
    COPY = "copy"
    MOVE = "move"


class FileMode(str, Enum):
    """What to do when a destination file already exists."""
    ABORT = "abort"
    SKIP = "skip"
    RENAME_DTS = "rename-dts"
    REPLACE = "replace"


class FolderMode(str, Enum):
    """What to do when a destination folder already exists."""
    ABORT = "abort"
    SKIP = "skip"
    RENAME_DTS = "rename-dts"
    REPLACE = "replace"
    MERGE = "merge"


VALID_OPMODES: Set[str] = {mode.value for mode in OpMode}
VALID_FILEMODES: Set[str] = {mode.value for mode in FileMode}
VALID_FLDRMODES: Set[str] = {mode.value for mode in FolderMode}

# Defaults applied under caller-supplied options
DEFAULT_OPTIONS: Dict[str, Any] = {
    "recursive": True,
    "file_mode": FileMode.ABORT.value,
    "fldr_mode": FolderMode.ABORT.value,
}

# camelCase option names accepted as aliases
OPTION_ALIASES: Dict[str, str] = {
    "fileMode": "file_mode",
    "fldrMode": "fldr_mode",
}

# String forms accepted for the recursive option
TRUE_STRINGS: Set[str] = {"true", "yes", "on", "1"}
FALSE_STRINGS: Set[str] = {"false", "no", "off", "0", ""}

# Maximum number of folder levels walked below the top-level folder
MAX_FOLDER_DEPTH: int = 256

# Trailing separators stripped from caller paths
PATH_SEPARATORS: str = "/\\"

# Log file written by the command line entry point
LOG_FILE: str = "fstools.log"

# Environment variables providing command line defaults
ENV_FILE_MODE: str = "FSTOOLS_FILE_MODE"
ENV_FLDR_MODE: str = "FSTOOLS_FLDR_MODE"
