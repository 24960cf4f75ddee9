"""Resolution of caller options into an immutable options record."""

import time
from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional

from loguru import logger

from fstools.config.settings import (
    DEFAULT_OPTIONS,
    FALSE_STRINGS,
    OPTION_ALIASES,
    TRUE_STRINGS,
    FileMode,
    FolderMode,
    OpMode,
)
from fstools.exceptions import InvalidOptionError
from fstools.models.result import ResultCode


@dataclass(frozen=True)
class CopyOptions:
    """
    Fully resolved configuration for one top-level copy/move call.

    Attributes:
        op_mode: copy or move.
        file_mode: Conflict policy for existing destination files.
        fldr_mode: Conflict policy for existing destination folders.
        recursive: If False, subfolders of a copied folder are left out.
        timestamp: Milliseconds since epoch at call start, shared by every
            rename-dts decision of the call.
    """

    op_mode: OpMode
    file_mode: FileMode = FileMode.ABORT
    fldr_mode: FolderMode = FolderMode.ABORT
    recursive: bool = True
    timestamp: int = 0

    @property
    def is_move(self) -> bool:
        """Check if the source is consumed by the operation."""
        return self.op_mode is OpMode.MOVE


def current_timestamp() -> int:
    """Return the current time in milliseconds since epoch."""
    return int(time.time() * 1000)


def merge_options(overrides: Optional[Mapping[str, Any]] = None) -> Dict[str, Any]:
    """
    Merge caller options over the defaults.

    Camel-case aliases are translated; unknown keys are ignored.

    Args:
        overrides: Caller-supplied options, may be None.

    Returns:
        New dictionary, the defaults are never modified.
    """
    merged = dict(DEFAULT_OPTIONS)
    for key, value in (overrides or {}).items():
        key = OPTION_ALIASES.get(key, key)
        if key not in DEFAULT_OPTIONS:
            logger.warning(f"Ignoring unknown option: {key}")
            continue
        merged[key] = value
    return merged


def parse_flag(value: Any, default: bool) -> bool:
    """
    Interpret a boolean option.

    Strings are matched against true/false words ("false", "no", "0", ...)
    instead of their truthiness; an unrecognized string gives the default.
    Other values use their truth value.

    Args:
        value: Raw option value.
        default: Value used for unrecognized strings.

    Returns:
        The boolean option.
    """
    if isinstance(value, str):
        word = value.strip().lower()
        if word in TRUE_STRINGS:
            return True
        if word in FALSE_STRINGS:
            return False
        logger.warning(f"Unrecognized boolean value {value!r}, using {default}")
        return default
    return bool(value)


def resolve_options(
    op_mode: Any,
    overrides: Optional[Mapping[str, Any]] = None,
    timestamp: Optional[int] = None,
) -> CopyOptions:
    """
    Build the options record for one top-level call.

    Validation order is op mode, file mode, then folder mode; the first
    invalid value is reported.

    Args:
        op_mode: Operation mode tag ("copy" or "move").
        overrides: Caller-supplied options.
        timestamp: Run timestamp; defaults to the current time.

    Returns:
        Frozen CopyOptions.

    Raises:
        InvalidOptionError: If a mode is not in its accepted set.
    """
    merged = merge_options(overrides)
    if timestamp is None:
        timestamp = current_timestamp()

    try:
        op = OpMode(op_mode)
    except ValueError:
        raise InvalidOptionError(ResultCode.BAD_OPMODE, "opmode", op_mode) from None

    try:
        file_mode = FileMode(merged["file_mode"])
    except ValueError:
        raise InvalidOptionError(
            ResultCode.BAD_FILEMODE, "filemode", merged["file_mode"]
        ) from None

    try:
        fldr_mode = FolderMode(merged["fldr_mode"])
    except ValueError:
        raise InvalidOptionError(
            ResultCode.BAD_FLDRMODE, "fldrmode", merged["fldr_mode"]
        ) from None

    return CopyOptions(
        op_mode=op,
        file_mode=file_mode,
        fldr_mode=fldr_mode,
        recursive=parse_flag(merged["recursive"], DEFAULT_OPTIONS["recursive"]),
        timestamp=timestamp,
    )
