"""Path construction and rename-dts naming."""

from pathlib import Path
from typing import Optional, Tuple, Union

from fstools.config.settings import PATH_SEPARATORS


def normalize_path(raw: Union[str, Path]) -> Optional[Path]:
    """
    Build the path value for a caller-supplied path.

    Trailing separators are stripped so that "D:\\foo\\" and "D:\\foo"
    name the same location. A bare root keeps its separator.

    Args:
        raw: Path string or Path from the caller.

    Returns:
        Absolute Path with the user home expanded, or None for an empty
        or blank string, which names no location.
    """
    text = str(raw)
    if not text.strip():
        return None
    stripped = text.rstrip(PATH_SEPARATORS)
    if not stripped and text:
        stripped = text[0]
    return Path(stripped).expanduser().absolute()


def split_extension(name: str) -> Tuple[str, str]:
    """
    Split a file name on its last dot.

    Names without a usable extension (no dot, leading dot, trailing dot)
    return the whole name as stem and an empty extension.

    Args:
        name: File name without directory part.

    Returns:
        Tuple of (stem, extension), extension without the dot.
    """
    stem, dot, ext = name.rpartition(".")
    if not dot or not stem or not ext:
        return name, ""
    return stem, ext


def timestamped_file(path: Path, timestamp: int) -> Path:
    """
    Return the rename-dts sibling of a file: <stem>_<timestamp>.<ext>.

    Args:
        path: Existing destination file.
        timestamp: Run timestamp.

    Returns:
        New path in the same folder.
    """
    stem, ext = split_extension(path.name)
    name = f"{stem}_{timestamp}.{ext}" if ext else f"{stem}_{timestamp}"
    return path.parent / name


def timestamped_folder(path: Path, timestamp: int) -> Path:
    """
    Return the rename-dts sibling of a folder: <name>_<timestamp>.

    Folder names are never split on a dot.
    """
    return path.parent / f"{path.name}_{timestamp}"
