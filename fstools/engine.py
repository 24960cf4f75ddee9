"""Dispatcher and public copy/move entry points."""

from pathlib import Path
from typing import Any, Mapping, Optional, Union

from loguru import logger

from fstools.config.options import resolve_options
from fstools.config.settings import OpMode
from fstools.exceptions import InvalidOptionError
from fstools.filesystem import (
    FileSystem,
    LocalFileSystem,
    normalize_path,
    resolve_file,
    resolve_folder,
)
from fstools.models.result import Result, ResultCode

PathLike = Union[str, Path]


def resolve(
    src_full_path: PathLike,
    dst_full_path: PathLike,
    op_mode: Any,
    options: Optional[Mapping[str, Any]] = None,
    fs: Optional[FileSystem] = None,
) -> Result:
    """
    Validate a copy/move request and route it to the file or folder engine.

    Nothing on disk is touched until the request is fully validated.

    Args:
        src_full_path: Full path of the source file or folder.
        dst_full_path: Full path of the destination.
        op_mode: "copy" or "move".
        options: Caller options (file_mode, fldr_mode, recursive).
        fs: Host filesystem, defaults to the local one.

    Returns:
        Result of the operation.
    """
    if fs is None:
        fs = LocalFileSystem()
    src = normalize_path(src_full_path)
    dst = normalize_path(dst_full_path)

    try:
        resolved = resolve_options(op_mode, options)
    except InvalidOptionError as e:
        logger.error(str(e))
        return Result(ResultCode(e.code), str(e), src, dst)

    if src is None or not fs.exists(src):
        logger.warning(f"Source not found: {src_full_path!r}")
        return Result(
            ResultCode.SRC_NOTFOUND,
            f"Error, src [{src if src is not None else src_full_path}] not found.",
            src, dst,
        )

    if dst is None:
        logger.error(f"Destination is empty: {dst_full_path!r}")
        return Result(
            ResultCode.UNKNOWN,
            f"Error, dst [{dst_full_path}] names no location.",
            src, dst,
        )

    logger.debug(
        f"{resolved.op_mode.value} {src} -> {dst} "
        f"(file_mode={resolved.file_mode.value}, "
        f"fldr_mode={resolved.fldr_mode.value}, recursive={resolved.recursive})"
    )

    if fs.is_file(src):
        return resolve_file(src, dst, resolved, fs)
    if fs.is_dir(src):
        return resolve_folder(src, dst, resolved, fs)

    logger.error(f"Source is neither a file nor a folder: {src}")
    return Result(
        ResultCode.UNKNOWN,
        f"Processing src [{src}] failed, neither file nor folder.",
        src, dst,
    )


def copy(
    src_full_path: PathLike,
    dst_full_path: PathLike,
    options: Optional[Mapping[str, Any]] = None,
    fs: Optional[FileSystem] = None,
) -> Result:
    """
    Copy a file or folder.

    Args:
        src_full_path: Full path of the source file or folder.
        dst_full_path: Full path of the destination file or folder.
        options: Optional mapping with
            file_mode: abort (default), skip, rename-dts, replace.
            fldr_mode: abort (default), skip, rename-dts, replace, merge.
            recursive: process subfolders (default True).
        fs: Host filesystem, defaults to the local one.

    Returns:
        Result with success, ret_code, message, src_path and dst_path.

    Example:
        result = copy("/data/foo", "/data/bar",
                      {"file_mode": "replace", "fldr_mode": "merge"})
    """
    return resolve(src_full_path, dst_full_path, OpMode.COPY, options, fs)


def move(
    src_full_path: PathLike,
    dst_full_path: PathLike,
    options: Optional[Mapping[str, Any]] = None,
    fs: Optional[FileSystem] = None,
) -> Result:
    """
    Move a file or folder.

    Same parameters and result as copy(). Folders are renamed in one step
    when possible and copied then deleted otherwise (other device, merge).
    """
    return resolve(src_full_path, dst_full_path, OpMode.MOVE, options, fs)
