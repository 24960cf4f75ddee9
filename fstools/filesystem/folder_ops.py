"""Folder engine: copy, move or merge a folder tree.

A move is first attempted as one atomic rename of the whole folder. When
that is not possible (other device, or an existing destination that is
merged into) the folder is copied child by child and the emptied source
is removed afterwards.
"""

from pathlib import Path

from loguru import logger

from fstools.config.options import CopyOptions
from fstools.config.settings import MAX_FOLDER_DEPTH, FolderMode
from fstools.filesystem.file_ops import resolve_file
from fstools.filesystem.host import FileSystem
from fstools.filesystem.paths import timestamped_folder
from fstools.models.result import Result, ResultCode


def resolve_folder(
    src: Path,
    dst: Path,
    options: CopyOptions,
    fs: FileSystem,
    depth: int = 0,
) -> Result:
    """
    Copy or move the folder src to dst.

    Children are processed in directory listing order and the first
    failing result is returned unchanged; remaining siblings are left
    untouched.

    Args:
        src: Existing source folder.
        dst: Requested destination folder path.
        options: Resolved options of the current call.
        fs: Host filesystem.
        depth: Folder level below the top-level call.

    Returns:
        Result of the operation.
    """
    if depth > MAX_FOLDER_DEPTH:
        logger.error(f"Maximum folder depth {MAX_FOLDER_DEPTH} exceeded at {src}")
        return Result(
            ResultCode.UNKNOWN,
            f"Processing src-folder [{src}] failed, "
            f"maximum depth {MAX_FOLDER_DEPTH} exceeded.",
            src, dst,
        )

    if src == dst:
        return Result(
            ResultCode.DST_EXISTS,
            f"Error, dst-folder [{dst}] is the src-folder.",
            src, dst,
        )

    if fs.exists(dst):
        mode = options.fldr_mode
        logger.debug(f"dst-folder exists, mode {mode.value}: {dst}")

        if mode is FolderMode.ABORT:
            return Result(
                ResultCode.DST_EXISTS,
                f"Error, dst-folder [{dst}] already exists.",
                src, dst,
            )

        if mode is FolderMode.SKIP:
            return Result.ok(
                src, dst, f"Info, dst-folder [{dst}] already exists, skipped."
            )

        if mode is FolderMode.RENAME_DTS:
            dst = timestamped_folder(dst, options.timestamp)
            logger.debug(f"dst-folder renamed to: {dst}")

        elif mode is FolderMode.REPLACE:
            if dst in src.parents:
                logger.warning(f"Cannot replace {dst}: it contains {src}")
                return Result(
                    ResultCode.DST_REPLACE_FAILED,
                    f"Error, dst-folder [{dst}] del-replacing failed.",
                    src, dst,
                )
            deleted = fs.delete_recursive(dst)
            if fs.exists(dst):
                logger.warning(f"Cannot replace {dst}: {deleted.error}")
                return Result(
                    ResultCode.DST_REPLACE_FAILED,
                    f"Error, dst-folder [{dst}] del-replacing failed.",
                    src, dst,
                )

    if options.is_move:
        if _move_by_rename(src, dst, fs):
            logger.info(f"Folder renamed: {src} -> {dst}")
            return Result.ok(src, dst)
        logger.debug(f"Rename not possible, copying then deleting: {src}")

    fs.mkdirs(dst)
    if not fs.exists(dst):
        return Result(
            ResultCode.DST_MKDIR_FAILED,
            f"Error, dst-folder [{dst}] could not be created.",
            src, dst,
        )

    children = fs.children(src)
    if children is None:
        logger.error(f"Cannot list source folder: {src}")
        return Result(
            ResultCode.UNKNOWN,
            f"Processing src-folder [{src}] failed, reason unknown.",
            src, dst,
        )

    for child in children:
        if fs.is_file(child):
            result = resolve_file(child, dst / child.name, options, fs)
        elif fs.is_dir(child):
            if not options.recursive:
                logger.debug(f"Non-recursive, skipping folder: {child}")
                continue
            result = resolve_folder(
                src / child.name, dst / child.name, options, fs, depth + 1
            )
        else:
            continue

        if not result.success:
            return result

    if options.is_move:
        fs.delete(src)
        if fs.exists(src):
            # Destination is complete, the move still counts as done
            logger.warning(f"Source folder could not be removed: {src}")
            return Result.ok(
                src, dst, f"ok, src-folder [{src}] could not be removed."
            )

    logger.info(f"Folder {options.op_mode.value}: {src} -> {dst}")
    return Result.ok(src, dst)


def _move_by_rename(src: Path, dst: Path, fs: FileSystem) -> bool:
    """
    Try to move the whole folder with one atomic rename.

    Returns:
        True if the rename happened and src is gone while dst exists.
    """
    outcome = fs.rename(src, dst)
    if not outcome.ok:
        logger.debug(f"Folder rename failed: {outcome.error}")
        return False
    return not fs.exists(src) and fs.exists(dst)
