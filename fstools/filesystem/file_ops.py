"""File engine: copy or move one file under the file conflict policy."""

from pathlib import Path

from loguru import logger

from fstools.config.options import CopyOptions
from fstools.config.settings import FileMode
from fstools.filesystem.host import FileSystem, OpResult
from fstools.filesystem.paths import timestamped_file
from fstools.models.result import Result, ResultCode


def resolve_file(src: Path, dst: Path, options: CopyOptions, fs: FileSystem) -> Result:
    """
    Copy or move a single file to dst.

    The conflict policy is applied only when dst exists. The returned
    destination is the one actually written, which differs from dst after a
    rename-dts decision.

    Args:
        src: Existing source file.
        dst: Requested destination file path.
        options: Resolved options of the current call.
        fs: Host filesystem.

    Returns:
        Result of the operation.
    """
    if src == dst:
        return Result(
            ResultCode.DST_EXISTS,
            f"Error, dst-file [{dst}] is the src-file.",
            src, dst,
        )

    if fs.exists(dst):
        mode = options.file_mode
        logger.debug(f"dst-file exists, mode {mode.value}: {dst}")

        if mode is FileMode.ABORT:
            return Result(
                ResultCode.DST_EXISTS,
                f"Error, dst-file [{dst}] already exists.",
                src, dst,
            )

        if mode is FileMode.SKIP:
            return Result.ok(
                src, dst, f"Info, dst-file [{dst}] already exists, skipped."
            )

        if mode is FileMode.RENAME_DTS:
            dst = timestamped_file(dst, options.timestamp)
            logger.debug(f"dst-file renamed to: {dst}")

        elif mode is FileMode.REPLACE:
            deleted = fs.delete(dst)
            if fs.exists(dst):
                logger.warning(f"Cannot replace {dst}: {deleted.error}")
                return Result(
                    ResultCode.DST_REPLACE_FAILED,
                    f"Error, replacing dst-file [{dst}] failed.",
                    src, dst,
                )

    try:
        if options.is_move:
            outcome = fs.rename(src, dst)
            if not outcome.ok:
                logger.debug(f"Rename not possible ({outcome.error}), copying: {src}")
                return _move_by_copy(src, dst, fs)
        else:
            outcome = fs.copy_file(src, dst.parent, dst.name, overwrite=False)
    except Exception as e:
        outcome = OpResult.failure(str(e))

    if not outcome.ok:
        return _unknown(src, dst, outcome)

    logger.info(f"File {options.op_mode.value}: {src} -> {dst}")
    return Result.ok(src, dst)


def _move_by_copy(src: Path, dst: Path, fs: FileSystem) -> Result:
    """
    Move a file that cannot be renamed (other device) by copy then delete.

    A source that cannot be removed once the copy is complete does not
    fail the move.
    """
    outcome = fs.copy_file(src, dst.parent, dst.name, overwrite=False)
    if not outcome.ok:
        return _unknown(src, dst, outcome)

    fs.delete(src)
    if fs.exists(src):
        logger.warning(f"Source file could not be removed: {src}")
        return Result.ok(src, dst, f"ok, src-file [{src}] could not be removed.")

    logger.info(f"File move (copy+delete): {src} -> {dst}")
    return Result.ok(src, dst)


def _unknown(src: Path, dst: Path, outcome: OpResult) -> Result:
    logger.error(f"Error processing {src}: {outcome.error}")
    return Result(
        ResultCode.UNKNOWN,
        f"Processing src-file [{src}] failed, reason unknown.",
        src, dst,
    )
