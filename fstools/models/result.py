"""Result record returned by every copy/move operation."""

from dataclasses import dataclass
from enum import IntEnum
from pathlib import Path
from typing import Optional


class ResultCode(IntEnum):
    """
    Closed set of outcome codes.

    Values are distinct bits so that callers may collect them in a mask.
    """
    SUCCESS = 0
    BAD_OPMODE = 2
    BAD_FILEMODE = 4
    BAD_FLDRMODE = 8
    SRC_NOTFOUND = 16
    DST_EXISTS = 32
    DST_REPLACE_FAILED = 64
    DST_MKDIR_FAILED = 128
    UNKNOWN = 256


@dataclass(frozen=True)
class Result:
    """
    Outcome of a copy/move operation at any recursion depth.

    Attributes:
        ret_code: Outcome classification.
        message: Human-readable message naming the offending path.
        src_path: Resolved source path, None for an empty source string.
        dst_path: Destination actually used (may differ from the requested
            one after a rename-dts decision), None for an empty string.
    """

    ret_code: ResultCode
    message: str
    src_path: Optional[Path]
    dst_path: Optional[Path]

    @property
    def success(self) -> bool:
        """True iff the result code is SUCCESS."""
        return self.ret_code == ResultCode.SUCCESS

    @classmethod
    def ok(cls, src_path: Path, dst_path: Path, message: str = "ok") -> "Result":
        """Build a success result."""
        return cls(ResultCode.SUCCESS, message, src_path, dst_path)

    def __str__(self) -> str:
        return f"[{self.ret_code.name}] {self.message}"
