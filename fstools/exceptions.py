"""Custom exceptions for fstools."""

from typing import Any


class FsToolsError(Exception):
    """Base class for all fstools errors."""

    pass


class InvalidOptionError(FsToolsError):
    """An option value is outside its closed set of accepted values."""

    def __init__(self, code: int, kind: str, value: Any) -> None:
        self.code = code
        self.kind = kind
        self.value = value
        super().__init__(f"Error, bad {kind} [{value}].")
