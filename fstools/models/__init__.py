"""Data models for copy/move results."""

from fstools.models.result import Result, ResultCode

__all__ = ["Result", "ResultCode"]
