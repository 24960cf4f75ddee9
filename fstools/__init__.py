"""
fstools - Predictable file and folder copy/move.

Wraps the host's file primitives into two operations, copy() and move(),
with:
- Full-path parameters for source and destination
- One result record for every outcome
- Automatic creation of missing parent folders
- Recursive processing (can be disabled)
- Moves across devices by copy then delete
- Explicit handling of existing destinations:
    abort, skip, rename-dts, replace, merge (folders only)
"""

__version__ = "0.1.0"

from fstools.engine import copy, move
from fstools.models import Result, ResultCode

__all__ = ["copy", "move", "Result", "ResultCode"]
