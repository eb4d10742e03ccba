"""
Exception classes for bonuscalc.

Both errors are fatal for a run. A record whose department is the sentinel
is not an error; the calculator skips it and carries on.
"""

from __future__ import annotations

from typing import List, Optional


class BonusError(Exception):
    """Base class for errors that abort a bonus run."""


class LoadError(BonusError):
    """Raised when the employee source cannot be read.

    Covers an unreachable source (missing file, missing table, broken
    database) as well as malformed rows:
        - wrong number of fields
        - values that cannot be converted to numbers
        - negative salary
        - duplicated employee id
    """


class UnknownDepartment(BonusError):
    """Raised when a department has no base rate.

    ``lines`` holds the report lines emitted before the abort.
    """

    def __init__(self, department: str, lines: Optional[List] = None) -> None:
        super().__init__(f"No base rate for department {department!r}")
        self.department = department
        self.lines = list(lines or [])
