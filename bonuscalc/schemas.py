from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import Optional

__all__ = [
    "EmployeeRecord",
    "ReportLine",
    "RunSummary",
    "STARTED",
    "SKIPPED",
    "COMPUTED",
    "SUMMARY",
]

# ReportLine kinds
STARTED = "started"
SKIPPED = "skipped"
COMPUTED = "computed"
SUMMARY = "summary"


@dataclass
class EmployeeRecord:
    """One employee row; ``calculated_bonus`` is filled in by the calculator."""

    employee_id: int
    name: str
    salary: Decimal
    department: str
    performance_rating: Decimal  # 1-5, not validated
    calculated_bonus: Optional[Decimal] = None


@dataclass(frozen=True)
class ReportLine:
    employee_id: Optional[int]  # None for the summary line
    kind: str
    text: str

    def __str__(self) -> str:
        return self.text


@dataclass(frozen=True)
class RunSummary:
    processed: int
    skipped: int
    total_bonus: Decimal

    @property
    def total(self) -> int:
        return self.processed + self.skipped
