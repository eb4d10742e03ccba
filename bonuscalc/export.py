"""Output sinks for bonus reports."""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, TextIO, Union

import pandas as pd

from .schemas import EmployeeRecord, ReportLine

__all__ = ["COLUMNS", "StreamSink", "write_report", "to_csv"]

COLUMNS = [
    "employee_id",
    "name",
    "department",
    "salary",
    "performance_rating",
    "calculated_bonus",
]


class StreamSink:
    """Write each report line to ``stream`` as soon as it is emitted."""

    def __init__(self, stream: TextIO) -> None:
        self.stream = stream

    def __call__(self, line: ReportLine) -> None:
        self.stream.write(f"{line.text}\n")
        self.stream.flush()


def write_report(lines: Iterable[ReportLine], path: Union[str, Path]) -> None:
    """Write report lines to ``path``, one per line, in emission order."""
    with Path(path).open("w", encoding="utf-8") as f:
        for line in lines:
            f.write(f"{line.text}\n")


def to_csv(records: Iterable[EmployeeRecord], path: Union[str, Path]) -> None:
    """Write records to CSV with fixed column order.

    Skipped records keep an empty ``calculated_bonus`` cell.
    """
    rows = [
        {
            "employee_id": r.employee_id,
            "name": r.name,
            "department": r.department,
            "salary": str(r.salary),
            "performance_rating": str(r.performance_rating),
            "calculated_bonus": "" if r.calculated_bonus is None else str(r.calculated_bonus),
        }
        for r in records
    ]
    pd.DataFrame(rows, columns=COLUMNS).to_csv(path, index=False)
