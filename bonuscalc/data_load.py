"""Employee row sources.

Each source is a zero-argument callable returning
``(employee_id, name, salary, department, performance_rating)`` tuples, which
is all :meth:`bonuscalc.calculator.BonusCalculator.load` needs.
"""

from __future__ import annotations

import re
import sqlite3
from contextlib import closing
from decimal import Decimal
from pathlib import Path
from typing import List, Tuple, Union

import pandas as pd

__all__ = [
    "COLUMNS",
    "SAMPLE_EMPLOYEES",
    "CsvEmployeeSource",
    "SqliteEmployeeSource",
    "sample_source",
]

Row = Tuple[int, str, object, str, object]

COLUMNS = ["employee_id", "name", "salary", "department", "performance_rating"]

SAMPLE_EMPLOYEES: List[Row] = [
    (1, "Alice", Decimal("75000"), "IT", Decimal("4")),
    (2, "Bob", Decimal("65000"), "HR", Decimal("3")),
    (3, "Charlie", Decimal("80000"), "IT", Decimal("5")),
    (4, "Diana", Decimal("90000"), "INVALID_DEPT", Decimal("2")),
    (5, "Edward", Decimal("55000"), "FINANCE", Decimal("4")),
]

_IDENTIFIER = re.compile(r"^[A-Za-z_][A-Za-z0-9_]*$")


def _validate_columns(df: pd.DataFrame, required: List[str], origin: str) -> None:
    """Ensure DataFrame has all required columns."""
    missing = [c for c in required if c not in df.columns]
    if missing:
        raise ValueError(f"Missing columns {missing} in {origin}")


def _rows(df: pd.DataFrame) -> List[Row]:
    return list(df[COLUMNS].itertuples(index=False, name=None))


class CsvEmployeeSource:
    """Read employees from a CSV file with a header row.

    Salary and rating are read as text so they convert to ``Decimal``
    without float rounding.
    """

    def __init__(self, path: Union[str, Path]) -> None:
        self.path = Path(path)

    def __call__(self) -> List[Row]:
        dtype = {
            "employee_id": "int64",
            "name": str,
            "salary": str,
            "department": str,
            "performance_rating": str,
        }
        df = pd.read_csv(self.path, dtype=dtype)
        _validate_columns(df, COLUMNS, str(self.path))
        return _rows(df)

    def __repr__(self) -> str:
        return f"CsvEmployeeSource({str(self.path)!r})"


class SqliteEmployeeSource:
    """Read employees from a table in an existing SQLite database.

    The database is opened read-only; a missing file raises
    ``sqlite3.OperationalError`` instead of creating an empty database.
    """

    def __init__(self, path: Union[str, Path], table: str = "employees") -> None:
        if not _IDENTIFIER.match(table):
            raise ValueError(f"Invalid table name: {table}")
        self.path = Path(path)
        self.table = table

    def __call__(self) -> List[Row]:
        uri = self.path.resolve().as_uri() + "?mode=ro"
        query = f"SELECT {', '.join(COLUMNS)} FROM {self.table} ORDER BY employee_id"
        with closing(sqlite3.connect(uri, uri=True)) as conn:
            df = pd.read_sql_query(query, conn)
        _validate_columns(df, COLUMNS, f"{self.path}:{self.table}")
        return _rows(df)

    def __repr__(self) -> str:
        return f"SqliteEmployeeSource({str(self.path)!r}, table={self.table!r})"


def sample_source() -> List[Row]:
    """Return the built-in five-employee dataset."""
    return list(SAMPLE_EMPLOYEES)
