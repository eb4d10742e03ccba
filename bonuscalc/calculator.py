"""Year-end bonus batch calculation."""

from __future__ import annotations

import logging
import sqlite3
from decimal import Decimal, InvalidOperation
from operator import attrgetter
from typing import Callable, Iterable, List, Optional, Sequence, Tuple

import pandas as pd

from .exceptions import LoadError, UnknownDepartment
from .monitor import Timer
from .rates import (
    calculate_bonus,
    is_sentinel,
    performance_multiplier,
    resolve_base_rate,
)
from .schemas import (
    COMPUTED,
    SKIPPED,
    STARTED,
    SUMMARY,
    EmployeeRecord,
    ReportLine,
    RunSummary,
)

__all__ = ["BonusCalculator", "Source", "Sink"]

Source = Callable[[], Iterable[tuple]]
Sink = Callable[[ReportLine], None]

_SOURCE_ERRORS = (
    OSError,
    TypeError,
    ValueError,
    sqlite3.Error,
    pd.errors.DatabaseError,
)


def _to_decimal(value: object, field: str) -> Decimal:
    try:
        number = Decimal(str(value).strip())
    except InvalidOperation:
        raise ValueError(f"{field} is not a number: {value!r}") from None
    if not number.is_finite():
        raise ValueError(f"{field} is not a number: {value!r}")
    return number


def _to_int(value: object, field: str) -> int:
    if isinstance(value, bool):
        raise ValueError(f"{field} is not an integer: {value!r}")
    if isinstance(value, str):
        return int(value.strip())
    try:
        number = int(value)
    except OverflowError:
        raise ValueError(f"{field} is not an integer: {value!r}") from None
    if number != value:
        raise ValueError(f"{field} is not an integer: {value!r}")
    return number


def _to_text(value: object, field: str) -> str:
    if not isinstance(value, str) or not value.strip():
        raise ValueError(f"{field} is missing")
    return value.strip()


def _to_record(row: tuple) -> EmployeeRecord:
    employee_id, name, salary, department, rating = row
    record = EmployeeRecord(
        employee_id=_to_int(employee_id, "employee_id"),
        name=_to_text(name, "name"),
        salary=_to_decimal(salary, "salary"),
        department=_to_text(department, "department"),
        performance_rating=_to_decimal(rating, "performance_rating"),
    )
    if record.salary < 0:
        raise ValueError(f"salary is negative: {record.salary}")
    return record


def _percent(rate: Decimal) -> str:
    return f"{(rate * 100).normalize():f}%"


class BonusCalculator:
    """Compute bonuses for a batch of employees.

    A calculator holds no state between runs; every call to :meth:`run`
    loads fresh records from the source.
    """

    def load(self, source: Source) -> List[EmployeeRecord]:
        """Load every row from ``source`` ordered by employee id.

        Raises :class:`LoadError` if the source cannot be read or a row is
        malformed.
        """
        logging.info("Loading employees from %r", source)
        try:
            rows = list(source())
        except _SOURCE_ERRORS as exc:
            raise LoadError(f"Cannot read employee source: {exc}") from exc

        records: List[EmployeeRecord] = []
        seen = set()
        for position, row in enumerate(rows, start=1):
            try:
                record = _to_record(tuple(row))
            except (TypeError, ValueError) as exc:
                raise LoadError(f"Malformed employee row {position}: {exc}") from exc
            if record.employee_id in seen:
                raise LoadError(f"Duplicate employee id {record.employee_id}")
            seen.add(record.employee_id)
            records.append(record)

        records.sort(key=attrgetter("employee_id"))
        logging.info("Loaded %d employees", len(records))
        return records

    def process_all(
        self,
        records: Sequence[EmployeeRecord],
        sink: Optional[Sink] = None,
    ) -> Tuple[List[ReportLine], RunSummary]:
        """Compute bonuses for ``records`` in order.

        Every emitted line is appended to the returned list and, when given,
        passed to ``sink`` straight away. A sentinel department skips the
        record; any other unknown department raises
        :class:`UnknownDepartment` with the lines emitted so far.
        """
        lines: List[ReportLine] = []

        def emit(employee_id: Optional[int], kind: str, text: str) -> None:
            line = ReportLine(employee_id, kind, text)
            lines.append(line)
            if sink is not None:
                sink(line)

        processed = 0
        skipped = 0
        total = Decimal("0.00")
        for record in records:
            emp = record.employee_id
            emit(emp, STARTED, f"Processing employee: {record.name} (ID: {emp})")

            if is_sentinel(record.department):
                logging.warning("Skipping employee %s: invalid department", emp)
                emit(
                    emp,
                    SKIPPED,
                    f"Invalid department for employee {record.name}"
                    " - skipping bonus calculation",
                )
                skipped += 1
                continue

            try:
                base_rate = resolve_base_rate(record.department)
            except UnknownDepartment as exc:
                logging.error("Aborting run at employee %s: %s", emp, exc)
                raise UnknownDepartment(exc.department, lines) from None

            multiplier = performance_multiplier(record.performance_rating)
            record.calculated_bonus = calculate_bonus(
                record.salary, base_rate, record.performance_rating
            )
            logging.debug("Employee %s bonus %s", emp, record.calculated_bonus)
            emit(
                emp,
                COMPUTED,
                f"Department: {record.department}, Base Rate: {_percent(base_rate)}, "
                f"Performance Multiplier: {multiplier.normalize():f}, "
                f"Bonus: ${record.calculated_bonus}",
            )
            processed += 1
            total += record.calculated_bonus

        summary = RunSummary(processed=processed, skipped=skipped, total_bonus=total)
        emit(
            None,
            SUMMARY,
            f"Bonus calculation completed: {processed} processed, "
            f"{skipped} skipped, total bonus ${total}",
        )
        logging.info("Run finished: %d processed, %d skipped", processed, skipped)
        return lines, summary

    def run(
        self,
        source: Source,
        sink: Optional[Sink] = None,
    ) -> Tuple[List[EmployeeRecord], List[ReportLine], RunSummary]:
        """Load ``source`` and process it; returns records, lines and summary."""
        with Timer("bonus run"):
            records = self.load(source)
            lines, summary = self.process_all(records, sink)
        return records, lines, summary
