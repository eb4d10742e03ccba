"""Command line interface for year-end bonus calculation.

Example
-------
Run against a CSV export::

    python -m bonuscalc run --csv employees.csv \
        --report bonus_report.txt --export bonuses.csv
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from .calculator import BonusCalculator
from .charts import plot_bonus_by_department
from .data_load import CsvEmployeeSource, SqliteEmployeeSource, sample_source
from .exceptions import BonusError, UnknownDepartment
from .export import StreamSink, to_csv, write_report


def _build_source(args: argparse.Namespace):
    if args.csv:
        return CsvEmployeeSource(args.csv)
    if args.db:
        return SqliteEmployeeSource(args.db, table=args.table)
    return sample_source


def _run(args: argparse.Namespace) -> int:
    """Execute one bonus run and return the exit status."""
    try:
        _execute(args)
    except (BonusError, ValueError, OSError) as exc:
        logging.error("Bonus run aborted: %s", exc)
        print(f"Error ({type(exc).__name__}): {exc}", file=sys.stderr)
        return 1
    return 0


def _execute(args: argparse.Namespace) -> None:
    source = _build_source(args)
    try:
        records, lines, _ = BonusCalculator().run(source, sink=StreamSink(sys.stdout))
    except UnknownDepartment as exc:
        # keep the lines emitted before the abort
        if args.report:
            write_report(exc.lines, Path(args.report))
        raise

    if args.report:
        write_report(lines, Path(args.report))
    if args.export:
        to_csv(records, Path(args.export))
    if args.chart:
        plot_bonus_by_department(records, args.chart)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="bonuscalc", description="Calculate year-end bonuses")
    sub = parser.add_subparsers(dest="command")
    run_p = sub.add_parser("run", help="calculate bonuses for one batch")
    src = run_p.add_mutually_exclusive_group(required=True)
    src.add_argument("--csv", help="employees CSV path")
    src.add_argument("--db", help="SQLite database path")
    src.add_argument("--sample", action="store_true", help="use the built-in sample employees")
    run_p.add_argument("--table", default="employees", help="table name for --db")
    run_p.add_argument("--report", help="write report lines to this file")
    run_p.add_argument("--export", help="write computed bonuses to this CSV")
    run_p.add_argument("--chart", help="save a bonus-by-department chart (PNG)")
    run_p.add_argument("--verbose", action="store_true", help="log every computed bonus")

    args = parser.parse_args(argv)

    if args.command == "run":
        logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO)
        return _run(args)
    parser.print_help()
    return 0


if __name__ == "__main__":
    sys.exit(main())
