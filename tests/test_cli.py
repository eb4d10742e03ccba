import subprocess
import sys
from pathlib import Path

from bonuscalc.cli import main


def test_cli_sample_run(tmp_path: Path, capsys) -> None:
    report = tmp_path / "report.txt"
    export = tmp_path / "bonuses.csv"

    code = main(["run", "--sample", "--report", str(report), "--export", str(export)])

    assert code == 0
    out = capsys.readouterr().out.splitlines()
    assert out[0] == "Processing employee: Alice (ID: 1)"
    assert out[-1].startswith("Bonus calculation completed: 4 processed, 1 skipped")
    assert report.read_text().splitlines() == out
    assert export.exists()


def test_cli_unknown_department_exits_nonzero(tmp_path: Path, capsys) -> None:
    csv = tmp_path / "employees.csv"
    csv.write_text(
        "employee_id,name,salary,department,performance_rating\n"
        "1,Alice,75000,IT,4\n"
        "2,Mallory,50000,MARKETING,3\n"
    )

    code = main(["run", "--csv", str(csv)])

    assert code == 1
    captured = capsys.readouterr()
    assert "Error (UnknownDepartment)" in captured.err
    assert "Bonus: $6000.00" in captured.out
    assert "Bonus calculation completed" not in captured.out


def test_cli_missing_csv(tmp_path: Path, capsys) -> None:
    code = main(["run", "--csv", str(tmp_path / "missing.csv")])
    assert code == 1
    assert "Error (LoadError)" in capsys.readouterr().err


def test_module_entry_point() -> None:
    cmd = [sys.executable, "-m", "bonuscalc", "run", "--sample"]
    result = subprocess.run(cmd, capture_output=True, text=True)
    assert result.returncode == 0
    assert "Invalid department for employee Diana" in result.stdout


def test_cli_abort_writes_partial_report(tmp_path: Path, capsys) -> None:
    csv = tmp_path / "employees.csv"
    csv.write_text(
        "employee_id,name,salary,department,performance_rating\n"
        "1,Alice,75000,IT,4\n"
        "2,Mallory,50000,MARKETING,3\n"
    )
    report = tmp_path / "report.txt"

    code = main(["run", "--csv", str(csv), "--report", str(report)])

    assert code == 1
    assert report.read_text().splitlines() == [
        "Processing employee: Alice (ID: 1)",
        "Department: IT, Base Rate: 10%, Performance Multiplier: 0.8, Bonus: $6000.00",
        "Processing employee: Mallory (ID: 2)",
    ]


def test_cli_unwritable_output(tmp_path: Path, capsys) -> None:
    export = tmp_path / "no_such_dir" / "bonuses.csv"

    code = main(["run", "--sample", "--export", str(export)])

    assert code == 1
    assert "Error (" in capsys.readouterr().err
    assert not export.exists()
