from __future__ import annotations

from typing import Iterable

import matplotlib.pyplot as plt
import pandas as pd

from .schemas import EmployeeRecord

__all__ = ["bonus_by_department", "plot_bonus_by_department"]


def bonus_by_department(records: Iterable[EmployeeRecord]) -> pd.Series:
    """Total computed bonus per department; skipped records are left out."""
    data = [
        (r.department, float(r.calculated_bonus))
        for r in records
        if r.calculated_bonus is not None
    ]
    df = pd.DataFrame(data, columns=["department", "bonus"])
    return df.groupby("department", sort=True)["bonus"].sum()


def plot_bonus_by_department(records: Iterable[EmployeeRecord], output_path: str) -> None:
    """Save a bar chart of total bonus per department."""
    totals = bonus_by_department(records)
    fig, ax = plt.subplots()
    ax.bar(list(totals.index), list(totals.values), label="bonus")
    ax.set_ylabel("Bonus")
    ax.set_title("Year-end bonus by department")
    ax.legend()
    fig.tight_layout()
    fig.savefig(output_path)
    plt.close(fig)
