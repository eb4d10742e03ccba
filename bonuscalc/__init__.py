"""Year-end bonus calculation package."""

from .calculator import BonusCalculator
from .exceptions import BonusError, LoadError, UnknownDepartment
from .schemas import EmployeeRecord, ReportLine, RunSummary

__version__ = "0.1.0"
__all__ = [
    "BonusCalculator",
    "BonusError",
    "LoadError",
    "UnknownDepartment",
    "EmployeeRecord",
    "ReportLine",
    "RunSummary",
]
