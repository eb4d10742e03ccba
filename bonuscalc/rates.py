"""Fixed department rates and the bonus formula."""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal, localcontext
from types import MappingProxyType
from typing import Mapping

from .exceptions import UnknownDepartment

__all__ = [
    "DEPARTMENT_RATES",
    "SENTINEL_DEPARTMENT",
    "MAX_RATING",
    "is_sentinel",
    "resolve_base_rate",
    "performance_multiplier",
    "calculate_bonus",
]

DEPARTMENT_RATES: Mapping[str, Decimal] = MappingProxyType(
    {
        "IT": Decimal("0.10"),
        "HR": Decimal("0.08"),
        "FINANCE": Decimal("0.09"),
    }
)

SENTINEL_DEPARTMENT = "INVALID_DEPT"
MAX_RATING = Decimal(5)

_CENTS = Decimal("0.01")


def is_sentinel(department: str) -> bool:
    return department == SENTINEL_DEPARTMENT


def resolve_base_rate(department: str) -> Decimal:
    """Return the base rate for ``department``.

    This is a separate check from :func:`is_sentinel`; any department other
    than IT, HR or FINANCE raises :class:`UnknownDepartment`.
    """
    if department == "IT":
        return DEPARTMENT_RATES["IT"]
    elif department == "HR":
        return DEPARTMENT_RATES["HR"]
    elif department == "FINANCE":
        return DEPARTMENT_RATES["FINANCE"]
    else:
        raise UnknownDepartment(department)


def performance_multiplier(rating: Decimal) -> Decimal:
    return rating / MAX_RATING


def calculate_bonus(salary: Decimal, base_rate: Decimal, rating: Decimal) -> Decimal:
    """Return ``salary * base_rate * rating / 5`` rounded half-up to cents.

    Precision grows with the inputs so large salaries keep their cents.
    """
    with localcontext() as ctx:
        ctx.prec += max(0, salary.adjusted()) + max(0, rating.adjusted())
        raw = salary * base_rate * performance_multiplier(rating)
        return raw.quantize(_CENTS, rounding=ROUND_HALF_UP)
