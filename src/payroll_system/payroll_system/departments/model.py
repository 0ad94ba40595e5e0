from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal


@dataclass(frozen=True)
class Department:
    """Domain entity: Department, keyed by its short code."""

    department_code: str
    department_name: str
    gross_salary: Decimal


@dataclass(frozen=True)
class DepartmentInput:
    """Validated, normalized department payload ready to persist."""

    department_code: str
    department_name: str
    gross_salary: Decimal
