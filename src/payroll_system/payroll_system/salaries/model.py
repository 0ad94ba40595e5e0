from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import Optional


@dataclass(frozen=True)
class SalaryRecord:
    """Domain entity: one salary record of an employee for a month."""

    salary_id: int
    employee_number: int
    gross_salary: Decimal
    total_deduction: Decimal
    net_salary: Decimal
    month: str


@dataclass(frozen=True)
class SalaryInput:
    employee_number: int
    gross_salary: Decimal
    total_deduction: Decimal
    net_salary: Decimal
    month: str


@dataclass(frozen=True)
class SalaryReportRow:
    """Read-model: a salary record joined with employee and department names."""

    salary_id: int
    employee_number: int
    first_name: str
    last_name: str
    position: str
    department_name: Optional[str]
    gross_salary: Decimal
    total_deduction: Decimal
    net_salary: Decimal
    month: str
