from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from decimal import Decimal
from typing import Optional


@dataclass(frozen=True)
class Employee:
    """Domain entity: Employee.

    ``department_name`` and ``department_gross_salary`` are joined from the
    department row and are None when the employee is detached.
    """

    employee_number: int
    first_name: str
    last_name: str
    position: str
    address: Optional[str] = None
    telephone: Optional[str] = None
    gender: Optional[str] = None
    hired_date: Optional[date] = None
    department_code: Optional[str] = None
    department_name: Optional[str] = None
    department_gross_salary: Optional[Decimal] = None


@dataclass(frozen=True)
class EmployeeInput:
    first_name: str
    last_name: str
    position: str
    address: Optional[str] = None
    telephone: Optional[str] = None
    gender: Optional[str] = None
    hired_date: Optional[date] = None
    department_code: Optional[str] = None
