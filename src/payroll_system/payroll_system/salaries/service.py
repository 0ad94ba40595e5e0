from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from decimal import Decimal
from typing import Any, Optional, Sequence

from ..common.money import parse_decimal
from ..common.validators import is_valid_decimal, is_valid_month
from ..core.constants import MONEY_MAX, MONEY_PRECISION
from ..core.enums import ErrorKind
from ..core.exceptions import FieldError, NotFoundError, ValidationError
from ..employees.repository import EmployeeRepository
from ..payroll.calculator.base import NetSalaryCalculator
from ..payroll.calculator.standard_calculator import StandardNetSalaryCalculator
from ..payroll.consistency import validate_salary_record
from .model import SalaryRecord, SalaryReportRow
from .repository import SalaryRepository


@dataclass(frozen=True)
class SalarySuggestion:
    """Pre-filled amounts for a new salary form: department baseline and derived net."""

    employee_number: int
    gross_salary: Decimal
    total_deduction: Decimal
    net_salary: Decimal


class SalaryService:
    def __init__(
        self,
        salaries: SalaryRepository,
        employees: EmployeeRepository,
        *,
        calculator: Optional[NetSalaryCalculator] = None,
    ):
        self._salaries = salaries
        self._employees = employees
        self._calculator = calculator or StandardNetSalaryCalculator()

    def list_salaries(self, *, month: Optional[str] = None) -> Sequence[SalaryReportRow]:
        if month and not is_valid_month(month):
            raise ValidationError.from_errors(
                [FieldError("month", ErrorKind.INVALID_MONTH, "Month must be in YYYY-MM format", month)]
            )
        return self._salaries.list_rows(month=month or None)

    def get_salary(self, salary_id: int) -> SalaryRecord:
        record = self._salaries.get(int(salary_id))
        if not record:
            raise NotFoundError("Salary record not found")
        return record

    def create_salary(self, payload: Mapping[str, Any]) -> SalaryRecord:
        data = validate_salary_record(payload, self._employees.list_numbers()).raise_for_errors()
        salary_id = self._salaries.create(data)
        return SalaryRecord(
            salary_id=salary_id,
            employee_number=data.employee_number,
            gross_salary=data.gross_salary,
            total_deduction=data.total_deduction,
            net_salary=data.net_salary,
            month=data.month,
        )

    def update_salary(self, salary_id: int, payload: Mapping[str, Any]) -> SalaryRecord:
        existing = self.get_salary(salary_id)

        # A record never moves to another employee.
        candidate = {**payload, "employee_number": existing.employee_number}
        data = validate_salary_record(candidate, {existing.employee_number}).raise_for_errors()

        if not self._salaries.update(existing.salary_id, data):
            raise NotFoundError("Salary record not found")
        return SalaryRecord(
            salary_id=existing.salary_id,
            employee_number=existing.employee_number,
            gross_salary=data.gross_salary,
            total_deduction=data.total_deduction,
            net_salary=data.net_salary,
            month=data.month,
        )

    def delete_salary(self, salary_id: int) -> None:
        if not self._salaries.delete(int(salary_id)):
            raise NotFoundError("Salary record not found")

    def suggest(self, *, employee_number: int, total_deduction: Any = None) -> SalarySuggestion:
        employee = self._employees.get(int(employee_number))
        if not employee:
            raise ValidationError.from_errors(
                [FieldError("employee_number", ErrorKind.UNKNOWN_EMPLOYEE, "Employee does not exist", employee_number)]
            )

        deduction = Decimal("0")
        if total_deduction not in (None, ""):
            if not is_valid_decimal(total_deduction, 0, MONEY_MAX, MONEY_PRECISION):
                raise ValidationError.from_errors(
                    [FieldError("total_deduction", ErrorKind.INVALID_AMOUNT, f"total_deduction must be an amount between 0 and {MONEY_MAX}", total_deduction)]
                )
            deduction = parse_decimal(total_deduction)

        gross = employee.department_gross_salary or Decimal("0")
        return SalarySuggestion(
            employee_number=employee.employee_number,
            gross_salary=gross,
            total_deduction=deduction,
            net_salary=self._calculator.net_salary(gross, deduction),
        )
