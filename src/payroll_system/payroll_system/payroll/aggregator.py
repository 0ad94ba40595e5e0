"""Monthly payroll report aggregation.

Pure and deterministic: the same input set always yields the same rows in the
same order and the same totals. Money is summed as Decimal so totals never
drift by a cent however many rows are added.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from decimal import Decimal
from typing import Optional

from ..common.money import format_money
from ..salaries.model import SalaryReportRow

ZERO = Decimal("0.00")


@dataclass(frozen=True)
class ReportRow:
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

    def to_dict(self) -> dict:
        return {
            "employeeNumber": self.employee_number,
            "firstName": self.first_name,
            "lastName": self.last_name,
            "position": self.position,
            "departmentName": self.department_name,
            "grossSalary": format_money(self.gross_salary),
            "totalDeduction": format_money(self.total_deduction),
            "netSalary": format_money(self.net_salary),
            "month": self.month,
        }


@dataclass(frozen=True)
class ReportTotals:
    gross_salary: Decimal = ZERO
    total_deduction: Decimal = ZERO
    net_salary: Decimal = ZERO

    def __add__(self, other: "ReportTotals") -> "ReportTotals":
        return ReportTotals(
            gross_salary=self.gross_salary + other.gross_salary,
            total_deduction=self.total_deduction + other.total_deduction,
            net_salary=self.net_salary + other.net_salary,
        )

    @classmethod
    def of(cls, rows: Iterable[ReportRow]) -> "ReportTotals":
        totals = cls()
        for r in rows:
            totals = totals + cls(r.gross_salary, r.total_deduction, r.net_salary)
        return totals

    def to_dict(self) -> dict:
        return {
            "grossSalary": format_money(self.gross_salary),
            "totalDeduction": format_money(self.total_deduction),
            "netSalary": format_money(self.net_salary),
        }


@dataclass(frozen=True)
class MonthlyReport:
    month: str
    rows: tuple[ReportRow, ...]
    totals: ReportTotals

    @property
    def is_empty(self) -> bool:
        return not self.rows

    def to_dict(self) -> dict:
        return {
            "month": self.month,
            "reportData": [r.to_dict() for r in self.rows],
            "totals": self.totals.to_dict(),
        }


def _sort_key(row: ReportRow) -> tuple[str, str, str, int, int]:
    # Several records may share employee and month; ids keep the order total.
    return (row.department_name or "", row.last_name, row.first_name, row.employee_number, row.salary_id)


def build_monthly_report(month: str, records: Iterable[SalaryReportRow]) -> MonthlyReport:
    """Order a month's salary rows and total them.

    Rows belonging to another month are ignored. No records is not an error:
    the report simply has no rows and zero totals.
    """
    rows = [
        ReportRow(
            salary_id=r.salary_id,
            employee_number=r.employee_number,
            first_name=r.first_name,
            last_name=r.last_name,
            position=r.position,
            department_name=r.department_name,
            gross_salary=r.gross_salary,
            total_deduction=r.total_deduction,
            net_salary=r.net_salary,
            month=r.month,
        )
        for r in records
        if r.month == month
    ]
    rows.sort(key=_sort_key)
    return MonthlyReport(month=month, rows=tuple(rows), totals=ReportTotals.of(rows))
