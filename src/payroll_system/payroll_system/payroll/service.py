from __future__ import annotations

from ..common.validators import is_valid_month
from ..core.enums import ErrorKind
from ..core.exceptions import FieldError, ValidationError
from ..salaries.repository import SalaryRepository
from .aggregator import MonthlyReport, build_monthly_report


class PayrollReportService:
    """Use case: monthly payroll report over persisted salary records."""

    def __init__(self, salaries: SalaryRepository):
        self._salaries = salaries

    def build_monthly_report(self, month: str) -> MonthlyReport:
        if not is_valid_month(month):
            raise ValidationError.from_errors(
                [FieldError("month", ErrorKind.INVALID_MONTH, "Month must be in YYYY-MM format", month)]
            )
        rows = self._salaries.list_report_rows(month=month)
        return build_monthly_report(month, rows)
