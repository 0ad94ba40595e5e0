from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import SalaryInput, SalaryRecord, SalaryReportRow


class SalaryRepository(Protocol):
    def list_rows(self, *, month: Optional[str] = None) -> Sequence[SalaryReportRow]:
        """Salary records joined with names, newest month first."""
        raise NotImplementedError

    def list_report_rows(self, *, month: str) -> Sequence[SalaryReportRow]:
        raise NotImplementedError

    def get(self, salary_id: int) -> Optional[SalaryRecord]:
        raise NotImplementedError

    def create(self, data: SalaryInput) -> int:
        raise NotImplementedError

    def update(self, salary_id: int, data: SalaryInput) -> bool:
        raise NotImplementedError

    def delete(self, salary_id: int) -> bool:
        raise NotImplementedError
