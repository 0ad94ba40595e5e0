from __future__ import annotations

from decimal import Decimal
from typing import Optional, Protocol, Sequence

from .model import Department, DepartmentInput


class DepartmentRepository(Protocol):
    """Repository interface for Department.

    Note (DIP): services depend on this interface, not on a concrete database.
    """

    def list_all(self) -> Sequence[Department]:
        raise NotImplementedError

    def list_codes(self) -> set[str]:
        raise NotImplementedError

    def get(self, department_code: str) -> Optional[Department]:
        raise NotImplementedError

    def create(self, data: DepartmentInput) -> None:
        raise NotImplementedError

    def update(self, department_code: str, *, department_name: str, gross_salary: Decimal) -> bool:
        raise NotImplementedError

    def delete(self, department_code: str) -> bool:
        raise NotImplementedError
