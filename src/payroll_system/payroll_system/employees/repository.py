from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import Employee, EmployeeInput


class EmployeeRepository(Protocol):
    def list_all(self) -> Sequence[Employee]:
        raise NotImplementedError

    def list_numbers(self) -> set[int]:
        raise NotImplementedError

    def get(self, employee_number: int) -> Optional[Employee]:
        raise NotImplementedError

    def create(self, data: EmployeeInput) -> int:
        raise NotImplementedError

    def update(self, employee_number: int, data: EmployeeInput) -> bool:
        raise NotImplementedError

    def delete(self, employee_number: int) -> bool:
        raise NotImplementedError
