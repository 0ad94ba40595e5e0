from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Sequence

from ..core.exceptions import NotFoundError
from ..payroll.consistency import validate_department
from .model import Department
from .repository import DepartmentRepository


class DepartmentService:
    """Use case: manage departments."""

    def __init__(self, departments: DepartmentRepository):
        self._departments = departments

    def list_departments(self) -> Sequence[Department]:
        return self._departments.list_all()

    def get_department(self, department_code: str) -> Department:
        department = self._departments.get(department_code)
        if not department:
            raise NotFoundError("Department not found")
        return department

    def create_department(self, payload: Mapping[str, Any]) -> Department:
        data = validate_department(payload, self._departments.list_codes()).raise_for_errors()
        self._departments.create(data)
        return Department(
            department_code=data.department_code,
            department_name=data.department_name,
            gross_salary=data.gross_salary,
        )

    def update_department(self, department_code: str, payload: Mapping[str, Any]) -> Department:
        self.get_department(department_code)

        # The code is the key and cannot change; only its own code is excluded from the duplicate check.
        candidate = {**payload, "department_code": department_code}
        others = self._departments.list_codes() - {department_code}
        data = validate_department(candidate, others).raise_for_errors()

        if not self._departments.update(
            department_code, department_name=data.department_name, gross_salary=data.gross_salary
        ):
            raise NotFoundError("Department not found")
        return Department(
            department_code=department_code,
            department_name=data.department_name,
            gross_salary=data.gross_salary,
        )

    def delete_department(self, department_code: str) -> None:
        if not self._departments.delete(department_code):
            raise NotFoundError("Department not found")
