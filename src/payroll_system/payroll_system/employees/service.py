from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Sequence

from ..core.exceptions import NotFoundError
from ..departments.repository import DepartmentRepository
from ..payroll.consistency import validate_employee
from .model import Employee
from .repository import EmployeeRepository


class EmployeeService:
    """Use case: manage employees.

    Department references are checked against the departments that exist at
    the time of the request; the foreign key catches anything deleted since.
    """

    def __init__(self, employees: EmployeeRepository, departments: DepartmentRepository):
        self._employees = employees
        self._departments = departments

    def list_employees(self) -> Sequence[Employee]:
        return self._employees.list_all()

    def get_employee(self, employee_number: int) -> Employee:
        employee = self._employees.get(int(employee_number))
        if not employee:
            raise NotFoundError("Employee not found")
        return employee

    def create_employee(self, payload: Mapping[str, Any]) -> Employee:
        data = validate_employee(payload, self._departments.list_codes()).raise_for_errors()
        employee_number = self._employees.create(data)
        return self.get_employee(employee_number)

    def update_employee(self, employee_number: int, payload: Mapping[str, Any]) -> Employee:
        self.get_employee(employee_number)
        data = validate_employee(payload, self._departments.list_codes()).raise_for_errors()
        if not self._employees.update(int(employee_number), data):
            raise NotFoundError("Employee not found")
        return self.get_employee(employee_number)

    def delete_employee(self, employee_number: int) -> None:
        if not self._employees.delete(int(employee_number)):
            raise NotFoundError("Employee not found")
