from __future__ import annotations

from dataclasses import replace
from datetime import datetime
from decimal import Decimal
from typing import Optional

import pytest
from werkzeug.security import generate_password_hash

from src.payroll_system.payroll_system.container import wire_container
from src.payroll_system.payroll_system.core.enums import ErrorKind, Role
from src.payroll_system.payroll_system.core.exceptions import FieldError, RegistrationClosedError, ValidationError
from src.payroll_system.payroll_system.departments.model import Department, DepartmentInput
from src.payroll_system.payroll_system.employees.model import Employee, EmployeeInput
from src.payroll_system.payroll_system.main import create_app
from src.payroll_system.payroll_system.salaries.model import SalaryInput, SalaryRecord, SalaryReportRow
from src.payroll_system.payroll_system.users.model import User
from src.payroll_system.payroll_system.users.service import RegistrationGate


class FakeDatabase:
    """Shared in-memory tables with the same FK behaviour as schema.sql."""

    def __init__(self):
        self.departments: dict[str, Department] = {}
        self.employees: dict[int, Employee] = {}
        self.salaries: dict[int, SalaryRecord] = {}
        self.users: dict[str, User] = {}
        self.next_employee = 1
        self.next_salary = 1
        self.next_user = 1


class InMemoryDepartments:
    def __init__(self, db: FakeDatabase):
        self._db = db

    def list_all(self):
        return sorted(self._db.departments.values(), key=lambda d: d.department_name)

    def list_codes(self):
        return set(self._db.departments)

    def get(self, department_code):
        return self._db.departments.get(department_code)

    def create(self, data: DepartmentInput):
        if data.department_code in self._db.departments:
            raise ValidationError.from_errors(
                [FieldError("department_code", ErrorKind.DUPLICATE_KEY, "department_code already exists", data.department_code)]
            )
        self._db.departments[data.department_code] = Department(
            department_code=data.department_code,
            department_name=data.department_name,
            gross_salary=data.gross_salary,
        )

    def update(self, department_code, *, department_name, gross_salary):
        if department_code not in self._db.departments:
            return False
        self._db.departments[department_code] = Department(department_code, department_name, gross_salary)
        return True

    def delete(self, department_code):
        if self._db.departments.pop(department_code, None) is None:
            return False
        for n, e in list(self._db.employees.items()):
            if e.department_code == department_code:
                self._db.employees[n] = replace(e, department_code=None)
        return True


class InMemoryEmployees:
    def __init__(self, db: FakeDatabase):
        self._db = db

    def _join(self, e: Employee) -> Employee:
        d = self._db.departments.get(e.department_code) if e.department_code else None
        return replace(
            e,
            department_name=d.department_name if d else None,
            department_gross_salary=d.gross_salary if d else None,
        )

    def _check_department(self, code):
        if code is not None and code not in self._db.departments:
            raise ValidationError.from_errors(
                [FieldError("department_code", ErrorKind.UNKNOWN_DEPARTMENT, "Department does not exist", code)]
            )

    def list_all(self):
        rows = [self._join(e) for e in self._db.employees.values()]
        return sorted(rows, key=lambda e: (e.last_name, e.first_name))

    def list_numbers(self):
        return set(self._db.employees)

    def get(self, employee_number):
        e = self._db.employees.get(int(employee_number))
        return self._join(e) if e else None

    def create(self, data: EmployeeInput) -> int:
        self._check_department(data.department_code)
        n = self._db.next_employee
        self._db.next_employee += 1
        self._db.employees[n] = Employee(employee_number=n, **data.__dict__)
        return n

    def update(self, employee_number, data: EmployeeInput) -> bool:
        if employee_number not in self._db.employees:
            return False
        self._check_department(data.department_code)
        self._db.employees[employee_number] = Employee(employee_number=employee_number, **data.__dict__)
        return True

    def delete(self, employee_number) -> bool:
        if self._db.employees.pop(employee_number, None) is None:
            return False
        for sid, s in list(self._db.salaries.items()):
            if s.employee_number == employee_number:
                del self._db.salaries[sid]
        return True


class InMemorySalaries:
    def __init__(self, db: FakeDatabase):
        self._db = db

    def _row(self, s: SalaryRecord) -> SalaryReportRow:
        e = self._db.employees[s.employee_number]
        d = self._db.departments.get(e.department_code) if e.department_code else None
        return SalaryReportRow(
            salary_id=s.salary_id,
            employee_number=s.employee_number,
            first_name=e.first_name,
            last_name=e.last_name,
            position=e.position,
            department_name=d.department_name if d else None,
            gross_salary=s.gross_salary,
            total_deduction=s.total_deduction,
            net_salary=s.net_salary,
            month=s.month,
        )

    def list_rows(self, *, month=None):
        rows = [self._row(s) for s in self._db.salaries.values() if not month or s.month == month]
        rows.sort(key=lambda r: (r.last_name, r.first_name, r.employee_number, r.salary_id))
        rows.sort(key=lambda r: r.month, reverse=True)
        return rows

    def list_report_rows(self, *, month):
        return [self._row(s) for s in self._db.salaries.values() if s.month == month]

    def get(self, salary_id):
        return self._db.salaries.get(int(salary_id))

    def create(self, data: SalaryInput) -> int:
        if data.employee_number not in self._db.employees:
            raise ValidationError.from_errors(
                [FieldError("employee_number", ErrorKind.UNKNOWN_EMPLOYEE, "Employee does not exist", data.employee_number)]
            )
        sid = self._db.next_salary
        self._db.next_salary += 1
        self._db.salaries[sid] = SalaryRecord(salary_id=sid, **data.__dict__)
        return sid

    def update(self, salary_id, data: SalaryInput) -> bool:
        if salary_id not in self._db.salaries:
            return False
        self._db.salaries[salary_id] = SalaryRecord(salary_id=salary_id, **data.__dict__)
        return True

    def delete(self, salary_id) -> bool:
        return self._db.salaries.pop(int(salary_id), None) is not None


class InMemoryUsers:
    def __init__(self, db: FakeDatabase):
        self._db = db

    def get_by_username(self, username) -> Optional[User]:
        return self._db.users.get(username)

    def any_exists(self) -> bool:
        return bool(self._db.users)

    def create_admin(self, *, username, password_hash) -> int:
        if self._db.users:
            raise RegistrationClosedError("Admin already exists. Registration is disabled.")
        uid = self._db.next_user
        self._db.next_user += 1
        self._db.users[username] = User(user_id=uid, username=username, password_hash=password_hash, role=Role.ADMIN)
        return uid


@pytest.fixture
def fixed_now() -> datetime:
    return datetime(2025, 1, 15, 9, 0, 0)


@pytest.fixture
def fake_db() -> FakeDatabase:
    return FakeDatabase()


@pytest.fixture
def repos(fake_db):
    return {
        "users_repo": InMemoryUsers(fake_db),
        "departments_repo": InMemoryDepartments(fake_db),
        "employees_repo": InMemoryEmployees(fake_db),
        "salaries_repo": InMemorySalaries(fake_db),
    }


@pytest.fixture
def container(repos):
    return wire_container(**repos, gate=RegistrationGate())


@pytest.fixture
def app(container):
    return create_app(container, settings_module="config.testing")


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def admin_user(fake_db) -> User:
    user = User(user_id=1, username="admin", password_hash=generate_password_hash("secret123"), role=Role.ADMIN)
    fake_db.users["admin"] = user
    fake_db.next_user = 2
    return user


@pytest.fixture
def auth_client(client, admin_user):
    response = client.post("/api/login", json={"username": "admin", "password": "secret123"})
    assert response.status_code == 200
    return client


@pytest.fixture
def it_department(fake_db) -> Department:
    dept = Department(department_code="IT", department_name="IT Dept", gross_salary=Decimal("50000.00"))
    fake_db.departments["IT"] = dept
    return dept
