from __future__ import annotations

from dataclasses import dataclass

from .database.connection import DBConfig, DatabaseConnection
from .departments.mysql_department_repository import MySQLDepartmentRepository
from .departments.repository import DepartmentRepository
from .departments.service import DepartmentService
from .employees.mysql_employee_repository import MySQLEmployeeRepository
from .employees.repository import EmployeeRepository
from .employees.service import EmployeeService
from .payroll.service import PayrollReportService
from .salaries.mysql_salary_repository import MySQLSalaryRepository
from .salaries.repository import SalaryRepository
from .salaries.service import SalaryService
from .users.mysql_user_repository import MySQLUserRepository
from .users.repository import UserRepository
from .users.service import AuthService, RegistrationGate, RegistrationService


@dataclass(frozen=True)
class Container:
    users_repo: UserRepository
    departments_repo: DepartmentRepository
    employees_repo: EmployeeRepository
    salaries_repo: SalaryRepository

    auth_service: AuthService
    registration_service: RegistrationService
    department_service: DepartmentService
    employee_service: EmployeeService
    salary_service: SalaryService
    payroll_report_service: PayrollReportService


def wire_container(
    *,
    users_repo: UserRepository,
    departments_repo: DepartmentRepository,
    employees_repo: EmployeeRepository,
    salaries_repo: SalaryRepository,
    gate: RegistrationGate | None = None,
) -> Container:
    return Container(
        users_repo=users_repo,
        departments_repo=departments_repo,
        employees_repo=employees_repo,
        salaries_repo=salaries_repo,
        auth_service=AuthService(users_repo),
        registration_service=RegistrationService(users_repo, gate or RegistrationGate()),
        department_service=DepartmentService(departments_repo),
        employee_service=EmployeeService(employees_repo, departments_repo),
        salary_service=SalaryService(salaries_repo, employees_repo),
        payroll_report_service=PayrollReportService(salaries_repo),
    )


def build_container(*, db_config: dict) -> Container:
    conn = DatabaseConnection.get_instance(DBConfig.from_dict(db_config))
    return wire_container(
        users_repo=MySQLUserRepository(conn),
        departments_repo=MySQLDepartmentRepository(conn),
        employees_repo=MySQLEmployeeRepository(conn),
        salaries_repo=MySQLSalaryRepository(conn),
    )
