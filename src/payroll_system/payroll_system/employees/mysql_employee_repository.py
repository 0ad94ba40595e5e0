from __future__ import annotations

from decimal import Decimal
from typing import Optional, Sequence

import mysql.connector

from ..core.enums import ErrorKind
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone, translate_integrity_error
from .model import Employee, EmployeeInput
from .repository import EmployeeRepository

_SELECT = """
    SELECT e.employee_number, e.first_name, e.last_name, e.position, e.address,
           e.telephone, e.gender, e.hired_date, e.department_code,
           d.department_name, d.gross_salary AS department_gross_salary
    FROM employee e
    LEFT JOIN department d ON d.department_code = e.department_code
"""


def _to_employee(r: dict) -> Employee:
    gross = r.get("department_gross_salary")
    return Employee(
        employee_number=int(r["employee_number"]),
        first_name=r["first_name"],
        last_name=r["last_name"],
        position=r["position"],
        address=r.get("address"),
        telephone=r.get("telephone"),
        gender=r.get("gender"),
        hired_date=r.get("hired_date"),
        department_code=r.get("department_code"),
        department_name=r.get("department_name"),
        department_gross_salary=Decimal(gross) if gross is not None else None,
    )


def _params(data: EmployeeInput) -> tuple:
    return (
        data.first_name,
        data.last_name,
        data.position,
        data.address,
        data.telephone,
        data.gender,
        data.hired_date,
        data.department_code,
    )


class MySQLEmployeeRepository(EmployeeRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_all(self) -> Sequence[Employee]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(_SELECT + " ORDER BY e.last_name, e.first_name")
            return [_to_employee(r) for r in fetchall(cur)]

    def list_numbers(self) -> set[int]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT employee_number FROM employee")
            return {int(r["employee_number"]) for r in fetchall(cur)}

    def get(self, employee_number: int) -> Optional[Employee]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(_SELECT + " WHERE e.employee_number=%s", (int(employee_number),))
            row = fetchone(cur)
            return _to_employee(row) if row else None

    def create(self, data: EmployeeInput) -> int:
        try:
            with db_cursor(self._conn_factory) as (_, cur):
                cur.execute(
                    """
                    INSERT INTO employee
                    (first_name, last_name, position, address, telephone, gender, hired_date, department_code)
                    VALUES(%s,%s,%s,%s,%s,%s,%s,%s)
                    """,
                    _params(data),
                )
                return int(cur.lastrowid)
        except mysql.connector.IntegrityError as exc:
            translate_integrity_error(
                exc,
                reference_field="department_code",
                reference_kind=ErrorKind.UNKNOWN_DEPARTMENT,
                reference_value=data.department_code,
            )

    def update(self, employee_number: int, data: EmployeeInput) -> bool:
        try:
            with db_cursor(self._conn_factory) as (_, cur):
                cur.execute(
                    """
                    UPDATE employee
                    SET first_name=%s, last_name=%s, position=%s, address=%s,
                        telephone=%s, gender=%s, hired_date=%s, department_code=%s
                    WHERE employee_number=%s
                    """,
                    _params(data) + (int(employee_number),),
                )
                if cur.rowcount > 0:
                    return True
                cur.execute("SELECT 1 AS found FROM employee WHERE employee_number=%s", (int(employee_number),))
                return fetchone(cur) is not None
        except mysql.connector.IntegrityError as exc:
            translate_integrity_error(
                exc,
                reference_field="department_code",
                reference_kind=ErrorKind.UNKNOWN_DEPARTMENT,
                reference_value=data.department_code,
            )

    def delete(self, employee_number: int) -> bool:
        # salary.employee_number is ON DELETE CASCADE.
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM employee WHERE employee_number=%s", (int(employee_number),))
            return cur.rowcount > 0
