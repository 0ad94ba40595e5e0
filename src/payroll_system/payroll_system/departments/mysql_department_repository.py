from __future__ import annotations

from decimal import Decimal
from typing import Optional, Sequence

import mysql.connector

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone, translate_integrity_error
from .model import Department, DepartmentInput
from .repository import DepartmentRepository


def _to_department(r: dict) -> Department:
    return Department(
        department_code=r["department_code"],
        department_name=r["department_name"],
        gross_salary=Decimal(r["gross_salary"]),
    )


class MySQLDepartmentRepository(DepartmentRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_all(self) -> Sequence[Department]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "SELECT department_code, department_name, gross_salary FROM department ORDER BY department_name"
            )
            return [_to_department(r) for r in fetchall(cur)]

    def list_codes(self) -> set[str]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT department_code FROM department")
            return {r["department_code"] for r in fetchall(cur)}

    def get(self, department_code: str) -> Optional[Department]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT department_code, department_name, gross_salary
                FROM department
                WHERE department_code=%s
                """,
                (department_code,),
            )
            row = fetchone(cur)
            return _to_department(row) if row else None

    def create(self, data: DepartmentInput) -> None:
        try:
            with db_cursor(self._conn_factory) as (_, cur):
                cur.execute(
                    "INSERT INTO department(department_code, department_name, gross_salary) VALUES(%s,%s,%s)",
                    (data.department_code, data.department_name, data.gross_salary),
                )
        except mysql.connector.IntegrityError as exc:
            translate_integrity_error(exc, key_field="department_code", key_value=data.department_code)

    def update(self, department_code: str, *, department_name: str, gross_salary: Decimal) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "UPDATE department SET department_name=%s, gross_salary=%s WHERE department_code=%s",
                (department_name, gross_salary, department_code),
            )
            # MySQL reports 0 affected rows when values are unchanged.
            if cur.rowcount > 0:
                return True
            cur.execute("SELECT 1 AS found FROM department WHERE department_code=%s", (department_code,))
            return fetchone(cur) is not None

    def delete(self, department_code: str) -> bool:
        # employee.department_code is ON DELETE SET NULL: employees are detached, not removed.
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM department WHERE department_code=%s", (department_code,))
            return cur.rowcount > 0
