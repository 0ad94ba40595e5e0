from __future__ import annotations

from decimal import Decimal
from typing import Optional, Sequence

import mysql.connector

from ..core.enums import ErrorKind
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone, translate_integrity_error
from .model import SalaryInput, SalaryRecord, SalaryReportRow
from .repository import SalaryRepository

_SELECT_ROWS = """
    SELECT s.salary_id, s.employee_number, s.gross_salary, s.total_deduction, s.net_salary, s.month,
           e.first_name, e.last_name, e.position, d.department_name
    FROM salary s
    JOIN employee e ON e.employee_number = s.employee_number
    LEFT JOIN department d ON d.department_code = e.department_code
"""


def _to_row(r: dict) -> SalaryReportRow:
    return SalaryReportRow(
        salary_id=int(r["salary_id"]),
        employee_number=int(r["employee_number"]),
        first_name=r["first_name"],
        last_name=r["last_name"],
        position=r["position"],
        department_name=r.get("department_name"),
        gross_salary=Decimal(r["gross_salary"]),
        total_deduction=Decimal(r["total_deduction"]),
        net_salary=Decimal(r["net_salary"]),
        month=r["month"],
    )


class MySQLSalaryRepository(SalaryRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_rows(self, *, month: Optional[str] = None) -> Sequence[SalaryReportRow]:
        sql = _SELECT_ROWS
        params: tuple = ()
        if month:
            sql += " WHERE s.month=%s"
            params = (month,)
        sql += " ORDER BY s.month DESC, e.last_name, e.first_name, s.employee_number, s.salary_id"
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(sql, params)
            return [_to_row(r) for r in fetchall(cur)]

    def list_report_rows(self, *, month: str) -> Sequence[SalaryReportRow]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                _SELECT_ROWS + " WHERE s.month=%s ORDER BY d.department_name, e.last_name, e.first_name, s.employee_number, s.salary_id",
                (month,),
            )
            return [_to_row(r) for r in fetchall(cur)]

    def get(self, salary_id: int) -> Optional[SalaryRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT salary_id, employee_number, gross_salary, total_deduction, net_salary, month
                FROM salary
                WHERE salary_id=%s
                """,
                (int(salary_id),),
            )
            r = fetchone(cur)
            if not r:
                return None
            return SalaryRecord(
                salary_id=int(r["salary_id"]),
                employee_number=int(r["employee_number"]),
                gross_salary=Decimal(r["gross_salary"]),
                total_deduction=Decimal(r["total_deduction"]),
                net_salary=Decimal(r["net_salary"]),
                month=r["month"],
            )

    def create(self, data: SalaryInput) -> int:
        try:
            with db_cursor(self._conn_factory) as (_, cur):
                cur.execute(
                    """
                    INSERT INTO salary(employee_number, gross_salary, total_deduction, net_salary, month)
                    VALUES(%s,%s,%s,%s,%s)
                    """,
                    (data.employee_number, data.gross_salary, data.total_deduction, data.net_salary, data.month),
                )
                return int(cur.lastrowid)
        except mysql.connector.IntegrityError as exc:
            translate_integrity_error(
                exc,
                reference_field="employee_number",
                reference_kind=ErrorKind.UNKNOWN_EMPLOYEE,
                reference_value=data.employee_number,
            )

    def update(self, salary_id: int, data: SalaryInput) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                UPDATE salary
                SET gross_salary=%s, total_deduction=%s, net_salary=%s, month=%s
                WHERE salary_id=%s
                """,
                (data.gross_salary, data.total_deduction, data.net_salary, data.month, int(salary_id)),
            )
            if cur.rowcount > 0:
                return True
            cur.execute("SELECT 1 AS found FROM salary WHERE salary_id=%s", (int(salary_id),))
            return fetchone(cur) is not None

    def delete(self, salary_id: int) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM salary WHERE salary_id=%s", (int(salary_id),))
            return cur.rowcount > 0
