import mysql.connector
import pytest

from src.payroll_system.payroll_system.core.enums import ErrorKind
from src.payroll_system.payroll_system.core.exceptions import ValidationError
from src.payroll_system.payroll_system.database.bootstrap import _iter_sql_statements, _strip_create_db_and_use
from src.payroll_system.payroll_system.database.mysql_base import translate_integrity_error


def test_foreign_key_violation_becomes_unknown_reference():
    exc = mysql.connector.IntegrityError(msg="Cannot add or update a child row", errno=1452)
    with pytest.raises(ValidationError) as exc_info:
        translate_integrity_error(
            exc,
            reference_field="employee_number",
            reference_kind=ErrorKind.UNKNOWN_EMPLOYEE,
            reference_value=5,
        )
    err = exc_info.value.errors[0]
    assert err.field == "employee_number"
    assert err.kind == ErrorKind.UNKNOWN_EMPLOYEE


def test_duplicate_entry_becomes_duplicate_key():
    exc = mysql.connector.IntegrityError(msg="Duplicate entry 'IT'", errno=1062)
    with pytest.raises(ValidationError) as exc_info:
        translate_integrity_error(exc, key_field="department_code", key_value="IT")
    assert exc_info.value.has_kind(ErrorKind.DUPLICATE_KEY)


def test_other_integrity_errors_propagate():
    exc = mysql.connector.IntegrityError(msg="Check constraint violated", errno=3819)
    with pytest.raises(mysql.connector.IntegrityError):
        translate_integrity_error(exc, key_field="department_code", key_value="IT")


def test_sql_splitter_handles_comments_and_quotes():
    sql = "CREATE TABLE a (x INT); -- trailing note\nINSERT INTO a VALUES ('a;b');\n"
    assert list(_iter_sql_statements(sql)) == [
        "CREATE TABLE a (x INT)",
        "INSERT INTO a VALUES ('a;b')",
    ]


def test_schema_database_statements_are_stripped():
    sql = "CREATE DATABASE IF NOT EXISTS epms;\nUSE epms;\nCREATE TABLE t (id INT);\n"
    assert list(_iter_sql_statements(_strip_create_db_and_use(sql))) == ["CREATE TABLE t (id INT)"]
