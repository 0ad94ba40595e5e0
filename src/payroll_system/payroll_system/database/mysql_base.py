from __future__ import annotations

from contextlib import contextmanager
from typing import Any, Dict, List, NoReturn, Optional

import mysql.connector
from mysql.connector import errorcode

from ..core.enums import ErrorKind
from ..core.exceptions import FieldError, ValidationError
from .connection import DatabaseConnection


@contextmanager
def db_cursor(conn_factory: DatabaseConnection, *, dictionary: bool = True):
    conn = conn_factory.connect()
    try:
        cur = conn.cursor(dictionary=dictionary)
        try:
            yield conn, cur
            conn.commit()
        finally:
            cur.close()
    except Exception:
        conn.rollback()
        raise
    finally:
        conn.close()


def fetchone(cur) -> Optional[Dict[str, Any]]:
    row = cur.fetchone()
    return row if row else None


def fetchall(cur) -> List[Dict[str, Any]]:
    rows = cur.fetchall()
    return list(rows or [])


def translate_integrity_error(
    exc: mysql.connector.IntegrityError,
    *,
    reference_field: Optional[str] = None,
    reference_kind: Optional[ErrorKind] = None,
    reference_value: Any = None,
    key_field: Optional[str] = None,
    key_value: Any = None,
) -> NoReturn:
    """Re-raise a storage constraint violation as a ValidationError.

    Foreign-key rejections map to ``reference_kind`` (UnknownEmployee /
    UnknownDepartment) and duplicate keys to DuplicateKey, so callers see the
    same error whether the pre-check or the database caught it.
    """
    if exc.errno in (errorcode.ER_NO_REFERENCED_ROW_2, errorcode.ER_NO_REFERENCED_ROW) and reference_kind:
        message = "Employee does not exist" if reference_kind == ErrorKind.UNKNOWN_EMPLOYEE else "Department does not exist"
        raise ValidationError.from_errors(
            [FieldError(reference_field or "reference", reference_kind, message, reference_value)]
        ) from exc
    if exc.errno == errorcode.ER_DUP_ENTRY and key_field:
        raise ValidationError.from_errors(
            [FieldError(key_field, ErrorKind.DUPLICATE_KEY, f"{key_field} already exists", key_value)]
        ) from exc
    raise exc
