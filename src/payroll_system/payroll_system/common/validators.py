"""Field-level validation rules.

Every ``is_valid_*`` predicate is total: it never raises and only answers
True/False for the raw value it receives (as sent over the wire or read from
storage). Entity checks combine these field by field.
"""

from __future__ import annotations

import re
from datetime import datetime
from typing import Any, Optional

from ..core.constants import INT_MAX, MONTH_MAX_YEAR, MONTH_MIN_YEAR
from ..core.enums import Gender
from ..core.exceptions import ValidationError
from .money import fractional_digits, parse_decimal

_DATE_RE = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2}")
_MONTH_RE = re.compile(r"([0-9]{4})-([0-9]{2})")
_DEPARTMENT_CODE_RE = re.compile(r"[A-Za-z0-9_]{2,10}")
_PHONE_RE = re.compile(r"[0-9\s\-()+]+")

GENDERS = frozenset(g.value for g in Gender)


def is_valid_string(value: Any, min_len: int = 1, max_len: int = 255) -> bool:
    if not isinstance(value, str):
        return False
    return min_len <= len(value.strip()) <= max_len


def is_valid_decimal(
    value: Any,
    min_value: Optional[Any] = 0,
    max_value: Optional[Any] = None,
    precision: int = 2,
) -> bool:
    d = parse_decimal(value)
    if d is None:
        return False
    lo = parse_decimal(min_value) if min_value is not None else None
    hi = parse_decimal(max_value) if max_value is not None else None
    if lo is not None and d < lo:
        return False
    if hi is not None and d > hi:
        return False
    return fractional_digits(d) <= precision


def is_valid_integer(value: Any, min_value: Optional[int] = None, max_value: Optional[int] = None) -> bool:
    d = parse_decimal(value)
    if d is None or fractional_digits(d) > 0:
        return False
    if min_value is not None and d < min_value:
        return False
    if max_value is not None and d > max_value:
        return False
    return True


def is_valid_date(value: Any) -> bool:
    if not isinstance(value, str) or not _DATE_RE.fullmatch(value):
        return False
    try:
        parsed = datetime.strptime(value, "%Y-%m-%d").date()
    except ValueError:
        return False
    return parsed.strftime("%Y-%m-%d") == value


def is_valid_month(value: Any) -> bool:
    if not isinstance(value, str):
        return False
    m = _MONTH_RE.fullmatch(value)
    if not m:
        return False
    year, month = int(m.group(1)), int(m.group(2))
    return MONTH_MIN_YEAR <= year <= MONTH_MAX_YEAR and 1 <= month <= 12


def is_valid_department_code(value: Any) -> bool:
    return isinstance(value, str) and bool(_DEPARTMENT_CODE_RE.fullmatch(value))


def is_valid_gender(value: Any) -> bool:
    return isinstance(value, str) and value in GENDERS


def is_valid_phone(value: Any) -> bool:
    if not isinstance(value, str) or not _PHONE_RE.fullmatch(value):
        return False
    return len(value.strip()) >= 7


def to_int(value: Any, min_value: int = -INT_MAX, max_value: int = INT_MAX) -> Optional[int]:
    """Integer value of ``value`` when ``is_valid_integer`` accepts it within bounds."""
    if not is_valid_integer(value, min_value, max_value):
        return None
    return int(parse_decimal(value))


def require_non_empty(value: str, field_name: str) -> str:
    if not value or not value.strip():
        raise ValidationError(f"{field_name} is required")
    return value.strip()


def require_min_length(value: str, field_name: str, min_len: int) -> str:
    if value is None or len(value) < min_len:
        raise ValidationError(f"{field_name} must be at least {min_len} characters")
    return value
