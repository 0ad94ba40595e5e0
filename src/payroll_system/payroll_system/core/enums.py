from __future__ import annotations

from enum import Enum


class Role(str, Enum):
    """Single role value stored for application users."""

    ADMIN = "admin"


class Gender(str, Enum):
    MALE = "Male"
    FEMALE = "Female"
    OTHER = "Other"


class ErrorKind(str, Enum):
    """Kinds of validation failure reported back to callers."""

    INVALID_FORMAT = "InvalidFormat"
    OUT_OF_RANGE = "OutOfRange"
    INVALID_AMOUNT = "InvalidAmount"
    INVALID_MONTH = "InvalidMonth"
    DUPLICATE_KEY = "DuplicateKey"
    UNKNOWN_EMPLOYEE = "UnknownEmployee"
    UNKNOWN_DEPARTMENT = "UnknownDepartment"
    NET_SALARY_MISMATCH = "NetSalaryMismatch"
    DEDUCTION_EXCEEDS_GROSS = "DeductionExceedsGross"
