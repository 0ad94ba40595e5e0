"""Cross-field and referential consistency checks for payroll entities.

Each ``validate_*`` function takes a raw candidate mapping (snake_case keys,
values as received from the transport layer) plus the identifiers that
currently exist in storage, and returns a :class:`ValidationResult`. Nothing
here touches storage or logs; callers decide what to do with the result.
"""

from __future__ import annotations

from collections.abc import Collection, Mapping
from dataclasses import dataclass, field
from decimal import Decimal
from typing import Any, Generic, Optional, TypeVar

from ..common.datetime_utils import parse_iso_date
from ..common.money import fractional_digits, parse_decimal, quantize_money
from ..common.validators import (
    is_valid_date,
    is_valid_decimal,
    is_valid_department_code,
    is_valid_gender,
    is_valid_month,
    is_valid_phone,
    is_valid_string,
    to_int,
)
from ..core.constants import MONEY_MAX, MONEY_PRECISION, NET_SALARY_TOLERANCE
from ..core.enums import ErrorKind
from ..core.exceptions import FieldError, ValidationError
from ..departments.model import DepartmentInput
from ..employees.model import EmployeeInput
from ..salaries.model import SalaryInput

T = TypeVar("T")


@dataclass(frozen=True)
class ValidationResult(Generic[T]):
    errors: list[FieldError] = field(default_factory=list)
    value: Optional[T] = None

    @property
    def ok(self) -> bool:
        return not self.errors

    def kinds(self) -> list[ErrorKind]:
        return [e.kind for e in self.errors]

    def raise_for_errors(self) -> T:
        """Return the normalized value or raise ValidationError with every field error."""
        if self.errors:
            raise ValidationError.from_errors(self.errors)
        return self.value


def _is_absent(value: Any) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


def _check_money(errors: list[FieldError], name: str, value: Any) -> Optional[Decimal]:
    if not is_valid_decimal(value, 0, MONEY_MAX, MONEY_PRECISION):
        errors.append(
            FieldError(name, ErrorKind.INVALID_AMOUNT, f"{name} must be an amount between 0 and {MONEY_MAX} with at most 2 decimals", value)
        )
        return None
    return parse_decimal(value)


def _check_string(errors: list[FieldError], name: str, value: Any, min_len: int, max_len: int) -> Optional[str]:
    if not is_valid_string(value, min_len, max_len):
        errors.append(
            FieldError(name, ErrorKind.INVALID_FORMAT, f"{name} must be {min_len}-{max_len} characters", value)
        )
        return None
    return value.strip()


def validate_salary_record(
    candidate: Mapping[str, Any],
    existing_employee_ids: Collection[int],
) -> ValidationResult[SalaryInput]:
    errors: list[FieldError] = []

    raw_employee = candidate.get("employee_number")
    employee_number = to_int(raw_employee, min_value=1)
    if employee_number is None or employee_number not in existing_employee_ids:
        errors.append(
            FieldError("employee_number", ErrorKind.UNKNOWN_EMPLOYEE, "Employee does not exist", raw_employee)
        )

    raw_gross = candidate.get("gross_salary")
    raw_deduction = candidate.get("total_deduction")
    raw_net = candidate.get("net_salary")

    gross = _check_money(errors, "gross_salary", raw_gross)

    deduction: Optional[Decimal] = None
    if gross is not None:
        # Upper bound is this record's own gross salary.
        if not is_valid_decimal(raw_deduction, 0, gross, MONEY_PRECISION):
            errors.append(
                FieldError(
                    "total_deduction",
                    ErrorKind.DEDUCTION_EXCEEDS_GROSS,
                    "Total deduction must be between 0 and the gross salary with at most 2 decimals",
                    raw_deduction,
                )
            )
        else:
            deduction = parse_decimal(raw_deduction)

    net: Optional[Decimal] = None
    n = parse_decimal(raw_net)
    if n is None:
        errors.append(FieldError("net_salary", ErrorKind.INVALID_AMOUNT, "net_salary must be an amount", raw_net))
    elif gross is not None and deduction is not None:
        expected = gross - deduction
        # Compared, never subtracted: n may carry any exponent.
        if not expected - NET_SALARY_TOLERANCE <= n <= expected + NET_SALARY_TOLERANCE:
            errors.append(
                FieldError(
                    "net_salary",
                    ErrorKind.NET_SALARY_MISMATCH,
                    f"Net salary must equal gross salary minus total deduction ({quantize_money(expected)})",
                    raw_net,
                )
            )
        elif n < 0 or fractional_digits(n) > MONEY_PRECISION:
            errors.append(
                FieldError("net_salary", ErrorKind.INVALID_AMOUNT, "net_salary must be a non-negative amount with at most 2 decimals", raw_net)
            )
        else:
            net = n

    raw_month = candidate.get("month")
    if not is_valid_month(raw_month):
        errors.append(FieldError("month", ErrorKind.INVALID_MONTH, "Month must be in YYYY-MM format", raw_month))

    if errors:
        return ValidationResult(errors=errors)

    return ValidationResult(
        value=SalaryInput(
            employee_number=employee_number,
            gross_salary=quantize_money(gross),
            total_deduction=quantize_money(deduction),
            net_salary=quantize_money(net),
            month=raw_month,
        )
    )


def validate_employee(
    candidate: Mapping[str, Any],
    existing_department_codes: Optional[Collection[str]] = None,
) -> ValidationResult[EmployeeInput]:
    """Check an employee payload.

    Optional fields (address, telephone, gender, hired_date, department_code)
    are only checked when present. Department membership is enforced only when
    ``existing_department_codes`` is given.
    """
    errors: list[FieldError] = []

    first_name = _check_string(errors, "first_name", candidate.get("first_name"), 1, 50)
    last_name = _check_string(errors, "last_name", candidate.get("last_name"), 1, 50)
    position = _check_string(errors, "position", candidate.get("position"), 1, 100)

    address = None
    raw_address = candidate.get("address")
    if not _is_absent(raw_address):
        address = _check_string(errors, "address", raw_address, 1, 255)

    telephone = None
    raw_phone = candidate.get("telephone")
    if not _is_absent(raw_phone):
        if is_valid_phone(raw_phone):
            telephone = raw_phone.strip()
        else:
            errors.append(FieldError("telephone", ErrorKind.INVALID_FORMAT, "Telephone number is not valid", raw_phone))

    gender = None
    raw_gender = candidate.get("gender")
    if not _is_absent(raw_gender):
        if is_valid_gender(raw_gender):
            gender = raw_gender
        else:
            errors.append(FieldError("gender", ErrorKind.INVALID_FORMAT, "Gender must be Male, Female or Other", raw_gender))

    hired_date = None
    raw_hired = candidate.get("hired_date")
    if not _is_absent(raw_hired):
        if is_valid_date(raw_hired):
            hired_date = parse_iso_date(raw_hired)
        else:
            errors.append(FieldError("hired_date", ErrorKind.INVALID_FORMAT, "Hired date must be in YYYY-MM-DD format", raw_hired))

    department_code = None
    raw_code = candidate.get("department_code")
    if not _is_absent(raw_code):
        if not is_valid_department_code(raw_code):
            errors.append(
                FieldError("department_code", ErrorKind.INVALID_FORMAT, "Department code must be 2-10 letters, digits or underscores", raw_code)
            )
        elif existing_department_codes is not None and raw_code not in existing_department_codes:
            errors.append(FieldError("department_code", ErrorKind.UNKNOWN_DEPARTMENT, "Department does not exist", raw_code))
        else:
            department_code = raw_code

    if errors:
        return ValidationResult(errors=errors)

    return ValidationResult(
        value=EmployeeInput(
            first_name=first_name,
            last_name=last_name,
            position=position,
            address=address,
            telephone=telephone,
            gender=gender,
            hired_date=hired_date,
            department_code=department_code,
        )
    )


def validate_department(
    candidate: Mapping[str, Any],
    existing_codes: Collection[str],
) -> ValidationResult[DepartmentInput]:
    errors: list[FieldError] = []

    raw_code = candidate.get("department_code")
    code = None
    if not is_valid_department_code(raw_code):
        errors.append(
            FieldError("department_code", ErrorKind.INVALID_FORMAT, "Department code must be 2-10 letters, digits or underscores", raw_code)
        )
    elif raw_code in existing_codes:
        errors.append(FieldError("department_code", ErrorKind.DUPLICATE_KEY, "Department code already exists", raw_code))
    else:
        code = raw_code

    name = _check_string(errors, "department_name", candidate.get("department_name"), 2, 100)

    raw_gross = candidate.get("gross_salary")
    gross = parse_decimal(raw_gross)
    if gross is None:
        errors.append(FieldError("gross_salary", ErrorKind.INVALID_AMOUNT, "Gross salary must be an amount", raw_gross))
    elif not 0 <= gross <= MONEY_MAX:
        errors.append(
            FieldError("gross_salary", ErrorKind.OUT_OF_RANGE, f"Gross salary must be between 0 and {MONEY_MAX}", raw_gross)
        )
    elif fractional_digits(gross) > MONEY_PRECISION:
        errors.append(
            FieldError("gross_salary", ErrorKind.INVALID_AMOUNT, "Gross salary must have at most 2 decimals", raw_gross)
        )

    if errors:
        return ValidationResult(errors=errors)

    return ValidationResult(
        value=DepartmentInput(department_code=code, department_name=name, gross_salary=quantize_money(gross))
    )
