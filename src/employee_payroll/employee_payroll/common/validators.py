"""Form input validation.

Every check sanitises first (trim, then drop interior spaces) and raises the
field-specific ``ValidationError`` subclass on failure. ``check`` wraps the same
rules for callers that prefer a result value over an exception.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Callable, Mapping, Optional

from ..core.enums import ValidationErrorKind
from ..core.exceptions import (
    AmountInvalidError,
    EmailInvalidError,
    EmployeeIdInvalidError,
    PasswordWeakError,
    PhoneInvalidError,
    ValidationError,
)

EMPLOYEE_ID_PATTERN = re.compile(r"^EMP-[0-9]{4}$")
EMAIL_PATTERN = re.compile(r"^[A-Za-z0-9+_.-]+@[A-Za-z0-9.-]+$")
PHONE_PATTERN = re.compile(r"^[6-9][0-9]{9}$")
PASSWORD_PATTERN = re.compile(r"^(?=.*[A-Z])(?=.*[a-z])(?=.*[0-9])(?=.*[@#$%!]).{8,}$")

PASSWORD_RULES = (
    "Weak password. Must contain:\n"
    "- 8 or more characters\n"
    "- uppercase letter\n"
    "- lowercase letter\n"
    "- number\n"
    "- special symbol (@ # $ % !)"
)


def sanitize(value: Optional[str]) -> str:
    if value is None:
        return ""
    return value.strip().replace(" ", "")


def require_non_empty(value: Optional[str], field_name: str) -> str:
    if not value or not value.strip():
        raise ValidationError(f"{field_name} is required", field=field_name)
    return value.strip()


def validate_employee_id(value: Optional[str]) -> str:
    emp_id = sanitize(value)
    if not EMPLOYEE_ID_PATTERN.match(emp_id):
        raise EmployeeIdInvalidError("Invalid Employee ID. Expected format: EMP-1234", field="employee_id")
    return emp_id


def validate_email(value: Optional[str]) -> str:
    email = sanitize(value)
    if not EMAIL_PATTERN.match(email):
        raise EmailInvalidError("Invalid email format. Example: abc@gmail.com", field="email")
    return email


def validate_phone(value: Optional[str]) -> str:
    phone = sanitize(value)
    if not PHONE_PATTERN.match(phone):
        raise PhoneInvalidError("Invalid phone number. Must be 10 digits starting from 6-9", field="phone")
    return phone


def validate_password(value: Optional[str]) -> str:
    password = sanitize(value)
    if not PASSWORD_PATTERN.match(password):
        raise PasswordWeakError(PASSWORD_RULES, field="password")
    return password


def parse_amount(value: Optional[str], field_name: str) -> float:
    raw = sanitize(value)
    try:
        return float(raw)
    except ValueError:
        raise AmountInvalidError(f"{field_name} must be a number", field=field_name) from None


def validate_amount(value: Optional[str]) -> str:
    parse_amount(value, "Amount")
    return sanitize(value)


def validate_required(value: Optional[str]) -> str:
    return require_non_empty(value, "Value")


_VALIDATORS: dict[ValidationErrorKind, Callable[[Optional[str]], str]] = {
    ValidationErrorKind.EMPLOYEE_ID: validate_employee_id,
    ValidationErrorKind.EMAIL: validate_email,
    ValidationErrorKind.PHONE: validate_phone,
    ValidationErrorKind.PASSWORD: validate_password,
    ValidationErrorKind.AMOUNT: validate_amount,
    ValidationErrorKind.REQUIRED: validate_required,
}


def validate(kind: ValidationErrorKind, value: Optional[str]) -> str:
    """Validate ``value`` as ``kind`` and return the cleaned text."""
    return _VALIDATORS[kind](value)


@dataclass(frozen=True)
class ValidationResult:
    value: Optional[str] = None
    error_kind: Optional[ValidationErrorKind] = None
    message: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.error_kind is None


def check(kind: ValidationErrorKind, value: Optional[str]) -> ValidationResult:
    try:
        return ValidationResult(value=validate(kind, value))
    except ValidationError as e:
        return ValidationResult(error_kind=e.kind, message=e.message)


def validate_form(fields: Mapping[ValidationErrorKind, Optional[str]]) -> dict[ValidationErrorKind, str]:
    """Fail-fast over ``fields`` in insertion order."""
    return {kind: validate(kind, value) for kind, value in fields.items()}
