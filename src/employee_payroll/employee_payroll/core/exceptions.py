from __future__ import annotations

from typing import Optional

from .enums import ValidationErrorKind


class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""

    kind: Optional[ValidationErrorKind] = ValidationErrorKind.REQUIRED

    def __init__(self, message: str, *, field: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.field = field


class EmployeeIdInvalidError(ValidationError):
    kind = ValidationErrorKind.EMPLOYEE_ID


class EmailInvalidError(ValidationError):
    kind = ValidationErrorKind.EMAIL


class PhoneInvalidError(ValidationError):
    kind = ValidationErrorKind.PHONE


class PasswordWeakError(ValidationError):
    kind = ValidationErrorKind.PASSWORD


class AmountInvalidError(ValidationError):
    kind = ValidationErrorKind.AMOUNT


class AuthenticationError(DomainError):
    """Raised when login credentials are invalid."""


class InvalidRoleError(DomainError):
    """Raised when no dashboard exists for a role."""

    def __init__(self, role: str):
        super().__init__(f"Invalid Role: {role!r}")
        self.role = role


class DownloadExpiredError(DomainError):
    """Raised when a payslip is exported with an expired download token."""


class PersistenceError(DomainError):
    """Raised when a record or export cannot be written."""


class ConfigurationError(Exception):
    """Raised at startup when the application cannot be configured."""


class HashingUnavailableError(ConfigurationError):
    """Raised when the configured digest algorithm is not available."""
