from __future__ import annotations

from enum import Enum


class Role(str, Enum):
    """Role of an authenticated user; picks the dashboard."""

    EMPLOYEE = "EMPLOYEE"
    MANAGER = "MANAGER"


class ValidationErrorKind(str, Enum):
    """Which form field failed validation."""

    EMPLOYEE_ID = "EMPLOYEE_ID"
    EMAIL = "EMAIL"
    PHONE = "PHONE"
    PASSWORD = "PASSWORD"
    AMOUNT = "AMOUNT"
    REQUIRED = "REQUIRED"


class LoginState(str, Enum):
    AWAITING_CREDENTIALS = "AWAITING_CREDENTIALS"
    AUTHENTICATED = "AUTHENTICATED"
    LOCKED_OUT = "LOCKED_OUT"


class ExportFormat(str, Enum):
    """Named payslip exports. Both carry the same text content."""

    TEXT = "txt"
    PDF = "pdf"
