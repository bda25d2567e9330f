from __future__ import annotations

import logging

from ..common.hashing import PasswordHasher
from ..common.validators import (
    require_non_empty,
    validate_email,
    validate_employee_id,
    validate_password,
    validate_phone,
)
from .model import Employee, Registration, UserAccount
from .repository import RegistrationLog

logger = logging.getLogger(__name__)


class RegistrationService:
    """Use case: register an employee and their login account."""

    def __init__(self, log: RegistrationLog, hasher: PasswordHasher):
        self._log = log
        self._hasher = hasher

    def register(
        self,
        *,
        emp_id: str,
        name: str,
        email: str,
        phone: str,
        username: str,
        password: str,
    ) -> Registration:
        # Fail-fast, in form order.
        emp_id = validate_employee_id(emp_id)
        name = require_non_empty(name, "Name")
        email = validate_email(email)
        phone = validate_phone(phone)
        username = require_non_empty(username, "Username")
        validate_password(password)

        registration = Registration(
            employee=Employee(emp_id=emp_id, name=name, email=email, phone=phone),
            account=UserAccount(username=username, password_digest=self._hasher.digest(password)),
        )
        self._log.append(registration)
        return registration
