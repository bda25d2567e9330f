from __future__ import annotations

import csv
import io
from dataclasses import dataclass, field
from typing import Optional


@dataclass(frozen=True)
class Employee:
    """Domain entity: employee identity.

    Payslips reference an Employee but do not own it.
    """

    emp_id: str
    name: str
    email: Optional[str] = None
    phone: Optional[str] = None


@dataclass(frozen=True)
class UserAccount:
    """Login account of a registered employee. Only the digest is kept."""

    username: str
    password_digest: str = field(repr=False)

    def __str__(self) -> str:
        return f"UserAccount{{username='{self.username}'}}"


@dataclass(frozen=True)
class Registration:
    """An Employee composed with its UserAccount."""

    employee: Employee
    account: UserAccount

    def to_log_line(self) -> str:
        e = self.employee
        buf = io.StringIO()
        csv.writer(buf, lineterminator="").writerow(
            [e.emp_id, e.name, e.email or "", e.phone or "", self.account.username]
        )
        return buf.getvalue()

    def summary(self) -> str:
        e = self.employee
        return (
            "Employee Registered Successfully:\n"
            f"Employee ID : {e.emp_id}\n"
            f"Name        : {e.name}\n"
            f"Email       : {e.email or '-'}\n"
            f"Phone       : {e.phone or '-'}\n"
            f"Username    : {self.account.username}"
        )
