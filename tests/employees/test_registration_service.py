from __future__ import annotations

import csv

import pytest

from src.employee_payroll.employee_payroll.core.exceptions import (
    EmailInvalidError,
    EmployeeIdInvalidError,
    PasswordWeakError,
    PersistenceError,
    PhoneInvalidError,
    ValidationError,
)
from src.employee_payroll.employee_payroll.employees.file_registration_log import FileRegistrationLog
from src.employee_payroll.employee_payroll.employees.model import Employee, Registration, UserAccount
from src.employee_payroll.employee_payroll.employees.service import RegistrationService


class InMemoryRegistrationLog:
    def __init__(self):
        self.records: list[Registration] = []

    def append(self, registration: Registration) -> str:
        self.records.append(registration)
        return "memory"


FORM = {
    "emp_id": "EMP-1234",
    "name": "Asha Rao",
    "email": "asha@corp.in",
    "phone": "9876543210",
    "username": "asha",
    "password": "Asha@2026",
}


def test_register_stores_digest_not_password(hasher):
    log = InMemoryRegistrationLog()
    reg = RegistrationService(log, hasher).register(**FORM)

    assert log.records == [reg]
    assert reg.employee == Employee(emp_id="EMP-1234", name="Asha Rao", email="asha@corp.in", phone="9876543210")
    assert reg.account.password_digest == hasher.digest("Asha@2026")
    assert "Asha@2026" not in repr(reg)
    assert "Asha@2026" not in reg.summary()


def test_register_sanitizes_fields(hasher):
    form = dict(FORM, emp_id=" EMP-1234 ", phone="98765 43210")
    reg = RegistrationService(InMemoryRegistrationLog(), hasher).register(**form)

    assert reg.employee.emp_id == "EMP-1234"
    assert reg.employee.phone == "9876543210"


@pytest.mark.parametrize(
    "field, value, error",
    [
        ("emp_id", "EMP-12", EmployeeIdInvalidError),
        ("email", "asha.corp.in", EmailInvalidError),
        ("phone", "abc123", PhoneInvalidError),
        ("password", "asha2026", PasswordWeakError),
        ("name", "   ", ValidationError),
        ("username", "", ValidationError),
    ],
)
def test_register_rejects_invalid_field_and_writes_nothing(hasher, field, value, error):
    log = InMemoryRegistrationLog()
    with pytest.raises(error):
        RegistrationService(log, hasher).register(**dict(FORM, **{field: value}))
    assert log.records == []


def test_first_invalid_field_wins(hasher):
    form = dict(FORM, email="bad", phone="bad")
    with pytest.raises(EmailInvalidError):
        RegistrationService(InMemoryRegistrationLog(), hasher).register(**form)


def test_file_log_appends_csv_lines(tmp_path, hasher):
    path = tmp_path / "employee_data.txt"
    svc = RegistrationService(FileRegistrationLog(path), hasher)

    svc.register(**FORM)
    svc.register(**dict(FORM, emp_id="EMP-5678", username="asha2"))

    assert path.read_text(encoding="utf-8").splitlines() == [
        "EMP-1234,Asha Rao,asha@corp.in,9876543210,asha",
        "EMP-5678,Asha Rao,asha@corp.in,9876543210,asha2",
    ]


def test_file_log_write_failure_raises_persistence_error(tmp_path):
    blocker = tmp_path / "blocker"
    blocker.write_text("x")
    log = FileRegistrationLog(blocker / "employee_data.txt")
    reg = Registration(employee=Employee("EMP-1234", "A"), account=UserAccount("a", "digest"))

    with pytest.raises(PersistenceError):
        log.append(reg)


def test_user_account_str_hides_digest():
    assert str(UserAccount("asha", "abc")) == "UserAccount{username='asha'}"


def test_log_line_keeps_five_fields_when_name_has_comma(tmp_path, hasher):
    path = tmp_path / "employee_data.txt"
    RegistrationService(FileRegistrationLog(path), hasher).register(**dict(FORM, name="Rao, Asha"))

    with path.open(newline="", encoding="utf-8") as f:
        rows = list(csv.reader(f))

    assert rows == [["EMP-1234", "Rao, Asha", "asha@corp.in", "9876543210", "asha"]]
