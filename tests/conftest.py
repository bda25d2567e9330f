from __future__ import annotations

from datetime import datetime, timedelta
from typing import Iterable, Optional

import pytest

from src.employee_payroll.employee_payroll.common.hashing import PasswordHasher
from src.employee_payroll.employee_payroll.config import AppSettings
from src.employee_payroll.employee_payroll.container import build_container


class FakeConsole:
    """Console fed from a list of lines; records everything written."""

    def __init__(self, lines: Iterable[str] = ()):
        self._lines = list(lines)
        self.prompts: list[str] = []
        self.output: list[str] = []

    def read_line(self, prompt: str = "") -> str:
        self.prompts.append(prompt)
        if not self._lines:
            raise EOFError
        return self._lines.pop(0)

    def write(self, text: str = "") -> None:
        self.output.append(text)

    @property
    def text(self) -> str:
        return "\n".join(self.output)


@pytest.fixture
def fixed_now() -> datetime:
    return datetime(2026, 1, 15, 8, 25, 0)


@pytest.fixture
def hasher() -> PasswordHasher:
    return PasswordHasher("sha256")


@pytest.fixture
def settings(tmp_path) -> AppSettings:
    return AppSettings(
        data_dir=tmp_path,
        export_dir=tmp_path / "payslips",
        registration_log=tmp_path / "employee_data.txt",
        hash_algorithm="sha256",
        session_ttl=timedelta(seconds=120),
        download_ttl=timedelta(seconds=60),
        max_login_attempts=3,
        log_level="WARNING",
        log_file=None,
        debug=False,
    )


@pytest.fixture
def container(settings, fixed_now):
    return build_container(settings=settings, clock=lambda: fixed_now)


@pytest.fixture
def make_console():
    def _make(lines: Optional[Iterable[str]] = None) -> FakeConsole:
        return FakeConsole(lines or ())

    return _make
