from __future__ import annotations

from datetime import datetime, timedelta
from pathlib import Path

import pytest

from src.employee_payroll.employee_payroll.core.enums import ExportFormat
from src.employee_payroll.employee_payroll.core.exceptions import DownloadExpiredError, PersistenceError
from src.employee_payroll.employee_payroll.employees.model import Employee
from src.employee_payroll.employee_payroll.payroll.model import Payslip
from src.employee_payroll.employee_payroll.payslips.exporter import PayslipExporter
from src.employee_payroll.employee_payroll.payslips.token import DownloadToken
from src.employee_payroll.employee_payroll.payslips.writer import FileDocumentWriter

SLIP = Payslip(employee=Employee(emp_id="EMP-1010", name="John David"), month="January 2026", net_pay=48500.0)


class InMemoryWriter:
    def __init__(self):
        self.docs: dict[str, str] = {}

    def write(self, name: str, text: str) -> str:
        self.docs[name] = text
        return f"mem://{name}"


def test_export_writes_text_and_pdf_with_same_content(fixed_now):
    writer = InMemoryWriter()
    exporter = PayslipExporter(writer, clock=lambda: fixed_now)

    result = exporter.export(SLIP, DownloadToken.issue(now=fixed_now))

    stamp = int(fixed_now.timestamp() * 1000)
    assert set(writer.docs) == {f"Payslip_EMP-1010_{stamp}.txt", f"Payslip_EMP-1010_{stamp}.pdf"}
    assert len(set(writer.docs.values())) == 1
    assert result.text_path.endswith(".txt")
    assert result.pdf_path.endswith(".pdf")
    assert result.payslip == SLIP
    assert result.payslip is not SLIP


def test_expired_token_blocks_export(fixed_now):
    writer = InMemoryWriter()
    exporter = PayslipExporter(writer, clock=lambda: fixed_now)
    token = DownloadToken.issue(now=fixed_now - timedelta(seconds=61))

    with pytest.raises(DownloadExpiredError):
        exporter.export(SLIP, token)
    assert writer.docs == {}


def test_token_issued_without_ttl_uses_one_minute(fixed_now):
    token = DownloadToken.issue(now=fixed_now)

    assert token.ttl == timedelta(seconds=60)
    assert not token.is_expired(fixed_now + timedelta(seconds=60))
    assert token.is_expired(fixed_now + timedelta(seconds=61))


def test_file_writer_saves_files(tmp_path, fixed_now):
    exporter = PayslipExporter(FileDocumentWriter(tmp_path / "out"), clock=lambda: fixed_now)

    result = exporter.export(SLIP)

    txt, pdf = Path(result.text_path), Path(result.pdf_path)
    assert txt.parent == tmp_path / "out"
    assert txt.read_text(encoding="utf-8") == SLIP.to_text()
    assert pdf.read_text(encoding="utf-8") == SLIP.to_text()


def test_file_name_uses_format_suffix(fixed_now):
    exporter = PayslipExporter(InMemoryWriter(), clock=lambda: datetime(2026, 1, 1))
    assert exporter.file_name(SLIP, ExportFormat.PDF).endswith(".pdf")


def test_file_writer_wraps_os_errors(tmp_path):
    blocker = tmp_path / "not_a_dir"
    blocker.write_text("x")

    with pytest.raises(PersistenceError):
        FileDocumentWriter(blocker).write("Payslip_EMP-1010_1.txt", "text")
