"""Console programs, one per use case.

Each runner reads from and writes to a ``Console`` and returns a process exit
code. Business rules live in the services; this layer only prompts, catches
the domain errors it expects and prints.
"""

from __future__ import annotations

import logging
from typing import Iterator

from ..common.validators import (
    parse_amount,
    require_non_empty,
    validate_email,
    validate_employee_id,
    validate_password,
    validate_phone,
)
from ..container import Container
from ..core.exceptions import DownloadExpiredError, PersistenceError, ValidationError
from ..employees.model import Employee
from ..payroll.model import Payslip
from ..payslips.token import DownloadToken
from .io import Console

logger = logging.getLogger(__name__)

RULE = "----------------------------------"

SAMPLE_DOWNLOAD_PAYSLIP = Payslip(
    employee=Employee(emp_id="EMP-1010", name="John David"),
    month="January 2026",
    net_pay=48500.00,
)

SAMPLE_NET_PAYS = (("Jan", 30000.0), ("Feb", 32000.0), ("Mar", 31000.0), ("Apr", 33000.0), ("May", 34000.0))


def run_registration(container: Container, console: Console) -> int:
    console.write("=== USE CASE 1: EMPLOYEE REGISTRATION ===")
    try:
        emp_id = validate_employee_id(console.read_line("Enter Employee ID (EMP-XXXX): "))
        name = require_non_empty(console.read_line("Enter Name: "), "Name")
        email = validate_email(console.read_line("Enter Email: "))
        phone = validate_phone(console.read_line("Enter Phone (10 digits starting 6-9): "))
        username = require_non_empty(console.read_line("Create Username: "), "Username")
        password = console.read_line("Create Password: ")

        registration = container.registration_service.register(
            emp_id=emp_id,
            name=name,
            email=email,
            phone=phone,
            username=username,
            password=password,
        )
    except ValidationError as e:
        console.write(f"\nValidation Failed: {e.message}")
        return 1
    except PersistenceError as e:
        console.write(f"\n{e}")
        return 1

    console.write("\n" + RULE)
    console.write(registration.summary())
    console.write(f"\nData persisted in file: {container.registration_log.path}")
    console.write(RULE)
    return 0


def _prompt_credentials(console: Console) -> Iterator[tuple[str, str]]:
    while True:
        try:
            username = console.read_line("\nEnter Username: ")
            password = console.read_line("Enter Password: ")
        except EOFError:
            return
        yield username, password


def run_login(container: Container, console: Console) -> int:
    console.write("=== USE CASE 2: EMPLOYEE AUTHENTICATION & LOGIN ===")

    def report_failure(remaining: int) -> None:
        console.write(f"Login Failed. Attempts remaining: {remaining}")

    outcome = container.auth_service.login(_prompt_credentials(console), on_failure=report_failure)

    if outcome.locked_out:
        console.write(f"\nAccount temporarily locked due to {outcome.attempts_used} failed attempts.")
        return 1
    if outcome.session is None or outcome.user is None:
        console.write("\nNo credentials entered.")
        return 1

    console.write("\nLogin Successful!")
    console.write(f"Role: {outcome.user.role.value}")

    dashboard = container.dashboard_factory.for_role(outcome.user.role.value)
    console.write("\n======= DASHBOARD =======")
    if dashboard is not None:
        console.write(dashboard.dashboard_type.replace("Dashboard", " Dashboard"))
        console.write(" | ".join(dashboard.menu))

    console.write("\n" + str(outcome.session))
    if outcome.session.is_expired(container.clock()):
        console.write("Session expired. Please login again.")
    else:
        console.write("Session active and valid.")
    return 0


def run_payslip(container: Container, console: Console) -> int:
    console.write("=== USE CASE 3: PAYSLIP GENERATION ===")
    try:
        emp_id = require_non_empty(console.read_line("Enter Employee ID: "), "Employee ID")
        name = require_non_empty(console.read_line("Enter Employee Name: "), "Employee Name")
        month = require_non_empty(console.read_line("Enter Month (e.g., January 2026): "), "Month")

        basic = parse_amount(console.read_line("Enter Basic Salary: "), "Basic Salary")
        hra = parse_amount(console.read_line("Enter HRA: "), "HRA")
        da = parse_amount(console.read_line("Enter DA: "), "DA")
        allowances = parse_amount(console.read_line("Enter Allowances: "), "Allowances")
    except ValidationError as e:
        console.write(f"\nValidation Failed: {e.message}")
        return 1

    payslip = container.payroll_service.generate_payslip(
        Employee(emp_id=emp_id, name=name), month, basic, hra, da, allowances
    )
    console.write(payslip.to_text())
    return 0


def run_download(container: Container, console: Console, payslip: Payslip = SAMPLE_DOWNLOAD_PAYSLIP) -> int:
    console.write("=== USE CASE 4: PAYSLIP PRINT / DOWNLOAD ===")
    console.write("\nOriginal Payslip:")
    console.write(payslip.to_text())

    download_copy = payslip.clone()
    if payslip == download_copy:
        console.write("Verified: Download copy is equal to original.")
    console.write(f"Original hashcode : {hash(payslip)}")
    console.write(f"Cloned   hashcode : {hash(download_copy)}")

    token = DownloadToken.issue(now=container.clock(), ttl=container.settings.download_ttl)
    try:
        result = container.payslip_exporter.export(download_copy, token)
    except DownloadExpiredError as e:
        console.write(str(e))
        return 1
    except PersistenceError:
        logger.exception("Payslip download failed")
        console.write("Error during payslip download.")
        return 1

    console.write("\nPayslip Download Successful.")
    console.write(f"Saved as text file: {result.text_path}")
    console.write(f"Saved as PDF file : {result.pdf_path}")
    console.write("\n--- Printed Payslip ---")
    console.write(result.payslip.to_text())
    return 0


def run_dashboard(container: Container, console: Console) -> int:
    console.write("=== USE CASE 5: DASHBOARD DISPLAY ===")
    emp_id = console.read_line("Enter Employee ID: ").strip()
    name = console.read_line("Enter Employee Name: ").strip()
    role = console.read_line("Enter Role (EMPLOYEE/MANAGER): ").strip()

    employee = Employee(emp_id=emp_id, name=name)
    payslips = [Payslip(employee=employee, month=month, net_pay=net) for month, net in SAMPLE_NET_PAYS]

    dashboard = container.dashboard_factory.for_role(role)
    if dashboard is None:
        console.write("Invalid Role")
        return 1

    console.write("")
    console.write(dashboard.display(payslips, employee).to_text())
    return 0


def run_validation(container: Container, console: Console) -> int:
    console.write("=== USE CASE 6: INPUT VALIDATION ===")
    try:
        validate_employee_id(console.read_line("Enter Employee ID (EMP-XXXX): "))
        validate_email(console.read_line("Enter Email: "))
        validate_phone(console.read_line("Enter Phone Number: "))
        validate_password(console.read_line("Create Password: "))
    except ValidationError as ex:
        # One handler for every field-specific error
        console.write("\nValidation Failed:")
        console.write(ex.message)
        return 1

    console.write("\nAll inputs are VALID. Registration/Login can proceed.")
    return 0


USE_CASES = {
    "register": run_registration,
    "login": run_login,
    "payslip": run_payslip,
    "download": run_download,
    "dashboard": run_dashboard,
    "validate": run_validation,
}
