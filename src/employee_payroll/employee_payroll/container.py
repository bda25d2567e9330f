from __future__ import annotations

from dataclasses import dataclass

from .common.datetime_utils import Clock, now_local
from .common.hashing import PasswordHasher
from .config import AppSettings
from .dashboards.factory import DashboardFactory
from .employees.file_registration_log import FileRegistrationLog
from .employees.service import RegistrationService
from .payroll.service import PayrollService
from .payslips.exporter import PayslipExporter
from .payslips.writer import FileDocumentWriter
from .users.in_memory_user_repository import InMemoryUserRepository, seed_demo_users
from .users.service import AuthService


@dataclass(frozen=True)
class Container:
    settings: AppSettings
    clock: Clock

    hasher: PasswordHasher
    users_repo: InMemoryUserRepository
    registration_log: FileRegistrationLog
    document_writer: FileDocumentWriter

    auth_service: AuthService
    registration_service: RegistrationService
    payroll_service: PayrollService
    payslip_exporter: PayslipExporter
    dashboard_factory: DashboardFactory


def build_container(*, settings: AppSettings, clock: Clock = now_local) -> Container:
    # Raises HashingUnavailableError before anything else is wired.
    hasher = PasswordHasher(settings.hash_algorithm)

    users_repo = seed_demo_users(InMemoryUserRepository(), hasher)
    registration_log = FileRegistrationLog(settings.registration_log)
    document_writer = FileDocumentWriter(settings.export_dir)

    auth_service = AuthService(
        users_repo,
        hasher,
        max_attempts=settings.max_login_attempts,
        session_ttl=settings.session_ttl,
        clock=clock,
    )
    registration_service = RegistrationService(registration_log, hasher)
    payroll_service = PayrollService()
    payslip_exporter = PayslipExporter(document_writer, clock=clock)

    return Container(
        settings=settings,
        clock=clock,
        hasher=hasher,
        users_repo=users_repo,
        registration_log=registration_log,
        document_writer=document_writer,
        auth_service=auth_service,
        registration_service=registration_service,
        payroll_service=payroll_service,
        payslip_exporter=payslip_exporter,
        dashboard_factory=DashboardFactory(),
    )
