from __future__ import annotations

from typing import Sequence

from ..core.constants import DASHBOARD_TOP_PAYSLIPS
from ..core.enums import Role
from ..employees.model import Employee
from ..payroll.model import Payslip
from .base import Dashboard, DashboardView, total_net_pay


class EmployeeDashboard(Dashboard):
    """Top payslips by net pay plus year-to-date earnings over all of them."""

    role = Role.EMPLOYEE
    menu = ("View Payslip", "Update Profile")

    def __init__(self, top: int = DASHBOARD_TOP_PAYSLIPS):
        self.top = top

    def display(self, payslips: Sequence[Payslip], employee: Employee) -> DashboardView:
        ranked = sorted(payslips, key=lambda p: p.net_pay, reverse=True)
        return DashboardView(
            title="EMPLOYEE DASHBOARD",
            dashboard_type=self.dashboard_type,
            greeting=f"Welcome, {employee.name}",
            top_payslips=tuple(ranked[: self.top]),
            top_count=self.top,
            total=total_net_pay(payslips),
            total_label="Year-To-Date Earnings",
        )
