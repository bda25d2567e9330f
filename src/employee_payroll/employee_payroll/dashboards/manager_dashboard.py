from __future__ import annotations

from typing import Sequence

from ..core.enums import Role
from ..employees.model import Employee
from ..payroll.model import Payslip
from .base import Dashboard, DashboardView, total_net_pay


class ManagerDashboard(Dashboard):
    """Aggregate net pay only."""

    role = Role.MANAGER
    menu = ("Approve Payslip", "View Team Summary")

    def display(self, payslips: Sequence[Payslip], employee: Employee) -> DashboardView:
        return DashboardView(
            title="MANAGER DASHBOARD",
            dashboard_type=self.dashboard_type,
            greeting=f"Manager: {employee.name}",
            total=total_net_pay(payslips),
            total_label="Team Total YTD Earnings",
        )
