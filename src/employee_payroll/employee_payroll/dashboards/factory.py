from __future__ import annotations

from typing import Optional

from ..core.exceptions import InvalidRoleError
from .base import Dashboard
from .employee_dashboard import EmployeeDashboard
from .manager_dashboard import ManagerDashboard


class DashboardFactory:
    """Factory Pattern: choose the dashboard for a role."""

    dashboards: tuple[type[Dashboard], ...] = (EmployeeDashboard, ManagerDashboard)

    def for_role(self, role: str) -> Optional[Dashboard]:
        # Exact match on the role name, like the login roles.
        for dashboard_cls in self.dashboards:
            if role == dashboard_cls.role.value:
                return dashboard_cls()
        return None

    def require(self, role: str) -> Dashboard:
        dashboard = self.for_role(role)
        if dashboard is None:
            raise InvalidRoleError(role)
        return dashboard


def select_dashboard(role: str) -> Optional[Dashboard]:
    return DashboardFactory().for_role(role)
