from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Optional, Sequence

from ..core.enums import Role
from ..employees.model import Employee
from ..payroll.model import Payslip


@dataclass(frozen=True)
class DashboardView:
    title: str
    dashboard_type: str
    greeting: str
    total: float
    total_label: str
    top_payslips: tuple[Payslip, ...] = field(default_factory=tuple)
    # Size of the "Recent Payslips" section; None hides it.
    top_count: Optional[int] = None

    def lines(self) -> list[str]:
        out = [f"=== {self.title} ===", self.greeting, f"Dashboard Type: {self.dashboard_type}"]
        if self.top_count is not None:
            out.append("")
            out.append(f"Recent Payslips (Top {self.top_count}):")
            out.extend(str(p) for p in self.top_payslips)
        out.append("")
        out.append(f"{self.total_label}: {self.total}")
        return out

    def to_text(self) -> str:
        return "\n".join(self.lines())


def total_net_pay(payslips: Sequence[Payslip]) -> float:
    return sum((p.net_pay for p in payslips), 0.0)


class Dashboard(ABC):
    """Role-specific view over a list of payslips."""

    role: Role
    menu: tuple[str, ...] = ()

    @property
    def dashboard_type(self) -> str:
        return type(self).__name__

    @abstractmethod
    def display(self, payslips: Sequence[Payslip], employee: Employee) -> DashboardView:
        raise NotImplementedError
