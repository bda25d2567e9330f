from __future__ import annotations

from abc import ABC, abstractmethod

from ..model import SalaryComponents


class PayrollCalculator(ABC):
    """Calculator interface (Strategy Pattern for payroll)."""

    @abstractmethod
    def compute(self, components: SalaryComponents) -> SalaryComponents:
        """Return a copy of ``components`` with pf, tax and net pay filled in."""
        raise NotImplementedError
