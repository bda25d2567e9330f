from __future__ import annotations

import dataclasses

from ...core.constants import PF_RATE, TAX_RATE
from ..model import SalaryComponents
from .base import PayrollCalculator


class StandardPayrollCalculator(PayrollCalculator):
    """Standard rule: pf on basic, tax on gross, net = gross - (pf + tax)."""

    def __init__(self, *, pf_rate: float = PF_RATE, tax_rate: float = TAX_RATE):
        self.pf_rate = pf_rate
        self.tax_rate = tax_rate

    def compute(self, components: SalaryComponents) -> SalaryComponents:
        gross = components.gross_pay
        pf = components.basic_salary * self.pf_rate
        tax = gross * self.tax_rate
        return dataclasses.replace(components, pf=pf, tax=tax, net_pay=gross - (pf + tax))
