from __future__ import annotations

import logging
from typing import Optional

from ..common.validators import require_non_empty
from ..employees.model import Employee
from .calculator.base import PayrollCalculator
from .calculator.standard_calculator import StandardPayrollCalculator
from .model import Payslip, SalaryComponents

logger = logging.getLogger(__name__)


class PayrollService:
    def __init__(self, *, calculator: Optional[PayrollCalculator] = None):
        self._calculator = calculator or StandardPayrollCalculator()

    def generate_payslip(
        self,
        employee: Employee,
        month: str,
        basic: float,
        hra: float,
        da: float,
        allowances: float,
    ) -> Payslip:
        month = require_non_empty(month, "Month")
        components = self._calculator.compute(
            SalaryComponents(basic_salary=basic, hra=hra, da=da, allowances=allowances)
        )
        logger.debug("Payslip %s/%s gross=%s net=%s", employee.emp_id, month, components.gross_pay, components.net_pay)
        return Payslip(employee=employee, month=month, net_pay=components.net_pay, components=components)
