from __future__ import annotations

import dataclasses
from dataclasses import dataclass
from typing import Optional

from ..employees.model import Employee


@dataclass(frozen=True)
class SalaryComponents:
    """Earnings plus the deductions the calculator fills in.

    ``pf``, ``tax`` and ``net_pay`` stay ``None`` until a calculator returns the
    filled copy; after that the value is read-only like any other.
    """

    basic_salary: float
    hra: float
    da: float
    allowances: float
    pf: Optional[float] = None
    tax: Optional[float] = None
    net_pay: Optional[float] = None

    @property
    def gross_pay(self) -> float:
        return self.basic_salary + self.hra + self.da + self.allowances

    @property
    def is_computed(self) -> bool:
        return self.net_pay is not None


@dataclass(frozen=True, eq=False)
class Payslip:
    """Immutable payslip for one employee and month.

    Two payslips are the same slip when employee id and month match, whatever
    the amounts say.
    """

    employee: Employee
    month: str
    net_pay: float
    components: Optional[SalaryComponents] = None

    @property
    def emp_id(self) -> str:
        return self.employee.emp_id

    def __eq__(self, other: object) -> bool:
        if other is self:
            return True
        if not isinstance(other, Payslip):
            return NotImplemented
        return self.emp_id == other.emp_id and self.month == other.month

    def __hash__(self) -> int:
        return hash((self.emp_id, self.month))

    def clone(self) -> "Payslip":
        return dataclasses.replace(self)

    def with_net_pay(self, net_pay: float) -> "Payslip":
        return dataclasses.replace(self, net_pay=net_pay)

    def to_text(self) -> str:
        if self.components is None:
            return (
                "PAYSLIP\n"
                f"Employee ID   : {self.emp_id}\n"
                f"Employee Name : {self.employee.name}\n"
                f"Month         : {self.month}\n"
                f"Net Pay       : {self.net_pay}\n"
            )

        c = self.components
        return (
            "\n=========== PAYSLIP ===========\n"
            f"Month        : {self.month}\n"
            f"Employee ID  : {self.emp_id}\n"
            f"Employee Name: {self.employee.name}\n\n"
            "---- Earnings ----\n"
            f"Basic Salary  : {c.basic_salary}\n"
            f"HRA           : {c.hra}\n"
            f"DA            : {c.da}\n"
            f"Allowances    : {c.allowances}\n\n"
            "---- Deductions ----\n"
            f"PF            : {c.pf}\n"
            f"Tax           : {c.tax}\n\n"
            f"Net Pay       : {c.net_pay}\n"
            "==============================\n"
        )

    def __str__(self) -> str:
        return f"{self.month} : {self.net_pay}"
