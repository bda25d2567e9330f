from src.employee_payroll.employee_payroll.employees.model import Employee
from src.employee_payroll.employee_payroll.payroll.model import Payslip

EMP = Employee(emp_id="EMP-1010", name="John David")


def test_clone_is_equal_but_distinct():
    original = Payslip(employee=EMP, month="January 2026", net_pay=48500.0)
    copy = original.clone()

    assert copy == original
    assert copy is not original
    assert hash(copy) == hash(original)
    assert copy.net_pay == original.net_pay


def test_same_employee_and_month_is_the_same_slip_whatever_the_amount():
    a = Payslip(employee=EMP, month="January 2026", net_pay=48500.0)
    b = Payslip(employee=Employee(emp_id="EMP-1010", name="J. David"), month="January 2026", net_pay=1.0)

    assert a == b
    assert b == a
    assert a == a
    assert len({a, b}) == 1


def test_different_month_or_employee_differs():
    a = Payslip(employee=EMP, month="January 2026", net_pay=48500.0)

    assert a != Payslip(employee=EMP, month="February 2026", net_pay=48500.0)
    assert a != Payslip(employee=Employee("EMP-2020", "John David"), month="January 2026", net_pay=48500.0)
    assert a != "EMP-1010"


def test_with_net_pay_returns_new_copy():
    a = Payslip(employee=EMP, month="January 2026", net_pay=48500.0)
    b = a.with_net_pay(50000.0)

    assert a.net_pay == 48500.0
    assert b.net_pay == 50000.0
    assert a == b


def test_simple_text_rendering():
    text = Payslip(employee=EMP, month="January 2026", net_pay=48500.0).to_text()
    assert text == (
        "PAYSLIP\n"
        "Employee ID   : EMP-1010\n"
        "Employee Name : John David\n"
        "Month         : January 2026\n"
        "Net Pay       : 48500.0\n"
    )
