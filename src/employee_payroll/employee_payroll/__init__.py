"""Employee Payroll use cases package.

Organised by feature modules (employees, users, payroll, payslips, dashboards)
with a thin console layer on top of small service/repository layers.
"""
