"""CSV reports about operators and salaries."""

from __future__ import annotations

from typing import Iterable, TextIO

from rockmarket.employees import Employee, Operator


def _full_name(employee: Employee) -> str:
    return f"{employee.first_name} {employee.last_name}"


def generate_reports(
    employees: Iterable[Employee],
    orders: Iterable,
    report1: TextIO,
    report2: TextIO,
    report3: TextIO,
) -> None:
    """Write the busiest operator, the three operators with the most valuable
    orders, and the three best-paid employees ordered by name."""
    employees = list(employees)
    operators = [e for e in employees if isinstance(e, Operator)]

    if operators:
        busiest = max(operators, key=lambda op: op.num_orders)
        report1.write("ID,Name,Number of orders\n")
        report1.write(
            f"{busiest.employee_id},{_full_name(busiest)},{busiest.num_orders}\n"
        )

        by_value = sorted(operators, key=lambda op: op.max_order_value, reverse=True)
        report2.write("ID,Name,Max value of an order\n")
        for op in by_value[:3]:
            report2.write(f"{op.employee_id},{_full_name(op)},{op.max_order_value:g}\n")

    by_salary = sorted(employees, key=lambda e: e.salary, reverse=True)
    top3 = sorted(by_salary[:3], key=lambda e: (e.last_name, e.first_name))
    report3.write("ID,Name,Salary\n")
    for employee in top3:
        report3.write(
            f"{employee.employee_id},{employee.kind},"
            f"{_full_name(employee)},{employee.salary:g}\n"
        )