"""Validation and interactive management of the company's employees."""

from __future__ import annotations

from calendar import isleap
from datetime import date, timedelta
from typing import Iterable

from rockmarket.console import Console
from rockmarket.employees import Assistant, Employee, Manager, Operator

_CNP_WEIGHTS = "279146358279"
_VALID_SEX_DIGITS = {1, 2, 5, 6, 7, 8}
_EMPLOYEE_TYPES = {"manager": Manager, "operator": Operator, "asistent": Assistant}


def valid_cnp(cnp: str) -> bool:
    """Check a personal numeric code: layout, birth date fields and check digit."""
    if len(cnp) != 13 or not all(ch in "0123456789" for ch in cnp):
        return False

    sex = int(cnp[0])
    year = int(cnp[1:3])
    month = int(cnp[3:5])
    day = int(cnp[5:7])
    county = int(cnp[7:9])
    control = int(cnp[12])

    if sex not in _VALID_SEX_DIGITS:
        return False
    year += 1900 if sex in (1, 2) else 2000
    if not 1900 <= year <= 2024:
        return False
    if not 1 <= month <= 12:
        return False
    if not 1 <= day <= 31:
        return False
    if not ((county <= 52 and county != 47) or county != 48 or county == 70):
        return False

    check = sum(int(digit) * int(weight) for digit, weight in zip(cnp, _CNP_WEIGHTS))
    check %= 11
    if check == 10:
        check = 1
    return check == control


def valid_name(first_name: str, last_name: str) -> bool:
    """Both names must have between 3 and 30 characters."""
    return 3 <= len(first_name) <= 30 and 3 <= len(last_name) <= 30


def id_available(employees: Iterable[Employee], employee_id: str) -> bool:
    """True when no employee already uses the given ID."""
    return all(e.employee_id != employee_id for e in employees)


def format_ids(employees: Iterable[Employee]) -> str:
    return "".join(e.id_line() for e in employees)


def is_leap_year(year: int) -> bool:
    return isleap(year)


def valid_date(day: int, month: int, year: int, today: date | None = None) -> bool:
    """A calendar date from 1900 onwards that is not in the future.

    Day 0 is accepted and stands for the last day of the previous month.
    """
    if year < 1900:
        return False
    if not 1 <= month <= 12:
        return False
    days_in_month = [31, 29 if is_leap_year(year) else 28, 31, 30, 31, 30,
                     31, 31, 30, 31, 30, 31]
    if day < 0 or day > days_in_month[month - 1]:
        return False
    given = date(year, month, 1) + timedelta(days=day - 1)
    today = today if today is not None else date.today()
    return given <= today


def valid_type(kind: str) -> bool:
    return kind in _EMPLOYEE_TYPES


def _read_date(console: Console) -> tuple[int, int, int] | None:
    try:
        console.write("Day: ")
        day = console.read_int()
        console.write("Month: ")
        month = console.read_int()
        console.write("Year: ")
        year = console.read_int()
    except ValueError:
        console.write("\n")
        return None
    console.write("\n")
    return day, month, year


def _find(employees: list[Employee], employee_id: str) -> Employee:
    return next(e for e in employees if e.employee_id == employee_id)


def add_new_employee(
    employees: list[Employee], console: Console, today: date | None = None
) -> Employee:
    """Ask for every field of a new employee, then append and return it."""
    today = today if today is not None else date.today()
    console.write("Introduce the required fields for the new employee!\n\n")

    while True:
        console.write("Please introduce the ID\n")
        employee_id = console.read_token()
        console.write("\n")
        if id_available(employees, employee_id):
            break
        console.write("The ID must be unique in the company!\n")
        console.write("Here is the list of unavailable id's :\n")
        console.write(format_ids(employees))

    console.write("Please introduce the first name\n")
    while True:
        first_name = console.read_token().capitalize()
        console.write("\n")
        console.write("Please introduce the last name\n")
        last_name = console.read_token().capitalize()
        console.write("\n")
        if valid_name(first_name, last_name):
            break
        console.write("The provided first name or last name are incorrect!\n")

    console.write("Please introduce the CNP\n")
    while True:
        cnp = console.read_token()
        console.write("\n")
        if valid_cnp(cnp):
            break
        console.write("The provided CNP is invalid!\n")

    birth_year = int(cnp[1:3]) + (1900 if int(cnp[0]) in (1, 2) else 2000)
    birth_month = int(cnp[3:5])
    birth_day = int(cnp[5:7])

    console.write("Please introduce the date of employment\n")
    while True:
        parts = _read_date(console)
        if parts is None or not valid_date(*parts, today=today):
            console.write("The provided date of employment is invalid!\n")
            continue
        day, month, year = parts
        age = year - birth_year
        if age < 18 or (
            age == 18
            and (month < birth_month or (month == birth_month and day < birth_day))
        ):
            console.write("You must have at least 18 years old!\n")
            continue
        hire_date = f"{day:02d}.{month:02d}.{year}"
        break

    console.write("Please introduce the function of the employee in the company\n")
    while True:
        kind = console.read_token().lower()
        if valid_type(kind):
            break
        console.write("This function doesn't exist in the company!\n")

    employee = _EMPLOYEE_TYPES[kind](
        employee_id, first_name, last_name, cnp, hire_date, today
    )
    employees.append(employee)
    return employee


def format_all_employees(employees: Iterable[Employee], today: date | None = None) -> str:
    body = "".join(e.describe(today) + "\n" for e in employees)
    return "Employees of the company:\n\n" + body


def modify_employee(employees: list[Employee], console: Console) -> Employee:
    """Ask for an employee ID and a new last name, then rename that employee."""
    console.write("What is the id of the employee to modify?\n")
    while True:
        search_id = console.read_token()
        console.write("\n")
        if not id_available(employees, search_id):
            break
        console.write("The provided ID doesn't exist in the company!\n")
        console.write("Here is a list of available id's :\n")
        console.write(format_ids(employees))

    employee = _find(employees, search_id)
    console.write("What is the new name of the employee?\n")
    while True:
        new_name = console.read_token()
        console.write("\n")
        if not 3 <= len(new_name) <= 30:
            console.write("The name provided is incorrect!\n")
            continue
        new_name = new_name.capitalize()
        if employee.last_name == new_name:
            console.write("The name provided is the same as the current name!\n")
            continue
        employee.last_name = new_name
        console.write("Employee name modified!\n")
        return employee


def delete_employee(employees: list[Employee], console: Console) -> Employee:
    """Ask for an employee ID and remove that employee."""
    console.write("What is the id of the employee to delete?\n")
    while True:
        search_id = console.read_token()
        if not id_available(employees, search_id):
            employee = _find(employees, search_id)
            employees.remove(employee)
            console.write("Employee deleted!\n")
            return employee
        console.write("The provided ID doesn't exist in the company!\n")
        console.write("Here is a list of available id's :\n")
        console.write(format_ids(employees))


def team_complete(employees: Iterable[Employee]) -> bool:
    """At least one manager, three operators and one assistant."""
    kinds = [e.kind for e in employees]
    return (
        kinds.count("manager") >= 1
        and kinds.count("operator") >= 3
        and kinds.count("asistent") >= 1
    )