"""Company employees and their salaries."""

from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import date

BASE_SALARY = 3500
SENIORITY_BONUS = 100
BIRTHDAY_BONUS = 100


def _today(today: date | None) -> date:
    return today if today is not None else date.today()


class Employee(ABC):
    """An employee; hire_date is written as dd.mm.yyyy."""

    kind = ""

    def __init__(
        self,
        employee_id: str,
        first_name: str,
        last_name: str,
        cnp: str,
        hire_date: str,
        today: date | None = None,
    ) -> None:
        self.employee_id = employee_id
        self.first_name = first_name
        self.last_name = last_name
        self.cnp = cnp
        self.hire_date = hire_date
        self.salary = 0.0
        self.calculate_salary(today)

    def seniority(self, today: date | None = None) -> int:
        """Whole years worked up to today."""
        today = _today(today)
        day = int(self.hire_date[0:2])
        month = int(self.hire_date[3:5])
        year = int(self.hire_date[6:10])
        if today.year == year:
            return 0
        years = today.year - year
        if month > today.month or (month == today.month and day > today.day):
            return years - 1
        return years

    def _base_pay(self, today: date | None) -> float:
        return BASE_SALARY + self.seniority(today) * SENIORITY_BONUS

    def _birthday_bonus(self, today: date | None) -> float:
        return BIRTHDAY_BONUS if int(self.cnp[3:5]) == _today(today).month else 0

    @abstractmethod
    def calculate_salary(self, today: date | None = None) -> None:
        """Recompute the monthly salary."""

    def describe(self, today: date | None = None) -> str:
        today = _today(today)
        return (
            "\n"
            f"Functie: {self.kind}\n"
            f"Id: {self.employee_id}\n"
            f"Prenume: {self.first_name}\n"
            f"Nume: {self.last_name}\n"
            f"CNP: {self.cnp}\n"
            f"Data angajarii: {self.hire_date}\n"
            f"Salariu luna {today.month}, {today.year}: {self.salary:g}\n"
        )

    def id_line(self) -> str:
        return f"Id:{self.employee_id} Prenume:{self.first_name} Nume:{self.last_name}\n"


class Manager(Employee):
    kind = "manager"

    def calculate_salary(self, today: date | None = None) -> None:
        self.salary = 1.25 * self._base_pay(today)


class Assistant(Employee):
    kind = "asistent"

    def calculate_salary(self, today: date | None = None) -> None:
        self.salary = 0.75 * self._base_pay(today) + self._birthday_bonus(today)


class Operator(Employee):
    """An employee who packs orders and earns a share of their value."""

    kind = "operator"

    def __init__(
        self,
        employee_id: str,
        first_name: str,
        last_name: str,
        cnp: str,
        hire_date: str,
        today: date | None = None,
    ) -> None:
        self.num_orders = 0
        self.orders: list = []
        self.max_order_value = 0.0
        super().__init__(employee_id, first_name, last_name, cnp, hire_date, today)

    def calculate_salary(self, today: date | None = None) -> None:
        self.salary = self._base_pay(today) + self._birthday_bonus(today)

    def add_order(self, order) -> None:
        """Take an order; the salary grows by half a percent of its taxed value."""
        self.num_orders += 1
        self.orders.append(order)
        self.salary += 0.005 * order.value_taxed
        self.max_order_value = max(self.max_order_value, order.value_taxed)

    def remove_order(self) -> None:
        """Drop the most recently added order."""
        self.orders.pop()

    def reset(self, today: date | None = None) -> None:
        """Clear the order queue and count and recompute the salary."""
        self.orders.clear()
        self.num_orders = 0
        self.calculate_salary(today)

    def order_count_line(self) -> str:
        return f"Operatorul {self.id_line()}a procesat {self.num_orders} comenzi\n"