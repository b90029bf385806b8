"""Interactive sub-menus for managing employees and products."""

from __future__ import annotations

from datetime import date
from typing import Callable, Iterable

from rockmarket.console import Console
from rockmarket.employee_ops import (
    add_new_employee,
    delete_employee,
    format_all_employees,
    format_ids,
    id_available,
    modify_employee,
)
from rockmarket.employees import Employee
from rockmarket.product_ops import (
    add_new_product,
    code_available,
    delete_product,
    format_all_codes,
    format_all_products,
    modify_product,
)
from rockmarket.products import Product

_INVALID_OPTION = "The option selected doesn't exist in the menu!\n"
_PRESS_ENTER = "Press ENTER to return to the menu..."
_EMPTY_PAUSE = 4


def choose_option(console: Console, options: Iterable[str]) -> str:
    """Read words until one of the given options is entered and return it."""
    options = tuple(options)
    while True:
        answer = console.read_token()
        console.write("\n")
        if answer in options:
            return answer
        console.write(_INVALID_OPTION)


def _ask_again(console: Console, prompt: str, again: str) -> bool:
    """Ask whether to repeat an action; True for the repeat word, False for exit."""
    while True:
        console.write(prompt)
        answer = console.read_token().lower()
        console.write("\n")
        if answer in ("exit", again):
            return answer == again
        console.write("Choose a valid answer!\n")


def _repeat(console: Console, action: Callable[[], object], prompt: str, again: str) -> None:
    while True:
        action()
        if not _ask_again(console, prompt, again):
            console.clear()
            return


def _empty_notice(console: Console, message: str) -> None:
    console.write(message)
    console.pause(_EMPTY_PAUSE)


def _display_one_employee(
    employees: list[Employee], console: Console, today: date | None
) -> None:
    while True:
        console.write("\nEnter the ID of the employee you want to display: ")
        search_id = console.read_token()
        console.write("\n")
        if not id_available(employees, search_id):
            employee = next(e for e in employees if e.employee_id == search_id)
            console.write(employee.describe(today) + "\n")
            console.write(_PRESS_ENTER)
            console.wait_enter()
            return
        console.write("The ID entered doesn't exist in the list of employees!\n")
        console.write("Here are the IDs of the employees: \n")
        console.write(format_ids(employees))


def _employee_display_menu(
    employees: list[Employee], console: Console, today: date | None
) -> None:
    while True:
        console.clear()
        console.write(
            "Display options\n\n"
            "1. Display employee\n"
            "2. Display all employees\n"
            "3. Back\n\n"
            "Select option: \n"
        )
        choice = choose_option(console, ("1", "2", "3"))
        console.clear()
        if choice == "1":
            _display_one_employee(employees, console, today)
        elif choice == "2":
            console.write(format_all_employees(employees, today))
            console.write(_PRESS_ENTER)
            console.wait_enter()
        else:
            return


def employee_menu(
    employees: list[Employee], console: Console, today: date | None = None
) -> None:
    """Add, modify, remove and display employees until Back is chosen."""
    while True:
        console.clear()
        console.write(
            "Manage employees\n\n"
            "1. Add employee\n"
            "2. Modify employee\n"
            "3. Remove employee\n"
            "4. Display employees\n"
            "5. Back\n\n"
            "Select option: \n"
        )
        choice = choose_option(console, ("1", "2", "3", "4", "5"))

        if choice == "1":
            console.clear()
            _repeat(
                console,
                lambda: add_new_employee(employees, console, today),
                "\nExit or add new employee(exit/new)\n",
                "new",
            )
        elif choice == "2":
            console.clear()
            if employees:
                _repeat(
                    console,
                    lambda: modify_employee(employees, console),
                    "\nExit or modify another employee(exit/modify)\n",
                    "modify",
                )
            else:
                _empty_notice(
                    console,
                    "You cannot modify any employee because the store is empty!\n",
                )
        elif choice == "3":
            console.clear()
            removed_all = not employees
            while employees:
                delete_employee(employees, console)
                if not _ask_again(
                    console, "\nExit or delete another employee(exit/delete)\n", "delete"
                ):
                    console.clear()
                    break
                if not employees:
                    removed_all = True
            if removed_all:
                _empty_notice(
                    console,
                    "You cannot remove any employee because the store is empty!\n",
                )
        elif choice == "4":
            if employees:
                _employee_display_menu(employees, console, today)
            else:
                _empty_notice(
                    console, "No employees to display because the store is empty!\n"
                )
        else:
            console.clear()
            return


def _display_one_product(products: list[Product], console: Console) -> None:
    while True:
        console.write("\nEnter the code of the product you want to display: ")
        search_code = console.read_token()
        console.write("\n")
        if not code_available(products, search_code):
            product = next(p for p in products if p.code == search_code)
            console.write(product.describe() + "\n")
            console.write(_PRESS_ENTER)
            console.wait_enter()
            return
        console.write("The code entered doesn't exist in the list of products!\n")
        console.write("Here are the IDs of the employees: \n")
        console.write(format_all_codes(products))


def _product_display_menu(products: list[Product], console: Console) -> None:
    while True:
        console.clear()
        console.write(
            "Display options\n\n"
            "1. Display product\n"
            "2. Display all products\n"
            "3. Back\n\n"
            "Select option: \n"
        )
        choice = choose_option(console, ("1", "2", "3"))
        console.clear()
        if choice == "1":
            _display_one_product(products, console)
        elif choice == "2":
            console.write(format_all_products(products))
            console.write(_PRESS_ENTER)
            console.wait_enter()
        else:
            return


def product_menu(
    products: list[Product],
    employees: list[Employee],
    console: Console,
    today: date | None = None,
) -> None:
    """Add, modify, remove and display products until Back is chosen.

    After a deletion the loop ends with the empty-list notice when the list
    of employees is empty.
    """
    while True:
        console.clear()
        console.write(
            "Manage products\n\n"
            "1. Add product\n"
            "2. Modify product\n"
            "3. Remove product\n"
            "4. Display products\n"
            "5. Back\n\n"
            "Select option: \n"
        )
        choice = choose_option(console, ("1", "2", "3", "4", "5"))

        if choice == "1":
            console.clear()
            _repeat(
                console,
                lambda: add_new_product(products, console, today),
                "\nExit or add new product(exit/new)\n",
                "new",
            )
        elif choice == "2":
            console.clear()
            if products:
                _repeat(
                    console,
                    lambda: modify_product(products, console),
                    "\nExit or modify another product(exit/modify)\n",
                    "modify",
                )
            else:
                _empty_notice(
                    console,
                    "You cannot modify any product because the list is empty!\n",
                )
        elif choice == "3":
            console.clear()
            show_notice = not products
            if products:
                while True:
                    delete_product(products, console)
                    if not _ask_again(
                        console,
                        "\nExit or delete another product(exit/delete)\n",
                        "delete",
                    ):
                        console.clear()
                        break
                    if not employees:
                        show_notice = True
                        break
            if show_notice:
                _empty_notice(
                    console,
                    "You cannot remove any product because the list is empty!\n",
                )
        elif choice == "4":
            if products:
                _product_display_menu(products, console)
            else:
                _empty_notice(
                    console,
                    "No products to display because the list of products is empty!\n",
                )
        else:
            console.clear()
            return