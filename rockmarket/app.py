"""The shop's main menu, the order and report menus and the command entry point."""

from __future__ import annotations

import argparse
from datetime import date
from pathlib import Path

from rockmarket.console import Console
from rockmarket.employee_ops import team_complete
from rockmarket.employees import Assistant, Employee, Manager, Operator
from rockmarket.menus import choose_option, employee_menu, product_menu
from rockmarket.order_ops import add_new_order, format_all_orders, process_order_file
from rockmarket.orders import Order
from rockmarket.product_ops import catalogue_complete
from rockmarket.products import Clothing, Disc, Product, Vintage
from rockmarket.reports import generate_reports

ORDERS_FILE = "orders.txt"
REPORT_FILES = ("highest_numOrd.csv", "top3_valuableOrd.csv", "top3_highestSalary.csv")
_PRESS_ENTER = "Press ENTER to return to the menu..."
_NOTICE_PAUSE = 4


def default_employees(today: date | None = None) -> list[Employee]:
    """The team the shop starts with."""
    return [
        Manager("1", "Ion", "Setescu", "1500126130407", "24.12.2002", today),
        Operator("2", "Tudor", "Lungescu", "1810915416632", "20.10.2007", today),
        Operator("3", "Andrei", "Popa", "2731202139069", "20.03.2003", today),
        Operator("4", "Luca", "Camliescu", "5031002132668", "07.03.2024", today),
        Assistant("5", "Ana", "Mancacescu", "6021202131077", "08.01.2023", today),
    ]


def default_products() -> list[Product]:
    """The catalogue the shop starts with."""
    return [
        Disc("cd", "20", "Disc1", 100, 30, "global", "20.10.2010", "Rock", "Pop"),
        Disc("cd", "21", "Disc2", 100, 40, "global", "20.03.2007", "ceva", "ceva"),
        Disc("vinil", "22", "Disc3", 100, 50, "global", "07.03.2024", "ceva", "ceva"),
        Disc("vinil", "23", "Disc4", 10, 60, "global", "24.12.2024", "ceva", "ceva"),
        Vintage("24", "Disc5", 100, 70, "global", "20.10.2010", "ceva", "ceva", True, 2),
        Vintage("25", "Disc6", 10, 80, "global", "20.03.2007", "ceva", "ceva", False, 4),
        Clothing("7", "Vestimentatie1", 30, 100, "blue", "Zara"),
        Clothing("8", "Vestimentatie2", 30, 175, "pink", "Gucci"),
    ]


def _read_order_file(
    employees: list[Employee],
    products: list[Product],
    orders: list[Order],
    console: Console,
    orders_path: Path,
    today: date | None,
) -> None:
    Order.reset_numbering()
    orders.clear()
    for employee in employees:
        if isinstance(employee, Operator):
            employee.reset(today)
    try:
        stream = open(orders_path, encoding="utf-8")
    except OSError:
        console.write("Unable to open file")
        console.pause(_NOTICE_PAUSE)
        return
    with stream:
        process_order_file(employees, products, orders, stream, console)
    console.write(_PRESS_ENTER)
    console.wait_enter()


def _place_order(console: Console, orders_path: Path) -> None:
    try:
        stream = open(orders_path, "a", encoding="utf-8")
    except OSError:
        console.write("Unable to open file")
        console.pause(_NOTICE_PAUSE)
        return
    with stream:
        add_new_order(stream, console)
    console.write(_PRESS_ENTER)
    console.wait_enter()


def order_menu(
    employees: list[Employee],
    products: list[Product],
    orders: list[Order],
    console: Console,
    orders_path: str | Path,
    today: date | None = None,
) -> None:
    """Read, place and display orders until Back is chosen.

    The menu is left at once when the team or the catalogue is incomplete.
    """
    orders_path = Path(orders_path)
    while True:
        console.clear()
        team_ok = team_complete(employees)
        catalogue_ok = catalogue_complete(products)
        if not team_ok:
            console.write("The team is incomplete!\n")
        if not catalogue_ok:
            console.write("The list of products is incomplete!\n")
        if not (team_ok and catalogue_ok):
            console.pause(_NOTICE_PAUSE)
            return

        console.write(
            "Process orders\n\n"
            "1. Read orders from file\n"
            "2. Place order\n"
            "3. Display orders\n"
            "4. Back\n\n"
            "Select option: \n"
        )
        choice = choose_option(console, ("1", "2", "3", "4"))
        console.clear()

        if choice == "1":
            _read_order_file(employees, products, orders, console, orders_path, today)
        elif choice == "2":
            _place_order(console, orders_path)
        elif choice == "3":
            if orders:
                console.write(format_all_orders(orders))
                console.write("\n" + _PRESS_ENTER)
                console.wait_enter()
            else:
                console.write("No orders to display because the list of orders is empty!\n")
                console.pause(_NOTICE_PAUSE)
        else:
            return


def report_menu(
    employees: list[Employee],
    orders: list[Order],
    console: Console,
    directory: str | Path,
) -> None:
    """Generate the CSV reports into the directory until Back is chosen."""
    directory = Path(directory)
    while True:
        console.clear()
        console.write(
            "Reports\n\n"
            "1. Generate reports\n"
            "2. Back\n\n"
            "Select option: \n"
        )
        choice = choose_option(console, ("1", "2"))
        console.clear()
        if choice != "1":
            return

        paths = [directory / name for name in REPORT_FILES]
        with open(paths[0], "w", encoding="utf-8") as report1, open(
            paths[1], "w", encoding="utf-8"
        ) as report2, open(paths[2], "w", encoding="utf-8") as report3:
            generate_reports(employees, orders, report1, report2, report3)
        console.pause(_NOTICE_PAUSE)
        console.write("Reports generated!\n")
        console.write("\n" + _PRESS_ENTER)
        console.wait_enter()


def run(
    console: Console | None = None,
    directory: str | Path | None = None,
    today: date | None = None,
) -> None:
    """Show the main menu until Exit is chosen."""
    console = console if console is not None else Console()
    directory = Path(directory) if directory is not None else Path.cwd()
    employees = default_employees(today)
    products = default_products()
    orders: list[Order] = []

    while True:
        console.clear()
        console.write(
            "Rock Market\n\n"
            "1. Manage employees\n"
            "2. Manage stock\n"
            "3. Process orders\n"
            "4. Reports\n"
            "5. Exit\n\n"
            "Select option: \n"
        )
        choice = choose_option(console, ("1", "2", "3", "4", "5"))
        if choice == "5":
            return
        console.clear()

        if choice == "1":
            employee_menu(employees, console, today)
        elif choice == "2":
            product_menu(products, employees, console, today)
        elif choice == "3":
            order_menu(
                employees, products, orders, console, directory / ORDERS_FILE, today
            )
        else:
            report_menu(employees, orders, console, directory)


def main(argv: list[str] | None = None) -> int:
    """Start the interactive shop."""
    parser = argparse.ArgumentParser(
        prog="rockmarket", description="Manage a music and clothing shop."
    )
    parser.add_argument(
        "--directory",
        default=".",
        help="directory holding the order file and the reports",
    )
    args = parser.parse_args(argv)
    try:
        run(Console(), Path(args.directory))
    except (EOFError, KeyboardInterrupt):
        pass
    return 0