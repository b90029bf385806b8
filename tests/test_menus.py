import io
from datetime import date

import pytest

from rockmarket.console import Console
from rockmarket.employees import Assistant, Manager, Operator
from rockmarket.menus import choose_option, employee_menu, product_menu
from rockmarket.products import Clothing, Disc

TODAY = date(2024, 6, 1)


def make_console(text):
    out = io.StringIO()
    pauses = []
    console = Console(io.StringIO(text), out, sleep=pauses.append, clear_screen=False)
    return console, out, pauses


def make_employees():
    return [
        Manager("1", "Ion", "Setescu", "1500126130407", "24.12.2002", TODAY),
        Operator("2", "Tudor", "Lungescu", "1810915416632", "20.10.2007", TODAY),
        Assistant("5", "Ana", "Mancacescu", "6021202131077", "08.01.2023", TODAY),
    ]


def make_products():
    return [
        Disc("cd", "20", "Disc1", 100, 30, "global", "20.10.2010", "Rock", "Pop"),
        Disc("cd", "21", "Disc2", 100, 40, "global", "20.03.2007", "ceva", "ceva"),
        Clothing("7", "Vestimentatie1", 30, 100, "blue", "Zara"),
    ]


def test_choose_option_skips_invalid_answers():
    console, out, _ = make_console("9 x 3\n")
    assert choose_option(console, ("1", "2", "3")) == "3"
    assert out.getvalue().count("The option selected doesn't exist in the menu!") == 2


def test_choose_option_raises_at_end_of_input():
    console, _, _ = make_console("7\n")
    with pytest.raises(EOFError):
        choose_option(console, ("1", "2"))


def test_employee_menu_back_leaves_list_unchanged():
    employees = make_employees()
    console, out, _ = make_console("5\n")
    employee_menu(employees, console, TODAY)
    assert [e.employee_id for e in employees] == ["1", "2", "5"]
    assert "Manage employees" in out.getvalue()


def test_employee_menu_modifies_last_name():
    employees = make_employees()
    console, out, _ = make_console("2 1 popescu exit 5\n")
    employee_menu(employees, console, TODAY)
    assert employees[0].last_name == "Popescu"
    assert "Employee name modified!" in out.getvalue()


def test_employee_menu_rejects_invalid_continue_answer():
    employees = make_employees()
    console, out, _ = make_console("2 1 popescu maybe exit 5\n")
    employee_menu(employees, console, TODAY)
    assert "Choose a valid answer!" in out.getvalue()
    assert employees[0].last_name == "Popescu"


def test_employee_menu_deletes_employee():
    employees = make_employees()
    console, _, pauses = make_console("3 2 exit 5\n")
    employee_menu(employees, console, TODAY)
    assert [e.employee_id for e in employees] == ["1", "5"]
    assert pauses == []


def test_employee_menu_deleting_last_employee_shows_notice():
    employees = make_employees()[:1]
    console, out, pauses = make_console("3 1 delete 5\n")
    employee_menu(employees, console, TODAY)
    assert employees == []
    assert "You cannot remove any employee because the store is empty!" in out.getvalue()
    assert pauses == [4]


def test_employee_menu_modify_on_empty_list():
    console, out, pauses = make_console("2 5\n")
    employee_menu([], console, TODAY)
    assert "You cannot modify any employee because the store is empty!" in out.getvalue()
    assert pauses == [4]


def test_employee_menu_adds_employee():
    employees = make_employees()
    console, _, _ = make_console(
        "1 7 maria ionescu 1500126130407 1 1 2020 operator exit 5\n"
    )
    employee_menu(employees, console, TODAY)
    added = employees[-1]
    assert added.employee_id == "7"
    assert added.first_name == "Maria"
    assert added.last_name == "Ionescu"
    assert added.kind == "operator"
    assert added.hire_date == "01.01.2020"


def test_employee_menu_displays_one_employee():
    employees = make_employees()
    console, out, _ = make_console("4\n1\nzz\n2\n\n3\n5\n")
    employee_menu(employees, console, TODAY)
    text = out.getvalue()
    assert "The ID entered doesn't exist in the list of employees!" in text
    assert "Id: 2\n" in text
    assert "Prenume: Tudor" in text
    assert "Press ENTER to return to the menu..." in text


def test_employee_menu_displays_all_employees():
    employees = make_employees()
    console, out, _ = make_console("4\n2\n\n3\n5\n")
    employee_menu(employees, console, TODAY)
    text = out.getvalue()
    assert "Employees of the company:" in text
    assert all(f"Id: {e.employee_id}\n" in text for e in employees)


def test_product_menu_modifies_stock():
    products = make_products()
    console, out, _ = make_console("2 20 50 exit 5\n")
    product_menu(products, make_employees(), console, TODAY)
    assert products[0].stock == 50
    assert "Product stock modified!" in out.getvalue()


def test_product_menu_delete_continues_while_employees_exist():
    products = make_products()
    console, _, pauses = make_console("3 20 delete 21 exit 5\n")
    product_menu(products, make_employees(), console, TODAY)
    assert [p.code for p in products] == ["7"]
    assert pauses == []


def test_product_menu_delete_stops_when_no_employees():
    products = make_products()
    console, out, pauses = make_console("3 20 delete 5\n")
    product_menu(products, [], console, TODAY)
    assert [p.code for p in products] == ["21", "7"]
    assert "You cannot remove any product because the list is empty!" in out.getvalue()
    assert pauses == [4]


def test_product_menu_adds_clothing():
    products = make_products()
    console, _, _ = make_console(
        "1 30 Tricou 50 10 vestimentatie red nike exit 5\n"
    )
    product_menu(products, make_employees(), console, TODAY)
    added = products[-1]
    assert isinstance(added, Clothing)
    assert added.code == "30"
    assert added.brand == "Nike"
    assert added.colour == "red"
    assert added.stock == 10


def test_product_menu_displays_one_product():
    products = make_products()
    console, out, _ = make_console("4\n1\n21\n\n3\n5\n")
    product_menu(products, make_employees(), console, TODAY)
    text = out.getvalue()
    assert "Cod: 21\n" in text
    assert "Denumire: Disc2" in text


def test_product_menu_displays_all_products():
    products = make_products()
    console, out, _ = make_console("4\n2\n\n3\n5\n")
    product_menu(products, make_employees(), console, TODAY)
    text = out.getvalue()
    assert "Products of the company:" in text
    assert all(f"Cod: {p.code}\n" in text for p in products)


def test_product_menu_display_on_empty_list():
    console, out, pauses = make_console("4 5\n")
    product_menu([], make_employees(), console, TODAY)
    assert (
        "No products to display because the list of products is empty!"
        in out.getvalue()
    )
    assert pauses == [4]