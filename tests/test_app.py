import io
import sys
from datetime import date

import pytest

from rockmarket.app import (
    default_employees,
    default_products,
    main,
    order_menu,
    report_menu,
    run,
)
from rockmarket.console import Console
from rockmarket.employee_ops import team_complete
from rockmarket.orders import Request, read_requests
from rockmarket.product_ops import catalogue_complete

TODAY = date(2024, 6, 1)


def make_console(text):
    out = io.StringIO()
    pauses = []
    console = Console(
        stdin=io.StringIO(text), stdout=out, sleep=pauses.append, clear_screen=False
    )
    return console, out, pauses


def test_default_employees_form_complete_team():
    employees = default_employees(TODAY)
    assert [e.employee_id for e in employees] == ["1", "2", "3", "4", "5"]
    assert [e.kind for e in employees] == [
        "manager", "operator", "operator", "operator", "asistent",
    ]
    assert team_complete(employees)


def test_default_products_form_complete_catalogue():
    products = default_products()
    assert [p.code for p in products] == ["20", "21", "22", "23", "24", "25", "7", "8"]
    assert catalogue_complete(products)
    assert [p.kind for p in products].count("vintage") == 2


def test_order_menu_leaves_when_team_incomplete(tmp_path):
    console, out, pauses = make_console("")
    employees = default_employees(TODAY)[:2]
    order_menu(employees, default_products(), [], console, tmp_path / "orders.txt", TODAY)
    assert "The team is incomplete!" in out.getvalue()
    assert "Process orders" not in out.getvalue()
    assert pauses == [4]


def test_order_menu_reads_orders_from_file(tmp_path):
    path = tmp_path / "orders.txt"
    path.write_text("2\n20 2\n21 1\n", encoding="utf-8")
    console, out, _ = make_console("1\n\n4\n")
    employees = default_employees(TODAY)
    products = default_products()
    orders = []
    order_menu(employees, products, orders, console, path, TODAY)
    assert len(orders) == 1
    assert orders[0].order_id == "Order0"
    assert employees[1].num_orders == 1
    assert products[0].stock == 100 - 2
    assert "Order0 accepted by operator with" in out.getvalue()


def test_reading_file_again_restarts_numbering(tmp_path):
    path = tmp_path / "orders.txt"
    path.write_text("2\n20 2\n21 1\n", encoding="utf-8")
    console, _, _ = make_console("1\n\n1\n\n4\n")
    employees = default_employees(TODAY)
    orders = []
    order_menu(employees, default_products(), orders, console, path, TODAY)
    assert [o.order_id for o in orders] == ["Order0"]
    assert sum(e.num_orders for e in employees[1:4]) == 1


def test_order_menu_missing_file(tmp_path):
    console, out, pauses = make_console("1\n4\n")
    order_menu(
        default_employees(TODAY), default_products(), [], console,
        tmp_path / "missing.txt", TODAY,
    )
    assert "Unable to open file" in out.getvalue()
    assert 4 in pauses


def test_order_menu_places_order(tmp_path):
    path = tmp_path / "orders.txt"
    console, out, _ = make_console("2\n20 1\nn\n\n4\n")
    order_menu(default_employees(TODAY), default_products(), [], console, path, TODAY)
    assert read_requests(path.read_text(encoding="utf-8").split()) == [Request("20", 1)]
    assert "Your order was processed!" in out.getvalue()


def test_order_menu_display_without_orders(tmp_path):
    console, out, _ = make_console("3\n4\n")
    order_menu(
        default_employees(TODAY), default_products(), [], console,
        tmp_path / "orders.txt", TODAY,
    )
    assert "No orders to display because the list of orders is empty!" in out.getvalue()


def test_report_menu_writes_reports(tmp_path):
    console, out, _ = make_console("1\n\n2\n")
    report_menu(default_employees(TODAY), [], console, tmp_path)
    first = (tmp_path / "highest_numOrd.csv").read_text(encoding="utf-8").splitlines()
    second = (tmp_path / "top3_valuableOrd.csv").read_text(encoding="utf-8").splitlines()
    third = (tmp_path / "top3_highestSalary.csv").read_text(encoding="utf-8").splitlines()
    assert first[0] == "ID,Name,Number of orders"
    assert len(second) == 4
    assert third[0] == "ID,Name,Salary"
    assert len(third) == 4
    assert "Reports generated!" in out.getvalue()


def test_run_exits_on_five(tmp_path):
    console, out, _ = make_console("5\n")
    run(console, tmp_path, TODAY)
    assert out.getvalue().startswith("Rock Market")
    assert list(tmp_path.iterdir()) == []


def test_run_rejects_unknown_option(tmp_path):
    console, out, _ = make_console("9\n5\n")
    run(console, tmp_path, TODAY)
    assert "The option selected doesn't exist in the menu!" in out.getvalue()


def test_run_generates_reports_in_directory(tmp_path):
    console, _, _ = make_console("4\n1\n\n2\n5\n")
    run(console, tmp_path, TODAY)
    assert (tmp_path / "highest_numOrd.csv").exists()
    assert (tmp_path / "top3_highestSalary.csv").exists()


def test_run_stops_at_end_of_input(tmp_path):
    console, _, _ = make_console("")
    with pytest.raises(EOFError):
        run(console, tmp_path, TODAY)


def test_main_exits_cleanly(tmp_path, monkeypatch, capsys):
    monkeypatch.setattr(sys, "stdin", io.StringIO("5\n"))
    assert main(["--directory", str(tmp_path)]) == 0
    assert "Rock Market" in capsys.readouterr().out


def test_main_handles_end_of_input(tmp_path, monkeypatch, capsys):
    monkeypatch.setattr(sys, "stdin", io.StringIO(""))
    assert main(["--directory", str(tmp_path)]) == 0
    assert "Select option" in capsys.readouterr().out