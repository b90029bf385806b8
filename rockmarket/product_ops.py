"""Validation and interactive management of the product catalogue."""

from __future__ import annotations

from datetime import date
from typing import Iterable

from rockmarket.console import Console
from rockmarket.employee_ops import valid_date
from rockmarket.products import Clothing, Disc, Product, Vintage

COLOURS = (
    "black", "white", "grey", "red", "orange", "yellow",
    "blue", "green", "purple", "pink", "brown",
)
DISC_KINDS = ("cd", "vinil", "vintage")
_REQUIRED_KINDS = ("cd", "vinil", "vintage", "vestimentatie")


def code_available(products: Iterable[Product], code: str) -> bool:
    """True when no product already uses the given code."""
    return all(p.code != code for p in products)


def valid_colour(colour: str) -> bool:
    return colour in COLOURS


def format_all_products(products: Iterable[Product]) -> str:
    body = "".join(p.describe() + "\n" for p in products)
    return "Products of the company:\n\n" + body


def format_all_codes(products: Iterable[Product]) -> str:
    return "".join(p.code_line() for p in products)


def _find(products: list[Product], code: str) -> Product:
    return next(p for p in products if p.code == code)


def _read_text(console: Console, prompt: str, min_length: int, error: str) -> str:
    console.write(prompt)
    while True:
        text = console.read_token()
        console.write("\n")
        if len(text) >= min_length:
            return text
        console.write(error)


def _read_number(console: Console, reader, accept, error: str):
    while True:
        try:
            value = reader()
        except ValueError:
            console.write("\n")
            console.write(error)
            continue
        console.write("\n")
        if accept(value):
            return value
        console.write(error)


def _read_choice(console: Console, choices: Iterable[str], error: str) -> str:
    choices = tuple(choices)
    while True:
        answer = console.read_token()
        console.write("\n")
        answer = answer.lower()
        if answer in choices:
            return answer
        console.write(error)


def _read_listing_date(console: Console, today: date) -> str:
    console.write("Please introduce the date when the disc was listed\n")
    while True:
        try:
            console.write("Day: ")
            day = console.read_int()
            console.write("Month: ")
            month = console.read_int()
            console.write("Year: ")
            year = console.read_int()
        except ValueError:
            console.write("\n")
            console.write("The provided date is invalid!\n")
            continue
        console.write("\n")
        if valid_date(day, month, year, today):
            return f"{day:02d}.{month:02d}.{year}"
        console.write("The provided date is invalid!\n")


def _read_clothing(console: Console, code: str, name: str, stock: int, price: float) -> Clothing:
    console.write("Please introduce the colour of the product\n")
    colour = _read_choice(console, COLOURS, "This cannot be a colour!\n")

    console.write("Please introduce the brand of the product\n")
    while True:
        brand = console.read_token().capitalize()
        console.write("\n")
        if len(brand) >= 3:
            break
        console.write("The brand of the product must have at least 3 characters!\n")

    return Clothing(code, name, stock, price, colour, brand)


def _read_disc(
    console: Console, code: str, name: str, stock: int, price: float, today: date
) -> Disc:
    console.write("Please introduce the type of disc(cd/vinil/vintage)\n")
    disc_kind = _read_choice(
        console, DISC_KINDS, "The type of disc is incorrect!(cd/vinil/vintage)\n"
    )
    record_label = _read_text(
        console,
        "Please introduce the record label\n",
        3,
        "The record label must have at least 3 characters!\n",
    )
    listed = _read_listing_date(console, today)
    band = _read_text(
        console,
        "Please introduce the band\n",
        3,
        "The band must have at least 3 characters!\n",
    )
    album = _read_text(
        console,
        "Please introduce the album\n",
        3,
        "The album must have at least 3 characters!\n",
    )

    if disc_kind != "vintage":
        return Disc(disc_kind, code, name, stock, price, record_label, listed, band, album)

    console.write("Is the vintage disc mint?\n")
    mint = _read_choice(console, ("true", "false"), "The answer must be true or false!\n")

    console.write("Please introduce the rarity coefficient of the disc\n")
    rarity = _read_number(
        console,
        console.read_int,
        lambda value: 1 <= value <= 5,
        "The rarity coefficient must be between 1 and 5!\n",
    )
    return Vintage(
        code, name, stock, price, record_label, listed, band, album, mint == "true", rarity
    )


def add_new_product(
    products: list[Product], console: Console, today: date | None = None
) -> Product:
    """Ask for every field of a new product, then append and return it."""
    today = today if today is not None else date.today()
    console.write("Introduce the required fields for the new product!\n\n")

    console.write("Please introduce the code of the product\n")
    while True:
        code = console.read_token()
        console.write("\n")
        if code_available(products, code):
            break
        console.write("The code of the product must be unique\n")
        console.write("Here is a list of unavailable codes: \n")
        console.write(format_all_codes(products))

    name = _read_text(
        console,
        "Please introduce the name of the product\n",
        4,
        "The name of the product must have at least 4 characters!\n",
    )

    console.write("Please introduce the base price of the product\n")
    price = _read_number(
        console,
        console.read_float,
        lambda value: value >= 0,
        "The base price must be a positive number!\n",
    )

    console.write("Please introduce the number of products in stock\n")
    stock = _read_number(
        console,
        console.read_int,
        lambda value: value > 0,
        "The number of products in stock must be a positive number!\n",
    )

    console.write("What is the type of product?(vestimentatie/disc)\n")
    kind = _read_choice(
        console,
        ("disc", "vestimentatie"),
        "The type of product is not valid! Please introduce a valid type(disc/vestimentatie)\n",
    )

    if kind == "vestimentatie":
        product: Product = _read_clothing(console, code, name, stock, price)
    else:
        product = _read_disc(console, code, name, stock, price, today)
    products.append(product)
    return product


def _read_existing_code(products: list[Product], console: Console, prompt: str) -> str:
    console.write(prompt)
    while True:
        code = console.read_token()
        console.write("\n")
        if not code_available(products, code):
            return code
        console.write("The provided code doesn't exist in the list of products!\n")
        console.write("Here is a list of available codes :\n")
        console.write(format_all_codes(products))


def modify_product(products: list[Product], console: Console) -> Product:
    """Ask for a product code and a new stock level, then update that product."""
    code = _read_existing_code(
        products, console, "What is the code of the product you want to modify?\n"
    )
    product = _find(products, code)

    console.write("What is the new number of products in stock?\n")
    while True:
        try:
            new_stock = console.read_int()
        except ValueError:
            console.write("\n")
            console.write("The stock value must be a positive number!\n")
            continue
        console.write("\n")
        if new_stock < 0:
            console.write("The stock value must be a positive number!\n")
            continue
        if product.stock == new_stock:
            console.write("The stock value is the same as the old one!\n")
            continue
        product.stock = new_stock
        console.write("Product stock modified!\n")
        return product


def delete_product(products: list[Product], console: Console) -> Product:
    """Ask for a product code and remove that product."""
    code = _read_existing_code(
        products, console, "What is the code of the product to delete?\n"
    )
    product = _find(products, code)
    products.remove(product)
    console.write("Product deleted!\n")
    return product


def catalogue_complete(products: Iterable[Product]) -> bool:
    """At least two CDs, two vinyls, two vintage discs and two clothing items."""
    kinds = [p.kind for p in products]
    return all(kinds.count(kind) >= 2 for kind in _REQUIRED_KINDS)