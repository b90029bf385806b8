"""Products sold by the shop: discs, vintage discs and clothing."""

from __future__ import annotations

from abc import ABC, abstractmethod


class Product(ABC):
    """A product in stock, identified by a unique code."""

    def __init__(self, code: str, name: str, stock: int, base_price: float) -> None:
        self.kind = ""
        self.code = code
        self.name = name
        self.stock = stock
        self.base_price = base_price

    @abstractmethod
    def shipping_price(self) -> float:
        """Price including transport taxes."""

    def describe(self) -> str:
        return (
            "\n"
            f"Tip: {self.kind}\n"
            f"Cod: {self.code}\n"
            f"Denumire: {self.name}\n"
            f"Produse de acelasi tip in stoc: {self.stock}\n"
            f"Pret initial: {self.base_price:g} RON\n"
            f"Pret cu taxe de transport: {self.shipping_price():g} RON\n"
        )

    def code_line(self) -> str:
        return f"Cod: {self.code} Denumire: {self.name}\n"


class Disc(Product):
    """A CD or vinyl record."""

    def __init__(
        self,
        kind: str,
        code: str,
        name: str,
        stock: int,
        base_price: float,
        record_label: str,
        date: str,
        band: str,
        album: str,
    ) -> None:
        super().__init__(code, name, stock, base_price)
        self.kind = kind
        self.record_label = record_label
        self.date = date
        self.band = band
        self.album = album

    def shipping_price(self) -> float:
        return self.base_price + 5

    def describe(self) -> str:
        return super().describe() + (
            f"Casa de discuri: {self.record_label}\n"
            f"Data: {self.date}\n"
            f"Trupa: {self.band}\n"
            f"Album: {self.album}\n"
        )


class Vintage(Disc):
    """A collectible disc whose transport cost grows with rarity."""

    def __init__(
        self,
        code: str,
        name: str,
        stock: int,
        base_price: float,
        record_label: str,
        date: str,
        band: str,
        album: str,
        mint: bool,
        rarity: int,
    ) -> None:
        super().__init__(
            "vintage", code, name, stock, base_price, record_label, date, band, album
        )
        self.mint = mint
        self.rarity = rarity

    def shipping_price(self) -> float:
        return super().shipping_price() + 15 * self.rarity

    def describe(self) -> str:
        return super().describe() + (
            f"Mint: {'true' if self.mint else 'false'}\n"
            f"Coeficient de raritate: {self.rarity}\n"
        )


class Clothing(Product):
    """An item of clothing."""

    def __init__(
        self,
        code: str,
        name: str,
        stock: int,
        base_price: float,
        colour: str,
        brand: str,
    ) -> None:
        super().__init__(code, name, stock, base_price)
        self.kind = "vestimentatie"
        self.colour = colour
        self.brand = brand

    def shipping_price(self) -> float:
        return self.base_price + 20

    def describe(self) -> str:
        return super().describe() + f"Culoare: {self.colour}\nMarca: {self.brand}\n"