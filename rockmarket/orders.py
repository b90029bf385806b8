"""Order requests and customer orders."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import ClassVar, Iterable


@dataclass
class Request:
    """One line of an order: a product code and a quantity."""

    code: str
    quantity: int


def read_requests(tokens: Iterable[str]) -> list[Request]:
    """Read a count followed by that many code/quantity pairs."""
    it = iter(tokens)
    try:
        count = int(next(it))
        requests = []
        for _ in range(count):
            code = next(it)
            quantity = int(next(it))
            requests.append(Request(code, quantity))
    except StopIteration:
        raise ValueError("request list ends early") from None
    return requests


def format_requests(requests: Iterable[Request]) -> str:
    """Render requests in the order-file format read by read_requests."""
    requests = list(requests)
    lines = "".join(f"{r.code} {r.quantity}\n" for r in requests)
    return f"\n{len(requests)}\n{lines}"


class Order:
    """An accepted order, numbered in creation order."""

    _next_number: ClassVar[int] = 0

    def __init__(
        self,
        requests: Iterable[Request],
        value: float,
        value_taxed: float,
        packing_time: float,
        created: datetime | None = None,
    ) -> None:
        self.requests = list(requests)
        self.value = value
        self.value_taxed = value_taxed
        self.packing_time = packing_time
        self.order_id = f"Order{Order._next_number}"
        Order._next_number += 1
        self.created = created if created is not None else datetime.now()
        self._ticks = 0

    @property
    def num_requests(self) -> int:
        return len(self.requests)

    @property
    def time_simulator(self) -> float:
        """Simulated time spent packing, in steps of 0.1."""
        return self._ticks / 10

    @classmethod
    def reset_numbering(cls) -> None:
        """Start order numbering again from zero."""
        Order._next_number = 0

    def tick(self) -> None:
        """Advance the simulated packing time by one step."""
        self._ticks += 1

    def is_finished(self) -> bool:
        return self.time_simulator - self.packing_time >= 0

    def describe(self) -> str:
        lines = [
            "",
            f"Order ID: {self.order_id}",
            f"Order date: {self.created.ctime()}",
            f"Order value: {self.value:g}",
            f"Number of requests: {self.num_requests}",
            "Order requests: ",
        ]
        lines.extend(f"Code: {r.code} Quantity: {r.quantity}" for r in self.requests)
        lines.append(f"Packing time: {self.packing_time:g}")
        return "\n".join(lines) + "\n"