"""Order checking, operator assignment and processing of the order file."""

from __future__ import annotations

from typing import Iterable, Iterator, TextIO

from rockmarket.console import Console
from rockmarket.employees import Employee, Operator
from rockmarket.orders import Order, Request, format_requests
from rockmarket.products import Product

SEPARATOR = "=" * 110
MAX_DISCS = 5
MAX_CLOTHES = 3
MIN_ORDER_VALUE = 100
MAX_OPERATOR_QUEUE = 3


def valid_request(products: Iterable[Product], code: str, quantity: int) -> bool:
    """True when a product with this code has at least this many items in stock."""
    return any(p.code == code and quantity <= p.stock for p in products)


def format_all_orders(orders: Iterable[Order]) -> str:
    return "".join(order.describe() for order in orders)


def decrement_stock(products: Iterable[Product], requests: Iterable[Request]) -> None:
    """Take the requested quantities out of stock."""
    products = list(products)
    for request in requests:
        for product in products:
            if product.code == request.code:
                product.stock -= request.quantity


def min_orders(employees: Iterable[Employee]) -> Employee | None:
    """The first employee, replaced by a later operator only when both are
    operators and the later one has processed fewer orders."""
    smallest = None
    for employee in employees:
        if smallest is None:
            smallest = employee
        elif (
            isinstance(employee, Operator)
            and isinstance(smallest, Operator)
            and employee.num_orders < smallest.num_orders
        ):
            smallest = employee
    return smallest


def find_free_operator(employees: Iterable[Employee]) -> Operator | None:
    """The operator with a free slot who has processed the fewest orders."""
    chosen = None
    for employee in employees:
        if isinstance(employee, Operator) and len(employee.orders) < MAX_OPERATOR_QUEUE:
            if chosen is None or employee.num_orders < chosen.num_orders:
                chosen = employee
    return chosen


def remove_expired_orders(employees: Iterable[Employee], console: Console) -> list[Order]:
    """Advance every queued order by one step and drop the finished ones."""
    finished: list[Order] = []
    for employee in employees:
        if not isinstance(employee, Operator):
            continue
        remaining = []
        for order in employee.orders:
            order.tick()
            if order.is_finished():
                console.write(
                    f"\n{order.order_id} was finished by operator with {employee.id_line()}"
                )
                finished.append(order)
            else:
                remaining.append(order)
        employee.orders[:] = remaining
    return finished


def format_order_counts(employees: Iterable[Employee]) -> str:
    return "".join(
        e.order_count_line() for e in employees if isinstance(e, Operator)
    )


def _tokens(stream: TextIO) -> Iterator[str]:
    for line in stream:
        yield from line.split()


def _next_int(tokens: Iterator[str]) -> int | None:
    token = next(tokens, None)
    if token is None:
        return None
    try:
        return int(token)
    except ValueError:
        return None


def _next_request(tokens: Iterator[str]) -> Request | None:
    code = next(tokens, None)
    if code is None:
        return None
    quantity = _next_int(tokens)
    if quantity is None:
        return None
    return Request(code, quantity)


def process_order_file(
    employees: list[Employee],
    products: list[Product],
    orders: list[Order],
    stream: TextIO,
    console: Console,
) -> list[Order]:
    """Read orders from the stream and hand them to operators.

    Accepted orders are appended to orders; those still waiting for an
    operator at the end are returned.  Reading stops at the end of the data
    or at the first malformed entry.
    """
    wait_list: list[Order] = []
    tokens = _tokens(stream)

    while (count := _next_int(tokens)) is not None:
        console.write(SEPARATOR + "\n")
        remove_expired_orders(employees, console)

        requests: list[Request] = []
        discs = clothes = 0
        value = value_taxed = packing_time = 0.0
        console.write("\nAttempting to process order\n\n")

        for _ in range(count):
            request = _next_request(tokens)
            if request is None:
                return wait_list
            if not valid_request(products, request.code, request.quantity):
                console.write(
                    "Invalid code or quantity requested isn't available in stock. "
                    "Order will be dropped!\n"
                )
                break
            for product in products:
                if product.code != request.code:
                    continue
                value += int(product.base_price) * request.quantity
                value_taxed += product.shipping_price() * request.quantity
                if product.kind == "vestimentatie":
                    clothes += request.quantity
                    packing_time += 0.25 * request.quantity
                else:
                    discs += request.quantity
                    packing_time += 0.5 * request.quantity
            requests.append(request)

        if len(requests) == count:
            if discs <= MAX_DISCS and clothes <= MAX_CLOTHES and value >= MIN_ORDER_VALUE:
                order = Order(requests, value, value_taxed, packing_time)
                orders.append(order)
                operator = find_free_operator(employees)
                if operator is None:
                    wait_list.append(order)
                    console.write(
                        f"{order.order_id} was added to wait list because "
                        "there are no available operators!\n"
                    )
                elif not wait_list:
                    operator.add_order(order)
                    console.write(
                        f"{order.order_id} accepted by operator with {operator.id_line()}"
                    )
                    decrement_stock(products, requests)
                else:
                    wait_list.append(order)
                    console.write(
                        f"{order.order_id} will go in the wait list because "
                        "another order was already waiting!\n"
                    )
                    waiting = wait_list.pop(0)
                    operator.add_order(waiting)
                    console.write(
                        f"\n{waiting.order_id} accepted by operator with {operator.id_line()}"
                    )
            else:
                console.write(
                    "Too many products or order value is lower than 100 RON. "
                    "Order will be dropped!\n"
                )

        console.write(SEPARATOR + "\n")
        console.pause(2)

    return wait_list


def add_new_order(stream: TextIO, console: Console) -> list[Request]:
    """Ask for code/quantity pairs and append them to the order stream."""
    console.write("Place order\n\n")
    requests: list[Request] = []

    while True:
        console.write("Please introduce the code and the quantity of the product\n")
        code = console.read_token()
        try:
            quantity = console.read_int()
        except ValueError:
            continue
        requests.append(Request(code, quantity))

        console.write("Do you want to add another product?(y/n)\n")
        while True:
            answer = console.read_token()
            console.write("\n")
            if answer[0].lower() in ("y", "n"):
                break
            console.write("Choose a valid answer!\n")
        if answer[0].lower() == "n":
            break

    try:
        stream.write(format_requests(requests))
    except OSError:
        console.write("Failed to process order!\n")
    else:
        console.pause(4)
        console.write("Your order was processed!\n")
    return requests