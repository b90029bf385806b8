# rockmarket

An interactive console application for running a small shop that sells CDs,
vinyl records, vintage discs and clothing. It keeps track of employees,
products in stock and customer orders, and it writes CSV reports.

## Installation

```
pip install .
```

## Running

```
rockmarket
rockmarket --directory path/to/shop
```

`--directory` (default: the current directory) is where the order file
`orders.txt` is read and appended to, and where the reports are written.
The program ends when you choose Exit, at the end of input, or on Ctrl-C.
When the output is a terminal the screen is cleared between menus.

The shop starts with a built-in team (one manager, three operators, one
assistant) and a built-in catalogue (two CDs, two vinyls, two vintage discs,
two clothing items).

The main menu has these choices:

1. **Manage employees**: add, modify (last name), remove and display employees.
   Employees are managers, operators or assistants. IDs must be unique, and
   first and last names must be 3 to 30 characters long. Each employee needs a
   valid personal numeric code (CNP, 13 digits with a check digit) and a hire
   date, not in the future, at which they were at least 18 years old.
   Salaries are 3500 plus 100 per year of seniority; managers get 125% of
   that, assistants 75%. Operators and assistants get 100 more in their birth
   month, and operators earn 0.5% of the taxed value of each order they take.
2. **Manage stock**: add, modify (stock count), remove and display products.
   Codes must be unique. Discs are `cd`, `vinil` or `vintage`; vintage discs
   have a mint flag and a rarity coefficient from 1 to 5. Clothing has a colour
   (black, white, grey, red, orange, yellow, blue, green, purple, pink, brown)
   and a brand. Shipping adds 5 RON per disc, plus 15 RON times the rarity
   coefficient for vintage discs, and 20 RON per clothing item.
3. **Process orders**: this menu opens only when the team has at least one
   manager, three operators and one assistant, and the catalogue has at least
   two products of each kind.
   - *Place order* asks for code/quantity pairs and appends them to
     `orders.txt`.
   - *Read orders from file* starts afresh (order numbering, the list of
     orders and every operator's queue, count and salary are reset) and reads
     every order in `orders.txt`. An order is dropped if a code is unknown or
     the stock is too low, if it holds more than 5 discs or 3 clothing items,
     or if it is worth less than 100 RON. An accepted order goes to the
     operator with a free slot (at most 3 orders at once) who has processed the
     fewest orders, and its quantities leave the stock; if no operator is free
     it joins a wait list. Packing takes 0.5 per disc and 0.25 per clothing
     item, and queued orders advance by 0.1 each time a new order is read.
   - *Display orders* lists the orders read so far.
4. **Reports**: writes three files into the directory:
   - `highest_numOrd.csv`: the operator who processed the most orders
   - `top3_valuableOrd.csv`: the top three operators by the most valuable order
     they handled
   - `top3_highestSalary.csv`: the three best-paid employees, sorted by name
5. **Exit**

## Order file format

Each order in `orders.txt` is a count of requests followed by that many
`code quantity` pairs. Whitespace separates the values:

```
2
20 1
7 1
```

Reading stops at the end of the file or at the first malformed entry.

## Using it as a library

- `rockmarket.employees`: `Employee`, `Manager`, `Operator`, `Assistant`
- `rockmarket.products`: `Product`, `Disc`, `Vintage`, `Clothing`
- `rockmarket.orders`: `Request`, `Order`, `read_requests`, `format_requests`
- `rockmarket.employee_ops`: `valid_cnp`, `valid_name`, `valid_date`,
  `team_complete` and the interactive `add_new_employee`, `modify_employee`,
  `delete_employee`
- `rockmarket.product_ops`: `valid_colour`, `catalogue_complete` and the
  interactive `add_new_product`, `modify_product`, `delete_product`
- `rockmarket.order_ops`: `valid_request`, `find_free_operator`,
  `process_order_file`, `add_new_order`
- `rockmarket.reports`: `generate_reports`
- `rockmarket.menus` and `rockmarket.app`: the menus and `run`

Functions that take a `today` date use it in place of the current date.
The interactive functions read from a `rockmarket.console.Console`, which can
be built on any text streams:

```python
import io
from rockmarket.console import Console
from rockmarket.app import run

console = Console(stdin=io.StringIO("5\n"), stdout=io.StringIO(), sleep=lambda s: None)
run(console, directory=".")
```

## What it does not do

Employees and products live only in memory: every run starts from the
built-in team and catalogue, and changes are not saved. Only orders (in
`orders.txt`) and the reports are written to disk.