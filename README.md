# tablemenu

A small ordering system for a restaurant. It keeps a menu of appetizers,
entrees and desserts, takes orders for customers by name and remembers each
customer's order history. It can be used as a library or through an
interactive console.

## Installing

```
pip install .
```

## The console

```
tablemenu
```

The command prints the menu and a welcome banner, then shows the main menu
and reads a choice from standard input:

```
MAIN MENU:
1. View Menu
2. Place New Order
3. View Order History
4. Exit
Enter choice:
```

- **1** prints the menu, grouped into APPETIZERS, ENTREES and DESSERTS.
- **2** asks for a customer name, prints the menu, then reads dish names one
  per line until a line reading `done`. Each dish found is added
  (`Added <name> to order.`); other names get `Dish not found!`. A customer
  not seen before is created on the spot.
- **3** asks for a customer name and prints every order that customer has
  placed, with its total, or `Customer not found.`
- **4** prints `Exiting system. Goodbye!` and exits.

Any other number, or a line that does not start with a number, prints
`Invalid choice. Please try again.` Blank lines are skipped. The program
also ends quietly when input runs out. `tablemenu --help` shows a short usage
message; the command takes no other options.

## Using it as a library

```python
import sys

from tablemenu.dishes import Appetizer, Dessert, Entree
from tablemenu.orders import Order
from tablemenu.restaurant import Restaurant

restaurant = Restaurant()
restaurant.menu.add_dish(Appetizer("Tabouleh", 12.99, False))
restaurant.menu.add_dish(Entree("Khorovats", 28.99, 950))
restaurant.menu.add_dish(Dessert("Baklava", 8.99, True))

print(restaurant.show_menu())

customer = restaurant.get_customer_by_name("Ani")
order = Order(customer)
order.add_dish(restaurant.menu.get_dish_by_name("Baklava"))
customer.place_order(order)
print(customer.view_order_history())

restaurant.view_customer_order_history("Ani", sys.stdout)
```

The pieces:

- `tablemenu.dishes`: frozen dataclasses `Dish(name, price)` and its kinds
  `Appetizer(name, price, spicy)`, `Entree(name, price, calories)` and
  `Dessert(name, price, contains_nuts)`. `display()` returns a line such as
  `Khorovats\t$28.99 (950 cal)`, with ` (SPICY)` or ` (CONTAINS NUTS)` added
  where they apply.
- `tablemenu.menu.Menu`: `add_dish`, `display()` (the grouped menu text) and
  `get_dish_by_name`, which returns `None` when no dish has that name. A menu
  can be iterated and has a length.
- `tablemenu.orders`: `Order(customer)` with `add_dish`, `calculate_total()`
  (returns the new `total_price`) and `display()`; `Customer(name,
  contact_info="")` with `place_order`, which stores a copy of the order, and
  `view_order_history()`, which returns the history as text.
- `tablemenu.restaurant.Restaurant(menu=None)`: `show_menu()`,
  `get_customer_by_name` (creates the customer if needed),
  `place_new_order(customer_name, lines, out)`, which reads dish names from
  any iterable of lines and writes its prompts to `out`, and
  `view_customer_order_history(customer_name, out)`, which returns whether
  the customer was found.
- `tablemenu.cli`: `run(restaurant, stdin, stdout)` drives the console loop
  for any restaurant and streams; `main(argv=None)` is the `tablemenu`
  command.

The `display` and history methods return text rather than printing it.

## What it does not do

- The `tablemenu` command starts with an empty menu, and the console has no
  way to add dishes. To offer dishes, build a `Restaurant` with a filled
  `Menu` and pass it to `tablemenu.cli.run`.
- Nothing is saved: customers, orders and history live only as long as the
  program runs.

## Running the tests

```
pip install .[test]
pytest
```