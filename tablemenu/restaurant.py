"""A restaurant: its menu, customers and placed orders."""

from __future__ import annotations

from collections.abc import Iterable
from typing import TextIO

from .menu import Menu
from .orders import Customer, Order


class Restaurant:
    """Takes orders from customers against a menu."""

    def __init__(self, menu: Menu | None = None) -> None:
        self.menu = menu if menu is not None else Menu()
        self.customers: list[Customer] = []
        self.orders: list[Order] = []

    def show_menu(self) -> str:
        """Return the menu text."""
        return self.menu.display()

    def get_customer_by_name(self, name: str) -> Customer:
        """Return the customer with this name, registering a new one if needed."""
        for customer in self.customers:
            if customer.name == name:
                return customer
        customer = Customer(name)
        self.customers.append(customer)
        return customer

    def place_new_order(self, customer_name: str, lines: Iterable[str], out: TextIO) -> Order:
        """Read dish names from lines until 'done' or the end, and place the order."""
        customer = self.get_customer_by_name(customer_name)
        order = Order(customer)
        out.write(self.show_menu())
        out.write("\nEnter dish names to order (type 'done' when finished):\n")
        source = iter(lines)
        while True:
            out.write("> ")
            line = next(source, None)
            if line is None:
                break
            dish_name = line.removesuffix("\n")
            if dish_name == "done":
                break
            dish = self.menu.get_dish_by_name(dish_name)
            if dish is None:
                out.write("Dish not found!\n")
            else:
                order.add_dish(dish)
                out.write(f"Added {dish_name} to order.\n")
        customer.place_order(order)
        self.orders.append(order)
        out.write("Order placed successfully!\n")
        return order

    def view_customer_order_history(self, customer_name: str, out: TextIO) -> bool:
        """Write a known customer's history to out; return whether they were found."""
        for customer in self.customers:
            if customer.name == customer_name:
                out.write(customer.view_order_history())
                return True
        out.write("Customer not found.\n")
        return False