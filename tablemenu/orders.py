"""Orders and the customers who place them."""

from __future__ import annotations

from dataclasses import dataclass, field, replace

from .dishes import Dish


@dataclass(eq=False)
class Order:
    """Dishes ordered by one customer, with their running total."""

    customer: Customer = field(repr=False)
    dishes: list[Dish] = field(default_factory=list)
    total_price: float = field(init=False, default=0.0)

    def __post_init__(self) -> None:
        self.dishes = list(self.dishes)
        self.calculate_total()

    def add_dish(self, dish: Dish) -> None:
        """Add a dish and update the total."""
        self.dishes.append(dish)
        self.calculate_total()

    def calculate_total(self) -> float:
        """Recompute the total from the ordered dishes and return it."""
        self.total_price = sum((dish.price for dish in self.dishes), 0.0)
        return self.total_price

    def display(self) -> str:
        """Return the order as text: its dishes and the total."""
        lines = [f"\nOrder for {self.customer.name}:\n"]
        lines.extend(f"- {dish.display()}\n" for dish in self.dishes)
        lines.append(f"Total: ${self.total_price:g}\n")
        return "".join(lines)


@dataclass(eq=False)
class Customer:
    """A customer and the orders they have placed."""

    name: str
    contact_info: str = ""
    order_history: list[Order] = field(default_factory=list)

    def place_order(self, order: Order) -> None:
        """Record a snapshot of the order in the history."""
        self.order_history.append(replace(order))

    def view_order_history(self) -> str:
        """Return every past order as text."""
        header = f"\nOrder History for {self.name}:\n"
        return header + "".join(order.display() for order in self.order_history)