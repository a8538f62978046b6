"""Dishes that can appear on a menu and in an order."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Dish:
    """A named dish with a price."""

    name: str
    price: float

    def display(self) -> str:
        """Return the dish as a menu line: name, a tab and the price."""
        return f"{self.name}\t${self.price:g}"

    def __str__(self) -> str:
        return self.display()


@dataclass(frozen=True)
class Appetizer(Dish):
    """A starter, which may be marked as spicy."""

    spicy: bool

    def display(self) -> str:
        text = super().display()
        return f"{text} (SPICY)" if self.spicy else text


@dataclass(frozen=True)
class Entree(Dish):
    """A main course that lists its calories."""

    calories: int

    def display(self) -> str:
        return f"{super().display()} ({self.calories} cal)"


@dataclass(frozen=True)
class Dessert(Dish):
    """A dessert, which may be marked as containing nuts."""

    contains_nuts: bool

    def display(self) -> str:
        text = super().display()
        return f"{text} (CONTAINS NUTS)" if self.contains_nuts else text