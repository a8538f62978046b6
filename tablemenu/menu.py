"""A restaurant menu grouped into appetizers, entrees and desserts."""

from __future__ import annotations

from collections.abc import Iterable, Iterator

from .dishes import Appetizer, Dessert, Dish, Entree

_SECTIONS = (
    ("APPETIZERS", Appetizer),
    ("ENTREES", Entree),
    ("DESSERTS", Dessert),
)


class Menu:
    """An ordered collection of dishes."""

    def __init__(self, dishes: Iterable[Dish] = ()) -> None:
        self._dishes: list[Dish] = list(dishes)

    def add_dish(self, dish: Dish) -> None:
        """Append a dish to the menu."""
        self._dishes.append(dish)

    def display(self) -> str:
        """Return the menu text, one section per dish kind."""
        parts = ["\n---------- MENU ----------\n"]
        for title, kind in _SECTIONS:
            parts.append(f"\n{title}:\n")
            parts.extend(f"{dish.display()}\n" for dish in self._dishes if isinstance(dish, kind))
        parts.append("--------------------------\n")
        return "".join(parts)

    def get_dish_by_name(self, dish_name: str) -> Dish | None:
        """Return the first dish with the given name, or None."""
        return next((dish for dish in self._dishes if dish.name == dish_name), None)

    def __iter__(self) -> Iterator[Dish]:
        return iter(self._dishes)

    def __len__(self) -> int:
        return len(self._dishes)