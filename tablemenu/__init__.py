"""Restaurant menu, orders, customer order history and an ordering console."""

__version__ = "0.1.0"
__all__ = ["cli", "dishes", "menu", "orders", "restaurant"]