"""Interactive ordering console."""

from __future__ import annotations

import argparse
import re
import sys
from collections.abc import Iterator
from typing import TextIO

from .restaurant import Restaurant

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


def display_welcome() -> str:
    """Return the welcome banner."""
    return (
        "---------------------------------\n"
        "   RESTAURANT ORDERING SYSTEM    \n"
        "---------------------------------\n\n"
    )


def display_main_menu() -> str:
    """Return the main menu with its prompt."""
    return (
        "\nMAIN MENU:\n"
        "1. View Menu\n"
        "2. Place New Order\n"
        "3. View Order History\n"
        "4. Exit\n"
        "Enter choice: "
    )


def _next_choice(lines: Iterator[str]) -> int | None:
    """Read the next menu choice; 0 if it is not a number, None at end of input."""
    for line in lines:
        if not line.strip():
            continue
        match = _LEADING_INT.match(line)
        return int(match.group(1)) if match else 0
    return None


def _read_name(lines: Iterator[str], stdout: TextIO) -> str | None:
    stdout.write("Enter customer name: ")
    line = next(lines, None)
    return None if line is None else line.removesuffix("\n")


def run(restaurant: Restaurant, stdin: TextIO, stdout: TextIO) -> int:
    """Run the menu loop until the user exits or input ends."""
    lines = iter(stdin)
    stdout.write(restaurant.show_menu())
    stdout.write(display_welcome())
    while True:
        stdout.write(display_main_menu())
        choice = _next_choice(lines)
        if choice is None:
            return 0
        if choice == 1:
            stdout.write(restaurant.show_menu())
        elif choice == 2:
            name = _read_name(lines, stdout)
            if name is None:
                return 0
            restaurant.place_new_order(name, lines, stdout)
        elif choice == 3:
            name = _read_name(lines, stdout)
            if name is None:
                return 0
            restaurant.view_customer_order_history(name, stdout)
        elif choice == 4:
            stdout.write("Exiting system. Goodbye!\n")
            return 0
        else:
            stdout.write("Invalid choice. Please try again.\n")


def main(argv: list[str] | None = None) -> int:
    """Start the ordering console on standard input and output."""
    parser = argparse.ArgumentParser(description="Restaurant ordering console.")
    parser.parse_args(argv)
    return run(Restaurant(), sys.stdin, sys.stdout)