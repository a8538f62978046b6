import io

import pytest

from tablemenu.dishes import Appetizer, Dessert, Entree
from tablemenu.menu import Menu
from tablemenu.restaurant import Restaurant


@pytest.fixture
def restaurant():
    menu = Menu(
        [
            Appetizer("Tabouleh", 12.99, False),
            Entree("Khorovats", 28.99, 950),
            Dessert("Baklava", 8.99, True),
        ]
    )
    return Restaurant(menu)


def test_get_customer_creates_once():
    place = Restaurant()
    customer = place.get_customer_by_name("Tyomik")
    assert customer.name == "Tyomik"
    assert place.get_customer_by_name("Tyomik") is customer
    assert len(place.customers) == 1


def test_show_menu_is_menu_text(restaurant):
    assert restaurant.show_menu() == restaurant.menu.display()


def test_place_order_adds_known_dishes(restaurant):
    out = io.StringIO()
    order = restaurant.place_new_order("Anna", ["Tabouleh\n", "Pizza\n", "done\n"], out)
    text = out.getvalue()
    assert "Added Tabouleh to order.\n" in text
    assert "Dish not found!\n" in text
    assert text.endswith("Order placed successfully!\n")
    assert [dish.name for dish in order.dishes] == ["Tabouleh"]
    assert restaurant.orders == [order]
    assert len(restaurant.get_customer_by_name("Anna").order_history) == 1


def test_place_order_stops_at_end_of_input(restaurant):
    out = io.StringIO()
    order = restaurant.place_new_order("Anna", ["Baklava", "Khorovats"], out)
    assert [dish.name for dish in order.dishes] == ["Baklava", "Khorovats"]
    assert out.getvalue().endswith("Order placed successfully!\n")


def test_place_order_prints_menu_first(restaurant):
    out = io.StringIO()
    restaurant.place_new_order("Anna", ["done"], out)
    assert out.getvalue().startswith(restaurant.show_menu())


def test_unknown_customer_history(restaurant):
    out = io.StringIO()
    assert restaurant.view_customer_order_history("Nobody", out) is False
    assert out.getvalue() == "Customer not found.\n"


def test_known_customer_history(restaurant):
    restaurant.place_new_order("Anna", ["Tabouleh", "done"], io.StringIO())
    out = io.StringIO()
    assert restaurant.view_customer_order_history("Anna", out) is True
    customer = restaurant.get_customer_by_name("Anna")
    assert out.getvalue() == customer.view_order_history()