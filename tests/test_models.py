from dataclasses import is_dataclass
from decimal import Decimal

from conftest import make_order

from order_ui.models.order import Order, OrderPage, format_page_label, serialize_order
from order_ui.models.reflex_models import order_to_model
from order_ui.utils import format_currency, parse_decimal


def test_serialize_order():
    assert serialize_order(make_order(3)) == {
        "order_id": "3",
        "customer_id": "bob@example.com",
        "created_at": "2024-03-04",
        "total_price": "3.50",
        "formatted_total": "$3.50",
    }


def test_order_to_model():
    model = order_to_model(Order("9", "c-1", "2024-01-01", Decimal("1200")))
    assert is_dataclass(model)
    assert (model.order_id, model.formatted_total) == ("9", "$1,200.00")
    assert model.total_price == "1200"


def test_page_label_shows_at_least_one_page():
    assert format_page_label(1, 0) == "Page 1 of 1"
    assert format_page_label(2, 7) == "Page 2 of 7"


def test_empty_page_is_truthy():
    assert OrderPage()


def test_parse_decimal():
    assert parse_decimal(None) == Decimal("0")
    assert parse_decimal(0.1) == Decimal("0.1")
    assert parse_decimal("12.30") == Decimal("12.30")


def test_format_currency():
    assert format_currency(Decimal("0")) == "$0.00"
    assert format_currency(Decimal("1234567.891")) == "$1,234,567.89"
