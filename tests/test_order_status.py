from storefront.constants.order_status import (
    ALLOWED_TRANSITIONS,
    VALID_ORDER_STATUSES,
    can_transition,
)
from storefront.utils.formatting import format_price


def test_statuses():
    assert VALID_ORDER_STATUSES == ["Pending", "Paid", "Shipped"]
    assert set(ALLOWED_TRANSITIONS) == set(VALID_ORDER_STATUSES)


def test_no_state_is_skipped():
    assert can_transition("Pending", "Paid")
    assert can_transition("Paid", "Shipped")
    assert not can_transition("Pending", "Shipped")
    assert not can_transition("Paid", "Paid")
    assert not can_transition("Shipped", "Paid")
    assert not can_transition("Cancelled", "Paid")


def test_format_price():
    assert format_price(29900) == "₹299.00"
    assert format_price(5950) == "₹59.50"
    assert format_price(0) == "₹0.00"
