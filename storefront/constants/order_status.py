from enum import Enum


class OrderStatus(str, Enum):
    PENDING = "Pending"
    PAID = "Paid"
    SHIPPED = "Shipped"


VALID_ORDER_STATUSES = [status.value for status in OrderStatus]

# Shipped is set by fulfillment outside this service; checkout only moves Pending -> Paid.
ALLOWED_TRANSITIONS = {
    "Pending": ["Paid"],
    "Paid": ["Shipped"],
    "Shipped": [],
}


def can_transition(current: str, target: str) -> bool:
    return target in ALLOWED_TRANSITIONS.get(current, [])
