from typing import List

from pydantic import TypeAdapter, ValidationError

from storefront.schemas.cart_schemas import CartItem

_cart_adapter = TypeAdapter(List[CartItem])


def serialize_cart(items: List[CartItem]) -> str:
    """Encode cart items as a JSON array for client-side storage."""
    return _cart_adapter.dump_json(items).decode("utf-8")


def deserialize_cart(data: str) -> List[CartItem]:
    """
    Decode a stored cart snapshot.

    Empty, malformed or non-array input (or any entry that is not a valid
    cart line) yields an empty cart instead of an error.
    """
    if not data or not isinstance(data, (str, bytes)):
        return []
    try:
        return _cart_adapter.validate_json(data)
    except (ValidationError, RecursionError):
        return []
