import logging
import time
from typing import Callable, Optional

from pydantic import BaseModel

from storefront.exceptions import ValidationFailed
from storefront.schemas.orders_schemas import CreateOrderRequest
from storefront.services.order_store import OrderStore
from storefront.services.payment_gateway import PaymentGateway
from storefront.services.pincode_lookup import DeliveryZoneRepository, lookup_pincode
from storefront.utils.validators import validate_pincode

logger = logging.getLogger(__name__)

_REQUIRED_TEXT_FIELDS = {
    "shipping_name": "Shipping name is required",
    "shipping_address": "Shipping address is required",
    "shipping_pincode": "Shipping pincode is required",
    "user_id": "User id is required",
}


class CreatedOrder(BaseModel):
    order_id: str
    gateway_order_id: str
    amount: int
    currency: str
    reused: bool = False


def validate_order_request(request: CreateOrderRequest):
    """Raise ``ValidationFailed`` for the first class of problem found in the request."""
    missing = {
        field: message
        for field, message in _REQUIRED_TEXT_FIELDS.items()
        if not getattr(request, field).strip()
    }
    if not request.amount:
        missing["amount"] = "Amount is required"
    if not request.items:
        missing["items"] = "Items are required"
    if missing:
        raise ValidationFailed("Missing required fields", fields=missing)

    if request.amount <= 0:
        raise ValidationFailed("Amount must be greater than zero", fields={"amount": "Must be greater than zero"})

    bad_items = {
        f"items.{index}": "Quantity must be at least 1 and price cannot be negative"
        for index, item in enumerate(request.items)
        if item.quantity < 1 or item.price < 0 or not item.book_id
    }
    if bad_items:
        raise ValidationFailed("Invalid order items", fields=bad_items)

    pincode = validate_pincode(request.shipping_pincode.strip())
    if not pincode.valid:
        raise ValidationFailed(pincode.errors["pincode"], fields={"shipping_pincode": pincode.errors["pincode"]})

    items_total = sum(item.price * item.quantity for item in request.items)
    if items_total != request.amount:
        raise ValidationFailed(
            "Amount does not match order items",
            fields={"amount": f"Expected {items_total}"},
        )


def _receipt() -> str:
    # millisecond timestamp keeps receipts unique per order attempt
    return f"order_{int(time.time() * 1000)}"


def create_order(
    request: CreateOrderRequest,
    *,
    gateway: PaymentGateway,
    store: OrderStore,
    zones: DeliveryZoneRepository,
    currency: str,
    book_exists: Optional[Callable[[str], bool]] = None,
    idempotency_key: Optional[str] = None,
) -> CreatedOrder:
    """
    Open a gateway order and record the matching Pending order.

    Every check runs before the gateway is contacted, and nothing is written
    to the store unless the gateway order was created.
    """
    validate_order_request(request)

    serviceability = lookup_pincode(request.shipping_pincode.strip(), zones)
    if not serviceability.available:
        raise ValidationFailed(serviceability.message, fields={"shipping_pincode": serviceability.message})

    if book_exists is not None:
        unknown = sorted({item.book_id for item in request.items if not book_exists(item.book_id)})
        if unknown:
            raise ValidationFailed(
                "Unknown books in order",
                fields={"items": f"Not in catalog: {', '.join(unknown)}"},
            )

    if idempotency_key:
        existing = store.find_by_idempotency_key(request.user_id, idempotency_key)
        if existing is not None:
            logger.info(f"Reusing order {existing.id} for idempotency key {idempotency_key}")
            return CreatedOrder(
                order_id=existing.id,
                gateway_order_id=existing.gateway_order_id,
                amount=existing.total_amount,
                currency=currency,
                reused=True,
            )

    gateway_order = gateway.create_order(
        amount=request.amount,
        currency=currency,
        receipt=_receipt(),
        notes={"user_id": request.user_id},
    )

    order = store.create_pending(
        user_id=request.user_id,
        items=[item.model_dump() for item in request.items],
        total_amount=request.amount,
        shipping_name=request.shipping_name.strip(),
        shipping_address=request.shipping_address.strip(),
        shipping_pincode=request.shipping_pincode.strip(),
        gateway_order_id=gateway_order.id,
        idempotency_key=idempotency_key,
    )
    logger.info(f"Order {order.id} created as Pending for gateway order {gateway_order.id}")

    return CreatedOrder(
        order_id=order.id,
        gateway_order_id=gateway_order.id,
        amount=gateway_order.amount,
        currency=gateway_order.currency,
    )
