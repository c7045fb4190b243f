import logging
from typing import Optional

from storefront.exceptions import ConfigurationError, PaymentVerificationFailed
from storefront.models.order import Order
from storefront.schemas.payment_schemas import PaymentVerifyRequest
from storefront.services.order_store import OrderStore
from storefront.utils.razorpay_signature import verify_signature

logger = logging.getLogger(__name__)


def verify_payment(
    payload: PaymentVerifyRequest,
    *,
    secret: Optional[str],
    key_id: str = "",
    store: OrderStore,
) -> Order:
    """
    Confirm a checkout callback came from the gateway, then mark the order Paid.

    Every authenticity failure raises the same ``PaymentVerificationFailed``
    so callers cannot tell which part did not match.
    """
    if not secret:
        logger.error("RAZORPAY_KEY_SECRET is not configured")
        raise ConfigurationError()

    if not verify_signature(
        payload.gateway_order_id,
        payload.gateway_payment_id,
        payload.signature,
        secret,
        key_id=key_id,
    ):
        logger.warning(f"Payment signature verification failed for order {payload.order_id}")
        raise PaymentVerificationFailed()

    order = store.get(payload.order_id)
    if order is None or order.gateway_order_id != payload.gateway_order_id:
        logger.warning(
            f"Verified payment {payload.gateway_payment_id} does not belong to order {payload.order_id}"
        )
        raise PaymentVerificationFailed()

    order, changed = store.mark_paid(order.id, payload.gateway_payment_id)
    if not changed:
        logger.info(f"Payment already processed for order {order.id}")
    return order
