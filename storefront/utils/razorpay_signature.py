import hashlib
import hmac
import logging

import razorpay

logger = logging.getLogger(__name__)


def generate_signature(gateway_order_id: str, gateway_payment_id: str, secret: str) -> str:
    """
    HMAC-SHA256 of ``"<order_id>|<payment_id>"`` keyed with the gateway secret,
    as a lowercase hex digest. This is what Razorpay sends back after checkout.
    """
    message = f"{gateway_order_id}|{gateway_payment_id}".encode("utf-8")
    return hmac.new(secret.encode("utf-8"), message, hashlib.sha256).hexdigest()


def verify_signature(
    gateway_order_id: str,
    gateway_payment_id: str,
    signature: str,
    secret: str,
    key_id: str = "",
) -> bool:
    """True only when Razorpay's own check accepts ``signature`` (case-sensitive)."""
    # the SDK compares str digests, which rejects non-ASCII input with TypeError
    if not isinstance(signature, str) or not signature.isascii():
        return False

    client = razorpay.Client(auth=(key_id, secret))
    try:
        client.utility.verify_payment_signature({
            "razorpay_order_id": gateway_order_id,
            "razorpay_payment_id": gateway_payment_id,
            "razorpay_signature": signature,
        })
    except razorpay.errors.SignatureVerificationError:
        logger.info(f"Signature mismatch for gateway order {gateway_order_id}")
        return False
    return True
