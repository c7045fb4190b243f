import logging
from typing import Optional, Protocol

import razorpay
import requests
from pydantic import BaseModel

from storefront.config import settings
from storefront.exceptions import GatewayError

logger = logging.getLogger(__name__)


class GatewayOrder(BaseModel):
    id: str
    amount: int
    currency: str
    status: str = "created"
    receipt: Optional[str] = None


class PaymentGateway(Protocol):
    def create_order(self, amount: int, currency: str, receipt: str, notes: Optional[dict] = None) -> GatewayOrder:
        ...


class RazorpayGateway:
    def __init__(self, client: razorpay.Client):
        self.client = client

    def create_order(self, amount: int, currency: str, receipt: str, notes: Optional[dict] = None) -> GatewayOrder:
        """Open a Razorpay order; ``amount`` is already in paise."""
        try:
            response = self.client.order.create(
                {
                    "amount": amount,
                    "currency": currency,
                    "receipt": receipt,
                    "notes": notes or {},
                }
            )
        except (
            razorpay.errors.BadRequestError,
            razorpay.errors.ServerError,
            razorpay.errors.GatewayError,
            requests.RequestException,
        ) as exc:
            logger.exception(f"Razorpay order creation failed for receipt {receipt}")
            raise GatewayError() from exc

        logger.info(f"Razorpay order {response['id']} created for {amount} {currency}")
        return GatewayOrder.model_validate(response)


def get_payment_gateway() -> PaymentGateway:
    client = razorpay.Client(
        auth=(settings.RAZORPAY_KEY_ID, settings.RAZORPAY_KEY_SECRET or "")
    )
    return RazorpayGateway(client)
