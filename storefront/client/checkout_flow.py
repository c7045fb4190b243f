import logging
from enum import Enum
from typing import Callable, Dict, Optional

import requests
from pydantic import BaseModel

from storefront.schemas.checkout_schemas import CheckoutFormData
from storefront.schemas.orders_schemas import CreateOrderResponse
from storefront.services.cart_store import CartStore
from storefront.utils.validators import validate_checkout_form

logger = logging.getLogger(__name__)

EMPTY_CART = "Your cart is empty. Add some books before checking out."
UNSERVICEABLE = "Delivery is not available for this pincode."
PAYMENT_INITIATION_FAILED = "Unable to initiate payment, please try again."
PAYMENT_CANCELLED = "Payment was cancelled. Your cart items are still saved."
VERIFICATION_FAILED = "Payment verification failed."


class CheckoutStatus(str, Enum):
    IDLE = "idle"
    PROCESSING = "processing"
    SUCCESS = "success"
    ERROR = "error"


class PaymentCallback(BaseModel):
    """What the Razorpay checkout hands back once the customer has paid."""

    gateway_order_id: str
    gateway_payment_id: str
    signature: str


# Opens the payment UI for the order; returns None when the customer dismisses it.
PaymentPrompt = Callable[[CreateOrderResponse], Optional[PaymentCallback]]


def _succeeded(response) -> bool:
    return 200 <= response.status_code < 300


class CheckoutFlow:
    """
    Drives one checkout from the shipping form to a verified payment.

    ``http`` is anything with requests-style ``get``/``post`` that accepts
    paths relative to the API, e.g. :class:`~storefront.client.api.ApiSession`
    or FastAPI's ``TestClient``; it must already carry the bearer token.
    """

    def __init__(self, http, cart: CartStore, user_id: str, pay: PaymentPrompt):
        self.http = http
        self.cart = cart
        self.user_id = user_id
        self.pay = pay

        self.status = CheckoutStatus.IDLE
        self.error_message = ""
        self.form_errors: Dict[str, str] = {}
        self.order: Optional[CreateOrderResponse] = None

    def edit_field(self, field: str):
        """Editing a field clears its error and any failed-checkout banner."""
        self.form_errors.pop(field, None)
        if self.status == CheckoutStatus.ERROR:
            self.status = CheckoutStatus.IDLE
            self.error_message = ""

    def _fail(self, message: str) -> CheckoutStatus:
        self.status = CheckoutStatus.ERROR
        self.error_message = message
        return self.status

    def is_serviceable(self, pincode: str) -> bool:
        try:
            response = self.http.get("/pincode", params={"pincode": pincode})
            return _succeeded(response) and bool(response.json().get("available"))
        except (requests.RequestException, ValueError):
            logger.exception(f"Pincode check failed for {pincode}")
            return False

    def _create_order(self, form: CheckoutFormData) -> Optional[CreateOrderResponse]:
        payload = {
            "amount": self.cart.total_amount,
            "items": [
                {
                    "book_id": item.book.id,
                    "title": item.book.title,
                    "price": item.book.price,
                    "quantity": item.quantity,
                }
                for item in self.cart.items
            ],
            "shipping_name": form.name.strip(),
            "shipping_address": form.address.strip(),
            "shipping_pincode": form.pincode.strip(),
            "user_id": self.user_id,
        }
        try:
            response = self.http.post("/order/create", json=payload)
        except requests.RequestException:
            logger.exception("Order creation request failed")
            return None
        if not _succeeded(response):
            logger.warning(f"Order creation rejected with {response.status_code}")
            return None
        try:
            return CreateOrderResponse.model_validate(response.json())
        except ValueError:
            # pydantic ValidationError is a ValueError too
            logger.exception("Order creation returned an unreadable body")
            return None

    def _verify(self, order: CreateOrderResponse, callback: PaymentCallback) -> bool:
        try:
            response = self.http.post(
                "/payment/verify",
                json={
                    "gateway_order_id": callback.gateway_order_id,
                    "gateway_payment_id": callback.gateway_payment_id,
                    "signature": callback.signature,
                    "order_id": order.order_id,
                },
            )
        except requests.RequestException:
            logger.exception(f"Payment verification request failed for order {order.order_id}")
            return False
        return _succeeded(response)

    def submit(self, form: CheckoutFormData) -> CheckoutStatus:
        if self.status == CheckoutStatus.PROCESSING:
            return self.status

        self.error_message = ""
        self.form_errors = {}

        if not self.cart.items:
            return self._fail(EMPTY_CART)

        validation = validate_checkout_form(form)
        if not validation.valid:
            self.form_errors = dict(validation.errors)
            self.status = CheckoutStatus.IDLE
            return self.status

        self.status = CheckoutStatus.PROCESSING
        self.order = None
        try:
            return self._process(form)
        except Exception:
            # a crashing collaborator ends this attempt, not the flow
            logger.exception("Checkout attempt failed unexpectedly")
            return self._fail(PAYMENT_INITIATION_FAILED if self.order is None else PAYMENT_CANCELLED)

    def _process(self, form: CheckoutFormData) -> CheckoutStatus:
        if not self.is_serviceable(form.pincode.strip()):
            return self._fail(UNSERVICEABLE)

        self.order = self._create_order(form)
        if self.order is None:
            return self._fail(PAYMENT_INITIATION_FAILED)

        callback = self.pay(self.order)
        if callback is None:
            # order stays Pending
            return self._fail(PAYMENT_CANCELLED)

        if not self._verify(self.order, callback):
            return self._fail(VERIFICATION_FAILED)

        self.cart.clear()
        self.status = CheckoutStatus.SUCCESS
        return self.status
