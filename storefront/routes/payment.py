from fastapi import APIRouter, Depends

from storefront.config import settings
from storefront.dependencies.checkout import get_order_store
from storefront.schemas.payment_schemas import PaymentVerifyRequest, PaymentVerifyResponse
from storefront.services.order_store import OrderStore
from storefront.services.payment_service import verify_payment

router = APIRouter()


@router.post("/verify", response_model=PaymentVerifyResponse)
def verify_checkout_payment(
    payload: PaymentVerifyRequest,
    store: OrderStore = Depends(get_order_store),
):
    """
    Check the Razorpay callback signature and mark the order Paid.
    Re-sending a callback for an order that is already Paid succeeds again.
    """
    verify_payment(
        payload,
        secret=settings.RAZORPAY_KEY_SECRET,
        key_id=settings.RAZORPAY_KEY_ID,
        store=store,
    )
    return PaymentVerifyResponse(success=True)
