from typing import Optional

from fastapi import APIRouter, Depends, Header
from sqlmodel import Session, select

from storefront.config import settings
from storefront.database import get_session
from storefront.dependencies.checkout import (
    get_book_exists,
    get_gateway,
    get_order_store,
    get_zone_repository,
)
from storefront.exceptions import NotFound, PermissionDenied
from storefront.models.order import Order
from storefront.models.user import User
from storefront.schemas.orders_schemas import (
    CreateOrderRequest,
    CreateOrderResponse,
    OrderDetail,
    OrderEventRead,
    OrderRead,
)
from storefront.services.order_event_service import list_order_events
from storefront.services.order_service import create_order
from storefront.services.order_store import OrderStore
from storefront.services.payment_gateway import PaymentGateway
from storefront.services.pincode_lookup import DeliveryZoneRepository
from storefront.utils.formatting import format_price
from storefront.utils.pagination import Page, paginate
from storefront.utils.token import get_current_user

router = APIRouter()


def _order_read(order: Order) -> OrderRead:
    data = OrderRead.model_validate(order)
    data.total_display = format_price(order.total_amount)
    return data


@router.post("/order/create", response_model=CreateOrderResponse)
def create_checkout_order(
    payload: CreateOrderRequest,
    idempotency_key: Optional[str] = Header(default=None, alias="Idempotency-Key"),
    current_user: User = Depends(get_current_user),
    gateway: PaymentGateway = Depends(get_gateway),
    store: OrderStore = Depends(get_order_store),
    zones: DeliveryZoneRepository = Depends(get_zone_repository),
    book_exists=Depends(get_book_exists),
):
    """Open a Razorpay order and record it as Pending."""
    if payload.user_id and payload.user_id != current_user.id:
        raise PermissionDenied("Orders can only be placed for the signed-in user")

    created = create_order(
        payload,
        gateway=gateway,
        store=store,
        zones=zones,
        currency=settings.CURRENCY,
        book_exists=book_exists,
        idempotency_key=idempotency_key,
    )

    return CreateOrderResponse(
        order_id=created.order_id,
        gateway_order_id=created.gateway_order_id,
        amount=created.amount,
        currency=created.currency,
        key_id=settings.RAZORPAY_KEY_ID,
    )


@router.get("/orders", response_model=Page[OrderRead])
def list_my_orders(
    page: int = 1,
    limit: int = 10,
    session: Session = Depends(get_session),
    current_user: User = Depends(get_current_user),
):
    query = (
        select(Order)
        .where(Order.user_id == current_user.id)
        .order_by(Order.created_at.desc())
    )

    return paginate(
        session=session,
        query=query,
        page=page,
        limit=limit,
        transform=_order_read,
    )


@router.get("/orders/{order_id}", response_model=OrderDetail)
def get_my_order(
    order_id: str,
    session: Session = Depends(get_session),
    current_user: User = Depends(get_current_user),
):
    order = session.get(Order, order_id)

    if not order or order.user_id != current_user.id:
        raise NotFound("Order not found")

    return OrderDetail(
        **_order_read(order).model_dump(),
        events=[
            OrderEventRead.model_validate(event)
            for event in list_order_events(session, order.id)
        ],
    )
