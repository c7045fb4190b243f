# storefront/services/order_event_service.py

from datetime import datetime
from enum import Enum
from typing import List, Optional
from uuid import uuid4

from sqlmodel import Session, select

from storefront.models.order_event import OrderEvent


class OrderEventType(str, Enum):
    ORDER_CREATED = "order_created"
    PAYMENT_VERIFIED = "payment_verified"


def log_order_event(
    session: Session,
    order_id: str,
    event_type: OrderEventType,
    label: str,
    created_by: str = "system",
    meta: Optional[dict] = None,
):
    """
    Append-only event log for order timeline
    """

    event = OrderEvent(
        id=str(uuid4()),
        order_id=order_id,
        event_type=event_type.value,
        label=label,
        meta=meta,
        created_by=created_by,
        created_at=datetime.utcnow(),
    )

    session.add(event)


def list_order_events(session: Session, order_id: str) -> List[OrderEvent]:
    return session.exec(
        select(OrderEvent)
        .where(OrderEvent.order_id == order_id)
        .order_by(OrderEvent.created_at)
    ).all()
