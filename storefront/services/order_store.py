import logging
from datetime import datetime
from typing import List, Optional, Protocol, Tuple

from sqlalchemy.exc import SQLAlchemyError
from sqlmodel import Session, select

from storefront.constants.order_status import OrderStatus, can_transition
from storefront.exceptions import OrderStoreError
from storefront.models.order import Order
from storefront.services.order_event_service import OrderEventType, log_order_event

logger = logging.getLogger(__name__)


class OrderStore(Protocol):
    def create_pending(
        self,
        *,
        user_id: str,
        items: List[dict],
        total_amount: int,
        shipping_name: str,
        shipping_address: str,
        shipping_pincode: str,
        gateway_order_id: str,
        idempotency_key: Optional[str] = None,
    ) -> Order:
        ...

    def get(self, order_id: str) -> Optional[Order]:
        ...

    def find_by_idempotency_key(self, user_id: str, key: str) -> Optional[Order]:
        ...

    def mark_paid(self, order_id: str, gateway_payment_id: str) -> Tuple[Order, bool]:
        ...


class SqlOrderStore:
    """Order records kept in the ``order`` table through a SQLModel session."""

    def __init__(self, session: Session):
        self.session = session

    def create_pending(
        self,
        *,
        user_id: str,
        items: List[dict],
        total_amount: int,
        shipping_name: str,
        shipping_address: str,
        shipping_pincode: str,
        gateway_order_id: str,
        idempotency_key: Optional[str] = None,
    ) -> Order:
        order = Order(
            user_id=user_id,
            items=items,
            total_amount=total_amount,
            shipping_name=shipping_name,
            shipping_address=shipping_address,
            shipping_pincode=shipping_pincode,
            gateway_order_id=gateway_order_id,
            idempotency_key=idempotency_key,
            status=OrderStatus.PENDING.value,
        )
        try:
            self.session.add(order)
            self.session.flush()
            log_order_event(
                self.session,
                order.id,
                OrderEventType.ORDER_CREATED,
                "Order placed, awaiting payment",
                created_by=user_id,
                meta={"gateway_order_id": gateway_order_id, "amount": total_amount},
            )
            self.session.commit()
            self.session.refresh(order)
        except SQLAlchemyError as exc:
            self.session.rollback()
            logger.exception(f"Could not record order for gateway order {gateway_order_id}")
            raise OrderStoreError() from exc

        return order

    def get(self, order_id: str) -> Optional[Order]:
        return self.session.get(Order, order_id)

    def find_by_idempotency_key(self, user_id: str, key: str) -> Optional[Order]:
        return self.session.exec(
            select(Order)
            .where(Order.user_id == user_id)
            .where(Order.idempotency_key == key)
        ).first()

    def mark_paid(self, order_id: str, gateway_payment_id: str) -> Tuple[Order, bool]:
        """
        Move a Pending order to Paid. Orders already past Pending are returned
        untouched, so repeating a verification is harmless.
        """
        try:
            order = self.session.get(Order, order_id, with_for_update=True)
            if order is None:
                raise OrderStoreError(f"Order {order_id} not found")

            if not can_transition(order.status, OrderStatus.PAID.value):
                if order.gateway_payment_id != gateway_payment_id:
                    logger.warning(
                        f"Order {order_id} is already {order.status} with payment "
                        f"{order.gateway_payment_id}; ignoring payment {gateway_payment_id}"
                    )
                return order, False

            order.status = OrderStatus.PAID.value
            order.gateway_payment_id = gateway_payment_id
            order.updated_at = datetime.utcnow()
            self.session.add(order)
            log_order_event(
                self.session,
                order.id,
                OrderEventType.PAYMENT_VERIFIED,
                "Payment received",
                meta={"gateway_payment_id": gateway_payment_id},
            )
            self.session.commit()
            self.session.refresh(order)
        except SQLAlchemyError as exc:
            self.session.rollback()
            logger.exception(f"Could not mark order {order_id} as paid")
            raise OrderStoreError("Unable to confirm your payment, please try again") from exc

        logger.info(f"Order {order_id} marked Paid with payment {gateway_payment_id}")
        return order, True
