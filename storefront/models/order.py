from sqlmodel import SQLModel, Field
from sqlalchemy import Column, JSON
from typing import List, Optional
from datetime import datetime
from uuid import uuid4

from storefront.constants.order_status import OrderStatus


class Order(SQLModel, table=True):
    id: str = Field(default_factory=lambda: str(uuid4()), primary_key=True)
    user_id: str = Field(foreign_key="storefront_user.id", index=True)

    # snapshot of {book_id, title, price, quantity}; independent of the live catalog
    items: List[dict] = Field(default_factory=list, sa_column=Column(JSON, nullable=False))
    total_amount: int

    shipping_name: str
    shipping_address: str
    shipping_pincode: str

    gateway_order_id: str = Field(index=True, unique=True)
    gateway_payment_id: Optional[str] = None

    idempotency_key: Optional[str] = Field(default=None, index=True)

    status: str = Field(default=OrderStatus.PENDING.value)

    created_at: datetime = Field(default_factory=datetime.utcnow)
    updated_at: datetime = Field(default_factory=datetime.utcnow)
