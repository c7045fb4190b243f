from pydantic import BaseModel, ConfigDict
from typing import List, Optional
from datetime import datetime


class OrderItemIn(BaseModel):
    book_id: str
    title: str
    price: int        # paise per copy at time of purchase
    quantity: int


class CreateOrderRequest(BaseModel):
    amount: int       # paise
    items: List[OrderItemIn]
    shipping_name: str
    shipping_address: str
    shipping_pincode: str
    user_id: str


class CreateOrderResponse(BaseModel):
    order_id: str
    gateway_order_id: str
    amount: int
    currency: str
    key_id: str


class OrderEventRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    event_type: str
    label: str
    meta: Optional[dict] = None
    created_at: datetime


class OrderRead(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    user_id: str
    items: List[OrderItemIn]
    total_amount: int
    total_display: str = ""
    shipping_name: str
    shipping_address: str
    shipping_pincode: str
    gateway_order_id: str
    gateway_payment_id: Optional[str] = None
    status: str
    created_at: datetime


class OrderDetail(OrderRead):
    events: List[OrderEventRead] = []
