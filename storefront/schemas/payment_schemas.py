from pydantic import BaseModel, Field


class PaymentVerifyRequest(BaseModel):
    gateway_order_id: str = Field(min_length=1)
    gateway_payment_id: str = Field(min_length=1)
    signature: str = Field(min_length=1)
    order_id: str = Field(min_length=1)


class PaymentVerifyResponse(BaseModel):
    success: bool
