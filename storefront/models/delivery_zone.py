from sqlmodel import SQLModel, Field
from typing import Optional


class DeliveryZone(SQLModel, table=True):
    __tablename__ = "delivery_zone"
    id: Optional[int] = Field(default=None, primary_key=True)

    # scan order for first-match lookup
    position: int = Field(default=0, index=True)

    pincode_start: str
    pincode_end: str
    delivery_days: str
    zone: str  # fast | standard
