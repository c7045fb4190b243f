from typing import Optional

from pydantic import BaseModel, ConfigDict


class DeliveryZoneEntry(BaseModel):
    model_config = ConfigDict(from_attributes=True, frozen=True)

    pincode_start: str
    pincode_end: str
    delivery_days: str
    zone: str


class PincodeLookupResult(BaseModel):
    available: bool
    delivery_days: Optional[str] = None
    zone: Optional[str] = None
    message: Optional[str] = None
