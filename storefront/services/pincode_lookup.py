import logging
import re
from typing import List, Optional, Protocol, Sequence

from sqlmodel import Session, select

from storefront.data.delivery_zones import DELIVERY_ZONES
from storefront.models.delivery_zone import DeliveryZone
from storefront.schemas.pincode_schemas import DeliveryZoneEntry, PincodeLookupResult

logger = logging.getLogger(__name__)

UNAVAILABLE_MESSAGE = "Delivery not available for this pincode"

_DIGITS = re.compile(r"[0-9]+")


class DeliveryZoneRepository(Protocol):
    def list_zones(self) -> Sequence[DeliveryZoneEntry]:
        ...


class StaticDeliveryZoneRepository:
    """Zone table held in memory, in scan order."""

    def __init__(self, zones: Optional[Sequence[dict]] = None):
        self._zones = [
            DeliveryZoneEntry(**zone) for zone in (DELIVERY_ZONES if zones is None else zones)
        ]

    def list_zones(self) -> List[DeliveryZoneEntry]:
        return list(self._zones)


class SqlDeliveryZoneRepository:
    def __init__(self, session: Session):
        self.session = session

    def list_zones(self) -> List[DeliveryZoneEntry]:
        rows = self.session.exec(
            select(DeliveryZone).order_by(DeliveryZone.position, DeliveryZone.id)
        ).all()
        return [DeliveryZoneEntry.model_validate(row) for row in rows]


def _parse_pincode(pincode: str) -> Optional[int]:
    # ASCII digits only; int() alone would accept "110_001" or Devanagari numerals
    if not isinstance(pincode, str) or not _DIGITS.fullmatch(pincode.strip()):
        return None
    return int(pincode.strip())


def lookup_pincode(pincode: str, zones: DeliveryZoneRepository) -> PincodeLookupResult:
    """
    Find the first zone whose inclusive range contains ``pincode``.

    Only numeric parsing happens here; format checks belong to the validators.
    """
    value = _parse_pincode(pincode)

    if value is not None:
        for entry in zones.list_zones():
            if int(entry.pincode_start) <= value <= int(entry.pincode_end):
                return PincodeLookupResult(
                    available=True,
                    delivery_days=entry.delivery_days,
                    zone=entry.zone,
                )

    logger.info(f"No delivery zone for pincode {pincode!r}")
    return PincodeLookupResult(available=False, message=UNAVAILABLE_MESSAGE)
