from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from storefront.dependencies.checkout import get_zone_repository
from storefront.schemas.pincode_schemas import PincodeLookupResult
from storefront.services.pincode_lookup import DeliveryZoneRepository, lookup_pincode
from storefront.utils.validators import validate_pincode

router = APIRouter()


@router.get("", response_model=PincodeLookupResult, response_model_exclude_none=True)
def check_pincode(
    pincode: str = "",
    zones: DeliveryZoneRepository = Depends(get_zone_repository),
):
    validation = validate_pincode(pincode)
    if not validation.valid:
        return JSONResponse(
            status_code=400,
            content={"available": False, "message": validation.errors["pincode"]},
        )

    return lookup_pincode(pincode, zones)
