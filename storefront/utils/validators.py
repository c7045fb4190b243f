import re
from typing import Dict

from pydantic import BaseModel, Field

from storefront.schemas.checkout_schemas import CheckoutFormData

# [0-9] rather than \d: \d also matches non-ASCII digits
_PHONE_RE = re.compile(r"[0-9]{10}")
_PINCODE_RE = re.compile(r"[0-9]{6}")


class ValidationResult(BaseModel):
    valid: bool
    errors: Dict[str, str] = Field(default_factory=dict)


def _result(errors: Dict[str, str]) -> ValidationResult:
    return ValidationResult(valid=not errors, errors=errors)


def validate_phone_number(phone: str) -> ValidationResult:
    """Exactly 10 decimal digits, no separators or country code."""
    errors = {}
    if not isinstance(phone, str) or not _PHONE_RE.fullmatch(phone):
        errors["phone"] = "Phone number must be exactly 10 digits"
    return _result(errors)


def validate_pincode(pincode: str) -> ValidationResult:
    errors = {}
    if not isinstance(pincode, str) or not _PINCODE_RE.fullmatch(pincode):
        errors["pincode"] = "Pincode must be exactly 6 digits"
    return _result(errors)


def validate_checkout_form(data: CheckoutFormData) -> ValidationResult:
    """
    Check every shipping field and report all failures together.
    """
    errors = {}

    if not data.name or not data.name.strip():
        errors["name"] = "Name is required"

    if not data.address or not data.address.strip():
        errors["address"] = "Address is required"

    if not data.pincode or not data.pincode.strip():
        errors["pincode"] = "Pincode is required"
    else:
        pincode_result = validate_pincode(data.pincode)
        if not pincode_result.valid:
            errors["pincode"] = pincode_result.errors["pincode"]

    return _result(errors)
