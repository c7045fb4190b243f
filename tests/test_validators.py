from storefront.schemas.checkout_schemas import CheckoutFormData
from storefront.utils.validators import (
    validate_checkout_form,
    validate_phone_number,
    validate_pincode,
)


def test_phone_number():
    assert validate_phone_number("9876543210").valid is True

    for phone in ("98765abcde", "", "98765", "98765432101", "+919876543", "98765 4321", "987654321\n"):
        result = validate_phone_number(phone)
        assert result.valid is False
        assert result.errors == {"phone": "Phone number must be exactly 10 digits"}


def test_phone_number_rejects_non_ascii_digits():
    assert validate_phone_number("٩٨٧٦٥٤٣٢١٠").valid is False


def test_pincode():
    assert validate_pincode("110001").valid is True

    for pincode in ("11000", "1100011", "abcdef", "", "11000a", " 110001"):
        result = validate_pincode(pincode)
        assert result.valid is False
        assert result.errors["pincode"] == "Pincode must be exactly 6 digits"


def test_valid_checkout_form():
    form = CheckoutFormData(name="Radha", address="12 Temple Road, Delhi", pincode="110001")
    result = validate_checkout_form(form)

    assert result.valid is True
    assert result.errors == {}


def test_checkout_form_reports_every_invalid_field():
    result = validate_checkout_form(CheckoutFormData(name="", address="", pincode="abc"))

    assert result.valid is False
    assert result.errors == {
        "name": "Name is required",
        "address": "Address is required",
        "pincode": "Pincode must be exactly 6 digits",
    }


def test_whitespace_only_fields_are_missing():
    result = validate_checkout_form(CheckoutFormData(name="   ", address="\t", pincode="  "))

    assert set(result.errors) == {"name", "address", "pincode"}
    assert result.errors["pincode"] == "Pincode is required"


def test_validation_does_not_mutate_input():
    form = CheckoutFormData(name="  Radha  ", address=" Road ", pincode="110001")
    validate_checkout_form(form)

    assert form.name == "  Radha  "
    assert form.address == " Road "
