from pydantic import BaseModel


class CheckoutFormData(BaseModel):
    name: str = ""
    address: str = ""
    pincode: str = ""
