from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

from storefront.schemas.book_schemas import BookRead


class CartItem(BaseModel):
    model_config = ConfigDict(frozen=True)

    book: BookRead
    quantity: int = Field(ge=1)


class AddItem(BaseModel):
    type: Literal["ADD_ITEM"] = "ADD_ITEM"
    book: BookRead


class RemoveItem(BaseModel):
    type: Literal["REMOVE_ITEM"] = "REMOVE_ITEM"
    book_id: str


class UpdateQuantity(BaseModel):
    type: Literal["UPDATE_QUANTITY"] = "UPDATE_QUANTITY"
    book_id: str
    quantity: int


class ClearCart(BaseModel):
    type: Literal["CLEAR"] = "CLEAR"
