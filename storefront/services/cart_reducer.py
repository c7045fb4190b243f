from typing import List

from storefront.schemas.cart_schemas import (
    AddItem,
    CartItem,
    ClearCart,
    RemoveItem,
    UpdateQuantity,
)


def cart_reducer(state: List[CartItem], action) -> List[CartItem]:
    """
    Pure cart transition: returns the next list of items, never mutating ``state``.

    Unknown actions return ``state`` itself so observers can compare by identity.
    """
    if isinstance(action, AddItem):
        if any(item.book.id == action.book.id for item in state):
            return [
                item.model_copy(update={"quantity": item.quantity + 1})
                if item.book.id == action.book.id
                else item
                for item in state
            ]
        return [*state, CartItem(book=action.book, quantity=1)]

    if isinstance(action, RemoveItem):
        return _without(state, action.book_id)

    if isinstance(action, UpdateQuantity):
        if action.quantity <= 0:
            return _without(state, action.book_id)
        if not any(item.book.id == action.book_id for item in state):
            return state
        return [
            item.model_copy(update={"quantity": action.quantity})
            if item.book.id == action.book_id
            else item
            for item in state
        ]

    if isinstance(action, ClearCart):
        return []

    return state


def _without(state: List[CartItem], book_id: str) -> List[CartItem]:
    if not any(item.book.id == book_id for item in state):
        return state
    return [item for item in state if item.book.id != book_id]


def cart_total_amount(items: List[CartItem]) -> int:
    return sum(item.book.price * item.quantity for item in items)


def cart_total_items(items: List[CartItem]) -> int:
    return sum(item.quantity for item in items)
