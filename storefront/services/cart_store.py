import logging
from typing import Callable, List, MutableMapping, Optional

from storefront.schemas.book_schemas import BookRead
from storefront.schemas.cart_schemas import (
    AddItem,
    CartItem,
    ClearCart,
    RemoveItem,
    UpdateQuantity,
)
from storefront.services.cart_reducer import (
    cart_reducer,
    cart_total_amount,
    cart_total_items,
)
from storefront.services.cart_serialization import deserialize_cart, serialize_cart

logger = logging.getLogger(__name__)

CART_STORAGE_KEY = "spiritual-bookstore-cart"


class CartStore:
    """
    State container for one client session's cart.

    Wraps the pure reducer, rehydrates once from ``storage`` on construction
    and writes the serialized snapshot back after every change.
    """

    def __init__(
        self,
        storage: MutableMapping[str, str],
        key: str = CART_STORAGE_KEY,
        on_change: Optional[Callable[[List[CartItem]], None]] = None,
    ):
        self._storage = storage
        self._key = key
        self._on_change = on_change
        self._items: List[CartItem] = []
        self._hydrated = False
        self._hydrate()

    def _hydrate(self):
        stored = self._storage.get(self._key)
        if stored:
            for item in deserialize_cart(stored):
                self.dispatch(AddItem(book=item.book))
                if item.quantity > 1:
                    self.dispatch(UpdateQuantity(book_id=item.book.id, quantity=item.quantity))
        self._hydrated = True
        self._persist()

    def _persist(self):
        if self._hydrated:
            self._storage[self._key] = serialize_cart(self._items)

    def dispatch(self, action) -> List[CartItem]:
        next_items = cart_reducer(self._items, action)
        if next_items is not self._items:
            self._items = next_items
            self._persist()
            if self._on_change and self._hydrated:
                self._on_change(self._items)
        return self._items

    @property
    def items(self) -> List[CartItem]:
        return self._items

    def add_item(self, book: BookRead):
        return self.dispatch(AddItem(book=book))

    def remove_item(self, book_id: str):
        return self.dispatch(RemoveItem(book_id=book_id))

    def update_quantity(self, book_id: str, quantity: int):
        return self.dispatch(UpdateQuantity(book_id=book_id, quantity=quantity))

    def clear(self):
        logger.debug(f"Clearing cart stored under {self._key}")
        return self.dispatch(ClearCart())

    @property
    def total_amount(self) -> int:
        return cart_total_amount(self._items)

    @property
    def total_items(self) -> int:
        return cart_total_items(self._items)
