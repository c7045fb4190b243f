from datetime import datetime

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


def make_book(book_id, price=5900):
    return BookRead(
        id=book_id,
        title=f"Book {book_id}",
        description="",
        price=price,
        image_path=f"/images/{book_id}.jpg",
        created_at=datetime(2024, 1, 1),
    )


def test_add_new_book_appends_with_quantity_one():
    state = [CartItem(book=make_book("1"), quantity=2)]
    result = cart_reducer(state, AddItem(book=make_book("2")))

    assert [(item.book.id, item.quantity) for item in result] == [("1", 2), ("2", 1)]


def test_add_existing_book_increments_by_one_without_mutating():
    state = [
        CartItem(book=make_book("1"), quantity=2),
        CartItem(book=make_book("2"), quantity=5),
    ]
    result = cart_reducer(state, AddItem(book=make_book("1")))

    assert result is not state
    assert [(item.book.id, item.quantity) for item in result] == [("1", 3), ("2", 5)]
    assert state[0].quantity == 2
    # untouched entries are carried over as-is
    assert result[1] is state[1]


def test_add_increases_total_of_that_book_by_exactly_one():
    books = [make_book(str(n)) for n in range(1, 5)]
    state = []
    for b in books + books[:2]:
        state = cart_reducer(state, AddItem(book=b))

    before = {item.book.id: item.quantity for item in state}
    for b in books:
        after = {item.book.id: item.quantity for item in cart_reducer(state, AddItem(book=b))}
        for book_id, quantity in before.items():
            expected = quantity + 1 if book_id == b.id else quantity
            assert after[book_id] == expected


def test_remove_item_filters_entry():
    state = [
        CartItem(book=make_book("1"), quantity=1),
        CartItem(book=make_book("2"), quantity=1),
    ]
    result = cart_reducer(state, RemoveItem(book_id="1"))

    assert [item.book.id for item in result] == ["2"]


def test_remove_missing_item_is_a_noop():
    state = [CartItem(book=make_book("1"), quantity=1)]

    assert cart_reducer(state, RemoveItem(book_id="404")) == state


def test_update_quantity_sets_exact_value():
    state = [CartItem(book=make_book("1"), quantity=1)]
    result = cart_reducer(state, UpdateQuantity(book_id="1", quantity=250))

    assert result[0].quantity == 250


def test_update_quantity_to_zero_or_below_matches_remove():
    for prior in (1, 2, 7):
        state = [
            CartItem(book=make_book("1"), quantity=prior),
            CartItem(book=make_book("2"), quantity=3),
        ]
        removed = cart_reducer(state, RemoveItem(book_id="1"))
        for quantity in (0, -1, -50):
            assert cart_reducer(state, UpdateQuantity(book_id="1", quantity=quantity)) == removed


def test_clear_empties_cart():
    state = [CartItem(book=make_book("1"), quantity=4)]

    assert cart_reducer(state, ClearCart()) == []
    assert cart_reducer([], ClearCart()) == []


def test_unknown_action_returns_same_reference():
    state = [CartItem(book=make_book("1"), quantity=1)]

    assert cart_reducer(state, {"type": "APPLY_COUPON"}) is state
    assert cart_reducer(state, None) is state


def test_totals():
    state = [
        CartItem(book=make_book("1", price=5900), quantity=2),
        CartItem(book=make_book("8", price=29900), quantity=1),
    ]

    assert cart_total_amount(state) == 41700
    assert cart_total_items(state) == 3
    assert cart_total_amount([]) == 0
