import pytest

from storefront.constants.order_status import OrderStatus
from storefront.exceptions import GatewayError, ValidationFailed
from storefront.models.order import Order
from storefront.models.user import User
from storefront.schemas.orders_schemas import CreateOrderRequest
from storefront.services.order_service import create_order
from storefront.services.order_store import SqlOrderStore
from storefront.services.pincode_lookup import StaticDeliveryZoneRepository
from sqlmodel import select


def make_request(**overrides):
    data = {
        "amount": 41700,
        "items": [
            {"book_id": "1", "title": "How to Find Guru", "price": 5900, "quantity": 2},
            {"book_id": "8", "title": "When Good Fortune Arises", "price": 29900, "quantity": 1},
        ],
        "shipping_name": "Radha",
        "shipping_address": "12 Temple Road, Delhi",
        "shipping_pincode": "110001",
        "user_id": "user-1",
    }
    data.update(overrides)
    return CreateOrderRequest(**data)


@pytest.fixture
def store(session):
    session.add(User(id="user-1", phone="+919876543210"))
    session.commit()
    return SqlOrderStore(session)


def run(request, gateway, store, **kwargs):
    return create_order(
        request,
        gateway=gateway,
        store=store,
        zones=StaticDeliveryZoneRepository(),
        currency="INR",
        **kwargs,
    )


def test_creates_gateway_order_then_pending_record(gateway, store, session):
    created = run(make_request(), gateway, store)

    assert len(gateway.calls) == 1
    call = gateway.calls[0]
    assert call["amount"] == 41700
    assert call["currency"] == "INR"
    assert call["receipt"].startswith("order_")

    order = session.get(Order, created.order_id)
    assert order.status == OrderStatus.PENDING.value
    assert order.gateway_order_id == created.gateway_order_id == "order_fake1"
    assert order.gateway_payment_id is None
    assert order.total_amount == 41700
    assert order.items[1] == {"book_id": "8", "title": "When Good Fortune Arises", "price": 29900, "quantity": 1}


@pytest.mark.parametrize(
    "overrides, message",
    [
        ({"shipping_name": "  "}, "Missing required fields"),
        ({"user_id": ""}, "Missing required fields"),
        ({"amount": 0}, "Missing required fields"),
        ({"items": []}, "Missing required fields"),
        ({"amount": -100}, "Amount must be greater than zero"),
        ({"shipping_pincode": "1100"}, "Pincode must be exactly 6 digits"),
        ({"amount": 41600}, "Amount does not match order items"),
        ({"shipping_pincode": "999999"}, "Delivery not available for this pincode"),
    ],
)
def test_rejected_requests_never_reach_the_gateway(gateway, store, session, overrides, message):
    with pytest.raises(ValidationFailed) as excinfo:
        run(make_request(**overrides), gateway, store)

    assert excinfo.value.message == message
    assert gateway.calls == []
    assert session.exec(select(Order)).all() == []


def test_invalid_line_items(gateway, store):
    items = [{"book_id": "1", "title": "How to Find Guru", "price": 5900, "quantity": 0}]

    with pytest.raises(ValidationFailed) as excinfo:
        run(make_request(items=items, amount=5900), gateway, store)

    assert "items.0" in excinfo.value.fields
    assert gateway.calls == []


def test_unknown_books_are_rejected_when_catalog_is_given(gateway, store):
    with pytest.raises(ValidationFailed) as excinfo:
        run(make_request(), gateway, store, book_exists=lambda book_id: book_id != "8")

    assert excinfo.value.fields == {"items": "Not in catalog: 8"}
    assert gateway.calls == []


def test_gateway_failure_leaves_no_order(gateway, store, session):
    gateway.fail = True

    with pytest.raises(GatewayError):
        run(make_request(), gateway, store)

    assert session.exec(select(Order)).all() == []


def test_retries_without_key_create_separate_orders(gateway, store, session):
    first = run(make_request(), gateway, store)
    second = run(make_request(), gateway, store)

    assert first.order_id != second.order_id
    assert len(gateway.calls) == 2
    assert len(session.exec(select(Order)).all()) == 2


def test_idempotency_key_reuses_existing_order(gateway, store, session):
    first = run(make_request(), gateway, store, idempotency_key="checkout-42")
    second = run(make_request(), gateway, store, idempotency_key="checkout-42")

    assert second.reused is True
    assert second.order_id == first.order_id
    assert second.gateway_order_id == first.gateway_order_id
    assert len(gateway.calls) == 1
    assert len(session.exec(select(Order)).all()) == 1
