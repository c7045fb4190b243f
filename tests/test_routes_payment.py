from storefront.config import settings
from storefront.models.order import Order
from storefront.utils.razorpay_signature import generate_signature

GATEWAY_SECRET = "test_secret_key_12345"


def place_order(client, login):
    headers, user_id = login()
    body = {
        "amount": 5900,
        "items": [{"book_id": "1", "title": "How to Find Guru", "price": 5900, "quantity": 1}],
        "shipping_name": "Radha",
        "shipping_address": "12 Temple Road, Delhi",
        "shipping_pincode": "560001",
        "user_id": user_id,
    }
    created = client.post("/order/create", json=body, headers=headers).json()
    return headers, created


def verify_body(created, payment_id="pay_123", signature=None):
    return {
        "gateway_order_id": created["gateway_order_id"],
        "gateway_payment_id": payment_id,
        "signature": signature or generate_signature(created["gateway_order_id"], payment_id, GATEWAY_SECRET),
        "order_id": created["order_id"],
    }


def test_verified_payment_marks_order_paid(client, login, session):
    headers, created = place_order(client, login)

    response = client.post("/payment/verify", json=verify_body(created))

    assert response.status_code == 200
    assert response.json() == {"success": True}
    order = session.get(Order, created["order_id"])
    assert order.status == "Paid"
    assert order.gateway_payment_id == "pay_123"

    detail = client.get(f"/orders/{created['order_id']}", headers=headers).json()
    assert [event["event_type"] for event in detail["events"]] == ["order_created", "payment_verified"]


def test_repeating_verification_still_succeeds(client, login, session):
    _, created = place_order(client, login)

    assert client.post("/payment/verify", json=verify_body(created)).status_code == 200
    assert client.post("/payment/verify", json=verify_body(created)).status_code == 200
    assert session.get(Order, created["order_id"]).status == "Paid"


def test_tampered_signature(client, login, session):
    _, created = place_order(client, login)
    good = verify_body(created)["signature"]
    tampered = ("0" if good[0] != "0" else "1") + good[1:]

    response = client.post("/payment/verify", json=verify_body(created, signature=tampered))

    assert response.status_code == 400
    assert response.json() == {"error": "Payment verification failed"}
    assert session.get(Order, created["order_id"]).status == "Pending"


def test_wrong_order_and_bad_signature_look_the_same(client, login):
    _, created = place_order(client, login)
    wrong_order = {**verify_body(created), "order_id": "not-an-order"}
    bad_signature = verify_body(created, signature="abc")

    first = client.post("/payment/verify", json=wrong_order)
    second = client.post("/payment/verify", json=bad_signature)

    assert first.status_code == second.status_code == 400
    assert first.json() == second.json() == {"error": "Payment verification failed"}


def test_missing_fields(client):
    response = client.post("/payment/verify", json={"gateway_order_id": "order_1", "signature": ""})

    assert response.status_code == 400
    assert response.json()["error"] == "Missing required fields"
    assert set(response.json()["fields"]) == {"gateway_payment_id", "signature", "order_id"}


def test_missing_secret(client, login, monkeypatch, session):
    _, created = place_order(client, login)
    monkeypatch.setattr(settings, "RAZORPAY_KEY_SECRET", None)

    response = client.post("/payment/verify", json=verify_body(created))

    assert response.status_code == 500
    assert response.json() == {"error": "Payment verification failed"}
    assert session.get(Order, created["order_id"]).status == "Pending"
