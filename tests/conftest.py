import os

os.environ.setdefault("ENV", "test")
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("secret_key", "test-jwt-secret")
os.environ.setdefault("RAZORPAY_KEY_ID", "rzp_test_key")
os.environ.setdefault("RAZORPAY_KEY_SECRET", "test_secret_key_12345")
os.environ.setdefault("MOCK_OTP", "true")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.pool import StaticPool
from sqlmodel import Session, create_engine

from storefront.data.books import BOOKS
from storefront.database import create_db_and_tables, get_session, seed_reference_data
from storefront.dependencies.checkout import get_gateway
from storefront.exceptions import GatewayError
from storefront.main import app
from storefront.schemas.book_schemas import BookRead
from storefront.services.payment_gateway import GatewayOrder



class FakeGateway:
    def __init__(self):
        self.calls = []
        self.fail = False

    def create_order(self, amount, currency, receipt, notes=None):
        self.calls.append({"amount": amount, "currency": currency, "receipt": receipt, "notes": notes})
        if self.fail:
            raise GatewayError()
        return GatewayOrder(
            id=f"order_fake{len(self.calls)}",
            amount=amount,
            currency=currency,
            receipt=receipt,
        )


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    create_db_and_tables(engine)
    with Session(engine) as session:
        seed_reference_data(session)
    return engine


@pytest.fixture
def session(engine):
    with Session(engine) as session:
        yield session


@pytest.fixture
def gateway():
    return FakeGateway()


@pytest.fixture
def client(engine, gateway):
    def override_session():
        with Session(engine) as session:
            yield session

    app.dependency_overrides[get_session] = override_session
    app.dependency_overrides[get_gateway] = lambda: gateway
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def login(client):
    def _login(phone="9876543210"):
        response = client.post("/auth/verify", json={"phone": phone, "code": "123456"})
        assert response.status_code == 200
        body = response.json()
        return {"Authorization": f"Bearer {body['access_token']}"}, body["user"]["id"]

    return _login


@pytest.fixture
def book():
    def _book(book_id):
        return BookRead(**next(entry for entry in BOOKS if entry["id"] == book_id))

    return _book
