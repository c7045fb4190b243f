from fastapi import Depends, Request
from sqlmodel import Session, select

from storefront.database import get_session
from storefront.models.book import Book
from storefront.services.auth_strategy import AuthStrategy
from storefront.services.order_store import OrderStore, SqlOrderStore
from storefront.services.payment_gateway import PaymentGateway, get_payment_gateway
from storefront.services.pincode_lookup import DeliveryZoneRepository, SqlDeliveryZoneRepository


def get_order_store(session: Session = Depends(get_session)) -> OrderStore:
    return SqlOrderStore(session)


def get_zone_repository(session: Session = Depends(get_session)) -> DeliveryZoneRepository:
    return SqlDeliveryZoneRepository(session)


def get_gateway() -> PaymentGateway:
    return get_payment_gateway()


def get_auth_strategy(request: Request) -> AuthStrategy:
    return request.app.state.auth_strategy


def get_book_exists(session: Session = Depends(get_session)):
    # Catalog not seeded: accept any book id
    if session.exec(select(Book)).first() is None:
        return None
    return lambda book_id: session.get(Book, book_id) is not None
