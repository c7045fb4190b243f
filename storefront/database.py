from sqlmodel import SQLModel, create_engine, Session
from storefront.config import settings


def _engine_kwargs(url: str) -> dict:
    if url.startswith("sqlite"):
        return {"connect_args": {"check_same_thread": False}}
    return {
        "pool_pre_ping": True,   # checks dead connections
        "pool_recycle": 1800,    # refresh every 30 min
    }


engine = create_engine(
    settings.database_url,
    echo=False,
    **_engine_kwargs(settings.database_url),
)


def create_db_and_tables(bind=None):
    from storefront.models import book, delivery_zone, order, order_event, user  # noqa: F401
    SQLModel.metadata.create_all(bind or engine)


def seed_reference_data(session: Session):
    """Load the book catalog and delivery zones into empty tables."""
    from sqlmodel import select
    from storefront.data.books import BOOKS
    from storefront.data.delivery_zones import DELIVERY_ZONES
    from storefront.models.book import Book
    from storefront.models.delivery_zone import DeliveryZone

    if session.exec(select(Book)).first() is None:
        for entry in BOOKS:
            session.add(Book(**entry))

    if session.exec(select(DeliveryZone)).first() is None:
        for position, entry in enumerate(DELIVERY_ZONES):
            session.add(DeliveryZone(position=position, **entry))

    session.commit()


def get_session():
    with Session(engine) as session:
        yield session
