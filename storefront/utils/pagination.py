from typing import Callable, Generic, List, Optional, TypeVar

from pydantic import BaseModel
from sqlalchemy import func
from sqlmodel import select

T = TypeVar("T")

MAX_PAGE_SIZE = 50


class Page(BaseModel, Generic[T]):
    total_items: int
    total_pages: int
    current_page: int
    limit: int
    results: List[T]


def paginate(
    *,
    session,
    query,
    page: int = 1,
    limit: int = 10,
    transform: Optional[Callable] = None,
) -> Page:
    """
    Run ``query`` for one page. Out-of-range ``page``/``limit`` fall back to
    the first page of 10; ``limit`` is capped at MAX_PAGE_SIZE.
    """
    page = max(page, 1)
    limit = 10 if limit < 1 else min(limit, MAX_PAGE_SIZE)

    total = session.exec(
        select(func.count()).select_from(query.subquery())
    ).one()

    rows = session.exec(query.offset((page - 1) * limit).limit(limit)).all()

    return Page(
        total_items=total,
        total_pages=(total + limit - 1) // limit,
        current_page=page,
        limit=limit,
        results=[transform(row) for row in rows] if transform else list(rows),
    )
