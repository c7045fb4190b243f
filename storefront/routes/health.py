import logging
from datetime import datetime

from fastapi import APIRouter, Depends
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy import text
from sqlmodel import Session

from storefront.config import settings
from storefront.database import get_session

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get("/check")
def health_check(session: Session = Depends(get_session)):
    database = "ok"
    try:
        session.execute(text("SELECT 1"))
    except SQLAlchemyError:
        logger.exception("Database ping failed")
        database = "failed"

    return {
        "status": "ok" if database == "ok" else "degraded",
        "database": database,
        "payments_configured": bool(settings.RAZORPAY_KEY_SECRET),
        "timestamp": datetime.utcnow().isoformat(),
    }
