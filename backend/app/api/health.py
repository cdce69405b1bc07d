"""
Health and connectivity endpoints.
"""

import logging
from datetime import datetime, timezone

from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse
from sqlalchemy.orm import Session

from app.config import settings
from app.dependencies import get_db
from app.errors import PersistenceError
from app.schemas.transaction import to_iso
from app.services.transaction_service import count_transactions

logger = logging.getLogger(__name__)

router = APIRouter(tags=["health"])


def _now() -> str:
    return to_iso(datetime.now(timezone.utc))


@router.get("/health")
def health_check(db: Session = Depends(get_db)):
    """Health check endpoint, confirms the database answers a count query."""
    try:
        count = count_transactions(db)
    except PersistenceError as e:
        return JSONResponse(
            status_code=500,
            content={
                "status": "error",
                "error": e.details or e.message,
                "timestamp": _now(),
            },
        )

    return {
        "status": "ok",
        "database": "connected",
        "transactionCount": count,
        "timestamp": _now(),
    }


@router.get("/test-connection")
def test_connection():
    """Connectivity probe that does not touch the database."""
    return {
        "message": "Connection successful!",
        "timestamp": _now(),
        "server": f"{settings.app_name} {settings.app_version}",
        "status": "ok",
    }
