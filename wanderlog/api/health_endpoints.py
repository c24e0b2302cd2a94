"""
Health check endpoints.

- GET /health: database reachability, version and uptime
"""

from fastapi import APIRouter, Depends
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
import logging
import time
from datetime import datetime, timezone

from wanderlog.config.settings import get_settings
from wanderlog.core.db import get_db
from wanderlog.core.error_handlers import error_handler

logger = logging.getLogger(__name__)

router = APIRouter(tags=["health"])

# Application start time for uptime calculation
_app_start_time = time.time()


@router.get("/health")
async def health_check(db: Session = Depends(get_db)):
    """Report overall status with a database round trip."""
    settings = get_settings()

    try:
        db.execute(text("SELECT 1"))
        database = {"status": "healthy"}
    except SQLAlchemyError as e:
        logger.error(f"Database health check failed: {e}")
        database = {"status": "unhealthy", "error": str(e)}

    return {
        "status": "healthy" if database["status"] == "healthy" else "unhealthy",
        "version": settings.app_version,
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "uptime_seconds": round(time.time() - _app_start_time, 1),
        "details": {"database": database},
        "error_statistics": error_handler.get_error_statistics(),
    }
