"""
Dependency providers for FastAPI.

The current user and the photo storage are passed to endpoints explicitly
through these providers; tests replace them via ``app.dependency_overrides``.
"""

from fastapi import Depends, Request
from functools import lru_cache
from sqlalchemy import select
from sqlalchemy.orm import Session
import logging

from wanderlog.config.settings import get_settings
from wanderlog.core.db import get_db, store_operation
from wanderlog.core.exceptions import AuthenticationError
from wanderlog.core.jwt import decode_token
from wanderlog.models.user import User
from wanderlog.services.memory_service import MemoryService
from wanderlog.services.photo_storage import PhotoStorage, create_photo_storage
from wanderlog.services.trip_service import TripService

logger = logging.getLogger(__name__)


def _bearer_token(request: Request) -> str:
    auth_header = request.headers.get("Authorization", "")
    parts = auth_header.split()
    if len(parts) != 2 or parts[0].lower() != "bearer":
        raise AuthenticationError("Missing or invalid authorization header")
    return parts[1]


async def get_current_user(request: Request, db: Session = Depends(get_db)) -> User:
    """
    Resolve the signed-in user from the bearer token.

    Raises:
        AuthenticationError: If the token is missing, invalid or expired,
            or its user no longer exists
    """
    payload = decode_token(_bearer_token(request))
    if not payload or not str(payload.get("sub", "")).isdigit():
        raise AuthenticationError("Invalid or expired token")

    with store_operation(db, "Failed to load user"):
        user = db.execute(
            select(User).where(User.id == int(payload["sub"]))
        ).scalar_one_or_none()

    if not user:
        raise AuthenticationError("Invalid or expired token")

    request.state.user_id = user.id
    return user


@lru_cache
def get_photo_storage() -> PhotoStorage:
    """Process-wide photo storage built from settings."""
    storage = create_photo_storage(get_settings().storage)
    logger.info(f"Photo storage backend: {type(storage).__name__}")
    return storage


def get_trip_service(db: Session = Depends(get_db)) -> TripService:
    return TripService(db)


def get_memory_service(
    db: Session = Depends(get_db),
    storage: PhotoStorage = Depends(get_photo_storage),
) -> MemoryService:
    return MemoryService(db, storage, max_photo_size_mb=get_settings().storage.max_photo_size_mb)
