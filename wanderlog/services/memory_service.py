"""
Memory Service - memory creation with photo upload, listing and deletion
"""
import logging
from typing import Optional, List
from sqlalchemy import select
from sqlalchemy.orm import Session

from wanderlog.core.db import store_operation
from wanderlog.core.exceptions import (
    InvalidPhotoError,
    PhotoTooLargeError,
    ResourceNotFoundError,
    StoreOperationError,
)
from wanderlog.models.memory import Memory
from wanderlog.schemas.memory import MemoryCreate
from wanderlog.services.journal_views import places_to_visit
from wanderlog.services.photo_storage import PhotoStorage, PhotoUpload
from wanderlog.services.trip_service import TripService

logger = logging.getLogger(__name__)


class MemoryService:
    """Manages memories of a user's trips"""

    def __init__(self, db: Session, storage: PhotoStorage, max_photo_size_mb: int = 10):
        self.db = db
        self.storage = storage
        self.max_photo_size_mb = max_photo_size_mb

    def validate_photo(self, photo: PhotoUpload) -> None:
        """
        Reject non-image uploads and files over the size limit

        Raises:
            InvalidPhotoError: If the content type is not image/*
            PhotoTooLargeError: If the file exceeds the configured limit
        """
        if not photo.content_type or not photo.content_type.startswith("image/"):
            raise InvalidPhotoError(photo.content_type)
        if photo.size_mb > self.max_photo_size_mb:
            raise PhotoTooLargeError(photo.size_mb, self.max_photo_size_mb)

    def create_memory(
        self,
        user_id: int,
        trip_id: int,
        memory_data: MemoryCreate,
        photo: Optional[PhotoUpload] = None,
    ) -> Memory:
        """
        Create a memory, uploading its photo first

        The record is only written after the photo is stored. A failed upload
        writes nothing; a failed record write removes the uploaded photo again.

        Args:
            user_id: Owning user
            trip_id: Trip the memory belongs to
            memory_data: Parsed form fields
            photo: Optional photo file

        Returns:
            Created memory

        Raises:
            ResourceNotFoundError: If the trip does not exist for this user
            PhotoUploadError: If the photo could not be stored
            StoreOperationError: If the record could not be written
        """
        TripService(self.db).require_trip(trip_id, user_id)

        photo_url = None
        if photo is not None:
            self.validate_photo(photo)
            photo_url = self.storage.upload(user_id, photo)

        try:
            with store_operation(self.db, "Failed to add memory"):
                memory = Memory(
                    trip_id=trip_id,
                    user_id=user_id,
                    title=memory_data.title,
                    description=memory_data.description,
                    photo_url=photo_url,
                    tags=list(memory_data.tags),
                    date=memory_data.date,
                )
                self.db.add(memory)
                self.db.commit()
                self.db.refresh(memory)
        except StoreOperationError:
            if photo_url:
                self.storage.delete(photo_url)
            raise

        logger.info(
            f"Created memory {memory.id} on trip {trip_id}",
            extra={"memory_id": memory.id, "trip_id": trip_id, "has_photo": photo_url is not None},
        )
        return memory

    def list_trip_memories(self, trip_id: int, user_id: int) -> List[Memory]:
        """
        List memories referencing a trip, most recent date first

        No trip lookup is made: memories of a deleted trip are still returned.
        """
        with store_operation(self.db, "Failed to load memories"):
            stmt = (
                select(Memory)
                .where(Memory.trip_id == trip_id, Memory.user_id == user_id)
                .order_by(Memory.date.desc())
            )
            return list(self.db.execute(stmt).scalars().all())

    def list_user_memories(self, user_id: int) -> List[Memory]:
        with store_operation(self.db, "Failed to load memories"):
            stmt = (
                select(Memory)
                .where(Memory.user_id == user_id)
                .order_by(Memory.date.desc())
            )
            return list(self.db.execute(stmt).scalars().all())

    def list_places_to_visit(self, user_id: int, query: Optional[str] = None) -> List[Memory]:
        """Recompute the places-to-visit view from the user's full memory set"""
        return places_to_visit(self.list_user_memories(user_id), query)

    def delete_memory(self, memory_id: int, user_id: int) -> None:
        """
        Delete a single memory

        Raises:
            ResourceNotFoundError: If the memory does not exist for this user
        """
        with store_operation(self.db, "Failed to delete memory"):
            stmt = select(Memory).where(Memory.id == memory_id, Memory.user_id == user_id)
            memory = self.db.execute(stmt).scalar_one_or_none()
            if not memory:
                raise ResourceNotFoundError("Memory", memory_id)

            self.db.delete(memory)
            self.db.commit()

        logger.info(f"Deleted memory {memory_id}", extra={"memory_id": memory_id})
