"""
Trip Service - Manages trip CRUD operations scoped to the owning user
"""
import logging
from typing import Optional, List
from sqlalchemy import select
from sqlalchemy.orm import Session

from wanderlog.core.db import store_operation
from wanderlog.core.exceptions import ResourceNotFoundError
from wanderlog.models.trip import Trip, TripCategory
from wanderlog.schemas.trip import TripCreate, TripUpdate
from wanderlog.services.journal_views import build_trip_listing

logger = logging.getLogger(__name__)


class TripService:
    """Manages trip CRUD operations and the grouped trip listing"""

    def __init__(self, db: Session):
        self.db = db

    def create_trip(self, user_id: int, trip_data: TripCreate) -> Trip:
        """
        Create a new trip for a user

        Args:
            user_id: User ID
            trip_data: Trip creation data

        Returns:
            Created trip
        """
        with store_operation(self.db, "Failed to create trip"):
            trip = Trip(
                user_id=user_id,
                location=trip_data.location,
                date=trip_data.date,
                category=trip_data.category,
            )
            self.db.add(trip)
            self.db.commit()
            self.db.refresh(trip)

        logger.info(f"Created trip {trip.id} for user {user_id}", extra={"trip_id": trip.id})
        return trip

    def get_trip(self, trip_id: int, user_id: int) -> Optional[Trip]:
        """
        Get a trip by ID (scoped to user)

        Args:
            trip_id: Trip ID
            user_id: User ID (for security scoping)

        Returns:
            Trip or None
        """
        with store_operation(self.db, "Failed to load trip details"):
            stmt = select(Trip).where(
                Trip.id == trip_id,
                Trip.user_id == user_id
            )
            return self.db.execute(stmt).scalar_one_or_none()

    def require_trip(self, trip_id: int, user_id: int) -> Trip:
        """Like get_trip, raising ResourceNotFoundError when absent."""
        trip = self.get_trip(trip_id, user_id)
        if not trip:
            raise ResourceNotFoundError("Trip", trip_id)
        return trip

    def list_user_trips(self, user_id: int) -> List[Trip]:
        """
        List all of a user's trips, most recent date first
        """
        with store_operation(self.db, "Failed to load trips"):
            stmt = (
                select(Trip)
                .where(Trip.user_id == user_id)
                .order_by(Trip.date.desc())
            )
            return list(self.db.execute(stmt).scalars().all())

    def list_grouped_trips(
        self,
        user_id: int,
        category: Optional[TripCategory] = None,
        query: Optional[str] = None,
    ) -> dict:
        """
        Fetch the user's trips, then filter by category/location query and
        group them by location
        """
        trips = self.list_user_trips(user_id)
        return build_trip_listing(trips, category, query)

    def update_trip(
        self,
        trip_id: int,
        user_id: int,
        trip_data: TripUpdate
    ) -> Trip:
        """
        Patch the provided fields of a user's trip

        Raises:
            ResourceNotFoundError: If the trip does not exist for this user
        """
        trip = self.require_trip(trip_id, user_id)

        with store_operation(self.db, "Failed to update trip"):
            update_fields = trip_data.model_dump(exclude_unset=True, exclude_none=True)
            for field, value in update_fields.items():
                setattr(trip, field, value)

            self.db.commit()
            self.db.refresh(trip)

        logger.info(
            f"Updated trip {trip_id}",
            extra={"trip_id": trip_id, "fields": sorted(update_fields)},
        )
        return trip

    def delete_trip(self, trip_id: int, user_id: int) -> None:
        """
        Delete a single trip; memories referencing it are left untouched

        Raises:
            ResourceNotFoundError: If the trip does not exist for this user
        """
        trip = self.require_trip(trip_id, user_id)

        with store_operation(self.db, "Failed to delete trip"):
            self.db.delete(trip)
            self.db.commit()

        logger.info(f"Deleted trip {trip_id}", extra={"trip_id": trip_id})
