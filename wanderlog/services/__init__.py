# Business logic services

from .trip_service import TripService
from .memory_service import MemoryService
from .photo_storage import (
    PhotoStorage,
    LocalPhotoStorage,
    PhotoUpload,
    create_photo_storage,
)
from .journal_views import (
    filter_trips,
    group_trips_by_location,
    build_trip_listing,
    is_place_to_visit,
    places_to_visit,
)

__all__ = [
    "TripService",
    "MemoryService",
    "PhotoStorage",
    "LocalPhotoStorage",
    "PhotoUpload",
    "create_photo_storage",
    "filter_trips",
    "group_trips_by_location",
    "build_trip_listing",
    "is_place_to_visit",
    "places_to_visit",
]
