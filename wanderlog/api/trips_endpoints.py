"""
Trip API endpoints - trip list, detail, create/edit and delete
"""
from typing import Optional
from fastapi import APIRouter, Depends, Query, status

from wanderlog.core.dependencies import get_current_user, get_memory_service, get_trip_service
from wanderlog.core.validation import parse_category_filter
from wanderlog.models.user import User
from wanderlog.schemas.base import Envelope, Message
from wanderlog.schemas.memory import MemoryRead, TripDetailResponse
from wanderlog.schemas.trip import TripCreate, TripListResponse, TripRead, TripUpdate
from wanderlog.services.memory_service import MemoryService
from wanderlog.services.trip_service import TripService

router = APIRouter(prefix="/trips", tags=["trips"])


@router.post("", response_model=Envelope[TripRead], status_code=status.HTTP_201_CREATED)
async def create_trip(
    trip_data: TripCreate,
    service: TripService = Depends(get_trip_service),
    current_user: User = Depends(get_current_user),
):
    """
    Create a new trip

    - **location**: Trip location (e.g., "Paris, France")
    - **date**: Trip date
    - **category**: One of Beach, Mountains, City, Adventure, Cultural, Nature
    """
    trip = service.create_trip(current_user.id, trip_data)

    return Envelope(
        status="ok",
        data=TripRead.model_validate(trip)
    )


@router.get("", response_model=Envelope[TripListResponse])
async def list_trips(
    category: Optional[str] = Query(None, description="Category name or 'All'"),
    q: Optional[str] = Query(None, description="Case-insensitive location search"),
    service: TripService = Depends(get_trip_service),
    current_user: User = Depends(get_current_user),
):
    """
    List the user's trips grouped by location

    - **category**: Optional filter; "All" or omitted means no filter
    - **q**: Optional location substring
    """
    listing = service.list_grouped_trips(current_user.id, parse_category_filter(category), q)

    return Envelope(status="ok", data=TripListResponse.model_validate(listing, from_attributes=True))


@router.get("/{trip_id}", response_model=Envelope[TripDetailResponse])
async def get_trip(
    trip_id: int,
    service: TripService = Depends(get_trip_service),
    memory_service: MemoryService = Depends(get_memory_service),
    current_user: User = Depends(get_current_user),
):
    """
    Get a trip with its memories
    """
    trip = service.require_trip(trip_id, current_user.id)
    memories = memory_service.list_trip_memories(trip_id, current_user.id)

    return Envelope(
        status="ok",
        data=TripDetailResponse(
            trip=TripRead.model_validate(trip),
            memories=[MemoryRead.model_validate(m) for m in memories],
        )
    )


@router.put("/{trip_id}", response_model=Envelope[TripRead])
async def update_trip(
    trip_id: int,
    trip_data: TripUpdate,
    service: TripService = Depends(get_trip_service),
    current_user: User = Depends(get_current_user),
):
    """
    Update a trip

    All fields optional - only provided fields will be updated
    """
    trip = service.update_trip(trip_id, current_user.id, trip_data)

    return Envelope(
        status="ok",
        data=TripRead.model_validate(trip)
    )


@router.delete("/{trip_id}", response_model=Envelope[Message])
async def delete_trip(
    trip_id: int,
    service: TripService = Depends(get_trip_service),
    current_user: User = Depends(get_current_user),
):
    """
    Delete a trip; its memories are kept
    """
    service.delete_trip(trip_id, current_user.id)

    return Envelope(status="ok", data=Message(message="Trip deleted"))
