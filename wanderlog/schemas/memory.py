"""
Memory schemas for API requests/responses
"""
from pydantic import BaseModel, Field
import datetime as dt
from typing import Optional

from wanderlog.schemas.trip import TripRead


class MemoryCreate(BaseModel):
    """Parsed memory form fields (tags already split)"""
    title: str = Field(..., min_length=1, max_length=255)
    description: Optional[str] = None
    tags: list[str] = []
    date: dt.date


class MemoryRead(BaseModel):
    """Schema for memory read response"""
    id: int
    trip_id: int
    user_id: int
    title: str
    description: Optional[str]
    photo_url: Optional[str]
    tags: list[str]
    date: dt.date
    created_at: dt.datetime

    class Config:
        from_attributes = True


class TripDetailResponse(BaseModel):
    """A trip together with its memories"""
    trip: TripRead
    memories: list[MemoryRead] = []


class PlacesToVisitResponse(BaseModel):
    """Memories whose tags mark a future intention, filtered by query"""
    query: str = ""
    total: int = 0
    memories: list[MemoryRead] = []
