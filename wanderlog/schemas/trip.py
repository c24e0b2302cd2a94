"""
Trip schemas for API requests/responses
"""
from pydantic import BaseModel, Field, field_validator
import datetime as dt
from typing import Optional
from wanderlog.models.trip import TripCategory


class TripCreate(BaseModel):
    """Schema for creating a new trip"""
    location: str = Field(..., min_length=1, max_length=255)
    date: dt.date
    category: TripCategory

    @field_validator("location", mode="before")
    @classmethod
    def strip_location(cls, v):
        """Trim surrounding whitespace so a blank location fails the length check"""
        if isinstance(v, str):
            return v.strip()
        return v


class TripUpdate(BaseModel):
    """Schema for updating a trip"""
    location: Optional[str] = Field(None, min_length=1, max_length=255)
    date: Optional[dt.date] = None
    category: Optional[TripCategory] = None

    @field_validator("location", mode="before")
    @classmethod
    def strip_location(cls, v):
        """Trim surrounding whitespace so a blank location fails the length check"""
        if isinstance(v, str):
            return v.strip()
        return v


class TripRead(BaseModel):
    """Schema for trip read response"""
    id: int
    user_id: int
    location: str
    date: dt.date
    category: TripCategory
    created_at: dt.datetime
    updated_at: dt.datetime

    class Config:
        from_attributes = True


class TripLocationGroup(BaseModel):
    """Trips sharing one exact location string"""
    location: str
    trips: list[TripRead]


class TripListResponse(BaseModel):
    """Filtered trips grouped by location, in first-seen order"""
    category: Optional[TripCategory] = None
    query: str = ""
    total: int = 0
    groups: list[TripLocationGroup] = []
    is_empty: bool = True
    empty_message: Optional[str] = None
