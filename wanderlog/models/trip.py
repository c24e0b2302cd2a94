"""
Trip model for the travel journal
"""
from sqlalchemy import Column, Integer, String, Date, DateTime, ForeignKey, Enum as SQLEnum
from sqlalchemy.sql import func
from sqlalchemy.orm import relationship
import enum

from wanderlog.core.db import Base


class TripCategory(str, enum.Enum):
    """Fixed set of trip categories"""
    BEACH = "Beach"
    MOUNTAINS = "Mountains"
    CITY = "City"
    ADVENTURE = "Adventure"
    CULTURAL = "Cultural"
    NATURE = "Nature"


class Trip(Base):
    """
    Trip represents a single travel event of one user
    at one location, on one date, in one category
    """
    __tablename__ = "trips"

    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    location = Column(String(255), nullable=False)
    date = Column(Date, nullable=False, index=True)
    category = Column(
        SQLEnum(TripCategory, values_callable=lambda e: [m.value for m in e], native_enum=False, length=32),
        nullable=False,
        index=True,
    )
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
    updated_at = Column(DateTime(timezone=True), server_default=func.now(), onupdate=func.now(), nullable=False)

    # Relationships
    user = relationship("User", back_populates="trips")

    def __repr__(self) -> str:  # pragma: no cover
        return f"<Trip id={self.id} location={self.location!r} date={self.date}>"
