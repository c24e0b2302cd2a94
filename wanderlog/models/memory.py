"""
Memory model - one moment within a trip
"""
from sqlalchemy import Column, Integer, String, Date, DateTime, ForeignKey, Text, JSON
from sqlalchemy.sql import func
from sqlalchemy.orm import relationship

from wanderlog.core.db import Base


class Memory(Base):
    """
    A titled moment of a trip, optionally with a photo and tags.

    trip_id is a plain indexed column: deleting a trip leaves its memories in place.
    """
    __tablename__ = "memories"

    id = Column(Integer, primary_key=True, index=True)
    trip_id = Column(Integer, nullable=False, index=True)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
    title = Column(String(255), nullable=False)
    description = Column(Text, nullable=True)
    photo_url = Column(String(1024), nullable=True)
    tags = Column(JSON, nullable=False, default=list)
    date = Column(Date, nullable=False, index=True)
    created_at = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)

    # Relationships
    user = relationship("User", back_populates="memories")

    def __repr__(self) -> str:  # pragma: no cover
        return f"<Memory id={self.id} trip_id={self.trip_id} title={self.title!r}>"
