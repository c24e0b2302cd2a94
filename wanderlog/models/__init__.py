"""
Models package for the Wanderlog backend.

Importing the package registers every table on the shared declarative Base.
"""

from .user import User
from .trip import Trip, TripCategory
from .memory import Memory

__all__ = [
    "User",
    "Trip",
    "TripCategory",
    "Memory",
]
