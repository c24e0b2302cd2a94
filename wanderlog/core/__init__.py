"""
Core infrastructure for the Wanderlog backend: database sessions,
exceptions and error envelopes, tokens, password hashing and logging.
"""

from .exceptions import (
    ErrorCode,
    WanderlogException,
    ValidationFailedError,
    AuthenticationError,
    ResourceNotFoundError,
    StoreOperationError,
    PhotoUploadError,
)

__all__ = [
    "ErrorCode",
    "WanderlogException",
    "ValidationFailedError",
    "AuthenticationError",
    "ResourceNotFoundError",
    "StoreOperationError",
    "PhotoUploadError",
]
