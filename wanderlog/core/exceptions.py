"""
Custom exceptions for the Wanderlog backend.

Every failure collapses into one of three kinds: validation failures, store
(or storage) failures and not-found. Each carries the user-facing message
that ends up in the error envelope.
"""

from typing import Optional, Dict, Any
from enum import Enum


class ErrorCode(str, Enum):
    """Standardized error codes for the application."""

    # Validation errors
    VALIDATION_ERROR = "VALIDATION_ERROR"
    INVALID_PHOTO = "INVALID_PHOTO"
    PHOTO_TOO_LARGE = "PHOTO_TOO_LARGE"

    # Authentication errors
    AUTHENTICATION_REQUIRED = "AUTHENTICATION_REQUIRED"
    INVALID_CREDENTIALS = "INVALID_CREDENTIALS"
    EMAIL_ALREADY_REGISTERED = "EMAIL_ALREADY_REGISTERED"

    # Lookup errors
    NOT_FOUND = "NOT_FOUND"

    # Store / storage errors
    STORE_OPERATION_FAILED = "STORE_OPERATION_FAILED"
    PHOTO_UPLOAD_FAILED = "PHOTO_UPLOAD_FAILED"

    # Generic errors
    INTERNAL_SERVER_ERROR = "INTERNAL_SERVER_ERROR"


class WanderlogException(Exception):
    """Base exception for the Wanderlog backend."""

    def __init__(
        self,
        message: str,
        error_code: ErrorCode,
        details: Optional[Dict[str, Any]] = None,
        status_code: int = 500
    ):
        super().__init__(message)
        self.message = message
        self.error_code = error_code
        self.details = details or {}
        self.status_code = status_code


class ValidationFailedError(WanderlogException):
    """Raised when a required field is missing or a value is outside its fixed set."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(
            message=message,
            error_code=ErrorCode.VALIDATION_ERROR,
            details=details,
            status_code=400
        )


class AuthenticationError(WanderlogException):
    """Raised when a request has no valid bearer token."""

    def __init__(self, message: str = "Authentication required"):
        super().__init__(
            message=message,
            error_code=ErrorCode.AUTHENTICATION_REQUIRED,
            status_code=401
        )


class InvalidCredentialsError(WanderlogException):
    """Raised when email/password sign-in fails."""

    def __init__(self):
        super().__init__(
            message="Invalid credentials",
            error_code=ErrorCode.INVALID_CREDENTIALS,
            status_code=401
        )


class EmailAlreadyRegisteredError(WanderlogException):
    def __init__(self, email: str):
        super().__init__(
            message="Email already registered",
            error_code=ErrorCode.EMAIL_ALREADY_REGISTERED,
            details={"email": email},
            status_code=400
        )


class ResourceNotFoundError(WanderlogException):
    """Raised when a requested record does not exist for the current user."""

    def __init__(self, resource: str, resource_id: Any = None):
        details = {"resource": resource.lower()}
        if resource_id is not None:
            details["id"] = resource_id
        super().__init__(
            message=f"{resource} not found",
            error_code=ErrorCode.NOT_FOUND,
            details=details,
            status_code=404
        )


class InvalidPhotoError(WanderlogException):
    """Raised when an uploaded file is not an image."""

    def __init__(self, content_type: Optional[str]):
        super().__init__(
            message=f"Invalid photo type: {content_type or 'unknown'}",
            error_code=ErrorCode.INVALID_PHOTO,
            details={"content_type": content_type},
            status_code=400
        )


class PhotoTooLargeError(WanderlogException):
    """Raised when an uploaded photo exceeds the size limit."""

    def __init__(self, size_mb: float, max_size_mb: int):
        super().__init__(
            message=f"Photo size {size_mb:.1f}MB exceeds maximum allowed size of {max_size_mb}MB",
            error_code=ErrorCode.PHOTO_TOO_LARGE,
            details={"size_mb": size_mb, "max_size_mb": max_size_mb},
            status_code=413
        )


class PhotoUploadError(WanderlogException):
    """Raised when the photo could not be written to object storage."""

    def __init__(self, message: str = "Failed to upload photo", details: Optional[Dict[str, Any]] = None):
        super().__init__(
            message=message,
            error_code=ErrorCode.PHOTO_UPLOAD_FAILED,
            details=details,
            status_code=502
        )


class StoreOperationError(WanderlogException):
    """Raised when a record store call fails. The message is the user-facing notification."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(
            message=message,
            error_code=ErrorCode.STORE_OPERATION_FAILED,
            details=details,
            status_code=500
        )
