"""
Custom exceptions for FotoCRM.
Every error carries a machine code, a user-facing message and an HTTP status.
"""

from typing import Any


class FotoCRMException(Exception):
    """Base exception for all FotoCRM errors."""

    def __init__(
        self,
        error: str,
        message: str,
        status_code: int = 500,
        details: dict[str, Any] | None = None,
    ):
        self.error = error
        self.message = message
        self.status_code = status_code
        self.details = details or {}
        super().__init__(message)

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to response dictionary."""
        response = {
            "error": self.error,
            "message": self.message,
        }
        if self.details:
            response["details"] = self.details
        return response


class ValidationException(FotoCRMException):
    """400 - Malformed request or out-of-range argument."""

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        super().__init__(
            error="validation_failed",
            message=message,
            status_code=400,
            details=details,
        )


class PhotoNotFoundException(FotoCRMException):
    """404 - Photo not found in the catalog."""

    def __init__(self, photo_id: str):
        super().__init__(
            error="not_found",
            message=f"Photo with ID '{photo_id}' not found",
            status_code=404,
        )


class ConfigurationNotFoundException(FotoCRMException):
    """404 - No saved configuration under the given share code."""

    def __init__(self, code: str):
        super().__init__(
            error="not_found",
            message=f"Configuration '{code}' not found",
            status_code=404,
            details={"code": code},
        )


class SaveInProgressException(FotoCRMException):
    """409 - A save is already in flight for this session."""

    def __init__(self):
        super().__init__(
            error="save_in_progress",
            message="A save is already in progress",
            status_code=409,
        )


class RemoteStoreException(FotoCRMException):
    """502 - The remote configuration store could not be reached or failed."""

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        super().__init__(
            error="remote_store_error",
            message=message,
            status_code=502,
            details=details,
        )


class StorageException(FotoCRMException):
    """500 - Storage backend error."""

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        super().__init__(
            error="storage_error",
            message=message,
            status_code=500,
            details=details,
        )
