"""
Custom exceptions for AdTracker.
"""

from typing import Any


class AdTrackerError(Exception):
    """Base exception for AdTracker."""

    status_code: int = 400

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        self.message = message
        self.details = details or {}
        super().__init__(message)


class ConfigError(AdTrackerError):
    """Configuration related errors."""

    status_code = 500


class ValidationError(AdTrackerError):
    """Missing or malformed input."""

    status_code = 400


class NotFoundError(AdTrackerError):
    """Referenced identifier does not exist."""

    status_code = 404


class StorageError(AdTrackerError):
    """Reading or writing the data file failed."""

    status_code = 500
