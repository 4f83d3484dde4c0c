"""Exceptions raised by the tracker core."""
from __future__ import annotations


class TrackerError(Exception):
    """Base class for every error the tracker reports."""


class ConfigError(TrackerError):
    pass


class ApiError(TrackerError):
    """The jobs API could not be reached, answered non-2xx, or sent a bad body."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class RecordValidationError(TrackerError, ValueError):
    """Input rejected before any request was sent."""

    def __init__(self, field: str, message: str) -> None:
        super().__init__(f"{field}: {message}")
        self.field = field
        self.message = message
