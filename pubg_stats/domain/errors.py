"""Exceptions raised by the PUBG client."""
from __future__ import annotations

from typing import Any, Optional


class PubgError(Exception):
    """Base exception for pubg_stats errors."""
    pass


class ConfigurationError(PubgError, ValueError):
    """Raised when the client cannot be constructed (e.g. no API key)."""
    pass


class InvalidArgumentError(PubgError, ValueError):
    """Raised before any request is issued when call arguments are malformed."""
    pass


class ApiError(PubgError):
    """
    The API answered with a failure body carrying an ``errors`` field.

    ``errors`` holds that field exactly as the server sent it, usually a list
    of error descriptors such as ``{"title": "Unauthorized", "detail": ...}``.
    """

    def __init__(self, errors: Any, status_code: Optional[int] = None):
        super().__init__(f"PUBG API error (HTTP {status_code}): {errors!r}")
        self.errors = errors
        self.status_code = status_code
