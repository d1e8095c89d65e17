"""Application error hierarchy shared by the service layer."""

from __future__ import annotations


class HotelApplicationError(Exception):
    """Raised when a storage operation fails or the service cannot complete."""


class DataNotFoundError(HotelApplicationError):
    """Raised when a referenced hotel, room or room type does not exist."""


class LimitExceededError(HotelApplicationError):
    """Raised when a hotel already holds its maximum number of rooms."""
