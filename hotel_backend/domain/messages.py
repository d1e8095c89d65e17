"""User-facing response messages."""

from __future__ import annotations

from enum import Enum


class ErrorMessage(str, Enum):
    INTERNAL_SERVER_ERROR = "Something went wrong."
    MISSING_REQUIRED_FIELDS = "Required fields are missing."
    INVALID_REQUEST_PARAMETERS = "Request parameters are invalid."
    ROOM_LIMIT_REACHED = "Maximum room count limit reached for hotel."
    DATA_NOT_FOUND = "Data not found."


class SuccessMessage(str, Enum):
    SUCCESSFULLY_ADDED = "Successfully added."
    SUCCESSFULLY_UPDATED = "Successfully updated."
    SUCCESSFULLY_DELETED = "Successfully deleted."
    SUCCESSFULLY_RETURNED = "Successfully returned."
