"""Hotel management and location/pax search."""

from __future__ import annotations

import sqlite3
from typing import Optional

from hotel_backend.domain.constraints import normalize_search_term, validate_pax_search
from hotel_backend.domain.models import Hotel, Room, new_hotel_id
from hotel_backend.repository.data_repository import DataRepository
from hotel_backend.services.errors import DataNotFoundError, HotelApplicationError
from hotel_backend.services.matching_service import match_rooms
from hotel_backend.utils.config import Settings, get_settings
from hotel_backend.utils.logger import get_logger


logger = get_logger(__name__)


class SearchValidationError(ValueError):
    """Raised when a location/pax search is called with invalid inputs."""


class HotelService:
    def __init__(
        self,
        repository: Optional[DataRepository] = None,
        settings: Optional[Settings] = None,
    ) -> None:
        self._settings = settings or get_settings()
        self._repository = repository or DataRepository(self._settings)

    def add_hotel(self, *, name: str, location: str, room_count: int) -> Hotel:
        hotel = Hotel(
            hotel_id=new_hotel_id(),
            name=name,
            location=location,
            room_count=room_count,
        )
        try:
            self._repository.save_hotel(hotel)
        except sqlite3.Error as exc:
            raise HotelApplicationError("Failed to save hotel info in database.") from exc
        logger.debug("Successfully added hotel data | hotel_id=%s", hotel.hotel_id)
        return hotel

    def update_hotel(
        self,
        *,
        hotel_id: str,
        name: str,
        location: str,
        room_count: int,
    ) -> Hotel:
        existing = self.get_hotel_by_id(hotel_id)
        hotel = Hotel(
            hotel_id=existing.hotel_id,
            name=name,
            location=location,
            room_count=room_count,
        )
        try:
            self._repository.update_hotel(hotel)
        except sqlite3.Error as exc:
            raise HotelApplicationError("Failed to update hotel info in database.") from exc
        logger.debug("Successfully updated hotel data | hotel_id=%s", hotel_id)
        return hotel

    def get_hotel_list(self, search_term: Optional[str] = None) -> list[Hotel]:
        try:
            return self._repository.list_hotels(normalize_search_term(search_term))
        except sqlite3.Error as exc:
            raise HotelApplicationError("Failed to get all hotel data from database.") from exc

    def get_hotel_by_id(self, hotel_id: str, include_rooms: bool = False) -> Hotel:
        try:
            hotel = self._repository.get_hotel(hotel_id, include_rooms=include_rooms)
        except sqlite3.Error as exc:
            raise HotelApplicationError("Failed to get hotel info from database.") from exc
        if hotel is None:
            raise DataNotFoundError(f"Hotel not found for id: {hotel_id}")
        return hotel

    def get_hotels_by_location_and_pax_count(
        self,
        location: str,
        pax_count: int,
    ) -> dict[Hotel, list[Room]]:
        """Match every hotel at ``location`` against ``pax_count``.

        Hotels without a usable room selection are left out. A storage failure
        aborts the whole search rather than skipping the affected hotel.
        """
        try:
            validate_pax_search(location, pax_count)
        except ValueError as exc:
            raise SearchValidationError(str(exc)) from exc

        try:
            hotels = self._repository.find_hotels_by_location(location)
        except sqlite3.Error as exc:
            raise HotelApplicationError("Failed to get hotels from database.") from exc

        hotel_and_rooms: dict[Hotel, list[Room]] = {}
        for hotel in hotels:
            matched_rooms = match_rooms(hotel.rooms, pax_count)
            if matched_rooms:
                hotel_and_rooms[hotel] = matched_rooms

        logger.info(
            "Location search completed | location=%s | pax_count=%s | hotels=%s | matched=%s",
            location,
            pax_count,
            len(hotels),
            len(hotel_and_rooms),
        )
        return hotel_and_rooms
