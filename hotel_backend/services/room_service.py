"""Room management: create, update, delete and list rooms of a hotel."""

from __future__ import annotations

import sqlite3
from typing import Optional

from hotel_backend.domain.constraints import normalize_search_term, room_limit_reached
from hotel_backend.domain.models import Hotel, Room, calculate_room_price, new_room_id
from hotel_backend.repository.data_repository import DataRepository
from hotel_backend.services.errors import (
    DataNotFoundError,
    HotelApplicationError,
    LimitExceededError,
)
from hotel_backend.services.hotel_service import HotelService
from hotel_backend.services.room_type_service import RoomTypeService
from hotel_backend.utils.config import Settings, get_settings
from hotel_backend.utils.logger import get_logger


logger = get_logger(__name__)


class RoomService:
    """Room lifecycle; prices are always derived from the room type."""

    def __init__(
        self,
        repository: Optional[DataRepository] = None,
        settings: Optional[Settings] = None,
        hotel_service: Optional[HotelService] = None,
        room_type_service: Optional[RoomTypeService] = None,
    ) -> None:
        self._settings = settings or get_settings()
        self._repository = repository or DataRepository(self._settings)
        self._hotel_service = hotel_service or HotelService(
            repository=self._repository,
            settings=self._settings,
        )
        self._room_type_service = room_type_service or RoomTypeService(
            repository=self._repository,
            settings=self._settings,
        )

    def add_room(
        self,
        *,
        room_no: str,
        hotel_id: str,
        room_type_id: str,
        max_people: int,
    ) -> Room:
        hotel = self._hotel_service.get_hotel_by_id(hotel_id)
        self.validate_room_count_for_hotel(hotel)
        room_type = self._room_type_service.get_room_type_by_id(room_type_id)
        room = Room(
            room_id=new_room_id(),
            room_no=room_no,
            hotel_id=hotel.hotel_id,
            room_type_id=room_type.room_type_id,
            max_people=max_people,
            amount=calculate_room_price(room_type, max_people),
        )
        try:
            self._repository.save_room(room)
        except sqlite3.Error as exc:
            raise HotelApplicationError("Failed to save room details on database.") from exc
        logger.debug("Successfully added room data | room_id=%s", room.room_id)
        return room

    def update_room(
        self,
        *,
        room_id: str,
        room_no: str,
        hotel_id: str,
        room_type_id: str,
        max_people: int,
    ) -> Room:
        existing = self.get_room_by_id(room_id)
        hotel = self._hotel_service.get_hotel_by_id(hotel_id)
        if hotel.hotel_id != existing.hotel_id:
            self.validate_room_count_for_hotel(hotel)
        room_type = self._room_type_service.get_room_type_by_id(room_type_id)
        room = Room(
            room_id=existing.room_id,
            room_no=room_no,
            hotel_id=hotel.hotel_id,
            room_type_id=room_type.room_type_id,
            max_people=max_people,
            amount=calculate_room_price(room_type, max_people),
        )
        try:
            self._repository.update_room(room)
        except sqlite3.Error as exc:
            raise HotelApplicationError("Failed to update room info in database.") from exc
        logger.debug("Successfully updated room data | room_id=%s", room_id)
        return room

    def delete_room_by_id(self, room_id: str) -> None:
        try:
            deleted = self._repository.delete_room(room_id)
        except sqlite3.Error as exc:
            raise HotelApplicationError("Failed to delete room from database.") from exc
        if not deleted:
            raise DataNotFoundError(f"Room not found for roomId: {room_id}")
        logger.debug("Successfully deleted room | room_id=%s", room_id)

    def get_room_list_by_hotel_id(
        self,
        hotel_id: str,
        search_term: Optional[str] = None,
    ) -> list[Room]:
        try:
            return self._repository.list_rooms_by_hotel(
                hotel_id,
                normalize_search_term(search_term),
            )
        except sqlite3.Error as exc:
            raise HotelApplicationError("Failed to get all room data from database.") from exc

    def get_room_by_id(self, room_id: str) -> Room:
        try:
            room = self._repository.get_room(room_id)
        except sqlite3.Error as exc:
            raise HotelApplicationError("Failed to get room info from database.") from exc
        if room is None:
            raise DataNotFoundError(f"Room not found for roomId: {room_id}")
        return room

    def validate_room_count_for_hotel(self, hotel: Hotel) -> None:
        try:
            current_count = self._repository.count_rooms_by_hotel(hotel.hotel_id)
        except sqlite3.Error as exc:
            raise HotelApplicationError("Failed to count rooms from database.") from exc
        if room_limit_reached(current_count, hotel.room_count):
            raise LimitExceededError(
                "Room can't be added to hotel. Max room count reached for hotel."
            )
