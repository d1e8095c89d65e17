"""Room type management."""

from __future__ import annotations

import sqlite3
from typing import Optional

from hotel_backend.domain.models import RoomType, new_room_type_id
from hotel_backend.repository.data_repository import DataRepository
from hotel_backend.services.errors import DataNotFoundError, HotelApplicationError
from hotel_backend.utils.config import Settings, get_settings
from hotel_backend.utils.logger import get_logger


logger = get_logger(__name__)


class RoomTypeService:
    def __init__(
        self,
        repository: Optional[DataRepository] = None,
        settings: Optional[Settings] = None,
    ) -> None:
        self._settings = settings or get_settings()
        self._repository = repository or DataRepository(self._settings)

    def add_room_type(
        self,
        *,
        name: str,
        base_amount: float,
        amount_per_person: float,
    ) -> RoomType:
        room_type = RoomType(
            room_type_id=new_room_type_id(),
            name=name,
            base_amount=base_amount,
            amount_per_person=amount_per_person,
        )
        try:
            self._repository.save_room_type(room_type)
        except sqlite3.Error as exc:
            raise HotelApplicationError("Failed to save room type on database.") from exc
        logger.debug("Successfully added room type | room_type_id=%s", room_type.room_type_id)
        return room_type

    def get_room_type_by_id(self, room_type_id: str) -> RoomType:
        try:
            room_type = self._repository.get_room_type(room_type_id)
        except sqlite3.Error as exc:
            raise HotelApplicationError("Failed to get room type from database.") from exc
        if room_type is None:
            raise DataNotFoundError(f"Room type not found for id: {room_type_id}")
        return room_type

    def get_room_type_list(self) -> list[RoomType]:
        try:
            return self._repository.list_room_types()
        except sqlite3.Error as exc:
            raise HotelApplicationError("Failed to get all room types from database.") from exc
