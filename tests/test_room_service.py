from __future__ import annotations

import sqlite3
from dataclasses import replace

import pytest

from hotel_backend.repository.data_repository import DataRepository
from hotel_backend.services.errors import (
    DataNotFoundError,
    HotelApplicationError,
    LimitExceededError,
)
from hotel_backend.services.hotel_service import HotelService
from hotel_backend.services.room_service import RoomService
from hotel_backend.services.room_type_service import RoomTypeService
from hotel_backend.utils.config import get_settings


def _build_test_settings(tmp_path, filename: str):
    base = get_settings()
    return replace(base, database_path=tmp_path / filename, seed_demo_data=False)


def _build_room_service(tmp_path, filename: str):
    settings = _build_test_settings(tmp_path, filename)
    repository = DataRepository(settings)
    repository.initialize_database()
    hotel_service = HotelService(repository=repository, settings=settings)
    room_type_service = RoomTypeService(repository=repository, settings=settings)
    room_service = RoomService(repository=repository, settings=settings)
    hotel = hotel_service.add_hotel(name="Hotel", location="Colombo", room_count=2)
    room_type = room_type_service.add_room_type(
        name="Gold",
        base_amount=1000.0,
        amount_per_person=100.0,
    )
    return repository, hotel_service, room_type_service, room_service, hotel, room_type


def _raise_storage_error(*args, **kwargs):
    raise sqlite3.OperationalError("disk I/O error")


def test_add_room_prices_room_from_its_type(tmp_path):
    _, _, _, room_service, hotel, room_type = _build_room_service(tmp_path, "room_add.db")

    room = room_service.add_room(
        room_no="R1",
        hotel_id=hotel.hotel_id,
        room_type_id=room_type.room_type_id,
        max_people=5,
    )

    assert room.room_id.startswith("rid-")
    assert room.amount == pytest.approx(1500.0)
    assert room_service.get_room_by_id(room.room_id) == room


def test_add_room_for_unknown_hotel_raises_data_not_found(tmp_path):
    _, _, _, room_service, _, room_type = _build_room_service(tmp_path, "room_missing_hotel.db")
    with pytest.raises(DataNotFoundError):
        room_service.add_room(
            room_no="R1",
            hotel_id="hid-missing",
            room_type_id=room_type.room_type_id,
            max_people=2,
        )


def test_add_room_for_unknown_room_type_raises_data_not_found(tmp_path):
    _, _, _, room_service, hotel, _ = _build_room_service(tmp_path, "room_missing_type.db")
    with pytest.raises(DataNotFoundError):
        room_service.add_room(
            room_no="R1",
            hotel_id=hotel.hotel_id,
            room_type_id="rtid-missing",
            max_people=2,
        )


def test_add_room_beyond_hotel_limit_raises_limit_exceeded(tmp_path):
    _, _, _, room_service, hotel, room_type = _build_room_service(tmp_path, "room_limit.db")
    for room_no in ("R1", "R2"):
        room_service.add_room(
            room_no=room_no,
            hotel_id=hotel.hotel_id,
            room_type_id=room_type.room_type_id,
            max_people=2,
        )

    with pytest.raises(LimitExceededError) as exc_info:
        room_service.add_room(
            room_no="R3",
            hotel_id=hotel.hotel_id,
            room_type_id=room_type.room_type_id,
            max_people=2,
        )
    assert str(exc_info.value) == "Room can't be added to hotel. Max room count reached for hotel."


def test_update_room_recomputes_price(tmp_path):
    _, _, _, room_service, hotel, room_type = _build_room_service(tmp_path, "room_update.db")
    room = room_service.add_room(
        room_no="R1",
        hotel_id=hotel.hotel_id,
        room_type_id=room_type.room_type_id,
        max_people=2,
    )

    updated = room_service.update_room(
        room_id=room.room_id,
        room_no="R1-A",
        hotel_id=hotel.hotel_id,
        room_type_id=room_type.room_type_id,
        max_people=4,
    )

    assert updated.room_id == room.room_id
    assert updated.amount == pytest.approx(1400.0)
    assert room_service.get_room_by_id(room.room_id).room_no == "R1-A"


def test_update_room_within_full_hotel_is_allowed(tmp_path):
    _, _, _, room_service, hotel, room_type = _build_room_service(tmp_path, "room_update_full.db")
    rooms = [
        room_service.add_room(
            room_no=room_no,
            hotel_id=hotel.hotel_id,
            room_type_id=room_type.room_type_id,
            max_people=2,
        )
        for room_no in ("R1", "R2")
    ]

    updated = room_service.update_room(
        room_id=rooms[0].room_id,
        room_no="R1",
        hotel_id=hotel.hotel_id,
        room_type_id=room_type.room_type_id,
        max_people=3,
    )
    assert updated.max_people == 3


def test_moving_room_into_full_hotel_raises_limit_exceeded(tmp_path):
    _, hotel_service, _, room_service, hotel, room_type = _build_room_service(
        tmp_path, "room_move_full.db"
    )
    full_hotel = hotel_service.add_hotel(name="Tiny", location="Kandy", room_count=1)
    room_service.add_room(
        room_no="T1",
        hotel_id=full_hotel.hotel_id,
        room_type_id=room_type.room_type_id,
        max_people=2,
    )
    room = room_service.add_room(
        room_no="R1",
        hotel_id=hotel.hotel_id,
        room_type_id=room_type.room_type_id,
        max_people=2,
    )

    with pytest.raises(LimitExceededError):
        room_service.update_room(
            room_id=room.room_id,
            room_no="R1",
            hotel_id=full_hotel.hotel_id,
            room_type_id=room_type.room_type_id,
            max_people=2,
        )


def test_update_unknown_room_raises_data_not_found(tmp_path):
    _, _, _, room_service, hotel, room_type = _build_room_service(tmp_path, "room_update_missing.db")
    with pytest.raises(DataNotFoundError):
        room_service.update_room(
            room_id="rid-missing",
            room_no="R1",
            hotel_id=hotel.hotel_id,
            room_type_id=room_type.room_type_id,
            max_people=2,
        )


def test_delete_room_removes_it(tmp_path):
    _, _, _, room_service, hotel, room_type = _build_room_service(tmp_path, "room_delete.db")
    room = room_service.add_room(
        room_no="R1",
        hotel_id=hotel.hotel_id,
        room_type_id=room_type.room_type_id,
        max_people=2,
    )

    room_service.delete_room_by_id(room.room_id)

    with pytest.raises(DataNotFoundError):
        room_service.get_room_by_id(room.room_id)


def test_delete_unknown_room_raises_data_not_found(tmp_path):
    _, _, _, room_service, _, _ = _build_room_service(tmp_path, "room_delete_missing.db")
    with pytest.raises(DataNotFoundError):
        room_service.delete_room_by_id("rid-missing")


def test_room_list_by_hotel_honours_search_term(tmp_path):
    _, _, _, room_service, hotel, room_type = _build_room_service(tmp_path, "room_list.db")
    for room_no in ("A-101", "B-201"):
        room_service.add_room(
            room_no=room_no,
            hotel_id=hotel.hotel_id,
            room_type_id=room_type.room_type_id,
            max_people=2,
        )

    all_rooms = room_service.get_room_list_by_hotel_id(hotel.hotel_id, "ALL")
    filtered = room_service.get_room_list_by_hotel_id(hotel.hotel_id, "b-2")

    assert [room.room_no for room in all_rooms] == ["A-101", "B-201"]
    assert [room.room_no for room in filtered] == ["B-201"]
    assert room_service.get_room_list_by_hotel_id("hid-other", "ALL") == []


@pytest.mark.parametrize(
    ("method_name", "message"),
    [
        ("save_room", "Failed to save room details on database."),
        ("count_rooms_by_hotel", "Failed to count rooms from database."),
    ],
)
def test_add_room_storage_failures_are_wrapped(tmp_path, monkeypatch, method_name, message):
    repository, _, _, room_service, hotel, room_type = _build_room_service(
        tmp_path, f"room_{method_name}.db"
    )
    monkeypatch.setattr(repository, method_name, _raise_storage_error)

    with pytest.raises(HotelApplicationError) as exc_info:
        room_service.add_room(
            room_no="R1",
            hotel_id=hotel.hotel_id,
            room_type_id=room_type.room_type_id,
            max_people=2,
        )
    assert str(exc_info.value) == message


def test_delete_room_storage_failure_is_wrapped(tmp_path, monkeypatch):
    repository, _, _, room_service, _, _ = _build_room_service(tmp_path, "room_delete_failure.db")
    monkeypatch.setattr(repository, "delete_room", _raise_storage_error)

    with pytest.raises(HotelApplicationError) as exc_info:
        room_service.delete_room_by_id("rid-123")
    assert str(exc_info.value) == "Failed to delete room from database."


def test_room_type_storage_failure_is_wrapped(tmp_path, monkeypatch):
    repository, _, room_type_service, _, _, _ = _build_room_service(tmp_path, "room_type_failure.db")
    monkeypatch.setattr(repository, "get_room_type", _raise_storage_error)

    with pytest.raises(HotelApplicationError) as exc_info:
        room_type_service.get_room_type_by_id("rtid-123")
    assert str(exc_info.value) == "Failed to get room type from database."
