"""Domain records for hotels, rooms and room types."""

from __future__ import annotations

from dataclasses import dataclass, field
from uuid import uuid4


HOTEL_ID_PREFIX = "hid-"
ROOM_ID_PREFIX = "rid-"
ROOM_TYPE_ID_PREFIX = "rtid-"


def new_hotel_id() -> str:
    return f"{HOTEL_ID_PREFIX}{uuid4()}"


def new_room_id() -> str:
    return f"{ROOM_ID_PREFIX}{uuid4()}"


def new_room_type_id() -> str:
    return f"{ROOM_TYPE_ID_PREFIX}{uuid4()}"


@dataclass(frozen=True)
class RoomType:
    room_type_id: str
    name: str
    base_amount: float
    amount_per_person: float


@dataclass(frozen=True)
class Room:
    room_id: str
    room_no: str
    hotel_id: str
    room_type_id: str
    max_people: int
    amount: float


@dataclass(frozen=True)
class Hotel:
    """Hotel snapshot; ``rooms`` is only populated by queries that join them.

    Rooms are excluded from equality and hashing so a hotel can key a match
    result regardless of which rooms were loaded with it.
    """

    hotel_id: str
    name: str
    location: str
    room_count: int
    rooms: tuple[Room, ...] = field(default=(), compare=False)


def calculate_room_price(room_type: RoomType, max_people: int) -> float:
    """Price a room from its type's base rate plus the per-person rate."""
    return room_type.base_amount + room_type.amount_per_person * max_people
