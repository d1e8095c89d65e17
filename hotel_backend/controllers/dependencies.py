"""Shared FastAPI dependency providers for controller layer."""

from __future__ import annotations

from fastapi import HTTPException, Request, status

from hotel_backend.services.hotel_service import HotelService
from hotel_backend.services.room_service import RoomService
from hotel_backend.services.room_type_service import RoomTypeService


def _service_from_state(request: Request, attribute: str, label: str):
    service = getattr(request.app.state, attribute, None)
    if service is None:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail=f"{label} service is not initialized",
        )
    return service


def get_hotel_service(request: Request) -> HotelService:
    return _service_from_state(request, "hotel_service", "Hotel")


def get_room_service(request: Request) -> RoomService:
    return _service_from_state(request, "room_service", "Room")


def get_room_type_service(request: Request) -> RoomTypeService:
    return _service_from_state(request, "room_type_service", "Room type")
