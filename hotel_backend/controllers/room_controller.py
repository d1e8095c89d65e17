"""HTTP controller layer for rooms."""

from __future__ import annotations

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse
from pydantic import Field

from hotel_backend.controllers.dependencies import get_room_service
from hotel_backend.controllers.responses import (
    RequestModel,
    RoomListResponse,
    RoomResponse,
    bad_request,
    error_response,
    internal_server_error,
    success_response,
)
from hotel_backend.domain.messages import ErrorMessage, SuccessMessage
from hotel_backend.services.errors import (
    DataNotFoundError,
    HotelApplicationError,
    LimitExceededError,
)
from hotel_backend.services.room_service import RoomService
from hotel_backend.utils.config import get_settings
from hotel_backend.utils.logger import get_logger


logger = get_logger(__name__)
settings = get_settings()

router = APIRouter(prefix=f"{settings.api_prefix}/room", tags=["room"])


class RoomRequest(RequestModel):
    room_no: str = Field(min_length=1)
    hotel_id: str = Field(min_length=1)
    room_type_id: str = Field(min_length=1)
    max_people: int = Field(gt=0)


class UpdateRoomRequest(RoomRequest):
    id: str = Field(min_length=1)


@router.post("", status_code=status.HTTP_201_CREATED)
async def add_room(
    payload: RoomRequest,
    service: RoomService = Depends(get_room_service),
) -> JSONResponse:
    try:
        service.add_room(
            room_no=payload.room_no,
            hotel_id=payload.hotel_id,
            room_type_id=payload.room_type_id,
            max_people=payload.max_people,
        )
        return success_response(
            SuccessMessage.SUCCESSFULLY_ADDED,
            status_code=status.HTTP_201_CREATED,
        )
    except DataNotFoundError:
        logger.exception("Data not found")
        return bad_request(ErrorMessage.DATA_NOT_FOUND)
    except LimitExceededError:
        logger.warning("Room limit reached | hotel_id=%s", payload.hotel_id)
        return bad_request(ErrorMessage.ROOM_LIMIT_REACHED)
    except HotelApplicationError:
        logger.exception("Failed to add room details")
        return internal_server_error()


@router.put("")
async def update_room(
    payload: UpdateRoomRequest,
    service: RoomService = Depends(get_room_service),
) -> JSONResponse:
    try:
        service.update_room(
            room_id=payload.id,
            room_no=payload.room_no,
            hotel_id=payload.hotel_id,
            room_type_id=payload.room_type_id,
            max_people=payload.max_people,
        )
        return success_response(SuccessMessage.SUCCESSFULLY_UPDATED)
    except DataNotFoundError:
        logger.exception("Data not found")
        return bad_request(ErrorMessage.DATA_NOT_FOUND)
    except LimitExceededError:
        logger.warning("Room limit reached | hotel_id=%s", payload.hotel_id)
        return bad_request(ErrorMessage.ROOM_LIMIT_REACHED)
    except HotelApplicationError:
        logger.exception("Failed to update room")
        return internal_server_error()


@router.delete("/{room_id}")
async def delete_room(
    room_id: str,
    service: RoomService = Depends(get_room_service),
) -> JSONResponse:
    try:
        service.delete_room_by_id(room_id)
        return success_response(SuccessMessage.SUCCESSFULLY_DELETED)
    except DataNotFoundError:
        return bad_request(ErrorMessage.DATA_NOT_FOUND)
    except HotelApplicationError:
        logger.exception("Failed to delete room")
        return internal_server_error()


@router.get("/hotel/{hotel_id}/search/{search_term}")
async def list_rooms_by_hotel(
    hotel_id: str,
    search_term: str,
    service: RoomService = Depends(get_room_service),
) -> JSONResponse:
    """``ALL`` as the search term returns every room of the hotel."""
    try:
        rooms = service.get_room_list_by_hotel_id(hotel_id, search_term)
        logger.debug("Successfully returned rooms | hotel_id=%s | count=%s", hotel_id, len(rooms))
        return success_response(
            SuccessMessage.SUCCESSFULLY_RETURNED,
            RoomListResponse(room_list=[RoomResponse.from_domain(room) for room in rooms]),
        )
    except HotelApplicationError:
        logger.exception("Failed to list room data")
        return internal_server_error()


@router.get("/{room_id}")
async def get_room(
    room_id: str,
    service: RoomService = Depends(get_room_service),
) -> JSONResponse:
    try:
        room = service.get_room_by_id(room_id)
        return success_response(SuccessMessage.SUCCESSFULLY_RETURNED, RoomResponse.from_domain(room))
    except DataNotFoundError:
        return error_response(ErrorMessage.DATA_NOT_FOUND, status.HTTP_404_NOT_FOUND)
    except HotelApplicationError:
        logger.exception("Failed to get room")
        return internal_server_error()
