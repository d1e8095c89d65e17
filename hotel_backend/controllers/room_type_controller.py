"""HTTP controller layer for room types."""

from __future__ import annotations

from fastapi import APIRouter, Depends, status
from fastapi.responses import JSONResponse
from pydantic import Field

from hotel_backend.controllers.dependencies import get_room_type_service
from hotel_backend.controllers.responses import (
    RequestModel,
    RoomTypeListResponse,
    RoomTypeResponse,
    error_response,
    internal_server_error,
    success_response,
)
from hotel_backend.domain.messages import ErrorMessage, SuccessMessage
from hotel_backend.services.errors import DataNotFoundError, HotelApplicationError
from hotel_backend.services.room_type_service import RoomTypeService
from hotel_backend.utils.config import get_settings
from hotel_backend.utils.logger import get_logger


logger = get_logger(__name__)
settings = get_settings()

router = APIRouter(prefix=f"{settings.api_prefix}/roomType", tags=["room type"])


class RoomTypeRequest(RequestModel):
    name: str = Field(min_length=1)
    base_amount: float = Field(gt=0.0)
    amount_per_person: float = Field(gt=0.0)


@router.post("", status_code=status.HTTP_201_CREATED)
async def add_room_type(
    payload: RoomTypeRequest,
    service: RoomTypeService = Depends(get_room_type_service),
) -> JSONResponse:
    try:
        service.add_room_type(
            name=payload.name,
            base_amount=payload.base_amount,
            amount_per_person=payload.amount_per_person,
        )
        return success_response(
            SuccessMessage.SUCCESSFULLY_ADDED,
            status_code=status.HTTP_201_CREATED,
        )
    except HotelApplicationError:
        logger.exception("Failed to add room type")
        return internal_server_error()


@router.get("")
async def list_room_types(
    service: RoomTypeService = Depends(get_room_type_service),
) -> JSONResponse:
    try:
        room_types = service.get_room_type_list()
        return success_response(
            SuccessMessage.SUCCESSFULLY_RETURNED,
            RoomTypeListResponse(
                room_type_list=[RoomTypeResponse.from_domain(item) for item in room_types]
            ),
        )
    except HotelApplicationError:
        logger.exception("Failed to list room types")
        return internal_server_error()


@router.get("/{room_type_id}")
async def get_room_type(
    room_type_id: str,
    service: RoomTypeService = Depends(get_room_type_service),
) -> JSONResponse:
    try:
        room_type = service.get_room_type_by_id(room_type_id)
        return success_response(
            SuccessMessage.SUCCESSFULLY_RETURNED,
            RoomTypeResponse.from_domain(room_type),
        )
    except DataNotFoundError:
        return error_response(ErrorMessage.DATA_NOT_FOUND, status.HTTP_404_NOT_FOUND)
    except HotelApplicationError:
        logger.exception("Failed to get room type")
        return internal_server_error()
