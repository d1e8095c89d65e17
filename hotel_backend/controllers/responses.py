"""Response envelope and DTOs shared by the HTTP controllers."""

from __future__ import annotations

from enum import Enum
from typing import Any, Optional

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from hotel_backend.domain.messages import ErrorMessage
from hotel_backend.domain.models import Hotel, Room, RoomType
from hotel_backend.utils.logger import get_logger


logger = get_logger(__name__)

SUCCESS_STATUS = "SUCCESS"
FAILURE_STATUS = "FAILURE"


class CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class RequestModel(CamelModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        str_strip_whitespace=True,
    )


class RoomResponse(CamelModel):
    id: str
    room_no: str
    hotel_id: str
    room_type_id: str
    max_people: int
    amount: float

    @classmethod
    def from_domain(cls, room: Room) -> "RoomResponse":
        return cls(
            id=room.room_id,
            room_no=room.room_no,
            hotel_id=room.hotel_id,
            room_type_id=room.room_type_id,
            max_people=room.max_people,
            amount=room.amount,
        )


class HotelResponse(CamelModel):
    id: str
    name: str
    location: str
    room_count: int
    rooms: Optional[list[RoomResponse]] = None

    @classmethod
    def from_domain(
        cls,
        hotel: Hotel,
        rooms: Optional[list[Room]] = None,
    ) -> "HotelResponse":
        return cls(
            id=hotel.hotel_id,
            name=hotel.name,
            location=hotel.location,
            room_count=hotel.room_count,
            rooms=None if rooms is None else [RoomResponse.from_domain(room) for room in rooms],
        )


class RoomTypeResponse(CamelModel):
    id: str
    name: str
    base_amount: float
    amount_per_person: float

    @classmethod
    def from_domain(cls, room_type: RoomType) -> "RoomTypeResponse":
        return cls(
            id=room_type.room_type_id,
            name=room_type.name,
            base_amount=room_type.base_amount,
            amount_per_person=room_type.amount_per_person,
        )


class HotelListResponse(CamelModel):
    hotel_list: list[HotelResponse]


class RoomListResponse(CamelModel):
    room_list: list[RoomResponse]


class RoomTypeListResponse(CamelModel):
    room_type_list: list[RoomTypeResponse]


class ResponseWrapper(BaseModel):
    status: str
    message: str
    data: Any = None


def _envelope(
    result_status: str,
    message: Enum,
    data: Optional[BaseModel],
    status_code: int,
) -> JSONResponse:
    wrapper = ResponseWrapper(
        status=result_status,
        message=message.value,
        data=None if data is None else data.model_dump(by_alias=True, mode="json"),
    )
    return JSONResponse(status_code=status_code, content=wrapper.model_dump())


def success_response(
    message: Enum,
    data: Optional[BaseModel] = None,
    status_code: int = status.HTTP_200_OK,
) -> JSONResponse:
    return _envelope(SUCCESS_STATUS, message, data, status_code)


def error_response(message: ErrorMessage, status_code: int) -> JSONResponse:
    return _envelope(FAILURE_STATUS, message, None, status_code)


def bad_request(message: ErrorMessage) -> JSONResponse:
    return error_response(message, status.HTTP_400_BAD_REQUEST)


def internal_server_error() -> JSONResponse:
    return error_response(
        ErrorMessage.INTERNAL_SERVER_ERROR,
        status.HTTP_500_INTERNAL_SERVER_ERROR,
    )


async def request_validation_exception_handler(
    request: Request,
    exc: RequestValidationError,
) -> JSONResponse:
    """Map pydantic validation failures onto the 400 envelope."""
    errors = exc.errors()
    body_error = any(error.get("loc", ("",))[0] == "body" for error in errors)
    logger.debug(
        "Request validation failed | path=%s | errors=%s",
        request.url.path,
        errors,
    )
    if body_error:
        return bad_request(ErrorMessage.MISSING_REQUIRED_FIELDS)
    return bad_request(ErrorMessage.INVALID_REQUEST_PARAMETERS)


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(RequestValidationError, request_validation_exception_handler)
