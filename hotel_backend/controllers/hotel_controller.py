"""HTTP controller layer for hotels and the location/pax search."""

from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, Depends, Query, status
from fastapi.responses import JSONResponse
from pydantic import Field

from hotel_backend.controllers.dependencies import get_hotel_service
from hotel_backend.controllers.responses import (
    HotelListResponse,
    HotelResponse,
    RequestModel,
    bad_request,
    error_response,
    internal_server_error,
    success_response,
)
from hotel_backend.domain.messages import ErrorMessage, SuccessMessage
from hotel_backend.services.errors import DataNotFoundError, HotelApplicationError
from hotel_backend.services.hotel_service import HotelService, SearchValidationError
from hotel_backend.utils.config import get_settings
from hotel_backend.utils.logger import get_logger


logger = get_logger(__name__)
settings = get_settings()

router = APIRouter(prefix=f"{settings.api_prefix}/hotel", tags=["hotel"])


class HotelRequest(RequestModel):
    name: str = Field(min_length=1)
    location: str = Field(min_length=1)
    room_count: int = Field(gt=0)


class UpdateHotelRequest(HotelRequest):
    id: str = Field(min_length=1)


@router.post("", status_code=status.HTTP_201_CREATED)
async def add_hotel(
    payload: HotelRequest,
    service: HotelService = Depends(get_hotel_service),
) -> JSONResponse:
    try:
        service.add_hotel(
            name=payload.name,
            location=payload.location,
            room_count=payload.room_count,
        )
        return success_response(
            SuccessMessage.SUCCESSFULLY_ADDED,
            status_code=status.HTTP_201_CREATED,
        )
    except HotelApplicationError:
        logger.exception("Failed to add hotel")
        return internal_server_error()


@router.put("")
async def update_hotel(
    payload: UpdateHotelRequest,
    service: HotelService = Depends(get_hotel_service),
) -> JSONResponse:
    try:
        service.update_hotel(
            hotel_id=payload.id,
            name=payload.name,
            location=payload.location,
            room_count=payload.room_count,
        )
        return success_response(SuccessMessage.SUCCESSFULLY_UPDATED)
    except DataNotFoundError:
        logger.exception("Data not found")
        return bad_request(ErrorMessage.DATA_NOT_FOUND)
    except HotelApplicationError:
        logger.exception("Failed to update hotel")
        return internal_server_error()


@router.get("")
async def list_hotels(
    search_term: Optional[str] = Query(default=None, alias="searchTerm"),
    location: Optional[str] = Query(default=None, min_length=1),
    pax_count: Optional[int] = Query(default=None, alias="paxCount", gt=0),
    service: HotelService = Depends(get_hotel_service),
) -> JSONResponse:
    """List hotels, or search by location and pax count when both are given."""
    if (location is None) != (pax_count is None):
        return bad_request(ErrorMessage.INVALID_REQUEST_PARAMETERS)
    try:
        if location is not None and pax_count is not None:
            hotel_and_rooms = service.get_hotels_by_location_and_pax_count(location, pax_count)
            response = HotelListResponse(
                hotel_list=[
                    HotelResponse.from_domain(hotel, rooms)
                    for hotel, rooms in hotel_and_rooms.items()
                ]
            )
        else:
            response = HotelListResponse(
                hotel_list=[
                    HotelResponse.from_domain(hotel)
                    for hotel in service.get_hotel_list(search_term)
                ]
            )
        logger.debug("Successfully returned hotels | count=%s", len(response.hotel_list))
        return success_response(SuccessMessage.SUCCESSFULLY_RETURNED, response)
    except SearchValidationError:
        return bad_request(ErrorMessage.INVALID_REQUEST_PARAMETERS)
    except HotelApplicationError:
        logger.exception("Failed to list hotel data")
        return internal_server_error()


@router.get("/{hotel_id}")
async def get_hotel(
    hotel_id: str,
    service: HotelService = Depends(get_hotel_service),
) -> JSONResponse:
    try:
        hotel = service.get_hotel_by_id(hotel_id, include_rooms=True)
        return success_response(
            SuccessMessage.SUCCESSFULLY_RETURNED,
            HotelResponse.from_domain(hotel, list(hotel.rooms)),
        )
    except DataNotFoundError:
        return error_response(ErrorMessage.DATA_NOT_FOUND, status.HTTP_404_NOT_FOUND)
    except HotelApplicationError:
        logger.exception("Failed to get hotel")
        return internal_server_error()
