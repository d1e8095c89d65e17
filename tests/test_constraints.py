"""Tests for search-term and room-limit rules."""

from __future__ import annotations

import pytest

from hotel_backend.domain.constraints import (
    normalize_search_term,
    room_limit_reached,
    validate_pax_search,
)
from hotel_backend.domain.models import RoomType, calculate_room_price


# --- normalize_search_term ---

@pytest.mark.parametrize("term", [None, "", "   ", "ALL", "all", " All "])
def test_all_like_terms_disable_filtering(term) -> None:
    assert normalize_search_term(term) is None


def test_search_term_is_stripped() -> None:
    assert normalize_search_term("  Galle ") == "Galle"


# --- room_limit_reached ---

def test_room_limit_not_reached_below_limit() -> None:
    assert not room_limit_reached(current_room_count=9, room_count_limit=10)


def test_room_limit_reached_at_limit() -> None:
    assert room_limit_reached(current_room_count=10, room_count_limit=10)


# --- validate_pax_search ---

def test_valid_pax_search_passes() -> None:
    validate_pax_search("Colombo", 1)


def test_zero_pax_count_raises() -> None:
    with pytest.raises(ValueError):
        validate_pax_search("Colombo", 0)


def test_blank_location_raises() -> None:
    with pytest.raises(ValueError):
        validate_pax_search("  ", 2)


# --- calculate_room_price ---

def test_room_price_adds_per_person_rate_to_base() -> None:
    gold = RoomType(room_type_id="rtid-1", name="Gold", base_amount=1000.0, amount_per_person=100.0)
    assert calculate_room_price(gold, 5) == pytest.approx(1500.0)
