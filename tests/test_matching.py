"""Tests for the per-hotel room-allocation matcher."""

from __future__ import annotations

from hotel_backend.domain.models import Room
from hotel_backend.services.matching_service import (
    OVER_CAPACITY_SLACK,
    build_room_combination,
    find_anchor_room,
    find_possible_rooms_for_pax_count,
    match_rooms,
)


def _room(max_people: int, room_id: str | None = None) -> Room:
    room_id = room_id or f"rid-{max_people}"
    return Room(
        room_id=room_id,
        room_no=room_id.upper(),
        hotel_id="hid-1",
        room_type_id="rtid-1",
        max_people=max_people,
        amount=1000.0 + 100.0 * max_people,
    )


def _capacities(rooms: list[Room]) -> list[int]:
    return [room.max_people for room in rooms]


# --- Scenarios ---

def test_single_room_with_exact_capacity_is_returned() -> None:
    room = _room(5)
    assert match_rooms([room], 5) == [room]


def test_band_match_returns_room_within_two_extra_places() -> None:
    six, nine = _room(6), _room(9)
    assert match_rooms([six, nine], 5) == [six]


def test_combination_fills_party_with_largest_rooms_first() -> None:
    one, two, three = _room(1), _room(2), _room(3)
    assert match_rooms([one, two, three], 5) == [three, two]


def test_combination_that_cannot_reach_pax_count_is_discarded() -> None:
    rooms = [_room(1), _room(2), _room(3)]
    assert match_rooms(rooms, 10) == []


def test_empty_room_pool_never_matches() -> None:
    assert match_rooms([], 5) == []
    assert match_rooms(set(), 1) == []


# --- Exact tier ---

def test_exact_tier_returns_every_exact_room_in_input_order() -> None:
    first = _room(4, "rid-z")
    other = _room(2, "rid-m")
    second = _room(4, "rid-a")
    assert match_rooms([first, other, second], 4) == [first, second]


def test_exact_tier_wins_over_band_and_combination() -> None:
    exact = _room(4, "rid-exact")
    rooms = [_room(5), _room(6), _room(3), _room(1), exact]
    assert match_rooms(rooms, 4) == [exact]


# --- Band tier ---

def test_band_includes_upper_bound_and_excludes_beyond() -> None:
    at_bound = _room(5 + OVER_CAPACITY_SLACK, "rid-bound")
    beyond = _room(5 + OVER_CAPACITY_SLACK + 1, "rid-beyond")
    assert match_rooms([beyond, at_bound], 5) == [at_bound]


def test_band_returns_all_candidates_not_just_the_smallest() -> None:
    seven = _room(7, "rid-7")
    six = _room(6, "rid-6")
    assert match_rooms([seven, six], 5) == [seven, six]


def test_band_wins_over_possible_combination() -> None:
    six = _room(6)
    rooms = [_room(3), _room(2), six]
    assert match_rooms(rooms, 5) == [six]


def test_only_oversized_rooms_yield_no_match() -> None:
    assert match_rooms([_room(8), _room(12)], 5) == []


# --- Combination tier ---

def test_anchor_is_largest_room_below_pax_count() -> None:
    rooms = [_room(2), _room(4), _room(9), _room(3)]
    anchor = find_anchor_room(rooms, 5)
    assert anchor is not None
    assert anchor.max_people == 4


def test_anchor_ties_resolve_to_lowest_room_id() -> None:
    rooms = [_room(3, "rid-b"), _room(3, "rid-a")]
    anchor = find_anchor_room(rooms, 5)
    assert anchor is not None
    assert anchor.room_id == "rid-a"


def test_no_anchor_when_all_rooms_reach_pax_count() -> None:
    assert find_anchor_room([_room(5), _room(10)], 5) is None
    assert find_possible_rooms_for_pax_count([_room(10)], 5) == []


def test_combination_skips_rooms_that_would_overshoot() -> None:
    rooms = [_room(10), _room(3), _room(2)]
    assert _capacities(match_rooms(rooms, 5)) == [3, 2]


def test_combination_uses_more_than_two_rooms() -> None:
    rooms = [_room(4, "rid-a"), _room(3, "rid-b"), _room(2, "rid-c"), _room(1, "rid-d")]
    assert _capacities(match_rooms(rooms, 10)) == [4, 3, 2, 1]


def test_combination_stops_once_pax_count_is_reached() -> None:
    rooms = [_room(3, "rid-a"), _room(2, "rid-b"), _room(2, "rid-c"), _room(1, "rid-d")]
    result = match_rooms(rooms, 5)
    assert [room.room_id for room in result] == ["rid-a", "rid-b"]


def test_combination_with_equal_capacities_is_deterministic() -> None:
    rooms = [_room(3, "rid-b"), _room(2, "rid-c"), _room(3, "rid-a")]
    result = match_rooms(rooms, 5)
    assert [room.room_id for room in result] == ["rid-a", "rid-c"]


def test_greedy_pass_does_not_backtrack_to_find_exact_sum() -> None:
    # 4 + 4 would seat eight guests, but the greedy pass commits to the 5.
    rooms = [_room(5, "rid-a"), _room(4, "rid-b"), _room(4, "rid-c")]
    assert match_rooms(rooms, 8) == []


def test_build_room_combination_never_repeats_the_anchor() -> None:
    anchor = _room(2, "rid-anchor")
    rooms = [anchor, _room(2, "rid-other")]
    result = build_room_combination(anchor, rooms, 4)
    assert [room.room_id for room in result] == ["rid-anchor", "rid-other"]


# --- Properties ---

def test_result_is_a_subset_without_duplicates() -> None:
    rooms = [_room(capacity, f"rid-{index}") for index, capacity in enumerate([1, 1, 2, 3, 3, 4])]
    for pax_count in range(1, 16):
        result = match_rooms(rooms, pax_count)
        result_ids = [room.room_id for room in result]
        assert len(result_ids) == len(set(result_ids))
        assert set(result_ids) <= {room.room_id for room in rooms}


def test_combination_results_always_sum_to_pax_count() -> None:
    rooms = [_room(capacity, f"rid-{index}") for index, capacity in enumerate([1, 2, 2, 3])]
    for pax_count in range(6, 12):
        result = match_rooms(rooms, pax_count)
        if result:
            assert sum(_capacities(result)) == pax_count


def test_matching_does_not_mutate_input() -> None:
    rooms = [_room(3, "rid-a"), _room(1, "rid-b"), _room(2, "rid-c")]
    snapshot = list(rooms)
    match_rooms(rooms, 5)
    assert rooms == snapshot
