"""Room-allocation matching for a single hotel's room pool.

Given the rooms of one hotel and a required occupancy (pax) count, the matcher
picks the rooms to offer, trying three tiers in order and returning the first
non-empty result:

1. every room whose capacity equals the pax count;
2. every room whose capacity exceeds the pax count by at most
   ``OVER_CAPACITY_SLACK``;
3. a multi-room combination seeded with the largest room below the pax count
   and filled greedily in descending capacity order. The combination is kept
   only when the capacities sum exactly to the pax count.

The combination step is a single greedy pass with no backtracking, so it can
miss an exact combination that exists (rooms of 5, 4 and 4 for eight guests
yield nothing).
"""

from __future__ import annotations

from typing import Iterable, Optional

from hotel_backend.domain.models import Room


OVER_CAPACITY_SLACK = 2


def _descending_capacity_order(rooms: Iterable[Room]) -> list[Room]:
    return sorted(rooms, key=lambda room: (-room.max_people, room.room_id))


def find_exact_match_rooms(rooms: Iterable[Room], pax_count: int) -> list[Room]:
    return [room for room in rooms if room.max_people == pax_count]


def find_over_capacity_rooms(rooms: Iterable[Room], pax_count: int) -> list[Room]:
    upper_bound = pax_count + OVER_CAPACITY_SLACK
    return [room for room in rooms if pax_count < room.max_people <= upper_bound]


def find_anchor_room(rooms: Iterable[Room], pax_count: int) -> Optional[Room]:
    """Return the largest room strictly below ``pax_count`` (lowest id on ties)."""
    for room in _descending_capacity_order(rooms):
        if room.max_people < pax_count:
            return room
    return None


def build_room_combination(anchor: Room, rooms: Iterable[Room], pax_count: int) -> list[Room]:
    """Greedily extend ``anchor`` with other rooms until the pax count is met exactly."""
    combination = [anchor]
    total_pax = anchor.max_people

    for room in _descending_capacity_order(rooms):
        if room.room_id == anchor.room_id:
            continue
        if total_pax + room.max_people <= pax_count:
            combination.append(room)
            total_pax += room.max_people
            if total_pax == pax_count:
                break

    if total_pax != pax_count:
        return []
    return combination


def find_possible_rooms_for_pax_count(rooms: Iterable[Room], pax_count: int) -> list[Room]:
    """Fallback tiers used when no room matches the pax count exactly."""
    room_pool = list(rooms)
    candidates = find_over_capacity_rooms(room_pool, pax_count)
    if candidates:
        return candidates

    anchor = find_anchor_room(room_pool, pax_count)
    if anchor is None:
        return []
    return build_room_combination(anchor, room_pool, pax_count)


def match_rooms(rooms: Iterable[Room], pax_count: int) -> list[Room]:
    """Return the rooms satisfying ``pax_count`` for one hotel, or an empty list.

    ``pax_count`` must already be validated as positive. Inputs are never
    mutated, so hotels can be matched independently of each other.
    """
    room_pool = list(rooms)
    exact_matches = find_exact_match_rooms(room_pool, pax_count)
    if exact_matches:
        return exact_matches
    return find_possible_rooms_for_pax_count(room_pool, pax_count)
