"""Domain-level rules shared by hotel and room workflows."""

from __future__ import annotations

from typing import Optional


ALL_SEARCH_TERM = "ALL"


def normalize_search_term(search_term: Optional[str]) -> Optional[str]:
    """Return the filter text, or ``None`` when the term means "everything"."""
    if search_term is None:
        return None
    stripped = search_term.strip()
    if not stripped or stripped.upper() == ALL_SEARCH_TERM:
        return None
    return stripped


def room_limit_reached(current_room_count: int, room_count_limit: int) -> bool:
    return current_room_count >= room_count_limit


def validate_pax_search(location: str, pax_count: int) -> None:
    if not location or not location.strip():
        raise ValueError("location must be non-empty")
    if pax_count <= 0:
        raise ValueError("pax_count must be > 0")
