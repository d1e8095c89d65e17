"""Streamlit front-end for hotel browsing and room-allocation search."""

from __future__ import annotations

from typing import Any, Dict, List, Optional

import pandas as pd
import requests
import streamlit as st

# ==========================================
# Configuration & Constants
# ==========================================
# Point this to your local FastAPI server
API_BASE_URL = "http://127.0.0.1:8000/api/v1"

st.set_page_config(
    page_title="Hotel Room Finder",
    page_icon="🏨",
    layout="wide",
)

# ==========================================
# API Helper Functions
# ==========================================
def _get_data(path: str, params: Optional[Dict[str, Any]] = None) -> Optional[Dict[str, Any]]:
    """GET an API path and unwrap the response envelope."""
    try:
        response = requests.get(f"{API_BASE_URL}{path}", params=params, timeout=10)
        body = response.json()
        if response.status_code != 200:
            st.error(body.get("message", f"Request failed with status {response.status_code}"))
            return None
        return body.get("data")
    except requests.exceptions.RequestException as e:
        st.error(f"Backend connection failed: {e}")
        return None


def fetch_hotels(search_term: str) -> List[Dict[str, Any]]:
    params = {"searchTerm": search_term} if search_term else None
    data = _get_data("/hotel", params=params)
    return data.get("hotelList", []) if data else []


def fetch_hotels_for_pax(location: str, pax_count: int) -> List[Dict[str, Any]]:
    data = _get_data("/hotel", params={"location": location, "paxCount": pax_count})
    return data.get("hotelList", []) if data else []


def fetch_rooms(hotel_id: str, search_term: str) -> List[Dict[str, Any]]:
    data = _get_data(f"/room/hotel/{hotel_id}/search/{search_term or 'ALL'}")
    return data.get("roomList", []) if data else []


def _rooms_frame(rooms: List[Dict[str, Any]]) -> pd.DataFrame:
    frame = pd.DataFrame(rooms)
    if frame.empty:
        return frame
    return frame[["roomNo", "maxPeople", "amount"]].rename(
        columns={"roomNo": "Room", "maxPeople": "Capacity", "amount": "Price"}
    )


# ==========================================
# UI Page Functions
# ==========================================
def render_search_page() -> None:
    st.header("🔎 Find Rooms")
    st.markdown("Find hotels at a location that can host your whole party.")

    col1, col2 = st.columns(2)
    with col1:
        location = st.text_input("Location", "Galle")
    with col2:
        pax_count = st.number_input("Guests", min_value=1, max_value=50, value=5)

    if st.button("Search", type="primary"):
        with st.spinner("Matching rooms..."):
            hotels = fetch_hotels_for_pax(location.strip(), int(pax_count))

        if not hotels:
            st.info("No hotel at this location can accommodate the party.")
            return

        for hotel in hotels:
            rooms = hotel.get("rooms") or []
            st.subheader(hotel["name"])
            metric_col1, metric_col2 = st.columns(2)
            metric_col1.metric("Rooms offered", len(rooms))
            metric_col2.metric("Total capacity", sum(room["maxPeople"] for room in rooms))
            st.dataframe(_rooms_frame(rooms), use_container_width=True)


def render_hotels_page() -> None:
    st.header("🏨 Hotels")
    search_term = st.text_input("Filter by name or location", "")
    hotels = fetch_hotels(search_term.strip())
    if not hotels:
        st.info("No hotels found.")
        return

    frame = pd.DataFrame(hotels)[["name", "location", "roomCount"]].rename(
        columns={"name": "Hotel", "location": "Location", "roomCount": "Room limit"}
    )
    st.dataframe(frame, use_container_width=True)

    st.write("### Rooms")
    hotel_names = {hotel["name"]: hotel["id"] for hotel in hotels}
    selected = st.selectbox("Hotel", list(hotel_names))
    room_filter = st.text_input("Filter by room number", "")
    rooms = fetch_rooms(hotel_names[selected], room_filter.strip())
    if rooms:
        st.dataframe(_rooms_frame(rooms), use_container_width=True)
    else:
        st.info("No rooms registered for this hotel.")


# ==========================================
# Main App Router
# ==========================================
def main() -> None:
    st.sidebar.title("Hotel Room Finder")
    st.sidebar.markdown("---")

    page = st.sidebar.radio("Navigation", ["Find Rooms", "Hotels"])

    st.sidebar.markdown("---")
    st.sidebar.caption(f"API: {API_BASE_URL}")

    if page == "Find Rooms":
        render_search_page()
    elif page == "Hotels":
        render_hotels_page()


if __name__ == "__main__":
    main()
