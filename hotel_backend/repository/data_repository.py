"""Repository layer responsible for all database access."""

from __future__ import annotations

import sqlite3
from pathlib import Path
from typing import Optional

from hotel_backend.domain.models import (
    Hotel,
    Room,
    RoomType,
    calculate_room_price,
    new_hotel_id,
    new_room_id,
    new_room_type_id,
)
from hotel_backend.utils.config import Settings, get_settings
from hotel_backend.utils.logger import get_logger


logger = get_logger(__name__)


_DEMO_ROOM_TYPES = [
    ("Standard", 1000.0, 100.0),
    ("Deluxe", 2000.0, 150.0),
    ("Suite", 3500.0, 250.0),
]

# (hotel name, location, room limit, [(room no, room type name, max people)])
_DEMO_HOTELS = [
    (
        "Fort Bastion Hotel",
        "Galle",
        10,
        [
            ("G101", "Standard", 2),
            ("G102", "Standard", 2),
            ("G201", "Deluxe", 3),
            ("G202", "Deluxe", 4),
            ("G301", "Suite", 6),
        ],
    ),
    (
        "Lighthouse Residence",
        "Galle",
        6,
        [
            ("L1", "Standard", 1),
            ("L2", "Standard", 2),
            ("L3", "Deluxe", 3),
        ],
    ),
    (
        "Colombo City Hotel",
        "Colombo",
        8,
        [
            ("C10", "Standard", 2),
            ("C11", "Deluxe", 4),
            ("C12", "Suite", 5),
            ("C13", "Suite", 7),
        ],
    ),
    (
        "Kandy Hills Lodge",
        "Kandy",
        5,
        [
            ("K1", "Standard", 2),
            ("K2", "Deluxe", 3),
        ],
    ),
]


def _hotel_from_row(row: sqlite3.Row, rooms: tuple[Room, ...] = ()) -> Hotel:
    return Hotel(
        hotel_id=str(row["id"]),
        name=str(row["name"]),
        location=str(row["location"]),
        room_count=int(row["room_count"]),
        rooms=rooms,
    )


def _room_from_row(row: sqlite3.Row) -> Room:
    return Room(
        room_id=str(row["id"]),
        room_no=str(row["room_no"]),
        hotel_id=str(row["hotel_id"]),
        room_type_id=str(row["room_type_id"]),
        max_people=int(row["max_people"]),
        amount=float(row["amount"]),
    )


def _room_type_from_row(row: sqlite3.Row) -> RoomType:
    return RoomType(
        room_type_id=str(row["id"]),
        name=str(row["name"]),
        base_amount=float(row["base_amount"]),
        amount_per_person=float(row["amount_per_person"]),
    )


class DataRepository:
    """Encapsulates SQLite access so business logic stays storage-agnostic.

    ``sqlite3.Error`` is propagated unchanged; the service layer decides how
    storage failures are reported.
    """

    def __init__(self, settings: Optional[Settings] = None) -> None:
        self._settings = settings or get_settings()
        self._db_path = Path(self._settings.database_path)
        self._db_path.parent.mkdir(parents=True, exist_ok=True)

    @property
    def database_path(self) -> Path:
        return self._db_path

    def _connect(self) -> sqlite3.Connection:
        connection = sqlite3.connect(self._db_path)
        connection.row_factory = sqlite3.Row
        connection.execute("PRAGMA foreign_keys = ON;")
        return connection

    def initialize_database(self) -> None:
        """Create all persistence artifacts before API startup."""
        with self._connect() as conn:
            cursor = conn.cursor()
            cursor.execute(
                """
                CREATE TABLE IF NOT EXISTS Hotels (
                    id TEXT PRIMARY KEY,
                    name TEXT NOT NULL,
                    location TEXT NOT NULL,
                    room_count INTEGER NOT NULL CHECK (room_count > 0),
                    created_at DATETIME DEFAULT CURRENT_TIMESTAMP
                );
                """
            )
            cursor.execute(
                """
                CREATE TABLE IF NOT EXISTS RoomTypes (
                    id TEXT PRIMARY KEY,
                    name TEXT NOT NULL,
                    base_amount REAL NOT NULL,
                    amount_per_person REAL NOT NULL,
                    created_at DATETIME DEFAULT CURRENT_TIMESTAMP
                );
                """
            )
            cursor.execute(
                """
                CREATE TABLE IF NOT EXISTS Rooms (
                    id TEXT PRIMARY KEY,
                    room_no TEXT NOT NULL,
                    hotel_id TEXT NOT NULL,
                    room_type_id TEXT NOT NULL,
                    max_people INTEGER NOT NULL CHECK (max_people > 0),
                    amount REAL NOT NULL,
                    created_at DATETIME DEFAULT CURRENT_TIMESTAMP,
                    FOREIGN KEY (hotel_id) REFERENCES Hotels(id),
                    FOREIGN KEY (room_type_id) REFERENCES RoomTypes(id)
                );
                """
            )
            cursor.execute(
                "CREATE INDEX IF NOT EXISTS idx_hotels_location ON Hotels(location);"
            )
            cursor.execute(
                "CREATE INDEX IF NOT EXISTS idx_rooms_hotel ON Rooms(hotel_id);"
            )
            conn.commit()
        logger.info("Database initialized at %s", self._db_path)

    def seed_demo_data_if_empty(self) -> int:
        """Insert demo room types, hotels and rooms when no hotel exists yet.

        Returns the number of hotels inserted.
        """
        with self._connect() as conn:
            cursor = conn.cursor()
            cursor.execute("SELECT COUNT(*) AS count FROM Hotels;")
            if int(cursor.fetchone()["count"]) > 0:
                logger.info("Hotels already present; skipping demo seed")
                return 0

            room_types: dict[str, RoomType] = {}
            for name, base_amount, amount_per_person in _DEMO_ROOM_TYPES:
                room_type = RoomType(
                    room_type_id=new_room_type_id(),
                    name=name,
                    base_amount=base_amount,
                    amount_per_person=amount_per_person,
                )
                room_types[name] = room_type
                cursor.execute(
                    """
                    INSERT INTO RoomTypes (id, name, base_amount, amount_per_person)
                    VALUES (?, ?, ?, ?);
                    """,
                    (room_type.room_type_id, name, base_amount, amount_per_person),
                )

            room_rows = []
            for hotel_name, location, room_limit, rooms in _DEMO_HOTELS:
                hotel_id = new_hotel_id()
                cursor.execute(
                    """
                    INSERT INTO Hotels (id, name, location, room_count)
                    VALUES (?, ?, ?, ?);
                    """,
                    (hotel_id, hotel_name, location, room_limit),
                )
                for room_no, type_name, max_people in rooms:
                    room_type = room_types[type_name]
                    room_rows.append(
                        (
                            new_room_id(),
                            room_no,
                            hotel_id,
                            room_type.room_type_id,
                            max_people,
                            calculate_room_price(room_type, max_people),
                        )
                    )

            cursor.executemany(
                """
                INSERT INTO Rooms (id, room_no, hotel_id, room_type_id, max_people, amount)
                VALUES (?, ?, ?, ?, ?, ?);
                """,
                room_rows,
            )
            conn.commit()
        logger.info(
            "Demo seed completed | hotels=%s | rooms=%s",
            len(_DEMO_HOTELS),
            len(room_rows),
        )
        return len(_DEMO_HOTELS)

    # --- Hotels ---

    def save_hotel(self, hotel: Hotel) -> None:
        with self._connect() as conn:
            conn.execute(
                """
                INSERT INTO Hotels (id, name, location, room_count)
                VALUES (?, ?, ?, ?);
                """,
                (hotel.hotel_id, hotel.name, hotel.location, hotel.room_count),
            )
            conn.commit()

    def update_hotel(self, hotel: Hotel) -> None:
        with self._connect() as conn:
            conn.execute(
                """
                UPDATE Hotels
                SET name = ?, location = ?, room_count = ?
                WHERE id = ?;
                """,
                (hotel.name, hotel.location, hotel.room_count, hotel.hotel_id),
            )
            conn.commit()

    def get_hotel(self, hotel_id: str, include_rooms: bool = False) -> Optional[Hotel]:
        with self._connect() as conn:
            cursor = conn.cursor()
            cursor.execute(
                "SELECT id, name, location, room_count FROM Hotels WHERE id = ?;",
                (hotel_id,),
            )
            row = cursor.fetchone()
            if row is None:
                return None
            rooms: tuple[Room, ...] = ()
            if include_rooms:
                rooms = tuple(self._rooms_for_hotels(cursor, [hotel_id]).get(hotel_id, []))
            return _hotel_from_row(row, rooms)

    def list_hotels(self, search_term: Optional[str] = None) -> list[Hotel]:
        """Return hotels in creation order, optionally filtered by name/location text."""
        with self._connect() as conn:
            cursor = conn.cursor()
            if search_term is None:
                cursor.execute(
                    """
                    SELECT id, name, location, room_count
                    FROM Hotels
                    ORDER BY rowid ASC;
                    """
                )
            else:
                cursor.execute(
                    """
                    SELECT id, name, location, room_count
                    FROM Hotels
                    WHERE instr(lower(name), lower(?)) > 0
                       OR instr(lower(location), lower(?)) > 0
                    ORDER BY rowid ASC;
                    """,
                    (search_term, search_term),
                )
            return [_hotel_from_row(row) for row in cursor.fetchall()]

    def find_hotels_by_location(self, location: str) -> list[Hotel]:
        """Return hotels at ``location`` (exact match), each carrying its rooms."""
        with self._connect() as conn:
            cursor = conn.cursor()
            cursor.execute(
                """
                SELECT id, name, location, room_count
                FROM Hotels
                WHERE location = ?
                ORDER BY rowid ASC;
                """,
                (location,),
            )
            hotel_rows = cursor.fetchall()
            rooms_by_hotel = self._rooms_for_hotels(
                cursor,
                [str(row["id"]) for row in hotel_rows],
            )
            return [
                _hotel_from_row(row, tuple(rooms_by_hotel.get(str(row["id"]), [])))
                for row in hotel_rows
            ]

    def _rooms_for_hotels(
        self,
        cursor: sqlite3.Cursor,
        hotel_ids: list[str],
    ) -> dict[str, list[Room]]:
        if not hotel_ids:
            return {}
        placeholders = ",".join("?" for _ in hotel_ids)
        cursor.execute(
            f"""
            SELECT id, room_no, hotel_id, room_type_id, max_people, amount
            FROM Rooms
            WHERE hotel_id IN ({placeholders})
            ORDER BY rowid ASC;
            """,
            tuple(hotel_ids),
        )
        rooms_by_hotel: dict[str, list[Room]] = {}
        for row in cursor.fetchall():
            room = _room_from_row(row)
            rooms_by_hotel.setdefault(room.hotel_id, []).append(room)
        return rooms_by_hotel

    # --- Room types ---

    def save_room_type(self, room_type: RoomType) -> None:
        with self._connect() as conn:
            conn.execute(
                """
                INSERT INTO RoomTypes (id, name, base_amount, amount_per_person)
                VALUES (?, ?, ?, ?);
                """,
                (
                    room_type.room_type_id,
                    room_type.name,
                    room_type.base_amount,
                    room_type.amount_per_person,
                ),
            )
            conn.commit()

    def get_room_type(self, room_type_id: str) -> Optional[RoomType]:
        with self._connect() as conn:
            cursor = conn.cursor()
            cursor.execute(
                """
                SELECT id, name, base_amount, amount_per_person
                FROM RoomTypes
                WHERE id = ?;
                """,
                (room_type_id,),
            )
            row = cursor.fetchone()
            if row is None:
                return None
            return _room_type_from_row(row)

    def list_room_types(self) -> list[RoomType]:
        with self._connect() as conn:
            cursor = conn.cursor()
            cursor.execute(
                """
                SELECT id, name, base_amount, amount_per_person
                FROM RoomTypes
                ORDER BY rowid ASC;
                """
            )
            return [_room_type_from_row(row) for row in cursor.fetchall()]

    # --- Rooms ---

    def save_room(self, room: Room) -> None:
        with self._connect() as conn:
            conn.execute(
                """
                INSERT INTO Rooms (id, room_no, hotel_id, room_type_id, max_people, amount)
                VALUES (?, ?, ?, ?, ?, ?);
                """,
                (
                    room.room_id,
                    room.room_no,
                    room.hotel_id,
                    room.room_type_id,
                    room.max_people,
                    room.amount,
                ),
            )
            conn.commit()

    def update_room(self, room: Room) -> None:
        with self._connect() as conn:
            conn.execute(
                """
                UPDATE Rooms
                SET room_no = ?, hotel_id = ?, room_type_id = ?, max_people = ?, amount = ?
                WHERE id = ?;
                """,
                (
                    room.room_no,
                    room.hotel_id,
                    room.room_type_id,
                    room.max_people,
                    room.amount,
                    room.room_id,
                ),
            )
            conn.commit()

    def delete_room(self, room_id: str) -> bool:
        """Delete a room; returns ``False`` when no row matched."""
        with self._connect() as conn:
            cursor = conn.cursor()
            cursor.execute("DELETE FROM Rooms WHERE id = ?;", (room_id,))
            conn.commit()
            return cursor.rowcount > 0

    def get_room(self, room_id: str) -> Optional[Room]:
        with self._connect() as conn:
            cursor = conn.cursor()
            cursor.execute(
                """
                SELECT id, room_no, hotel_id, room_type_id, max_people, amount
                FROM Rooms
                WHERE id = ?;
                """,
                (room_id,),
            )
            row = cursor.fetchone()
            if row is None:
                return None
            return _room_from_row(row)

    def list_rooms_by_hotel(
        self,
        hotel_id: str,
        search_term: Optional[str] = None,
    ) -> list[Room]:
        with self._connect() as conn:
            cursor = conn.cursor()
            if search_term is None:
                cursor.execute(
                    """
                    SELECT id, room_no, hotel_id, room_type_id, max_people, amount
                    FROM Rooms
                    WHERE hotel_id = ?
                    ORDER BY rowid ASC;
                    """,
                    (hotel_id,),
                )
            else:
                cursor.execute(
                    """
                    SELECT id, room_no, hotel_id, room_type_id, max_people, amount
                    FROM Rooms
                    WHERE hotel_id = ?
                      AND instr(lower(room_no), lower(?)) > 0
                    ORDER BY rowid ASC;
                    """,
                    (hotel_id, search_term),
                )
            return [_room_from_row(row) for row in cursor.fetchall()]

    def count_rooms_by_hotel(self, hotel_id: str) -> int:
        with self._connect() as conn:
            cursor = conn.cursor()
            cursor.execute(
                "SELECT COUNT(*) AS count FROM Rooms WHERE hotel_id = ?;",
                (hotel_id,),
            )
            return int(cursor.fetchone()["count"])
