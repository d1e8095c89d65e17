#!/usr/bin/env python3
"""Validate local hotel service environment readiness."""

from __future__ import annotations

import importlib
import shutil
import sqlite3
import sys
import tempfile
from dataclasses import replace
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from hotel_backend.repository.data_repository import DataRepository
from hotel_backend.services.hotel_service import HotelService
from hotel_backend.utils.config import get_settings

SEPARATOR_LINE = "=" * 44


def _print_result(name: str, success: bool, detail: str = "") -> tuple[bool, str]:
    if success:
        return True, f"[PASS] {name}{detail}"
    return False, f"[FAIL] {name}: {detail}"


def main() -> int:
    results: list[str] = []
    all_passed = True
    temp_dir = tempfile.mkdtemp(prefix="hotel-env-")

    # CHECK 1: Python version >= 3.11
    if sys.version_info >= (3, 11):
        ok, line = _print_result("Python " + sys.version.split()[0], True)
    else:
        ok, line = _print_result(
            "Python version >= 3.11",
            False,
            f"found {sys.version.split()[0]}",
        )
    results.append(line)
    all_passed = all_passed and ok

    # CHECK 2: Required packages importable
    package_names = [
        "fastapi",
        "uvicorn",
        "pydantic",
        "pandas",
        "requests",
        "streamlit",
        "httpx",
        "pytest",
    ]
    import_errors: list[str] = []
    for module_name in package_names:
        try:
            importlib.import_module(module_name)
        except ImportError as exc:
            import_errors.append(f"{module_name} ({exc})")
    if import_errors:
        ok, line = _print_result(
            "Required packages",
            False,
            "missing/unimportable -> " + "; ".join(import_errors),
        )
    else:
        ok, line = _print_result("Required packages: all importable", True)
    results.append(line)
    all_passed = all_passed and ok

    try:
        temp_db_path = Path(temp_dir) / "hotel_validation.db"
        validation_settings = replace(get_settings(), database_path=temp_db_path)
        repository = DataRepository(validation_settings)

        # CHECK 3: Database initialization
        try:
            repository.initialize_database()
            ok, line = _print_result("Database initialization", True)
        except sqlite3.Error as exc:
            ok, line = _print_result("Database initialization", False, str(exc))
        results.append(line)
        all_passed = all_passed and ok

        # CHECK 4: Demo data seeding
        try:
            seeded_hotels = repository.seed_demo_data_if_empty()
            if seeded_hotels == 0:
                raise RuntimeError("no demo hotels were inserted")
            with sqlite3.connect(temp_db_path) as conn:
                room_rows = int(conn.execute("SELECT COUNT(*) FROM Rooms;").fetchone()[0])
            ok, line = _print_result(
                "Demo data seeding",
                True,
                f": {seeded_hotels} hotels, {room_rows} rooms",
            )
        except (sqlite3.Error, RuntimeError) as exc:
            ok, line = _print_result("Demo data seeding", False, str(exc))
        results.append(line)
        all_passed = all_passed and ok

        # CHECK 5: Location/pax search over the demo data
        try:
            hotel_service = HotelService(repository=repository, settings=validation_settings)
            matches = hotel_service.get_hotels_by_location_and_pax_count("Galle", 5)
            if not matches:
                raise RuntimeError("expected at least one Galle hotel for 5 guests")
            ok, line = _print_result(
                "Room allocation search",
                True,
                f": {len(matches)} hotels matched",
            )
        except Exception as exc:
            ok, line = _print_result("Room allocation search", False, str(exc))
        results.append(line)
        all_passed = all_passed and ok

    finally:
        shutil.rmtree(temp_dir, ignore_errors=True)

    print(SEPARATOR_LINE)
    print(" Hotel Service Environment Validation")
    print(SEPARATOR_LINE)
    for line in results:
        print(f" {line}")
    print(SEPARATOR_LINE)
    if all_passed:
        print(" All checks passed. Environment is ready.")
        print(SEPARATOR_LINE)
        return 0
    print(" One or more checks failed.")
    print(SEPARATOR_LINE)
    return 1


if __name__ == "__main__":
    raise SystemExit(main())
