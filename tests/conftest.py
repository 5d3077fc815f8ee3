from __future__ import annotations

from datetime import datetime, timedelta

import pytest

from bikeflow.traffic.types import Station, Trip


def _make_trip(start: str, end: str, from_id: str, to_id: str, day: str = "2024-03-01") -> Trip:
    """Trip from "HH:MM" strings; an end earlier than start rolls to the next day."""
    started_at = datetime.fromisoformat(f"{day}T{start}:00")
    ended_at = datetime.fromisoformat(f"{day}T{end}:00")
    if ended_at < started_at:
        ended_at += timedelta(days=1)
    return Trip(
        started_at=started_at,
        ended_at=ended_at,
        start_station_id=from_id,
        end_station_id=to_id,
    )


@pytest.fixture
def make_trip():
    return _make_trip


@pytest.fixture
def midnight_trips():
    return [
        _make_trip("00:30", "00:45", "A", "B"),
        _make_trip("23:50", "00:10", "B", "A"),
    ]


@pytest.fixture
def stations_ab():
    return [
        Station(short_name="A", name="Alpha", lat=42.36, lon=-71.09),
        Station(short_name="B", name="Bravo", lat=42.35, lon=-71.06),
    ]
