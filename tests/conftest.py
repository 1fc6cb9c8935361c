from __future__ import annotations

from datetime import datetime

import pytest

from bluetraffic.data.stations import Station
from bluetraffic.data.trips import Trip, trips_frame


def at(hour: int, minute: int = 0, day: int = 1) -> datetime:
    return datetime(2024, 3, day, hour, minute)


def make_trips(*rows):
    """rows: (start_id, end_id, started_at, ended_at)"""
    return trips_frame(Trip(*row) for row in rows)


@pytest.fixture
def stations() -> list[Station]:
    return [
        Station(short_name="A32000", name="MIT at Mass Ave", lat=42.3581, lon=-71.0936, capacity=27),
        Station(short_name="M32006", name="Central Square", lat=42.3651, lon=-71.1031, capacity=19),
        Station(short_name="B32012", name="Kendall T", lat=42.3625, lon=-71.0863, capacity=15),
    ]
