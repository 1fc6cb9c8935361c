from __future__ import annotations

import json
import textwrap

import pytest

from bluetraffic.data.stations import load_stations
from bluetraffic.data.trips import load_trips, trips_frame


STATIONS_JSON = {
    "data": {
        "stations": [
            {"short_name": "A32000", "station_id": "abc-1", "name": "MIT", "lat": "42.3581", "lon": "-71.0936", "capacity": 27},
            {"station_id": "77", "name": "Legacy", "lat": 42.36, "lon": -71.1},
        ]
    }
}

TRIPS_CSV = """
ride_id,rideable_type,started_at,ended_at,start_station_name,start_station_id,end_station_name,end_station_id,member_casual
r1,classic_bike,2024-03-01 08:00:12.123,2024-03-01 08:10:40.456,MIT,A32000,Central,M32006,member
r2,electric_bike,2024-03-01 17:30:00,2024-03-01 17:45:00,Central,M32006,MIT,A32000,casual
r3,classic_bike,not-a-date,2024-03-01 09:00:00,MIT,A32000,MIT,A32000,member
"""


def test_load_stations(tmp_path) -> None:
    path = tmp_path / "stations.json"
    path.write_text(json.dumps(STATIONS_JSON))

    stations = load_stations(path)

    assert [s.short_name for s in stations] == ["A32000", "77"]
    assert stations[0].lat == pytest.approx(42.3581)
    assert stations[0].capacity == 27
    assert stations[1].capacity is None


def test_load_stations_missing_file(tmp_path) -> None:
    with pytest.raises(ValueError):
        load_stations(tmp_path / "missing.json")


def test_load_stations_bad_shape(tmp_path) -> None:
    path = tmp_path / "stations.json"
    path.write_text(json.dumps({"stations": []}))

    with pytest.raises(ValueError):
        load_stations(path)


def test_load_trips(tmp_path) -> None:
    path = tmp_path / "trips.csv"
    path.write_text(textwrap.dedent(TRIPS_CSV).lstrip())

    trips = load_trips(path)

    assert list(trips.columns) == ["start_station_id", "end_station_id", "started_at", "ended_at"]
    assert len(trips) == 2
    assert list(trips["start_station_id"]) == ["A32000", "M32006"]
    assert trips["started_at"].iloc[0].hour == 8


def test_load_trips_missing_column(tmp_path) -> None:
    path = tmp_path / "trips.csv"
    path.write_text("started_at,ended_at,start_station_id\n2024-03-01 08:00,2024-03-01 08:10,A\n")

    with pytest.raises(ValueError):
        load_trips(path)


def test_load_trips_missing_file(tmp_path) -> None:
    with pytest.raises(ValueError):
        load_trips(tmp_path / "nope.csv")


def test_trips_frame_drops_unparseable_timestamps() -> None:
    trips = trips_frame(
        [
            {"start_station_id": "A", "end_station_id": "B", "started_at": "not-a-date", "ended_at": "2024-03-01 08:10"},
            {"start_station_id": "B", "end_station_id": "A", "started_at": "2024-03-01 09:00", "ended_at": "2024-03-01 09:20"},
        ]
    )

    assert len(trips) == 1
    assert list(trips["start_station_id"]) == ["B"]
    assert list(trips.index) == [0]
