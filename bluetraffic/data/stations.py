# bluetraffic/data/stations.py
from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path
from typing import List


@dataclass(frozen=True)
class Station:
    short_name: str
    name: str
    lat: float
    lon: float
    capacity: int | None = None


def stations_from_records(raw) -> List[Station]:
    """
    Build Station objects from GBFS-style station dicts.

    short_name is the join key against trip station ids; older feeds
    without it fall back to station_id.
    """
    stations = []
    seen = set()
    for s in raw:
        key = s.get("short_name") or s.get("station_id")
        if key is None:
            raise ValueError(f"Station has neither short_name nor station_id: {s!r}")
        key = str(key).strip()
        if key in seen:
            continue
        seen.add(key)

        try:
            lat = float(s["lat"])
            lon = float(s["lon"])
        except (KeyError, TypeError, ValueError) as exc:
            raise ValueError(f"Station {key} has invalid lat/lon") from exc

        cap = s.get("capacity")
        stations.append(
            Station(
                short_name=key,
                name=str(s.get("name", key)),
                lat=lat,
                lon=lon,
                capacity=int(cap) if cap is not None else None,
            )
        )

    return stations


def load_stations(path: str | Path) -> List[Station]:
    """
    Load Bluebikes stations from station_information.json
    Returns a list of Station with only the fields we care about.
    """
    path = Path(path)
    if not path.exists():
        raise ValueError(f"Stations file not found: {path}")

    with open(path, encoding="utf-8") as f:
        payload = json.load(f)

    try:
        raw = payload["data"]["stations"]
    except (KeyError, TypeError) as exc:
        raise ValueError(f"{path} is not a GBFS station_information document") from exc

    return stations_from_records(raw)
