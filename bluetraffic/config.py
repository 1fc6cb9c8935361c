# bluetraffic/config.py
from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Mapping

# Boston / Cambridge
CENTER_LAT = 42.36027
CENTER_LON = -71.09415

_LIB_ROOT = Path(__file__).resolve().parent
DEFAULT_STATIONS_FILE = _LIB_ROOT / "bluebikes-stations.json"
DEFAULT_TRIPS_FILE = _LIB_ROOT / "bluebikes-traffic-2024-03.csv"


@dataclass(frozen=True)
class BikeLane:
    source: str
    color: str = "#48b32b"


DEFAULT_BIKE_LANES = [
    BikeLane(
        "https://bostonopendata-boston.opendata.arcgis.com/datasets/boston::existing-bike-network-2022.geojson",
        "#48b32b",
    ),
    BikeLane(
        "https://raw.githubusercontent.com/cambridgegis/cambridgegis_data/main/Recreation/Bike_Facilities/RECREATION_BikeFacilities.geojson",
        "#ff0000",
    ),
]


@dataclass(frozen=True)
class MapConfig:
    stations_json: Path = DEFAULT_STATIONS_FILE
    trips_csv: Path = DEFAULT_TRIPS_FILE
    host: str = "127.0.0.1"
    port: int = 8080
    debug: bool = False
    center_lat: float = CENTER_LAT
    center_lon: float = CENTER_LON
    zoom_start: int = 12
    bike_lanes: List[BikeLane] = field(default_factory=lambda: list(DEFAULT_BIKE_LANES))


def _num(env: Mapping[str, str], key: str, default, cast):
    raw = env.get(key)
    if raw is None or raw == "":
        return default
    try:
        return cast(raw)
    except ValueError as exc:
        raise ValueError(f"{key} must be a number, got {raw!r}") from exc


def parse_bike_lanes(raw: str) -> List[BikeLane]:
    """
    "url|color;url|color" -> [BikeLane, ...]. Color is optional.
    An empty string disables the overlays.
    """
    lanes = []
    for chunk in raw.split(";"):
        chunk = chunk.strip()
        if not chunk:
            continue
        source, _, color = chunk.partition("|")
        lanes.append(BikeLane(source.strip(), color.strip() or "#48b32b"))
    return lanes


def load_config(env: Mapping[str, str] | None = None) -> MapConfig:
    """Build the map config from environment variables."""
    env = os.environ if env is None else env

    lanes = DEFAULT_BIKE_LANES
    if "BIKE_LANES" in env:
        lanes = parse_bike_lanes(env["BIKE_LANES"])

    return MapConfig(
        stations_json=Path(env.get("STATIONS_JSON", DEFAULT_STATIONS_FILE)),
        trips_csv=Path(env.get("TRIPS_CSV", DEFAULT_TRIPS_FILE)),
        host=env.get("HOST", "127.0.0.1"),
        port=_num(env, "PORT", 8080, int),
        debug=env.get("DEBUG", "").lower() in ("1", "true", "yes"),
        center_lat=_num(env, "CENTER_LAT", CENTER_LAT, float),
        center_lon=_num(env, "CENTER_LON", CENTER_LON, float),
        zoom_start=_num(env, "ZOOM_START", 12, int),
        bike_lanes=list(lanes),
    )
