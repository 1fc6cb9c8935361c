# bluetraffic/traffic/aggregate.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterable

import pandas as pd

from bluetraffic.data.stations import Station


@dataclass(frozen=True)
class StationTraffic:
    short_name: str
    arrivals: int
    departures: int

    @property
    def total_traffic(self) -> int:
        return self.arrivals + self.departures


def compute_station_traffic(
    stations: Iterable[Station],
    trips: pd.DataFrame,
) -> Dict[str, StationTraffic]:
    """
    Count departures (by start_station_id) and arrivals (by end_station_id)
    for every station.

    Returns a fresh snapshot keyed by station short_name, one entry per
    station. Stations without trips get zeros; trips pointing at unknown
    stations are counted but never looked up.
    """
    departures = trips["start_station_id"].value_counts()
    arrivals = trips["end_station_id"].value_counts()

    traffic: Dict[str, StationTraffic] = {}
    for s in stations:
        sid = s.short_name
        traffic[sid] = StationTraffic(
            short_name=sid,
            arrivals=int(arrivals.get(sid, 0)),
            departures=int(departures.get(sid, 0)),
        )

    return traffic


def max_total_traffic(traffic: Dict[str, StationTraffic]) -> int:
    return max((st.total_traffic for st in traffic.values()), default=0)


def traffic_tooltip(st: StationTraffic) -> str:
    return f"{st.total_traffic} trips ({st.departures} departures, {st.arrivals} arrivals)"
