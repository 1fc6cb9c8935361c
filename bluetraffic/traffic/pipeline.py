# bluetraffic/traffic/pipeline.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List

from bluetraffic.data.stations import Station
from bluetraffic.data.trip_loader import TripLoader
from bluetraffic.traffic.aggregate import StationTraffic, compute_station_traffic
from bluetraffic.traffic.labels import time_label
from bluetraffic.traffic.scales import (
    ColorIntensity,
    RadiusScale,
    build_color_intensity,
    build_radius_scale,
)
from bluetraffic.traffic.time_filter import NO_FILTER, filter_trips_by_time, validate_time_filter


@dataclass(frozen=True)
class TrafficView:
    """Everything the map needs for one time selection."""
    time_filter: int
    traffic: Dict[str, StationTraffic]
    radius: RadiusScale
    intensity: ColorIntensity
    ready: bool = True
    error: str | None = None
    trip_count: int = 0

    @property
    def filter_active(self) -> bool:
        return self.time_filter != NO_FILTER

    def to_dict(self) -> Dict[str, Any]:
        stations = []
        for sid, st in self.traffic.items():
            stations.append({
                "short_name": sid,
                "arrivals": st.arrivals,
                "departures": st.departures,
                "total_traffic": st.total_traffic,
                "radius": self.radius(st.total_traffic),
                "intensity": self.intensity(st.total_traffic),
                "color": self.intensity.color(st.total_traffic),
            })
        return {
            "time_filter": self.time_filter,
            "label": time_label(self.time_filter),
            "ready": self.ready,
            "error": self.error,
            "trip_count": self.trip_count,
            "stations": stations,
        }


def empty_view(time_filter: int, *, error: str | None = None) -> TrafficView:
    traffic: Dict[str, StationTraffic] = {}
    return TrafficView(
        time_filter=time_filter,
        traffic=traffic,
        radius=build_radius_scale(traffic, time_filter != NO_FILTER),
        intensity=build_color_intensity(traffic),
        ready=False,
        error=error,
    )


@dataclass
class TrafficPipeline:
    """
    trips -> time filter -> aggregate -> scales

    Each run builds a new TrafficView from the immutable trip store; no
    state is carried between runs.
    """
    stations: List[Station]
    trip_loader: TripLoader

    def run(self, time_filter: int = NO_FILTER) -> TrafficView:
        t = validate_time_filter(time_filter)

        trips = self.trip_loader.get()
        if trips is None:
            # not loaded yet (or failed): nothing is computed
            return empty_view(t, error=self.trip_loader.error)

        filtered = filter_trips_by_time(trips, t)
        traffic = compute_station_traffic(self.stations, filtered)

        return TrafficView(
            time_filter=t,
            traffic=traffic,
            radius=build_radius_scale(traffic, t != NO_FILTER),
            intensity=build_color_intensity(traffic),
            trip_count=len(filtered),
        )
