# bluetraffic/viz/app/single.py
from __future__ import annotations

from flask import Flask, jsonify, request
from colorama import Fore, Style

from bluetraffic.config import MapConfig
from bluetraffic.data.stations import load_stations
from bluetraffic.data.trip_loader import TripLoader
from bluetraffic.data.trips import load_trips
from bluetraffic.traffic.pipeline import TrafficPipeline
from bluetraffic.traffic.time_filter import MINUTES_PER_DAY, NO_FILTER
from bluetraffic.viz.maps.render import render_map_document
from bluetraffic.viz.overlays.bike_lanes import load_bike_lane_layers
from bluetraffic.viz.widgets.time_slider import hourly_trip_counts


def clamp_time(t_req: int | None) -> int:
    if t_req is None:
        return NO_FILTER
    return max(NO_FILTER, min(MINUTES_PER_DAY - 1, int(t_req)))


def create_app(
    *,
    stations,
    trip_loader: TripLoader,
    lane_layers=None,
    title: str | None = "Bluebikes Traffic",
    center=None,
    zoom_start: int = 12,
) -> Flask:
    """
    Build the map app. The trip loader is the readiness gate: until it
    resolves, pages render with no station markers.
    """
    pipeline = TrafficPipeline(stations=stations, trip_loader=trip_loader)
    render_kwargs = {"zoom_start": zoom_start}
    if center is not None:
        render_kwargs["center"] = center

    app = Flask(__name__)

    def _resolve_time():
        return clamp_time(request.args.get("t", NO_FILTER, type=int))

    @app.route("/")
    def _index():
        view = pipeline.run(_resolve_time())

        return render_map_document(
            stations=stations,
            view=view,
            hourly_counts=hourly_trip_counts(trip_loader.get()),
            lane_layers=lane_layers,
            title=title,
            **render_kwargs,
        )

    @app.route("/api/traffic")
    def _traffic():
        view = pipeline.run(_resolve_time())
        return jsonify(view.to_dict())

    return app


def serve_traffic_map(config: MapConfig, *, title: str | None = "Bluebikes Traffic"):
    """
    Library entrypoint: loads stations, starts loading trips in the
    background, and runs the server (blocking).
    """
    print(f"{Fore.CYAN}Loading station registry…{Style.RESET_ALL}")
    stations = load_stations(config.stations_json)
    print(f"{Fore.GREEN}Loaded {len(stations)} stations.{Style.RESET_ALL}")

    trip_loader = TripLoader(lambda: load_trips(config.trips_csv))
    trip_loader.start()

    lane_layers = load_bike_lane_layers(config.bike_lanes)

    app = create_app(
        stations=stations,
        trip_loader=trip_loader,
        lane_layers=lane_layers,
        title=title,
        center=(config.center_lat, config.center_lon),
        zoom_start=config.zoom_start,
    )

    print(f"{Fore.MAGENTA}Serving on http://{config.host}:{config.port}{Style.RESET_ALL}")
    app.run(host=config.host, port=int(config.port), debug=bool(config.debug))
