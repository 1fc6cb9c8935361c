import json
from pathlib import Path

import folium
import requests
from colorama import Fore, Style


def load_bike_lane_layers(lanes, *, timeout=20):
    """
    Fetch each BikeLane source once (URL or local path).
    Returns [(BikeLane, geojson_dict), ...]; sources that fail to load
    are reported and left out so the station map still renders.
    """
    layers = []
    for lane in lanes:
        try:
            if lane.source.lower().startswith(("http://", "https://")):
                resp = requests.get(lane.source, timeout=timeout)
                resp.raise_for_status()
                data = resp.json()
            else:
                with open(Path(lane.source), encoding="utf-8") as f:
                    data = json.load(f)
        except (OSError, ValueError) as exc:
            print(f"{Fore.YELLOW}Skipping bike lanes {lane.source}: {exc}{Style.RESET_ALL}")
            continue
        layers.append((lane, data))
    return layers


def add_bike_lanes(m, layers):
    for i, (lane, data) in enumerate(layers):
        color = lane.color

        folium.GeoJson(
            data,
            name=f"bike-lanes-{i}",
            style_function=lambda _feature, color=color: {
                "color": color,
                "weight": 4,
                "opacity": 0.6,
            },
        ).add_to(m)
