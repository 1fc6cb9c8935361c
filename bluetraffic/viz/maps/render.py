# bluetraffic/viz/maps/render.py
import json

import folium

from bluetraffic.config import CENTER_LAT, CENTER_LON
from bluetraffic.viz.overlays.bike_lanes import add_bike_lanes
from bluetraffic.viz.overlays.stations import add_station_markers
from bluetraffic.viz.widgets.legend import build_legend_widget
from bluetraffic.viz.widgets.time_slider import build_time_slider


def render_map_document(
    *,
    stations,
    view,
    hourly_counts=None,
    lane_layers=None,
    title: str | None = None,
    center=(CENTER_LAT, CENTER_LON),
    zoom_start: int = 12,
):
    """
    Single place that assembles the full Folium map HTML document.
    """

    m = folium.Map(
        location=list(center),
        zoom_start=zoom_start,
        min_zoom=5,
        max_zoom=18,
        tiles="cartodbpositron",
        prefer_canvas=True,
    )

    # bike lanes under the stations
    if lane_layers:
        add_bike_lanes(m, lane_layers)

    # stations (nothing to draw until trips are loaded)
    if view.ready:
        add_station_markers(m, stations, view)

    # time slider (widget)
    m.get_root().html.add_child(
        build_time_slider(view.time_filter, hourly_counts or [0] * 24)
    )

    # legend (widget)
    m.get_root().html.add_child(build_legend_widget(view))

    # title + wrap so widgets sit on-map
    m.get_root().html.add_child(
        folium.Element(
            f"""
<style>
#map-wrap {{
  position: relative;
  width: 100%;
}}
#map-wrap .leaflet-container {{
  width: 100% !important;
  height: 100vh !important;
  min-height: 520px;
}}
#map-title {{
  position: absolute;
  top: 12px;
  left: 50%;
  transform: translateX(-50%);
  background: rgba(255,255,255,0.95);
  padding: 6px 16px;
  border-radius: 999px;
  font-size: 14px;
  font-weight: 600;
  z-index: 1300;
}}
</style>

<script>
document.addEventListener("DOMContentLoaded", () => {{
  const mapEl = document.querySelector(".leaflet-container");
  if (!mapEl) return;

  // Wrap map
  let wrap = document.getElementById("map-wrap");
  if (!wrap) {{
    wrap = document.createElement("div");
    wrap.id = "map-wrap";
    mapEl.parentNode.insertBefore(wrap, mapEl);
    wrap.appendChild(mapEl);
  }}

  {"const t=document.createElement('div');t.id='map-title';t.textContent=%s;wrap.appendChild(t);" % json.dumps(title) if title else ""}

  // Put slider + legend inside map overlay
  ["time-filter", "map-legend"].forEach((id) => {{
    const el = document.getElementById(id);
    if (el) wrap.appendChild(el);
  }});
}});
</script>
"""
        )
    )

    return m.get_root().render()
