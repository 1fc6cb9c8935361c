import folium

from bluetraffic.traffic.aggregate import StationTraffic, traffic_tooltip
from bluetraffic.traffic.labels import time_label


def add_station_markers(m, stations, view):
    """
    Draw one circle per station.
      radius -> view.radius(total_traffic)   (sqrt scale)
      fill   -> view.intensity.color(total_traffic)   (Blues)
    Stations missing from the snapshot draw as empty (radius 0).
    """
    for s in stations:
        st = view.traffic.get(s.short_name)
        if st is None:
            st = StationTraffic(short_name=s.short_name, arrivals=0, departures=0)

        total = st.total_traffic
        popup = [
            f"<b>{s.name}</b>",
            f"Station: {s.short_name}",
            f"Time: {time_label(view.time_filter)}",
            traffic_tooltip(st),
        ]
        if s.capacity is not None:
            popup.insert(2, f"Capacity: {s.capacity}")

        folium.CircleMarker(
            location=[s.lat, s.lon],
            radius=view.radius(total),
            fill=True,
            fill_color=view.intensity.color(total),
            fill_opacity=0.8,
            color="white",
            weight=1,
            tooltip=traffic_tooltip(st),
            popup="<br>".join(popup),
        ).add_to(m)
