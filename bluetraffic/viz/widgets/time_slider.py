# bluetraffic/viz/widgets/time_slider.py
import folium
import numpy as np

from bluetraffic.traffic.labels import ANY_TIME, time_label
from bluetraffic.traffic.time_filter import NO_FILTER


def hourly_trip_counts(trips):
    """Trips started in each hour of the day -> list of 24 ints."""
    if trips is None or len(trips) == 0:
        return [0] * 24
    hours = trips["started_at"].dropna().dt.hour.to_numpy(dtype=np.int64)
    return np.bincount(hours, minlength=24).astype(int).tolist()


def build_time_slider(time_filter, hourly_counts):
    """
    Time slider:
      - range input -1..1439 (-1 = any time)
      - label shows "H:MM AM/PM" or "(any time)"
      - bars = trips started per hour, behind the slider
      - releasing the slider reloads with ?t=<minute>
    Clicking a bar jumps to the start of that hour.
    """
    max_count = max(hourly_counts, default=0)

    bars = []
    for hour, count in enumerate(hourly_counts):
        if max_count > 0:
            height = int((count / max_count) * 48)
        else:
            height = 0

        t_hour = hour * 60
        active = time_filter != NO_FILTER and abs(time_filter - t_hour - 30) <= 30
        bars.append(
            f"""
            <div class="slider-item" onclick="setTime({t_hour})" title="{count} trips">
              <div class="slider-bar"
                   style="height:{height}px; opacity:{'1.0' if active else '0.45'};">
              </div>
            </div>
            """
        )

    selected = "" if time_filter == NO_FILTER else time_label(time_filter)
    any_display = "inline" if time_filter == NO_FILTER else "none"

    return folium.Element(
        f"""
<style>
#time-filter {{
  position: absolute;
  left: 16px;
  right: 16px;
  bottom: 14px;
  z-index: 1200;
  padding: 8px 14px 10px;
  background: rgba(255,255,255,0.92);
  border-radius: 10px;
  font-size: 12px;
}}

#time-filter label {{
  display: flex;
  align-items: baseline;
  gap: 8px;
  font-weight: 600;
}}

#time-slider {{
  width: 100%;
}}

#slider-bars {{
  display: flex;
  align-items: flex-end;
  height: 48px;
  gap: 2px;
}}

.slider-item {{
  flex: 1;
  display: flex;
  align-items: flex-end;
  height: 100%;
  cursor: pointer;
}}

.slider-bar {{
  width: 100%;
  background: #4292c6;
  border-radius: 2px;
}}

#any-time {{
  color: #777;
  font-style: italic;
}}
</style>

<div id="time-filter">
  <label>
    Filter by time:
    <time id="selected-time">{selected}</time>
    <em id="any-time" style="display:{any_display};">{ANY_TIME}</em>
  </label>
  <div id="slider-bars">
    {''.join(bars)}
  </div>
  <input id="time-slider" type="range" min="-1" max="1439" value="{time_filter}">
</div>

<script>
function formatTime(minutes) {{
  const h = Math.floor(minutes / 60);
  const m = minutes % 60;
  const suffix = h < 12 ? "AM" : "PM";
  const h12 = (h % 12) || 12;
  return h12 + ":" + String(m).padStart(2, "0") + " " + suffix;
}}

function setTime(t) {{
  const url = new URL(window.location.href);
  url.searchParams.set("t", String(t));
  window.location.href = url.toString();
}}

document.addEventListener("DOMContentLoaded", () => {{
  const slider = document.getElementById("time-slider");
  const selected = document.getElementById("selected-time");
  const anyTime = document.getElementById("any-time");
  if (!slider) return;

  slider.addEventListener("input", () => {{
    const t = Number(slider.value);
    if (t === -1) {{
      selected.textContent = "";
      anyTime.style.display = "inline";
    }} else {{
      selected.textContent = formatTime(t);
      anyTime.style.display = "none";
    }}
  }});

  slider.addEventListener("change", () => setTime(Number(slider.value)));
}});
</script>
"""
    )
