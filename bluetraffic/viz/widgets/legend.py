# bluetraffic/viz/widgets/legend.py
import folium


def _legend_values(domain_max):
    if domain_max <= 0:
        return []
    values = sorted({max(1, round(domain_max * f)) for f in (0.1, 0.5, 1.0)})
    return values


def build_legend_widget(view):
    """
    Returns a Folium Element that injects a floating size legend
    for the current radius scale.
    """
    rows = []
    for v in _legend_values(view.radius.domain_max):
        r = view.radius(v)
        d = max(2, int(round(2 * r)))
        rows.append(
            f"""
          <div class="legend-row">
            <span class="legend-circle"
                  style="width:{d}px;height:{d}px;background:{view.intensity.color(v)};"></span>
            {v} trips
          </div>
            """
        )

    if not rows:
        status = view.error or ("Loading trips…" if not view.ready else "No trips")
        rows.append(f'<div class="legend-row">{status}</div>')

    return folium.Element(
        f"""
<style>
#map-legend {{
  position: absolute;
  bottom: 130px;
  left: 16px;
  background: rgba(255,255,255,0.95);
  padding: 8px 12px;
  border-radius: 10px;
  font-size: 12px;
  z-index: 1200;
}}
.legend-row {{
  display: flex;
  align-items: center;
  gap: 8px;
  margin: 2px 0;
}}
.legend-circle {{
  display: inline-block;
  border-radius: 50%;
  border: 1px solid white;
  opacity: 0.8;
}}
</style>

<div id="map-legend">
  <div><strong>Total traffic</strong></div>
  {''.join(rows)}
</div>
"""
    )
