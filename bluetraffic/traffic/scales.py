# bluetraffic/traffic/scales.py
from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Dict, Tuple

from branca.colormap import linear

from bluetraffic.traffic.aggregate import StationTraffic, max_total_traffic

RANGE_UNFILTERED: Tuple[float, float] = (0.0, 25.0)
# filtered views have fewer, quieter stations, so radii are widened
RANGE_FILTERED: Tuple[float, float] = (3.0, 50.0)

INTENSITY_MIN = 0.4
INTENSITY_SPAN = 0.7
INTENSITY_MAX = 1.0

_BLUES = linear.Blues_09.scale(0.0, 1.0)


@dataclass(frozen=True)
class RadiusScale:
    """
    Square-root scale: marker AREA grows linearly with traffic.

      radius = r0 + (r1 - r0) * sqrt(value / domain_max)
    """
    domain_max: int
    range_min: float
    range_max: float

    def __call__(self, value: float) -> float:
        if self.domain_max <= 0:
            return 0.0
        v = max(0.0, float(value))
        return self.range_min + (self.range_max - self.range_min) * math.sqrt(v / self.domain_max)


def build_radius_scale(traffic: Dict[str, StationTraffic], filter_active: bool) -> RadiusScale:
    r0, r1 = RANGE_FILTERED if filter_active else RANGE_UNFILTERED
    return RadiusScale(domain_max=max_total_traffic(traffic), range_min=r0, range_max=r1)


@dataclass(frozen=True)
class ColorIntensity:
    max_total: int

    def __call__(self, total: float) -> float:
        if self.max_total <= 0:
            return INTENSITY_MIN
        x = INTENSITY_MIN + INTENSITY_SPAN * float(total) / self.max_total
        return min(INTENSITY_MAX, max(INTENSITY_MIN, x))

    def color(self, total: float) -> str:
        return _BLUES(self(total))


def build_color_intensity(traffic: Dict[str, StationTraffic]) -> ColorIntensity:
    return ColorIntensity(max_total=max_total_traffic(traffic))
