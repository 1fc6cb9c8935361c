from __future__ import annotations

import math

import pytest

from bluetraffic.traffic.aggregate import StationTraffic
from bluetraffic.traffic.scales import (
    INTENSITY_MIN,
    RadiusScale,
    build_color_intensity,
    build_radius_scale,
)


def _traffic(*totals: int) -> dict[str, StationTraffic]:
    return {
        f"S{i}": StationTraffic(f"S{i}", arrivals=t, departures=0)
        for i, t in enumerate(totals)
    }


def test_unfiltered_range() -> None:
    scale = build_radius_scale(_traffic(0, 25, 100), filter_active=False)

    assert scale.domain_max == 100
    assert scale(0) == 0.0
    assert scale(100) == pytest.approx(25.0)
    assert scale(25) == pytest.approx(12.5)


def test_filtered_range_differs_on_same_data() -> None:
    traffic = _traffic(4, 16)

    off = build_radius_scale(traffic, filter_active=False)
    on = build_radius_scale(traffic, filter_active=True)

    assert off.domain_max == on.domain_max == 16
    assert (off.range_min, off.range_max) == (0.0, 25.0)
    assert (on.range_min, on.range_max) == (3.0, 50.0)
    assert on(0) == pytest.approx(3.0)
    assert on(16) == pytest.approx(50.0)
    assert on(4) == pytest.approx(3.0 + 47.0 * 0.5)


def test_sqrt_scale_area_is_linear() -> None:
    scale = RadiusScale(domain_max=100, range_min=0.0, range_max=10.0)

    assert scale(100) ** 2 == pytest.approx(4 * scale(25) ** 2)


@pytest.mark.parametrize("filter_active", [False, True])
def test_zero_domain_returns_zero(filter_active: bool) -> None:
    scale = build_radius_scale(_traffic(0, 0), filter_active=filter_active)

    for v in (0, 1, 10):
        r = scale(v)
        assert r == 0.0
        assert not math.isnan(r)


def test_empty_traffic_scale_is_callable() -> None:
    scale = build_radius_scale({}, filter_active=False)

    assert scale(0) == 0.0


def test_intensity_range() -> None:
    intensity = build_color_intensity(_traffic(0, 50, 100))

    assert intensity(0) == pytest.approx(0.4)
    assert intensity(50) == pytest.approx(0.75)
    # 0.4 + 0.7 would overshoot
    assert intensity(100) == pytest.approx(1.0)


def test_intensity_zero_max_is_baseline() -> None:
    intensity = build_color_intensity(_traffic(0, 0))

    assert intensity(0) == INTENSITY_MIN
    assert intensity(5) == INTENSITY_MIN


def test_intensity_color_is_hex() -> None:
    intensity = build_color_intensity(_traffic(10))

    low = intensity.color(0)
    high = intensity.color(10)

    assert low.startswith("#")
    assert high.startswith("#")
    assert low != high
