from __future__ import annotations

import pytest

from bluetraffic.traffic.labels import ANY_TIME, format_time, time_label


@pytest.mark.parametrize(
    "minutes, expected",
    [
        (0, "12:00 AM"),
        (5, "12:05 AM"),
        (480, "8:00 AM"),
        (720, "12:00 PM"),
        (765, "12:45 PM"),
        (1019, "4:59 PM"),
        (1439, "11:59 PM"),
    ],
)
def test_format_time(minutes: int, expected: str) -> None:
    assert format_time(minutes) == expected


def test_time_label() -> None:
    assert time_label(-1) == ANY_TIME
    assert time_label(600) == "10:00 AM"
