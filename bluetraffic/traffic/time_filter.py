# bluetraffic/traffic/time_filter.py
from __future__ import annotations

import pandas as pd

NO_FILTER = -1
MINUTES_PER_DAY = 1440

# +/- band around the selected minute, inclusive
WINDOW_MINUTES = 60


def validate_time_filter(time_filter: int) -> int:
    t = int(time_filter)
    if t != NO_FILTER and not (0 <= t < MINUTES_PER_DAY):
        raise ValueError(f"time filter must be -1 or in [0, 1439], got {time_filter}")
    return t


def minutes_since_midnight(ts) -> int:
    return ts.hour * 60 + ts.minute


def minutes_since_midnight_series(times: pd.Series) -> pd.Series:
    return times.dt.hour * 60 + times.dt.minute


def filter_trips_by_time(trips: pd.DataFrame, time_filter: int) -> pd.DataFrame:
    """
    Keep trips that started OR ended within WINDOW_MINUTES of time_filter.

    - NO_FILTER returns the same frame object.
    - Only time of day is compared; the date and seconds are ignored.
    - The window does not wrap past midnight: with time_filter=10 a trip
      at 23:50 (minute 1430) is NOT matched.
    """
    t = validate_time_filter(time_filter)
    if t == NO_FILTER:
        return trips

    started = minutes_since_midnight_series(trips["started_at"])
    ended = minutes_since_midnight_series(trips["ended_at"])

    keep = ((started - t).abs() <= WINDOW_MINUTES) | ((ended - t).abs() <= WINDOW_MINUTES)
    return trips[keep]
