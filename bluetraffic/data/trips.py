# bluetraffic/data/trips.py
from __future__ import annotations

from dataclasses import asdict, dataclass
from datetime import datetime
from pathlib import Path
from typing import Iterable

import pandas as pd
from colorama import Fore, Style


TRIP_COLUMNS = ["start_station_id", "end_station_id", "started_at", "ended_at"]


@dataclass(frozen=True)
class Trip:
    start_station_id: str
    end_station_id: str
    started_at: datetime
    ended_at: datetime


def _normalize(df: pd.DataFrame) -> pd.DataFrame:
    """
    Coerce ids to str and timestamps to datetime. Rows whose timestamps
    do not parse are dropped, whichever constructor built the frame.
    """
    out = pd.DataFrame()
    out["start_station_id"] = df["start_station_id"].astype(str).str.strip()
    out["end_station_id"] = df["end_station_id"].astype(str).str.strip()
    out["started_at"] = pd.to_datetime(df["started_at"], errors="coerce", format="mixed")
    out["ended_at"] = pd.to_datetime(df["ended_at"], errors="coerce", format="mixed")

    bad = out["started_at"].isna() | out["ended_at"].isna()
    if bad.any():
        print(
            f"{Fore.YELLOW}Dropping {int(bad.sum())} trips with unparseable timestamps{Style.RESET_ALL}"
        )
        out = out[~bad]

    return out.reset_index(drop=True)


def trips_frame(trips: Iterable[Trip | dict]) -> pd.DataFrame:
    """
    Build the trip store frame from Trip records (or dicts with the same keys).

    Row order follows the input order.
    """
    rows = [asdict(t) if isinstance(t, Trip) else dict(t) for t in trips]
    df = pd.DataFrame(rows, columns=TRIP_COLUMNS)
    return _normalize(df)


def load_trips(trips_csv: str | Path) -> pd.DataFrame:
    """
    Loads a Bluebikes trips CSV with columns like:

      ride_id, rideable_type, started_at, ended_at,
      start_station_id, end_station_id, is_member, ...

    Returns the trip store frame:
      - start_station_id (str)
      - end_station_id (str)
      - started_at (datetime)
      - ended_at (datetime)

    Rows whose timestamps do not parse are dropped.
    """
    trips_csv = Path(trips_csv)
    if not trips_csv.exists():
        raise ValueError(f"Trips CSV not found: {trips_csv}")

    print(f"{Fore.CYAN}Reading trips from {trips_csv}…{Style.RESET_ALL}")
    df = pd.read_csv(
        trips_csv,
        dtype={"start_station_id": str, "end_station_id": str},
    )
    df.columns = [c.strip() for c in df.columns]

    missing = [c for c in TRIP_COLUMNS if c not in df.columns]
    if missing:
        raise ValueError(f"Trips CSV missing columns: {', '.join(missing)}")

    out = _normalize(df[TRIP_COLUMNS])

    print(f"{Fore.GREEN}Loaded {len(out):,} trips.{Style.RESET_ALL}")
    return out
