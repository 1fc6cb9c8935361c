# bluetraffic/data/trip_loader.py
from __future__ import annotations

import threading
from typing import Callable

import pandas as pd
from colorama import Fore, Style


class TripLoader:
    """Resolve the trip store once, off the request thread.

    Until the load completes, ``ready`` is False and ``get()`` returns None.
    A failed load is kept as ``error``; it is never retried.
    """

    def __init__(self, load: Callable[[], pd.DataFrame]) -> None:
        self._load = load
        self._trips: pd.DataFrame | None = None
        self._error: str | None = None
        self._lock = threading.Lock()
        self._done = threading.Event()
        self._thread: threading.Thread | None = None

    @classmethod
    def from_frame(cls, trips: pd.DataFrame) -> "TripLoader":
        """Return a loader that is already resolved with ``trips``."""
        loader = cls(lambda: trips)
        loader._finish(trips, None)
        return loader

    @property
    def ready(self) -> bool:
        with self._lock:
            return self._done.is_set() and self._error is None

    @property
    def error(self) -> str | None:
        with self._lock:
            return self._error

    def get(self) -> pd.DataFrame | None:
        """Return the loaded trips, or None while loading or after a failure."""
        with self._lock:
            return self._trips

    def start(self) -> None:
        """Start loading in a daemon thread. Calling twice is a no-op."""
        if self._done.is_set() or (self._thread and self._thread.is_alive()):
            return
        self._thread = threading.Thread(target=self._run, daemon=True)
        self._thread.start()

    def wait(self, timeout: float | None = None) -> bool:
        """Block until loading finishes. Returns True if trips are available."""
        self._done.wait(timeout=timeout)
        return self.ready

    def _run(self) -> None:
        try:
            trips = self._load()
        except Exception as exc:
            print(f"{Fore.RED}Trip load failed: {exc}{Style.RESET_ALL}")
            self._finish(None, str(exc))
            return
        self._finish(trips, None)

    def _finish(self, trips: pd.DataFrame | None, error: str | None) -> None:
        with self._lock:
            self._trips = trips
            self._error = error
        self._done.set()
