# main.py

import sys

from colorama import Fore, Style

from bluetraffic.config import load_config
from bluetraffic.data.stations import load_stations
from bluetraffic.data.trips import load_trips
from bluetraffic.traffic.aggregate import compute_station_traffic
from bluetraffic.traffic.labels import time_label
from bluetraffic.traffic.time_filter import NO_FILTER, filter_trips_by_time


TOP_N = 10


def main():
    config = load_config()
    time_filter = int(sys.argv[1]) if len(sys.argv) > 1 else NO_FILTER

    stations = load_stations(config.stations_json)
    trips = load_trips(config.trips_csv)

    # ---- traffic for the selected time ----
    filtered = filter_trips_by_time(trips, time_filter)
    traffic = compute_station_traffic(stations, filtered)

    names = {s.short_name: s.name for s in stations}
    busiest = sorted(traffic.values(), key=lambda st: st.total_traffic, reverse=True)

    print(
        f"\n{Fore.MAGENTA}Busiest stations {time_label(time_filter)} "
        f"({len(filtered):,} trips):{Style.RESET_ALL}\n"
    )
    for i, st in enumerate(busiest[:TOP_N], 1):
        print(
            f"{i:02d}. "
            f"{st.short_name:>7} | "
            f"{st.total_traffic:5d} trips "
            f"({st.departures} out, {st.arrivals} in) "
            f"{names.get(st.short_name, '')}"
        )


if __name__ == "__main__":
    main()
