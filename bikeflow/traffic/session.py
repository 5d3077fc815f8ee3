# bikeflow/traffic/session.py
from __future__ import annotations

from pathlib import Path
from typing import Iterable, List, Optional

from colorama import Fore, Style

from bikeflow.traffic.aggregate import compute_station_traffic
from bikeflow.traffic.bucket_index import BucketIndex
from bikeflow.traffic.types import Station, StationTraffic, Trip
from bikeflow.traffic.window import NO_FILTER
from bikeflow.util.stations import load_stations
from bikeflow.util.trips import load_trips


class TrafficSession:
    """
    Owns the stations and the bucket index for one data load.

    Until a load succeeds the session is not ready and station_traffic()
    returns None. A failed load leaves the message in .error and is not
    retried.
    """

    def __init__(self):
        self.stations: Optional[List[Station]] = None
        self.index: Optional[BucketIndex] = None
        self.max_total_traffic: int = 0
        self.error: Optional[str] = None

    @property
    def ready(self) -> bool:
        return self.stations is not None and self.index is not None

    def load(
        self,
        stations_file: str | Path,
        trips_csv: str | Path,
        *,
        id_field: str = "short_name",
        progress: bool = True,
    ) -> "TrafficSession":
        if self.ready:
            raise ValueError("session already loaded")

        try:
            print(f"{Fore.CYAN}Loading station registry…{Style.RESET_ALL}")
            stations = load_stations(stations_file, id_field=id_field)
            trips = load_trips(trips_csv, progress=progress)
            return self.load_records(stations, trips)
        except Exception as exc:
            self.error = f"Error loading stations or trips: {exc}"
            print(f"{Fore.RED}{self.error}{Style.RESET_ALL}")
            raise

    def load_records(
        self,
        stations: Iterable[Station],
        trips: Iterable[Trip],
    ) -> "TrafficSession":
        if self.ready:
            raise ValueError("session already loaded")

        stations = list(stations)

        print(f"{Fore.CYAN}Bucketing trips by minute of day…{Style.RESET_ALL}")
        index = BucketIndex.build(trips)

        baseline = compute_station_traffic(stations, index, NO_FILTER)
        self.max_total_traffic = max((r.total_traffic for r in baseline), default=0)

        # publish only once everything is built
        self.index = index
        self.stations = stations
        self.error = None

        print(
            f"{Fore.GREEN}Loaded {len(stations)} stations, "
            f"{index.trip_count} trips.{Style.RESET_ALL}"
        )
        return self

    def station_traffic(self, time_filter: int = NO_FILTER) -> Optional[List[StationTraffic]]:
        if not self.ready:
            return None
        return compute_station_traffic(self.stations, self.index, time_filter)
