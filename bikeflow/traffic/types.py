# bikeflow/traffic/types.py
from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from bikeflow.traffic.time_of_day import minutes_since_midnight


@dataclass(frozen=True)
class Trip:
    started_at: datetime
    ended_at: datetime
    start_station_id: str
    end_station_id: str

    @property
    def start_minute(self) -> int:
        return minutes_since_midnight(self.started_at)

    @property
    def end_minute(self) -> int:
        return minutes_since_midnight(self.ended_at)


@dataclass(frozen=True)
class Station:
    """
    short_name is the id trips refer to (start/end_station_id).
    lat/lon are None when the source coordinates were missing or non-finite.
    """
    short_name: str
    name: str = ""
    lat: Optional[float] = None
    lon: Optional[float] = None
    capacity: Optional[int] = None

    @property
    def locatable(self) -> bool:
        return self.lat is not None and self.lon is not None


@dataclass(frozen=True)
class StationTraffic:
    station: Station
    departures: int = 0
    arrivals: int = 0

    @property
    def short_name(self) -> str:
        return self.station.short_name

    @property
    def total_traffic(self) -> int:
        return self.departures + self.arrivals

    @property
    def departure_ratio(self) -> Optional[float]:
        total = self.total_traffic
        if total == 0:
            return None
        return self.departures / total
