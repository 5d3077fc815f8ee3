# bikeflow/traffic/aggregate.py
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Iterable, List

from bikeflow.traffic.bucket_index import BucketIndex
from bikeflow.traffic.types import Station, StationTraffic
from bikeflow.traffic.window import NO_FILTER, select_range


@dataclass(frozen=True)
class TrafficCounts:
    """
    Per-query counts keyed by station id. Stations with no trips in the
    window are simply absent and read back as zero.
    """
    time_filter: int
    departures: Dict[str, int] = field(default_factory=dict)
    arrivals: Dict[str, int] = field(default_factory=dict)

    def for_station(self, station: Station) -> StationTraffic:
        sid = station.short_name
        return StationTraffic(
            station=station,
            departures=self.departures.get(sid, 0),
            arrivals=self.arrivals.get(sid, 0),
        )


def aggregate(index: BucketIndex, time_filter: int = NO_FILTER) -> TrafficCounts:
    selection = select_range(time_filter)

    departures: Dict[str, int] = {}
    for trip in index.departures_in(selection):
        sid = trip.start_station_id
        departures[sid] = departures.get(sid, 0) + 1

    arrivals: Dict[str, int] = {}
    for trip in index.arrivals_in(selection):
        sid = trip.end_station_id
        arrivals[sid] = arrivals.get(sid, 0) + 1

    return TrafficCounts(
        time_filter=int(time_filter),
        departures=departures,
        arrivals=arrivals,
    )


def compute_station_traffic(
    stations: Iterable[Station],
    index: BucketIndex,
    time_filter: int = NO_FILTER,
) -> List[StationTraffic]:
    """
    Join window counts onto stations. Keeps input order; every station comes
    back, zero counts included.
    """
    counts = aggregate(index, time_filter)
    return [counts.for_station(s) for s in stations]
