# bikeflow/traffic/bucket_index.py
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator, List, Tuple

from bikeflow.traffic.time_of_day import MINUTES_PER_DAY
from bikeflow.traffic.types import Trip
from bikeflow.traffic.window import Selection

Buckets = Tuple[Tuple[Trip, ...], ...]


def _check_minute(minute: int, what: str) -> int:
    if not (0 <= minute < MINUTES_PER_DAY):
        raise ValueError(f"{what} minute out of range: {minute}")
    return minute


@dataclass(frozen=True)
class BucketIndex:
    """
    One bucket per minute of the day, for departures (keyed by start minute)
    and arrivals (keyed by end minute). Built once from the full trip set and
    read-only afterwards.
    """
    departures_by_minute: Buckets
    arrivals_by_minute: Buckets

    @classmethod
    def build(cls, trips: Iterable[Trip]) -> "BucketIndex":
        departures: List[List[Trip]] = [[] for _ in range(MINUTES_PER_DAY)]
        arrivals: List[List[Trip]] = [[] for _ in range(MINUTES_PER_DAY)]

        for trip in trips:
            departures[_check_minute(trip.start_minute, "start")].append(trip)
            arrivals[_check_minute(trip.end_minute, "end")].append(trip)

        return cls(
            departures_by_minute=tuple(tuple(b) for b in departures),
            arrivals_by_minute=tuple(tuple(b) for b in arrivals),
        )

    @property
    def trip_count(self) -> int:
        return sum(len(b) for b in self.departures_by_minute)

    def departures_in(self, selection: Selection) -> Iterator[Trip]:
        return _trips_in(self.departures_by_minute, selection)

    def arrivals_in(self, selection: Selection) -> Iterator[Trip]:
        return _trips_in(self.arrivals_by_minute, selection)


def _trips_in(buckets: Buckets, selection: Selection) -> Iterator[Trip]:
    for start, stop in selection.ranges():
        for bucket in buckets[start:stop]:
            yield from bucket
