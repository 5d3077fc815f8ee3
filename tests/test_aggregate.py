from __future__ import annotations

import random
from datetime import datetime, timedelta

import pytest

from bikeflow.traffic.aggregate import aggregate, compute_station_traffic
from bikeflow.traffic.bucket_index import BucketIndex
from bikeflow.traffic.types import Station, Trip

STATION_IDS = [f"S{i}" for i in range(8)]


def _stations() -> list[Station]:
    # S8 never sees a trip
    return [Station(short_name=sid) for sid in STATION_IDS + ["S8"]]


def _random_trips(n: int = 400, seed: int = 7) -> list[Trip]:
    rng = random.Random(seed)
    day = datetime(2024, 3, 1)
    trips = []
    for _ in range(n):
        start = day + timedelta(seconds=rng.randrange(86400))
        end = start + timedelta(minutes=rng.randrange(0, 240))
        trips.append(Trip(start, end, rng.choice(STATION_IDS), rng.choice(STATION_IDS)))
    return trips


def _in_window(minute: int, center: int) -> bool:
    # 60 minutes before center (inclusive) to 60 after (exclusive), mod 1440
    return (minute - center + 60) % 1440 < 120


def _brute_force(trips, center):
    dep: dict[str, int] = {}
    arr: dict[str, int] = {}
    for t in trips:
        if center == -1 or _in_window(t.start_minute, center):
            dep[t.start_station_id] = dep.get(t.start_station_id, 0) + 1
        if center == -1 or _in_window(t.end_minute, center):
            arr[t.end_station_id] = arr.get(t.end_station_id, 0) + 1
    return dep, arr


def test_midnight_window_includes_both_sides(midnight_trips, stations_ab):
    rows = compute_station_traffic(stations_ab, BucketIndex.build(midnight_trips), 0)
    by_id = {r.short_name: r for r in rows}

    assert (by_id["A"].departures, by_id["A"].arrivals) == (1, 1)
    assert (by_id["B"].departures, by_id["B"].arrivals) == (1, 1)
    assert by_id["A"].total_traffic == 2


def test_no_filter_counts_everything(midnight_trips, stations_ab):
    index = BucketIndex.build(midnight_trips)
    filtered = compute_station_traffic(stations_ab, index, 0)
    unfiltered = compute_station_traffic(stations_ab, index, -1)
    assert unfiltered == filtered


def test_trip_outside_window_is_excluded(make_trip, stations_ab):
    index = BucketIndex.build([make_trip("06:00", "06:00", "A", "B")])
    rows = compute_station_traffic(stations_ab, index, 720)
    assert [(r.departures, r.arrivals) for r in rows] == [(0, 0), (0, 0)]

    rows = compute_station_traffic(stations_ab, index, 6 * 60)
    assert [(r.departures, r.arrivals) for r in rows] == [(1, 0), (0, 1)]


def test_window_end_is_exclusive(make_trip, stations_ab):
    index = BucketIndex.build([
        make_trip("11:00", "11:05", "A", "B"),
        make_trip("13:00", "13:05", "A", "B"),
    ])
    counts = aggregate(index, 720)
    assert counts.departures == {"A": 1}
    assert counts.arrivals == {"B": 1}


def test_unfiltered_matches_brute_force():
    trips = _random_trips()
    counts = aggregate(BucketIndex.build(trips), -1)
    dep, arr = _brute_force(trips, -1)
    assert counts.departures == dep
    assert counts.arrivals == arr


def test_every_center_matches_brute_force():
    trips = _random_trips()
    index = BucketIndex.build(trips)
    stations = _stations()

    for center in list(range(0, 1440, 13)) + [0, 59, 60, 1379, 1380, 1439]:
        dep, arr = _brute_force(trips, center)
        rows = compute_station_traffic(stations, index, center)
        for r in rows:
            assert r.departures == dep.get(r.short_name, 0), center
            assert r.arrivals == arr.get(r.short_name, 0), center

        assert sum(r.departures for r in rows) == sum(
            1 for t in trips if _in_window(t.start_minute, center)
        )
        assert sum(r.arrivals for r in rows) == sum(
            1 for t in trips if _in_window(t.end_minute, center)
        )


def test_output_keeps_station_order_and_zero_rows():
    trips = _random_trips(50)
    stations = list(reversed(_stations()))
    rows = compute_station_traffic(stations, BucketIndex.build(trips), 300)

    assert [r.station for r in rows] == stations
    quiet = rows[0]
    assert quiet.short_name == "S8"
    assert (quiet.departures, quiet.arrivals, quiet.total_traffic) == (0, 0, 0)
    assert quiet.departure_ratio is None


def test_ids_match_exactly(make_trip):
    index = BucketIndex.build([make_trip("08:00", "08:10", "A32000", "a32000 ")])
    rows = compute_station_traffic(
        [Station(short_name="A32000"), Station(short_name="a32000")], index, -1
    )
    assert [(r.departures, r.arrivals) for r in rows] == [(1, 0), (0, 0)]


def test_aggregation_is_idempotent_and_leaves_stations_alone():
    trips = _random_trips()
    index = BucketIndex.build(trips)
    stations = _stations()
    before = list(stations)

    first = compute_station_traffic(stations, index, 1000)
    second = compute_station_traffic(stations, index, 1000)

    assert first == second
    assert stations == before
    assert index.trip_count == len(trips)


def test_departure_ratio(make_trip):
    index = BucketIndex.build([
        make_trip("08:00", "08:10", "A", "B"),
        make_trip("08:05", "08:20", "A", "B"),
        make_trip("08:30", "08:40", "B", "A"),
    ])
    rows = compute_station_traffic([Station("A"), Station("B")], index, -1)
    assert rows[0].departure_ratio == pytest.approx(2 / 3)
    assert rows[1].departure_ratio == pytest.approx(1 / 3)


def test_counts_record_their_filter(midnight_trips):
    counts = aggregate(BucketIndex.build(midnight_trips), 15)
    assert counts.time_filter == 15
    assert counts.for_station(Station("Z")).total_traffic == 0


def test_invalid_filter_raises(midnight_trips, stations_ab):
    with pytest.raises(ValueError):
        compute_station_traffic(stations_ab, BucketIndex.build(midnight_trips), 1440)
