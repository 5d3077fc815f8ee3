# main.py

from bikeflow.traffic.session import TrafficSession
from bikeflow.traffic.time_of_day import format_time
from bikeflow.viz.app.single import create_app


STATIONS = "bluebikes-stations.json"
TRIPS = "bluebikes-traffic-2024-03.csv"

# slider positions to summarize before serving (-1 = any time)
PREVIEW_FILTERS = [-1, 8 * 60, 17 * 60 + 30]


def main():
    session = TrafficSession().load(STATIONS, TRIPS)

    # ---- busiest stations per window ----
    for t in PREVIEW_FILTERS:
        rows = session.station_traffic(t)
        top = sorted(rows, key=lambda r: r.total_traffic, reverse=True)[:5]

        label = "any time" if t == -1 else f"{format_time(t)} ± 1h"
        print(f"\nBusiest stations ({label}):\n")
        for i, r in enumerate(top, 1):
            print(
                f"{i:02d}. "
                f"{r.short_name:>8} | "
                f"{r.total_traffic:5d} trips "
                f"({r.departures} out, {r.arrivals} in)"
            )

    # ---- UI ----
    app = create_app(session, title="Bike Traffic by Time of Day")
    app.run(host="127.0.0.1", port=8080)


if __name__ == "__main__":
    main()
