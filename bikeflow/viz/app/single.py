# bikeflow/viz/app/single.py
from __future__ import annotations

from pathlib import Path

from flask import Flask, jsonify, request

from bikeflow.traffic.session import TrafficSession
from bikeflow.traffic.time_of_day import MINUTES_PER_DAY, format_time
from bikeflow.traffic.window import NO_FILTER
from bikeflow.util.bike_lanes import load_bike_lanes
from bikeflow.viz.maps.render import render_message_document, render_traffic_document

_LIB_ROOT = Path(__file__).resolve().parents[2]
DEFAULT_STATIONS_FILE = _LIB_ROOT / "bluebikes-stations.json"
DEFAULT_TRIPS_FILE = _LIB_ROOT / "bluebikes-traffic-2024-03.csv"

NOT_LOADED_MESSAGE = "Station and trip data are not loaded yet."


def resolve_time_filter(raw) -> int:
    """
    Query value -> time filter. Anything unparseable means "any time";
    numbers are clamped into [-1, 1439].
    """
    if raw is None or raw == "":
        return NO_FILTER
    try:
        t = int(float(raw))
    except (TypeError, ValueError, OverflowError):
        return NO_FILTER
    return max(NO_FILTER, min(t, MINUTES_PER_DAY - 1))


def create_app(
    session: TrafficSession,
    *,
    title: str | None = "Bike Traffic by Time of Day",
    bike_lanes=None,
):
    app = Flask(__name__)

    def _unavailable():
        message = session.error or NOT_LOADED_MESSAGE
        return render_message_document(message, title=title), 503

    @app.route("/")
    def _index():
        if not session.ready:
            return _unavailable()

        t_cur = resolve_time_filter(request.args.get("t"))
        rows = session.station_traffic(t_cur)

        return render_traffic_document(
            rows,
            time_filter=t_cur,
            max_total=session.max_total_traffic,
            title=title,
            bike_lanes=bike_lanes,
        )

    @app.route("/api/traffic")
    def _traffic():
        if not session.ready:
            return jsonify({"error": session.error or NOT_LOADED_MESSAGE}), 503

        t_cur = resolve_time_filter(request.args.get("t"))
        rows = session.station_traffic(t_cur)

        return jsonify({
            "time_filter": t_cur,
            "label": None if t_cur == NO_FILTER else format_time(t_cur),
            "stations": [
                {
                    "short_name": r.short_name,
                    "lat": r.station.lat,
                    "lon": r.station.lon,
                    "departures": r.departures,
                    "arrivals": r.arrivals,
                    "totalTraffic": r.total_traffic,
                }
                for r in rows
            ],
        })

    return app


def serve_traffic_map(
    *,
    stations_file: str | Path = DEFAULT_STATIONS_FILE,
    trips_csv: str | Path = DEFAULT_TRIPS_FILE,
    host: str = "127.0.0.1",
    port: int = 8080,
    debug: bool = False,
    title: str | None = "Bike Traffic by Time of Day",
    id_field: str = "short_name",
    bike_lanes_files=(),
):
    """
    Load once, then serve. A failed load still serves, showing the error.
    """
    session = TrafficSession()
    try:
        session.load(stations_file, trips_csv, id_field=id_field)
    except (OSError, ValueError, KeyError):
        # session.error carries the message to the page
        pass

    bike_lanes = load_bike_lanes(bike_lanes_files)

    app = create_app(session, title=title, bike_lanes=bike_lanes)
    app.run(host=host, port=int(port), debug=bool(debug))
