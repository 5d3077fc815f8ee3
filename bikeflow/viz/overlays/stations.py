# bikeflow/viz/overlays/stations.py
import folium

from bikeflow.viz.scales import station_flow

ARRIVALS_COLOR = "darkorange"
BALANCED_COLOR = "#a87c7f"
DEPARTURES_COLOR = "steelblue"
NO_TRAFFIC_COLOR = "#999999"

FLOW_COLORS = {
    0.0: ARRIVALS_COLOR,
    0.5: BALANCED_COLOR,
    1.0: DEPARTURES_COLOR,
}


def flow_color(row) -> str:
    level = station_flow(row.departure_ratio)
    if level is None:
        return NO_TRAFFIC_COLOR
    return FLOW_COLORS[level]


def traffic_title(row) -> str:
    return f"{row.total_traffic} trips ({row.departures} departures, {row.arrivals} arrivals)"


def add_traffic_markers(m, rows, radius):
    """
    One circle per locatable station.
    rows: list[StationTraffic]
    radius: callable total_traffic -> px
    """
    drawn = 0
    for row in rows:
        s = row.station
        if not s.locatable:
            continue

        popup = [
            f"<b>{s.name or s.short_name}</b>",
            f"Station: {s.short_name}",
            traffic_title(row),
        ]
        if s.capacity is not None:
            popup.insert(2, f"Capacity: {s.capacity}")

        folium.CircleMarker(
            location=[s.lat, s.lon],
            radius=radius(row.total_traffic),
            fill=True,
            fill_color=flow_color(row),
            fill_opacity=0.6,
            color="white",
            weight=1,
            opacity=0.8,
            tooltip=traffic_title(row),
            popup="<br>".join(popup),
        ).add_to(m)
        drawn += 1

    return drawn
