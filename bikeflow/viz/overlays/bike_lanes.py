# bikeflow/viz/overlays/bike_lanes.py
import folium

LANE_COLOR = "#32D400"
LANE_WEIGHT = 4
LANE_OPACITY = 0.7


def _lane_style(_feature):
    return {"color": LANE_COLOR, "weight": LANE_WEIGHT, "opacity": LANE_OPACITY}


def add_bike_lanes(m, layers):
    """
    layers: list of GeoJSON dicts, drawn as plain green lines.
    """
    for i, data in enumerate(layers):
        folium.GeoJson(
            data,
            name=f"bike-lanes-{i}",
            style_function=_lane_style,
        ).add_to(m)
