# bikeflow/viz/maps/render.py
import folium

from bikeflow.traffic.window import NO_FILTER
from bikeflow.viz.overlays.bike_lanes import add_bike_lanes
from bikeflow.viz.overlays.stations import add_traffic_markers
from bikeflow.viz.scales import radius_scale
from bikeflow.viz.widgets.legend import build_legend_widget
from bikeflow.viz.widgets.time_slider import build_time_slider

# Boston / Cambridge
CENTER_LAT = 42.36027
CENTER_LON = -71.09415


def render_traffic_document(
    rows,
    *,
    time_filter: int = NO_FILTER,
    max_total: int = 0,
    title: str | None = None,
    bike_lanes=None,
):
    """
    Assemble the full Folium map HTML for one time filter.

    rows: list[StationTraffic] for time_filter
    max_total: unfiltered maximum total traffic (radius scale domain)
    bike_lanes: optional list of GeoJSON dicts drawn under the markers
    """
    m = folium.Map(
        location=[CENTER_LAT, CENTER_LON],
        zoom_start=12,
        min_zoom=5,
        max_zoom=18,
        tiles="cartodbpositron",
        prefer_canvas=True,
    )

    if bike_lanes:
        add_bike_lanes(m, bike_lanes)

    radius = radius_scale(max_total, filtered=time_filter != NO_FILTER)
    add_traffic_markers(m, rows, radius)

    m.get_root().html.add_child(build_time_slider(time_filter))
    m.get_root().html.add_child(build_legend_widget())

    if title:
        m.get_root().html.add_child(
            folium.Element(
                f"""
<div id="map-title" style="
  position: absolute;
  top: 12px;
  left: 50%;
  transform: translateX(-50%);
  background: rgba(255,255,255,0.95);
  padding: 6px 16px;
  border-radius: 999px;
  font-size: 14px;
  font-weight: 600;
  font-family: sans-serif;
  z-index: 1300;
">{title}</div>
"""
            )
        )

    return m.get_root().render()


def render_message_document(message: str, *, title: str | None = None):
    """
    Plain page shown instead of the map when no data is available.
    """
    heading = f"<h2>{title}</h2>" if title else ""
    return f"""
<!DOCTYPE html>
<html>
<head><meta charset="utf-8" /><title>{title or 'Bike traffic'}</title></head>
<body style="font-family:sans-serif;padding:24px;">
  {heading}
  <div id="load-error" style="color:#b2182b;font-weight:600;">{message}</div>
</body>
</html>
"""
