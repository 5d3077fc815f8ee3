# bikeflow/viz/widgets/legend.py
import folium

from bikeflow.viz.overlays.stations import (
    ARRIVALS_COLOR,
    BALANCED_COLOR,
    DEPARTURES_COLOR,
)


def build_legend_widget():
    """
    Floating legend for the departure/arrival color split.
    """
    return folium.Element(
        f"""
<style>
#map-legend {{
  position: absolute;
  bottom: 24px;
  left: 16px;
  background: rgba(255,255,255,0.95);
  padding: 8px 12px;
  border-radius: 10px;
  font-size: 12px;
  font-family: sans-serif;
  z-index: 1200;
}}
</style>

<div id="map-legend">
  <div><b>Legend:</b></div>
  <div><span style="color:{DEPARTURES_COLOR}">●</span> more departures</div>
  <div><span style="color:{BALANCED_COLOR}">●</span> balanced</div>
  <div><span style="color:{ARRIVALS_COLOR}">●</span> more arrivals</div>
</div>
"""
    )
