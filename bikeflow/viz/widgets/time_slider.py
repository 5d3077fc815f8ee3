# bikeflow/viz/widgets/time_slider.py
import folium

from bikeflow.traffic.time_of_day import MINUTES_PER_DAY, format_time
from bikeflow.traffic.window import NO_FILTER

ANY_TIME_LABEL = "(any time)"


def build_time_slider(time_filter: int):
    """
    Range input over [-1, 1439]. The label follows the thumb while dragging;
    releasing it reloads the page with ?t=<minute>.
    """
    return folium.Element(
        f"""
<style>
#time-filter {{
  position: absolute;
  top: 12px;
  right: 16px;
  z-index: 1300;
  background: rgba(255,255,255,0.95);
  padding: 8px 12px;
  border-radius: 10px;
  font-size: 12px;
  font-family: sans-serif;
  box-shadow: 0 1px 4px rgba(0,0,0,0.2);
}}

#time-filter label {{
  display: flex;
  gap: 8px;
  align-items: baseline;
}}

#time-slider {{
  width: 240px;
}}

#selected-time {{
  display: block;
  font-weight: 600;
}}

#any-time {{
  display: block;
  color: #666;
  font-style: italic;
}}
</style>

<div id="time-filter">
  <label>
    Filter by time:
    <input id="time-slider" type="range" min="{NO_FILTER}" max="{MINUTES_PER_DAY - 1}"
           value="{int(time_filter)}">
  </label>
  <time id="selected-time">{'' if time_filter == NO_FILTER else format_time(time_filter)}</time>
  <em id="any-time" style="display:{'block' if time_filter == NO_FILTER else 'none'};">{ANY_TIME_LABEL}</em>
</div>

<script>
function formatTime(minutes) {{
  const h = Math.floor(minutes / 60) % 24;
  const m = minutes % 60;
  const h12 = (h % 12) || 12;
  return h12 + ":" + String(m).padStart(2, "0") + (h < 12 ? " AM" : " PM");
}}

function updateTimeDisplay() {{
  const slider = document.getElementById("time-slider");
  const selected = document.getElementById("selected-time");
  const anyTime = document.getElementById("any-time");
  const t = Number(slider.value);

  if (t === -1) {{
    selected.textContent = "";
    anyTime.style.display = "block";
  }} else {{
    selected.textContent = formatTime(t);
    anyTime.style.display = "none";
  }}
}}

function applyTimeFilter() {{
  const url = new URL(window.location.href);
  url.searchParams.set("t", document.getElementById("time-slider").value);
  window.location.href = url.toString();
}}

document.addEventListener("DOMContentLoaded", () => {{
  const slider = document.getElementById("time-slider");
  if (!slider) return;
  slider.addEventListener("input", updateTimeDisplay);
  slider.addEventListener("change", applyTimeFilter);
}});
</script>
"""
    )
