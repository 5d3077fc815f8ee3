# bikeflow/traffic/time_of_day.py
from __future__ import annotations

from datetime import datetime

MINUTES_PER_DAY = 1440


def minutes_since_midnight(ts: datetime) -> int:
    """
    Wall-clock minute of day in [0, 1440). Seconds are dropped, date and
    tzinfo are ignored.
    """
    return ts.hour * 60 + ts.minute


def format_time(minutes: int) -> str:
    """
    Slider label, en-US short style:
      0    -> "12:00 AM"
      605  -> "10:05 AM"
      1439 -> "11:59 PM"
    """
    m = int(minutes) % MINUTES_PER_DAY
    hour, minute = divmod(m, 60)
    suffix = "AM" if hour < 12 else "PM"
    hour12 = hour % 12 or 12
    return f"{hour12}:{minute:02d} {suffix}"
