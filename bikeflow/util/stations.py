# bikeflow/util/stations.py
from __future__ import annotations

import json
import math
from pathlib import Path
from typing import Any, List, Optional

from bikeflow.traffic.types import Station


def _coord(value: Any) -> Optional[float]:
    try:
        x = float(value)
    except (TypeError, ValueError):
        return None
    if not math.isfinite(x):
        return None
    return x


def _capacity(value: Any) -> Optional[int]:
    try:
        return int(value)
    except (TypeError, ValueError):
        return None


def load_stations(path: str | Path, id_field: str = "short_name") -> List[Station]:
    """
    Load stations from a GBFS station_information.json.

    id_field picks which key trips refer to:
      - Bluebikes: "short_name"
      - Bike Share Toronto: "station_id"
    """
    with open(path) as f:
        raw = json.load(f)["data"]["stations"]

    stations = []
    for s in raw:
        sid = s.get(id_field)
        if sid is None or str(sid).strip() == "":
            continue

        lat = _coord(s.get("lat"))
        lon = _coord(s.get("lon"))
        if lat is None or lon is None:
            lat = lon = None

        stations.append(Station(
            short_name=str(sid).strip(),
            name=str(s.get("name", "")),
            lat=lat,
            lon=lon,
            capacity=_capacity(s.get("capacity")),
        ))

    return stations
