# bikeflow/util/bike_lanes.py
from __future__ import annotations

import json
from pathlib import Path
from typing import Dict, Iterable, List


def load_bike_lanes(paths: Iterable[str | Path]) -> List[Dict]:
    """
    Load bike-lane GeoJSON files (e.g. Boston's existing bike network and
    Cambridge's bike facilities) for drawing under the station markers.
    """
    layers = []
    for path in paths:
        with open(path) as f:
            data = json.load(f)
        if data.get("type") not in ("FeatureCollection", "Feature"):
            raise ValueError(f"{path} is not a GeoJSON FeatureCollection or Feature")
        layers.append(data)
    return layers
