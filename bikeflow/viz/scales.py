# bikeflow/viz/scales.py
from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Optional, Tuple

# marker radius (px) with and without a time filter
RADIUS_RANGE_ALL: Tuple[float, float] = (0.0, 25.0)
RADIUS_RANGE_FILTERED: Tuple[float, float] = (3.0, 50.0)

FLOW_LEVELS = (0.0, 0.5, 1.0)


@dataclass(frozen=True)
class SqrtScale:
    domain_max: float
    range_lo: float
    range_hi: float

    def __call__(self, value: float) -> float:
        if self.domain_max <= 0:
            return self.range_lo
        t = math.sqrt(max(0.0, float(value)) / self.domain_max)
        return self.range_lo + t * (self.range_hi - self.range_lo)


def radius_scale(max_total: int, filtered: bool) -> SqrtScale:
    """
    The domain stays on the unfiltered maximum, so a one-hour window draws
    smaller circles than the whole day; the filtered range compensates.
    """
    lo, hi = RADIUS_RANGE_FILTERED if filtered else RADIUS_RANGE_ALL
    return SqrtScale(domain_max=float(max_total), range_lo=lo, range_hi=hi)


def station_flow(departure_ratio: Optional[float]) -> Optional[float]:
    """
    Quantize departures/total into thirds of [0, 1]:
      < 1/3 -> 0.0 (mostly arrivals), < 2/3 -> 0.5, else 1.0 (mostly departures)
    """
    if departure_ratio is None:
        return None
    r = min(1.0, max(0.0, float(departure_ratio)))
    i = min(int(r * len(FLOW_LEVELS)), len(FLOW_LEVELS) - 1)
    return FLOW_LEVELS[i]
