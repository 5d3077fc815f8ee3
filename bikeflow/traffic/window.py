# bikeflow/traffic/window.py
from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Tuple

from bikeflow.traffic.time_of_day import MINUTES_PER_DAY

NO_FILTER = -1
DEFAULT_HALF_WIDTH = 60


@dataclass(frozen=True)
class Selection:
    """
    Bucket selection for one time filter.

      lo/hi None  -> every bucket
      lo <= hi    -> [lo, hi)
      lo > hi     -> [lo, 1440) + [0, hi)   (window straddles midnight)
    """
    lo: Optional[int] = None
    hi: Optional[int] = None

    @property
    def is_all(self) -> bool:
        return self.lo is None

    def ranges(self) -> List[Tuple[int, int]]:
        if self.is_all:
            return [(0, MINUTES_PER_DAY)]
        if self.lo <= self.hi:
            return [(self.lo, self.hi)]
        return [(self.lo, MINUTES_PER_DAY), (0, self.hi)]

    def contains(self, minute: int) -> bool:
        return any(start <= minute < stop for start, stop in self.ranges())


ALL = Selection()


def select_range(center: int, half_width: int = DEFAULT_HALF_WIDTH) -> Selection:
    center = int(center)
    half_width = int(half_width)

    if half_width < 0:
        raise ValueError("half_width must be >= 0")
    if center == NO_FILTER:
        return ALL
    if not (0 <= center < MINUTES_PER_DAY):
        raise ValueError(f"time filter must be -1 or in [0, {MINUTES_PER_DAY - 1}], got {center}")

    # a window this wide already spans the day; the lo/hi split below would
    # overlap and count trips twice
    if 2 * half_width >= MINUTES_PER_DAY:
        return ALL

    lo = (center - half_width + MINUTES_PER_DAY) % MINUTES_PER_DAY
    hi = (center + half_width) % MINUTES_PER_DAY
    return Selection(lo=lo, hi=hi)
