# bikeflow/util/trips.py
from __future__ import annotations

from pathlib import Path
from typing import Dict, List

import pandas as pd
from colorama import Fore, Style
from tqdm import tqdm

from bikeflow.traffic.types import Trip

# logical column -> accepted headers (Bluebikes first, then Bike Share Toronto)
COLUMN_ALIASES: Dict[str, tuple] = {
    "started_at": ("started_at", "Start Time"),
    "ended_at": ("ended_at", "End Time"),
    "start_station_id": ("start_station_id", "Start Station Id"),
    "end_station_id": ("end_station_id", "End Station Id"),
}


def _resolve_columns(columns) -> Dict[str, str]:
    # headers in the wild carry stray spaces
    colmap = {str(c).strip(): c for c in columns}

    resolved = {}
    for logical, aliases in COLUMN_ALIASES.items():
        for alias in aliases:
            if alias in colmap:
                resolved[logical] = colmap[alias]
                break
        else:
            raise ValueError(
                f"Trips CSV missing a '{logical}' column (accepted: {', '.join(aliases)})"
            )
    return resolved


def load_trips(trips_csv: str | Path, *, progress: bool = True) -> List[Trip]:
    """
    Load a trip CSV into Trip records.

    Rows whose start/end time does not parse, or that lack a station id, are
    dropped here so they never reach the bucket index.
    """
    print(f"{Fore.CYAN}Loading trips from {trips_csv}…{Style.RESET_ALL}")

    df = pd.read_csv(trips_csv, dtype=str, keep_default_na=False)
    cols = _resolve_columns(df.columns)

    out = pd.DataFrame()
    out["started_at"] = pd.to_datetime(df[cols["started_at"]], format="mixed", errors="coerce")
    out["ended_at"] = pd.to_datetime(df[cols["ended_at"]], format="mixed", errors="coerce")
    out["start_station_id"] = df[cols["start_station_id"]].str.strip()
    out["end_station_id"] = df[cols["end_station_id"]].str.strip()

    bad = (
        out["started_at"].isna()
        | out["ended_at"].isna()
        | (out["start_station_id"] == "")
        | (out["end_station_id"] == "")
    )
    dropped = int(bad.sum())
    if dropped:
        print(f"{Fore.YELLOW}Dropped {dropped} malformed trip rows{Style.RESET_ALL}")
    out = out[~bad]

    trips = []
    rows = out.itertuples(index=False)
    for row in tqdm(rows, total=len(out), desc="Reading trips", disable=not progress):
        trips.append(Trip(
            started_at=row.started_at.to_pydatetime(),
            ended_at=row.ended_at.to_pydatetime(),
            start_station_id=row.start_station_id,
            end_station_id=row.end_station_id,
        ))

    return trips
