"""
Memo activity heatmap: per-day counts and intensity levels.
"""

from __future__ import annotations

from collections import Counter
from dataclasses import dataclass
from datetime import date, datetime, time, timedelta
from typing import Mapping, Optional
from zoneinfo import ZoneInfo

from core.models import Memo, RowStatus, Visibility

MAX_LEVEL = 4


@dataclass(frozen=True)
class HeatmapCell:
    date: str
    count: int
    level: int


def heatmap_level(count: int, max_count: int) -> int:
    """Bucket a day's count into 0..4; 0 is reserved for empty days."""
    if count <= 0:
        return 0
    max_count = max(max_count, 1)
    # integer ceil(count / max_count * 4)
    return min(MAX_LEVEL, -(-count * MAX_LEVEL // max_count))


def window_dates(today: date, days: int = 30) -> list[date]:
    return [today - timedelta(days=offset) for offset in range(days - 1, -1, -1)]


def build_heatmap_cells(
    counts: Mapping[str, int],
    today: date,
    days: int = 30,
) -> list[HeatmapCell]:
    """Lay out one cell per day from today-(days-1) through today."""
    max_count = max([*counts.values(), 1])
    cells = []
    for day in window_dates(today, days):
        key = day.isoformat()
        count = int(counts.get(key, 0) or 0)
        cells.append(HeatmapCell(date=key, count=count, level=heatmap_level(count, max_count)))
    return cells


def memo_heatmap_counts(
    db,
    today: date,
    days: int = 30,
    tz: Optional[ZoneInfo] = None,
) -> dict[str, int]:
    """Count public memos per local creation date inside the window."""
    tz = tz or ZoneInfo("UTC")
    start_day = today - timedelta(days=days - 1)
    start_ts = int(datetime.combine(start_day, time.min, tzinfo=tz).timestamp())
    end_ts = int(datetime.combine(today + timedelta(days=1), time.min, tzinfo=tz).timestamp())

    rows = (
        db.query(Memo.created_ts)
        .filter(Memo.row_status == RowStatus.NORMAL.value)
        .filter(Memo.visibility == Visibility.PUBLIC.value)
        .filter(Memo.created_ts >= start_ts)
        .filter(Memo.created_ts < end_ts)
        .all()
    )
    counts: Counter = Counter()
    for (created_ts,) in rows:
        counts[datetime.fromtimestamp(created_ts, tz=tz).date().isoformat()] += 1
    return dict(counts)


__all__ = [
    "HeatmapCell",
    "heatmap_level",
    "window_dates",
    "build_heatmap_cells",
    "memo_heatmap_counts",
]
