import os
from datetime import date, datetime, timezone

os.environ.setdefault("DB_BACKEND", "sqlite")

from core.models import RowStatus, Visibility
from core.rendering.heatmap import render_heatmap
from core.services.heatmap import (
    build_heatmap_cells,
    heatmap_level,
    memo_heatmap_counts,
    window_dates,
)


def _ts(year, month, day, hour=12):
    return int(datetime(year, month, day, hour, tzinfo=timezone.utc).timestamp())


def test_example_counts_map_to_levels():
    cells = build_heatmap_cells({"2024-01-01": 4, "2024-01-02": 2}, today=date(2024, 1, 2))
    by_date = {cell.date: cell for cell in cells}

    assert by_date["2024-01-01"].level == 4
    assert by_date["2024-01-02"].level == 2
    assert by_date["2023-12-31"].level == 0
    assert by_date["2023-12-31"].count == 0


def test_window_is_thirty_days_ending_today():
    cells = build_heatmap_cells({}, today=date(2024, 3, 1))

    assert len(cells) == 30
    assert cells[0].date == "2024-02-01"
    assert cells[-1].date == "2024-03-01"
    assert all(cell.level == 0 for cell in cells)


def test_level_buckets():
    assert heatmap_level(0, 10) == 0
    assert heatmap_level(1, 10) == 1
    assert heatmap_level(3, 10) == 2
    assert heatmap_level(6, 10) == 3
    assert heatmap_level(10, 10) == 4
    assert heatmap_level(1, 0) == 4


def test_max_count_includes_days_outside_window():
    cells = build_heatmap_cells({"2024-01-02": 2, "2023-06-01": 8}, today=date(2024, 1, 2))
    assert cells[-1].level == 1


def test_window_dates_custom_length():
    days = window_dates(date(2024, 1, 10), days=3)
    assert days == [date(2024, 1, 8), date(2024, 1, 9), date(2024, 1, 10)]


def test_render_heatmap_cells_and_legend():
    cells = build_heatmap_cells({"2024-01-02": 3}, today=date(2024, 1, 2))
    html = render_heatmap(cells)

    assert 'id="heatmapGrid"' in html
    assert html.count('class="heatmap-cell"') == 30
    assert 'data-level="4" data-date="2024-01-02" data-count="3"' in html
    assert html.count('class="heatmap-legend-item"') == 5
    assert "最近30天动态" in html


def test_memo_heatmap_counts_public_normal_only(seed):
    user = seed.user()
    seed.memo(user, created_ts=_ts(2024, 1, 2, 8))
    seed.memo(user, created_ts=_ts(2024, 1, 2, 20))
    seed.memo(user, created_ts=_ts(2024, 1, 1))
    seed.memo(user, created_ts=_ts(2024, 1, 1), visibility=Visibility.PRIVATE.value)
    seed.memo(user, created_ts=_ts(2024, 1, 1), row_status=RowStatus.ARCHIVED.value)
    seed.memo(user, created_ts=_ts(2023, 11, 1))

    counts = memo_heatmap_counts(seed.session, today=date(2024, 1, 2))

    assert counts == {"2024-01-02": 2, "2024-01-01": 1}
