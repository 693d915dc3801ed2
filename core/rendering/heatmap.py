"""
Heatmap sidebar markup.
"""

from __future__ import annotations

from core.services.heatmap import HeatmapCell

LEVEL_COLORS = ("#ebedf0", "#c6e48b", "#7bc96f", "#239a3b", "#196127")


def render_heatmap_cell(cell: HeatmapCell) -> str:
    return (
        f'<div class="heatmap-cell" data-level="{cell.level}" data-date="{cell.date}" '
        f'data-count="{cell.count}" title="{cell.date}: {cell.count} 条备忘录"></div>'
    )


def render_heatmap(cells: list[HeatmapCell], *, days: int = 30) -> str:
    legend = "".join(
        f'<div class="heatmap-legend-item" style="background: {color};"></div>' for color in LEVEL_COLORS
    )
    grid = "".join(render_heatmap_cell(cell) for cell in cells)
    return f"""
    <div class="heatmap-container">
        <h3 class="heatmap-title">📊 最近{days}天动态</h3>
        <div id="heatmapGrid" class="heatmap-grid">{grid}</div>
        <div class="heatmap-legend">{legend}</div>
    </div>"""


HEATMAP_TOOLTIP_HTML = '<div id="heatmapTooltip" class="heatmap-tooltip"></div>'
