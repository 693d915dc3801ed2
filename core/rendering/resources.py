"""
Resource (attachment) layout helpers shared by every feed.
"""

from __future__ import annotations

from html import escape
from typing import Iterable, Optional

from core.records import ResourceView

# image count -> grid columns; anything else falls back to DEFAULT_GRID_COLUMNS
GRID_COLUMNS_BY_COUNT = {1: 1, 2: 2, 3: 3, 4: 2}
DEFAULT_GRID_COLUMNS = 3


def normalize_resource_url(resource_id: int, filepath: Optional[str]) -> str:
    """Absolute URLs and API paths pass through; storage keys go through the file proxy."""
    if filepath and (filepath.startswith("http") or filepath.startswith("/api/")):
        return filepath
    return f"/api/v1/resource/{resource_id}/file"


def split_resources(resources: Optional[Iterable[ResourceView]]) -> tuple[list[ResourceView], list[ResourceView]]:
    images: list[ResourceView] = []
    others: list[ResourceView] = []
    for resource in resources or ():
        (images if resource.is_image else others).append(resource)
    return images, others


def grid_columns(image_count: int) -> int:
    return GRID_COLUMNS_BY_COUNT.get(image_count, DEFAULT_GRID_COLUMNS)


def format_size_kb(size: Optional[int]) -> str:
    if not size:
        return ""
    return f"{size / 1024:.1f} KB"


def _js_string(value: str) -> str:
    """Quote a value for a single-quoted JS string inside an HTML attribute."""
    return escape(value.replace("\\", "\\\\").replace("'", "\\'"), quote=True)


def render_image_grid(images: list[ResourceView], *, extra_style: str = "") -> str:
    if not images:
        return ""
    columns = grid_columns(len(images))
    cells = "".join(
        '<div class="image-item" style="width: 100%; padding-bottom: 100%; position: relative; '
        'overflow: hidden; border-radius: 8px; border: 1px solid var(--border-color); cursor: pointer;" '
        f"onclick=\"openImageModal('{_js_string(image.filepath)}')\">"
        f'<img src="{escape(image.filepath)}" alt="{escape(image.filename)}" loading="lazy" '
        'style="position: absolute; top: 0; left: 0; width: 100%; height: 100%; object-fit: cover;">'
        "</div>"
        for image in images
    )
    return (
        f'<div class="image-grid" data-columns="{columns}" style="display: grid; '
        f"grid-template-columns: repeat({columns}, 1fr); max-width: 100%; gap: 10px; margin-top: 16px;{extra_style}\">"
        f"{cells}</div>"
    )


def render_attachment_links(others: list[ResourceView]) -> str:
    if not others:
        return ""
    links = "".join(
        f'<a href="{escape(resource.filepath)}" class="memo-resource" target="_blank" rel="noopener noreferrer" '
        'style="display: inline-block; margin-right: 12px; margin-bottom: 8px; padding: 6px 12px; '
        'border: 1px solid var(--border-color); border-radius: 4px; text-decoration: none; color: var(--foreground-color);">'
        f"📎 {escape(resource.filename)}</a>"
        for resource in others
    )
    return f'<div class="memo-resources" style="margin-top: 16px;">{links}</div>'


def render_attachment_panel(others: list[ResourceView]) -> str:
    """Detail-page attachment block: labelled, with file sizes."""
    if not others:
        return ""
    links = []
    for resource in others:
        size = format_size_kb(resource.size)
        size_html = f' <span style="opacity: 0.7;">({size})</span>' if size else ""
        links.append(
            f'<a href="{escape(resource.filepath)}" class="memo-resource" target="_blank" rel="noopener noreferrer" '
            'style="display: inline-flex; align-items: center; gap: 6px; padding: 6px 12px; '
            'border: 1px solid var(--border-color); border-radius: var(--box-border-radius); text-decoration: none; '
            'color: var(--foreground-color); background: var(--code-background-color); font-size: 14px;">'
            f"📄 {escape(resource.filename)}{size_html}</a>"
        )
    return (
        '<div class="memo-attachments" style="border-left: 2px solid var(--border-color); '
        'padding: 20px 0 0 30px; margin-left: 3px; margin-top: 16px;">'
        '<strong style="color: var(--secondary-color); font-size: 14px; display: block; margin-bottom: 12px;">📎 附件:</strong>'
        f'<div style="display: flex; flex-wrap: wrap; gap: 10px;">{"".join(links)}</div>'
        "</div>"
    )


__all__ = [
    "GRID_COLUMNS_BY_COUNT",
    "DEFAULT_GRID_COLUMNS",
    "normalize_resource_url",
    "split_resources",
    "grid_columns",
    "format_size_kb",
    "render_image_grid",
    "render_attachment_links",
    "render_attachment_panel",
]
