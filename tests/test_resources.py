import re

import pytest

from core.records import ResourceView
from core.rendering.resources import (
    format_size_kb,
    grid_columns,
    normalize_resource_url,
    render_attachment_links,
    render_attachment_panel,
    render_image_grid,
    split_resources,
)


def _image(resource_id: int) -> ResourceView:
    return ResourceView(
        id=resource_id,
        filename=f"img-{resource_id}.png",
        filepath=f"/api/v1/resource/{resource_id}/file",
        type="image/png",
    )


@pytest.mark.parametrize("count,expected", [(1, 1), (2, 2), (3, 3), (4, 2), (5, 3), (9, 3)])
def test_grid_columns_follow_image_count(count, expected):
    assert grid_columns(count) == expected

    html = render_image_grid([_image(i) for i in range(1, count + 1)])
    assert f'data-columns="{expected}"' in html
    assert f"repeat({expected}, 1fr)" in html
    assert html.count('class="image-item"') == count


def test_image_grid_empty_renders_nothing():
    assert render_image_grid([]) == ""


@pytest.mark.parametrize(
    "filepath",
    [
        "https://cdn.example.com/a.png",
        "http://cdn.example.com/a.png",
        "/api/v1/resource/7/file",
    ],
)
def test_absolute_and_api_paths_pass_through(filepath):
    assert normalize_resource_url(7, filepath) == filepath


@pytest.mark.parametrize("filepath", ["uploads/2024/a.png", "assets/file.pdf", "", None])
def test_storage_paths_are_rewritten(filepath):
    assert normalize_resource_url(7, filepath) == "/api/v1/resource/7/file"


def test_split_resources_by_mime_type():
    doc = ResourceView(id=2, filename="a.pdf", filepath="/api/v1/resource/2/file", type="application/pdf")
    untyped = ResourceView(id=3, filename="blob", filepath="/api/v1/resource/3/file", type=None)
    images, others = split_resources([_image(1), doc, untyped])

    assert [r.id for r in images] == [1]
    assert [r.id for r in others] == [2, 3]


def test_attachment_links_escape_filenames():
    resource = ResourceView(id=4, filename="<b>notes</b>.txt", filepath="/api/v1/resource/4/file", type="text/plain")
    html = render_attachment_links([resource])

    assert "📎 &lt;b&gt;notes&lt;/b&gt;.txt" in html
    assert "<b>notes</b>" not in html


def test_attachment_panel_shows_sizes_in_kb():
    resource = ResourceView(id=5, filename="report.pdf", filepath="/api/v1/resource/5/file", type="application/pdf", size=1536)
    html = render_attachment_panel([resource])

    assert "📎 附件:" in html
    assert "📄 report.pdf" in html
    assert "(1.5 KB)" in html


def test_format_size_kb():
    assert format_size_kb(2048) == "2.0 KB"
    assert format_size_kb(None) == ""


def test_image_click_handler_quotes_url():
    image = ResourceView(id=6, filename="x.png", filepath="https://cdn.example.com/it's.png", type="image/png")
    html = render_image_grid([image])

    match = re.search(r'onclick="openImageModal\(\'(.*?)\'\)"', html)
    assert match is not None
    assert "\\&#x27;" in match.group(1)
