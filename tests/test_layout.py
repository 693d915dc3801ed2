from datetime import datetime

from core.rendering.dates import (
    format_date,
    format_datetime_long,
    format_datetime_short,
    format_month_day_time,
    format_timestamp_title,
)
from core.rendering.layout import (
    generate_error_page,
    generate_nav,
    generate_page,
)
from core.rendering.scripts import (
    AUTH_JS,
    LOAD_MORE_JS,
    build_scripts,
    generate_auth_script,
    page_config_script,
)


def test_generate_page_wraps_document():
    html = generate_page("广场", "<p>body</p>", "<script>1</script>", site_title="My Memos")

    assert html.startswith("<!DOCTYPE html>")
    assert "<title>广场 - My Memos</title>" in html
    assert "<style>" in html
    assert "<p>body</p>" in html
    assert html.index("<p>body</p>") < html.index("<script>1</script>")


def test_nav_marks_active_link():
    html = generate_nav("/explore")

    assert '<a href="/explore" class="active">广场</a>' in html
    assert '<a href="/">我的空间</a>' in html
    assert 'href="/login"' in html


def test_error_page_escapes_message():
    html = generate_error_page("<img src=x onerror=alert(1)>", site_title="Memos")

    assert "<title>错误 - Memos</title>" in html
    assert "<h3>页面加载失败</h3>" in html
    assert "&lt;img src=x onerror=alert(1)&gt;" in html
    assert "<img src=x" not in html


def test_error_page_custom_heading_and_home_link():
    html = generate_error_page("Tag not found", heading="标签不存在", home_link=True)

    assert "<h3>标签不存在</h3>" in html
    assert "返回首页" in html


def test_build_scripts_injects_page_config():
    html = build_scripts(AUTH_JS, LOAD_MORE_JS, page_config={"offset": 20, "pageSize": 20})

    assert "marked.min.js" in html
    assert 'window.MEMO_PAGE = {"offset": 20, "pageSize": 20};' in html
    assert "function getToken()" in html
    assert "async function loadMoreMemos()" in html
    assert "highlight.min.js" not in html


def test_page_config_cannot_close_script_tag():
    script = page_config_script({"name": "</script><script>alert(1)</script>"})
    assert "</script>" not in script


def test_zh_cn_date_formats():
    dt = datetime(2024, 1, 5, 9, 30, 15)

    assert format_date(dt) == "2024年1月5日"
    assert format_datetime_long(dt) == "2024年1月5日周五 09:30"
    assert format_datetime_short(dt) == "1月5日周五 09:30"
    assert format_month_day_time(dt) == "1月5日 09:30"
    assert format_timestamp_title(dt) == "2024/1/5 09:30:15"


def test_auth_script_standalone():
    html = generate_auth_script()

    assert html.startswith("<script>")
    assert "async function checkLoginStatus()" in html
    assert "localStorage.getItem('accessToken')" in html
