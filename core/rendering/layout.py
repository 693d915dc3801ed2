"""
Page template: document shell, shared chrome and the generic error page.
"""

from __future__ import annotations

from html import escape
from typing import Optional

import core.config as config
from core.rendering.styles import BASE_CSS

NAV_LINKS = (
    ("/", "我的空间"),
    ("/explore", "广场"),
)


def generate_page(title: str, body_content: str, scripts: str = "", site_title: Optional[str] = None) -> str:
    site_title = site_title or config.SITE_TITLE
    return f"""<!DOCTYPE html>
<html lang="zh-CN">
<head>
    <meta charset="UTF-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <title>{escape(title)} - {escape(site_title)}</title>
    <style>{BASE_CSS}</style>
</head>
<body>
{body_content}
{scripts}
</body>
</html>
"""


def generate_header(site_title: Optional[str] = None) -> str:
    site_title = site_title or config.SITE_TITLE
    return f"""
<header class="site-header">
    <h1><a href="/">{escape(site_title)}</a></h1>
</header>"""


def generate_nav(active_path: str = "/") -> str:
    links = []
    for path, label in NAV_LINKS:
        active = ' class="active"' if path == active_path else ""
        links.append(f'<a href="{path}"{active}>{label}</a>')
    links = "".join(links)
    return f"""
<nav class="nav">
    {links}
    <a href="/login" id="navLogin">登录</a>
    <a href="#" id="navLogout" style="display: none;" onclick="logout(); return false;">退出</a>
</nav>"""


def generate_footer() -> str:
    return """
<footer class="site-footer">
    <p>Powered by Memos</p>
</footer>"""


def generate_intro_card(heading: str, subtitle: str) -> str:
    return f"""
<div style="margin-bottom: 20px; padding: 16px; background: var(--cell-background-color); border-radius: var(--box-border-radius); box-shadow: var(--shadows); border: 1px solid var(--border-color);">
    <h2 style="margin: 0 0 8px 0; color: var(--highlight-color); font-size: 20px;">{escape(heading)}</h2>
    <p style="margin: 0; color: var(--secondary-color); font-size: 14px;">{escape(subtitle)}</p>
</div>"""


def generate_container(
    main_content: str,
    *,
    site_title: Optional[str] = None,
    active_path: str = "",
    sidebar: str = "",
) -> str:
    """Aside (header + nav), main column and an optional right sidebar."""
    return f"""
<div class="container">
    <div class="aside-container">
        {generate_header(site_title)}
        {generate_nav(active_path)}
    </div>

    <div class="main-container">
        {main_content}
    </div>
    {sidebar}
</div>"""


IMAGE_MODAL_HTML = """
<div id="imageModal" style="display: none; position: fixed; z-index: 1000; left: 0; top: 0; width: 100%; height: 100%; background-color: rgba(0, 0, 0, 0.9); backdrop-filter: blur(20px);" onclick="closeImageModal()">
    <span style="position: absolute; top: 20px; right: 40px; color: #fff; font-size: 40px; font-weight: bold; cursor: pointer; z-index: 1001;" onclick="closeImageModal()">&times;</span>
    <img id="modalImage" alt="" style="margin: auto; display: block; max-width: 90%; max-height: 90%; width: auto; height: auto; object-fit: contain; border-radius: 8px; box-shadow: 0 4px 20px rgba(0,0,0,0.5);">
</div>"""

MESSAGE_MODAL_HTML = """
<div id="messageModal" style="display: none; position: fixed; z-index: 1001; left: 0; top: 0; width: 100%; height: 100%; background-color: rgba(61, 61, 61, 0.8);">
    <div style="background-color: var(--cell-background-color); margin: 10% auto; padding: 24px; border-radius: var(--box-border-radius); width: 90%; max-width: 400px; text-align: center; box-shadow: 0 4px 20px rgba(0,0,0,0.3); border: 1px solid var(--border-color);">
        <div id="messageIcon" style="font-size: 48px; margin-bottom: 16px;">ℹ️</div>
        <h3 id="messageTitle" style="color: var(--foreground-color); margin-bottom: 12px;">消息</h3>
        <p id="messageText" style="color: var(--secondary-color); margin-bottom: 24px;"></p>
        <button class="btn" onclick="hideMessage()">确定</button>
    </div>
</div>"""


def generate_error_page(
    message: str,
    *,
    title: str = "错误",
    heading: str = "页面加载失败",
    site_title: Optional[str] = None,
    home_link: bool = False,
) -> str:
    link = '<a href="/" class="btn" style="display: inline-block; margin-top: 16px;">返回首页</a>' if home_link else ""
    body = f"""
<div class="container">
    <div class="empty-state">
        <h3>{escape(heading)}</h3>
        <p>{escape(message)}</p>
        {link}
    </div>
</div>
{generate_footer()}
"""
    return generate_page(title, body, "", site_title)


__all__ = [
    "NAV_LINKS",
    "IMAGE_MODAL_HTML",
    "MESSAGE_MODAL_HTML",
    "generate_page",
    "generate_header",
    "generate_nav",
    "generate_footer",
    "generate_intro_card",
    "generate_container",
    "generate_error_page",
]
