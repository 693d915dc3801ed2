from core.pages.home import render_home_page
from core.pages.explore import render_explore_page
from core.pages.memo_detail import render_memo_detail_page
from core.pages.tag import render_tag_page
from core.pages.user import render_user_page

__all__ = [
    "render_home_page",
    "render_explore_page",
    "render_memo_detail_page",
    "render_tag_page",
    "render_user_page",
]
