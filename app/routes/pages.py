"""
HTML page routes.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, Request
from fastapi.responses import HTMLResponse

from app.deps import get_page_env
from core.context import PageEnv
from core.pages import (
    render_explore_page,
    render_home_page,
    render_memo_detail_page,
    render_tag_page,
    render_user_page,
)


router = APIRouter(default_response_class=HTMLResponse)


@router.get("/")
def home(request: Request, env: PageEnv = Depends(get_page_env)):
    return HTMLResponse(render_home_page(request, env))


@router.get("/explore")
def explore(request: Request, env: PageEnv = Depends(get_page_env)):
    return HTMLResponse(render_explore_page(request, env))


@router.get("/m/{memo_id}")
def memo_detail(memo_id: str, request: Request, env: PageEnv = Depends(get_page_env)):
    return HTMLResponse(render_memo_detail_page(request, env, memo_id))


@router.get("/tag/{tag_name:path}")
def tag(tag_name: str, request: Request, env: PageEnv = Depends(get_page_env)):
    return HTMLResponse(render_tag_page(request, env, tag_name))


@router.get("/user/{user_id}")
def user(user_id: str, request: Request, env: PageEnv = Depends(get_page_env)):
    return HTMLResponse(render_user_page(request, env, user_id))
