"""
Read-only queries backing the memo pages.

Every function takes an open SQLAlchemy session and returns view records;
nothing here writes to the store.
"""

from __future__ import annotations

from typing import Iterable, Optional

from sqlalchemy import func

import core.config as config
from core.models import (
    Memo,
    MemoResource,
    MemoTag,
    Resource,
    RowStatus,
    Setting,
    Tag,
    User,
    Visibility,
)
from core.records import MemoView, ResourceView, TagView, UserView
from core.rendering.resources import normalize_resource_url


def _memo_query(db):
    return (
        db.query(
            Memo,
            User.nickname,
            User.username,
            User.email,
        )
        .outerjoin(User, Memo.creator_id == User.id)
    )


def _public_feed(query):
    return (
        query
        .filter(Memo.row_status == RowStatus.NORMAL.value)
        .filter(Memo.visibility == Visibility.PUBLIC.value)
        .order_by(Memo.pinned.desc(), Memo.display_ts.desc(), Memo.id.desc())
    )


def _to_memo_view(row) -> MemoView:
    memo, nickname, username, email = row
    return MemoView(
        id=memo.id,
        creator_id=memo.creator_id,
        content=memo.content or "",
        visibility=memo.visibility,
        pinned=bool(memo.pinned),
        row_status=memo.row_status,
        created_ts=memo.created_ts,
        updated_ts=memo.updated_ts,
        display_ts=memo.display_ts,
        parent_id=memo.parent_id,
        creator_name=nickname,
        creator_username=username,
        creator_email=email,
    )


def count_public_memos(db) -> int:
    return (
        db.query(func.count(Memo.id))
        .filter(Memo.row_status == RowStatus.NORMAL.value)
        .filter(Memo.visibility == Visibility.PUBLIC.value)
        .scalar()
    ) or 0


def list_public_memos(db, limit: int, offset: int = 0) -> list[MemoView]:
    rows = _public_feed(_memo_query(db)).limit(limit).offset(offset).all()
    return [_to_memo_view(row) for row in rows]


def get_memo(db, memo_id: int) -> Optional[MemoView]:
    row = _memo_query(db).filter(Memo.id == memo_id).first()
    return _to_memo_view(row) if row else None


def get_tag_by_name(db, name: str) -> Optional[TagView]:
    tag = db.query(Tag).filter(Tag.name == name).first()
    return TagView(id=tag.id, name=tag.name) if tag else None


def list_memos_by_tag(db, tag_id: int) -> list[MemoView]:
    query = _memo_query(db).join(MemoTag, MemoTag.memo_id == Memo.id).filter(MemoTag.tag_id == tag_id)
    return [_to_memo_view(row) for row in _public_feed(query).all()]


def get_user(db, user_id: int) -> Optional[UserView]:
    user = db.query(User).filter(User.id == user_id).first()
    if not user:
        return None
    return UserView(
        id=user.id,
        username=user.username,
        nickname=user.nickname,
        email=user.email,
        is_admin=bool(user.is_admin),
        created_ts=user.created_ts,
    )


def list_memos_by_user(db, user_id: int) -> list[MemoView]:
    query = _memo_query(db).filter(Memo.creator_id == user_id)
    return [_to_memo_view(row) for row in _public_feed(query).all()]


def list_memo_resources(db, memo_id: int) -> list[ResourceView]:
    resources = (
        db.query(Resource)
        .join(MemoResource, MemoResource.resource_id == Resource.id)
        .filter(MemoResource.memo_id == memo_id)
        .order_by(Resource.id)
        .all()
    )
    return [
        ResourceView(
            id=resource.id,
            filename=resource.filename,
            filepath=normalize_resource_url(resource.id, resource.filepath),
            type=resource.type,
            size=resource.size,
        )
        for resource in resources
    ]


def list_memo_tags(db, memo_id: int) -> list[TagView]:
    tags = (
        db.query(Tag)
        .join(MemoTag, MemoTag.tag_id == Tag.id)
        .filter(MemoTag.memo_id == memo_id)
        .order_by(Tag.id)
        .all()
    )
    return [TagView(id=tag.id, name=tag.name) for tag in tags]


def attach_memo_relations(db, memos: Iterable[MemoView], *, include_tags: bool = True) -> None:
    """Fill resource_list (then tag_list) on each memo, one memo at a time."""
    for memo in memos:
        memo.resource_list = list_memo_resources(db, memo.id)
        if include_tags:
            memo.tag_list = list_memo_tags(db, memo.id)


def get_site_settings(db, site_title: Optional[str] = None) -> dict:
    """Site-wide display settings; stored values override the configured defaults."""
    settings = {"site_title": site_title or config.SITE_TITLE}
    rows = db.query(Setting).filter(Setting.key.in_(list(settings))).all()
    for row in rows:
        if row.value:
            settings[row.key] = row.value
    return settings


__all__ = [
    "count_public_memos",
    "list_public_memos",
    "get_memo",
    "get_tag_by_name",
    "list_memos_by_tag",
    "get_user",
    "list_memos_by_user",
    "list_memo_resources",
    "list_memo_tags",
    "attach_memo_relations",
    "get_site_settings",
]
