"""
View records handed from the query layer to the renderers.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional


@dataclass
class ResourceView:
    id: int
    filename: str
    filepath: str
    type: Optional[str] = None
    size: Optional[int] = None

    @property
    def is_image(self) -> bool:
        return bool(self.type) and self.type.startswith("image/")


@dataclass
class TagView:
    id: int
    name: str


@dataclass
class MemoView:
    id: int
    creator_id: Optional[int]
    content: str
    visibility: str
    pinned: bool
    row_status: str
    created_ts: int
    updated_ts: int
    display_ts: int
    parent_id: Optional[int] = None
    creator_name: Optional[str] = None
    creator_username: Optional[str] = None
    creator_email: Optional[str] = None
    resource_list: list[ResourceView] = field(default_factory=list)
    tag_list: list[TagView] = field(default_factory=list)

    @property
    def display_name(self) -> str:
        return self.creator_name or self.creator_username or "匿名"


@dataclass
class UserView:
    id: int
    username: str
    nickname: Optional[str] = None
    email: Optional[str] = None
    is_admin: bool = False
    created_ts: Optional[int] = None

    @property
    def display_name(self) -> str:
        return self.nickname or self.username


__all__ = [
    "ResourceView",
    "TagView",
    "MemoView",
    "UserView",
]
