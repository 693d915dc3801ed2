"""
Memo pages database models.
Read-only view of the memo store schema.
"""

from enum import Enum as PyEnum

from sqlalchemy import (
    Column, Integer, BigInteger, String, Text, Boolean, ForeignKey, Index
)
from sqlalchemy.orm import declarative_base

Base = declarative_base()

# =============================================================================
# Enums
# =============================================================================

class RowStatus(str, PyEnum):
    NORMAL = "NORMAL"
    ARCHIVED = "ARCHIVED"


class Visibility(str, PyEnum):
    PUBLIC = "PUBLIC"
    PRIVATE = "PRIVATE"


# =============================================================================
# Users
# =============================================================================

class User(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True)
    username = Column(String(100), nullable=False, unique=True)
    nickname = Column(String(255))
    email = Column(String(255))
    is_admin = Column(Boolean, default=False, nullable=False)
    created_ts = Column(BigInteger)


# =============================================================================
# Memos
# =============================================================================

class Memo(Base):
    __tablename__ = "memos"

    id = Column(Integer, primary_key=True)
    creator_id = Column(Integer, ForeignKey("users.id"))
    content = Column(Text, nullable=False, default="")
    visibility = Column(String(20), nullable=False, default=Visibility.PRIVATE.value)
    pinned = Column(Boolean, default=False, nullable=False)
    row_status = Column(String(20), nullable=False, default=RowStatus.NORMAL.value)
    created_ts = Column(BigInteger, nullable=False)
    updated_ts = Column(BigInteger, nullable=False)
    display_ts = Column(BigInteger, nullable=False)
    parent_id = Column(Integer, ForeignKey("memos.id"))

    __table_args__ = (
        Index("ix_memos_feed", "row_status", "visibility", "pinned", "display_ts"),
        Index("ix_memos_creator_id", "creator_id"),
    )


# =============================================================================
# Resources (attachments)
# =============================================================================

class Resource(Base):
    __tablename__ = "resources"

    id = Column(Integer, primary_key=True)
    filename = Column(String(500), nullable=False)
    filepath = Column(String(1000))  # storage key or external URL
    type = Column(String(255))  # MIME type
    size = Column(BigInteger)


class MemoResource(Base):
    __tablename__ = "memo_resources"

    memo_id = Column(Integer, ForeignKey("memos.id"), primary_key=True)
    resource_id = Column(Integer, ForeignKey("resources.id"), primary_key=True)


# =============================================================================
# Tags
# =============================================================================

class Tag(Base):
    __tablename__ = "tags"

    id = Column(Integer, primary_key=True)
    name = Column(String(255), nullable=False, unique=True)


class MemoTag(Base):
    __tablename__ = "memo_tags"

    memo_id = Column(Integer, ForeignKey("memos.id"), primary_key=True)
    tag_id = Column(Integer, ForeignKey("tags.id"), primary_key=True)


# =============================================================================
# Site settings
# =============================================================================

class Setting(Base):
    __tablename__ = "settings"

    key = Column(String(100), primary_key=True)
    value = Column(Text)
