import os

os.environ.setdefault("DB_BACKEND", "sqlite")

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from core.db import DB
from core.models import (
    Base,
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

BASE_TS = 1704067200  # 2024-01-01T00:00:00Z


class Seeder:
    """Small row factory for page and query tests."""

    def __init__(self, session):
        self.session = session
        self._ts = BASE_TS

    def _next_ts(self) -> int:
        self._ts += 60
        return self._ts

    def user(self, username="alice", nickname="Alice", email="alice@example.com", is_admin=False):
        user = User(username=username, nickname=nickname, email=email, is_admin=is_admin, created_ts=BASE_TS)
        self.session.add(user)
        self.session.commit()
        return user

    def memo(
        self,
        creator,
        content="hello",
        *,
        visibility=Visibility.PUBLIC.value,
        pinned=False,
        row_status=RowStatus.NORMAL.value,
        created_ts=None,
        updated_ts=None,
    ):
        ts = created_ts if created_ts is not None else self._next_ts()
        memo = Memo(
            creator_id=creator.id if creator is not None else None,
            content=content,
            visibility=visibility,
            pinned=pinned,
            row_status=row_status,
            created_ts=ts,
            updated_ts=updated_ts if updated_ts is not None else ts,
            display_ts=ts,
        )
        self.session.add(memo)
        self.session.commit()
        return memo

    def resource(self, memo, filename="photo.png", *, filepath="uploads/photo.png", type="image/png", size=2048):
        resource = Resource(filename=filename, filepath=filepath, type=type, size=size)
        self.session.add(resource)
        self.session.flush()
        self.session.add(MemoResource(memo_id=memo.id, resource_id=resource.id))
        self.session.commit()
        return resource

    def tag(self, memo, name):
        tag = self.session.query(Tag).filter(Tag.name == name).first()
        if tag is None:
            tag = Tag(name=name)
            self.session.add(tag)
            self.session.flush()
        self.session.add(MemoTag(memo_id=memo.id, tag_id=tag.id))
        self.session.commit()
        return tag

    def setting(self, key, value):
        self.session.add(Setting(key=key, value=value))
        self.session.commit()


@pytest.fixture
def server_db():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(engine)
    SessionLocal = sessionmaker(bind=engine)
    previous_engine = DB.engine
    previous_session = DB.SessionLocal
    DB.engine = engine
    DB.SessionLocal = SessionLocal
    try:
        yield SessionLocal
    finally:
        DB.engine = previous_engine
        DB.SessionLocal = previous_session
        engine.dispose()


@pytest.fixture
def db_session(server_db):
    session = server_db()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def seed(db_session):
    return Seeder(db_session)


@pytest.fixture
def client(server_db):
    from starlette.testclient import TestClient

    from app.main import app

    # no context manager: the lifespan would replace the in-memory engine
    return TestClient(app)
