"""
Dependency helpers for the FastAPI app.
"""

from __future__ import annotations

from typing import Generator

from fastapi import Depends

from core.context import PageEnv, PageSettings
from core.db import DB


def get_db_session() -> Generator:
    if DB.SessionLocal is None:
        raise RuntimeError("Database not initialized - SessionLocal is None")
    db = DB.SessionLocal()
    try:
        yield db
    finally:
        db.close()


def get_page_settings() -> PageSettings:
    return PageSettings.from_config()


def get_page_env(
    db=Depends(get_db_session),
    settings: PageSettings = Depends(get_page_settings),
) -> PageEnv:
    return PageEnv(db=db, settings=settings)
