"""
Health endpoint.
"""

from __future__ import annotations

from fastapi import APIRouter, HTTPException
from sqlalchemy import text

import core.config as config
from core.db import DB


router = APIRouter()


def _check_db_health() -> dict:
    if DB.engine is None:
        return {"ok": False, "error": "db_not_initialized"}

    try:
        with DB.engine.connect() as conn:
            conn.execute(text("SELECT 1"))
    except Exception as exc:
        return {"ok": False, "error": str(exc)}

    return {"ok": True, "backend": config.DB_BACKEND}


@router.get("/health")
async def health():
    """Health check endpoint."""
    db_health = _check_db_health()
    if not db_health.get("ok"):
        raise HTTPException(status_code=503, detail={"database": db_health})

    return {
        "status": "healthy",
        "service": "memo-pages",
        "version": "0.1.0",
        "database": db_health,
    }
