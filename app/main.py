"""
FastAPI app wiring for the memo pages.
"""

from __future__ import annotations

from contextlib import asynccontextmanager

from fastapi import FastAPI

import core.config as config
from core.db import dispose_db, init_db
from app.middleware import configure_middleware
from app.routes.health import router as health_router
from app.routes.pages import router as pages_router


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Initialize on startup, cleanup on shutdown."""
    init_db()
    try:
        yield
    finally:
        dispose_db()


app = FastAPI(title="Memo Pages", redirect_slashes=False, lifespan=lifespan)
configure_middleware(app)

# Health endpoint
app.include_router(health_router)

# HTML pages
app.include_router(pages_router)


if __name__ == "__main__":
    import uvicorn

    config.logger.info(f"Starting memo pages on {config.HOST}:{config.PORT}")
    uvicorn.run(app, host=config.HOST, port=config.PORT, log_level=config.LOG_LEVEL.lower())
