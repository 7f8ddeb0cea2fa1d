"""Postboard API: FastAPI application entry point.

Invariants:
    - Routes registered explicitly (feed, posts, users)
    - Trailing slashes are ignored: /feed/ is served by the /feed route
    - Global error handlers render every failure as {"error": {"message", "status"}}
    - Database initialized on startup and disposed on shutdown via lifespan
    - Startup line "Server is running at http://localhost:<port>" logged to stdout
"""

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI, Request

from postboard.api.error_handlers import register_error_handlers
from postboard.api.routes import feed, posts, users
from postboard.config import get_settings
from postboard.infrastructure.database import init_db, close_db
from postboard.infrastructure.observability import setup_logging

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Startup/shutdown lifecycle."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)
    manager = init_db(
        settings.database_url,
        pool_size=settings.database_pool_size,
        max_overflow=settings.database_max_overflow,
    )
    if settings.database_create_tables:
        await manager.create_all()
    logger.info(f"Server is running at http://localhost:{settings.port}")
    yield
    logger.info("Postboard API shutting down")
    await close_db()


app = FastAPI(
    title="Postboard API", version="1.0.0", lifespan=lifespan,
    redirect_slashes=False,
)


@app.middleware("http")
async def strip_trailing_slash(request: Request, call_next):
    """Serve /feed/ as /feed instead of redirecting."""
    path = request.scope["path"]
    if len(path) > 1 and path.endswith("/"):
        request.scope["path"] = path.rstrip("/") or "/"
    return await call_next(request)


app.include_router(feed.router)
app.include_router(posts.router)
app.include_router(users.router)

register_error_handlers(app)


def run() -> None:
    """Console entry point: serve the app on the configured port."""
    settings = get_settings()
    uvicorn.run(app, host=settings.host, port=settings.port)


if __name__ == "__main__":
    run()
