"""Todo API — FastAPI application factory and entry point.

Invariants:
    - Routes registered explicitly (no auto-discovery)
    - Exactly one TaskStore per app, built here and kept on app.state
    - Global error handlers render every failure as plain text
    - Logging configured on startup via lifespan context manager
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from todo_api.api.error_handlers import register_error_handlers
from todo_api.api.routes import health, todos
from todo_api.config import Settings, get_settings
from todo_api.infrastructure.observability import setup_logging
from todo_api.infrastructure.task_store import TaskStore

logger = logging.getLogger(__name__)


def create_app(
    store: TaskStore | None = None, settings: Settings | None = None,
) -> FastAPI:
    """Build the application around an explicitly constructed store."""
    settings = settings or get_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Startup/shutdown lifecycle."""
        setup_logging(settings.log_level, settings.log_format)
        logger.info(
            f"Todo API started, listening on http://{settings.host}:{settings.port}",
        )
        yield
        logger.info(
            f"Todo API shutting down with {app.state.task_store.count()} task(s) in memory",
        )

    app = FastAPI(title="Todo API", version="1.0.0", lifespan=lifespan)
    app.state.task_store = store if store is not None else TaskStore()

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(health.router)
    app.include_router(todos.router)

    register_error_handlers(app)
    return app


app = create_app()
