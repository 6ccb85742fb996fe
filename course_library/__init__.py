# Uvicorn application factory <https://www.uvicorn.org/#application-factories>
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI

from course_library.logging import logger
from course_library.middlewares.correlation_id import CorrelationIDMiddleware
from course_library.middlewares.logging_context import LoggingContextMiddleware
from course_library.routing import collect_subrouters
from course_library.settings import app_settings


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """
    Application startup and shutdown.

    On startup the database tables are created, waiting for the database
    if needed. With RESET_DATABASE_ON_STARTUP set, the tables are dropped
    and reloaded with the sample authors instead.
    """
    from course_library.storage.db import engine, reset_db, wait_and_init_db

    logger.info("Application startup initiated")
    await wait_and_init_db()
    if app_settings.RESET_DATABASE_ON_STARTUP:
        await reset_db()
    logger.info("Initialized database and tables")

    yield

    logger.info("Application shutdown initiated")
    await engine.dispose()
    logger.info("Application shutdown complete")


def application() -> FastAPI:
    """
    Initializes and configures the FastAPI application.

    Routers are collected from `course_library/api/http` and mounted under
    `/api`. Every request gets a correlation id and a logging context.
    """
    app = FastAPI(
        title="Course Library API",
        description="Authors and their courses",
        version="1.0.0",
        lifespan=lifespan,
    )

    # Collect routers
    app.include_router(collect_subrouters())

    # Middlewares (execute in REVERSE order of registration)
    # Execution flow: CorrelationIDMiddleware → LoggingContextMiddleware
    app.add_middleware(LoggingContextMiddleware)
    app.add_middleware(CorrelationIDMiddleware)

    return app
