import asyncio
from collections.abc import AsyncGenerator

from sqlalchemy import event
from sqlalchemy.exc import IntegrityError, OperationalError, SQLAlchemyError
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    create_async_engine,
)
from sqlalchemy.orm import sessionmaker
from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession

import course_library.models  # noqa: F401  # register tables on the metadata
from course_library.exceptions import DatabaseError
from course_library.logging import logger
from course_library.settings import app_settings


def enable_sqlite_foreign_keys(engine: AsyncEngine) -> None:
    """
    Turn on foreign key enforcement for every new SQLite connection.

    SQLite ignores ON DELETE CASCADE unless the pragma is set per connection.
    """

    @event.listens_for(engine.sync_engine, "connect")
    def _set_sqlite_pragma(dbapi_connection, connection_record):  # type: ignore[no-untyped-def]
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()


engine: AsyncEngine = create_async_engine(
    app_settings.DATABASE_URL,
    echo=app_settings.DB_ECHO,
)
if engine.dialect.name == "sqlite":
    enable_sqlite_foreign_keys(engine)

async_session = sessionmaker(
    engine, expire_on_commit=False, class_=AsyncSession
)


async def wait_and_init_db(
    retry_interval: int | None = None,
    max_retries: int | None = None,
) -> None:
    """
    Wait until the database is available and create missing tables.

    Args:
        retry_interval: Time in seconds between retries.
            Defaults to app_settings.DB_INIT_RETRY_INTERVAL
        max_retries: Maximum number of retries before giving up.
            Defaults to app_settings.DB_INIT_MAX_RETRIES

    Raises:
        DatabaseError: If the database stays unreachable.
    """
    if retry_interval is None:
        retry_interval = app_settings.DB_INIT_RETRY_INTERVAL
    if max_retries is None:
        max_retries = app_settings.DB_INIT_MAX_RETRIES
    for attempt in range(max_retries):
        try:
            async with engine.begin() as conn:
                await conn.run_sync(SQLModel.metadata.create_all)
            logger.info("Database is now ready.")
            return
        except OperationalError:
            logger.warning(
                f"Database not ready, retrying in {retry_interval} seconds... (Attempt {attempt + 1}/{max_retries})"
            )
            await asyncio.sleep(retry_interval)

    logger.error("Failed to connect to the database after multiple attempts.")
    raise DatabaseError("Database connection could not be established.")


async def reset_db(target: AsyncEngine | None = None) -> None:
    """
    Drop and recreate every table, then load the sample data.

    Args:
        target: Engine to reset, defaults to the application engine.
    """
    from course_library.storage.seed import seed_authors

    target = target or engine
    async with target.begin() as conn:
        await conn.run_sync(SQLModel.metadata.drop_all)
        await conn.run_sync(SQLModel.metadata.create_all)
    logger.info("Recreated database tables")

    async with AsyncSession(target, expire_on_commit=False) as session:
        count = await seed_authors(session)
        await session.commit()
    logger.info(f"Seeded {count} authors")


async def get_session() -> AsyncGenerator[AsyncSession, None]:
    """
    Get an asynchronous session for one request.

    Repositories only stage and flush changes; the session is committed
    once after the request handler returns, which is the save step for
    everything the request changed. Any error rolls all of it back.

    Yields:
        AsyncSession: An asynchronous SQLAlchemy session.
    """
    async with async_session() as session:
        try:
            yield session
            await session.commit()
        except IntegrityError as ex:
            await session.rollback()
            logger.error(f"Database integrity error: {ex}")
            raise
        except SQLAlchemyError as ex:
            await session.rollback()
            logger.error(f"Database error: {ex}")
            raise
