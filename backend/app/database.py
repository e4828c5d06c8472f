from sqlalchemy import event
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.orm import DeclarativeBase

from app.config import settings
from app.core.storage import storage_errors


def _enable_sqlite_foreign_keys(dbapi_connection, connection_record) -> None:
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


def enforce_foreign_keys(bind: AsyncEngine) -> None:
    """Turn on foreign-key enforcement for SQLite connections.

    PostgreSQL always enforces foreign keys; SQLite only does so when the
    pragma is set on every new connection.
    """
    if bind.dialect.name == "sqlite":
        event.listen(bind.sync_engine, "connect", _enable_sqlite_foreign_keys)


engine = create_async_engine(
    settings.DATABASE_URL,
    echo=settings.DB_ECHO,
    pool_pre_ping=True,
)
enforce_foreign_keys(engine)

async_session = async_sessionmaker(
    bind=engine,
    class_=AsyncSession,
    expire_on_commit=False,
)


class Base(DeclarativeBase):
    """Declarative base for all SQLAlchemy ORM models."""
    pass


async def get_db() -> AsyncSession:
    """FastAPI dependency that yields an async database session."""
    async with async_session() as session:
        try:
            yield session
            with storage_errors("commit"):
                await session.commit()
        except Exception:
            await session.rollback()
            raise
