"""
Technical note: SQLite keeps the footprint small on a single box.
Async SQLAlchemy 2.0 so the API keeps answering while the store is busy.
"""
from pathlib import Path
from sqlalchemy.engine import make_url
from sqlalchemy.ext.asyncio import create_async_engine, AsyncSession, async_sessionmaker
from sqlalchemy.orm import DeclarativeBase

from lex_event_hub.core.config import DATABASE_URL
from lex_event_hub.core.logger import log


def _ensure_sqlite_dir(url: str) -> dict:
    """Create the folder of a file-based SQLite database and return its connect_args."""
    parsed = make_url(url)
    if not parsed.drivername.startswith("sqlite"):
        return {}
    if parsed.database and parsed.database != ":memory:":
        Path(parsed.database).parent.mkdir(parents=True, exist_ok=True)
    return {"check_same_thread": False}  # Required for SQLite


engine = create_async_engine(
    DATABASE_URL,
    connect_args=_ensure_sqlite_dir(DATABASE_URL),
)

AsyncSessionLocal = async_sessionmaker(
    bind=engine,
    class_=AsyncSession,
    expire_on_commit=False
)


class Base(DeclarativeBase):
    pass


async def init_db(bind=None):
    """Creates the tables if they do not exist."""
    # Models must be registered on Base.metadata before create_all
    from lex_event_hub import models  # noqa: F401

    try:
        async with (bind if bind is not None else engine).begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
        log.info("Database initialized successfully.")
    except Exception as e:
        log.error(f"Error initializing the database: {e}")
        raise


async def get_db():
    """FastAPI dependency that yields one session per request."""
    async with AsyncSessionLocal() as session:
        try:
            yield session
        finally:
            await session.close()
