"""Shared pytest fixtures for the event hub tests."""

import os
import tempfile
from datetime import datetime

# Configuration is read at import time: point the app at a scratch database
# and log folder before anything from lex_event_hub is imported.
_SCRATCH = tempfile.mkdtemp(prefix="lex-event-hub-tests-")
os.environ["DATABASE_URL"] = f"sqlite+aiosqlite:///{_SCRATCH}/test_events.db"
os.environ["LOG_DIR"] = os.path.join(_SCRATCH, "logs")
os.environ["SEED_DATABASE"] = "false"

import pytest
import pytest_asyncio
from fastapi.testclient import TestClient
from sqlalchemy.ext.asyncio import async_sessionmaker, create_async_engine

from lex_event_hub.core.database import init_db
from lex_event_hub.main import app
from lex_event_hub.schemas.event import EventSchema
from lex_event_hub.services.extractors import BaseExtractor


@pytest.fixture
def now() -> datetime:
    """Wednesday, 21 October 2026, noon."""
    return datetime(2026, 10, 21, 12, 0)


@pytest.fixture
def make_event():
    """Factory for events with sensible defaults."""

    def _make(title="Sample Event", start_time=None, **overrides) -> EventSchema:
        data = {
            "title": title,
            "description": "A sample description",
            "start_time": start_time or datetime(2026, 10, 22, 18, 0),
            "location": "Tandy Centennial Park, Lexington, KY",
            "category": "community",
            "is_free": False,
        }
        data.update(overrides)
        return EventSchema(**data)

    return _make


class StaticExtractor(BaseExtractor):
    """Source returning a fixed list of events."""

    def __init__(self, events):
        super().__init__()
        self.events = events

    async def fetch_events(self, now):
        return list(self.events)


class ExplodingExtractor(BaseExtractor):
    """Source that breaks the extract() contract and raises."""

    async def fetch_events(self, now):
        return []

    async def extract(self, now=None):
        raise RuntimeError("source exploded")


@pytest.fixture
def static_extractor():
    return StaticExtractor


@pytest.fixture
def exploding_extractor():
    return ExplodingExtractor


@pytest_asyncio.fixture
async def session(tmp_path):
    """Async session over a fresh SQLite file."""
    engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'events.db'}")
    await init_db(bind=engine)
    factory = async_sessionmaker(bind=engine, expire_on_commit=False)
    async with factory() as db:
        yield db
    await engine.dispose()


@pytest.fixture(scope="session")
def client():
    """One TestClient (and one event loop) for the whole API suite."""
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def override_dependency():
    """Install FastAPI dependency overrides and remove them afterwards."""
    installed = []

    def _override(dependency, provider):
        app.dependency_overrides[dependency] = provider
        installed.append(dependency)

    yield _override
    for dependency in installed:
        app.dependency_overrides.pop(dependency, None)
