"""Tests for the live aggregation pipeline."""

from datetime import datetime, timedelta

import pytest

from lex_event_hub.services.extractors import FarmersMarketExtractor
from lex_event_hub.services.filters import EventQuery
from lex_event_hub.services.manager import EventManager, deduplicate
from lex_event_hub.services.storage import EventStorage


class TestDeduplicate:
    """Title + calendar date collapse, first occurrence wins."""

    def test_same_title_same_day_keeps_first(self, make_event):
        first = make_event(title="Jazz", start_time=datetime(2026, 10, 22, 20, 0), location="first")
        second = make_event(title="Jazz", start_time=datetime(2026, 10, 22, 9, 0), location="second")
        assert deduplicate([first, second]) == [first]

    def test_same_title_other_day_kept(self, make_event):
        events = [
            make_event(title="Jazz", start_time=datetime(2026, 10, 22, 20, 0)),
            make_event(title="Jazz", start_time=datetime(2026, 10, 23, 20, 0)),
        ]
        assert len(deduplicate(events)) == 2

    def test_title_is_case_sensitive(self, make_event):
        events = [make_event(title="Jazz"), make_event(title="JAZZ")]
        assert len(deduplicate(events)) == 2


class TestFetchAllEvents:
    """Concurrent aggregation with isolation, sort and cap."""

    @pytest.mark.asyncio
    async def test_first_source_wins_on_duplicates(self, now, make_event, static_extractor):
        early = make_event(title="Yoga", start_time=now + timedelta(days=1, hours=9), location="A")
        late = make_event(title="Yoga", start_time=now + timedelta(days=1, hours=1), location="B")
        manager = EventManager(scrapers=[static_extractor([early]), static_extractor([late])])
        events = await manager.fetch_all_events(now)
        assert [ev.location for ev in events] == ["A"]

    @pytest.mark.asyncio
    async def test_sorted_ascending(self, now, make_event, static_extractor):
        source_a = static_extractor([make_event(title="C", start_time=now + timedelta(days=3))])
        source_b = static_extractor([
            make_event(title="B", start_time=now + timedelta(days=2)),
            make_event(title="A", start_time=now + timedelta(days=1)),
        ])
        events = await EventManager(scrapers=[source_a, source_b]).fetch_all_events(now)
        assert [ev.title for ev in events] == ["A", "B", "C"]

    @pytest.mark.asyncio
    async def test_positional_ids(self, now, make_event, static_extractor):
        source = static_extractor([
            make_event(title=f"Event {i}", start_time=now + timedelta(hours=i + 1)) for i in range(5)
        ])
        events = await EventManager(scrapers=[source]).fetch_all_events(now)
        assert [ev.id for ev in events] == [1, 2, 3, 4, 5]

    @pytest.mark.asyncio
    async def test_capped_at_one_hundred(self, now, make_event, static_extractor):
        source = static_extractor([
            make_event(title=f"Event {i}", start_time=now + timedelta(hours=i + 1)) for i in range(150)
        ])
        events = await EventManager(scrapers=[source]).fetch_all_events(now)
        assert len(events) == 100
        assert events[-1].title == "Event 99"

    @pytest.mark.asyncio
    async def test_failing_source_isolated(self, now, exploding_extractor):
        manager = EventManager(scrapers=[exploding_extractor(), FarmersMarketExtractor()])
        events = await manager.fetch_all_events(now)
        assert len(events) == 4

    @pytest.mark.asyncio
    async def test_total_failure_returns_empty(self, now, exploding_extractor):
        manager = EventManager(scrapers=[exploding_extractor(), exploding_extractor()])
        assert await manager.fetch_all_events(now) == []

    @pytest.mark.asyncio
    async def test_idempotent_for_same_instant(self, now):
        manager = EventManager()
        assert await manager.fetch_all_events(now) == await manager.fetch_all_events(now)

    @pytest.mark.asyncio
    async def test_default_sources(self, now):
        events = await EventManager().fetch_all_events(now)
        assert 0 < len(events) <= 100
        assert all(ev.start_time > now for ev in events)
        assert events == sorted(events, key=lambda ev: ev.start_time)
        assert len({ev.dedup_key for ev in events}) == len(events)


class TestLiveListing:
    """Aggregation followed by the filter stage."""

    @pytest.mark.asyncio
    async def test_response_shape(self, now):
        listing = await EventManager().live_listing(EventQuery(now=now))
        assert listing.total == len(listing.events)
        assert listing.source_count == len({ev.category for ev in listing.events})
        assert listing.generated_at == now

    @pytest.mark.asyncio
    async def test_free_filter(self, now):
        listing = await EventManager().live_listing(EventQuery(mode="free", now=now))
        assert listing.events
        assert all(ev.is_free for ev in listing.events)

    @pytest.mark.asyncio
    async def test_search(self, now):
        listing = await EventManager().live_listing(EventQuery(search="ZOO", now=now))
        assert listing.events
        assert all("zoo" in f"{ev.title} {ev.description} {ev.location}".lower() for ev in listing.events)

    @pytest.mark.asyncio
    async def test_empty_sources(self, now, static_extractor):
        listing = await EventManager(scrapers=[static_extractor([])]).live_listing(EventQuery(now=now))
        assert listing.events == []
        assert listing.total == 0
        assert listing.source_count == 0


class TestPersistAll:
    """Importing the live aggregate into the store."""

    @pytest.mark.asyncio
    async def test_skips_known_events(self, session, now):
        manager = EventManager(scrapers=[FarmersMarketExtractor()])
        storage = EventStorage(session)
        assert await manager.persist_all(storage, now) == 4
        assert await manager.persist_all(storage, now) == 0
        assert await storage.count() == 4
