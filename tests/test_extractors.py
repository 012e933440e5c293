"""Tests for the event sources."""

from datetime import datetime

import httpx
import pytest

from lex_event_hub.services.extractors import (
    ChurchExtractor,
    FarmersMarketExtractor,
    FestivalExtractor,
    FetchError,
    ParseError,
    default_extractors,
)
from lex_event_hub.services.extractors.base import BaseExtractor, next_weekday


class BrokenExtractor(BaseExtractor):
    source_name = "Broken"

    async def fetch_events(self, now):
        raise ParseError("unexpected payload")


class TestSourceContract:
    """Every source returns future events only and never raises."""

    @pytest.mark.asyncio
    @pytest.mark.parametrize("extractor", default_extractors(), ids=lambda e: e.__class__.__name__)
    async def test_only_future_events(self, extractor, now):
        events = await extractor.extract(now)
        assert all(ev.start_time > now for ev in events)

    @pytest.mark.asyncio
    @pytest.mark.parametrize("extractor", default_extractors(), ids=lambda e: e.__class__.__name__)
    async def test_required_fields(self, extractor, now):
        for ev in await extractor.extract(now):
            assert ev.title
            assert ev.category
            assert ev.id is None

    def test_eight_sources(self):
        assert len(default_extractors()) == 8

    @pytest.mark.asyncio
    async def test_failure_becomes_empty_list(self, now):
        assert await BrokenExtractor().extract(now) == []

    @pytest.mark.asyncio
    async def test_defaults_to_current_time(self):
        events = await ChurchExtractor().extract()
        assert events
        assert all(ev.start_time > datetime.now() for ev in events)


class TestRecurringSources:
    """Date arithmetic of the fixture sources."""

    def test_next_weekday_includes_today(self, now):
        assert next_weekday(now, 2, hour=18) == datetime(2026, 10, 21, 18, 0)
        assert next_weekday(now, 5, hour=8) == datetime(2026, 10, 24, 8, 0)

    @pytest.mark.asyncio
    async def test_farmers_market_four_saturdays(self, now):
        events = await FarmersMarketExtractor().extract(now)
        assert len(events) == 4
        assert all(ev.start_time.weekday() == 5 and ev.start_time.hour == 8 for ev in events)
        assert all(ev.is_free and ev.category == "food" for ev in events)

    @pytest.mark.asyncio
    async def test_farmers_market_skips_started_session(self):
        saturday_noon = datetime(2026, 10, 24, 12, 0)
        events = await FarmersMarketExtractor().extract(saturday_noon)
        assert len(events) == 3
        assert events[0].start_time == datetime(2026, 10, 31, 8, 0)

    @pytest.mark.asyncio
    async def test_church_today_service_still_ahead(self, now):
        events = await ChurchExtractor().extract(now)
        dinners = [ev for ev in events if "Fellowship Dinner" in ev.title]
        assert len(dinners) == 8
        assert dinners[0].start_time == datetime(2026, 10, 21, 18, 0)

    @pytest.mark.asyncio
    async def test_festivals_past_dates_dropped(self, now):
        assert await FestivalExtractor().extract(now) == []

    @pytest.mark.asyncio
    async def test_festivals_early_in_year(self):
        events = await FestivalExtractor().extract(datetime(2026, 1, 2, 9, 0))
        assert len(events) == 6
        assert all(ev.start_time.hour == 10 for ev in events)
        free = {ev.title for ev in events if ev.is_free}
        assert free == {"Lexington Festival of the Arts", "Summer Concert Series"}


class TestFetchHtml:
    """Network seam for real scrapers."""

    @pytest.mark.asyncio
    async def test_returns_body(self):
        transport = httpx.MockTransport(lambda request: httpx.Response(200, text="<html>ok</html>"))
        html = await BrokenExtractor(transport=transport).fetch_html("https://example.com/events")
        assert html == "<html>ok</html>"

    @pytest.mark.asyncio
    async def test_error_status_raises_fetch_error(self):
        transport = httpx.MockTransport(lambda request: httpx.Response(503))
        with pytest.raises(FetchError):
            await BrokenExtractor(transport=transport).fetch_html("https://example.com/events")

    @pytest.mark.asyncio
    async def test_connection_error_raises_fetch_error(self):
        def refuse(request):
            raise httpx.ConnectError("connection refused", request=request)

        with pytest.raises(FetchError):
            await BrokenExtractor(transport=httpx.MockTransport(refuse)).fetch_html("https://example.com")

    @pytest.mark.asyncio
    async def test_sends_fixed_identifying_headers(self):
        seen = []

        def record(request):
            seen.append(request.headers)
            return httpx.Response(200, text="ok")

        extractor = BrokenExtractor(transport=httpx.MockTransport(record))
        await extractor.fetch_html("https://example.com/a")
        await extractor.fetch_html("https://example.com/b")
        assert seen[0]["User-Agent"].startswith("LexingtonEventHub/1.0.0")
        assert seen[0]["User-Agent"] == seen[1]["User-Agent"]
        assert seen[0]["Accept-Language"] == "en-US,en;q=0.9"
