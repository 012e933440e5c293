"""
Quality standard: Orchestration with fault isolation.
Reason: All sources run concurrently; a failing source contributes nothing and
never takes the others down. The live list is rebuilt on every request, so its
ids are positions in that response and not identifiers.
"""
import asyncio
from datetime import datetime
from typing import Optional

from lex_event_hub.core.config import MAX_LIVE_EVENTS
from lex_event_hub.core.logger import log
from lex_event_hub.schemas.event import EventSchema, LiveEventsResponse
from lex_event_hub.services.extractors import BaseExtractor, default_extractors
from lex_event_hub.services.filters import EventQuery
from lex_event_hub.services.storage import EventStorage


def deduplicate(events: list[EventSchema]) -> list[EventSchema]:
    """Keeps the first event per title + calendar date."""
    unique: dict[str, EventSchema] = {}
    for ev in events:
        unique.setdefault(ev.dedup_key, ev)
    return list(unique.values())


class EventManager:
    def __init__(self, scrapers: Optional[list[BaseExtractor]] = None, limit: int = MAX_LIVE_EVENTS):
        self.scrapers = scrapers if scrapers is not None else default_extractors()
        self.limit = limit

    async def _collect(self, now: datetime) -> list[EventSchema]:
        results = await asyncio.gather(
            *(scraper.extract(now) for scraper in self.scrapers),
            return_exceptions=True,
        )
        collected = []
        for scraper, result in zip(self.scrapers, results):
            name = scraper.__class__.__name__
            if isinstance(result, BaseException):
                log.error(f"❌ Engine failure in {name}: {result}")
                continue
            if not result:
                log.warning(f"⚠️ {name}: 0 events.")
                continue
            log.debug(f"[Manager] {name}: {len(result)} events")
            collected.extend(result)
        return collected

    async def fetch_all_events(self, now: Optional[datetime] = None) -> list[EventSchema]:
        now = now or datetime.now()
        try:
            collected = await self._collect(now)
            unique = deduplicate(collected)
            unique.sort(key=lambda ev: ev.start_time)
            capped = unique[:self.limit]
        except Exception as e:
            log.error(f"❌ Aggregation failed: {e}")
            return []

        log.info(
            f"✨ Aggregated {len(self.scrapers)} sources: {len(collected)} captured | "
            f"{len(unique)} unique | {len(capped)} returned"
        )
        return [ev.model_copy(update={"id": position}) for position, ev in enumerate(capped, start=1)]

    async def live_listing(self, query: EventQuery) -> LiveEventsResponse:
        """Aggregates, then filters. Filtering errors propagate to the caller."""
        events = query.apply(await self.fetch_all_events(query.now))
        return LiveEventsResponse(
            events=events,
            generated_at=query.now,
            source_count=len({ev.category for ev in events}),
            total=len(events),
        )

    async def persist_all(self, storage: EventStorage, now: Optional[datetime] = None) -> int:
        """Stores the current aggregate, skipping events already in the table."""
        known = await storage.find_keys()
        stored = 0
        for ev in await self.fetch_all_events(now):
            if ev.dedup_key in known:
                continue
            await storage.create_event(ev)
            known.add(ev.dedup_key)
            stored += 1
        log.info(f"✨ CYCLE COMPLETE: {stored} new events in the database")
        return stored
