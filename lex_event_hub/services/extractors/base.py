"""
Quality standard: Clean Code and inheritance.
Reason: Every source shares the same safety net (never raise, future events only)
and the same network helper, so a real scraper can replace a fixture source
without the manager noticing.
"""
import httpx
from abc import ABC, abstractmethod
from datetime import datetime, timedelta
from typing import Optional

from lex_event_hub import __version__
from lex_event_hub.core.logger import log
from lex_event_hub.schemas.event import EventSchema


class ExtractorError(Exception):
    """Base failure of a source."""


class FetchError(ExtractorError):
    """The source could not be reached or answered with an error status."""


class ParseError(ExtractorError):
    """The source answered but the payload could not be turned into events."""


def at_hour(moment: datetime, hour: int) -> datetime:
    return moment.replace(hour=hour, minute=0, second=0, microsecond=0)


def days_from(now: datetime, days: int, hour: int) -> datetime:
    return at_hour(now + timedelta(days=days), hour)


def next_weekday(now: datetime, weekday: int, hour: int) -> datetime:
    """Next occurrence of `weekday` (Monday=0), today included, at `hour`."""
    return days_from(now, (weekday - now.weekday()) % 7, hour)


class BaseExtractor(ABC):
    source_name = "Unknown source"
    headers = {
        "User-Agent": f"LexingtonEventHub/{__version__} (+https://github.com/lex-event-hub)",
        "Accept": "text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8",
        "Accept-Language": "en-US,en;q=0.9",
    }

    def __init__(self, transport: Optional[httpx.AsyncBaseTransport] = None):
        self.transport = transport

    async def fetch_html(self, url: str) -> str:
        """
        Asynchronous GET for sources that live on the web.
        Raises FetchError on transport failures and non-2xx answers.
        """
        async with httpx.AsyncClient(
            headers=self.headers,
            follow_redirects=True,
            timeout=15.0,
            transport=self.transport,
        ) as client:
            try:
                response = await client.get(url)
                response.raise_for_status()
                return response.text
            except httpx.HTTPError as e:
                log.error(f"Error fetching {url}: {e}")
                raise FetchError(f"{self.source_name}: {e}") from e

    @abstractmethod
    async def fetch_events(self, now: datetime) -> list[EventSchema]:
        """Builds the source's occurrences. May raise FetchError or ParseError."""

    async def extract(self, now: Optional[datetime] = None) -> list[EventSchema]:
        """Never raises: any failure becomes an empty contribution."""
        now = now or datetime.now()
        try:
            events = await self.fetch_events(now)
        except Exception as e:
            log.error(f"❌ Source {self.source_name} failed: {e}")
            return []
        return [ev for ev in events if ev.start_time > now]
