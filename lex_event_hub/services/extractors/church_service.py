"""
Quality standard: Recurring weekly programming.
Reason: Congregations publish fixed weekly services; each one is expanded into
its next eight occurrences.
"""
from datetime import datetime, timedelta
from lex_event_hub.schemas.event import EventSchema
from lex_event_hub.services.extractors.base import BaseExtractor, next_weekday

CHURCHES = [
    {
        "name": "Southland Christian Church",
        "event": "Sunday Worship Service",
        "weekday": 6,
        "hour": 10,
        "location": "3530 Man O War Blvd, Lexington, KY",
        "url": "https://www.southland.org/",
    },
    {
        "name": "First Presbyterian Church",
        "event": "Wednesday Evening Fellowship Dinner",
        "weekday": 2,
        "hour": 18,
        "location": "171 N Mill St, Lexington, KY",
        "url": "https://www.fpclexington.org/",
    },
]


class ChurchExtractor(BaseExtractor):
    source_name = "Local Churches"
    WEEKS = 8

    async def fetch_events(self, now: datetime) -> list[EventSchema]:
        events = []
        for church in CHURCHES:
            first = next_weekday(now, church["weekday"], church["hour"])
            for week in range(self.WEEKS):
                events.append(EventSchema(
                    title=f"{church['name']}: {church['event']}",
                    description=f"Join us for {church['event']} at {church['name']}.",
                    start_time=first + timedelta(weeks=week),
                    location=church["location"],
                    category="community",
                    is_free=True,
                    source_url=church["url"],
                    image_url="https://images.unsplash.com/photo-1516306574312-e4c05dab37fa?auto=format&fit=crop&q=80",
                ))
        return events
