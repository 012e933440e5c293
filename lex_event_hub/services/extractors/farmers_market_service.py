"""
Lexington Farmers Market v1.0
The market runs every Saturday morning; the next four Saturdays are listed.
"""
from datetime import datetime, timedelta
from lex_event_hub.schemas.event import EventSchema
from lex_event_hub.services.extractors.base import BaseExtractor, next_weekday

SATURDAY = 5


class FarmersMarketExtractor(BaseExtractor):
    source_name = "Lexington Farmers Market"
    URL = "https://www.lfmky.com/"
    WEEKS = 4

    async def fetch_events(self, now: datetime) -> list[EventSchema]:
        first = next_weekday(now, SATURDAY, hour=8)
        return [
            EventSchema(
                title="Downtown Farmers Market",
                description="Fresh local produce, honey, plants, and artisan goods. Support local farmers and producers.",
                start_time=first + timedelta(weeks=week),
                location="Tandy Centennial Park, Lexington, KY",
                category="food",
                is_free=True,
                source_url=self.URL,
                image_url="https://images.unsplash.com/photo-1488459716781-31db52582fe9?auto=format&fit=crop&q=80",
            )
            for week in range(self.WEEKS)
        ]
