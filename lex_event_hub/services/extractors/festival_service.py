"""
Festivals & seasonal events.
Reason: Festivals have calendar dates (not offsets). Dates already past in the
current year drop out through the base class future filter.
"""
from datetime import datetime
from lex_event_hub.schemas.event import EventSchema
from lex_event_hub.services.extractors.base import BaseExtractor

# (month, day) pairs, 10:00 local
FESTIVALS = [
    {
        "title": "Lexington Food and Wine Festival",
        "description": "Celebrate local cuisine and regional wines. Featuring local restaurants and breweries.",
        "dates": [(4, 15)],
        "location": "Downtown Lexington, KY",
        "url": "https://www.lfwf.org/",
        "free": False,
    },
    {
        "title": "Bourbon Off Fest",
        "description": "Regional bourbon and spirits festival with tastings and live entertainment.",
        "dates": [(5, 10)],
        "location": "Lexington Convention Center, KY",
        "url": "https://www.bourbonoffest.com/",
        "free": False,
    },
    {
        "title": "Lexington Festival of the Arts",
        "description": "Visual arts, performing arts, and cultural celebrations throughout downtown.",
        "dates": [(5, 18)],
        "location": "Downtown Lexington, KY",
        "url": "https://www.lexingtonarts.org/",
        "free": True,
    },
    {
        "title": "Summer Concert Series",
        "description": "Free outdoor concerts featuring local and regional bands throughout the summer.",
        "dates": [(6, 1), (6, 8), (6, 15)],
        "location": "Various Parks, Lexington, KY",
        "url": "https://www.lexingtonky.gov/",
        "free": True,
    },
]


class FestivalExtractor(BaseExtractor):
    source_name = "Festivals & Seasonal Events"
    HOUR = 10

    async def fetch_events(self, now: datetime) -> list[EventSchema]:
        events = []
        for festival in FESTIVALS:
            for month, day in festival["dates"]:
                events.append(EventSchema(
                    title=festival["title"],
                    description=festival["description"],
                    start_time=datetime(now.year, month, day, self.HOUR),
                    location=festival["location"],
                    category="festival",
                    is_free=festival["free"],
                    source_url=festival["url"],
                    image_url="https://images.unsplash.com/photo-1459749411175-04bf5292ceea?auto=format&fit=crop&q=80",
                ))
        return events
