from datetime import datetime
from lex_event_hub.schemas.event import EventSchema
from lex_event_hub.services.extractors.base import BaseExtractor, days_from

ZOO_LOCATION = "Lexington Zoo, 4909 Versailles Road, Lexington, KY"

ZOO_PROGRAMS = [
    {
        "title": "Zoo Summer Concert Series",
        "description": "Live music performances at the Lexington Zoo. Family-friendly entertainment on select dates.",
        "days": [7, 14, 21],
        "hour": 18,
    },
    {
        "title": "Zoo Educational Programs",
        "description": "Learn about wildlife conservation and animal care from expert zookeepers.",
        "days": [3, 10, 17, 24],
        "hour": 14,
    },
]


class ZooExtractor(BaseExtractor):
    source_name = "Lexington Zoo"
    URL = "https://www.lexingtonzoo.org/"

    async def fetch_events(self, now: datetime) -> list[EventSchema]:
        events = []
        for program in ZOO_PROGRAMS:
            for offset in program["days"]:
                events.append(EventSchema(
                    title=program["title"],
                    description=program["description"],
                    start_time=days_from(now, offset, program["hour"]),
                    location=ZOO_LOCATION,
                    category="attractions",
                    is_free=False,
                    source_url=self.URL,
                    image_url="https://images.unsplash.com/photo-1611003228941-98852ba62227?auto=format&fit=crop&q=80",
                ))
        return events
