"""
Classes & workshops from libraries, community centers and studios.
Two shapes: recurring classes (day offsets repeated for N weeks) and classes
on specific day offsets.
"""
from datetime import datetime
from lex_event_hub.schemas.event import EventSchema
from lex_event_hub.services.extractors.base import BaseExtractor, days_from

CLASSES = [
    {
        "title": "Beginner Yoga Class",
        "description": "Learn basic yoga poses and breathing techniques. No experience needed.",
        "weekly_offsets": [2, 4, 6],
        "weeks": 4,
        "hour": 18,
        "location": "Lexington Community Center, Lexington, KY",
        "url": "https://www.lexingtonky.gov/",
    },
    {
        "title": "Digital Photography Workshop",
        "description": "Master the basics of digital photography composition, lighting, and editing.",
        "days": [8, 22],
        "hour": 19,
        "location": "Lexington Public Library Downtown, Lexington, KY",
        "url": "https://www.lexpublib.org/",
    },
    {
        "title": "Creative Writing Class",
        "description": "Explore fiction, poetry, and creative writing techniques with experienced instructors.",
        "days": [3, 10, 17, 24],
        "hour": 18,
        "location": "Lexington Public Library, Lexington, KY",
        "url": "https://www.lexpublib.org/",
    },
    {
        "title": "Wood Working Workshop",
        "description": "Build and design furniture and home items. Tools and materials provided.",
        "days": [7, 14],
        "hour": 17,
        "location": "Lexington Maker Space, Lexington, KY",
        "url": "https://www.lexmakerspace.org/",
    },
    {
        "title": "Cooking Class: Thai Cuisine",
        "description": "Learn to prepare authentic Thai dishes. Includes a meal to take home.",
        "days": [6, 13, 20],
        "hour": 18,
        "location": "Williams Fine Foods, Lexington, KY",
        "url": "https://www.lexingtonky.gov/",
    },
]


def _offsets(cls: dict) -> list[int]:
    if "weekly_offsets" in cls:
        return [day + week * 7 for week in range(cls["weeks"]) for day in cls["weekly_offsets"]]
    return cls["days"]


class ClassesExtractor(BaseExtractor):
    source_name = "Classes & Workshops"

    async def fetch_events(self, now: datetime) -> list[EventSchema]:
        events = []
        for cls in CLASSES:
            for offset in _offsets(cls):
                events.append(EventSchema(
                    title=cls["title"],
                    description=cls["description"],
                    start_time=days_from(now, offset, cls["hour"]),
                    location=cls["location"],
                    category="workshop",
                    is_free=False,
                    source_url=cls["url"],
                    image_url="https://images.unsplash.com/photo-1552664730-d307ca884978?auto=format&fit=crop&q=80",
                ))
        return events
