"""
Volunteer opportunities in the Lexington area. Always free.
"""
from datetime import datetime
from lex_event_hub.schemas.event import EventSchema
from lex_event_hub.services.extractors.base import BaseExtractor, days_from

OPPORTUNITIES = [
    {
        "title": "Animal Shelter Volunteer Day",
        "description": "Help care for animals at the local shelter. Includes dog walking, cleaning, and socialization.",
        "days": [4, 11, 18, 25],
        "hour": 10,
        "location": "Lexington Humane Society, Lexington, KY",
        "url": "https://www.lhslex.org/",
    },
    {
        "title": "Community Garden Maintenance",
        "description": "Help maintain local community gardens and teach kids about growing food.",
        "days": [3, 10, 17, 24],
        "hour": 9,
        "location": "Various Community Gardens, Lexington, KY",
        "url": "https://www.lexingtonky.gov/",
    },
    {
        "title": "Literacy Tutor Training",
        "description": "Become a tutor for adult literacy programs. Training provided.",
        "days": [5, 12, 19],
        "hour": 18,
        "location": "Lexington Public Library, Lexington, KY",
        "url": "https://www.lexpublib.org/",
    },
    {
        "title": "Trail Restoration Project",
        "description": "Help restore and maintain local hiking trails. All skill levels welcome.",
        "days": [2, 9, 16, 23],
        "hour": 9,
        "location": "Raven Run Nature Sanctuary, Lexington, KY",
        "url": "https://www.ravenrun.org/",
    },
]


class VolunteerExtractor(BaseExtractor):
    source_name = "Volunteer Opportunities"

    async def fetch_events(self, now: datetime) -> list[EventSchema]:
        return [
            EventSchema(
                title=item["title"],
                description=item["description"],
                start_time=days_from(now, offset, item["hour"]),
                location=item["location"],
                category="volunteer",
                is_free=True,
                source_url=item["url"],
                image_url="https://images.unsplash.com/photo-1517457373614-b7152f800fd1?auto=format&fit=crop&q=80",
            )
            for item in OPPORTUNITIES
            for offset in item["days"]
        ]
