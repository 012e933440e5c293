"""
Quality standard: Repository over AsyncSession.
Reason: Persisted events are append-only. Listing reuses EventQuery so the
database and the live path filter identically, search included.
"""
from datetime import datetime, timedelta
from typing import Optional

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from lex_event_hub.core.logger import log
from lex_event_hub.models import EventModel
from lex_event_hub.schemas.event import EventCreate
from lex_event_hub.services.filters import EventQuery


def _demo_events(now: datetime) -> list[EventCreate]:
    return [
        EventCreate(
            title="Downtown Farmers Market",
            description="Fresh produce, local honey, and artisan crafts at the pavilion. Come support local farmers!",
            start_time=now + timedelta(days=2),
            location="Tandy Centennial Park",
            category="food",
            is_free=True,
            image_url="https://images.unsplash.com/photo-1488459716781-31db52582fe9?auto=format&fit=crop&q=80",
            source_url="#",
        ),
        EventCreate(
            title="Jazz in the Park",
            description="An evening of smooth jazz under the stars. Bring a blanket and enjoy the music.",
            start_time=now + timedelta(days=5),
            location="Woodland Park",
            category="music",
            is_free=True,
            image_url="https://images.unsplash.com/photo-1511192336575-5a79af67a629?auto=format&fit=crop&q=80",
            source_url="#",
        ),
        EventCreate(
            title="React & Coffee Workshop",
            description="Learn the basics of React while enjoying local brew. Beginners welcome!",
            start_time=now + timedelta(days=3),
            location="North Lime Coffee & Donuts",
            category="workshop",
            is_free=False,
            image_url="https://images.unsplash.com/photo-1517048676732-d65bc937f952?auto=format&fit=crop&q=80",
            source_url="#",
        ),
        EventCreate(
            title="Night Market",
            description="Food trucks, vendors, and live music taking over the streets.",
            start_time=now + timedelta(days=10),
            location="North Limestone",
            category="community",
            is_free=True,
            image_url="https://images.unsplash.com/photo-1555939594-58d7cb561ad1?auto=format&fit=crop&q=80",
            source_url="#",
        ),
    ]


class EventStorage:
    def __init__(self, session: AsyncSession):
        self.session = session

    async def list_events(self, query: Optional[EventQuery] = None) -> list[EventModel]:
        query = query or EventQuery()
        stmt = (
            select(EventModel)
            .where(*query.where_clauses(EventModel))
            .order_by(EventModel.start_time.asc(), EventModel.id.asc())
        )
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def get_event(self, event_id: int) -> Optional[EventModel]:
        return await self.session.get(EventModel, event_id)

    async def create_event(self, payload: EventCreate) -> EventModel:
        event = EventModel(**payload.model_dump(include=set(EventCreate.model_fields)))
        self.session.add(event)
        await self.session.commit()
        await self.session.refresh(event)
        log.debug(f"Event stored: {event}")
        return event

    async def count(self) -> int:
        result = await self.session.execute(select(func.count()).select_from(EventModel))
        return result.scalar_one()

    async def find_keys(self) -> set[str]:
        """Dedup keys (title|date) already present in the table."""
        result = await self.session.execute(select(EventModel.title, EventModel.start_time))
        return {f"{title}|{start.date().isoformat()}" for title, start in result.all()}

    async def seed_if_empty(self, now: Optional[datetime] = None) -> int:
        if await self.count() > 0:
            return 0
        now = now or datetime.now()
        demo = _demo_events(now)
        for payload in demo:
            self.session.add(EventModel(**payload.model_dump()))
        await self.session.commit()
        log.info(f"🌱 Database seeded with {len(demo)} demo events.")
        return len(demo)
