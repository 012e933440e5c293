"""
Quality standard: Thin routes over services.
Reason: The live listing goes through the source manager + filter; everything
else goes to the database. `/stored` is declared before `/{event_id}` so the
literal path wins.
"""
from typing import Optional

from fastapi import APIRouter, Depends, Query, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.ext.asyncio import AsyncSession

from lex_event_hub.core.database import get_db
from lex_event_hub.core.logger import log
from lex_event_hub.schemas.event import EventCreate, EventSchema, LiveEventsResponse, MessageResponse
from lex_event_hub.services.filters import EventFilter, EventQuery
from lex_event_hub.services.manager import EventManager
from lex_event_hub.services.storage import EventStorage

router = APIRouter(prefix="/api/events", tags=["Events"])


def get_storage(db: AsyncSession = Depends(get_db)) -> EventStorage:
    return EventStorage(db)


def get_event_manager() -> EventManager:
    return EventManager()


def get_event_query(
    category: Optional[str] = Query(None, description="Filter by category (music, food...)"),
    search: Optional[str] = Query(None, description="Case-insensitive text search"),
    filter: Optional[str] = Query(None, description="Time window: all, week, weekend, free (empty means all)"),
) -> EventQuery:
    """Builds the shared query. Empty parameters fall back to the defaults; unknown windows are rejected."""
    try:
        return EventQuery(mode=filter, search=search, category=category)
    except ValueError:
        allowed = ", ".join(f"'{mode.value}'" for mode in EventFilter)
        raise RequestValidationError([{
            "loc": ("query", "filter"),
            "msg": f"Input should be one of {allowed}",
            "type": "enum",
            "input": filter,
        }])


@router.get(
    "",
    response_model=LiveEventsResponse,
    responses={500: {"model": MessageResponse}},
)
async def list_live_events(
    query: EventQuery = Depends(get_event_query),
    manager: EventManager = Depends(get_event_manager),
):
    """Live events from every source, deduplicated, sorted and filtered.

    Ids are positions in this response and change between requests.
    """
    try:
        return await manager.live_listing(query)
    except Exception as e:
        log.error(f"❌ Critical error on live listing: {e}")
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"message": "Failed to load events", "error": str(e)},
        )


@router.get("/stored", response_model=list[EventSchema])
async def list_stored_events(
    query: EventQuery = Depends(get_event_query),
    storage: EventStorage = Depends(get_storage),
):
    """Persisted events ordered by start time."""
    return await storage.list_events(query)


@router.get(
    "/{event_id}",
    response_model=EventSchema,
    responses={404: {"model": MessageResponse}},
)
async def get_event(event_id: int, storage: EventStorage = Depends(get_storage)):
    event = await storage.get_event(event_id)
    if event is None:
        return JSONResponse(status_code=status.HTTP_404_NOT_FOUND, content={"message": "Event not found"})
    return event


@router.post(
    "",
    response_model=EventSchema,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"model": MessageResponse}, 500: {"model": MessageResponse}},
)
async def create_event(payload: EventCreate, storage: EventStorage = Depends(get_storage)):
    try:
        event = await storage.create_event(payload)
    except Exception as e:
        log.error(f"❌ Failed to create event '{payload.title}': {e}")
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"message": "Internal server error"},
        )
    log.info(f"📝 Event created: #{event.id} {event.title}")
    return event
