"""
Quality standard: Server-rendered pages.
Reason: The grid, the detail page and the create form are plain Jinja2 views
over the same services as the JSON API.
"""
from pathlib import Path

from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates

from lex_event_hub.core.logger import log
from lex_event_hub.routers.events import get_event_manager, get_event_query, get_storage
from lex_event_hub.services.filters import EventFilter, EventQuery
from lex_event_hub.services.manager import EventManager
from lex_event_hub.services.storage import EventStorage

templates = Jinja2Templates(directory=str(Path(__file__).resolve().parent.parent / "templates"))

router = APIRouter(tags=["Pages"], include_in_schema=False)

FILTER_TABS = [
    (EventFilter.ALL, "All"),
    (EventFilter.WEEK, "This Week"),
    (EventFilter.WEEKEND, "Weekend"),
    (EventFilter.FREE, "Free"),
]


@router.get("/", response_class=HTMLResponse)
async def index(
    request: Request,
    query: EventQuery = Depends(get_event_query),
    manager: EventManager = Depends(get_event_manager),
):
    try:
        listing = await manager.live_listing(query)
        events, error = listing.events, None
    except Exception as e:
        log.error(f"❌ Error rendering the event grid: {e}")
        events, error = [], "Failed to load events. Please try again later."
    return templates.TemplateResponse(request, "index.html", {
        "events": events,
        "error": error,
        "search": query.search or "",
        "active_filter": query.mode,
        "tabs": FILTER_TABS,
    })


@router.get("/events/new", response_class=HTMLResponse)
async def new_event_form(request: Request):
    return templates.TemplateResponse(request, "event_form.html", {})


@router.get("/events/{event_id}", response_class=HTMLResponse)
async def event_detail(request: Request, event_id: int, storage: EventStorage = Depends(get_storage)):
    event = await storage.get_event(event_id)
    if event is None:
        return templates.TemplateResponse(
            request, "not_found.html", {"event_id": event_id}, status_code=status.HTTP_404_NOT_FOUND
        )
    return templates.TemplateResponse(request, "event_detail.html", {"event": event})
