"""
Quality standard: Solid & Clean Architecture (v1.0.0).
Reason: Single entry point wiring the JSON API, the pages and the startup
routine (schema creation + demo seed).
"""
from datetime import datetime, timezone

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from lex_event_hub import __version__
from lex_event_hub.core.config import HOST, IS_PRODUCTION, PORT, SEED_DATABASE
from lex_event_hub.core.database import AsyncSessionLocal, init_db
from lex_event_hub.core.logger import log
from lex_event_hub.routers import events, pages
from lex_event_hub.services.storage import EventStorage

app = FastAPI(
    title="Lexington Event Hub",
    description="Local community events: farmers markets, workshops, festivals and more",
    version=__version__,
    docs_url=None if IS_PRODUCTION else "/docs",
    redoc_url=None if IS_PRODUCTION else "/redoc",
)

app.include_router(events.router)
app.include_router(pages.router)


@app.on_event("startup")
async def startup_event():
    """
    Reason: Create the schema and seed demo data as soon as the server starts.
    """
    log.info(f"🚀 Starting Lexington Event Hub v{__version__}...")
    await init_db()
    if not SEED_DATABASE:
        return
    try:
        async with AsyncSessionLocal() as session:
            await EventStorage(session).seed_if_empty()
    except Exception as e:
        log.error(f"❌ Failed to seed the database: {e}")


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Validation failures answer 400 with the first error as the message."""
    errors = exc.errors()
    first = errors[0] if errors else {}
    field = ".".join(str(part) for part in first.get("loc", ()) if part not in ("body", "query", "path"))
    detail = first.get("msg", "Invalid request")
    message = f"{field}: {detail}" if field else detail
    log.warning(f"⚠️ Rejected {request.method} {request.url.path}: {message}")
    return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content={"message": message})


@app.get("/health")
async def health_check():
    return {
        "status": "healthy",
        "timestamp": datetime.now(timezone.utc).isoformat(),
        "version": __version__,
    }


if __name__ == "__main__":
    import uvicorn
    uvicorn.run("lex_event_hub.main:app", host=HOST, port=PORT, reload=not IS_PRODUCTION, log_config=None)
