"""SwiftfulEntry Event Dashboard Application."""
import logging
from contextlib import asynccontextmanager
from pathlib import Path

import uvicorn
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import RedirectResponse
from fastapi.staticfiles import StaticFiles

from swiftfulentry.core.config import settings
from swiftfulentry.events.store import EventStore
from swiftfulentry.routes import events

# Configure logging
log_dir = settings.log_dir
log_dir.mkdir(parents=True, exist_ok=True)
log_file = log_dir / "latest.log"

logging.basicConfig(
    level=logging.DEBUG if settings.debug else logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    filename=str(log_file),
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application startup and shutdown lifecycle."""
    # Startup
    logger.info("Starting SwiftfulEntry application")
    app.state.event_store = EventStore()
    yield
    # Shutdown
    logger.info(
        f"SwiftfulEntry application shut down, discarding {len(app.state.event_store)} events"
    )


app = FastAPI(
    title=settings.app_name,
    description="A single-screen dashboard for creating and joining events",
    version="0.1.0",
    lifespan=lifespan,
)

# Configure CORS for external access
origins = (
    ["*"]
    if settings.allowed_origins == "*"
    else [o.strip() for o in settings.allowed_origins.split(",")]
)
app.add_middleware(
    CORSMiddleware,
    allow_origins=origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Mount static files
app.mount(
    "/static",
    StaticFiles(directory=Path(__file__).parent / "static"),
    name="static",
)

# Include routers
app.include_router(events.router)


@app.get("/")
async def root(request: Request):
    """Redirect root to the event dashboard."""
    rp = request.scope.get("root_path", "")
    return RedirectResponse(f"{rp}/events")


@app.get("/health")
async def health():
    """Health check endpoint."""
    return {"status": "healthy", "app": settings.app_name}


def run():
    """Serve the application with uvicorn."""
    uvicorn.run(
        "swiftfulentry.main:app",
        host=settings.host,
        port=settings.port,
        reload=settings.debug,
    )
