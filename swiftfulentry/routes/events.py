"""Event routes for the dashboard, creation form and join screen."""
from datetime import UTC, datetime
from pathlib import Path

from fastapi import APIRouter, Depends, Form, Request
from fastapi.responses import HTMLResponse, JSONResponse, RedirectResponse
from fastapi.templating import Jinja2Templates

from swiftfulentry.events.store import EventStore, get_event_store
from swiftfulentry.events.validation import EventValidationError

router = APIRouter(prefix="/events", tags=["events"])
templates = Jinja2Templates(directory=Path(__file__).parent.parent / "templates")

# datetime-local input format
DATE_INPUT_FORMAT = "%Y-%m-%dT%H:%M"


def wants_json(request: Request) -> bool:
    """Check if the client prefers JSON response (AJAX request)."""
    accept = request.headers.get("accept", "")
    return "application/json" in accept


def format_event_count(count: int) -> str:
    """Label for the number of events, e.g. "1 event" or "3 events"."""
    return f"{count} event{'' if count == 1 else 's'}"


@router.get("", response_class=HTMLResponse)
async def list_events(request: Request, store: EventStore = Depends(get_event_store)):
    """
    Display the event dashboard.

    Lists every event, most future date first, with actions to create or
    join an event. Shows an empty state when there are no events. Returns
    the list as JSON when Accept: application/json is present.
    """
    events = store.list_events()

    if wants_json(request):
        return JSONResponse([event.model_dump(mode="json") for event in events])

    return templates.TemplateResponse(
        request,
        "events.html",
        {"events": events, "count_label": format_event_count(len(events))},
    )


@router.get("/new", response_class=HTMLResponse)
async def new_event_form(request: Request):
    """Display an empty creation form with the date preset to now."""
    return templates.TemplateResponse(
        request,
        "create_event.html",
        {
            "form": {
                "name": "",
                "date": datetime.now(UTC).strftime(DATE_INPUT_FORMAT),
                "location": "",
                "max_attendees": "",
                "description": "",
            },
            "is_valid": False,
            "error": None,
        },
    )


@router.post("/new/check")
async def check_event_form(
    name: str = Form(""),
    location: str = Form(""),
    max_attendees: str = Form(""),
    store: EventStore = Depends(get_event_store),
):
    """
    Live check of the creation form.

    Returns JSON with a single "valid" flag used to enable or disable
    the save button while the user types.
    """
    return {"valid": store.is_form_valid(name, location, max_attendees)}


@router.post("/new")
async def create_event(
    request: Request,
    date: datetime = Form(...),
    name: str = Form(""),
    location: str = Form(""),
    max_attendees: str = Form(""),
    description: str = Form(""),
    store: EventStore = Depends(get_event_store),
):
    """
    Create an event from the submitted form.

    Runs the full validation regardless of the live check. On success
    redirects to the dashboard. On failure returns 400 and re-renders the
    form with every entered value kept and the reason shown in a dialog.
    """
    try:
        event = store.validate_and_create(
            name, date, location, max_attendees, description
        )
    except EventValidationError as e:
        if wants_json(request):
            return JSONResponse(
                {"error": e.failure.value, "message": e.message}, status_code=400
            )
        return templates.TemplateResponse(
            request,
            "create_event.html",
            {
                "form": {
                    "name": name,
                    "date": date.strftime(DATE_INPUT_FORMAT),
                    "location": location,
                    "max_attendees": max_attendees,
                    "description": description,
                },
                "is_valid": store.is_form_valid(name, location, max_attendees),
                "error": e.message,
            },
            status_code=400,
        )

    if wants_json(request):
        return JSONResponse(event.model_dump(mode="json"), status_code=201)

    return RedirectResponse("/events", status_code=303)


@router.get("/join", response_class=HTMLResponse)
async def join_event_page(request: Request):
    """Display the join screen with the demo join action."""
    return templates.TemplateResponse(request, "join_event.html", {})


@router.post("/join")
async def join_event(request: Request, store: EventStore = Depends(get_event_store)):
    """
    Join the demo event.

    Placeholder for event discovery: always adds the same demo event,
    dated 24 hours from now, then redirects to the dashboard.
    """
    event = store.add_demo_joined_event()

    if wants_json(request):
        return JSONResponse(event.model_dump(mode="json"), status_code=201)

    return RedirectResponse("/events", status_code=303)
