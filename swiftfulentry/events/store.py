"""In-memory event store for the dashboard."""
import logging
from datetime import UTC, datetime, timedelta

from fastapi import Request

from swiftfulentry.events.validation import (
    EventValidationError,
    ValidationFailure,
    check_event_form,
)
from swiftfulentry.models import Event

logger = logging.getLogger(__name__)

# Fixed record added by the join placeholder
DEMO_EVENT_NAME = "Demo Conference"
DEMO_EVENT_LOCATION = "Conference Center"
DEMO_EVENT_MAX_ATTENDEES = 50
DEMO_EVENT_DESCRIPTION = "A demo event to show the join functionality"
DEMO_EVENT_LEAD_TIME = timedelta(hours=24)


def _sort_key(event: Event) -> datetime:
    """Sort key treating naive datetimes as UTC."""
    if event.date.tzinfo is None:
        return event.date.replace(tzinfo=UTC)
    return event.date


class EventStore:
    """
    Ordered collection of events for the running application.

    Events are kept sorted by date, most future first. Events that share
    a date stay in insertion order. The only writes are validated creation
    and the demo join; events are never updated or removed.
    """

    def __init__(self):
        self._events: list[Event] = []

    def __len__(self) -> int:
        return len(self._events)

    def list_events(self) -> list[Event]:
        """Return a snapshot of the events in display order."""
        return list(self._events)

    def is_form_valid(
        self, raw_name: str, raw_location: str, raw_max_attendees: str
    ) -> bool:
        """Best-effort live check used to enable the form's save action."""
        return not isinstance(
            check_event_form(raw_name, raw_location, raw_max_attendees),
            ValidationFailure,
        )

    def validate_and_create(
        self,
        raw_name: str,
        raw_date: datetime,
        raw_location: str,
        raw_max_attendees: str,
        raw_description: str = "",
    ) -> Event:
        """
        Validate raw form input and add the resulting event.

        Text fields are trimmed before they are stored. The date is stored
        as given. Raises EventValidationError for the first rule that fails,
        in which case the store is left untouched.
        """
        result = check_event_form(raw_name, raw_location, raw_max_attendees)
        if isinstance(result, ValidationFailure):
            raise EventValidationError(result)

        event = Event(
            name=raw_name.strip(),
            date=raw_date,
            location=raw_location.strip(),
            max_attendees=result,
            description=raw_description.strip(),
            is_created_by_user=True,
        )
        self._insert(event)
        logger.info(f"Created event {event.id} ({event.name!r})")
        return event

    def add_demo_joined_event(self) -> Event:
        """
        Add the fixed demo event used by the join placeholder.

        The event is dated 24 hours from now and marked as not created by
        the user. No discovery or capacity checks take place.
        """
        event = Event(
            name=DEMO_EVENT_NAME,
            date=datetime.now(UTC) + DEMO_EVENT_LEAD_TIME,
            location=DEMO_EVENT_LOCATION,
            max_attendees=DEMO_EVENT_MAX_ATTENDEES,
            description=DEMO_EVENT_DESCRIPTION,
            is_created_by_user=False,
        )
        self._insert(event)
        logger.info(f"Joined demo event {event.id}")
        return event

    def _insert(self, event: Event) -> None:
        self._events.append(event)
        # list.sort is stable with reverse=True, so equal dates keep insertion order
        self._events.sort(key=_sort_key, reverse=True)


def get_event_store(request: Request) -> EventStore:
    """Dependency for getting the application's event store."""
    return request.app.state.event_store
