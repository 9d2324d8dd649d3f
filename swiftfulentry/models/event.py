"""Event model for events tracked on the dashboard.

This module defines the Event model which represents a scheduled gathering
that the user either created directly or joined. Events live only in memory
for the lifetime of the running application and are never modified after
they are built.
"""

from datetime import datetime
from uuid import UUID, uuid4

from pydantic import BaseModel, ConfigDict, Field


class Event(BaseModel):
    """A scheduled gathering with a name, time, place and capacity.

    Events are created through the validated creation form or the demo
    join action. The model is frozen: assigning to any field after
    construction raises a validation error.

    Attributes:
        id: Unique identifier (UUID), generated at creation.
        name: Event name, already trimmed.
        date: When the event takes place. Past and future dates are allowed.
        location: Where the event takes place, already trimmed.
        max_attendees: Capacity limit, always greater than zero.
        description: Free text shown under the event, may be empty.
        is_created_by_user: True for events the user created, False for
            events obtained through the join flow.
    """
    model_config = ConfigDict(frozen=True)

    id: UUID = Field(default_factory=uuid4)
    name: str = Field(min_length=1)
    date: datetime
    location: str = Field(min_length=1)
    max_attendees: int = Field(gt=0)
    description: str = ""
    is_created_by_user: bool = True

    @property
    def status_label(self) -> str:
        """Badge text shown next to the event in the list."""
        return "Created" if self.is_created_by_user else "Joined"

    @property
    def capacity_label(self) -> str:
        return f"{self.max_attendees} max"
