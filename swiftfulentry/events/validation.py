"""Validate raw event form input."""
import re
from enum import Enum

# Optional sign followed by ASCII digits, nothing else
ATTENDEE_COUNT_PATTERN = re.compile(r"[+-]?[0-9]+")

# Counts must fit a signed 64-bit integer
MAX_ATTENDEE_COUNT = 2**63 - 1


class ValidationFailure(str, Enum):
    """Reasons a creation form submission is rejected."""

    EMPTY_NAME = "empty_name"
    EMPTY_LOCATION = "empty_location"
    MISSING_ATTENDEE_COUNT = "missing_attendee_count"
    INVALID_ATTENDEE_COUNT = "invalid_attendee_count"

    @property
    def message(self) -> str:
        return FAILURE_MESSAGES[self]


FAILURE_MESSAGES = {
    ValidationFailure.EMPTY_NAME: "Event name is required",
    ValidationFailure.EMPTY_LOCATION: "Event location is required",
    ValidationFailure.MISSING_ATTENDEE_COUNT: "Max attendees is required",
    ValidationFailure.INVALID_ATTENDEE_COUNT: "Max attendees must be a positive number",
}


class EventValidationError(ValueError):
    """Raised when a creation form submission fails validation.

    Attributes:
        failure: Which rule rejected the submission.
        message: Human-readable text suitable for showing to the user.
    """

    def __init__(self, failure: ValidationFailure):
        self.failure = failure
        self.message = failure.message
        super().__init__(self.message)


def parse_attendee_count(raw: str) -> int | None:
    """
    Parse a max attendees field as an integer.

    Accepts an optional leading + or - followed by digits. Surrounding
    whitespace, underscores, decimals and out-of-range values are rejected.
    Returns None when the text is not a valid integer.
    """
    if not ATTENDEE_COUNT_PATTERN.fullmatch(raw):
        return None

    value = int(raw)
    if value > MAX_ATTENDEE_COUNT or value < -MAX_ATTENDEE_COUNT - 1:
        return None
    return value


def check_event_form(
    raw_name: str, raw_location: str, raw_max_attendees: str
) -> ValidationFailure | int:
    """
    Run the creation form rules in order, stopping at the first failure.

    Order: name, location, attendee count present, attendee count valid.
    Returns the failure, or the parsed attendee count when every rule passes.
    """
    if not raw_name.strip():
        return ValidationFailure.EMPTY_NAME

    if not raw_location.strip():
        return ValidationFailure.EMPTY_LOCATION

    if not raw_max_attendees:
        return ValidationFailure.MISSING_ATTENDEE_COUNT

    attendees = parse_attendee_count(raw_max_attendees)
    if attendees is None or attendees <= 0:
        return ValidationFailure.INVALID_ATTENDEE_COUNT

    return attendees
