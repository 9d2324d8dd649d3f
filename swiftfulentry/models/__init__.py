from swiftfulentry.models.event import Event

__all__ = ["Event"]
