from __future__ import annotations

class FullCalendarError(ValueError):
    """Base class for errors raised while building or encoding events."""

class InvalidConfiguration(FullCalendarError):
    """Raised when an event is constructed with conflicting or unusable fields."""

class EncodingFailure(FullCalendarError):
    """Raised when event data cannot be encoded as JSON."""
