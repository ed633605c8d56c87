"""
Meeting Finder: finds free meeting slots within a day for mandatory and
optional attendees, given their existing events.
"""

from .models import (
    InvalidIntervalError,
    Interval,
    DAY_LENGTH,
    WHOLE_DAY,
    time_of_day,
    Event,
    event_from_dict,
    MeetingRequest,
    meeting_request_from_dict,
)
from .core.availability_resolver import AvailabilityResolver, resolve

__version__ = "0.1.0"

__all__ = [
    "InvalidIntervalError",
    "Interval",
    "DAY_LENGTH",
    "WHOLE_DAY",
    "time_of_day",
    "Event",
    "event_from_dict",
    "MeetingRequest",
    "meeting_request_from_dict",
    "AvailabilityResolver",
    "resolve"
]
