from .errors import InvalidIntervalError
from .interval import (
    Interval,
    DAY_LENGTH,
    START_OF_DAY,
    END_OF_DAY,
    END_OF_DAY_EXCLUSIVE,
    WHOLE_DAY,
    ORDER_BY_START,
    ORDER_BY_END,
    time_of_day,
)
from .event import Event, event_from_dict
from .request import MeetingRequest, meeting_request_from_dict

__all__ = [
    "InvalidIntervalError",
    "Interval",
    "DAY_LENGTH",
    "START_OF_DAY",
    "END_OF_DAY",
    "END_OF_DAY_EXCLUSIVE",
    "WHOLE_DAY",
    "ORDER_BY_START",
    "ORDER_BY_END",
    "time_of_day",
    "Event",
    "event_from_dict",
    "MeetingRequest",
    "meeting_request_from_dict"
]
