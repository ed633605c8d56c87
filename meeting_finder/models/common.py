# File: meeting_finder/models/common.py

from typing import Any, Set


def parse_attendees(value: Any, field_name: str = 'attendees') -> Set[str]:
    """Turn a row's attendee list into a set of names. None means nobody."""
    if value is None:
        return set()
    if isinstance(value, str):
        raise TypeError(f"'{field_name}' must be a list of names, not a string: {value!r}")
    return {str(name) for name in value}
