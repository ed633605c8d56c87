# File: meeting_finder/models/event.py

from dataclasses import dataclass, field
from typing import FrozenSet, Iterable

from .common import parse_attendees
from .interval import Interval


@dataclass
class Event:
    """A fixed busy interval shared by a set of attendees."""
    title: str
    when: Interval
    attendees: FrozenSet[str] = field(default_factory=frozenset)

    def __post_init__(self):
        """Freeze the attendee collection."""
        if isinstance(self.attendees, str):
            raise TypeError(f"Attendees must be a collection of names, not a string: {self.title}")
        self.attendees = frozenset(self.attendees)

    def involves_any(self, names: Iterable[str]) -> bool:
        """Check if at least one of the given attendees takes part in this event."""
        return not self.attendees.isdisjoint(names)

    def to_dict(self) -> dict:
        return {
            'title': self.title,
            'start': self.when.start,
            'end': self.when.end,
            'attendees': sorted(self.attendees),
        }


def event_from_dict(data: dict) -> Event:
    """
    Create an Event from a plain row.

    The row must carry 'start' and either 'end' or 'duration', all in
    minutes since midnight.
    """
    if 'start' not in data:
        raise ValueError(f"Event row is missing 'start': {data}")

    start = int(data['start'])
    if 'end' in data:
        when = Interval.from_start_end(start, int(data['end']))
    elif 'duration' in data:
        when = Interval.from_start_duration(start, int(data['duration']))
    else:
        raise ValueError(f"Event row needs 'end' or 'duration': {data}")

    attendees = parse_attendees(data.get('attendees'))

    return Event(
        title=str(data.get('title', 'Untitled Event')),
        when=when,
        attendees=frozenset(attendees),
    )
