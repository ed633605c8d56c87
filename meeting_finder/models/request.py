# File: meeting_finder/models/request.py

from dataclasses import dataclass, field
from typing import Set

from .common import parse_attendees


@dataclass
class MeetingRequest:
    """A request for a meeting slot of a given length."""
    duration: int
    mandatory_attendees: Set[str] = field(default_factory=set)
    optional_attendees: Set[str] = field(default_factory=set)

    def __post_init__(self):
        """Validate duration and copy attendee collections."""
        if self.duration <= 0:
            raise ValueError(f"Duration must be positive, got {self.duration}")
        if isinstance(self.mandatory_attendees, str) or isinstance(self.optional_attendees, str):
            raise TypeError("Attendees must be collections of names, not strings")
        self.mandatory_attendees = set(self.mandatory_attendees)
        self.optional_attendees = set(self.optional_attendees)

    @property
    def all_attendees(self) -> Set[str]:
        """Everyone named in the request, mandatory or optional."""
        return self.mandatory_attendees | self.optional_attendees

    def has_attendees(self) -> bool:
        return bool(self.mandatory_attendees or self.optional_attendees)

    def add_optional_attendee(self, name: str) -> None:
        self.optional_attendees.add(name)

    def to_dict(self) -> dict:
        return {
            'mandatory_attendees': sorted(self.mandatory_attendees),
            'optional_attendees': sorted(self.optional_attendees),
            'duration': self.duration,
        }


def meeting_request_from_dict(data: dict) -> MeetingRequest:
    """Create a MeetingRequest from a dictionary. 'duration' is required."""
    if 'duration' not in data:
        raise ValueError(f"Meeting request is missing 'duration': {data}")

    return MeetingRequest(
        duration=int(data['duration']),
        mandatory_attendees=parse_attendees(data.get('mandatory_attendees'), 'mandatory_attendees'),
        optional_attendees=parse_attendees(data.get('optional_attendees'), 'optional_attendees'),
    )
