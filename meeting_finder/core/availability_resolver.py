# File: meeting_finder/core/availability_resolver.py
"""
Availability resolver for Meeting Finder.
Decides which free intervals to offer for a meeting request.

Preference order:
1. Slots where every mandatory and optional attendee is free.
2. If there are none and the request has mandatory attendees, slots where
   the mandatory attendees are free (possibly none).
3. With no mandatory attendees, slots where the optional attendees are free.
"""

from typing import Collection, Iterable, List, Set

from meeting_finder.models import Event, Interval, MeetingRequest, DAY_LENGTH, WHOLE_DAY
from meeting_finder.processors.busy_processor import busy_intervals_for, find_free_intervals
from meeting_finder.utils.logger import LoggerMixin


class AvailabilityResolver(LoggerMixin):
    """
    Finds meeting slots for a request given existing events.

    Holds no per-call state, so one instance can serve concurrent callers.
    """

    def resolve(self, events: Iterable[Event], request: MeetingRequest) -> List[Interval]:
        """
        Compute the free intervals that satisfy a meeting request.

        Args:
            events: Existing events, in any order. Read once, so a
                generator is fine.
            request: Attendees and requested duration

        Returns:
            Non-overlapping intervals sorted by start, each at least
            request.duration long. Empty when no slot exists;
            [WHOLE_DAY] when nothing constrains the meeting.
        """
        if request.duration > DAY_LENGTH:
            self.logger.info(
                f"Requested duration {request.duration} exceeds the day ({DAY_LENGTH}), no slots"
            )
            return []

        events = list(events)

        if not events or not request.has_attendees():
            self.logger.info("No events or attendees to avoid, whole day is free")
            return [WHOLE_DAY]

        everyone = self._free_for(events, request.all_attendees, request.duration)
        if everyone:
            self.logger.info(f"Found {len(everyone)} slots for all attendees")
            return everyone

        if request.mandatory_attendees:
            mandatory = self._free_for(events, request.mandatory_attendees, request.duration)
            self.logger.info(
                f"No slots for all attendees, {len(mandatory)} slots for mandatory attendees"
            )
            return mandatory

        optional = self._free_for(events, request.optional_attendees, request.duration)
        self.logger.info(f"No mandatory attendees, {len(optional)} slots for optional attendees")
        return optional

    def _free_for(self, events: Collection[Event], attendees: Set[str], duration: int) -> List[Interval]:
        busy = busy_intervals_for(events, attendees)
        free = find_free_intervals(busy, duration)
        self.logger.debug(f"Free for {sorted(attendees)}: {', '.join(i.clock_label() for i in free) or 'none'}")
        return free


def resolve(events: Iterable[Event], request: MeetingRequest) -> List[Interval]:
    """Compute the free intervals for request. See AvailabilityResolver.resolve."""
    return AvailabilityResolver().resolve(events, request)
