# File: meeting_finder/models/interval.py
"""
Half-open time intervals within a single day.

All values are integer minutes since midnight. An interval [start, end)
includes start and excludes end.
"""

from dataclasses import dataclass
from operator import attrgetter
from typing import Union

from .errors import InvalidIntervalError

MINUTES_PER_HOUR = 60
HOURS_PER_DAY = 24

DAY_LENGTH = HOURS_PER_DAY * MINUTES_PER_HOUR
START_OF_DAY = 0
END_OF_DAY_EXCLUSIVE = DAY_LENGTH
END_OF_DAY = DAY_LENGTH - 1  # Last minute of the day, for inclusive construction


def time_of_day(hours: int, minutes: int = 0) -> int:
    """
    Convert a wall clock time to minutes since midnight.

    Args:
        hours: Hour of the day (0-23)
        minutes: Minute of the hour (0-59)

    Returns:
        Minutes since midnight

    Example:
        >>> time_of_day(9, 30)
        570
    """
    if not 0 <= hours < HOURS_PER_DAY:
        raise ValueError(f"Hours must be between 0 and 23, got {hours}")
    if not 0 <= minutes < MINUTES_PER_HOUR:
        raise ValueError(f"Minutes must be between 0 and 59, got {minutes}")
    return hours * MINUTES_PER_HOUR + minutes


@dataclass(frozen=True, order=True)
class Interval:
    """Immutable [start, end) span of minutes within one day."""
    start: int
    end: int

    def __post_init__(self):
        """Validate bounds."""
        if self.start < START_OF_DAY:
            raise InvalidIntervalError(self.start, self.end, "start is before the start of the day")
        if self.end > END_OF_DAY_EXCLUSIVE:
            raise InvalidIntervalError(self.start, self.end, "end is after the end of the day")
        if self.start > self.end:
            raise InvalidIntervalError(self.start, self.end, "start is after end")

    @classmethod
    def from_start_end(cls, start: int, end: int, inclusive: bool = False) -> 'Interval':
        """
        Create an interval from its bounds.

        With inclusive=True, end is the last minute inside the interval,
        so from_start_end(0, END_OF_DAY, inclusive=True) is the whole day.
        """
        return cls(start, end + 1 if inclusive else end)

    @classmethod
    def from_start_duration(cls, start: int, duration: int) -> 'Interval':
        """Create an interval starting at start and lasting duration minutes."""
        return cls(start, start + duration)

    @property
    def duration(self) -> int:
        return self.end - self.start

    def overlaps(self, other: 'Interval') -> bool:
        """Check if the two intervals share at least one minute."""
        return self.start < other.end and other.start < self.end

    def contains(self, other: Union['Interval', int]) -> bool:
        """Check if another interval, or a single minute, lies inside this one."""
        if isinstance(other, Interval):
            return self.start <= other.start and other.end <= self.end
        return self.start <= other < self.end

    def clock_label(self) -> str:
        """Format as HH:MM-HH:MM, e.g. '09:00-10:30'."""
        return f"{_clock(self.start)}-{_clock(self.end)}"

    def to_dict(self) -> dict:
        return {
            'start': self.start,
            'end': self.end,
            'duration': self.duration,
        }

    def __str__(self) -> str:
        return f"[{self.start}, {self.end})"


def _clock(minute: int) -> str:
    hours, minutes = divmod(minute, MINUTES_PER_HOUR)
    return f"{hours:02d}:{minutes:02d}"


# Sort keys. The natural ordering of Interval matches ORDER_BY_START.
ORDER_BY_START = attrgetter('start', 'end')
ORDER_BY_END = attrgetter('end', 'start')

WHOLE_DAY = Interval(START_OF_DAY, END_OF_DAY_EXCLUSIVE)
