# File: meeting_finder/processors/busy_processor.py
"""
Busy interval processing for Meeting Finder.
Collects busy intervals for a group of attendees, merges them,
and finds the free gaps left in the day.
"""

from typing import Iterable, List, Set

from meeting_finder.models import (
    Event, Interval, ORDER_BY_START, START_OF_DAY, END_OF_DAY_EXCLUSIVE, WHOLE_DAY
)
from meeting_finder.utils.logger import setup_logger

logger = setup_logger(__name__)


def busy_intervals_for(events: Iterable[Event], attendees: Set[str]) -> List[Interval]:
    """
    Collect the intervals of every event that involves at least one of the attendees.

    Duplicates and overlapping intervals are kept; merge_busy_intervals
    deals with them.

    Args:
        events: Existing events, in any order
        attendees: Attendees whose busy time matters

    Returns:
        Busy intervals in event order
    """
    busy = [event.when for event in events if event.involves_any(attendees)]
    logger.debug(f"Found {len(busy)} busy intervals for {len(attendees)} attendees")
    return busy


def merge_busy_intervals(busy_intervals: Iterable[Interval]) -> List[Interval]:
    """
    Merge busy intervals into maximal, disjoint, non-touching intervals.

    Sorts by start and sweeps once, growing the current interval while the
    next one starts at or before its end. Zero-length intervals are merged
    like any other, so one standing alone still splits the free time around it.

    Example:
        >>> merge_busy_intervals([Interval(0, 30), Interval(60, 90), Interval(10, 20), Interval(30, 45)])
        [Interval(start=0, end=45), Interval(start=60, end=90)]
    """
    ordered = sorted(busy_intervals, key=ORDER_BY_START)
    if not ordered:
        return []

    merged: List[Interval] = []
    current_start, current_end = ordered[0].start, ordered[0].end

    for interval in ordered[1:]:
        if interval.start <= current_end:
            current_end = max(current_end, interval.end)
        else:
            merged.append(Interval(current_start, current_end))
            current_start, current_end = interval.start, interval.end

    merged.append(Interval(current_start, current_end))

    logger.debug(f"Merged {len(ordered)} busy intervals into {len(merged)}")
    return merged


def find_free_intervals(busy_intervals: Iterable[Interval], duration: int) -> List[Interval]:
    """
    Find the gaps between busy intervals that are at least duration long.

    With no busy intervals the whole day is returned, whatever the duration.

    Args:
        busy_intervals: Busy intervals, possibly unsorted and overlapping
        duration: Minimum gap length in minutes

    Returns:
        Free intervals sorted by start
    """
    busy = list(busy_intervals)
    if not busy:
        return [WHOLE_DAY]

    merged = merge_busy_intervals(busy)

    free: List[Interval] = []
    gap_start = START_OF_DAY

    for interval in merged:
        _add_if_long_enough(free, gap_start, interval.start, duration)
        gap_start = interval.end

    _add_if_long_enough(free, gap_start, END_OF_DAY_EXCLUSIVE, duration)

    logger.debug(f"Found {len(free)} free intervals of at least {duration} minutes")
    return free


def _add_if_long_enough(free: List[Interval], start: int, end: int, duration: int) -> None:
    if end - start >= duration:
        free.append(Interval(start, end))
