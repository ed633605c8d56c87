# File: meeting_finder/models/errors.py
"""
Exceptions raised by Meeting Finder models.
"""


class InvalidIntervalError(ValueError):
    """Raised when an interval is built with bounds outside the day or start > end."""

    def __init__(self, start: int, end: int, reason: str):
        self.start = start
        self.end = end
        self.reason = reason
        super().__init__(f"Invalid interval [{start}, {end}): {reason}")
