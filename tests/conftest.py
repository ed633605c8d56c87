# File: tests/conftest.py
"""
Pytest configuration and shared fixtures.
Provides reusable events and meeting requests for all tests.
"""

import pytest
from pathlib import Path
import sys

# Add project root to path for imports
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from meeting_finder.models import Event, Interval, MeetingRequest, time_of_day
from meeting_finder.core.availability_resolver import AvailabilityResolver


# ==================== Resolver Fixtures ====================

@pytest.fixture
def resolver():
    """A fresh resolver."""
    return AvailabilityResolver()


# ==================== Event Fixtures ====================

@pytest.fixture
def morning_event():
    """Person A busy 09:00-10:00."""
    return Event(
        title="Standup",
        when=Interval(time_of_day(9), time_of_day(10)),
        attendees={"Person A"}
    )


@pytest.fixture
def two_person_events():
    """Person A busy 08:00-08:30, Person B busy 09:00-09:30."""
    return [
        Event("Event 1", Interval.from_start_duration(time_of_day(8), 30), {"Person A"}),
        Event("Event 2", Interval.from_start_duration(time_of_day(9), 30), {"Person B"}),
    ]


@pytest.fixture
def event_rows():
    """Event rows as a datastore would hand them over."""
    return [
        {'title': 'Standup', 'start': 540, 'end': 600, 'attendees': ['Person A']},
        {'title': 'Review', 'start': 660, 'duration': 30, 'attendees': ['Person A', 'Person B']},
        {'title': 'Blocked', 'start': 0, 'end': 480},
    ]


# ==================== Request Fixtures ====================

@pytest.fixture
def two_person_request():
    """Both Person A and Person B required for 30 minutes."""
    return MeetingRequest(
        duration=30,
        mandatory_attendees={"Person A", "Person B"}
    )
