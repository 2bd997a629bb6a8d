"""Shared test fixtures for the event organizer tests.

The booking window is pinned to 2026-10-19 so date checks do not depend on
the day the suite runs:
- earliest bookable day: 10/20/2026
- latest bookable day: 04/19/2027
"""
import datetime as dt
import io

import pytest
from rich.console import Console

from event_organizer.catalogs import Department, Location, TimeSlot
from event_organizer.dates import BookingWindow, CalendarDate
from event_organizer.models import Contact, Event

FIXED_TODAY = dt.date(2026, 10, 19)


@pytest.fixture
def window() -> BookingWindow:
    return BookingWindow.from_today(FIXED_TODAY)


@pytest.fixture
def console_buffer() -> tuple[Console, io.StringIO]:
    """A plain console writing into a string buffer."""
    buffer = io.StringIO()
    return Console(file=buffer, width=200), buffer


def make_event(
    date: str = "10/29/2026",
    timeslot: TimeSlot = TimeSlot.MORNING,
    location: Location = Location.ARC103,
    department: Department = Department.CS,
    email: str = "cs@rutgers.edu",
    duration: int = 60,
) -> Event:
    """Build a full event with sensible defaults."""
    return Event(
        date=CalendarDate.parse(date),
        timeslot=timeslot,
        location=location,
        contact=Contact(department, email),
        duration=duration,
    )
