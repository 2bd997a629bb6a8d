# -*- coding: utf-8 -*-
"""Command-line event organizer for campus events."""
from event_organizer.catalogs import Department, Location, TimeSlot
from event_organizer.dates import BookingWindow, CalendarDate, Month
from event_organizer.errors import (
    DateFormatError,
    EventOrganizerError,
    MissingContactError,
    UnknownCatalogValueError,
)
from event_organizer.models import Contact, Event, EventKey, is_valid_duration
from event_organizer.organizer import EventOrganizer
from event_organizer.store import EventCalendar

__all__ = [
    "BookingWindow",
    "CalendarDate",
    "Contact",
    "DateFormatError",
    "Department",
    "Event",
    "EventCalendar",
    "EventKey",
    "EventOrganizer",
    "EventOrganizerError",
    "Location",
    "MissingContactError",
    "Month",
    "TimeSlot",
    "UnknownCatalogValueError",
    "is_valid_duration",
]
