"""
Data models for calendar events and their contacts.

This module contains the dataclasses used to represent a bookable event: the
identity-only ``EventKey`` used for lookups and the full ``Event`` stored on
the calendar.
"""
from __future__ import annotations

import re
from dataclasses import dataclass
import typing as t

from event_organizer.catalogs import LABEL_AM, LABEL_PM, Department, Location, TimeSlot
from event_organizer.dates import CalendarDate
from event_organizer.errors import MissingContactError

MIN_DURATION = 30
MAX_DURATION = 120
MINUTES_PER_HOUR = 60
NOON = 12

EMAIL_PATTERN = re.compile(r"[^@]+@rutgers\.edu")


def is_valid_duration(minutes: int) -> bool:
    """Check that a duration lies within the allowed booking length."""
    return MIN_DURATION <= minutes <= MAX_DURATION


@dataclass(frozen=True)
class Contact:
    """Represents the person responsible for an event."""
    department: Department
    email: str

    def is_valid(self) -> bool:
        return EMAIL_PATTERN.fullmatch(self.email) is not None

    def __str__(self) -> str:
        return f"[Contact: {self.department}, {self.email}]"


@dataclass(frozen=True)
class EventKey:
    """Identity of an event: where and when it happens."""
    date: CalendarDate
    timeslot: TimeSlot
    location: Location

    @property
    def key(self) -> EventKey:
        return self


@dataclass(frozen=True, eq=False)
class Event:
    """Represents a calendar event with date, time slot, location and contact.

    Two events are the same event when they share date, time slot and
    location; contact and duration never take part in equality.
    """
    date: CalendarDate
    timeslot: TimeSlot
    location: Location
    contact: Contact
    duration: int

    @property
    def key(self) -> EventKey:
        return EventKey(self.date, self.timeslot, self.location)

    def __eq__(self, other: object) -> bool:
        if isinstance(other, (Event, EventKey)):
            return self.key == other.key
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self.key)

    def compare(self, other: Event) -> int:
        """Order by date, then by time slot."""
        by_date = self.date.compare(other.date)
        if by_date != 0:
            return by_date
        return self.timeslot.compare(other.timeslot)

    def compare_by_location(self, other: Event) -> int:
        return self.location.compare(other.location)

    def compare_by_department(self, other: t.Union[Event, EventKey]) -> int:
        """Order by the contact's department.

        :raises MissingContactError: If ``other`` is identity-only.
        """
        other_contact = getattr(other, "contact", None)
        if other_contact is None:
            raise MissingContactError(
                "Department ordering needs two full events, got an identity-only event"
            )
        return self.contact.department.compare(other_contact.department)

    def end_time(self) -> tuple[int, int, str]:
        """Return the (hour, minute, AM/PM label) the event ends at.

        Minutes carry into hours; hours are not wrapped, and only a morning
        event ending before noon is labelled AM.
        """
        hour = self.timeslot.hour + self.duration // MINUTES_PER_HOUR
        minute = self.timeslot.minute + self.duration % MINUTES_PER_HOUR
        hour += minute // MINUTES_PER_HOUR
        minute %= MINUTES_PER_HOUR
        if self.timeslot is TimeSlot.MORNING and hour < NOON:
            label = LABEL_AM
        else:
            label = LABEL_PM
        return hour, minute, label

    def end_time_label(self) -> str:
        hour, minute, label = self.end_time()
        return f"[End: {hour}:{minute:02d} {label}]"

    def __str__(self) -> str:
        return (
            f"{self.date} {self.timeslot} {self.end_time_label()} "
            f"{self.location} {self.contact}"
        )
