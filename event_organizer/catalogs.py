# -*- coding: utf-8 -*-
"""
Fixed catalogs for time slots, locations and departments.

Each member carries an explicit ``rank`` (its declared position) which is the
only thing used for ordering; the enums themselves are not orderable.
"""
from __future__ import annotations

from enum import Enum

from event_organizer.errors import UnknownCatalogValueError

LABEL_AM = "AM"
LABEL_PM = "PM"


class _Catalog(Enum):
    """Shared behaviour for the fixed catalogs."""

    @classmethod
    def lookup(cls, token: str):
        """Return the member named by ``token``, ignoring case.

        :param token: Raw token from user input, e.g. ``"morning"``.
        :raises UnknownCatalogValueError: If no member has that name.
        """
        try:
            return cls[token.upper()]
        except KeyError:
            raise UnknownCatalogValueError(cls.__name__, token) from None

    def compare(self, other: _Catalog) -> int:
        """Compare two members by declared rank, returning -1, 0 or 1."""
        return (self.rank > other.rank) - (self.rank < other.rank)


class TimeSlot(_Catalog):
    """The three start times an event can be booked at (12-hour clock)."""
    MORNING = (0, 10, 30)
    AFTERNOON = (1, 2, 0)
    EVENING = (2, 6, 30)

    def __init__(self, rank: int, hour: int, minute: int) -> None:
        self.rank = rank
        self.hour = hour
        self.minute = minute

    @property
    def label(self) -> str:
        return LABEL_AM if self is TimeSlot.MORNING else LABEL_PM

    def __str__(self) -> str:
        return f"[Start: {self.hour}:{self.minute:02d} {self.label}]"


class Location(_Catalog):
    """Rooms available for events, grouped by campus."""
    ARC103 = (0, "Allison Road Classroom", "Busch")
    HLL114 = (1, "Hill Center", "Busch")
    AB2225 = (2, "Academic Building", "College Avenue")
    MU302 = (3, "Murray Hall", "College Avenue")
    BE_AUD = (4, "Beck Hall", "Livingston")
    TIL232 = (5, "Tillet Hall", "Livingston")

    def __init__(self, rank: int, building: str, campus: str) -> None:
        self.rank = rank
        self.building = building
        self.campus = campus

    def __str__(self) -> str:
        return f"@{self.name} ({self.building}, {self.campus})"


class Department(_Catalog):
    """Departments an event contact can belong to."""
    BAIT = (0, "Business Analytics and Information Technology")
    CS = (1, "Computer Science")
    EE = (2, "Electrical Engineering")
    ITI = (3, "Information Technology and Informatics")
    MATH = (4, "Mathematics")

    def __init__(self, rank: int, full_name: str) -> None:
        self.rank = rank
        self.full_name = full_name

    def __str__(self) -> str:
        return self.full_name
