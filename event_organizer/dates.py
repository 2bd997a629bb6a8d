# -*- coding: utf-8 -*-
"""
Calendar dates and the booking window.

A ``CalendarDate`` is built from user text and may describe a day that does
not exist (``2/30/2024``, ``13/1/2024``); validity is only checked on demand.
"""
from __future__ import annotations

import calendar
import datetime as dt
from dataclasses import dataclass
from enum import Enum

from event_organizer.errors import DateFormatError

QUADRENNIAL = 4
CENTENNIAL = 100
QUATERCENTENNIAL = 400

DAYS_IN_FEB_LEAP = 29
MIN_DAY = 1
BOOKING_WINDOW_MONTHS = 6


class Month(Enum):
    """Months of the year with their (non-leap) day counts."""
    JANUARY = (1, 31)
    FEBRUARY = (2, 28)
    MARCH = (3, 31)
    APRIL = (4, 30)
    MAY = (5, 31)
    JUNE = (6, 30)
    JULY = (7, 31)
    AUGUST = (8, 31)
    SEPTEMBER = (9, 30)
    OCTOBER = (10, 31)
    NOVEMBER = (11, 30)
    DECEMBER = (12, 31)
    NOT_A_MONTH = (0, 0)

    def __init__(self, number: int, max_days: int) -> None:
        self.number = number
        self.max_days = max_days

    @classmethod
    def from_number(cls, number: int) -> Month:
        """Map 1-12 to a month; anything else maps to ``NOT_A_MONTH``."""
        for month in cls:
            if month.number == number and month is not cls.NOT_A_MONTH:
                return month
        return cls.NOT_A_MONTH


@dataclass(frozen=True)
class CalendarDate:
    """A (possibly invalid) day written as MONTH/DAY/YEAR."""
    year: int
    month: Month
    day: int

    @classmethod
    def parse(cls, text: str) -> CalendarDate:
        """Build a date from ``"MM/DD/YYYY"`` text.

        An out-of-range month becomes ``Month.NOT_A_MONTH`` rather than an
        error, so that ``is_valid()`` is the single place dates get rejected.

        :param text: Date token, e.g. ``"09/06/2023"``.
        :raises DateFormatError: If the text is not three integer tokens.
        """
        tokens = text.split("/")
        if len(tokens) != 3:
            raise DateFormatError(text)
        try:
            month_number, day, year = (int(token) for token in tokens)
        except ValueError:
            raise DateFormatError(text) from None
        return cls(year=year, month=Month.from_number(month_number), day=day)

    @classmethod
    def from_date(cls, value: dt.date) -> CalendarDate:
        return cls(year=value.year, month=Month.from_number(value.month), day=value.day)

    @classmethod
    def today(cls) -> CalendarDate:
        return cls.from_date(dt.date.today())

    def is_leap_year(self) -> bool:
        if self.year % QUADRENNIAL != 0:
            return False
        if self.year % CENTENNIAL != 0:
            return True
        return self.year % QUATERCENTENNIAL == 0

    def max_days(self) -> int:
        if self.month is Month.FEBRUARY and self.is_leap_year():
            return DAYS_IN_FEB_LEAP
        return self.month.max_days

    def is_valid(self) -> bool:
        if self.month is Month.NOT_A_MONTH:
            return False
        return MIN_DAY <= self.day <= self.max_days()

    def compare(self, other: CalendarDate) -> int:
        """Compare by year, then month, then day, returning -1, 0 or 1."""
        mine = (self.year, self.month.number, self.day)
        theirs = (other.year, other.month.number, other.day)
        return (mine > theirs) - (mine < theirs)

    def is_after(self, reference: CalendarDate) -> bool:
        return self.compare(reference) > 0

    def is_at_or_before(self, limit: CalendarDate) -> bool:
        return self.compare(limit) <= 0

    def __lt__(self, other: CalendarDate) -> bool:
        return self.compare(other) < 0

    def __le__(self, other: CalendarDate) -> bool:
        return self.compare(other) <= 0

    def __gt__(self, other: CalendarDate) -> bool:
        return self.compare(other) > 0

    def __ge__(self, other: CalendarDate) -> bool:
        return self.compare(other) >= 0

    def __str__(self) -> str:
        return f"[Event Date: {self.month.number:02d}/{self.day:02d}/{self.year}]"


def add_months(value: dt.date, months: int) -> dt.date:
    """Add calendar months, clamping the day to the length of the target month."""
    index = value.month - 1 + months
    year = value.year + index // 12
    month = index % 12 + 1
    day = min(value.day, calendar.monthrange(year, month)[1])
    return dt.date(year, month, day)


@dataclass(frozen=True)
class BookingWindow:
    """The range of dates a new event may be booked on.

    A date is bookable when it is strictly after ``today`` and no later than
    ``limit``. The window is computed once per run and passed to whoever
    validates dates, so tests can pin it to a fixed day.
    """
    today: CalendarDate
    limit: CalendarDate

    @classmethod
    def from_today(cls, today: dt.date | None = None,
                   months: int = BOOKING_WINDOW_MONTHS) -> BookingWindow:
        """Build the window starting at ``today`` (the host clock if omitted)."""
        if today is None:
            today = dt.date.today()
        return cls(
            today=CalendarDate.from_date(today),
            limit=CalendarDate.from_date(add_months(today, months)),
        )

    def is_future(self, date: CalendarDate) -> bool:
        return date.is_after(self.today)

    def is_within_limit(self, date: CalendarDate) -> bool:
        return date.is_at_or_before(self.limit)

    def contains(self, date: CalendarDate) -> bool:
        return self.is_future(date) and self.is_within_limit(date)
