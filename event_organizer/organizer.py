# -*- coding: utf-8 -*-
"""Line-oriented command loop for the event organizer.

Each input line is one command; the first whitespace-separated token picks
the command and the rest are its arguments::

    A 10/29/2026 morning arc103 cs jdoe@rutgers.edu 60
    R 10/29/2026 morning arc103
    P | PE | PC | PD
    Q

Every validation failure prints a message and abandons only that command.
"""
from __future__ import annotations

import typing as t

from rich.console import Console

from event_organizer.catalogs import Department, Location, TimeSlot
from event_organizer.dates import BookingWindow, CalendarDate
from event_organizer.display import echo
from event_organizer.errors import DateFormatError, UnknownCatalogValueError
from event_organizer.logging_config import get_logger
from event_organizer.models import Contact, Event, EventKey, is_valid_duration
from event_organizer.store import EventCalendar

logger = get_logger(__name__)

CMD_ADD = "A"
CMD_CANCEL = "R"
CMD_PRINT = "P"
CMD_PRINT_BY_DATE = "PE"
CMD_PRINT_BY_CAMPUS = "PC"
CMD_PRINT_BY_DEPARTMENT = "PD"
CMD_QUIT = "Q"

ADD_TOKENS = 7
CANCEL_TOKENS = 4

MSG_RUNNING = "Event Organizer running..."
MSG_TERMINATED = "Event Organizer terminated."
MSG_ADDED = "Event added to the calendar."
MSG_DUPLICATE = "The event is already on the calendar."
MSG_REMOVED = "Event has been removed from the calendar!"
MSG_NOT_FOUND = "Cannot remove; event is not in the calendar!"
MSG_INVALID_DATE = "{}: Invalid calendar date!"
MSG_PAST_DATE = "{}: Event date must be a future date!"
MSG_TOO_FAR = "{}: Event date must be within 6 months!"
MSG_INVALID_TIMESLOT = "Invalid time slot!"
MSG_INVALID_LOCATION = "Invalid location!"
MSG_INVALID_CONTACT = "Invalid contact information!"
MSG_INVALID_DURATION = "Event duration must be at least 30 minutes and at most 120 minutes"
MSG_INVALID_COMMAND = "{} is an invalid command!"
MSG_MISSING_TOKENS = "Invalid command format for {}!"


class CommandRejected(Exception):
    """Internal signal that the current command failed validation."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class EventOrganizer:
    """Processes organizer commands against one event calendar."""

    def __init__(
        self,
        window: t.Optional[BookingWindow] = None,
        calendar: t.Optional[EventCalendar] = None,
        out: t.Optional[Console] = None,
    ) -> None:
        """Initialize the organizer.

        :param window: Booking window used to check event dates. Defaults to
            one computed from the host clock.
        :param calendar: Calendar to operate on (a fresh one if omitted).
        :param out: Console for user-facing output (stdout if omitted).
        """
        self.window = window or BookingWindow.from_today()
        self.calendar = calendar if calendar is not None else EventCalendar()
        self.out = out
        self.running = False

    def _say(self, message: str) -> None:
        echo(message, self.out)

    def run(self, lines: t.Iterable[str]) -> None:
        """Process lines until a quit command or the end of input."""
        self.running = True
        self._say(MSG_RUNNING)
        for line in lines:
            self.process_line(line)
            if not self.running:
                break
        self.running = False

    def process_line(self, line: str) -> None:
        tokens = line.split()
        if not tokens:
            return
        command = tokens[0]
        if command == CMD_ADD:
            self._guarded(self.add_event, tokens)
        elif command == CMD_CANCEL:
            self._guarded(self.cancel_event, tokens)
        elif command == CMD_PRINT:
            self.calendar.print(self.out)
        elif command == CMD_PRINT_BY_DATE:
            self.calendar.print_by_date(self.out)
        elif command == CMD_PRINT_BY_CAMPUS:
            self.calendar.print_by_campus(self.out)
        elif command == CMD_PRINT_BY_DEPARTMENT:
            self.calendar.print_by_department(self.out)
        elif command == CMD_QUIT:
            self._say(MSG_TERMINATED)
            self.running = False
        else:
            self._say(MSG_INVALID_COMMAND.format(command))

    def _guarded(self, handler: t.Callable[[list[str]], str], tokens: list[str]) -> None:
        try:
            message = handler(tokens)
        except CommandRejected as e:
            logger.info("Rejected '%s': %s", " ".join(tokens), e.message)
            message = e.message
        self._say(message)

    def add_event(self, tokens: list[str]) -> str:
        """Handle ``A date timeslot location department email duration``."""
        if len(tokens) < ADD_TOKENS:
            raise CommandRejected(MSG_MISSING_TOKENS.format(tokens[0]))
        _, date_text, slot_text, location_text, department_text, email, duration_text = tokens[:ADD_TOKENS]

        event = Event(
            date=self.check_date(date_text),
            timeslot=check_timeslot(slot_text),
            location=check_location(location_text),
            contact=check_contact(department_text, email),
            duration=check_duration(duration_text),
        )
        if not self.calendar.add(event):
            return MSG_DUPLICATE
        return MSG_ADDED

    def cancel_event(self, tokens: list[str]) -> str:
        """Handle ``R date timeslot location``."""
        if len(tokens) < CANCEL_TOKENS:
            raise CommandRejected(MSG_MISSING_TOKENS.format(tokens[0]))
        _, date_text, slot_text, location_text = tokens[:CANCEL_TOKENS]

        key = EventKey(
            date=self.check_date(date_text),
            timeslot=check_timeslot(slot_text),
            location=check_location(location_text),
        )
        if not self.calendar.remove(key):
            return MSG_NOT_FOUND
        return MSG_REMOVED

    def check_date(self, text: str) -> CalendarDate:
        try:
            date = CalendarDate.parse(text)
        except DateFormatError:
            raise CommandRejected(MSG_INVALID_DATE.format(text)) from None
        if not date.is_valid():
            raise CommandRejected(MSG_INVALID_DATE.format(text))
        if not self.window.is_future(date):
            raise CommandRejected(MSG_PAST_DATE.format(text))
        if not self.window.is_within_limit(date):
            raise CommandRejected(MSG_TOO_FAR.format(text))
        return date


def check_timeslot(text: str) -> TimeSlot:
    try:
        return TimeSlot.lookup(text)
    except UnknownCatalogValueError:
        raise CommandRejected(MSG_INVALID_TIMESLOT) from None


def check_location(text: str) -> Location:
    try:
        return Location.lookup(text)
    except UnknownCatalogValueError:
        raise CommandRejected(MSG_INVALID_LOCATION) from None


def check_contact(department_text: str, email: str) -> Contact:
    try:
        department = Department.lookup(department_text)
    except UnknownCatalogValueError:
        raise CommandRejected(MSG_INVALID_CONTACT) from None
    contact = Contact(department, email)
    if not contact.is_valid():
        raise CommandRejected(MSG_INVALID_CONTACT)
    return contact


def check_duration(text: str) -> int:
    try:
        minutes = int(text)
    except ValueError:
        raise CommandRejected(MSG_INVALID_DURATION) from None
    if not is_valid_duration(minutes):
        raise CommandRejected(MSG_INVALID_DURATION)
    return minutes
