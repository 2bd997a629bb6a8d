# -*- coding: utf-8 -*-
from __future__ import annotations

import logging
import typing as t

from rich.console import Console

from .display import echo_lines
from .models import Event, EventKey

logger = logging.getLogger(__name__)

NOT_FOUND = -1
GROWTH_AMOUNT = 4

EMPTY_MESSAGE = "Event calendar is empty!"
HEADER = "* Event calendar *"
HEADER_BY_DATE = "* Event calendar by event date and start time *"
HEADER_BY_CAMPUS = "* Event calendar by campus and building *"
HEADER_BY_DEPARTMENT = "* Event calendar by department *"
FOOTER = "* end of event calendar *"


class EventCalendar:
    """In-memory calendar of events, kept free of duplicates.

    Events live in a slot list whose length (the capacity) grows in fixed
    steps; only the first ``len(self)`` slots are occupied. The display
    operations sort those slots in place, so the new order sticks.
    """

    def __init__(self, growth: int = GROWTH_AMOUNT) -> None:
        self._growth = growth
        self._events: list[t.Optional[Event]] = [None] * growth
        self._size = 0

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> t.Iterator[Event]:
        for index in range(self._size):
            yield self._events[index]

    def __contains__(self, event: object) -> bool:
        if not isinstance(event, (Event, EventKey)):
            return False
        return self.contains(event)

    @property
    def capacity(self) -> int:
        return len(self._events)

    def _find(self, event: t.Union[Event, EventKey]) -> int:
        key = event.key
        for index in range(self._size):
            if self._events[index] == key:
                return index
        return NOT_FOUND

    def _grow(self) -> None:
        self._events.extend([None] * self._growth)
        logger.debug("Calendar capacity grown to %d", self.capacity)

    def add(self, event: Event) -> bool:
        """Adds an event to the calendar unless an equal one is already there.

        :param event: The full event to store.
        :return: True if added, False if the event was already on the calendar.
        """
        if not isinstance(event, Event):
            raise TypeError(f"Only full events can be stored, got {type(event).__name__}")
        if self.contains(event):
            logger.debug("Rejected duplicate event %s", event.key)
            return False
        if self._size == self.capacity:
            self._grow()
        self._events[self._size] = event
        self._size += 1
        logger.debug("Added event %s (%d on calendar)", event.key, self._size)
        return True

    def remove(self, event: t.Union[Event, EventKey]) -> bool:
        """Removes the event with the same date, time slot and location.

        Later events shift down one slot, keeping their relative order.

        :param event: A full event or an identity-only key.
        :return: True if an event was removed, False if none matched.
        """
        position = self._find(event)
        if position == NOT_FOUND:
            return False
        for index in range(position, self._size - 1):
            self._events[index] = self._events[index + 1]
        self._size -= 1
        self._events[self._size] = None
        logger.debug("Removed event %s (%d on calendar)", event.key, self._size)
        return True

    def contains(self, event: t.Union[Event, EventKey]) -> bool:
        return self._find(event) != NOT_FOUND

    def _swap(self, i: int, j: int) -> None:
        self._events[i], self._events[j] = self._events[j], self._events[i]

    def _selection_sort(self, compare: t.Callable[[Event, Event], int]) -> None:
        # Ties keep whichever event the scan met first, so equal keys may be reordered.
        for i in range(self._size - 1):
            smallest = i
            for j in range(i + 1, self._size):
                if compare(self._events[j], self._events[smallest]) < 0:
                    smallest = j
            self._swap(i, smallest)

    def sort_by_date(self) -> None:
        self._selection_sort(Event.compare)

    def sort_by_location(self) -> None:
        self._selection_sort(Event.compare_by_location)

    def sort_by_department(self) -> None:
        self._selection_sort(Event.compare_by_department)

    def _render(self, header: str) -> list[str]:
        if self._size == 0:
            return [EMPTY_MESSAGE]
        return [header, *(str(event) for event in self), FOOTER]

    def render(self) -> list[str]:
        """Lines for the calendar in its current order."""
        return self._render(HEADER)

    def render_by_date(self) -> list[str]:
        self.sort_by_date()
        return self._render(HEADER_BY_DATE)

    def render_by_campus(self) -> list[str]:
        self.sort_by_location()
        return self._render(HEADER_BY_CAMPUS)

    def render_by_department(self) -> list[str]:
        self.sort_by_department()
        return self._render(HEADER_BY_DEPARTMENT)

    def print(self, out: t.Optional[Console] = None) -> None:
        echo_lines(self.render(), out)

    def print_by_date(self, out: t.Optional[Console] = None) -> None:
        echo_lines(self.render_by_date(), out)

    def print_by_campus(self, out: t.Optional[Console] = None) -> None:
        echo_lines(self.render_by_campus(), out)

    def print_by_department(self, out: t.Optional[Console] = None) -> None:
        echo_lines(self.render_by_department(), out)
