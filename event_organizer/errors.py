# -*- coding: utf-8 -*-
"""Exceptions raised by the event organizer core.

The command loop converts every one of these into a user-facing message, so
none of them is fatal to a run.
"""


class EventOrganizerError(Exception):
    """Base class for all event organizer errors."""


class UnknownCatalogValueError(EventOrganizerError, ValueError):
    """Raised when a token does not name a member of a fixed catalog."""

    def __init__(self, catalog: str, token: str) -> None:
        self.catalog = catalog
        self.token = token
        super().__init__(f"Unknown {catalog} value: '{token}'")


class DateFormatError(EventOrganizerError, ValueError):
    """Raised when a date token is not of the form MONTH/DAY/YEAR."""

    def __init__(self, text: str) -> None:
        self.text = text
        super().__init__(f"Malformed date '{text}', expected MONTH/DAY/YEAR")


class MissingContactError(EventOrganizerError, TypeError):
    """Raised when a department ordering is requested for an event without a contact."""
