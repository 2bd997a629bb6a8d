# -*- coding: utf-8 -*-
import datetime as dt
import typing as t

import click

from event_organizer.config import load_settings
from event_organizer.dates import BookingWindow
from event_organizer.logging_config import get_logger, setup_logging
from event_organizer.organizer import EventOrganizer

logger = get_logger(__name__)


def _parse_today(ctx: click.Context, param: click.Parameter, value: t.Optional[str]) -> t.Optional[dt.date]:
    """Validate the --today option as an ISO date."""
    if value is None:
        return None
    try:
        return dt.date.fromisoformat(value)
    except ValueError:
        raise click.BadParameter(f"'{value}' is not a date in YYYY-MM-DD format.") from None


@click.command(context_settings={"help_option_names": ["-h", "--help"]})
@click.option(
    "--input",
    "-i",
    "input_file",
    type=click.File("r"),
    default="-",
    help="File of organizer commands, one per line (default: stdin).",
)
@click.option(
    "--today",
    callback=_parse_today,
    help="Pin the booking window to this date (YYYY-MM-DD) instead of the host clock.",
)
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    default=None,
    help="Log level for diagnostics written to stderr.",
)
def main(input_file: t.TextIO, today: t.Optional[dt.date], log_level: t.Optional[str]) -> None:
    """Event Organizer: add, cancel and print campus events.

    Commands are read one per line until Q or the end of input.

    Examples:
        # Interactive session
        python -m event_organizer

        # Replay a command file against a fixed day
        python -m event_organizer --input commands.txt --today 2026-10-19
    """
    try:
        settings = load_settings()
    except ValueError as e:
        raise click.UsageError(str(e)) from None

    setup_logging(log_level or settings.log_level)

    window = BookingWindow.from_today(today or settings.today)
    logger.debug("Booking window %s to %s", window.today, window.limit)

    EventOrganizer(window=window).run(input_file)


if __name__ == "__main__":
    main()
