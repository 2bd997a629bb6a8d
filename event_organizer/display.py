"""Console output helpers shared by the calendar and the command loop."""
import typing as t

from rich.console import Console

console = Console()


def echo(text: str, out: t.Optional[Console] = None) -> None:
    """Print one line verbatim.

    Markup, highlighting, emoji codes and wrapping are all disabled so that
    bracketed fields like ``[Start: 10:30 AM]`` come out exactly as formatted.
    """
    (out if out is not None else console).print(
        text, markup=False, highlight=False, emoji=False, soft_wrap=True
    )


def echo_lines(lines: t.Iterable[str], out: t.Optional[Console] = None) -> None:
    for line in lines:
        echo(line, out)
