"""Console output adapter.

Purpose
-------
Implement :class:`lib_variadic_args.application.ports.LineWriter` on top of
standard output and hold the writer the examples currently print through.

Key behaviours
--------------
* :class:`ConsoleWriter` delegates to :func:`click.echo`, resolving the stream
  on every call so captured or redirected ``sys.stdout`` objects are honoured.
* :data:`ACTIVE_WRITER` is a context variable; :func:`bound_writer` swaps it
  for the duration of a ``with`` block and always restores the previous one.
* :func:`emit` is the single function the examples call to produce output.
"""

from __future__ import annotations

from contextlib import contextmanager
from contextvars import ContextVar
from typing import Iterator

import rich_click as click

from ...application.ports import LineWriter


class ConsoleWriter:
    """Write lines to standard output via Click."""

    def write_line(self, line: str = "") -> None:
        click.echo(line)


ACTIVE_WRITER: ContextVar[LineWriter | None] = ContextVar("lib_variadic_args_writer", default=None)
_DEFAULT_WRITER = ConsoleWriter()


def current_writer() -> LineWriter:
    """Return the bound writer, falling back to standard output."""

    writer = ACTIVE_WRITER.get()
    return writer if writer is not None else _DEFAULT_WRITER


@contextmanager
def bound_writer(writer: LineWriter | None) -> Iterator[LineWriter]:
    """Route :func:`emit` through *writer* inside the ``with`` block.

    Passing ``None`` keeps whatever writer is already active.
    """

    if writer is None:
        yield current_writer()
        return
    token = ACTIVE_WRITER.set(writer)
    try:
        yield writer
    finally:
        ACTIVE_WRITER.reset(token)


def emit(line: str = "") -> None:
    """Write one *line* through the active writer."""

    current_writer().write_line(line)
