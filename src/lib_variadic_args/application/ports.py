"""Application-layer ports describing adapter responsibilities.

Purpose
-------
Define the structural contract the demonstration functions write through so
they never depend on a concrete output stream.

Contents
--------
* :class:`LineWriter` – accepts one rendered line at a time.

System Role
-----------
:mod:`lib_variadic_args.adapters.console` provides the default implementation
(standard output via Click); :mod:`lib_variadic_args.testing` provides an
in-memory one for assertions.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class LineWriter(Protocol):
    """Sink for human-readable output lines.

    Why
    ----
    The examples only produce text; where that text goes (terminal, buffer,
    test recorder) is an adapter decision.
    """

    def write_line(self, line: str = "") -> None:
        """Append *line* followed by a newline."""
