"""Testing diagnostics that keep failure scenarios observable and predictable.

Purpose
    Provide helpers that exercise the ambiguity path and capture output
    without relying on brittle fixtures.

Contents
    - ``AMBIGUOUS_FAMILY``: name of the deliberately ambiguous family.
    - ``build_ambiguous_family``: registers ``(int...)`` then ``(int, int...)``
      and therefore always raises :class:`AmbiguousOverloadError`.
    - ``RecordingWriter``: in-memory :class:`LineWriter` for assertions.

System Integration
    Used by the CLI ``ambiguity`` command and by the test-suite.
"""

from __future__ import annotations

from typing import Final

from .adapters.console import emit
from .application.dispatch import OverloadSet

AMBIGUOUS_FAMILY: Final[str] = "ambiguous"
"""Name used for the family built by :func:`build_ambiguous_family`.

Why
    The CLI end-to-end tests assert on the exact error wording.
"""


def build_ambiguous_family() -> OverloadSet:
    """Register two handlers that both accept a single ``int``.

    Why
        ``f(*values: int)`` and ``f(first: int, *rest: int)`` both accept
        ``f(1)``; the registry must refuse the second registration instead of
        letting a later call pick one of them.
    Outputs
        None. The function never returns because registration raises.

    Examples
    --------
    >>> build_ambiguous_family()
    Traceback (most recent call last):
    ...
    lib_variadic_args.domain.errors.AmbiguousOverloadError: ambiguous overloads for ambiguous: (int...) and (int, int...) both accept (int)
    """

    family = OverloadSet(AMBIGUOUS_FAMILY)

    @family.register
    def _only_variadic(*values: int) -> None:
        emit(f"{AMBIGUOUS_FAMILY} with int varargs")

    @family.register
    def _leading_int(first: int, *rest: int) -> None:
        emit(f"{AMBIGUOUS_FAMILY} with int & int varargs")

    return family


class RecordingWriter:
    """Collect written lines in memory.

    >>> writer = RecordingWriter()
    >>> writer.write_line("a = 1")
    >>> writer.write_line()
    >>> writer.lines
    ['a = 1', '']
    >>> writer.text
    'a = 1\\n\\n'
    """

    def __init__(self) -> None:
        self.lines: list[str] = []

    def write_line(self, line: str = "") -> None:
        self.lines.append(line)

    @property
    def text(self) -> str:
        return "".join(f"{line}\n" for line in self.lines)
