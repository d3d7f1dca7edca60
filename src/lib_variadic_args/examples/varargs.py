"""Variable-length argument examples.

Before native variadic parameters, a variable number of arguments was handled
either with one overload per situation or with an explicit container
parameter. ``*args`` replaces both with less code: the caller lists the values
and the language packs them into a tuple.

Two rules apply to the variadic parameter:

1. A function declares at most one.
2. It comes after every regular positional parameter.

Regular parameters and a variadic parameter can be combined, and variadic
functions can be overloaded, but overloading them invites ambiguous calls, so
two differently named functions are often the better choice.
"""

from __future__ import annotations

from typing import Sequence

from ..adapters.console import emit
from ..application.dispatch import OverloadSet
from ..domain.render import SHORT_COUNT_LABEL, format_contents, format_count, format_elements, format_named


def print_sequence(values: Sequence[int]) -> None:
    """Write the count line followed by the space-separated elements."""

    emit(format_count(values))
    emit(format_elements(values))


def old_style_varargs(values: Sequence[int]) -> None:
    """Receive the arguments as one explicit container built by the caller."""

    print_sequence(values)


def varargs_test(*values: int) -> None:
    """Receive zero or more integers; the call site needs no container."""

    print_sequence(values)


def varargs_test2(a: int, b: int, *c: int) -> None:
    """Receive two required integers followed by any number of extra ones."""

    emit(format_named("a", a))
    emit(format_named("b", b))
    print_sequence(c)


# The handlers differ by element type or by a leading str parameter. Adding
# ``(int, int...)`` next to ``(int...)`` would make ``varargs_test3(1)``
# ambiguous and is refused at registration.
varargs_test3 = OverloadSet("varargs_test3")


@varargs_test3.register
def _varargs_test3_ints(*values: int) -> None:
    emit("varargs_test3 with int as parameter")
    _print_contents(values)


@varargs_test3.register
def _varargs_test3_flags(*values: bool) -> None:
    emit("varargs_test3 with boolean as parameter")
    _print_contents(values)


@varargs_test3.register
def _varargs_test3_labelled(text: str, *values: int) -> None:
    emit("varargs_test3 with String & int varargs as parameter")
    emit(f"String contents: {text}")
    _print_contents(values)


def _print_contents(values: Sequence[object]) -> None:
    emit(format_count(values, label=SHORT_COUNT_LABEL))
    emit(format_contents(values))
    emit()


__all__ = [
    "print_sequence",
    "old_style_varargs",
    "varargs_test",
    "varargs_test2",
    "varargs_test3",
]
