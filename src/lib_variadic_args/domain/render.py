"""Pure text formatting for argument sequences.

Keeps the exact wording of every printed line in one place so the examples,
the driver, and the tests agree on it.
"""

from __future__ import annotations

from typing import Iterable, Sequence

COUNT_LABEL = "Number of arguments"
SHORT_COUNT_LABEL = "No. of args"
CONTENTS_LABEL = "Args contents"


def format_count(values: Sequence[object], *, label: str = COUNT_LABEL) -> str:
    """Return the count line for *values*.

    >>> format_count([1, 2, 3])
    'Number of arguments: 3'
    >>> format_count((), label=SHORT_COUNT_LABEL)
    'No. of args: 0'
    """

    return f"{label}: {len(values)}"


def format_elements(values: Iterable[object]) -> str:
    """Join *values* with single spaces, preserving caller order.

    >>> format_elements([1, 2, 3])
    '1 2 3'
    >>> format_elements([])
    ''
    """

    return " ".join(str(value) for value in values)


def format_contents(values: Iterable[object]) -> str:
    """Return the ``Args contents`` line used by the overloaded handlers.

    >>> format_contents((True, False))
    'Args contents: True False'
    """

    return f"{CONTENTS_LABEL}: {format_elements(values)}"


def format_named(name: str, value: object) -> str:
    """Return an ``name = value`` line.

    >>> format_named("a", 1)
    'a = 1'
    """

    return f"{name} = {value}"
