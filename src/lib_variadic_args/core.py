"""Composition root for ``lib_variadic_args``.

Purpose
-------
Provide the single entry point that runs the demonstration: each section
writes its title and then calls the example functions with literal arguments,
in a fixed order.

Contents
--------
* :class:`Section` – name, title and body of one demonstration group.
* :data:`SECTIONS` – the groups in canonical order.
* :func:`section_names` – names accepted by :func:`run_demo`.
* :func:`run_demo` – the driver.

System Role
-----------
Connects the console adapter with the example functions while emitting
structured observability signals. The CLI calls :func:`run_demo`; library
users may call it with their own :class:`~lib_variadic_args.application.ports.LineWriter`.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Sequence

from .adapters.console import bound_writer, emit
from .application.ports import LineWriter
from .domain.errors import UnknownSectionError
from .examples.varargs import old_style_varargs, varargs_test, varargs_test2, varargs_test3
from .observability import log_debug, log_info, make_event


@dataclass(frozen=True, slots=True)
class Section:
    """One demonstration group: a stable *name*, the printed *title*, and its *body*."""

    name: str
    title: str
    body: Callable[[], None]


def _old_style() -> None:
    old_style_varargs([5])
    old_style_varargs([1, 2, 3])
    old_style_varargs([])


def _varargs() -> None:
    varargs_test(5)
    varargs_test(1, 2, 3)
    varargs_test()


def _mixed() -> None:
    varargs_test2(1, 2, 1, 2, 3)
    emit()


def _overloading() -> None:
    varargs_test3(1, 2, 3)
    varargs_test3(True, True, False)
    varargs_test3("Varargs test", 5, 10)


SECTIONS: tuple[Section, ...] = (
    Section("old-style", "'Old style' approach to varargs", _old_style),
    Section("varargs", "Varargs approach", _varargs),
    Section("mixed", "Multiple parameters including varargs", _mixed),
    Section("overloading", "Overloading varargs", _overloading),
)


def section_names() -> tuple[str, ...]:
    """Return the section names in canonical order.

    >>> section_names()
    ('old-style', 'varargs', 'mixed', 'overloading')
    """

    return tuple(section.name for section in SECTIONS)


def run_demo(sections: Sequence[str] | None = None, *, writer: LineWriter | None = None) -> None:
    """Run the demonstration and write its output.

    Parameters
    ----------
    sections:
        Names from :func:`section_names` to run. ``None`` runs every section.
        Selected sections always run in canonical order.
    writer:
        Output sink; defaults to the active writer (standard output).

    Raises
    ------
    UnknownSectionError
        When *sections* names a section that does not exist. Nothing is
        written in that case.
    """

    selected = _select(sections)
    log_info("demo_started", **make_event("demo", None, {"sections": [section.name for section in selected]}))
    with bound_writer(writer):
        for section in selected:
            log_debug("section_started", **make_event(section.name, None))
            emit(section.title)
            section.body()
    log_info("demo_finished", **make_event("demo", None, {"sections": len(selected)}))


def _select(sections: Sequence[str] | None) -> list[Section]:
    if sections is None:
        return list(SECTIONS)
    known = section_names()
    unknown = [name for name in sections if name not in known]
    if unknown:
        raise UnknownSectionError(f"unknown section(s): {', '.join(unknown)}; expected one of: {', '.join(known)}")
    wanted = set(sections)
    return [section for section in SECTIONS if section.name in wanted]


__all__ = [
    "Section",
    "SECTIONS",
    "section_names",
    "run_demo",
]
