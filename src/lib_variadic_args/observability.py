"""Structured logging helpers distilled into tiny orchestration phrases.

Purpose
    Keep every emission of logging data predictable and contextual without
    forcing applications to adopt a specific logging backend.

Contents
    - ``TRACE_ID``: context variable storing the active trace identifier.
    - ``get_logger``: returns the shared package logger (quiet by default).
    - ``configure_logging``: attaches a single stderr handler for CLI use.
    - ``bind_trace_id``: binds or clears the active trace identifier.
    - ``log_debug`` / ``log_info`` / ``log_error``: emit structured entries via a
      single private emitter.
    - ``make_event``: convenience builder for structured event payloads.

System Integration
    Used by the dispatch registry and the demonstration driver so overload
    registration, resolution and section progress carry the same trace
    metadata. The domain layer stays free from logging concerns.
"""

from __future__ import annotations

import logging
from contextvars import ContextVar
from typing import Any, Final, Mapping

TRACE_ID: ContextVar[str | None] = ContextVar("lib_variadic_args_trace_id", default=None)
"""Current trace identifier propagated through logging helpers."""

LOG_FORMAT: Final[str] = "%(levelname)s %(name)s: %(message)s %(context)s"

_LOGGER: Final[logging.Logger] = logging.getLogger("lib_variadic_args")
_LOGGER.addHandler(logging.NullHandler())
_CLI_HANDLER_NAME: Final[str] = "lib_variadic_args.cli"


def get_logger() -> logging.Logger:
    """Expose the package logger so applications may attach handlers.

    Why
        Leaves the library silent by default while giving host applications full
        control over handler and formatter configuration.
    """

    return _LOGGER


def configure_logging(level: str | None) -> None:
    """Attach (or retune) one stderr handler at *level*; ``None`` leaves logging untouched.

    Why
        The CLI ``--log-level`` option needs visible diagnostics while library
        users keep the quiet default.
    Side Effects
        Adds at most one named :class:`logging.StreamHandler` to the package
        logger and sets the logger level.
    """

    if level is None:
        return
    numeric = logging.getLevelName(level.upper())
    if not isinstance(numeric, int):
        raise ValueError(f"unknown log level: {level}")
    handler = next((h for h in _LOGGER.handlers if h.get_name() == _CLI_HANDLER_NAME), None)
    if handler is None:
        handler = logging.StreamHandler()
        handler.set_name(_CLI_HANDLER_NAME)
        handler.setFormatter(logging.Formatter(LOG_FORMAT, defaults={"context": {}}))
        _LOGGER.addHandler(handler)
    handler.setLevel(numeric)
    _LOGGER.setLevel(numeric)


def bind_trace_id(trace_id: str | None) -> None:
    """Bind or clear the active trace identifier.

    Examples
    --------
    >>> bind_trace_id('abc123')
    >>> TRACE_ID.get()
    'abc123'
    >>> bind_trace_id(None)
    >>> TRACE_ID.get() is None
    True
    """

    TRACE_ID.set(trace_id)


def log_debug(message: str, **fields: Any) -> None:
    """Emit a structured debug log entry that includes the trace context."""

    _emit(logging.DEBUG, message, fields)


def log_info(message: str, **fields: Any) -> None:
    """Emit a structured info log entry that includes the trace context."""

    _emit(logging.INFO, message, fields)


def log_error(message: str, **fields: Any) -> None:
    """Emit a structured error log entry that includes the trace context."""

    _emit(logging.ERROR, message, fields)


def make_event(
    family: str,
    signature: str | None,
    payload: Mapping[str, Any] | None = None,
) -> dict[str, Any]:
    """Build a structured logging payload for dispatch and driver events.

    What
        Returns a dictionary with ``family`` and ``signature`` keys and any
        optional payload fields.
    Inputs
        family: Name of the overload family or driver section being observed.
        signature: Rendered signature associated with the event, if any.
        payload: Optional mapping with extra diagnostic detail.

    Examples
    --------
    >>> make_event('varargs_test3', '(int...)', {'args': 3})
    {'family': 'varargs_test3', 'signature': '(int...)', 'args': 3}
    """

    event = _base_event(family, signature)
    return _merge_payload(event, payload)


def _emit(level: int, message: str, fields: Mapping[str, Any]) -> None:
    """Send a log entry through the shared logger with contextual metadata."""

    _LOGGER.log(level, message, extra={"context": _with_trace(fields)})


def _with_trace(fields: Mapping[str, Any]) -> dict[str, Any]:
    """Attach the current trace identifier to the provided structured fields."""

    context = {"trace_id": TRACE_ID.get()}
    context.update(fields)
    return context


def _base_event(family: str, signature: str | None) -> dict[str, Any]:
    return {"family": family, "signature": signature}


def _merge_payload(event: dict[str, Any], payload: Mapping[str, Any] | None) -> dict[str, Any]:
    """Merge optional diagnostic data into the event payload when provided."""

    if payload:
        event |= dict(payload)
    return event
