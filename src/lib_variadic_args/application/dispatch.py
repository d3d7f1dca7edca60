"""Overload registry for functions with variadic parameters.

Purpose
-------
Python has a single function per name, so overloading by element type and by
arity is emulated with an explicit registry: handlers are registered under one
family name, the registry inspects each call's argument types and count, and
exactly one handler runs.

Contents
    - ``OverloadSet``: callable registry with ``register`` / ``resolve``.
    - ``Overload``: immutable pairing of a handler and its signature.

Ambiguity policy
----------------
* Registration fails fast with :class:`AmbiguousOverloadError` when the new
  handler shares an argument shape with a registered one, e.g. ``(int...)``
  followed by ``(int, int...)`` (both accept ``(int)``) or ``()`` next to
  ``(int...)`` (both accept the empty call).
* ``(int...)`` next to ``(bool...)`` is allowed because their element kinds
  differ; their shared empty call is rejected when it actually happens.
* A call that fits no handler raises :class:`NoMatchingOverloadError`.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Iterator, TypeVar

from ..domain.errors import AmbiguousOverloadError, NoMatchingOverloadError
from ..domain.signature import VariadicSignature, describe_kinds, describe_shape
from ..observability import log_debug, log_error, make_event

F = TypeVar("F", bound=Callable[..., Any])


@dataclass(frozen=True, slots=True)
class Overload:
    """One registered handler together with the shape it accepts."""

    handler: Callable[..., Any]
    signature: VariadicSignature


class OverloadSet:
    """A named family of handlers selected by argument types and arity.

    Examples
    --------
    >>> describe = OverloadSet("describe")
    >>> @describe.register
    ... def _ints(*values: int) -> str:
    ...     return f"ints {values}"
    >>> @describe.register
    ... def _flags(*values: bool) -> str:
    ...     return f"flags {values}"
    >>> describe(1, 2)
    'ints (1, 2)'
    >>> describe(True)
    'flags (True,)'
    >>> [str(sig) for sig in describe.signatures()]
    ['(int...)', '(bool...)']
    """

    def __init__(self, name: str) -> None:
        self.name = name
        self._overloads: list[Overload] = []

    def register(self, func: F) -> F:
        """Add *func* to the family and return it unchanged.

        Raises
        ------
        SignatureError
            When *func*'s parameters cannot be described as a variadic signature.
        AmbiguousOverloadError
            When *func* accepts a call shape that an already registered
            handler accepts too, except the empty call shared by variadic
            handlers with distinct element kinds.
        """

        signature = VariadicSignature.from_callable(func)
        for existing in self._overloads:
            shape = _collision(existing.signature, signature)
            if shape is not None:
                log_error(
                    "overload_rejected",
                    **make_event(self.name, str(signature), {"conflicts_with": str(existing.signature), "shape": shape}),
                )
                raise AmbiguousOverloadError(self.name, [str(existing.signature), str(signature)], shape)
        self._overloads.append(Overload(func, signature))
        handler_name = getattr(func, "__qualname__", repr(func))
        log_debug("overload_registered", **make_event(self.name, str(signature), {"handler": handler_name}))
        return func

    def resolve(self, *args: object) -> Callable[..., Any]:
        """Return the single handler that accepts *args* without calling it."""

        return self._select(args).handler

    def signatures(self) -> tuple[VariadicSignature, ...]:
        """Return the registered signatures in registration order."""

        return tuple(overload.signature for overload in self._overloads)

    def __call__(self, *args: object) -> Any:
        overload = self._select(args)
        log_debug("overload_resolved", **make_event(self.name, str(overload.signature), {"args": len(args)}))
        return overload.handler(*args)

    def __len__(self) -> int:
        return len(self._overloads)

    def __iter__(self) -> Iterator[Overload]:
        return iter(self._overloads)

    def __repr__(self) -> str:
        listed = ", ".join(str(sig) for sig in self.signatures())
        return f"OverloadSet({self.name!r}: {listed})"

    def _select(self, args: tuple[object, ...]) -> Overload:
        matches = [overload for overload in self._overloads if overload.signature.accepts(args)]
        shape = describe_shape(args)
        if not matches:
            log_error("overload_unmatched", **make_event(self.name, None, {"shape": shape}))
            raise NoMatchingOverloadError(self.name, shape, [str(sig) for sig in self.signatures()])
        if len(matches) > 1:
            log_error("overload_ambiguous", **make_event(self.name, None, {"shape": shape}))
            raise AmbiguousOverloadError(self.name, [str(match.signature) for match in matches], shape)
        return matches[0]


def _collision(first: VariadicSignature, second: VariadicSignature) -> str | None:
    """Return the rendered shape on which two signatures collide at registration time."""

    if first == second:
        return describe_kinds(first.fixed)
    shared = first.overlap(second)
    if shared is not None:
        return describe_kinds(shared)
    if first.shares_empty_call(second):
        return describe_kinds(())
    return None


__all__ = ["Overload", "OverloadSet"]
