"""Domain-level exception hierarchy.

Purpose
-------
Expose the stable error taxonomy shared by the dispatch registry, the
demonstration driver, and consuming code. The hierarchy lives in the domain
layer so that the application layer and the CLI depend on it, never the other
way round.

Contents
--------
* :class:`VariadicError` – umbrella base class for every library failure.
* :class:`SignatureError` – a handler cannot be described as a variadic shape.
* :class:`AmbiguousOverloadError` – more than one handler accepts a call shape.
* :class:`NoMatchingOverloadError` – no handler accepts a call shape.
* :class:`UnknownSectionError` – the driver was asked for a missing section.

System Role
-----------
:mod:`lib_variadic_args.application.dispatch` raises the overload errors while
registering or resolving handlers; :mod:`lib_variadic_args.core` raises
:class:`UnknownSectionError`. Callers catch :class:`VariadicError` to handle all
library failures uniformly.
"""

from __future__ import annotations

from typing import Sequence


class VariadicError(Exception):
    """Base type for all exceptions emitted by ``lib_variadic_args``.

    Why
    ----
    Provide a single catch-all type for consumers that do not need fine-grained
    handling.
    """


class SignatureError(VariadicError):
    """Raised when a handler's parameter list cannot form a variadic signature.

    Typical Sources
    ---------------
    Missing annotations, ``**kwargs``, keyword-only parameters or parameters
    with default values on a function passed to ``OverloadSet.register``.
    """


class AmbiguousOverloadError(VariadicError):
    """Raised when two or more handlers accept the same argument shape.

    Why
    ----
    Overloading on variadic parameters makes it easy to declare handlers that
    both match a call such as ``f(1)``. Picking one silently would hide the
    mistake, so the registry rejects the family instead.

    Attributes
    ----------
    name:
        Name of the overload family.
    signatures:
        Rendered signatures that collide, in registration order.
    shape:
        Rendered argument shape accepted by all of them (``"()"`` for the
        empty call).
    """

    def __init__(self, name: str, signatures: Sequence[str], shape: str) -> None:
        self.name = name
        self.signatures = tuple(signatures)
        self.shape = shape
        listed = " and ".join(self.signatures)
        super().__init__(f"ambiguous overloads for {name}: {listed} both accept {shape}")


class NoMatchingOverloadError(VariadicError):
    """Raised when a call matches none of the registered handlers."""

    def __init__(self, name: str, shape: str, available: Sequence[str]) -> None:
        self.name = name
        self.shape = shape
        self.available = tuple(available)
        candidates = ", ".join(self.available) or "none registered"
        super().__init__(f"no overload of {name} accepts {shape}; candidates: {candidates}")


class UnknownSectionError(VariadicError):
    """Raised when :func:`lib_variadic_args.core.run_demo` receives an unknown section name."""
