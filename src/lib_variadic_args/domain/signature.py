"""Variadic signature value object.

Purpose
-------
Describe the positional shape of one overload – its fixed leading parameter
types plus the element type of an optional trailing variadic parameter – and
answer the two questions the dispatch registry needs: *does this call fit?*
and *could another shape accept the same call?*

Contents
--------
* :class:`VariadicSignature` – frozen dataclass with matching and overlap helpers.
* :func:`describe_shape` – render the runtime types of a call, e.g. ``(str, int)``.
* :func:`_accepts_value` / :func:`_kinds_overlap` – element typing rules.

System Role
-----------
Pure domain code: no logging, no I/O. :mod:`lib_variadic_args.application.dispatch`
builds signatures from handler functions and relies on :meth:`VariadicSignature.overlap`
to reject ambiguous families at registration time.

``bool`` is a subclass of ``int`` in Python, but overloads treat them as
separate kinds: a ``bool`` value only fits a ``bool`` or ``object`` slot.
"""

from __future__ import annotations

import inspect
import typing
from dataclasses import dataclass
from typing import Any, Callable, Sequence

from .errors import SignatureError

_POSITIONAL = (inspect.Parameter.POSITIONAL_ONLY, inspect.Parameter.POSITIONAL_OR_KEYWORD)


@dataclass(frozen=True, slots=True)
class VariadicSignature:
    """Positional shape of a callable: fixed parameter kinds plus an optional variadic kind.

    Parameters
    ----------
    fixed:
        Types of the required leading parameters, in order.
    variadic:
        Element type of the trailing ``*args`` parameter, or ``None`` when the
        callable has a fixed arity.

    Examples
    --------
    >>> sig = VariadicSignature((str,), int)
    >>> str(sig)
    '(str, int...)'
    >>> sig.accepts(("Varargs test", 5, 10))
    True
    >>> sig.accepts((5, 10))
    False
    >>> VariadicSignature((), int).overlap(VariadicSignature((int,), int))
    (<class 'int'>,)
    """

    fixed: tuple[type, ...] = ()
    variadic: type | None = None

    @classmethod
    def from_callable(cls, func: Callable[..., Any]) -> "VariadicSignature":
        """Derive the signature of *func* from its parameters and annotations.

        Every positional parameter and the ``*args`` parameter must be annotated
        with a class. ``**kwargs``, keyword-only parameters and defaults are
        rejected because they make the positional shape ambiguous.

        Raises
        ------
        SignatureError
            When *func* cannot be described as fixed kinds plus one variadic kind.
        """

        name = getattr(func, "__qualname__", repr(func))
        try:
            parameters = inspect.signature(func).parameters.values()
            hints = typing.get_type_hints(func)
        except (TypeError, ValueError, NameError) as exc:
            raise SignatureError(f"cannot inspect {name}: {exc}") from exc

        fixed: list[type] = []
        variadic: type | None = None
        for param in parameters:
            if param.kind in _POSITIONAL:
                if param.default is not inspect.Parameter.empty:
                    raise SignatureError(f"{name}: parameter '{param.name}' must not have a default")
                fixed.append(_annotation(name, param.name, hints))
            elif param.kind is inspect.Parameter.VAR_POSITIONAL:
                variadic = _annotation(name, param.name, hints)
            else:
                raise SignatureError(f"{name}: parameter '{param.name}' is not positional")
        return cls(tuple(fixed), variadic)

    def admits_arity(self, count: int) -> bool:
        """Return whether a call with *count* positional arguments fits the shape."""

        if self.variadic is None:
            return count == len(self.fixed)
        return count >= len(self.fixed)

    def kind_at(self, position: int) -> type:
        """Return the declared type for argument *position*.

        Raises
        ------
        IndexError
            When *position* lies past the end of a fixed-arity signature.
        """

        if position < len(self.fixed):
            return self.fixed[position]
        if self.variadic is None:
            raise IndexError(f"position {position} is out of range for {self}")
        return self.variadic

    def accepts(self, args: Sequence[object]) -> bool:
        """Return ``True`` when every value in *args* fits the declared shape."""

        if not self.admits_arity(len(args)):
            return False
        return all(_accepts_value(self.kind_at(index), value) for index, value in enumerate(args))

    def overlap(self, other: "VariadicSignature") -> tuple[type, ...] | None:
        """Return the shortest non-empty argument shape both signatures accept, if any.

        Positions past the longer fixed prefix all fall into the variadic kinds,
        so checking one arity beyond that prefix is enough to decide.
        """

        longest = max(len(self.fixed), len(other.fixed)) + 1
        for arity in range(1, longest + 1):
            if not (self.admits_arity(arity) and other.admits_arity(arity)):
                continue
            shape: list[type] = []
            for position in range(arity):
                mine, theirs = self.kind_at(position), other.kind_at(position)
                if not _kinds_overlap(mine, theirs):
                    break
                shape.append(mine if issubclass(mine, theirs) else theirs)
            else:
                return tuple(shape)
        return None

    def shares_empty_call(self, other: "VariadicSignature") -> bool:
        """Return whether both signatures accept the empty call in a way that cannot be told apart.

        Two purely variadic signatures whose element kinds never overlap are
        distinguishable for every non-empty call, so their shared empty call is
        left to call time. Any other pair that admits zero arguments collides.

        >>> VariadicSignature((), int).shares_empty_call(VariadicSignature((), bool))
        False
        >>> VariadicSignature().shares_empty_call(VariadicSignature((), int))
        True
        """

        if not (self.admits_arity(0) and other.admits_arity(0)):
            return False
        if self.variadic is None or other.variadic is None:
            return True
        return _kinds_overlap(self.variadic, other.variadic)

    def __str__(self) -> str:
        parts = [kind.__name__ for kind in self.fixed]
        if self.variadic is not None:
            parts.append(f"{self.variadic.__name__}...")
        return f"({', '.join(parts)})"


def describe_shape(args: Sequence[object]) -> str:
    """Render the runtime types of *args* in signature notation.

    >>> describe_shape(("Varargs test", 5, 10))
    '(str, int, int)'
    >>> describe_shape(())
    '()'
    """

    return "(" + ", ".join(type(value).__name__ for value in args) + ")"


def describe_kinds(kinds: Sequence[type]) -> str:
    """Render declared *kinds* the same way :func:`describe_shape` renders values."""

    return "(" + ", ".join(kind.__name__ for kind in kinds) + ")"


def _annotation(owner: str, param: str, hints: dict[str, Any]) -> type:
    """Return the class annotation for *param* or raise :class:`SignatureError`."""

    kind = hints.get(param)
    if not isinstance(kind, type):
        raise SignatureError(f"{owner}: parameter '{param}' needs a class annotation")
    return kind


def _accepts_value(kind: type, value: object) -> bool:
    """Return whether *value* fits a slot declared as *kind*.

    >>> _accepts_value(int, 3), _accepts_value(int, True), _accepts_value(bool, True)
    (True, False, True)
    """

    if isinstance(value, bool) and kind is not bool and kind is not object:
        return False
    return isinstance(value, kind)


def _kinds_overlap(first: type, second: type) -> bool:
    """Return whether some value fits both *first* and *second*."""

    if first is second:
        return True
    if bool in (first, second):
        other = second if first is bool else first
        return other is object
    return issubclass(first, second) or issubclass(second, first)


__all__ = ["VariadicSignature", "describe_shape", "describe_kinds"]
