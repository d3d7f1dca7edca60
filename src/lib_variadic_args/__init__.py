"""Public package surface for the variable-length argument demonstration.

Exporting the examples, the overload registry and :func:`run_demo` here allows
both ``import lib_variadic_args`` and ``python -m lib_variadic_args`` flows to
exercise the same functions.
"""

from __future__ import annotations

from .application.dispatch import Overload, OverloadSet
from .core import SECTIONS, run_demo, section_names
from .domain.errors import (
    AmbiguousOverloadError,
    NoMatchingOverloadError,
    SignatureError,
    UnknownSectionError,
    VariadicError,
)
from .domain.signature import VariadicSignature
from .examples import old_style_varargs, print_sequence, varargs_test, varargs_test2, varargs_test3
from .observability import bind_trace_id, get_logger
from .testing import build_ambiguous_family

__all__ = [
    "AmbiguousOverloadError",
    "NoMatchingOverloadError",
    "Overload",
    "OverloadSet",
    "SECTIONS",
    "SignatureError",
    "UnknownSectionError",
    "VariadicError",
    "VariadicSignature",
    "bind_trace_id",
    "build_ambiguous_family",
    "get_logger",
    "old_style_varargs",
    "print_sequence",
    "run_demo",
    "section_names",
    "varargs_test",
    "varargs_test2",
    "varargs_test3",
]
