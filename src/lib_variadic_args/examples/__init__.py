"""Demonstration functions for variable-length argument lists."""

from .varargs import old_style_varargs, print_sequence, varargs_test, varargs_test2, varargs_test3

__all__ = [
    "old_style_varargs",
    "print_sequence",
    "varargs_test",
    "varargs_test2",
    "varargs_test3",
]
