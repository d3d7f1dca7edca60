"""Unit tests for :class:`VariadicSignature` derivation, matching and overlap."""

from __future__ import annotations

import pytest

from lib_variadic_args.domain.errors import SignatureError
from lib_variadic_args.domain.signature import VariadicSignature, describe_shape

INTS = VariadicSignature((), int)
FLAGS = VariadicSignature((), bool)
LABELLED = VariadicSignature((str,), int)
LEADING_INT = VariadicSignature((int,), int)


def test_from_callable_reads_fixed_and_variadic_annotations() -> None:
    def handler(a: int, b: int, *c: int) -> None: ...

    assert VariadicSignature.from_callable(handler) == VariadicSignature((int, int), int)


def test_from_callable_without_variadic_parameter() -> None:
    def handler(text: str) -> None: ...

    signature = VariadicSignature.from_callable(handler)
    assert signature.variadic is None
    assert str(signature) == "(str)"


@pytest.mark.parametrize(
    "source",
    [
        "def handler(*values): ...",
        "def handler(a: int, *values: int, **extra: int): ...",
        "def handler(*values: int, flag: bool): ...",
        "def handler(a: int = 1, *values: int): ...",
        "def handler(a: 'int | str', *values: int): ...",
    ],
    ids=["unannotated", "kwargs", "keyword-only", "default", "union"],
)
def test_from_callable_rejects_unsupported_parameters(source: str) -> None:
    namespace: dict[str, object] = {}
    exec(source, namespace)
    with pytest.raises(SignatureError):
        VariadicSignature.from_callable(namespace["handler"])


def test_rendering_uses_ellipsis_for_variadic_kind() -> None:
    assert str(INTS) == "(int...)"
    assert str(LABELLED) == "(str, int...)"
    assert str(VariadicSignature()) == "()"


@pytest.mark.parametrize(
    ("signature", "args", "expected"),
    [
        (INTS, (1, 2, 3), True),
        (INTS, (), True),
        (INTS, (True,), False),
        (FLAGS, (True, True, False), True),
        (FLAGS, (1,), False),
        (LABELLED, ("Varargs test", 5, 10), True),
        (LABELLED, ("only text",), True),
        (LABELLED, (), False),
        (LABELLED, (5, 10), False),
        (VariadicSignature((int, int)), (1, 2), True),
        (VariadicSignature((int, int)), (1, 2, 3), False),
    ],
)
def test_accepts(signature: VariadicSignature, args: tuple[object, ...], expected: bool) -> None:
    assert signature.accepts(args) is expected


def test_overlap_detects_shared_single_int_shape() -> None:
    assert INTS.overlap(LEADING_INT) == (int,)
    assert LEADING_INT.overlap(INTS) == (int,)


def test_overlap_ignores_empty_call_only() -> None:
    assert INTS.overlap(FLAGS) is None


def test_overlap_between_distinct_leading_kinds() -> None:
    assert INTS.overlap(LABELLED) is None
    assert FLAGS.overlap(LABELLED) is None


def test_overlap_with_object_variadic_narrows_to_bool() -> None:
    assert VariadicSignature((), object).overlap(FLAGS) == (bool,)


def test_overlap_between_fixed_arities() -> None:
    pair = VariadicSignature((int, int))
    assert pair.overlap(VariadicSignature((int,), int)) == (int, int)
    assert pair.overlap(VariadicSignature((int,))) is None


def test_describe_shape_uses_runtime_types() -> None:
    assert describe_shape((True, 1, "x")) == "(bool, int, str)"


def test_kind_at_past_fixed_arity_raises() -> None:
    with pytest.raises(IndexError):
        VariadicSignature((int, int)).kind_at(2)


def test_shares_empty_call() -> None:
    assert VariadicSignature().shares_empty_call(INTS)
    assert not INTS.shares_empty_call(FLAGS)
    assert VariadicSignature((), object).shares_empty_call(INTS)
    assert not LABELLED.shares_empty_call(INTS)
