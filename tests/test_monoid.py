"""Monoid witnesses and collapse."""

from __future__ import annotations

from hypothesis import given
from hypothesis import strategies as st
import pytest

from funcore.monoid import (
    ALL,
    ANY,
    PRODUCT,
    STRING_CONCAT,
    SUM,
    Monoid,
    collapse,
    collapser,
    tuple_concat,
)

pytestmark = pytest.mark.unit


@pytest.mark.parametrize(
    ("monoid", "identity"),
    [(SUM, 0), (PRODUCT, 1), (STRING_CONCAT, ""), (ALL, True), (ANY, False)],
)
def test_collapse_of_empty_sequence_is_identity(
    monoid: Monoid, identity: object
) -> None:
    assert collapse(monoid, []) == identity
    assert collapse(monoid, []) is monoid.identity


def test_collapse_examples() -> None:
    assert collapse(SUM, [1, 2, 3, 4]) == 10
    assert collapse(PRODUCT, [1, 2, 3, 4]) == 24
    assert collapse(STRING_CONCAT, ["Hello", ", ", "world", "!"]) == "Hello, world!"
    assert collapse(ALL, [True, False, True]) is False
    assert collapse(ANY, [False, False, True]) is True
    assert collapse(tuple_concat(), [(1,), (), (2, 3)]) == (1, 2, 3)


def test_collapse_combines_in_sequence_order() -> None:
    """Order matters for non-commutative monoids."""
    assert collapse(STRING_CONCAT, ["b", "a"]) == "ba"


def test_collapse_does_not_mutate_input() -> None:
    items = [3, 1, 2]
    collapse(SUM, items)
    assert items == [3, 1, 2]


def test_collapse_accepts_any_iterable() -> None:
    assert collapse(SUM, (n for n in range(5))) == 10


def test_collapser_is_curried_collapse() -> None:
    concat = collapser(STRING_CONCAT)
    assert concat(["Hello", ", ", "world", "!"]) == "Hello, world!"
    assert concat([]) == ""


def test_custom_monoid_is_passed_explicitly() -> None:
    maximum = Monoid(identity=float("-inf"), combine=max, name="max")
    assert collapse(maximum, [3, -1, 7]) == 7
    assert collapse(maximum, []) == float("-inf")


@given(items=st.lists(st.integers()))
def test_collapse_is_deterministic(items: list[int]) -> None:
    assert collapse(SUM, items) == collapse(SUM, list(items)) == sum(items)


@given(left=st.lists(st.text()), right=st.lists(st.text()))
def test_collapse_splits_over_concatenation(left: list[str], right: list[str]) -> None:
    """Associativity lets a collapse be split anywhere."""
    whole = collapse(STRING_CONCAT, left + right)
    assert whole == STRING_CONCAT.combine(
        collapse(STRING_CONCAT, left), collapse(STRING_CONCAT, right)
    )
