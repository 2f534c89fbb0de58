"""Monoid typeclass and sequence reduction.

A monoid is a value-independent pair of an identity element and an
associative ``combine``. Because the identity does not need an existing value
to be reached, ``collapse`` has a well-defined answer for empty input.
Witnesses are plain module constants passed explicitly at each call site.
"""

from __future__ import annotations

from dataclasses import dataclass
from functools import reduce
import operator
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable


@dataclass(frozen=True, slots=True)
class Monoid[A]:
    """Identity element plus associative binary operation for one type.

    Not checked at construction: ``combine`` must be associative and
    ``identity`` must be a two-sided identity. See
    ``funcore.laws.check_monoid_laws``.
    """

    identity: A
    combine: Callable[[A, A], A]
    name: str = ""


SUM: Monoid[Any] = Monoid(identity=0, combine=operator.add, name="sum")
PRODUCT: Monoid[Any] = Monoid(identity=1, combine=operator.mul, name="product")
STRING_CONCAT: Monoid[str] = Monoid(
    identity="", combine=operator.add, name="string_concat"
)
ALL: Monoid[bool] = Monoid(identity=True, combine=lambda a, b: a and b, name="all")
ANY: Monoid[bool] = Monoid(identity=False, combine=lambda a, b: a or b, name="any")


def tuple_concat() -> Monoid[tuple[Any, ...]]:
    """Return the concatenation monoid for tuples."""
    return Monoid(identity=(), combine=operator.add, name="tuple_concat")


def collapse[A](monoid: Monoid[A], items: Iterable[A]) -> A:
    """Reduce ``items`` left to right, starting from ``monoid.identity``.

    Returns ``monoid.identity`` for empty input. ``items`` is only iterated.

    Example:
        collapse(SUM, [1, 2, 3, 4])  # 10
        collapse(STRING_CONCAT, ["Hello", ", ", "world", "!"])  # "Hello, world!"
    """
    return reduce(monoid.combine, items, monoid.identity)


def collapser[A](monoid: Monoid[A]) -> Callable[[Iterable[A]], A]:
    """Curried ``collapse``: fix the monoid now, supply items later."""

    def _collapse(items: Iterable[A]) -> A:
        return collapse(monoid, items)

    return _collapse
