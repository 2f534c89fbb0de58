"""Extreme-element selection parameterized by a comparison strategy.

Three ways to say how values compare, from most to least coupled:

- the values implement ``Orderable`` themselves (``greatest_orderable``),
- an adapter wraps each value into an ``Orderable`` (``greatest_adapted``),
  useful for types the caller does not own,
- a free three-way ``compare`` function (``greatest``).

All three fold left keeping the running best and replace it only on a strict
improvement, so ties keep the earliest element. Empty input raises
``EmptySequenceError``; there is no neutral seed for "greatest".
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Protocol, runtime_checkable

from funcore.errors import EmptySequenceError

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable

logger = logging.getLogger(__name__)


@runtime_checkable
class Orderable[A](Protocol):
    """Values that compare themselves to another value of the same type.

    ``compare`` returns a negative number, zero or a positive number when
    ``self`` is less than, equal to or greater than ``other``.
    """

    def compare(self, other: A) -> int: ...  # noqa: D102


def _fold_greatest[A](
    items: Iterable[A], beats: Callable[[A, A], bool], caller: str
) -> A:
    iterator = iter(items)
    try:
        best = next(iterator)
    except StopIteration:
        logger.debug("%s called with an empty sequence", caller)
        raise EmptySequenceError(
            f"{caller}() requires at least one element",
            hint=(
                "Check for emptiness first, or collapse with a Monoid "
                "if a neutral value exists."
            ),
        ) from None
    for candidate in iterator:
        if beats(best, candidate):
            best = candidate
    return best


def greatest[A](items: Iterable[A], compare: Callable[[A, A], int]) -> A:
    """Return the greatest element of ``items`` according to ``compare``.

    Args:
        items: Non-empty iterable.
        compare: Three-way comparison. Not validated.

    Raises:
        EmptySequenceError: ``items`` has no elements.

    Example:
        greatest([3, 1, 4, 1, 5], lambda a, b: a - b)  # 5
    """
    return _fold_greatest(
        items, lambda best, candidate: compare(best, candidate) < 0, "greatest"
    )


def greatest_orderable[A: Orderable](items: Iterable[A]) -> A:
    """Return the greatest element using each element's own ``compare``."""
    return _fold_greatest(
        items,
        lambda best, candidate: best.compare(candidate) < 0,
        "greatest_orderable",
    )


def greatest_adapted[A](
    items: Iterable[A], wrap: Callable[[A], Orderable[A]]
) -> A:
    """Return the greatest element, adapting each value with ``wrap`` to compare it.

    Example:
        greatest_adapted([1, 2, 3], NumberOrder)  # see funcore.lessons
    """
    return _fold_greatest(
        items,
        lambda best, candidate: wrap(best).compare(candidate) < 0,
        "greatest_adapted",
    )
