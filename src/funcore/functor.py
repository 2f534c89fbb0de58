"""Functor typeclass emulated with one witness per container shape.

Python has no higher-kinded types, so instead of a single ``Functor[F[_]]``
there is one concrete witness per shape: ``ResultFunctor`` maps over
``Result`` and ``TupleFunctor`` maps over tuples. Code that only needs
``map`` takes a witness as an argument and stays agnostic of the container,
including containers from code the caller cannot retrofit an interface onto.

Witnesses must satisfy:
    - identity: ``witness.map(c, lambda x: x) == c``
    - composition: ``witness.map(witness.map(c, f), g)``
      equals ``witness.map(c, lambda x: g(f(x)))``
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

from funcore.result import Failure, Success

if TYPE_CHECKING:
    from collections.abc import Callable

    from funcore.result import Result


class Functor(Protocol):
    """Static protocol for functor witnesses.

    Not runtime-checkable: ``Result`` containers also have a ``map`` method,
    and an attribute-only isinstance check would mistake them for witnesses.
    """

    def map(self, container: Any, fn: Callable[[Any], Any]) -> Any: ...  # noqa: D102


class ResultFunctor:
    """Functor witness for ``Result``: maps the success side only."""

    __slots__ = ()

    def map[A, B, E](
        self, container: Result[A, E], fn: Callable[[A], B]
    ) -> Result[B, E]:
        return container.fold(Failure, lambda value: Success(fn(value)))

    def __repr__(self) -> str:
        return "ResultFunctor()"


class TupleFunctor:
    """Functor witness for tuples: maps every element, keeps length and order."""

    __slots__ = ()

    def map[A, B](
        self, container: tuple[A, ...], fn: Callable[[A], B]
    ) -> tuple[B, ...]:
        return tuple(fn(item) for item in container)

    def __repr__(self) -> str:
        return "TupleFunctor()"


RESULT_FUNCTOR = ResultFunctor()
TUPLE_FUNCTOR = TupleFunctor()


def fmap(witness: Functor, container: Any, fn: Callable[[Any], Any]) -> Any:
    """Map ``fn`` over ``container`` using ``witness``.

    Pure dispatch: all behaviour lives in the witness.
    """
    return witness.map(container, fn)
