"""Illustrative call sites for the functional core.

Small domain records and functions showing how the core is meant to be
consumed: validate into a ``Result``, transform inside it, and only leave it
at the boundary. Nothing in the core depends on this module.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from funcore.errors import ValidationFailure
from funcore.functor import RESULT_FUNCTOR
from funcore.monoid import SUM, collapse
from funcore.result import failure, success

if TYPE_CHECKING:
    from collections.abc import Iterable

    from funcore.result import Result


@dataclass(frozen=True)
class Plate:
    """A dish on a menu."""

    name: str
    price: float


@dataclass(frozen=True)
class Person:
    """A person, ordered by age."""

    name: str
    age: int

    def compare(self, other: Person) -> int:
        return self.age - other.age


@dataclass(frozen=True)
class NumberOrder:
    """Adapter giving a plain number an ``Orderable`` interface."""

    value: float

    def compare(self, other: float) -> float:
        return self.value - other


def validate_plate(plate: Plate) -> Result[Plate, ValidationFailure]:
    """Validate ``plate`` without raising.

    The name is checked before the price, so a plate with both problems
    reports the empty name.
    """
    if len(plate.name) <= 0:
        return failure(
            ValidationFailure("The name of the plate cannot be empty", field="name")
        )
    if plate.price < 0.0:
        return failure(
            ValidationFailure(
                "The price of the plate cannot be negative", field="price"
            )
        )
    return success(plate)


def first_letter_of_plate(plate: Plate) -> Result[str, ValidationFailure]:
    """Upper-cased first letter of a valid plate's name, still inside a Result."""
    validation = validate_plate(plate)
    upper_cased = RESULT_FUNCTOR.map(validation, lambda p: p.name.upper())
    return RESULT_FUNCTOR.map(upper_cased, lambda name: name[0])


def sum_abs(numbers: Iterable[float]) -> float:
    """Sum of absolute values. Pure: ``numbers`` is left untouched."""
    return collapse(SUM, (abs(n) for n in numbers))


def mutating_sum_abs(numbers: list[float]) -> float:
    """Sum of absolute values that overwrites ``numbers`` in place.

    Counter-example to ``sum_abs``: the caller's list comes back holding the
    absolute values, so the same call site can observe different data before
    and after. Kept only to contrast with the pure version.
    """
    for index, n in enumerate(numbers):
        numbers[index] = abs(n)
    total = 0.0
    for n in numbers:
        total += n
    return total
