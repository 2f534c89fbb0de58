"""Law checkers for typeclass witnesses.

The type system cannot enforce the algebraic laws a witness promises, so these
helpers check them against sample values. Violations come back as
``Failure(LawViolation)``; nothing here raises.
"""

from __future__ import annotations

from itertools import product
import logging
from typing import TYPE_CHECKING, Any

from funcore.errors import LawViolation
from funcore.result import Failure, Success

if TYPE_CHECKING:
    from collections.abc import Callable, Iterable

    from funcore.functor import Functor
    from funcore.monoid import Monoid
    from funcore.result import Result

logger = logging.getLogger(__name__)

LEFT_IDENTITY = "left_identity"
RIGHT_IDENTITY = "right_identity"
ASSOCIATIVITY = "associativity"
FUNCTOR_IDENTITY = "functor_identity"
FUNCTOR_COMPOSITION = "functor_composition"


def _violation(law: str, message: str) -> Failure[LawViolation]:
    logger.debug("Law violated (%s): %s", law, message)
    return Failure(LawViolation(message, law=law))


def check_monoid_laws[A](
    monoid: Monoid[A], samples: Iterable[A]
) -> Result[None, LawViolation]:
    """Check identity and associativity of ``monoid`` over ``samples``.

    Identity is checked per sample, associativity for every ordered triple,
    so keep ``samples`` small. ``samples`` is materialized once, so
    generators are checked as fully as lists.
    """
    samples = tuple(samples)
    label = monoid.name or repr(monoid)
    combine = monoid.combine
    for a in samples:
        if combine(monoid.identity, a) != a:
            return _violation(
                LEFT_IDENTITY, f"{label}: combine(identity, {a!r}) != {a!r}"
            )
        if combine(a, monoid.identity) != a:
            return _violation(
                RIGHT_IDENTITY, f"{label}: combine({a!r}, identity) != {a!r}"
            )
    for a, b, c in product(samples, repeat=3):
        if combine(combine(a, b), c) != combine(a, combine(b, c)):
            return _violation(
                ASSOCIATIVITY, f"{label}: not associative for ({a!r}, {b!r}, {c!r})"
            )
    return Success(None)


def check_functor_laws(
    witness: Functor,
    container: Any,
    f: Callable[[Any], Any],
    g: Callable[[Any], Any],
) -> Result[None, LawViolation]:
    """Check the identity and composition laws of ``witness`` on ``container``."""
    if witness.map(container, lambda x: x) != container:
        return _violation(
            FUNCTOR_IDENTITY, f"{witness!r}: map(c, identity) != c for {container!r}"
        )
    chained = witness.map(witness.map(container, f), g)
    composed = witness.map(container, lambda x: g(f(x)))
    if chained != composed:
        return _violation(
            FUNCTOR_COMPOSITION,
            f"{witness!r}: map(map(c, f), g) != map(c, g . f) for {container!r}",
        )
    return Success(None)
