"""Result type for explicit, value-level error handling.

A ``Result`` is either a ``Success`` carrying a value or a ``Failure``
carrying an error. Functions that can fail return one instead of raising, so
the failure mode is visible in the signature and the caller decides where to
leave the Result world (``fold``, ``get_or_else`` or the unsafe
``get_or_throw``).

Example:
    result = success(5).map(lambda x: x * 2)
    assert result == success(10)
    print(result.fold(lambda err: f"failed: {err}", str))
"""

from __future__ import annotations

import dataclasses
import logging
import typing

from funcore.errors import UnwrapOnFailureError

if typing.TYPE_CHECKING:
    from collections.abc import Callable

logger = logging.getLogger(__name__)

TSuccess = typing.TypeVar("TSuccess")
TFailure = typing.TypeVar("TFailure")


def _identity[T](value: T) -> T:
    return value


class _ResultOps[TSuccess, TFailure]:
    """Operations shared by both variants, all expressed through ``fold``."""

    __slots__ = ()

    def is_success(self) -> bool:
        return self.fold(lambda _: False, lambda _: True)

    def is_failure(self) -> bool:
        return self.fold(lambda _: True, lambda _: False)

    def fold[T](
        self,
        on_failure: Callable[[TFailure], T],
        on_success: Callable[[TSuccess], T],
    ) -> T:
        """Collapse the result by running exactly one of the two handlers.

        Args:
            on_failure: Called with the failure payload.
            on_success: Called with the success payload.

        Returns:
            Whatever the handler that ran returned.
        """
        match self:
            case Failure(error):
                return on_failure(error)
            case Success(value):
                return on_success(value)
        typing.assert_never(self)  # type: ignore[arg-type]

    def get_or_else(self, default: TSuccess) -> TSuccess:
        """Return the success payload, or ``default`` for a failure."""
        return self.fold(lambda _: default, _identity)

    def get_or_throw(self, message: str | None = None) -> TSuccess:
        """Return the success payload or raise ``UnwrapOnFailureError``.

        Unsafe: this is the one sanctioned exit from the Result abstraction and
        belongs at the boundary of the program (printing, exiting, framework
        handlers). Everywhere else prefer ``fold`` or ``get_or_else``.

        Args:
            message: Error message to raise with. Defaults to a message that
                includes the failure payload.
        """

        def _raise(error: TFailure) -> typing.NoReturn:
            logger.debug("Unwrapping a Failure: %r", error)
            exc = UnwrapOnFailureError(
                message or f"An error has occurred: {error!r}",
                payload=error,
                hint="Use fold() or get_or_else() to handle the failure case.",
            )
            if isinstance(error, BaseException):
                raise exc from error
            raise exc

        return self.fold(_raise, _identity)

    def map[B](self, fn: Callable[[TSuccess], B]) -> Result[B, TFailure]:
        """Apply ``fn`` to a success payload; a failure passes through unchanged."""
        return self.fold(  # type: ignore[return-value]
            lambda _: self, lambda value: Success(fn(value))
        )

    def map_failure[E](self, fn: Callable[[TFailure], E]) -> Result[TSuccess, E]:
        """Apply ``fn`` to a failure payload; a success passes through unchanged."""
        return self.fold(  # type: ignore[return-value]
            lambda error: Failure(fn(error)), lambda _: self
        )


@dataclasses.dataclass(frozen=True, slots=True)
class Success[TSuccess](_ResultOps[TSuccess, typing.Any]):
    """A successful outcome."""

    value: TSuccess


@dataclasses.dataclass(frozen=True, slots=True)
class Failure[TFailure](_ResultOps[typing.Any, TFailure]):
    """A failed outcome, containing the error."""

    error: TFailure


Result = Success[TSuccess] | Failure[TFailure]


def success[T](value: T) -> Success[T]:
    """Wrap ``value`` in a ``Success``."""
    return Success(value)


def failure[E](error: E) -> Failure[E]:
    """Wrap ``error`` in a ``Failure``."""
    return Failure(error)
