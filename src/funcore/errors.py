"""Exception hierarchy for funcore."""

from __future__ import annotations

from typing import Any


class FuncoreError(Exception):
    """Base exception for all funcore errors."""

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint = hint


class ConfigurationError(FuncoreError):
    """Configuration validation or resolution failed."""


class ValidationFailure(FuncoreError):
    """A domain value failed validation.

    Carried as the payload of a ``Failure``. The library returns these and
    never raises them; callers decide whether to cross into throwing code.
    """

    def __init__(
        self,
        message: str,
        *,
        hint: str | None = None,
        field: str | None = None,
    ) -> None:
        super().__init__(message, hint=hint)
        self.field = field

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ValidationFailure):
            return NotImplemented
        return (str(self), self.field) == (str(other), other.field)

    def __hash__(self) -> int:
        return hash((type(self).__name__, str(self), self.field))


class UnwrapOnFailureError(FuncoreError):
    """``get_or_throw`` was called on a ``Failure``.

    The only error that crosses the Result boundary. ``payload`` holds the
    failure value that was being unwrapped.
    """

    def __init__(
        self,
        message: str,
        *,
        payload: Any,
        hint: str | None = None,
    ) -> None:
        super().__init__(message, hint=hint)
        self.payload = payload


class EmptySequenceError(FuncoreError, ValueError):
    """An extreme-element selection received no elements."""


class LawViolation(FuncoreError):
    """A typeclass witness broke one of its algebraic laws.

    Returned by the law checkers as a ``Failure`` payload.
    """

    def __init__(
        self,
        message: str,
        *,
        law: str,
        hint: str | None = None,
    ) -> None:
        super().__init__(message, hint=hint)
        self.law = law
