"""Error taxonomy and stage outcomes for the validation pipeline.

Validation failures are part of normal operation, so the pipeline stages do
not raise.  Each stage returns an :class:`Outcome` that either carries the
value for the next stage or the :class:`ErrorCode` that ends the run.
:class:`SExpressionError` is reserved for the strict helpers that callers opt
into explicitly.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Generic, Optional, TypeVar

T = TypeVar("T")


class ErrorCode(str, Enum):
    """Closed set of validation failures, listed in precedence order."""

    INVALID_FORMAT = "E1"
    DUPLICATE_PAIR = "E2"
    TOO_MANY_CHILDREN = "E3"
    MULTIPLE_ROOTS = "E4"
    CONTAINS_CYCLE = "E5"

    @property
    def description(self) -> str:
        return _DESCRIPTIONS[self]

    def __str__(self) -> str:  # pragma: no cover - trivial
        return self.value


_DESCRIPTIONS = {
    ErrorCode.INVALID_FORMAT: "Invalid input format",
    ErrorCode.DUPLICATE_PAIR: "Duplicate pair",
    ErrorCode.TOO_MANY_CHILDREN: "Parent has more than two children",
    ErrorCode.MULTIPLE_ROOTS: "Multiple roots",
    ErrorCode.CONTAINS_CYCLE: "Input contains cycle",
}


class SExpressionError(ValueError):
    """Raised by the strict helpers when an expression is rejected."""

    def __init__(self, code: ErrorCode, detail: str | None = None) -> None:
        message = f"{code.value}: {code.description}"
        if detail:
            message = f"{message} ({detail})"
        super().__init__(message)
        self.code = code


@dataclass(frozen=True, slots=True)
class Outcome(Generic[T]):
    """Result of a single pipeline stage.

    Exactly one of ``value`` and ``error`` is meaningful: ``error`` is ``None``
    when the stage succeeded.  Stages whose success carries no payload return
    ``Outcome.success(None)``.
    """

    value: Optional[T] = None
    error: Optional[ErrorCode] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, value: T) -> "Outcome[T]":
        return cls(value=value)

    @classmethod
    def failure(cls, error: ErrorCode) -> "Outcome[T]":
        return cls(error=error)

    def unwrap(self) -> T:
        """Return the value, raising :class:`SExpressionError` on failure."""

        if self.error is not None:
            raise SExpressionError(self.error)
        return self.value  # type: ignore[return-value]


__all__ = ["ErrorCode", "Outcome", "SExpressionError"]
