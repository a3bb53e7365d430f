"""Domain-level exceptions.

Every error raised by this package is a subclass of DomainException so
callers (and the CLI layer) can catch them uniformly and display
user-friendly messages.
"""

from __future__ import annotations

from collections.abc import Iterable


class DomainException(Exception):
    """Base class for all domain errors."""


class DomainError(DomainException):
    """A failed validation rule, raised as a control-flow signal.

    Carries the same ``key`` / ``message`` pair as a Notification.
    Both are read-only once the error is created.
    """

    def __init__(self, key: str | None, message: str) -> None:
        super().__init__(message)
        self._key = key
        self._message = message

    @property
    def key(self) -> str | None:
        return self._key

    @property
    def message(self) -> str:
        return self._message

    def __str__(self) -> str:
        return self._message

    def __repr__(self) -> str:
        return f"DomainError(key={self._key!r}, message={self._message!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DomainError):
            return NotImplemented
        return (self._key, self._message) == (other._key, other._message)

    def __hash__(self) -> int:
        return hash((self._key, self._message))


class AggregateDomainError(DomainException):
    """Several DomainErrors raised together, in the order they were collected."""

    def __init__(self, errors: Iterable[DomainError]) -> None:
        self._errors = tuple(errors)
        super().__init__(
            "; ".join(
                f"{e.key}: {e.message}" if e.key else e.message for e in self._errors
            )
        )

    @property
    def errors(self) -> tuple[DomainError, ...]:
        return self._errors

    def __len__(self) -> int:
        return len(self._errors)


class UnknownRuleError(DomainException):
    """A rule name (in a catalog override or a rule call) does not exist."""


class CatalogFileError(DomainException):
    """A message catalog file could not be read or has the wrong shape."""


class TemplateError(DomainException):
    """A message template uses a field its rule does not supply."""
