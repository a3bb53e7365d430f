"""ExceptionCollector: ordered container of DomainErrors (hard mode).

Supports two ways of surfacing failures:

- *raise now*: ``raise_now()`` appends the error and raises it at once
  (the legacy immediate mode).
- *collect now, raise later*: ``add()`` accumulates errors and
  ``raise_all()`` drains them in one go.

Invariant: every DomainError this container raises was appended to it
first, so "what failed" can always be inspected after the raise.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator

from notifications.domain.exceptions import AggregateDomainError, DomainError

logger = logging.getLogger(__name__)


class ExceptionCollector:

    def __init__(self, errors: Iterable[DomainError] | None = None) -> None:
        self._errors: list[DomainError] = list(errors or [])

    # --- Mutation -------------------------------------------------------------

    def add(self, error: DomainError) -> None:
        self._errors.append(error)
        logger.debug("Domain error collected for '%s'", error.key)

    def add_all(self, errors: Iterable[DomainError] | ExceptionCollector) -> None:
        """Append every error from a sequence or another collector."""
        if isinstance(errors, ExceptionCollector):
            errors = errors.errors
        for error in errors:
            self.add(error)

    def add_message(self, key: str | None, message: str, *args: object) -> None:
        self.add(DomainError(key, message.format(*args) if args else message))

    def raise_now(self, error: DomainError) -> None:
        """Record *error* and raise it immediately."""
        self.add(error)
        raise error

    def raise_message(self, key: str | None, message: str, *args: object) -> None:
        """Build a DomainError like ``add_message`` and raise it at once."""
        self.raise_now(DomainError(key, message.format(*args) if args else message))

    def raise_all(self, clear_after: bool = True) -> None:
        """Raise everything collected so far.

        - nothing collected: no-op
        - exactly one error: that error is raised unwrapped
        - several errors: one AggregateDomainError, in collection order

        With ``clear_after`` the container is emptied even though the
        raise leaves this method early.
        """
        if not self._errors:
            return

        if len(self._errors) == 1:
            exc: DomainError | AggregateDomainError = self._errors[0]
        else:
            exc = AggregateDomainError(self._errors)

        logger.info("Raising %d collected domain error(s)", len(self._errors))
        try:
            raise exc
        finally:
            if clear_after:
                self._errors.clear()

    def clear(self) -> None:
        self._errors.clear()

    # --- Inspection -----------------------------------------------------------

    @property
    def has_errors(self) -> bool:
        return bool(self._errors)

    @property
    def errors(self) -> tuple[DomainError, ...]:
        """Read-only view, insertion order preserved."""
        return tuple(self._errors)

    def __iter__(self) -> Iterator[DomainError]:
        return iter(tuple(self._errors))

    def __len__(self) -> int:
        return len(self._errors)

    def __repr__(self) -> str:
        return f"ExceptionCollector({len(self._errors)} errors)"
