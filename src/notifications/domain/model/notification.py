"""Notification value object.

A Notification is the soft-mode result carrier: a recorded, non-fatal
validation failure.  Immutable and compared by value.
"""

from __future__ import annotations

from dataclasses import dataclass

from notifications.domain.exceptions import DomainError


@dataclass(frozen=True)
class Notification:
    """A field key (None for object-level failures) and its message."""

    key: str | None
    message: str

    def __str__(self) -> str:
        return self.message

    # --- Conversion -----------------------------------------------------------

    def to_error(self) -> DomainError:
        """Promote this notification to a raisable DomainError."""
        return DomainError(self.key, self.message)

    @staticmethod
    def from_error(error: DomainError) -> Notification:
        return Notification(error.key, error.message)
