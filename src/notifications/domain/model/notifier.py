"""Notifier: ordered container of Notifications (soft mode).

Created per validation session, mutated only through its own API and
discarded (or cleared) when the session ends.  Not safe for concurrent
mutation; use one instance per session.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator

from notifications.domain.model.notification import Notification

logger = logging.getLogger(__name__)


class Notifier:
    """Append-only list of Notifications in call order, no dedup."""

    def __init__(self, notifications: Iterable[Notification] | None = None) -> None:
        self._notifications: list[Notification] = list(notifications or [])

    # --- Mutation -------------------------------------------------------------

    def add(self, notification: Notification) -> None:
        self._notifications.append(notification)
        logger.debug("Notification added for '%s'", notification.key)

    def add_message(self, key: str | None, message: str, *args: object) -> None:
        """Add a notification; ``message`` is formatted with *args* if given.

        Pass ``key=None`` for a failure that belongs to no single field.
        """
        if args:
            message = message.format(*args)
        self.add(Notification(key, message))

    def add_all(self, notifications: Iterable[Notification] | Notifier) -> None:
        """Append every notification from a sequence or another Notifier."""
        if isinstance(notifications, Notifier):
            notifications = notifications.notifications
        for notification in notifications:
            self.add(notification)

    def clear(self) -> None:
        self._notifications.clear()

    # --- Inspection -----------------------------------------------------------

    @property
    def has_notifications(self) -> bool:
        return bool(self._notifications)

    @property
    def notifications(self) -> tuple[Notification, ...]:
        """Read-only view, insertion order preserved."""
        return tuple(self._notifications)

    def __iter__(self) -> Iterator[Notification]:
        return iter(tuple(self._notifications))

    def __len__(self) -> int:
        return len(self._notifications)

    def __repr__(self) -> str:
        return f"Notifier({len(self._notifications)} notifications)"
