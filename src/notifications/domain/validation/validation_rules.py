"""Notify-mode façade: failures are recorded as Notifications."""

from __future__ import annotations

from typing import Generic, Self, TypeVar

from notifications.domain.model.messages import DEFAULT_MESSAGES, MessageCatalog
from notifications.domain.model.notification import Notification
from notifications.domain.model.notifier import Notifier
from notifications.domain.validation.facade import RuleFacade
from notifications.domain.validation.rules import Clock, ErrorCallback, NotifyCallback

T = TypeVar("T")


class ValidationRules(RuleFacade, Generic[T]):
    """Chainable rule calls that collect failures into a Notifier.

    ``T`` names the object under validation; it is only a label for
    call sites and type checkers.

    Example::

        rules = (
            ValidationRules[Customer]()
            .is_not_null_or_whitespace("Name", customer.name)
            .is_email("Email", customer.email)
        )
        if rules.has_failures:
            return rules.notifications
    """

    def __init__(
        self,
        notifier: Notifier | None = None,
        messages: MessageCatalog = DEFAULT_MESSAGES,
        clock: Clock | None = None,
    ) -> None:
        super().__init__(messages=messages, clock=clock)
        self._notifier = notifier if notifier is not None else Notifier()

    def _callbacks(self) -> tuple[NotifyCallback | None, ErrorCallback | None]:
        return self._notifier.add, None

    # --- Container access -----------------------------------------------------

    @property
    def notifier(self) -> Notifier:
        return self._notifier

    @property
    def has_failures(self) -> bool:
        return self._notifier.has_notifications

    @property
    def has_notifications(self) -> bool:
        return self._notifier.has_notifications

    @property
    def notifications(self) -> tuple[Notification, ...]:
        return self._notifier.notifications

    def add_notification(self, key: str | None, message: str, *args: object) -> Self:
        """Record a failure found by the caller outside the rule catalog."""
        self._notifier.add_message(key, message, *args)
        return self

    def join(self, *others: ValidationRules | Notifier | None) -> Self:
        """Merge the notifications of sub-object validations into this one."""
        for other in others:
            if other is None:
                continue
            if isinstance(other, ValidationRules):
                other = other.notifier
            self._notifier.add_all(other)
        return self

    def clear(self) -> None:
        self._notifier.clear()
