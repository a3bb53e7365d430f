"""Exception-mode façades: failures become DomainErrors.

Two operating modes exist and are kept apart on purpose, because call
sites depend on which one they get:

- ValidationRulesException collects every failure and raises only when
  the caller drains it with ``raise_all()``.
- ImmediateValidationRulesException raises on the first failing rule,
  which ends the chain right there.

Both record each error in their ExceptionCollector before it is raised.
"""

from __future__ import annotations

from typing import Generic, Self, TypeVar

from notifications.domain.exceptions import DomainError
from notifications.domain.model.exception_collector import ExceptionCollector
from notifications.domain.model.messages import DEFAULT_MESSAGES, MessageCatalog
from notifications.domain.model.notifier import Notifier
from notifications.domain.validation.facade import RuleFacade
from notifications.domain.validation.rules import Clock, ErrorCallback, NotifyCallback

T = TypeVar("T")


class _ExceptionFacade(RuleFacade):

    def __init__(
        self,
        collector: ExceptionCollector | None = None,
        messages: MessageCatalog = DEFAULT_MESSAGES,
        clock: Clock | None = None,
    ) -> None:
        super().__init__(messages=messages, clock=clock)
        self._collector = collector if collector is not None else ExceptionCollector()

    @property
    def collector(self) -> ExceptionCollector:
        return self._collector

    @property
    def has_failures(self) -> bool:
        return self._collector.has_errors

    @property
    def errors(self) -> tuple[DomainError, ...]:
        return self._collector.errors

    def clear(self) -> None:
        self._collector.clear()


class ValidationRulesException(_ExceptionFacade, Generic[T]):
    """Collect-then-raise façade.

    Rule calls never raise; failures pile up in the collector until
    ``raise_all()`` is called.  After a drain with ``clear_after=True``
    the instance is empty again and can be reused.
    """

    def _callbacks(self) -> tuple[NotifyCallback | None, ErrorCallback | None]:
        return None, self._collector.add

    def raise_all(self, clear_after: bool = True) -> None:
        """Raise the single collected error, or an aggregate of all of them."""
        self._collector.raise_all(clear_after=clear_after)

    def publish_exceptions(
        self, *others: _ExceptionFacade | ExceptionCollector | Notifier | None
    ) -> Self:
        """Collect the failures recorded by other validations.

        Notifiers are accepted too; their notifications are promoted to
        DomainErrors.
        """
        for other in others:
            if other is None:
                continue
            if isinstance(other, _ExceptionFacade):
                other = other.collector
            if isinstance(other, Notifier):
                self._collector.add_all(n.to_error() for n in other)
            else:
                self._collector.add_all(other)
        return self


class ImmediateValidationRulesException(_ExceptionFacade, Generic[T]):
    """Raise-on-first-failure façade.

    Every failing rule appends its DomainError to the collector and
    raises it at once, so the rest of the chain does not run.
    """

    def _callbacks(self) -> tuple[NotifyCallback | None, ErrorCallback | None]:
        return None, self._collector.raise_now
