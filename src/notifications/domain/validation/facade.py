"""Shared forwarding layer for the fluent façades.

RuleFacade exposes one chainable method per rule.  Each method only
picks the catalog template, forwards to the rule engine together with
the callbacks of the concrete façade, and returns ``self``.  Passing
``message=`` replaces the template with a custom message.

Subclasses decide the failure channel by implementing ``_callbacks()``.
"""

from __future__ import annotations

import uuid
from abc import ABC, abstractmethod
from datetime import date, datetime
from typing import Self

from notifications.domain.model.dates import TextComparison, Weekday
from notifications.domain.model.messages import DEFAULT_MESSAGES, MessageCatalog
from notifications.domain.validation import rules
from notifications.domain.validation.rules import (
    Clock,
    DateInput,
    ErrorCallback,
    Number,
    NotifyCallback,
)


class RuleFacade(ABC):

    def __init__(
        self,
        messages: MessageCatalog = DEFAULT_MESSAGES,
        clock: Clock | None = None,
    ) -> None:
        self._messages = messages
        self._clock = clock

    @property
    def messages(self) -> MessageCatalog:
        return self._messages

    @abstractmethod
    def _callbacks(self) -> tuple[NotifyCallback | None, ErrorCallback | None]:
        """Return ``(notify, on_error)``; exactly one is set."""

    @property
    @abstractmethod
    def has_failures(self) -> bool:
        """True if any rule has failed since the last clear/drain."""

    def _channel(self) -> dict[str, NotifyCallback | ErrorCallback | None]:
        notify, on_error = self._callbacks()
        return {"notify": notify, "on_error": on_error}

    # --- Strings --------------------------------------------------------------

    def min_length(
        self, key: str, value: str | None, minimum: int, message: str | None = None
    ) -> Self:
        rules.min_length(
            value, minimum, key, self._messages.min_length,
            message=message, **self._channel(),
        )
        return self

    def max_length(
        self, key: str, value: str | None, maximum: int, message: str | None = None
    ) -> Self:
        rules.max_length(
            value, maximum, key, self._messages.max_length,
            message=message, **self._channel(),
        )
        return self

    def is_length_between(
        self,
        key: str,
        value: str | None,
        minimum: int,
        maximum: int,
        message: str | None = None,
    ) -> Self:
        rules.is_length_between(
            value, minimum, maximum, key, self._messages.is_length_between,
            message=message, **self._channel(),
        )
        return self

    def is_length_greater_than(
        self, key: str, value: str | None, target: int, message: str | None = None
    ) -> Self:
        rules.is_length_greater_than(
            value, target, key, self._messages.is_length_greater_than,
            message=message, **self._channel(),
        )
        return self

    def is_length_lower_than(
        self, key: str, value: str | None, target: int, message: str | None = None
    ) -> Self:
        rules.is_length_lower_than(
            value, target, key, self._messages.is_length_lower_than,
            message=message, **self._channel(),
        )
        return self

    def is_not_null(self, key: str, value: str | None, message: str | None = None) -> Self:
        rules.is_not_null(
            value, key, self._messages.is_not_null, message=message, **self._channel()
        )
        return self

    def is_null(self, key: str, value: str | None, message: str | None = None) -> Self:
        rules.is_null(
            value, key, self._messages.is_null, message=message, **self._channel()
        )
        return self

    def is_not_null_or_empty(
        self, key: str, value: str | None, message: str | None = None
    ) -> Self:
        rules.is_not_null_or_empty(
            value, key, self._messages.is_not_null_or_empty,
            message=message, **self._channel(),
        )
        return self

    def is_null_or_empty(
        self, key: str, value: str | None, message: str | None = None
    ) -> Self:
        rules.is_null_or_empty(
            value, key, self._messages.is_null_or_empty,
            message=message, **self._channel(),
        )
        return self

    def is_not_null_or_whitespace(
        self, key: str, value: str | None, message: str | None = None
    ) -> Self:
        rules.is_not_null_or_whitespace(
            value, key, self._messages.is_not_null_or_whitespace,
            message=message, **self._channel(),
        )
        return self

    def is_null_or_whitespace(
        self, key: str, value: str | None, message: str | None = None
    ) -> Self:
        rules.is_null_or_whitespace(
            value, key, self._messages.is_null_or_whitespace,
            message=message, **self._channel(),
        )
        return self

    # --- Equality -------------------------------------------------------------

    def compare(
        self,
        key: str,
        value: str | uuid.UUID | Number | None,
        comparer: str | uuid.UUID | Number | None,
        message: str | None = None,
        *,
        comparison: TextComparison = TextComparison.ORDINAL,
    ) -> Self:
        """Equality check, dispatched on the type of the operands.

        UUIDs compare as identifiers, strings (or None) as text under
        *comparison*, anything else as numbers.
        """
        if isinstance(value, uuid.UUID) or isinstance(comparer, uuid.UUID):
            rules.compare_uuid(
                value, comparer, key, self._messages.compare_uuid,
                message=message, **self._channel(),
            )
        elif isinstance(value, (str, type(None))) and isinstance(comparer, (str, type(None))):
            rules.compare_text(
                value, comparer, key, self._messages.compare_text,
                comparison=comparison, message=message, **self._channel(),
            )
        else:
            rules.compare_number(
                value, comparer, key, self._messages.compare_number,
                message=message, **self._channel(),
            )
        return self

    # --- Identifiers ----------------------------------------------------------

    def is_uuid_not_empty(
        self, key: str, value: uuid.UUID | str | None, message: str | None = None
    ) -> Self:
        rules.is_uuid_not_empty(
            value, key, self._messages.is_uuid_not_empty,
            message=message, **self._channel(),
        )
        return self

    # --- Numbers --------------------------------------------------------------

    def is_greater_than(
        self, key: str, value: Number | None, comparer: Number, message: str | None = None
    ) -> Self:
        rules.is_greater_than(
            value, comparer, key, self._messages.is_greater_than,
            message=message, **self._channel(),
        )
        return self

    def is_lower_than(
        self, key: str, value: Number | None, comparer: Number, message: str | None = None
    ) -> Self:
        rules.is_lower_than(
            value, comparer, key, self._messages.is_lower_than,
            message=message, **self._channel(),
        )
        return self

    def is_between(
        self,
        key: str,
        value: Number | None,
        minimum: Number,
        maximum: Number,
        message: str | None = None,
    ) -> Self:
        rules.is_between(
            value, minimum, maximum, key, self._messages.is_between,
            message=message, **self._channel(),
        )
        return self

    # --- Email / password -----------------------------------------------------

    def is_email(self, key: str, value: str | None, message: str | None = None) -> Self:
        rules.is_email(
            value, key, self._messages.is_email, message=message, **self._channel()
        )
        return self

    def is_password(
        self, key: str, value: str | None, minimum: int, message: str | None = None
    ) -> Self:
        rules.is_password(
            value, minimum, key, self._messages.is_password,
            message=message, **self._channel(),
        )
        return self

    # --- Dates ----------------------------------------------------------------

    def is_date_between(
        self,
        key: str,
        value: DateInput,
        start: datetime | date,
        end: datetime | date,
        message: str | None = None,
    ) -> Self:
        rules.is_date_between(
            value, start, end, key, self._messages.is_date_between,
            format_template=self._messages.bad_date_format,
            message=message, **self._channel(),
        )
        return self

    def is_day_of_week(
        self, key: str, value: DateInput, day: Weekday | int, message: str | None = None
    ) -> Self:
        rules.is_day_of_week(
            value, day, key, self._messages.is_day_of_week,
            format_template=self._messages.bad_date_format,
            message=message, **self._channel(),
        )
        return self

    def is_in_the_future(
        self, key: str, value: DateInput, message: str | None = None
    ) -> Self:
        rules.is_in_the_future(
            value, key, self._messages.is_in_the_future,
            clock=self._clock, format_template=self._messages.bad_date_format,
            message=message, **self._channel(),
        )
        return self

    def is_in_the_past(
        self, key: str, value: DateInput, message: str | None = None
    ) -> Self:
        rules.is_in_the_past(
            value, key, self._messages.is_in_the_past,
            clock=self._clock, format_template=self._messages.bad_date_format,
            message=message, **self._channel(),
        )
        return self
