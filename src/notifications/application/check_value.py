"""Application service: Check Value use case.

Runs a batch of rule calls against one façade and reports the outcome.
In notify mode the failures come back as a DTO; in raise mode the
collected DomainErrors are raised together once every rule has run.
"""

from __future__ import annotations

import logging

from notifications.application.dto import CheckResultDTO, FailureDTO, RuleCall
from notifications.domain.exceptions import UnknownRuleError
from notifications.domain.model.messages import MessageCatalog
from notifications.domain.validation.facade import RuleFacade
from notifications.domain.validation.rules import Clock
from notifications.domain.validation.validation_rules import ValidationRules
from notifications.domain.validation.validation_rules_exception import (
    ValidationRulesException,
)

logger = logging.getLogger(__name__)

# Public façade methods that run a rule.
SUPPORTED_RULES = frozenset(
    {
        "min_length",
        "max_length",
        "is_length_between",
        "is_length_greater_than",
        "is_length_lower_than",
        "is_not_null",
        "is_null",
        "is_not_null_or_empty",
        "is_null_or_empty",
        "is_not_null_or_whitespace",
        "is_null_or_whitespace",
        "compare",
        "is_uuid_not_empty",
        "is_greater_than",
        "is_lower_than",
        "is_between",
        "is_email",
        "is_password",
        "is_date_between",
        "is_day_of_week",
        "is_in_the_future",
        "is_in_the_past",
    }
)


class CheckValueHandler:

    def __init__(
        self,
        messages: MessageCatalog,
        raise_errors: bool = False,
        clock: Clock | None = None,
    ) -> None:
        self._messages = messages
        self._raise_errors = raise_errors
        self._clock = clock

    def handle(self, calls: list[RuleCall]) -> CheckResultDTO:
        """Run every call in order, with no short-circuit between rules.

        Steps:
        1. Reject unknown rule names before anything runs.
        2. Chain the calls on a fresh façade (one per request).
        3. Raise mode: drain the collector, which raises on failure.
        4. Notify mode: map the notifications to a DTO.
        """
        for call in calls:
            if call.rule not in SUPPORTED_RULES:
                raise UnknownRuleError(f"Unknown rule: '{call.rule}'")

        if self._raise_errors:
            collecting = ValidationRulesException[object](
                messages=self._messages, clock=self._clock
            )
            self._run(collecting, calls)
            collecting.raise_all()
            return CheckResultDTO(checked=len(calls))

        notifying = ValidationRules[object](messages=self._messages, clock=self._clock)
        self._run(notifying, calls)
        logger.info(
            "Checked %d rule(s), %d failure(s)", len(calls), len(notifying.notifications)
        )
        return CheckResultDTO(
            checked=len(calls),
            failures=[FailureDTO(n.key, n.message) for n in notifying.notifications],
        )

    # --- Internal helpers -----------------------------------------------------

    @staticmethod
    def _run(facade: RuleFacade, calls: list[RuleCall]) -> None:
        for call in calls:
            method = getattr(facade, call.rule)
            method(call.key, *call.args, message=call.message, **call.options)
