"""Composition root — wires the message catalog into façades and handlers.

This is the only place that knows where message overrides come from.
Every other module receives a MessageCatalog at construction.
"""

from __future__ import annotations

import os
from pathlib import Path

from notifications.application.check_value import CheckValueHandler
from notifications.domain.model.messages import DEFAULT_MESSAGES, MessageCatalog
from notifications.domain.validation.validation_rules import ValidationRules
from notifications.domain.validation.validation_rules_exception import (
    ValidationRulesException,
)
from notifications.infrastructure.messages.json_message_catalog import (
    JsonMessageCatalog,
)

# Path to a JSON file of template overrides, read when no path is given.
MESSAGES_ENV_VAR = "NOTIFICATIONS_MESSAGES"


def message_catalog(path: Path | None = None) -> MessageCatalog:
    if path is None:
        env_path = os.environ.get(MESSAGES_ENV_VAR)
        if not env_path:
            return DEFAULT_MESSAGES
        path = Path(env_path)
    return JsonMessageCatalog(path).load()


def notify_rules(path: Path | None = None) -> ValidationRules[object]:
    return ValidationRules(messages=message_catalog(path))


def collecting_rules(path: Path | None = None) -> ValidationRulesException[object]:
    return ValidationRulesException(messages=message_catalog(path))


def check_value_handler(
    path: Path | None = None, raise_errors: bool = False
) -> CheckValueHandler:
    return CheckValueHandler(messages=message_catalog(path), raise_errors=raise_errors)
