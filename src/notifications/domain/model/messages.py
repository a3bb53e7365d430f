"""Default message templates, one per rule.

Templates are plain positional format strings: ``{0}`` is always the
field key, ``{1}``, ``{2}``... are the rule's own parameters in the order
the rule declares them.  A catalog is passed to a façade at
construction; there is no process-wide registry.
"""

from __future__ import annotations

import re
import string
from collections.abc import Mapping
from dataclasses import dataclass, fields, replace

from notifications.domain.exceptions import TemplateError, UnknownRuleError

# How many parameters each rule formats after the key ({1} to {N}).
RULE_PARAMETERS = {
    "min_length": 1,
    "max_length": 1,
    "is_length_between": 2,
    "is_length_greater_than": 1,
    "is_length_lower_than": 1,
    "is_not_null": 0,
    "is_null": 0,
    "is_not_null_or_empty": 0,
    "is_null_or_empty": 0,
    "is_not_null_or_whitespace": 0,
    "is_null_or_whitespace": 0,
    "compare_text": 1,
    "is_uuid_not_empty": 0,
    "compare_uuid": 1,
    "is_greater_than": 1,
    "is_lower_than": 1,
    "is_between": 2,
    "compare_number": 1,
    "is_email": 1,
    "is_password": 1,
    "is_date_between": 2,
    "is_day_of_week": 1,
    "is_in_the_future": 0,
    "is_in_the_past": 0,
    "bad_date_format": 1,
}


@dataclass(frozen=True)
class MessageCatalog:
    """Read-only lookup of rule name -> message template."""

    # --- Strings --------------------------------------------------------------
    min_length: str = "The field '{0}' must have a minimum of {1} characters"
    max_length: str = "The field '{0}' must have a maximum of {1} characters"
    is_length_between: str = "The field '{0}' must have between {1} and {2} characters"
    is_length_greater_than: str = "The field '{0}' must have more than {1} characters"
    is_length_lower_than: str = "The field '{0}' must have fewer than {1} characters"
    is_not_null: str = "The field '{0}' must not be null"
    is_null: str = "The field '{0}' must be null"
    is_not_null_or_empty: str = "The field '{0}' is required"
    is_null_or_empty: str = "The field '{0}' must be null or empty"
    is_not_null_or_whitespace: str = "The field '{0}' is required"
    is_null_or_whitespace: str = "The field '{0}' must be null or contain white space"
    compare_text: str = "The value of field '{0}' must be equal to '{1}'"

    # --- Identifiers ----------------------------------------------------------
    is_uuid_not_empty: str = "The field '{0}' is required"
    compare_uuid: str = "The value of field '{0}' must be equal to {1}"

    # --- Numbers --------------------------------------------------------------
    is_greater_than: str = "The field '{0}' must be bigger than {1}"
    is_lower_than: str = "The field '{0}' must be lower than {1}"
    is_between: str = "The value of field '{0}' must be between {1} and {2}"
    compare_number: str = "The value of field '{0}' must be equal to {1}"

    # --- Email / password -----------------------------------------------------
    is_email: str = "The '{1}' is not a valid email"
    is_password: str = "The value of field '{0}' is invalid"

    # --- Dates ----------------------------------------------------------------
    is_date_between: str = "The value of field '{0}' must be between {1} and {2}"
    is_day_of_week: str = "The value of field '{0}' must be a {1} day of the week"
    is_in_the_future: str = "The value of field '{0}' must be in the future"
    is_in_the_past: str = "The value of field '{0}' must be in the past"
    bad_date_format: str = (
        "The field '{0}' must be a valid date in ISO 8601 format (yyyy-mm-dd)"
    )

    # --- Lookup ---------------------------------------------------------------

    @classmethod
    def rule_names(cls) -> tuple[str, ...]:
        return tuple(f.name for f in fields(cls))

    def template(self, rule: str) -> str:
        if rule not in self.rule_names():
            raise UnknownRuleError(f"No message template for rule '{rule}'")
        return getattr(self, rule)

    def with_overrides(self, overrides: Mapping[str, str]) -> MessageCatalog:
        """Return a copy with some templates replaced."""
        known = set(self.rule_names())
        unknown = sorted(set(overrides) - known)
        if unknown:
            raise UnknownRuleError(
                f"Unknown rule name(s) in message overrides: {', '.join(unknown)}"
            )
        for rule, template in overrides.items():
            if not isinstance(template, str):
                raise TypeError(
                    f"Template for rule '{rule}' must be a string, "
                    f"got {type(template).__name__}"
                )
            _check_fields(rule, template)
        return replace(self, **dict(overrides))


def _check_fields(rule: str, template: str) -> None:
    """Reject fields that ``template.format(key, *params)`` cannot fill."""
    highest = RULE_PARAMETERS[rule]
    try:
        parsed = list(string.Formatter().parse(template))
    except ValueError as exc:
        raise TemplateError(f"Template for rule '{rule}' is malformed: {exc}") from exc

    for _, field_name, _, _ in parsed:
        if field_name is None:
            continue
        index = re.split(r"[.\[]", field_name, maxsplit=1)[0]
        if not (index.isdecimal() and int(index) <= highest):
            raise TemplateError(
                f"Template for rule '{rule}' uses '{{{field_name}}}'; "
                f"only {{0}} to {{{highest}}} are available"
            )


DEFAULT_MESSAGES = MessageCatalog()
