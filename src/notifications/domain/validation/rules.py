"""Rule engine: every validation predicate, implemented once.

Each rule has the same shape::

    rule(value, *params, key, template=None, *, message=None,
         notify=None, on_error=None) -> bool

It returns ``True`` when the value satisfies the rule, with no side
effect.  On failure it returns ``False`` after handing a carrier to
whichever callback was supplied:

- ``notify`` receives a Notification (soft mode);
- ``on_error`` receives a DomainError (hard mode).

``notify`` wins if both are given.  With neither, the rule is a pure
predicate.  The carrier's text is ``message`` verbatim when given,
otherwise ``template.format(key, *params)``; a missing template falls
back to ``DEFAULT_MESSAGES``.

The rules never decide *how* a failure propagates.  Whether an
``on_error`` callback collects the error or raises it is up to the
façade that supplied it.
"""

from __future__ import annotations

import logging
import re
import uuid
from collections.abc import Callable, Sequence
from datetime import date, datetime
from decimal import Decimal, InvalidOperation
from typing import Any, Union

from notifications.domain.exceptions import DomainError
from notifications.domain.model.dates import TextComparison, Weekday, parse_datetime
from notifications.domain.model.messages import DEFAULT_MESSAGES
from notifications.domain.model.notification import Notification

logger = logging.getLogger(__name__)

NotifyCallback = Callable[[Notification], None]
ErrorCallback = Callable[[DomainError], None]
Clock = Callable[[], datetime]
Number = Union[int, float, Decimal]
DateInput = Union[datetime, date, str, None]

EMPTY_UUID = uuid.UUID(int=0)

EMAIL_PATTERN = re.compile(r"\w+([-+.']\w+)*@\w+([-.]\w+)*\.\w+([-.]\w+)*")

PASSWORD_SYMBOLS = "@$!%*?&"


# ---------------------------------------------------------------------------
# Failure delivery
# ---------------------------------------------------------------------------


def _fail(
    rule: str,
    key: str,
    template: str | None,
    params: Sequence[Any],
    message: str | None,
    notify: NotifyCallback | None,
    on_error: ErrorCallback | None,
) -> bool:
    if message is None:
        if template is None:
            template = DEFAULT_MESSAGES.template(rule)
        message = template.format(key, *params)

    logger.debug("Rule '%s' failed for field '%s'", rule, key)
    if notify is not None:
        notify(Notification(key, message))
    elif on_error is not None:
        on_error(DomainError(key, message))
    return False


# --- Coercion helpers -------------------------------------------------------


def _to_decimal(value: Any) -> Decimal | None:
    """Widen any real number to Decimal; None for anything else."""
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, Decimal):
        result = value
    else:
        try:
            result = Decimal(str(value))
        except (InvalidOperation, ValueError):
            return None
    if result.is_nan():
        return None
    return result


def _to_uuid(value: Any) -> uuid.UUID | None:
    if isinstance(value, uuid.UUID):
        return value
    if isinstance(value, str):
        try:
            return uuid.UUID(value)
        except ValueError:
            return None
    return None


def _as_datetime(value: datetime | date) -> datetime:
    if isinstance(value, datetime):
        return value
    return datetime(value.year, value.month, value.day)


def _comparable(*moments: datetime) -> tuple[datetime, ...]:
    """Give naive datetimes the zone of the first aware one, if any."""
    zone = next((m.tzinfo for m in moments if m.tzinfo is not None), None)
    if zone is None:
        return moments
    return tuple(m if m.tzinfo is not None else m.replace(tzinfo=zone) for m in moments)


def _to_datetime(
    value: DateInput,
    key: str,
    format_template: str | None,
    notify: NotifyCallback | None,
    on_error: ErrorCallback | None,
) -> datetime | None:
    """Turn rule input into a datetime, reporting unparseable text.

    Returns None after delivering a ``bad_date_format`` failure.
    """
    if isinstance(value, date):
        return _as_datetime(value)

    parsed = parse_datetime(value)
    if parsed.ok:
        return parsed.value
    _fail("bad_date_format", key, format_template, (value,), None, notify, on_error)
    return None


def _is_absent(value: str | None) -> bool:
    return value is None or value == ""


def _is_blank(value: str | None) -> bool:
    return value is None or value.strip() == ""


# ---------------------------------------------------------------------------
# Strings
# ---------------------------------------------------------------------------


def min_length(
    value: str | None,
    minimum: int,
    key: str,
    template: str | None = None,
    *,
    message: str | None = None,
    notify: NotifyCallback | None = None,
    on_error: ErrorCallback | None = None,
) -> bool:
    """Length must be at least *minimum* (inclusive). None fails."""
    if value is None or len(value) < minimum:
        return _fail("min_length", key, template, (minimum,), message, notify, on_error)
    return True


def max_length(
    value: str | None,
    maximum: int,
    key: str,
    template: str | None = None,
    *,
    message: str | None = None,
    notify: NotifyCallback | None = None,
    on_error: ErrorCallback | None = None,
) -> bool:
    """Length must be at most *maximum* (inclusive). None fails."""
    if value is None or len(value) > maximum:
        return _fail("max_length", key, template, (maximum,), message, notify, on_error)
    return True


def is_length_between(
    value: str | None,
    minimum: int,
    maximum: int,
    key: str,
    template: str | None = None,
    *,
    message: str | None = None,
    notify: NotifyCallback | None = None,
    on_error: ErrorCallback | None = None,
) -> bool:
    if value is None or not minimum <= len(value) <= maximum:
        return _fail(
            "is_length_between", key, template, (minimum, maximum),
            message, notify, on_error,
        )
    return True


def is_length_greater_than(
    value: str | None,
    target: int,
    key: str,
    template: str | None = None,
    *,
    message: str | None = None,
    notify: NotifyCallback | None = None,
    on_error: ErrorCallback | None = None,
) -> bool:
    """Length must be strictly greater than *target*."""
    if value is None or len(value) <= target:
        return _fail(
            "is_length_greater_than", key, template, (target,), message, notify, on_error
        )
    return True


def is_length_lower_than(
    value: str | None,
    target: int,
    key: str,
    template: str | None = None,
    *,
    message: str | None = None,
    notify: NotifyCallback | None = None,
    on_error: ErrorCallback | None = None,
) -> bool:
    """Length must be strictly lower than *target*."""
    if value is None or len(value) >= target:
        return _fail(
            "is_length_lower_than", key, template, (target,), message, notify, on_error
        )
    return True


def is_not_null(
    value: str | None,
    key: str,
    template: str | None = None,
    *,
    message: str | None = None,
    notify: NotifyCallback | None = None,
    on_error: ErrorCallback | None = None,
) -> bool:
    if _is_absent(value):
        return _fail("is_not_null", key, template, (), message, notify, on_error)
    return True


def is_null(
    value: str | None,
    key: str,
    template: str | None = None,
    *,
    message: str | None = None,
    notify: NotifyCallback | None = None,
    on_error: ErrorCallback | None = None,
) -> bool:
    if not _is_absent(value):
        return _fail("is_null", key, template, (), message, notify, on_error)
    return True


def is_not_null_or_empty(
    value: str | None,
    key: str,
    template: str | None = None,
    *,
    message: str | None = None,
    notify: NotifyCallback | None = None,
    on_error: ErrorCallback | None = None,
) -> bool:
    if _is_absent(value):
        return _fail("is_not_null_or_empty", key, template, (), message, notify, on_error)
    return True


def is_null_or_empty(
    value: str | None,
    key: str,
    template: str | None = None,
    *,
    message: str | None = None,
    notify: NotifyCallback | None = None,
    on_error: ErrorCallback | None = None,
) -> bool:
    if not _is_absent(value):
        return _fail("is_null_or_empty", key, template, (), message, notify, on_error)
    return True


def is_not_null_or_whitespace(
    value: str | None,
    key: str,
    template: str | None = None,
    *,
    message: str | None = None,
    notify: NotifyCallback | None = None,
    on_error: ErrorCallback | None = None,
) -> bool:
    if _is_blank(value):
        return _fail(
            "is_not_null_or_whitespace", key, template, (), message, notify, on_error
        )
    return True


def is_null_or_whitespace(
    value: str | None,
    key: str,
    template: str | None = None,
    *,
    message: str | None = None,
    notify: NotifyCallback | None = None,
    on_error: ErrorCallback | None = None,
) -> bool:
    if not _is_blank(value):
        return _fail("is_null_or_whitespace", key, template, (), message, notify, on_error)
    return True


def compare_text(
    value: str | None,
    comparer: str | None,
    key: str,
    template: str | None = None,
    *,
    comparison: TextComparison = TextComparison.ORDINAL,
    message: str | None = None,
    notify: NotifyCallback | None = None,
    on_error: ErrorCallback | None = None,
) -> bool:
    """Equality under *comparison*; two Nones are equal."""
    if value is None or comparer is None:
        equal = value is comparer
    elif comparison is TextComparison.IGNORE_CASE:
        equal = value.casefold() == comparer.casefold()
    else:
        equal = value == comparer

    if not equal:
        return _fail("compare_text", key, template, (comparer,), message, notify, on_error)
    return True


# ---------------------------------------------------------------------------
# Identifiers
# ---------------------------------------------------------------------------


def is_uuid_not_empty(
    value: uuid.UUID | str | None,
    key: str,
    template: str | None = None,
    *,
    message: str | None = None,
    notify: NotifyCallback | None = None,
    on_error: ErrorCallback | None = None,
) -> bool:
    """Identifier must be present and not the all-zero UUID."""
    identifier = _to_uuid(value)
    if identifier is None or identifier == EMPTY_UUID:
        return _fail("is_uuid_not_empty", key, template, (), message, notify, on_error)
    return True


def compare_uuid(
    value: uuid.UUID | str | None,
    comparer: uuid.UUID | str | None,
    key: str,
    template: str | None = None,
    *,
    message: str | None = None,
    notify: NotifyCallback | None = None,
    on_error: ErrorCallback | None = None,
) -> bool:
    left, right = _to_uuid(value), _to_uuid(comparer)
    if left is None or left != right:
        return _fail("compare_uuid", key, template, (comparer,), message, notify, on_error)
    return True


# ---------------------------------------------------------------------------
# Numbers
#
# Everything is compared as Decimal, so int, float and Decimal inputs
# share one code path and floats are compared by their shortest repr
# (5.2 is exactly 5.2, not 5.2000000000000002).
# ---------------------------------------------------------------------------


def is_greater_than(
    value: Number | None,
    comparer: Number,
    key: str,
    template: str | None = None,
    *,
    message: str | None = None,
    notify: NotifyCallback | None = None,
    on_error: ErrorCallback | None = None,
) -> bool:
    """Value must be strictly greater than *comparer*."""
    number, bound = _to_decimal(value), _to_decimal(comparer)
    if number is None or bound is None or number <= bound:
        return _fail("is_greater_than", key, template, (comparer,), message, notify, on_error)
    return True


def is_lower_than(
    value: Number | None,
    comparer: Number,
    key: str,
    template: str | None = None,
    *,
    message: str | None = None,
    notify: NotifyCallback | None = None,
    on_error: ErrorCallback | None = None,
) -> bool:
    """Value must be strictly lower than *comparer*."""
    number, bound = _to_decimal(value), _to_decimal(comparer)
    if number is None or bound is None or number >= bound:
        return _fail("is_lower_than", key, template, (comparer,), message, notify, on_error)
    return True


def is_between(
    value: Number | None,
    minimum: Number,
    maximum: Number,
    key: str,
    template: str | None = None,
    *,
    message: str | None = None,
    notify: NotifyCallback | None = None,
    on_error: ErrorCallback | None = None,
) -> bool:
    """Value must lie in [minimum, maximum], both ends inclusive."""
    number = _to_decimal(value)
    low, high = _to_decimal(minimum), _to_decimal(maximum)
    if number is None or low is None or high is None or not low <= number <= high:
        return _fail(
            "is_between", key, template, (minimum, maximum), message, notify, on_error
        )
    return True


def compare_number(
    value: Number | None,
    comparer: Number,
    key: str,
    template: str | None = None,
    *,
    message: str | None = None,
    notify: NotifyCallback | None = None,
    on_error: ErrorCallback | None = None,
) -> bool:
    number, other = _to_decimal(value), _to_decimal(comparer)
    if number is None or other is None or number != other:
        return _fail("compare_number", key, template, (comparer,), message, notify, on_error)
    return True


# ---------------------------------------------------------------------------
# Email / password
# ---------------------------------------------------------------------------


def is_email(
    value: str | None,
    key: str,
    template: str | None = None,
    *,
    message: str | None = None,
    notify: NotifyCallback | None = None,
    on_error: ErrorCallback | None = None,
) -> bool:
    """Template parameters are ``(key, value)``."""
    if not value or EMAIL_PATTERN.fullmatch(value) is None:
        return _fail("is_email", key, template, (value or "",), message, notify, on_error)
    return True


def password_pattern(minimum: int) -> str:
    """Lower, upper, digit and symbol required; *minimum* characters or more."""
    symbols = re.escape(PASSWORD_SYMBOLS)
    return (
        r"(?=.*[a-z])(?=.*[A-Z])(?=.*\d)"
        rf"(?=.*[{symbols}])[A-Za-z\d{symbols}]{{{max(minimum, 0)},}}"
    )


def is_password(
    value: str | None,
    minimum: int,
    key: str,
    template: str | None = None,
    *,
    message: str | None = None,
    notify: NotifyCallback | None = None,
    on_error: ErrorCallback | None = None,
) -> bool:
    """The password itself never appears in the failure message."""
    if _is_blank(value) or re.fullmatch(password_pattern(minimum), value) is None:
        return _fail("is_password", key, template, (minimum,), message, notify, on_error)
    return True


# ---------------------------------------------------------------------------
# Dates
#
# Text input is parsed first; unparseable text is reported with the
# ``bad_date_format`` template (params: key, text) and the rule itself
# is not evaluated.  When aware and naive datetimes meet, the naive ones
# are read in the aware one's zone.
# ---------------------------------------------------------------------------


def is_date_between(
    value: DateInput,
    start: datetime | date,
    end: datetime | date,
    key: str,
    template: str | None = None,
    *,
    format_template: str | None = None,
    message: str | None = None,
    notify: NotifyCallback | None = None,
    on_error: ErrorCallback | None = None,
) -> bool:
    """Value must lie in [start, end], both ends inclusive."""
    moment = _to_datetime(value, key, format_template, notify, on_error)
    if moment is None:
        return False
    low, moment, high = _comparable(_as_datetime(start), moment, _as_datetime(end))
    if not low <= moment <= high:
        return _fail(
            "is_date_between", key, template, (start, end), message, notify, on_error
        )
    return True


def is_day_of_week(
    value: DateInput,
    day: Weekday | int,
    key: str,
    template: str | None = None,
    *,
    format_template: str | None = None,
    message: str | None = None,
    notify: NotifyCallback | None = None,
    on_error: ErrorCallback | None = None,
) -> bool:
    target = Weekday(day)
    moment = _to_datetime(value, key, format_template, notify, on_error)
    if moment is None:
        return False
    if moment.weekday() != target:
        return _fail(
            "is_day_of_week", key, template, (target.label,), message, notify, on_error
        )
    return True


def _now(moment: datetime, clock: Clock | None) -> datetime:
    if clock is not None:
        return clock()
    return datetime.now(moment.tzinfo)


def is_in_the_future(
    value: DateInput,
    key: str,
    template: str | None = None,
    *,
    clock: Clock | None = None,
    format_template: str | None = None,
    message: str | None = None,
    notify: NotifyCallback | None = None,
    on_error: ErrorCallback | None = None,
) -> bool:
    """Value must be strictly after "now", read once per call."""
    moment = _to_datetime(value, key, format_template, notify, on_error)
    if moment is None:
        return False
    moment, now = _comparable(moment, _now(moment, clock))
    if moment <= now:
        return _fail("is_in_the_future", key, template, (), message, notify, on_error)
    return True


def is_in_the_past(
    value: DateInput,
    key: str,
    template: str | None = None,
    *,
    clock: Clock | None = None,
    format_template: str | None = None,
    message: str | None = None,
    notify: NotifyCallback | None = None,
    on_error: ErrorCallback | None = None,
) -> bool:
    """Value must be strictly before "now", read once per call."""
    moment = _to_datetime(value, key, format_template, notify, on_error)
    if moment is None:
        return False
    moment, now = _comparable(moment, _now(moment, clock))
    if moment >= now:
        return _fail("is_in_the_past", key, template, (), message, notify, on_error)
    return True
