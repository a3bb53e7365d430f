"""CLI commands that run validation rules against a single value."""

from __future__ import annotations

import uuid
from collections.abc import Callable
from datetime import datetime
from decimal import Decimal, InvalidOperation
from typing import Any

import click

from notifications.application.dto import RuleCall
from notifications.domain.exceptions import (
    AggregateDomainError,
    DomainError,
    DomainException,
)
from notifications.domain.model.dates import TextComparison, Weekday
from notifications.infrastructure.bootstrap import check_value_handler

_WEEKDAYS = [day.label for day in Weekday]


def _common_options(command: Callable[..., Any]) -> Callable[..., Any]:
    """--key, --message and --raise, shared by every check command."""
    command = click.option(
        "--raise", "raise_errors", is_flag=True,
        help="Collect failures as errors and raise them together.",
    )(command)
    command = click.option(
        "--message", default=None, help="Custom message used instead of the template."
    )(command)
    command = click.option(
        "--key", default="value", show_default=True, help="Field name used in messages."
    )(command)
    return command


def _parse_decimal(raw: str | None, option: str) -> Decimal | None:
    if raw is None:
        return None
    try:
        return Decimal(raw)
    except InvalidOperation:
        raise click.BadParameter(f"'{raw}' is not a number.", param_hint=option)


def _run(calls: list[RuleCall], raise_errors: bool) -> None:
    """Run the calls and report: 'OK' or one line per failure."""
    settings = click.get_current_context().find_root().obj or {}
    messages_path = settings.get("messages_path")

    try:
        handler = check_value_handler(messages_path, raise_errors=raise_errors)
        result = handler.handle(calls)
    except AggregateDomainError as exc:
        raise click.ClickException(
            "\n".join(f"{e.key}: {e.message}" for e in exc.errors)
        )
    except DomainError as exc:
        raise click.ClickException(f"{exc.key}: {exc.message}")
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if result.passed:
        click.echo(f"OK ({result.checked} check(s) passed)")
        return

    for failure in result.failures:
        click.echo(f"{failure.key}: {failure.message}")
    raise click.ClickException(f"{len(result.failures)} check(s) failed")


@click.command("length")
@click.option("--value", required=True, help="Text to check.")
@click.option("--min", "minimum", type=int, default=None, help="Minimum length (inclusive).")
@click.option("--max", "maximum", type=int, default=None, help="Maximum length (inclusive).")
@_common_options
def check_length(
    value: str,
    minimum: int | None,
    maximum: int | None,
    key: str,
    message: str | None,
    raise_errors: bool,
) -> None:
    """Check the length of a text value."""
    if minimum is None and maximum is None:
        raise click.UsageError("Give --min, --max or both.")

    if minimum is not None and maximum is not None:
        call = RuleCall("is_length_between", key, (value, minimum, maximum), message)
    elif minimum is not None:
        call = RuleCall("min_length", key, (value, minimum), message)
    else:
        call = RuleCall("max_length", key, (value, maximum), message)
    _run([call], raise_errors)


@click.command("range")
@click.option("--value", required=True, help="Number to check.")
@click.option("--min", "minimum", default=None, help="Lower bound (inclusive, needs --max).")
@click.option("--max", "maximum", default=None, help="Upper bound (inclusive, needs --min).")
@click.option("--gt", default=None, help="Value must be strictly greater.")
@click.option("--lt", default=None, help="Value must be strictly lower.")
@_common_options
def check_range(
    value: str,
    minimum: str | None,
    maximum: str | None,
    gt: str | None,
    lt: str | None,
    key: str,
    message: str | None,
    raise_errors: bool,
) -> None:
    """Check a number against bounds."""
    number = _parse_decimal(value, "--value")
    low, high = _parse_decimal(minimum, "--min"), _parse_decimal(maximum, "--max")
    above, below = _parse_decimal(gt, "--gt"), _parse_decimal(lt, "--lt")

    if (low is None) != (high is None):
        raise click.UsageError("--min and --max must be given together.")

    calls: list[RuleCall] = []
    if low is not None:
        calls.append(RuleCall("is_between", key, (number, low, high), message))
    if above is not None:
        calls.append(RuleCall("is_greater_than", key, (number, above), message))
    if below is not None:
        calls.append(RuleCall("is_lower_than", key, (number, below), message))
    if not calls:
        raise click.UsageError("Give --min/--max, --gt or --lt.")
    _run(calls, raise_errors)


@click.command("email")
@click.option("--value", required=True, help="Email address to check.")
@_common_options
def check_email(value: str, key: str, message: str | None, raise_errors: bool) -> None:
    """Check that a value is an email address."""
    _run([RuleCall("is_email", key, (value,), message)], raise_errors)


@click.command("password")
@click.option("--value", required=True, help="Password to check.")
@click.option("--min-length", default=8, show_default=True, help="Minimum length.")
@_common_options
def check_password(
    value: str, min_length: int, key: str, message: str | None, raise_errors: bool
) -> None:
    """Check password strength."""
    _run([RuleCall("is_password", key, (value, min_length), message)], raise_errors)


@click.command("date")
@click.option("--value", required=True, help="ISO 8601 date, e.g. 2024-05-01.")
@click.option("--from", "start", type=click.DateTime(), default=None, help="Earliest date.")
@click.option("--to", "end", type=click.DateTime(), default=None, help="Latest date.")
@click.option(
    "--weekday", type=click.Choice(_WEEKDAYS, case_sensitive=False), default=None,
    help="Required day of the week.",
)
@click.option("--future", is_flag=True, help="Date must be in the future.")
@click.option("--past", is_flag=True, help="Date must be in the past.")
@_common_options
def check_date(
    value: str,
    start: datetime | None,
    end: datetime | None,
    weekday: str | None,
    future: bool,
    past: bool,
    key: str,
    message: str | None,
    raise_errors: bool,
) -> None:
    """Check a date value. Text that is not a date is reported as such."""
    if (start is None) != (end is None):
        raise click.UsageError("--from and --to must be given together.")

    calls: list[RuleCall] = []
    if start is not None:
        calls.append(RuleCall("is_date_between", key, (value, start, end), message))
    if weekday is not None:
        calls.append(
            RuleCall("is_day_of_week", key, (value, Weekday[weekday.upper()]), message)
        )
    if future:
        calls.append(RuleCall("is_in_the_future", key, (value,), message))
    if past:
        calls.append(RuleCall("is_in_the_past", key, (value,), message))
    if not calls:
        raise click.UsageError("Give --from/--to, --weekday, --future or --past.")
    _run(calls, raise_errors)


@click.command("uuid")
@click.option("--value", required=True, help="Identifier to check.")
@click.option("--equals", default=None, help="Identifier the value must match.")
@_common_options
def check_uuid(
    value: str, equals: str | None, key: str, message: str | None, raise_errors: bool
) -> None:
    """Check that an identifier is set (and optionally matches another)."""
    calls = [RuleCall("is_uuid_not_empty", key, (value,), message)]
    if equals is not None:
        calls.append(RuleCall("compare", key, (value, _as_uuid(equals)), message))
    _run(calls, raise_errors)


def _as_uuid(raw: str) -> uuid.UUID:
    try:
        return uuid.UUID(raw)
    except ValueError:
        raise click.BadParameter(f"'{raw}' is not a UUID.", param_hint="--equals")


@click.command("equals")
@click.option("--value", required=True, help="Text to check.")
@click.option("--expected", required=True, help="Text the value must equal.")
@click.option("--ignore-case", is_flag=True, help="Compare without case sensitivity.")
@_common_options
def check_equals(
    value: str,
    expected: str,
    ignore_case: bool,
    key: str,
    message: str | None,
    raise_errors: bool,
) -> None:
    """Check that a text value equals an expected one."""
    comparison = TextComparison.IGNORE_CASE if ignore_case else TextComparison.ORDINAL
    call = RuleCall(
        "compare", key, (value, expected), message, options={"comparison": comparison}
    )
    _run([call], raise_errors)


@click.command("required")
@click.option("--value", default=None, help="Value to check; omit to test a missing value.")
@_common_options
def check_required(
    value: str | None, key: str, message: str | None, raise_errors: bool
) -> None:
    """Check that a value is present and not blank."""
    _run([RuleCall("is_not_null_or_whitespace", key, (value,), message)], raise_errors)
