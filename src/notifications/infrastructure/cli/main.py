from pathlib import Path

import click

from notifications.infrastructure.bootstrap import MESSAGES_ENV_VAR
from notifications.infrastructure.cli.check_commands import (
    check_date,
    check_email,
    check_equals,
    check_length,
    check_password,
    check_range,
    check_required,
    check_uuid,
)
from notifications.infrastructure.logging_config import setup_logging


@click.group()
@click.option("--verbose", "-v", is_flag=True, help="Log every failed rule.")
@click.option(
    "--messages",
    "messages_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    envvar=MESSAGES_ENV_VAR,
    default=None,
    help="JSON file of message template overrides.",
)
@click.pass_context
def cli(ctx: click.Context, verbose: bool, messages_path: Path | None) -> None:
    """Stack Notifications — field validation from the command line"""
    setup_logging(verbose=verbose)
    ctx.obj = {"messages_path": messages_path}


@cli.group()
def check() -> None:
    """Run validation rules against a value."""


# Register subcommands
check.add_command(check_date)
check.add_command(check_email)
check.add_command(check_equals)
check.add_command(check_length)
check.add_command(check_password)
check.add_command(check_range)
check.add_command(check_required)
check.add_command(check_uuid)
