"""Data Transfer Objects — plain containers that cross layer boundaries.

DTOs carry check requests and results between the CLI and the
application layer without exposing the façades to the outside world.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class RuleCall:
    """Input: one rule to run, e.g. ``RuleCall("min_length", "Name", ("Bob", 5))``.

    ``args`` are the façade arguments after the key: the value first,
    then the rule parameters.  ``options`` are extra keyword arguments
    such as ``comparison`` for ``compare``.
    """

    rule: str
    key: str
    args: tuple[Any, ...] = ()
    message: str | None = None
    options: dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class FailureDTO:
    """Output: a single failed rule as displayed to the user."""

    key: str
    message: str


@dataclass(frozen=True)
class CheckResultDTO:
    """Output: the outcome of a batch of rule calls."""

    checked: int
    failures: list[FailureDTO] = field(default_factory=list)

    @property
    def passed(self) -> bool:
        return not self.failures
