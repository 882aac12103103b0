"""
Validation Result Value Object

Collects every rule a candidate failed instead of stopping at the first.
"""
from __future__ import annotations
from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class ValidationError:
    """
    A single failed rule.

    Attributes:
        field: Name of the attribute the rule checks
        message: Stable message identifying the rule
    """
    field: str
    message: str


@dataclass(frozen=True)
class ValidationResult:
    """
    Ordered, immutable collection of validation failures.

    Attributes:
        errors: Failures in rule declaration order
    """
    errors: Tuple[ValidationError, ...] = ()

    def __post_init__(self) -> None:
        if not isinstance(self.errors, tuple):
            object.__setattr__(self, "errors", tuple(self.errors))

    @property
    def is_valid(self) -> bool:
        """True when no rule failed."""
        return not self.errors

    @property
    def messages(self) -> Tuple[str, ...]:
        return tuple(error.message for error in self.errors)
