"""
Percentage Value Object

Represents a discount rate, keeping percentage points and the
underlying ratio in sync.
"""
from __future__ import annotations
from dataclasses import dataclass
from decimal import Decimal
from typing import Union


@dataclass(frozen=True)
class Percentage:
    """
    Immutable value object representing a percentage.

    Stored as decimal value (0.10 = 10%).

    Attributes:
        value: The percentage as decimal (e.g., 0.10 for 10%)
    """
    value: Decimal

    def __post_init__(self) -> None:
        """Convert to Decimal if needed."""
        if not isinstance(self.value, Decimal):
            object.__setattr__(self, "value", Decimal(str(self.value)))

    @classmethod
    def from_points(cls, points: Union[int, float, Decimal]) -> Percentage:
        """Create Percentage from percentage points (10 = 10%)."""
        return cls(Decimal(str(points)) / Decimal("100"))

    def apply_to(self, amount: Union[int, float, Decimal]) -> Decimal:
        """Apply percentage to an amount."""
        if not isinstance(amount, Decimal):
            amount = Decimal(str(amount))
        return amount * self.value

    def __repr__(self) -> str:
        return f"Percentage({self.value})"
