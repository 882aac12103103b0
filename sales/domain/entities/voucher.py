"""
Voucher Entity

Discount instrument consumed by an Order: either a fixed amount or a
percentage of the order total.
"""
from __future__ import annotations
from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from typing import Optional

from sales.domain.services.voucher_validation import VoucherApplicableValidation
from sales.domain.value_objects.discount_type import VoucherDiscountType
from sales.domain.value_objects.percentage import Percentage
from sales.domain.value_objects.validation_result import ValidationResult


@dataclass(frozen=True)
class Voucher:
    """
    Immutable voucher.

    Exactly one of percentage_discount / amount_discount is expected to be
    set, matching discount_type; validate_if_applicable reports otherwise.

    Attributes:
        code: Voucher code typed by the customer
        percentage_discount: Percentage points off the total (PERCENTAGE kind)
        amount_discount: Fixed amount off the total (AMOUNT kind)
        quantity: Remaining uses
        discount_type: AMOUNT or PERCENTAGE
        expires_at: Expiration timestamp
        active: Whether the voucher is enabled
        used: Whether the voucher has already been redeemed
    """
    code: str
    percentage_discount: Optional[Decimal]
    amount_discount: Optional[Decimal]
    quantity: int
    discount_type: VoucherDiscountType
    expires_at: datetime
    active: bool
    used: bool

    def __post_init__(self) -> None:
        """Normalize numeric discounts to Decimal."""
        for name in ("percentage_discount", "amount_discount"):
            value = getattr(self, name)
            if value is not None and not isinstance(value, Decimal):
                object.__setattr__(self, name, Decimal(str(value)))

    @property
    def discount_percentage(self) -> Optional[Percentage]:
        if self.percentage_discount is None:
            return None
        return Percentage.from_points(self.percentage_discount)

    def validate_if_applicable(self, now: Optional[datetime] = None) -> ValidationResult:
        """Run every eligibility rule and return all failures."""
        return VoucherApplicableValidation().validate(self, now=now)
