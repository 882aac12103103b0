"""
Voucher Eligibility Validation

Decides whether a voucher may be applied to an order. Every rule is
evaluated so callers get the complete list of failures at once.
"""
from __future__ import annotations
from datetime import datetime
from typing import TYPE_CHECKING, List, Optional

from sales.domain.value_objects.discount_type import VoucherDiscountType
from sales.domain.value_objects.validation_result import (
    ValidationError,
    ValidationResult,
)

if TYPE_CHECKING:
    from sales.domain.entities.voucher import Voucher


class VoucherApplicableValidation:
    """
    Eligibility rules for a voucher.

    The message constants are part of the public contract: callers match
    on them to tell which rule failed.
    """

    CODE_ERROR_MSG = "Voucher without a valid code."
    EXPIRATION_ERROR_MSG = "This voucher has expired."
    ACTIVE_ERROR_MSG = "This voucher is no longer valid."
    USED_ERROR_MSG = "This voucher has already been used."
    QUANTITY_ERROR_MSG = "This voucher is no longer available."
    AMOUNT_DISCOUNT_ERROR_MSG = "The discount amount must be provided."
    PERCENTAGE_DISCOUNT_ERROR_MSG = "The discount percentage must be provided."

    def validate(self, voucher: Voucher, now: Optional[datetime] = None) -> ValidationResult:
        """
        Validate a voucher against every eligibility rule.

        Args:
            voucher: Voucher to check (never mutated)
            now: Reference time for the expiration rule (defaults to now)

        Returns:
            ValidationResult with failures in rule declaration order
        """
        if now is None:
            now = datetime.now(voucher.expires_at.tzinfo)
        errors: List[ValidationError] = []

        if not voucher.code or not voucher.code.strip():
            errors.append(ValidationError("code", self.CODE_ERROR_MSG))

        if not voucher.active:
            errors.append(ValidationError("active", self.ACTIVE_ERROR_MSG))

        if voucher.used:
            errors.append(ValidationError("used", self.USED_ERROR_MSG))

        if voucher.expires_at <= now:
            errors.append(ValidationError("expires_at", self.EXPIRATION_ERROR_MSG))

        if voucher.quantity < 1:
            errors.append(ValidationError("quantity", self.QUANTITY_ERROR_MSG))

        if voucher.discount_type == VoucherDiscountType.AMOUNT:
            if voucher.amount_discount is None:
                errors.append(
                    ValidationError("amount_discount", self.AMOUNT_DISCOUNT_ERROR_MSG)
                )

        if voucher.discount_type == VoucherDiscountType.PERCENTAGE:
            if voucher.percentage_discount is None:
                errors.append(
                    ValidationError("percentage_discount", self.PERCENTAGE_DISCOUNT_ERROR_MSG)
                )

        return ValidationResult(tuple(errors))
