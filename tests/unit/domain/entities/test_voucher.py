"""
Tests for Voucher entity eligibility.
"""
import pytest
from datetime import datetime, timedelta, timezone
from decimal import Decimal

from sales.domain.entities.voucher import Voucher, VoucherDiscountType
from sales.domain.services.voucher_validation import VoucherApplicableValidation
from sales.domain.value_objects.percentage import Percentage


class TestVoucherAmount:
    """Tests for fixed-amount vouchers."""

    def test_valid_amount_voucher(self, amount_voucher):
        """Active, unused, unexpired voucher with amount is valid."""
        result = amount_voucher.validate_if_applicable()

        assert result.is_valid
        assert result.errors == ()

    def test_invalid_amount_voucher(self):
        """Should report all six failures at once."""
        voucher = Voucher(
            code="",
            percentage_discount=None,
            amount_discount=None,
            quantity=0,
            discount_type=VoucherDiscountType.AMOUNT,
            expires_at=datetime.now() - timedelta(days=1),
            active=False,
            used=True,
        )

        result = voucher.validate_if_applicable()

        assert not result.is_valid
        assert len(result.errors) == 6
        assert VoucherApplicableValidation.ACTIVE_ERROR_MSG in result.messages
        assert VoucherApplicableValidation.CODE_ERROR_MSG in result.messages
        assert VoucherApplicableValidation.EXPIRATION_ERROR_MSG in result.messages
        assert VoucherApplicableValidation.QUANTITY_ERROR_MSG in result.messages
        assert VoucherApplicableValidation.USED_ERROR_MSG in result.messages
        assert VoucherApplicableValidation.AMOUNT_DISCOUNT_ERROR_MSG in result.messages

    def test_timezone_aware_voucher_is_valid(self):
        """Aware expiration dates validate without errors."""
        voucher = Voucher(
            code="PROMO-UTC",
            percentage_discount=None,
            amount_discount=Decimal("15"),
            quantity=1,
            discount_type=VoucherDiscountType.AMOUNT,
            expires_at=datetime.now(timezone.utc) + timedelta(days=1),
            active=True,
            used=False,
        )

        assert voucher.validate_if_applicable().is_valid

    def test_amount_voucher_ignores_percentage(self):
        """Percentage value is not required for AMOUNT kind."""
        voucher = Voucher(
            code="PROMO",
            percentage_discount=None,
            amount_discount=Decimal("10"),
            quantity=1,
            discount_type=VoucherDiscountType.AMOUNT,
            expires_at=datetime.now() + timedelta(days=1),
            active=True,
            used=False,
        )
        result = voucher.validate_if_applicable()

        assert result.is_valid
        assert VoucherApplicableValidation.PERCENTAGE_DISCOUNT_ERROR_MSG not in result.messages


class TestVoucherPercentage:
    """Tests for percentage vouchers."""

    def test_valid_percentage_voucher(self, percentage_voucher):
        """Active, unused, unexpired voucher with percentage is valid."""
        result = percentage_voucher.validate_if_applicable()

        assert result.is_valid
        assert result.errors == ()

    def test_invalid_percentage_voucher(self):
        """Should report all six failures at once."""
        voucher = Voucher(
            "", None, None, 0,
            VoucherDiscountType.PERCENTAGE, datetime.now() - timedelta(days=1), False, True,
        )

        result = voucher.validate_if_applicable()

        assert not result.is_valid
        assert len(result.errors) == 6
        assert VoucherApplicableValidation.ACTIVE_ERROR_MSG in result.messages
        assert VoucherApplicableValidation.CODE_ERROR_MSG in result.messages
        assert VoucherApplicableValidation.EXPIRATION_ERROR_MSG in result.messages
        assert VoucherApplicableValidation.QUANTITY_ERROR_MSG in result.messages
        assert VoucherApplicableValidation.USED_ERROR_MSG in result.messages
        assert VoucherApplicableValidation.PERCENTAGE_DISCOUNT_ERROR_MSG in result.messages
        assert VoucherApplicableValidation.AMOUNT_DISCOUNT_ERROR_MSG not in result.messages

    def test_discount_percentage(self, percentage_voucher):
        """Should expose the percentage as a value object."""
        assert percentage_voucher.discount_percentage == Percentage(Decimal("0.1"))


class TestVoucherImmutability:
    """Tests for Voucher immutability."""

    def test_voucher_is_frozen(self, amount_voucher):
        """Voucher attributes cannot be reassigned."""
        with pytest.raises(AttributeError):
            amount_voucher.used = True

    def test_validation_does_not_mutate(self, amount_voucher):
        """Validating leaves the voucher unchanged."""
        before = (amount_voucher.code, amount_voucher.quantity, amount_voucher.used)
        amount_voucher.validate_if_applicable()
        assert (amount_voucher.code, amount_voucher.quantity, amount_voucher.used) == before

    def test_numeric_discounts_normalized(self):
        """int/float discounts are stored as Decimal."""
        voucher = Voucher(
            "PROMO", 12.5, None, 1,
            VoucherDiscountType.PERCENTAGE, datetime.now() + timedelta(days=1), True, False,
        )
        assert voucher.percentage_discount == Decimal("12.5")
        assert voucher.amount_discount is None
