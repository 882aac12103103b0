"""
Shared pytest fixtures
"""
import pytest
from datetime import datetime, timedelta
from decimal import Decimal
from uuid import uuid4

from sales.domain.entities import OrderFactory, Voucher, VoucherDiscountType


@pytest.fixture
def customer_id():
    """Customer identifier"""
    return uuid4()


@pytest.fixture
def product_id():
    """Product identifier"""
    return uuid4()


@pytest.fixture
def draft_order(customer_id):
    """Empty draft order"""
    return OrderFactory.new_draft_order(customer_id)


@pytest.fixture
def reference_time():
    """Fixed reference time for expiration checks"""
    return datetime(2024, 1, 15, 12, 0, 0)


@pytest.fixture
def amount_voucher():
    """Valid fixed-amount voucher (15 off)"""
    return Voucher(
        code="PROMO-15-OFF",
        percentage_discount=None,
        amount_discount=Decimal("15"),
        quantity=1,
        discount_type=VoucherDiscountType.AMOUNT,
        expires_at=datetime.now() + timedelta(days=15),
        active=True,
        used=False,
    )


@pytest.fixture
def percentage_voucher():
    """Valid percentage voucher (10% off)"""
    return Voucher(
        code="PROMO-10-PCT",
        percentage_discount=Decimal("10"),
        amount_discount=None,
        quantity=1,
        discount_type=VoucherDiscountType.PERCENTAGE,
        expires_at=datetime.now() + timedelta(days=15),
        active=True,
        used=False,
    )
