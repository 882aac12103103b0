"""
Voucher discount kinds
"""
from enum import Enum


class VoucherDiscountType(Enum):
    """How a voucher reduces the order total."""
    AMOUNT = "amount"
    PERCENTAGE = "percentage"
