"""Domain services."""
from sales.domain.services.voucher_validation import VoucherApplicableValidation

__all__ = [
    "VoucherApplicableValidation",
]
