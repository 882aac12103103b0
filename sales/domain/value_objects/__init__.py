"""Domain value objects."""
from sales.domain.value_objects.discount_type import VoucherDiscountType
from sales.domain.value_objects.percentage import Percentage
from sales.domain.value_objects.validation_result import (
    ValidationError,
    ValidationResult,
)

__all__ = [
    "VoucherDiscountType",
    "Percentage",
    "ValidationError",
    "ValidationResult",
]
