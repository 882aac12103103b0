"""
Domain Exceptions

Custom exceptions for domain layer errors.
"""
from sales.exceptions import SalesError


class DomainError(SalesError):
    """Base exception for domain errors."""
    pass


class DomainRuleViolation(DomainError):
    """Raised when an operation would break a business rule."""
    pass


class InvalidItemQuantityError(DomainRuleViolation):
    """Raised when an order item is created below the minimum units."""

    def __init__(self, quantity: int, min_units: int):
        super().__init__(
            f"Minimum of {min_units} units per product, got {quantity}",
            error_code="INVALID_ITEM_QUANTITY",
        )
        self.quantity = quantity
        self.min_units = min_units


class ItemQuantityExceededError(DomainRuleViolation):
    """Raised when a product would exceed the maximum units in an order."""

    def __init__(self, quantity: int, max_units: int):
        super().__init__(
            f"Maximum of {max_units} units per product",
            error_code="ITEM_QUANTITY_EXCEEDED",
        )
        self.quantity = quantity
        self.max_units = max_units


class ItemNotInOrderError(DomainRuleViolation):
    """Raised when updating or removing an item the order does not hold."""

    def __init__(self, product_id: object):
        super().__init__(
            "Item does not exist in the order",
            error_code="ITEM_NOT_IN_ORDER",
        )
        self.product_id = product_id
