"""
Order Aggregate

Sales order owning its items, totals and the applied voucher.
"""
from __future__ import annotations
import logging
from datetime import datetime
from decimal import Decimal
from enum import Enum
from typing import List, Optional, Tuple
from uuid import UUID

from sales.config.settings import SalesConfig
from sales.domain.entities.base import Entity
from sales.domain.entities.order_item import OrderItem
from sales.domain.entities.voucher import Voucher
from sales.domain.exceptions import ItemNotInOrderError, ItemQuantityExceededError
from sales.domain.value_objects.discount_type import VoucherDiscountType
from sales.domain.value_objects.validation_result import ValidationResult

logger = logging.getLogger(__name__)


class OrderStatus(Enum):
    """Order lifecycle status."""
    DRAFT = "draft"
    STARTED = "started"
    PAID = "paid"
    DELIVERED = "delivered"
    CANCELLED = "cancelled"

    def is_terminal(self) -> bool:
        """Check if this is a terminal (final) status."""
        return self in (OrderStatus.DELIVERED, OrderStatus.CANCELLED)


class Order(Entity):
    """
    Aggregate root for a customer's order.

    State only changes through the operations below; the item collection
    is exposed as a tuple. Every item mutation recomputes the total and
    reapplies the voucher discount, if one is attached.

    Attributes:
        customer_id: Owning customer
        items: Order items, at most one per product
        total_value: Sum of line values minus discount, floored at zero
        discount: Discount computed from the voucher (not floored)
        status: Lifecycle status
        voucher_used: Whether a voucher has been applied
        voucher: Applied voucher, if any
    """

    MAX_UNITS_PER_ITEM = SalesConfig.MAX_UNITS_PER_ITEM
    MIN_UNITS_PER_ITEM = SalesConfig.MIN_UNITS_PER_ITEM

    def __init__(self, customer_id: UUID) -> None:
        super().__init__()
        self._customer_id = customer_id
        self._items: List[OrderItem] = []
        self._total_value = Decimal("0")
        self._discount = Decimal("0")
        self._status: Optional[OrderStatus] = None
        self._voucher_used = False
        self._voucher: Optional[Voucher] = None

    # --- Accessors ---

    @property
    def customer_id(self) -> UUID:
        return self._customer_id

    @property
    def items(self) -> Tuple[OrderItem, ...]:
        return tuple(self._items)

    @property
    def total_value(self) -> Decimal:
        return self._total_value

    @property
    def discount(self) -> Decimal:
        return self._discount

    @property
    def status(self) -> Optional[OrderStatus]:
        return self._status

    @property
    def voucher_used(self) -> bool:
        return self._voucher_used

    @property
    def voucher(self) -> Optional[Voucher]:
        return self._voucher

    # --- Item Lookup ---

    def get_item(self, product_id: UUID) -> Optional[OrderItem]:
        """Return the item for product_id, or None."""
        for item in self._items:
            if item.product_id == product_id:
                return item
        return None

    def has_item(self, item: OrderItem) -> bool:
        return self.get_item(item.product_id) is not None

    # --- Item Management ---

    def add_item(self, item: OrderItem) -> None:
        """
        Add an item, merging units into an existing line for the same product.

        Raises:
            ItemQuantityExceededError: product would exceed MAX_UNITS_PER_ITEM
        """
        self._validate_allowed_quantity(item)

        existing = self.get_item(item.product_id)
        if existing is not None:
            existing.add_units(item.quantity)
            item = existing
            self._items.remove(existing)

        self._items.append(item)
        logger.debug(
            "Order %s: product %s now has %d units",
            self.id, item.product_id, item.quantity,
        )
        self.calculate_discounted_total()

    def update_item(self, item: OrderItem) -> None:
        """
        Replace the existing line for item's product with item.

        Raises:
            ItemNotInOrderError: product is not in the order
            ItemQuantityExceededError: item.quantity exceeds MAX_UNITS_PER_ITEM
        """
        existing = self._get_existing_item(item)
        if item.quantity > self.MAX_UNITS_PER_ITEM:
            raise ItemQuantityExceededError(item.quantity, self.MAX_UNITS_PER_ITEM)

        self._items.remove(existing)
        self._items.append(item)
        logger.debug(
            "Order %s: product %s updated to %d units",
            self.id, item.product_id, item.quantity,
        )
        self.calculate_discounted_total()

    def remove_item(self, item: OrderItem) -> None:
        """
        Remove the line for item's product.

        Raises:
            ItemNotInOrderError: product is not in the order
        """
        existing = self._get_existing_item(item)

        self._items.remove(existing)
        logger.debug("Order %s: product %s removed", self.id, item.product_id)
        self.calculate_discounted_total()

    # --- Voucher ---

    def apply_voucher(self, voucher: Voucher, now: Optional[datetime] = None) -> ValidationResult:
        """
        Attach voucher if it passes eligibility validation.

        An invalid voucher leaves the order untouched; the result lists
        every rule it failed.
        """
        result = voucher.validate_if_applicable(now=now)
        if not result.is_valid:
            logger.info(
                "Order %s: voucher %r rejected (%d errors)",
                self.id, voucher.code, len(result.errors),
            )
            return result

        self._voucher = voucher
        self._voucher_used = True
        self.calculate_discounted_total()
        logger.info(
            "Order %s: voucher %r applied, discount %s",
            self.id, voucher.code, self._discount,
        )
        return result

    def calculate_discounted_total(self) -> None:
        """
        Recompute the total from the items and apply the voucher discount.

        The total is floored at zero while the discount keeps its computed
        value, so a fixed voucher larger than the order still reports its
        full amount. Repeated calls give the same result.
        """
        self._total_value = sum(
            (item.calculate_value() for item in self._items), Decimal("0")
        )
        if not self._voucher_used or self._voucher is None:
            return

        if self._voucher.discount_type == VoucherDiscountType.AMOUNT:
            discount = self._voucher.amount_discount
        else:
            discount = self._voucher.discount_percentage.apply_to(self._total_value)

        value = self._total_value - discount
        self._total_value = value if value > 0 else Decimal("0")
        self._discount = discount

    # --- Status ---

    def mark_as_draft(self) -> None:
        self._status = OrderStatus.DRAFT

    # --- Private Methods ---

    def _get_existing_item(self, item: OrderItem) -> OrderItem:
        existing = self.get_item(item.product_id)
        if existing is None:
            raise ItemNotInOrderError(item.product_id)
        return existing

    def _validate_allowed_quantity(self, item: OrderItem) -> None:
        quantity = item.quantity
        existing = self.get_item(item.product_id)
        if existing is not None:
            quantity += existing.quantity

        if quantity > self.MAX_UNITS_PER_ITEM:
            raise ItemQuantityExceededError(quantity, self.MAX_UNITS_PER_ITEM)


class OrderFactory:
    """Construction entry point for orders."""

    @staticmethod
    def new_draft_order(customer_id: UUID) -> Order:
        """Create an empty DRAFT order for customer_id."""
        order = Order(customer_id)
        order.mark_as_draft()
        return order
