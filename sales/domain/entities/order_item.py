"""
Order Item Entity

A single product line inside an Order.
"""
from __future__ import annotations
from decimal import Decimal
from typing import Union
from uuid import UUID

from sales.config.settings import SalesConfig
from sales.domain.entities.base import Entity
from sales.domain.exceptions import InvalidItemQuantityError


class OrderItem(Entity):
    """
    Product line owned by exactly one Order.

    Only the quantity can change after construction, and only through
    add_units (used by the Order when the same product is added again).

    Attributes:
        product_id: Product identifier
        product_name: Display name of the product
        quantity: Number of units (>= MIN_UNITS_PER_ITEM)
        unit_price: Price of a single unit
    """

    def __init__(
        self,
        product_id: UUID,
        product_name: str,
        quantity: int,
        unit_price: Union[int, float, Decimal, str],
    ) -> None:
        super().__init__()
        if quantity < SalesConfig.MIN_UNITS_PER_ITEM:
            raise InvalidItemQuantityError(quantity, SalesConfig.MIN_UNITS_PER_ITEM)

        self._product_id = product_id
        self._product_name = product_name
        self._quantity = quantity
        self._unit_price = (
            unit_price if isinstance(unit_price, Decimal) else Decimal(str(unit_price))
        )

    @property
    def product_id(self) -> UUID:
        return self._product_id

    @property
    def product_name(self) -> str:
        return self._product_name

    @property
    def quantity(self) -> int:
        return self._quantity

    @property
    def unit_price(self) -> Decimal:
        return self._unit_price

    def add_units(self, units: int) -> None:
        """Increase quantity; the owning Order enforces the upper bound."""
        self._quantity += units

    def calculate_value(self) -> Decimal:
        """Line value (quantity * unit_price)."""
        return self._quantity * self._unit_price

    def __repr__(self) -> str:
        return (
            f"OrderItem(product_id={self._product_id}, "
            f"product_name={self._product_name!r}, "
            f"quantity={self._quantity}, unit_price={self._unit_price})"
        )
