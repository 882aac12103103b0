"""Domain entities."""
from sales.domain.entities.base import Entity
from sales.domain.entities.order import Order, OrderFactory, OrderStatus
from sales.domain.entities.order_item import OrderItem
from sales.domain.entities.voucher import Voucher, VoucherDiscountType

__all__ = [
    "Entity",
    "Order",
    "OrderFactory",
    "OrderStatus",
    "OrderItem",
    "Voucher",
    "VoucherDiscountType",
]
