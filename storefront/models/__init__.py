from storefront.models.menu_item import MenuItem
from storefront.models.order import Order, OrderStatus

__all__ = [
    "MenuItem",
    "Order",
    "OrderStatus",
]
