"""
Process-wide storefront state: the shared cart and the order log.

One StorefrontStore is created per application and lives on ``app.state``.
Nothing is persisted; a restart starts from an empty cart and no orders.

Known limitation: there is a single cart shared by every client. Concurrent
add/clear requests race at request granularity and the last write wins.
"""

import itertools
import threading
from typing import Any

from fastapi import Request

from storefront.models.order import Order


class StorefrontStore:
    def __init__(self) -> None:
        self._cart: list[Any] = []
        self._orders: list[Order] = []
        self._order_ids = itertools.count(1)
        self._lock = threading.Lock()

    # ------------------------------------------------------------------
    # Cart
    # ------------------------------------------------------------------

    @property
    def cart(self) -> list[Any]:
        return list(self._cart)

    def add_to_cart(self, item: Any) -> list[Any]:
        with self._lock:
            self._cart.append(item)
            return list(self._cart)

    def clear_cart(self) -> None:
        with self._lock:
            self._cart = []

    # ------------------------------------------------------------------
    # Orders
    # ------------------------------------------------------------------

    @property
    def orders(self) -> list[Order]:
        return list(self._orders)

    def place_order(
        self,
        customer_name: str | None,
        items: list[Any] | None,
        total: int | float | None,
    ) -> Order:
        """Record a pending order and empty the cart.

        The submitted items are stored as given; they are not reconciled with
        the cart, which is cleared regardless of its contents.
        """
        with self._lock:
            order = Order(
                id=next(self._order_ids),
                customer_name=customer_name,
                items=list(items) if items is not None else None,
                total=total,
            )
            self._orders.append(order)
            self._cart = []
        return order

    def get_order(self, order_id: int) -> Order | None:
        for order in self._orders:
            if order.id == order_id:
                return order
        return None


def get_store(request: Request) -> StorefrontStore:
    return request.app.state.store
