import logging
from typing import Any

from storefront.services.store import StorefrontStore

logger = logging.getLogger(__name__)


def add_item(store: StorefrontStore, item: Any, request_id: str) -> list[Any]:
    cart = store.add_to_cart(item)
    logger.info(
        "Item added to cart",
        extra={"request_id": request_id, "cart_size": len(cart)},
    )
    return cart


def get_cart(store: StorefrontStore) -> list[Any]:
    return store.cart


def clear_cart(store: StorefrontStore, request_id: str) -> None:
    store.clear_cart()
    logger.info("Cart cleared", extra={"request_id": request_id})
