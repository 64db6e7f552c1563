import logging

from storefront.models.order import Order
from storefront.schemas.order import OrderCreate, OrderResponse
from storefront.services.store import StorefrontStore

logger = logging.getLogger(__name__)


def _build_response(order: Order) -> OrderResponse:
    return OrderResponse(
        id=order.id,
        customer_name=order.customer_name,
        items=order.items,
        total=order.total,
        status=order.status,
        timestamp=order.timestamp,
    )


def create_order(
    store: StorefrontStore,
    order_data: OrderCreate,
    request_id: str,
) -> OrderResponse:
    # Totals are taken from the client as-is; nothing is priced server-side.
    order = store.place_order(
        customer_name=order_data.customer_name,
        items=order_data.items,
        total=order_data.total,
    )
    logger.info(
        "Order placed, cart cleared",
        extra={
            "order_id": order.id,
            "request_id": request_id,
            "total": order.total,
            "item_count": len(order.items) if order.items is not None else 0,
        },
    )
    return _build_response(order)


def list_orders(store: StorefrontStore) -> list[OrderResponse]:
    return [_build_response(order) for order in store.orders]


def get_order(store: StorefrontStore, order_id: int) -> OrderResponse | None:
    order = store.get_order(order_id)
    if order is None:
        return None
    return _build_response(order)
