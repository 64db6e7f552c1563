import logging

from fastapi import APIRouter, Depends, HTTPException, status

from storefront.middleware.request_id import get_request_id
from storefront.schemas.order import OrderCreate, OrderCreatedResponse, OrderResponse
from storefront.services import order_service
from storefront.services.store import StorefrontStore, get_store

router = APIRouter()
logger = logging.getLogger(__name__)


@router.post("", response_model=OrderCreatedResponse)
async def place_order(
    body: OrderCreate | None = None,
    store: StorefrontStore = Depends(get_store),
    request_id: str = Depends(get_request_id),
) -> OrderCreatedResponse:
    if body is None:
        body = OrderCreate()
    logger.info(
        "Received place_order request",
        extra={"request_id": request_id, "customer_name": body.customer_name},
    )
    order = order_service.create_order(store, body, request_id)
    return OrderCreatedResponse(order=order)


@router.get("", response_model=list[OrderResponse])
async def list_orders(store: StorefrontStore = Depends(get_store)) -> list[OrderResponse]:
    return order_service.list_orders(store)


@router.get("/{order_id}", response_model=OrderResponse)
async def get_order(
    order_id: int,
    store: StorefrontStore = Depends(get_store),
    request_id: str = Depends(get_request_id),
) -> OrderResponse:
    logger.info(
        "Received get_order request",
        extra={"request_id": request_id, "order_id": order_id},
    )
    order = order_service.get_order(store, order_id)
    if order is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Order not found")
    return order
