from typing import Any

from fastapi import APIRouter, Depends

from storefront.middleware.request_id import get_request_id
from storefront.schemas.cart import CartItemAdd, CartResponse, SuccessResponse
from storefront.services import cart_service
from storefront.services.store import StorefrontStore, get_store

router = APIRouter()


@router.post("", response_model=CartResponse)
async def add_to_cart(
    body: CartItemAdd | None = None,
    store: StorefrontStore = Depends(get_store),
    request_id: str = Depends(get_request_id),
) -> CartResponse:
    # A request without a body behaves like an empty JSON object.
    if body is None:
        body = CartItemAdd()
    cart = cart_service.add_item(store, body.item, request_id)
    return CartResponse(cart=cart)


@router.get("", response_model=list[Any])
async def get_cart(store: StorefrontStore = Depends(get_store)) -> list[Any]:
    return cart_service.get_cart(store)


@router.delete("", response_model=SuccessResponse)
async def clear_cart(
    store: StorefrontStore = Depends(get_store),
    request_id: str = Depends(get_request_id),
) -> SuccessResponse:
    cart_service.clear_cart(store, request_id)
    return SuccessResponse()
