from typing import Any

from pydantic import BaseModel


class CartItemAdd(BaseModel):
    # Any JSON value is accepted; an absent item is stored as null.
    item: Any = None


class SuccessResponse(BaseModel):
    success: bool = True


class CartResponse(SuccessResponse):
    cart: list[Any]
