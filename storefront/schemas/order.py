from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, StrictFloat, StrictInt
from pydantic.alias_generators import to_camel

from storefront.models.order import OrderStatus


# Client totals are stored as sent: no string coercion, ints stay ints.
Total = StrictInt | StrictFloat


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class OrderCreate(_CamelModel):
    customer_name: str | None = None
    items: list[Any] | None = None
    total: Total | None = None


class OrderResponse(_CamelModel):
    id: int
    customer_name: str | None
    items: list[Any] | None
    total: Total | None
    status: OrderStatus
    timestamp: datetime


class OrderCreatedResponse(BaseModel):
    success: bool = True
    order: OrderResponse
