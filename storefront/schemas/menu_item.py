from decimal import Decimal
from typing import Annotated

from pydantic import BaseModel, PlainSerializer

# Prices are kept as Decimal but sent to clients as plain JSON numbers.
Price = Annotated[Decimal, PlainSerializer(float, return_type=float, when_used="json")]


class MenuItemResponse(BaseModel):
    id: int
    name: str
    category: str
    price: Price
    description: str
    image: str

    model_config = {"from_attributes": True}
