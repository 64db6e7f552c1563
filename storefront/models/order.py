from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any


class OrderStatus(str, Enum):
    PENDING = "pending"


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class Order:
    id: int
    customer_name: str | None
    items: list[Any] | None
    total: int | float | None
    status: OrderStatus = OrderStatus.PENDING
    timestamp: datetime = field(default_factory=_utcnow)
