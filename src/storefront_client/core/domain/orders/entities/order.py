from dataclasses import dataclass
from datetime import UTC, datetime

from storefront_client.core.domain.orders.value_objects.order_item import OrderItem
from storefront_client.core.domain.orders.value_objects.order_status import OrderStatus

_NANOS_PER_SECOND = 1_000_000_000
_NANOS_PER_MICRO = 1_000


@dataclass(frozen=True)
class Order:
    """A placed order. Immutable; the client never edits or cancels it."""

    id: int
    items: tuple[OrderItem, ...]
    total: int
    status: str
    timestamp: int

    def __post_init__(self) -> None:
        if self.total < 0:
            raise ValueError(f"Order {self.id} has a negative total")
        try:
            _to_datetime(self.timestamp)
        except (OverflowError, OSError, ValueError) as exc:
            raise ValueError(
                f"Order {self.id} timestamp {self.timestamp} is outside the representable date range"
            ) from exc

    @property
    def normalized_status(self) -> OrderStatus:
        return OrderStatus.from_raw(self.status)

    @property
    def placed_at(self) -> datetime:
        """``timestamp`` is nanoseconds since the Unix epoch."""
        return _to_datetime(self.timestamp)

    @property
    def items_total(self) -> int:
        return sum(item.line_total for item in self.items)


def _to_datetime(timestamp: int) -> datetime:
    seconds, nanos = divmod(timestamp, _NANOS_PER_SECOND)
    return datetime.fromtimestamp(seconds, tz=UTC).replace(microsecond=nanos // _NANOS_PER_MICRO)
