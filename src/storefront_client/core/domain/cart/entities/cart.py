from collections.abc import Iterable
from dataclasses import dataclass

from storefront_client.core.domain.cart.value_objects.cart_line import CartLine


@dataclass(frozen=True)
class Cart:
    """Snapshot of the caller's cart. At most one line per product."""

    lines: tuple[CartLine, ...] = ()

    def __post_init__(self) -> None:
        product_ids = [line.product_id for line in self.lines]
        if len(product_ids) != len(set(product_ids)):
            raise ValueError(f"Cart contains duplicate product lines: {product_ids}")

    @classmethod
    def of(cls, lines: Iterable[CartLine]) -> "Cart":
        return cls(lines=tuple(lines))

    @property
    def is_empty(self) -> bool:
        return not self.lines

    @property
    def item_count(self) -> int:
        return sum(line.quantity for line in self.lines)

    def line_for(self, product_id: int) -> CartLine | None:
        for line in self.lines:
            if line.product_id == product_id:
                return line
        return None

    def quantity_of(self, product_id: int) -> int:
        line = self.line_for(product_id)
        return line.quantity if line else 0
