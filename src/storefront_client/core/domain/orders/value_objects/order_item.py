from dataclasses import dataclass


@dataclass(frozen=True)
class OrderItem:
    """One ordered line. ``price`` is the unit price captured when the order was placed."""

    product_id: int
    quantity: int
    price: int

    def __post_init__(self) -> None:
        if self.quantity < 1:
            raise ValueError(
                f"Order item for product {self.product_id} has quantity {self.quantity}; expected >= 1"
            )
        if self.price < 0:
            raise ValueError(f"Order item for product {self.product_id} has a negative price")

    @property
    def line_total(self) -> int:
        return self.price * self.quantity
