from dataclasses import dataclass


@dataclass(frozen=True)
class CartLine:
    product_id: int
    quantity: int

    def __post_init__(self) -> None:
        if self.quantity < 1:
            raise ValueError(
                f"Cart line for product {self.product_id} has quantity {self.quantity}; expected >= 1"
            )
