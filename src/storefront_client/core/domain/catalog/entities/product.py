from dataclasses import dataclass


@dataclass(frozen=True)
class Product:
    """Catalog entry as last reported by the backend. Prices are minor units."""

    id: int
    name: str
    description: str
    image_url: str
    category: str
    price: int
    stock_quantity: int

    def __post_init__(self) -> None:
        if self.price < 0:
            raise ValueError(f"Product {self.id} has a negative price: {self.price}")
        if self.stock_quantity < 0:
            raise ValueError(f"Product {self.id} has a negative stock: {self.stock_quantity}")

    @property
    def in_stock(self) -> bool:
        return self.stock_quantity > 0

    def display_name(self) -> str:
        return self.name or f"Product #{self.id}"
