from dataclasses import dataclass

from storefront_client.core.exceptions import ValidationFailedError


@dataclass(frozen=True)
class ProductDraft:
    """Admin-entered product fields, validated before anything reaches the backend."""

    name: str
    description: str
    price: int
    image_url: str
    category: str
    stock_quantity: int

    def __post_init__(self) -> None:
        if not self.name.strip():
            raise ValidationFailedError("Product name is required.", context={"field": "name"})
        if not self.category.strip():
            raise ValidationFailedError(
                "Product category is required.", context={"field": "category"}
            )
        self._require_non_negative_int("price", self.price)
        self._require_non_negative_int("stock_quantity", self.stock_quantity)

    @staticmethod
    def _require_non_negative_int(field: str, value: object) -> None:
        if isinstance(value, bool) or not isinstance(value, int) or value < 0:
            raise ValidationFailedError(
                f"'{field}' must be a non-negative integer.",
                context={"field": field, "value": repr(value)},
            )

    @classmethod
    def from_form(
        cls,
        *,
        name: str,
        description: str,
        price: int,
        image_url: str,
        category: str,
        stock_quantity: int,
    ) -> "ProductDraft":
        """Build a draft from raw form input, trimming the free-text fields."""
        return cls(
            name=name.strip(),
            description=description.strip(),
            price=price,
            image_url=image_url.strip(),
            category=category.strip(),
            stock_quantity=stock_quantity,
        )
