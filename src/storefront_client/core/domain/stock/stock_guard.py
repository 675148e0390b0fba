"""Advisory quantity bounds shared by cart mutations and checkout.

The backend enforces stock when the order is placed; these checks only keep
the client from sending requests that are bound to be rejected.
"""

from collections.abc import Mapping

from storefront_client.core.domain.cart.entities.cart import Cart
from storefront_client.core.domain.cart.value_objects.cart_line import CartLine
from storefront_client.core.domain.catalog.entities.product import Product
from storefront_client.core.exceptions import ValidationFailedError


def is_positive_quantity(quantity: int) -> bool:
    if isinstance(quantity, bool) or not isinstance(quantity, int):
        return False
    return quantity >= 1


def is_valid_quantity(quantity: int, stock: int) -> bool:
    return is_positive_quantity(quantity) and quantity <= stock


def can_increment(quantity: int, stock: int) -> bool:
    return is_valid_quantity(quantity + 1, stock)


def can_decrement(quantity: int) -> bool:
    return quantity > 1


def ensure_valid_quantity(quantity: int, product: Product) -> None:
    if not is_valid_quantity(quantity, product.stock_quantity):
        raise ValidationFailedError(
            f"Quantity {quantity} is outside 1..{product.stock_quantity} for '{product.name}'.",
            context={
                "product_id": product.id,
                "quantity": quantity,
                "stock_quantity": product.stock_quantity,
            },
        )


def invalid_lines(cart: Cart, catalog: Mapping[int, Product]) -> list[CartLine]:
    """Lines exceeding current stock. Lines for unknown products are skipped."""
    return [
        line
        for line in cart.lines
        if line.product_id in catalog
        and not is_valid_quantity(line.quantity, catalog[line.product_id].stock_quantity)
    ]
