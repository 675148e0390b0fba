from storefront_client.core.domain.stock.stock_guard import (
    can_decrement,
    can_increment,
    ensure_valid_quantity,
    invalid_lines,
    is_positive_quantity,
    is_valid_quantity,
)

__all__ = [
    "can_decrement",
    "can_increment",
    "ensure_valid_quantity",
    "invalid_lines",
    "is_positive_quantity",
    "is_valid_quantity",
]
