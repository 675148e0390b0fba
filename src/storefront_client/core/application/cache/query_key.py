from enum import StrEnum


class QueryKey(StrEnum):
    PRODUCTS = "products"
    CART = "cart"
    ORDERS = "orders"
    PROFILE = "current_user_profile"
    ROLE = "caller_role"
    IS_ADMIN = "is_caller_admin"


def product_key(product_id: int) -> str:
    return f"product:{product_id}"
