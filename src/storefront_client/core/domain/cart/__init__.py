from storefront_client.core.domain.cart.cart_totals import CartTotals, LineTotal, compute_totals
from storefront_client.core.domain.cart.entities.cart import Cart
from storefront_client.core.domain.cart.value_objects.cart_line import CartLine

__all__ = ["Cart", "CartLine", "CartTotals", "LineTotal", "compute_totals"]
