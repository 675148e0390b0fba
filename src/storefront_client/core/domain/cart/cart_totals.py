from collections.abc import Mapping
from dataclasses import dataclass

from storefront_client.core.domain.cart.entities.cart import Cart
from storefront_client.core.domain.catalog.entities.product import Product


@dataclass(frozen=True)
class LineTotal:
    product: Product
    quantity: int

    @property
    def unit_price(self) -> int:
        return self.product.price

    @property
    def amount(self) -> int:
        return self.product.price * self.quantity


@dataclass(frozen=True)
class CartTotals:
    line_totals: tuple[LineTotal, ...]
    grand_total: int


def compute_totals(cart: Cart, catalog: Mapping[int, Product]) -> CartTotals:
    """Join cart lines with the catalog and sum ``price * quantity``.

    Lines whose product is missing from the catalog (deleted since it was added)
    are left out of both the line totals and the grand total.
    """
    line_totals = tuple(
        LineTotal(product=catalog[line.product_id], quantity=line.quantity)
        for line in cart.lines
        if line.product_id in catalog
    )
    return CartTotals(
        line_totals=line_totals,
        grand_total=sum(line.amount for line in line_totals),
    )
