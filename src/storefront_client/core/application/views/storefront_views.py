"""Read models handed to the presentation layer.

Built by joining independently fetched snapshots (cart, catalog, orders);
nothing here talks to the backend.
"""

from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from datetime import datetime

from storefront_client.core.domain.cart import Cart, compute_totals
from storefront_client.core.domain.catalog import Product
from storefront_client.core.domain.orders import Order, OrderStatus
from storefront_client.core.domain.pricing import DEFAULT_CURRENCY_PREFIX, format_price
from storefront_client.core.domain.stock import can_decrement, can_increment


@dataclass(frozen=True)
class CartViewLine:
    product_id: int
    name: str
    category: str
    image_url: str
    quantity: int
    stock_quantity: int
    unit_price: int
    line_total: int
    unit_price_display: str
    line_total_display: str
    can_increment: bool
    can_decrement: bool


@dataclass(frozen=True)
class CartView:
    lines: tuple[CartViewLine, ...]
    grand_total: int
    grand_total_display: str
    orphaned_product_ids: tuple[int, ...] = ()

    @property
    def is_empty(self) -> bool:
        return not self.lines

    @property
    def item_count(self) -> int:
        return sum(line.quantity for line in self.lines)


@dataclass(frozen=True)
class CheckoutView:
    cart: CartView
    can_place_order: bool
    blocked_reason: str | None = None


@dataclass(frozen=True)
class OrderViewLine:
    product_id: int
    name: str
    quantity: int
    unit_price_display: str
    line_total_display: str


@dataclass(frozen=True)
class OrderView:
    order_id: int
    placed_at: datetime
    status: OrderStatus
    status_label: str
    total: int
    total_display: str
    lines: tuple[OrderViewLine, ...]


def build_cart_view(
    cart: Cart,
    catalog: Mapping[int, Product],
    currency_prefix: str = DEFAULT_CURRENCY_PREFIX,
) -> CartView:
    totals = compute_totals(cart, catalog)
    lines = tuple(
        CartViewLine(
            product_id=line.product.id,
            name=line.product.display_name(),
            category=line.product.category,
            image_url=line.product.image_url,
            quantity=line.quantity,
            stock_quantity=line.product.stock_quantity,
            unit_price=line.unit_price,
            line_total=line.amount,
            unit_price_display=format_price(line.unit_price, currency_prefix),
            line_total_display=format_price(line.amount, currency_prefix),
            can_increment=can_increment(line.quantity, line.product.stock_quantity),
            can_decrement=can_decrement(line.quantity),
        )
        for line in totals.line_totals
    )
    orphaned = tuple(line.product_id for line in cart.lines if line.product_id not in catalog)
    return CartView(
        lines=lines,
        grand_total=totals.grand_total,
        grand_total_display=format_price(totals.grand_total, currency_prefix),
        orphaned_product_ids=orphaned,
    )


def build_order_view(
    order: Order,
    catalog: Mapping[int, Product],
    currency_prefix: str = DEFAULT_CURRENCY_PREFIX,
) -> OrderView:
    """Line amounts use the captured unit price; the catalog only supplies names."""
    lines = []
    for item in order.items:
        product = catalog.get(item.product_id)
        lines.append(
            OrderViewLine(
                product_id=item.product_id,
                name=product.display_name() if product else f"Product #{item.product_id}",
                quantity=item.quantity,
                unit_price_display=format_price(item.price, currency_prefix),
                line_total_display=format_price(item.line_total, currency_prefix),
            )
        )
    return OrderView(
        order_id=order.id,
        placed_at=order.placed_at,
        status=order.normalized_status,
        status_label=order.status,
        total=order.total,
        total_display=format_price(order.total, currency_prefix),
        lines=tuple(lines),
    )


def build_order_history(
    orders: Sequence[Order],
    catalog: Mapping[int, Product],
    currency_prefix: str = DEFAULT_CURRENCY_PREFIX,
) -> list[OrderView]:
    """Newest first; order ids grow with placement."""
    newest_first = sorted(orders, key=lambda order: order.id, reverse=True)
    return [build_order_view(order, catalog, currency_prefix) for order in newest_first]
