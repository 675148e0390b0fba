from storefront_client.core.application.views.storefront_views import (
    CartView,
    CartViewLine,
    CheckoutView,
    OrderView,
    OrderViewLine,
    build_cart_view,
    build_order_history,
    build_order_view,
)

__all__ = [
    "CartView",
    "CartViewLine",
    "CheckoutView",
    "OrderView",
    "OrderViewLine",
    "build_cart_view",
    "build_order_history",
    "build_order_view",
]
