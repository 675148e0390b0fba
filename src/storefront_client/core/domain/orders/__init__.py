from storefront_client.core.domain.orders.entities.order import Order
from storefront_client.core.domain.orders.value_objects.order_item import OrderItem
from storefront_client.core.domain.orders.value_objects.order_status import OrderStatus

__all__ = ["Order", "OrderItem", "OrderStatus"]
