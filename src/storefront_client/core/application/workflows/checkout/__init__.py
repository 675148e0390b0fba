from storefront_client.core.application.workflows.checkout.order_placement_protocol import (
    OrderPlacementProtocol,
)
from storefront_client.core.application.workflows.checkout.placement_state import PlacementState

__all__ = ["OrderPlacementProtocol", "PlacementState"]
