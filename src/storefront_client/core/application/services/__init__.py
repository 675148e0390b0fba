from storefront_client.core.application.services.access_service import AccessService
from storefront_client.core.application.services.admin_catalog_service import AdminCatalogService
from storefront_client.core.application.services.cart_aggregate import CartAggregate
from storefront_client.core.application.services.catalog_cache import CatalogCache
from storefront_client.core.application.services.order_history_service import OrderHistoryService
from storefront_client.core.application.services.profile_service import ProfileService

__all__ = [
    "AccessService",
    "AdminCatalogService",
    "CartAggregate",
    "CatalogCache",
    "OrderHistoryService",
    "ProfileService",
]
