import asyncio

from storefront_client.core.application.cache import QueryCache, QueryKey
from storefront_client.core.application.ports import BackendPort, IdentityPort
from storefront_client.core.application.services.catalog_cache import CatalogCache
from storefront_client.core.application.views import OrderView, build_order_history
from storefront_client.core.domain.orders import Order
from storefront_client.core.domain.pricing import DEFAULT_CURRENCY_PREFIX


class OrderHistoryService:
    def __init__(
        self,
        backend: BackendPort,
        cache: QueryCache,
        catalog: CatalogCache,
        identity: IdentityPort,
        currency_prefix: str = DEFAULT_CURRENCY_PREFIX,
    ) -> None:
        self._backend = backend
        self._cache = cache
        self._catalog = catalog
        self._identity = identity
        self._currency_prefix = currency_prefix

    async def list_orders(self) -> list[Order]:
        if not self._identity.is_authenticated():
            return []
        return list(await self._cache.get(QueryKey.ORDERS, self._backend.get_orders))

    async def history(self) -> list[OrderView]:
        orders, catalog = await asyncio.gather(self.list_orders(), self._catalog.catalog_index())
        return build_order_history(orders, catalog, self._currency_prefix)
