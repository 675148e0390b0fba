import structlog

from storefront_client.core.application.cache import QueryCache, QueryKey, product_key
from storefront_client.core.application.ports import BackendPort
from storefront_client.core.domain.catalog import (
    Product,
    categories,
    filter_products,
    index_products,
)
from storefront_client.core.exceptions import NotFoundError

logger = structlog.get_logger()


class CatalogCache:
    """Last-fetched product list. Read-only: writes go through the admin service,
    which invalidates this cache afterwards."""

    def __init__(self, backend: BackendPort, cache: QueryCache) -> None:
        self._backend = backend
        self._cache = cache

    async def list_products(self) -> list[Product]:
        products = await self._cache.get(QueryKey.PRODUCTS, self._backend.list_products)
        return list(products)

    async def catalog_index(self) -> dict[int, Product]:
        return index_products(await self.list_products())

    def cached_product(self, product_id: int) -> Product | None:
        """Product from the last fetched list, without any remote call."""
        for product in self._cache.peek(QueryKey.PRODUCTS, ()):
            if product.id == product_id:
                return product
        return None

    async def get_product(self, product_id: int) -> Product:
        product = await self._cache.get(
            product_key(product_id), lambda: self._backend.get_product(product_id)
        )
        if product is None:
            raise NotFoundError(
                f"Product {product_id} does not exist.", context={"product_id": product_id}
            )
        return product

    async def filter_products(self, search: str = "", category: str | None = None) -> list[Product]:
        return filter_products(await self.list_products(), search=search, category=category)

    async def categories(self) -> list[str]:
        return categories(await self.list_products())

    async def invalidate(self, product_id: int | None = None) -> None:
        keys = [QueryKey.PRODUCTS.value]
        if product_id is not None:
            keys.append(product_key(product_id))
        logger.info("Invalidating catalog", product_id=product_id)
        await self._cache.invalidate(*keys)
