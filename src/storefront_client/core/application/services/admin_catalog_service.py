import structlog

from storefront_client.core.application.common.detached import run_to_completion
from storefront_client.core.application.ports import BackendPort
from storefront_client.core.application.services.access_service import AccessService
from storefront_client.core.application.services.catalog_cache import CatalogCache
from storefront_client.core.domain.catalog import ProductDraft

logger = structlog.get_logger()


class AdminCatalogService:
    """Catalog writes. Drafts are validated on construction, the caller's role is
    confirmed before the remote call, and the catalog is refetched afterwards."""

    def __init__(self, backend: BackendPort, catalog: CatalogCache, access: AccessService) -> None:
        self._backend = backend
        self._catalog = catalog
        self._access = access

    async def create_product(self, draft: ProductDraft) -> int:
        await self._access.require_admin("create_product")

        async def _create() -> int:
            product_id = await self._backend.create_product(draft)
            await self._catalog.invalidate()
            return product_id

        product_id = await run_to_completion(_create())
        logger.info("Product created", product_id=product_id, category=draft.category)
        return product_id

    async def update_product(self, product_id: int, draft: ProductDraft) -> None:
        await self._access.require_admin("update_product")

        async def _update() -> None:
            await self._backend.update_product(product_id, draft)
            await self._catalog.invalidate(product_id)

        await run_to_completion(_update())
        logger.info("Product updated", product_id=product_id)

    async def delete_product(self, product_id: int) -> None:
        await self._access.require_admin("delete_product")

        async def _delete() -> None:
            await self._backend.delete_product(product_id)
            await self._catalog.invalidate(product_id)

        await run_to_completion(_delete())
        logger.info("Product deleted", product_id=product_id)
