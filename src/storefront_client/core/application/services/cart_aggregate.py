"""Per-user cart: remote mutations, stock-bounded quantities, joined views.

Mutations are never optimistic. The cached cart only changes after the backend
confirms a mutation and the follow-up refetch resolves, so the cart never shows
a quantity the backend rejected.
"""

import asyncio
from collections.abc import Awaitable, Callable

import structlog

from storefront_client.core.application.cache import QueryCache, QueryKey
from storefront_client.core.application.common.detached import run_to_completion
from storefront_client.core.application.ports import BackendPort, IdentityPort
from storefront_client.core.application.services.catalog_cache import CatalogCache
from storefront_client.core.application.views import CartView, build_cart_view
from storefront_client.core.domain.cart import Cart, CartTotals, compute_totals
from storefront_client.core.domain.pricing import DEFAULT_CURRENCY_PREFIX
from storefront_client.core.domain.stock import (
    ensure_valid_quantity,
    is_positive_quantity,
    is_valid_quantity,
)
from storefront_client.core.exceptions import (
    NotFoundError,
    UnauthenticatedError,
    ValidationFailedError,
)

logger = structlog.get_logger()


class CartAggregate:
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
        self._pending = 0

    @property
    def is_pending(self) -> bool:
        """True while a cart mutation awaits confirmation."""
        return self._pending > 0

    # ── Reads ──

    async def get_cart(self) -> Cart:
        if not self._identity.is_authenticated():
            return Cart()
        return await self._cache.get(QueryKey.CART, self._fetch_cart)

    def last_fetched_cart(self) -> Cart | None:
        return self._cache.peek(QueryKey.CART)

    async def totals(self) -> CartTotals:
        cart, catalog = await asyncio.gather(self.get_cart(), self._catalog.catalog_index())
        return compute_totals(cart, catalog)

    async def view(self) -> CartView:
        cart, catalog = await asyncio.gather(self.get_cart(), self._catalog.catalog_index())
        return build_cart_view(cart, catalog, self._currency_prefix)

    # ── Mutations ──

    async def add_item(self, product_id: int, quantity: int = 1) -> None:
        self._require_identity("add_to_cart")
        if not is_positive_quantity(quantity):
            raise ValidationFailedError(
                "Quantity must be at least 1.",
                context={"product_id": product_id, "quantity": quantity},
            )
        product = self._catalog.cached_product(product_id)
        if product is not None:
            ensure_valid_quantity(quantity, product)
        await self._mutate(
            "add_to_cart",
            lambda: self._backend.add_to_cart(product_id, quantity),
            product_id=product_id,
            quantity=quantity,
        )

    async def set_quantity(self, product_id: int, new_quantity: int) -> bool:
        """Change a line's quantity. Returns False, without any remote call,
        when ``new_quantity`` is outside ``1..stock``."""
        self._require_identity("update_cart_item")
        if not is_positive_quantity(new_quantity):
            logger.info("Quantity change rejected locally", product_id=product_id, quantity=new_quantity)
            return False
        product = self._catalog.cached_product(product_id)
        if product is None or is_valid_quantity(new_quantity, product.stock_quantity):
            product = (await self._catalog.catalog_index()).get(product_id)
        if product is None:
            raise NotFoundError(
                f"Product {product_id} is no longer in the catalog.",
                context={"product_id": product_id},
            )
        if not is_valid_quantity(new_quantity, product.stock_quantity):
            logger.info(
                "Quantity change rejected locally",
                product_id=product_id,
                quantity=new_quantity,
                stock_quantity=product.stock_quantity,
            )
            return False
        await self._mutate(
            "update_cart_item",
            lambda: self._backend.update_cart_item(product_id, new_quantity),
            product_id=product_id,
            quantity=new_quantity,
        )
        return True

    async def remove_item(self, product_id: int) -> None:
        self._require_identity("remove_cart_item")
        await self._mutate(
            "remove_cart_item",
            lambda: self._backend.remove_cart_item(product_id),
            product_id=product_id,
        )

    # ── Internals ──

    async def _fetch_cart(self) -> Cart:
        return Cart.of(await self._backend.get_cart())

    def _require_identity(self, operation: str) -> None:
        if not self._identity.is_authenticated():
            raise UnauthenticatedError(
                "Sign in to manage your cart.", context={"operation": operation}
            )

    async def _mutate(
        self, operation: str, remote_call: Callable[[], Awaitable[None]], **fields: int
    ) -> None:
        """Mark the cart pending, run the remote call, then invalidate and refetch."""

        async def _confirm() -> None:
            self._pending += 1
            try:
                logger.info("Cart mutation started", operation=operation, **fields)
                await remote_call()
                await self._cache.invalidate(QueryKey.CART)
                logger.info("Cart mutation confirmed", operation=operation, **fields)
            finally:
                self._pending -= 1

        await run_to_completion(_confirm())
