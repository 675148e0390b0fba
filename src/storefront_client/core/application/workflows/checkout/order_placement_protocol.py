"""Order placement: turns the caller's cart into an order with one remote call.

IDLE -> SUBMITTING -> SUCCEEDED | FAILED. Placement is never retried by the
client; a failed attempt leaves every cache untouched, so re-invoking it sees
the same cart as the first attempt. Partial effects applied by the backend
without returning an order id cannot be detected from here.
"""

import asyncio

import structlog
from structlog.contextvars import bind_contextvars

from storefront_client.core.application.cache import QueryCache, QueryKey
from storefront_client.core.application.common.detached import run_to_completion
from storefront_client.core.application.ports import BackendPort, IdentityPort
from storefront_client.core.application.services.cart_aggregate import CartAggregate
from storefront_client.core.application.services.catalog_cache import CatalogCache
from storefront_client.core.application.views import CheckoutView, build_cart_view
from storefront_client.core.application.workflows.checkout.placement_state import PlacementState
from storefront_client.core.domain.cart import Cart
from storefront_client.core.domain.catalog import Product
from storefront_client.core.domain.pricing import DEFAULT_CURRENCY_PREFIX
from storefront_client.core.domain.stock import invalid_lines
from storefront_client.core.exceptions import (
    RemoteUnavailableError,
    StorefrontError,
    UnauthenticatedError,
    ValidationFailedError,
)
from storefront_client.infrastructure.observability.metrics_service import ORDER_PLACEMENTS_TOTAL
from storefront_client.infrastructure.observability.tracing_setup import trace_operation

logger = structlog.get_logger()


class OrderPlacementProtocol:
    def __init__(
        self,
        backend: BackendPort,
        cache: QueryCache,
        cart: CartAggregate,
        catalog: CatalogCache,
        identity: IdentityPort,
        currency_prefix: str = DEFAULT_CURRENCY_PREFIX,
    ) -> None:
        self._backend = backend
        self._cache = cache
        self._cart = cart
        self._catalog = catalog
        self._identity = identity
        self._currency_prefix = currency_prefix
        self._state = PlacementState.IDLE
        self._last_order_id: int | None = None
        self._last_error: StorefrontError | None = None

    @property
    def state(self) -> PlacementState:
        return self._state

    @property
    def last_order_id(self) -> int | None:
        return self._last_order_id

    @property
    def last_error(self) -> StorefrontError | None:
        return self._last_error

    def can_submit(self) -> bool:
        """Whether the place-order control is enabled, judged on the last fetched cart."""
        cart = self._cart.last_fetched_cart()
        return (
            self._identity.is_authenticated()
            and self._state != PlacementState.SUBMITTING
            and cart is not None
            and not cart.is_empty
        )

    async def checkout_view(self) -> CheckoutView:
        cart, catalog = await asyncio.gather(self._cart.get_cart(), self._catalog.catalog_index())
        reason = self._blocked_reason(cart, catalog)
        return CheckoutView(
            cart=build_cart_view(cart, catalog, self._currency_prefix),
            can_place_order=reason is None,
            blocked_reason=reason,
        )

    def reset(self) -> None:
        if self._state != PlacementState.SUBMITTING:
            self._state = PlacementState.IDLE

    @trace_operation("workflow.place_order")
    async def place_order(self) -> int:
        """Submit the cart. Returns the new order id once cart and order history
        have been invalidated and refetched."""
        bind_contextvars(event_type="workflow.place_order")
        self._step_1_require_identity()
        cart, catalog = await self._step_2_load_snapshot()
        self._step_3_check_preconditions(cart, catalog)
        self._state = PlacementState.SUBMITTING
        self._last_error = None
        logger.info("Submitting order", line_count=len(cart.lines), item_count=cart.item_count)
        return await run_to_completion(self._step_4_submit())

    # ── Step Methods ─────────────────────────────────────────────────

    def _step_1_require_identity(self) -> None:
        if not self._identity.is_authenticated():
            raise UnauthenticatedError("Sign in to place an order.")

    async def _step_2_load_snapshot(self) -> tuple[Cart, dict[int, Product]]:
        """Last fetched cart (fetched now if never read) plus the catalog for the stock gate."""
        cart = self._cart.last_fetched_cart()
        if cart is None:
            cart = await self._cart.get_cart()
        return cart, await self._catalog.catalog_index()

    def _step_3_check_preconditions(self, cart: Cart, catalog: dict[int, Product]) -> None:
        reason = self._blocked_reason(cart, catalog)
        if reason is None:
            return
        logger.info("Order placement blocked", reason=reason)
        if not self._identity.is_authenticated():
            raise UnauthenticatedError(reason)
        raise ValidationFailedError(reason, context={"state": self._state.value})

    async def _step_4_submit(self) -> int:
        try:
            order_id = await self._backend.place_order()
        except StorefrontError as exc:
            self._record_failure(exc)
            raise
        except Exception as exc:
            error = RemoteUnavailableError(f"Order placement failed: {exc}")
            self._record_failure(error)
            raise error from exc
        self._state = PlacementState.SUCCEEDED
        self._last_order_id = order_id
        ORDER_PLACEMENTS_TOTAL.labels(outcome="success").inc()
        await self._cache.invalidate(QueryKey.CART, QueryKey.ORDERS)
        logger.info("Order placed", order_id=order_id, processing_status="SUCCESS")
        return order_id

    # ── Helpers ──

    def _blocked_reason(self, cart: Cart, catalog: dict[int, Product]) -> str | None:
        if not self._identity.is_authenticated():
            return "Sign in to place an order."
        if self._state == PlacementState.SUBMITTING:
            return "An order is already being placed."
        if cart.is_empty:
            return "Your cart is empty."
        over_stock = invalid_lines(cart, catalog)
        if over_stock:
            names = ", ".join(catalog[line.product_id].display_name() for line in over_stock)
            return f"Not enough stock for: {names}."
        return None

    def _record_failure(self, error: StorefrontError) -> None:
        self._state = PlacementState.FAILED
        self._last_error = error
        ORDER_PLACEMENTS_TOTAL.labels(outcome="error").inc()
        logger.error(
            "Order placement failed",
            processing_status="ERROR",
            error_type=type(error).__name__,
            error_details=error.message,
            error_retryable=error.retryable,
        )
