"""Presentation-facing facade for one user session.

Every public coroutine is an operation boundary: ``StorefrontError`` failures
are logged, turned into a notification and returned inside an
``OperationResult``, so nothing raised below reaches the rendering layer.
"""

from collections.abc import Awaitable, Callable

import structlog

from storefront_client.core.application.cache import QueryCache
from storefront_client.core.application.notifications import Notification, NotificationCenter
from storefront_client.core.application.ports import BackendPort, IdentityPort
from storefront_client.core.application.services import (
    AccessService,
    AdminCatalogService,
    CartAggregate,
    CatalogCache,
    OrderHistoryService,
    ProfileService,
)
from storefront_client.core.application.session.operation_result import OperationResult
from storefront_client.core.application.views import CartView, CheckoutView, OrderView
from storefront_client.core.application.workflows.checkout import OrderPlacementProtocol
from storefront_client.core.domain.catalog import Product, ProductDraft
from storefront_client.core.domain.identity import Role, UserProfile
from storefront_client.core.exceptions import StorefrontError

logger = structlog.get_logger()


class StorefrontSession:
    def __init__(
        self,
        *,
        backend: BackendPort,
        identity: IdentityPort,
        cache: QueryCache,
        catalog: CatalogCache,
        cart: CartAggregate,
        placement: OrderPlacementProtocol,
        orders: OrderHistoryService,
        profiles: ProfileService,
        access: AccessService,
        admin: AdminCatalogService,
        notifications: NotificationCenter,
    ) -> None:
        self._backend = backend
        self._identity = identity
        self._cache = cache
        self.catalog = catalog
        self.cart = cart
        self.placement = placement
        self.orders = orders
        self.profiles = profiles
        self.access = access
        self.admin = admin
        self._notifications = notifications

    # ── Identity ──

    def is_authenticated(self) -> bool:
        return self._identity.is_authenticated()

    def sign_in(self, credential: str) -> OperationResult[None]:
        try:
            self._identity.sign_in(credential)
        except StorefrontError as exc:
            self._notifications.failure(exc)
            return OperationResult(error=exc)
        self._forget_previous_identity()
        return OperationResult()

    def sign_out(self) -> None:
        self._identity.sign_out()
        self._forget_previous_identity()

    # ── Catalog ──

    async def browse(self, search: str = "", category: str | None = None) -> OperationResult[list[Product]]:
        return await self._run("browse", lambda: self.catalog.filter_products(search, category))

    async def categories(self) -> OperationResult[list[str]]:
        return await self._run("categories", self.catalog.categories)

    async def product_detail(self, product_id: int) -> OperationResult[Product]:
        return await self._run("product_detail", lambda: self.catalog.get_product(product_id))

    # ── Cart ──

    async def cart_view(self) -> OperationResult[CartView]:
        return await self._run("cart_view", self.cart.view)

    async def add_to_cart(self, product_id: int, quantity: int = 1) -> OperationResult[None]:
        product = self.catalog.cached_product(product_id)
        label = product.display_name() if product else "Item"
        return await self._run(
            "add_to_cart",
            lambda: self.cart.add_item(product_id, quantity),
            success_message=f"{label} added to cart!",
        )

    async def set_cart_quantity(self, product_id: int, quantity: int) -> OperationResult[bool]:
        return await self._run("set_cart_quantity", lambda: self.cart.set_quantity(product_id, quantity))

    async def remove_from_cart(self, product_id: int) -> OperationResult[None]:
        return await self._run(
            "remove_from_cart",
            lambda: self.cart.remove_item(product_id),
            success_message="Item removed from cart.",
        )

    # ── Checkout & orders ──

    async def checkout_view(self) -> OperationResult[CheckoutView]:
        return await self._run("checkout_view", self.placement.checkout_view)

    async def place_order(self) -> OperationResult[int]:
        return await self._run(
            "place_order", self.placement.place_order, success_message="Order placed successfully!"
        )

    async def order_history(self) -> OperationResult[list[OrderView]]:
        return await self._run("order_history", self.orders.history)

    # ── Profile & role ──

    async def needs_profile_setup(self) -> OperationResult[bool]:
        return await self._run("needs_profile_setup", self.profiles.needs_profile_setup)

    async def save_profile(self, name: str) -> OperationResult[UserProfile]:
        return await self._run(
            "save_profile", lambda: self.profiles.save_profile(name), success_message="Profile saved."
        )

    async def caller_role(self) -> OperationResult[Role]:
        return await self._run("caller_role", self.access.caller_role)

    async def is_admin(self) -> OperationResult[bool]:
        return await self._run("is_admin", self.access.is_admin)

    async def can_manage_catalog(self) -> OperationResult[bool]:
        """Whether admin pages should be offered; confirmed with the backend."""

        async def _check() -> bool:
            return (await self.access.caller_role()).can_manage_catalog

        return await self._run("can_manage_catalog", _check)

    # ── Admin ──

    async def create_product(
        self,
        *,
        name: str,
        description: str,
        price: int,
        image_url: str,
        category: str,
        stock_quantity: int,
    ) -> OperationResult[int]:
        return await self._run(
            "create_product",
            lambda: self.admin.create_product(
                ProductDraft.from_form(
                    name=name,
                    description=description,
                    price=price,
                    image_url=image_url,
                    category=category,
                    stock_quantity=stock_quantity,
                )
            ),
            success_message="Product added successfully!",
        )

    async def update_product(
        self,
        product_id: int,
        *,
        name: str,
        description: str,
        price: int,
        image_url: str,
        category: str,
        stock_quantity: int,
    ) -> OperationResult[None]:
        return await self._run(
            "update_product",
            lambda: self.admin.update_product(
                product_id,
                ProductDraft.from_form(
                    name=name,
                    description=description,
                    price=price,
                    image_url=image_url,
                    category=category,
                    stock_quantity=stock_quantity,
                ),
            ),
            success_message="Product updated successfully!",
        )

    async def delete_product(self, product_id: int) -> OperationResult[None]:
        return await self._run(
            "delete_product",
            lambda: self.admin.delete_product(product_id),
            success_message="Product deleted.",
        )

    # ── Notifications ──

    def notifications(self) -> list[Notification]:
        return self._notifications.active()

    def dismiss(self, notification_id: int) -> None:
        self._notifications.dismiss(notification_id)

    async def aclose(self) -> None:
        await self._backend.aclose()

    # ── Internals ──

    def _forget_previous_identity(self) -> None:
        self._cache.reset()
        self.placement.reset()

    async def _run[T](
        self,
        operation: str,
        call: Callable[[], Awaitable[T]],
        success_message: str | None = None,
    ) -> OperationResult[T]:
        try:
            value = await call()
        except StorefrontError as exc:
            logger.warning(
                "Operation failed",
                operation=operation,
                error_type=type(exc).__name__,
                error_code=exc.kind.value,
                error_details=exc.message,
                error_retryable=exc.retryable,
            )
            self._notifications.failure(exc)
            return OperationResult(error=exc)
        if success_message:
            self._notifications.success(success_message)
        return OperationResult(value=value)
