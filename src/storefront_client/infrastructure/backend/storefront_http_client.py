"""HTTP adapter for the storefront backend.

Every call goes through ``_invoke``, which owns tracing, metrics, structured
logging and error translation. Only idempotent GETs are retried.
"""

import time
from typing import Any

import httpx
import structlog

from storefront_client.core.application.ports import BackendPort
from storefront_client.core.domain.cart import CartLine
from storefront_client.core.domain.catalog import Product, ProductDraft
from storefront_client.core.domain.identity import Role, UserProfile
from storefront_client.core.domain.orders import Order
from storefront_client.core.exceptions import (
    NotFoundError,
    RemoteUnavailableError,
    StorefrontError,
)
from storefront_client.infrastructure.backend.http_error_translator import (
    translate_status,
    translate_transport_error,
)
from storefront_client.infrastructure.backend.mappers import BackendPayloadMapper
from storefront_client.infrastructure.common.retry.retry_policy import RetryPolicy
from storefront_client.infrastructure.config import StorefrontSettings
from storefront_client.infrastructure.identity import TokenIdentityProvider
from storefront_client.infrastructure.observability.metrics_service import (
    BACKEND_CALL_DURATION_SECONDS,
    BACKEND_CALLS_TOTAL,
)
from storefront_client.infrastructure.observability.tracing_setup import get_tracer, record_failure

logger = structlog.get_logger()


class StorefrontHttpClient(BackendPort):
    _PROVIDER: str = "StorefrontBackend"

    def __init__(
        self,
        settings: StorefrontSettings,
        identity: TokenIdentityProvider,
        *,
        client: httpx.AsyncClient | None = None,
        mapper: BackendPayloadMapper | None = None,
        read_retry: RetryPolicy | None = None,
    ) -> None:
        self._identity = identity
        self._mapper = mapper or BackendPayloadMapper()
        self._read_retry = read_retry or RetryPolicy(max_attempts=settings.read_max_attempts)
        self._write_retry = RetryPolicy(max_attempts=1)
        self._owns_client = client is None
        self._client = client or httpx.AsyncClient(
            base_url=settings.base_url,
            timeout=settings.request_timeout_seconds,
            headers={"Accept": "application/json"},
        )

    # ── Catalog ──

    async def list_products(self) -> list[Product]:
        payload = await self._invoke("list_products", "GET", "/products")
        return self._mapper.to_products(payload)

    async def get_product(self, product_id: int) -> Product | None:
        try:
            payload = await self._invoke("get_product", "GET", f"/products/{product_id}")
        except NotFoundError:
            return None
        return self._mapper.to_product(payload)

    async def create_product(self, draft: ProductDraft) -> int:
        payload = await self._invoke(
            "create_product", "POST", "/products", json_body=self._mapper.from_draft(draft)
        )
        return self._mapper.to_created_product_id(payload)

    async def update_product(self, product_id: int, draft: ProductDraft) -> None:
        await self._invoke(
            "update_product",
            "PUT",
            f"/products/{product_id}",
            json_body=self._mapper.from_draft(draft),
        )

    async def delete_product(self, product_id: int) -> None:
        await self._invoke("delete_product", "DELETE", f"/products/{product_id}")

    # ── Cart ──

    async def get_cart(self) -> list[CartLine]:
        payload = await self._invoke("get_cart", "GET", "/cart")
        return self._mapper.to_cart_lines(payload)

    async def add_to_cart(self, product_id: int, quantity: int) -> None:
        await self._invoke(
            "add_to_cart",
            "POST",
            "/cart/items",
            json_body=self._mapper.cart_item(product_id, quantity),
        )

    async def update_cart_item(self, product_id: int, quantity: int) -> None:
        await self._invoke(
            "update_cart_item",
            "PUT",
            f"/cart/items/{product_id}",
            json_body=self._mapper.cart_quantity(quantity),
        )

    async def remove_cart_item(self, product_id: int) -> None:
        await self._invoke("remove_cart_item", "DELETE", f"/cart/items/{product_id}")

    # ── Orders ──

    async def place_order(self) -> int:
        payload = await self._invoke("place_order", "POST", "/orders")
        return self._mapper.to_placed_order_id(payload)

    async def get_orders(self) -> list[Order]:
        payload = await self._invoke("get_orders", "GET", "/orders")
        return self._mapper.to_orders(payload)

    # ── Caller ──

    async def get_caller_user_profile(self) -> UserProfile | None:
        try:
            payload = await self._invoke("get_caller_user_profile", "GET", "/me/profile")
        except NotFoundError:
            return None
        return self._mapper.to_user_profile(payload)

    async def save_caller_user_profile(self, profile: UserProfile) -> None:
        await self._invoke(
            "save_caller_user_profile",
            "PUT",
            "/me/profile",
            json_body=self._mapper.from_user_profile(profile),
        )

    async def get_caller_user_role(self) -> Role:
        payload = await self._invoke("get_caller_user_role", "GET", "/me/role")
        return self._mapper.to_role(payload)

    async def is_caller_admin(self) -> bool:
        payload = await self._invoke("is_caller_admin", "GET", "/me/is-admin")
        return self._mapper.to_is_admin(payload)

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()
            logger.info("Backend HTTP client closed", source_system=self._PROVIDER)

    # ── HTTP internals ──

    async def _invoke(
        self, operation: str, method: str, path: str, *, json_body: Any = None
    ) -> Any:
        """Issue one backend operation with tracing, metrics, logging and retries."""
        policy = self._read_retry if method == "GET" else self._write_retry
        tracer = get_tracer()
        with tracer.start_as_current_span(
            f"backend.{operation}", record_exception=False, set_status_on_exception=False
        ) as span:
            span.set_attribute("http.method", method)
            span.set_attribute("storefront.operation", operation)
            logger.debug(
                "Calling storefront backend",
                operation=operation,
                http_method=method,
                source_system=self._PROVIDER,
            )
            started = time.perf_counter()
            try:
                payload = await policy.run(lambda: self._send(operation, method, path, json_body))
            except StorefrontError as exc:
                record_failure(span, exc)
                self._log_failure(operation, exc, started)
                raise
            elapsed = time.perf_counter() - started
            BACKEND_CALL_DURATION_SECONDS.labels(operation=operation).observe(elapsed)
            BACKEND_CALLS_TOTAL.labels(operation=operation, outcome="success").inc()
            logger.info(
                "Storefront backend call completed",
                operation=operation,
                processing_status="SUCCESS",
                processing_duration_ms=round(elapsed * 1000, 2),
                source_system=self._PROVIDER,
            )
            return payload

    async def _send(self, operation: str, method: str, path: str, json_body: Any) -> Any:
        try:
            response = await self._client.request(
                method, path, json=json_body, headers=self._identity.authorization_header()
            )
        except httpx.HTTPError as exc:
            raise translate_transport_error(exc, operation) from exc

        if response.is_error:
            raise translate_status(response, operation)
        if response.status_code == 204 or not response.content:
            return None
        try:
            return response.json()
        except ValueError as exc:
            raise RemoteUnavailableError(
                "Backend returned a body that is not valid JSON",
                status_code=response.status_code,
                context={"operation": operation},
            ) from exc

    def _log_failure(self, operation: str, exc: StorefrontError, started: float) -> None:
        BACKEND_CALL_DURATION_SECONDS.labels(operation=operation).observe(
            time.perf_counter() - started
        )
        BACKEND_CALLS_TOTAL.labels(operation=operation, outcome=exc.kind.value).inc()
        log = logger.error if exc.retryable else logger.warning
        log(
            "Storefront backend call failed",
            operation=operation,
            processing_status="ERROR",
            error_type=type(exc).__name__,
            error_details=str(exc),
            error_retryable=exc.retryable,
            source_system=self._PROVIDER,
            tags=["backend-error"],
        )
