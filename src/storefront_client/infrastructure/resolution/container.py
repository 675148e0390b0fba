"""Composition root: wires settings, adapters and services into one session."""

import httpx
import structlog

from storefront_client.core.application.cache import QueryCache
from storefront_client.core.application.notifications import NotificationCenter
from storefront_client.core.application.services import (
    AccessService,
    AdminCatalogService,
    CartAggregate,
    CatalogCache,
    OrderHistoryService,
    ProfileService,
)
from storefront_client.core.application.session import StorefrontSession
from storefront_client.core.application.workflows.checkout import OrderPlacementProtocol
from storefront_client.infrastructure.backend import StorefrontHttpClient
from storefront_client.infrastructure.config import StorefrontSettings
from storefront_client.infrastructure.identity import TokenIdentityProvider

logger = structlog.get_logger()


def build_storefront_session(
    settings: StorefrontSettings | None = None,
    *,
    http_client: httpx.AsyncClient | None = None,
) -> StorefrontSession:
    """Build a fully wired session. ``http_client`` lets callers supply their own transport."""
    settings = settings or StorefrontSettings()
    prefix = settings.currency_prefix

    identity = TokenIdentityProvider(settings.api_token)
    backend = StorefrontHttpClient(settings, identity, client=http_client)
    cache = QueryCache()

    catalog = CatalogCache(backend, cache)
    cart = CartAggregate(backend, cache, catalog, identity, currency_prefix=prefix)
    access = AccessService(backend, cache, identity)

    session = StorefrontSession(
        backend=backend,
        identity=identity,
        cache=cache,
        catalog=catalog,
        cart=cart,
        placement=OrderPlacementProtocol(
            backend, cache, cart, catalog, identity, currency_prefix=prefix
        ),
        orders=OrderHistoryService(backend, cache, catalog, identity, currency_prefix=prefix),
        profiles=ProfileService(backend, cache, identity),
        access=access,
        admin=AdminCatalogService(backend, catalog, access),
        notifications=NotificationCenter(limit=settings.notification_limit),
    )
    logger.info(
        "Storefront session assembled",
        context_component="container",
        base_url=settings.base_url,
        authenticated=identity.is_authenticated(),
    )
    return session
