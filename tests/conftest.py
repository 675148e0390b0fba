from unittest.mock import AsyncMock, MagicMock

import pytest

from storefront_client.core.application.cache import QueryCache
from storefront_client.core.application.notifications import NotificationCenter
from storefront_client.core.application.ports import BackendPort, IdentityPort
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
from storefront_client.core.domain.catalog import Product
from storefront_client.core.domain.identity import Role
from storefront_client.infrastructure.config import StorefrontSettings


def make_product(product_id: int = 7, **overrides) -> Product:
    fields = {
        "id": product_id,
        "name": f"Widget {product_id}",
        "description": "A sturdy widget",
        "image_url": f"https://img.example.com/{product_id}.png",
        "category": "Tools",
        "price": 1500,
        "stock_quantity": 5,
    }
    fields.update(overrides)
    return Product(**fields)


@pytest.fixture
def product_factory():
    return make_product


@pytest.fixture
def settings():
    return StorefrontSettings(
        base_url="https://shop.example.com/api",
        api_token="test-token",
        read_max_attempts=2,
        _env_file=None,
    )


@pytest.fixture
def products():
    return [
        make_product(7),
        make_product(8, name="Gadget", category="Electronics", price=2999, stock_quantity=0),
    ]


@pytest.fixture
def backend(products):
    mock = AsyncMock(spec=BackendPort)
    mock.list_products.return_value = products
    mock.get_cart.return_value = []
    mock.get_orders.return_value = []
    mock.get_caller_user_role.return_value = Role.USER
    mock.is_caller_admin.return_value = False
    mock.get_caller_user_profile.return_value = None
    return mock


@pytest.fixture
def identity():
    mock = MagicMock(spec=IdentityPort)
    mock.is_authenticated.return_value = True
    return mock


@pytest.fixture
def cache():
    return QueryCache()


@pytest.fixture
def catalog(backend, cache):
    return CatalogCache(backend, cache)


@pytest.fixture
def cart(backend, cache, catalog, identity):
    return CartAggregate(backend, cache, catalog, identity)


@pytest.fixture
def placement(backend, cache, cart, catalog, identity):
    return OrderPlacementProtocol(backend, cache, cart, catalog, identity)


@pytest.fixture
def access(backend, cache, identity):
    return AccessService(backend, cache, identity)


@pytest.fixture
def session(backend, identity, cache, catalog, cart, placement, access):
    return StorefrontSession(
        backend=backend,
        identity=identity,
        cache=cache,
        catalog=catalog,
        cart=cart,
        placement=placement,
        orders=OrderHistoryService(backend, cache, catalog, identity),
        profiles=ProfileService(backend, cache, identity),
        access=access,
        admin=AdminCatalogService(backend, catalog, access),
        notifications=NotificationCenter(limit=5),
    )
