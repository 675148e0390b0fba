import json

import httpx
import pytest
import respx
from pydantic import SecretStr

from storefront_client.core.domain.cart import CartLine
from storefront_client.core.domain.catalog import ProductDraft
from storefront_client.core.domain.identity import Role, UserProfile
from storefront_client.core.exceptions import (
    NotFoundError,
    RemoteUnavailableError,
    UnauthenticatedError,
    UnauthorizedError,
    ValidationFailedError,
)
from storefront_client.infrastructure.backend import StorefrontHttpClient
from storefront_client.infrastructure.common.retry.retry_policy import RetryPolicy
from storefront_client.infrastructure.config import StorefrontSettings
from storefront_client.infrastructure.identity import TokenIdentityProvider

BASE_URL = "https://shop.example.com"

PRODUCT_JSON = {
    "id": "7",
    "name": "Widget",
    "description": "A sturdy widget",
    "imageUrl": "https://img.example.com/7.png",
    "category": "Tools",
    "price": "1500",
    "stockQuantity": 5,
}


@pytest.fixture
def identity():
    return TokenIdentityProvider(SecretStr("test-token"))


@pytest.fixture
async def client(identity):
    settings = StorefrontSettings(base_url=BASE_URL, read_max_attempts=2, _env_file=None)
    http = StorefrontHttpClient(
        settings,
        identity,
        read_retry=RetryPolicy(max_attempts=2, initial_wait=0, max_wait=0),
    )
    yield http
    await http.aclose()


@pytest.fixture
def router():
    with respx.mock(base_url=BASE_URL, assert_all_called=False) as mock:
        yield mock


async def test_list_products_accepts_numeric_strings_and_sends_bearer(client, router):
    route = router.get("/products").respond(200, json=[PRODUCT_JSON])

    [product] = await client.list_products()

    assert product.id == 7
    assert product.price == 1500
    assert product.image_url == "https://img.example.com/7.png"
    assert route.calls.last.request.headers["Authorization"] == "Bearer test-token"


async def test_anonymous_requests_carry_no_authorization(client, router, identity):
    identity.sign_out()
    route = router.get("/products").respond(200, json=[])

    await client.list_products()

    assert "Authorization" not in route.calls.last.request.headers


async def test_missing_product_maps_to_none(client, router):
    router.get("/products/404").respond(404, json={"message": "no such product"})

    assert await client.get_product(404) is None


async def test_missing_profile_maps_to_none(client, router):
    router.get("/me/profile").respond(404)

    assert await client.get_caller_user_profile() is None


@pytest.mark.parametrize(
    ("status", "error_type"),
    [
        (401, UnauthenticatedError),
        (403, UnauthorizedError),
        (404, NotFoundError),
        (409, ValidationFailedError),
        (422, ValidationFailedError),
        (500, RemoteUnavailableError),
    ],
)
async def test_http_status_translation(client, router, status, error_type):
    router.post("/cart/items").respond(status, json={"message": "backend says no"})

    with pytest.raises(error_type) as exc_info:
        await client.add_to_cart(7, 1)

    assert exc_info.value.message == "backend says no"


async def test_reads_are_retried_on_server_errors(client, router):
    route = router.get("/cart").mock(
        side_effect=[httpx.Response(503), httpx.Response(200, json=[{"productId": 7, "quantity": 2}])]
    )

    assert await client.get_cart() == [CartLine(7, 2)]
    assert route.call_count == 2


async def test_reads_give_up_after_max_attempts(client, router):
    route = router.get("/orders").respond(502)

    with pytest.raises(RemoteUnavailableError) as exc_info:
        await client.get_orders()

    assert exc_info.value.status_code == 502
    assert route.call_count == 2


async def test_place_order_is_never_retried(client, router):
    route = router.post("/orders").respond(503)

    with pytest.raises(RemoteUnavailableError):
        await client.place_order()

    assert route.call_count == 1


async def test_place_order_returns_backend_id(client, router):
    router.post("/orders").respond(200, json={"orderId": "42"})

    assert await client.place_order() == 42


async def test_timeout_is_remote_unavailable(client, router):
    router.post("/orders").mock(side_effect=httpx.ConnectTimeout("timed out"))

    with pytest.raises(RemoteUnavailableError) as exc_info:
        await client.place_order()

    assert exc_info.value.context["failure"] == "timeout"


async def test_undecodable_body_is_remote_unavailable(client, router):
    router.get("/me/role").respond(200, text="<html>maintenance</html>")

    with pytest.raises(RemoteUnavailableError):
        await client.get_caller_user_role()


async def test_mutation_payloads_use_backend_field_names(client, router):
    add = router.post("/cart/items").respond(204)
    update = router.put("/cart/items/7").respond(204)
    create = router.post("/products").respond(201, json={"id": 11})
    draft = ProductDraft(
        name="Lamp", description="", price=4500, image_url="", category="Home", stock_quantity=3
    )

    await client.add_to_cart(7, 2)
    await client.update_cart_item(7, 3)
    product_id = await client.create_product(draft)

    assert json.loads(add.calls.last.request.content) == {"productId": 7, "quantity": 2}
    assert json.loads(update.calls.last.request.content) == {"quantity": 3}
    assert json.loads(create.calls.last.request.content)["stockQuantity"] == 3
    assert product_id == 11


async def test_caller_endpoints(client, router):
    router.get("/me/role").respond(200, json={"role": "Admin"})
    router.get("/me/is-admin").respond(200, json={"isAdmin": True})
    save = router.put("/me/profile").respond(204)

    assert await client.get_caller_user_role() is Role.ADMIN
    assert await client.is_caller_admin() is True
    await client.save_caller_user_profile(UserProfile("Ada"))
    assert json.loads(save.calls.last.request.content) == {"name": "Ada"}
