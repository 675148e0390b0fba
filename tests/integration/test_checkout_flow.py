import json

import httpx
import pytest
import respx

from storefront_client.core.application.notifications import NotificationSeverity
from storefront_client.core.exceptions import RemoteUnavailableError, UnauthenticatedError
from storefront_client.infrastructure.config import StorefrontSettings
from storefront_client.infrastructure.resolution.container import build_storefront_session

BASE_URL = "https://shop.example.com"

CATALOG = [
    {
        "id": 7,
        "name": "Widget",
        "description": "A sturdy widget",
        "imageUrl": "",
        "category": "Tools",
        "price": 1500,
        "stockQuantity": 5,
    },
    {
        "id": 8,
        "name": "Gadget",
        "description": "Sold out",
        "imageUrl": "",
        "category": "Electronics",
        "price": 2999,
        "stockQuantity": 0,
    },
]


class FakeBackend:
    """Stateful stand-in for the storefront backend, served through respx."""

    def __init__(self) -> None:
        self.cart: dict[int, int] = {}
        self.orders: list[dict] = []

    def get_cart(self, request: httpx.Request) -> httpx.Response:
        return httpx.Response(
            200, json=[{"productId": pid, "quantity": qty} for pid, qty in self.cart.items()]
        )

    def add_item(self, request: httpx.Request) -> httpx.Response:
        body = json.loads(request.content)
        self.cart[body["productId"]] = self.cart.get(body["productId"], 0) + body["quantity"]
        return httpx.Response(204)

    def place_order(self, request: httpx.Request) -> httpx.Response:
        prices = {p["id"]: p["price"] for p in CATALOG}
        items = [
            {"productId": pid, "quantity": qty, "price": prices[pid]} for pid, qty in self.cart.items()
        ]
        order_id = 42 + len(self.orders)
        self.orders.append(
            {
                "id": order_id,
                "items": items,
                "total": sum(i["price"] * i["quantity"] for i in items),
                "status": "pending",
                "timestamp": 1_700_000_000_000_000_000,
            }
        )
        self.cart.clear()
        return httpx.Response(200, json={"orderId": order_id})

    def get_orders(self, request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, json=self.orders)


@pytest.fixture
def fake_backend():
    backend = FakeBackend()
    with respx.mock(base_url=BASE_URL, assert_all_called=False) as router:
        router.get("/products").respond(200, json=CATALOG)
        router.get("/cart").mock(side_effect=backend.get_cart)
        router.post("/cart/items").mock(side_effect=backend.add_item)
        router.post("/orders").mock(side_effect=backend.place_order)
        router.get("/orders").mock(side_effect=backend.get_orders)
        yield backend


@pytest.fixture
async def session():
    settings = StorefrontSettings(base_url=BASE_URL, api_token="user-token", _env_file=None)
    storefront = build_storefront_session(settings)
    yield storefront
    await storefront.aclose()


async def test_browse_add_checkout_and_history(session, fake_backend):
    products = (await session.browse(search="widget")).unwrap()
    assert [p.id for p in products] == [7]

    assert (await session.add_to_cart(7, 2)).ok
    cart = (await session.cart_view()).unwrap()
    assert cart.grand_total_display == "$30.00"

    checkout = (await session.checkout_view()).unwrap()
    assert checkout.can_place_order

    order_id = (await session.place_order()).unwrap()
    assert order_id == 42
    assert (await session.cart_view()).unwrap().is_empty

    [order] = (await session.order_history()).unwrap()
    assert order.order_id == 42
    assert order.total_display == "$30.00"
    assert order.lines[0].name == "Widget"

    messages = [n.message for n in session.notifications()]
    assert messages == ["Widget added to cart!", "Order placed successfully!"]


async def test_sold_out_product_is_rejected_locally(session, fake_backend):
    await session.browse()

    result = await session.add_to_cart(8)

    assert not result.ok
    assert fake_backend.cart == {}


async def test_signed_out_visitor_cannot_shop(session, fake_backend):
    session.sign_out()

    result = await session.add_to_cart(7)

    assert isinstance(result.error, UnauthenticatedError)
    assert (await session.cart_view()).unwrap().is_empty
    assert session.notifications()[-1].severity is NotificationSeverity.ERROR
    assert fake_backend.cart == {}


async def test_duplicate_cart_lines_from_backend_are_reported(session):
    with respx.mock(base_url=BASE_URL, assert_all_called=False) as router:
        router.get("/products").respond(200, json=CATALOG)
        router.get("/cart").respond(
            200, json=[{"productId": 7, "quantity": 1}, {"productId": 7, "quantity": 2}]
        )

        result = await session.cart_view()

    assert isinstance(result.error, RemoteUnavailableError)
    assert session.notifications()[-1].severity is NotificationSeverity.ERROR


@pytest.mark.parametrize(
    "order",
    [
        {"id": 1, "items": [{"productId": 7, "quantity": 1, "price": -1500}], "total": 0,
         "status": "pending", "timestamp": 0},
        {"id": 2, "items": [], "total": 0, "status": "pending", "timestamp": 10**30},
    ],
)
async def test_unusable_orders_from_backend_are_reported(session, order):
    with respx.mock(base_url=BASE_URL, assert_all_called=False) as router:
        router.get("/products").respond(200, json=CATALOG)
        router.get("/orders").respond(200, json=[order])

        result = await session.order_history()

    assert isinstance(result.error, RemoteUnavailableError)
