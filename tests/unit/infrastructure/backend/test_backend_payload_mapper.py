from datetime import UTC, datetime

import pytest

from storefront_client.core.domain.catalog import ProductDraft
from storefront_client.core.domain.identity import Role
from storefront_client.core.domain.orders import OrderStatus
from storefront_client.core.exceptions import RemoteUnavailableError
from storefront_client.infrastructure.backend.mappers import BackendPayloadMapper


@pytest.fixture
def mapper():
    return BackendPayloadMapper()


def test_orders_are_mapped_with_captured_prices(mapper):
    [order] = mapper.to_orders(
        [
            {
                "id": 42,
                "items": [{"productId": "7", "quantity": 2, "price": "1500"}],
                "total": "3000",
                "status": "completed",
                "timestamp": "1700000000000000000",
            }
        ]
    )

    assert order.id == 42
    assert order.items[0].line_total == 3000
    assert order.normalized_status is OrderStatus.COMPLETED
    assert order.placed_at == datetime(2023, 11, 14, 22, 13, 20, tzinfo=UTC)


def test_unbounded_integers_survive(mapper):
    huge = 10**30
    product = mapper.to_product(
        {"id": 1, "name": "Gold", "price": str(huge), "stockQuantity": 1}
    )

    assert product.price == huge


@pytest.mark.parametrize(
    "payload",
    [
        {"id": 1, "name": "Bad", "price": -5, "stockQuantity": 1},
        {"id": 1, "name": "Bad", "price": "twelve", "stockQuantity": 1},
        {"name": "No id", "price": 1, "stockQuantity": 1},
    ],
)
def test_malformed_product_is_remote_unavailable(mapper, payload):
    with pytest.raises(RemoteUnavailableError):
        mapper.to_product(payload)


def test_cart_line_with_zero_quantity_is_rejected(mapper):
    with pytest.raises(RemoteUnavailableError):
        mapper.to_cart_lines([{"productId": 7, "quantity": 0}])


def test_list_payload_must_be_a_list(mapper):
    with pytest.raises(RemoteUnavailableError):
        mapper.to_products({"items": []})


def test_role_is_case_insensitive_and_unknown_roles_fail(mapper):
    assert mapper.to_role({"role": " USER "}) is Role.USER
    with pytest.raises(RemoteUnavailableError):
        mapper.to_role({"role": "superuser"})


def test_draft_is_serialized_with_backend_field_names(mapper):
    draft = ProductDraft(
        name="Lamp", description="Warm", price=4500, image_url="u", category="Home", stock_quantity=3
    )

    assert mapper.from_draft(draft) == {
        "name": "Lamp",
        "description": "Warm",
        "price": 4500,
        "imageUrl": "u",
        "category": "Home",
        "stockQuantity": 3,
    }


def test_duplicate_cart_lines_are_remote_unavailable(mapper):
    with pytest.raises(RemoteUnavailableError):
        mapper.to_cart_lines(
            [{"productId": 7, "quantity": 1}, {"productId": "7", "quantity": 2}]
        )


def _order_payload(**overrides):
    payload = {
        "id": 42,
        "items": [{"productId": 7, "quantity": 2, "price": 1500}],
        "total": 3000,
        "status": "pending",
        "timestamp": 1_700_000_000_000_000_000,
    }
    payload.update(overrides)
    return payload


@pytest.mark.parametrize(
    "overrides",
    [
        {"total": -1},
        {"items": [{"productId": 7, "quantity": 1, "price": -1500}]},
        {"items": [{"productId": 7, "quantity": 0, "price": 1500}]},
        {"timestamp": 10**30},
    ],
)
def test_order_violating_invariants_is_remote_unavailable(mapper, overrides):
    with pytest.raises(RemoteUnavailableError):
        mapper.to_orders([_order_payload(**overrides)])
