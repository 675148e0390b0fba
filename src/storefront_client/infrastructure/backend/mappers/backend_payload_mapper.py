from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, TypeVar

from pydantic import BaseModel, ValidationError

from storefront_client.core.domain.cart import Cart, CartLine
from storefront_client.core.domain.catalog import Product, ProductDraft
from storefront_client.core.domain.identity import Role, UserProfile
from storefront_client.core.domain.orders import Order, OrderItem
from storefront_client.core.exceptions import RemoteUnavailableError
from storefront_client.infrastructure.backend.dtos import (
    CallerRoleDto,
    CartItemDto,
    CartItemQuantityDto,
    CreatedProductDto,
    IsAdminDto,
    OrderDto,
    PlacedOrderDto,
    ProductDto,
    ProductInputDto,
    UserProfileDto,
)

_M = TypeVar("_M", bound=BaseModel)
_D = TypeVar("_D")


@dataclass(frozen=True, slots=True)
class BackendPayloadMapper:
    """Translates backend JSON payloads to domain objects and back.

    Any payload that fails schema validation or a domain invariant surfaces as
    ``RemoteUnavailableError``: the backend answered, but not with something usable.
    """

    # ── Inbound ──

    def to_products(self, payload: Any) -> list[Product]:
        return [self._product(dto) for dto in self._parse_list(ProductDto, payload, "products")]

    def to_product(self, payload: Any) -> Product:
        return self._product(self._parse(ProductDto, payload, "product"))

    def to_created_product_id(self, payload: Any) -> int:
        return self._parse(CreatedProductDto, payload, "created product").id

    def to_cart_lines(self, payload: Any) -> list[CartLine]:
        lines = [self._cart_line(dto) for dto in self._parse_list(CartItemDto, payload, "cart")]
        return list(self._guard(lambda: Cart.of(lines), "cart").lines)

    def to_orders(self, payload: Any) -> list[Order]:
        return [self._order(dto) for dto in self._parse_list(OrderDto, payload, "orders")]

    def to_placed_order_id(self, payload: Any) -> int:
        return self._parse(PlacedOrderDto, payload, "placed order").order_id

    def to_user_profile(self, payload: Any) -> UserProfile:
        return UserProfile(name=self._parse(UserProfileDto, payload, "profile").name)

    def to_role(self, payload: Any) -> Role:
        raw = self._parse(CallerRoleDto, payload, "role").role
        try:
            return Role(raw.strip().lower())
        except ValueError as exc:
            raise RemoteUnavailableError(
                f"Backend returned an unknown role '{raw}'", context={"payload": "role"}
            ) from exc

    def to_is_admin(self, payload: Any) -> bool:
        return self._parse(IsAdminDto, payload, "is_admin").is_admin

    # ── Outbound ──

    def from_draft(self, draft: ProductDraft) -> dict[str, Any]:
        dto = ProductInputDto(
            name=draft.name,
            description=draft.description,
            price=draft.price,
            image_url=draft.image_url,
            category=draft.category,
            stock_quantity=draft.stock_quantity,
        )
        return dto.model_dump(by_alias=True)

    def cart_item(self, product_id: int, quantity: int) -> dict[str, Any]:
        return CartItemDto(product_id=product_id, quantity=quantity).model_dump(by_alias=True)

    def cart_quantity(self, quantity: int) -> dict[str, Any]:
        return CartItemQuantityDto(quantity=quantity).model_dump(by_alias=True)

    def from_user_profile(self, profile: UserProfile) -> dict[str, Any]:
        return UserProfileDto(name=profile.name).model_dump(by_alias=True)

    # ── Helpers ──

    def _product(self, dto: ProductDto) -> Product:
        return self._guard(
            lambda: Product(
                id=dto.id,
                name=dto.name,
                description=dto.description,
                image_url=dto.image_url,
                category=dto.category,
                price=dto.price,
                stock_quantity=dto.stock_quantity,
            ),
            "product",
        )

    def _cart_line(self, dto: CartItemDto) -> CartLine:
        return self._guard(lambda: CartLine(product_id=dto.product_id, quantity=dto.quantity), "cart")

    def _order(self, dto: OrderDto) -> Order:
        def build() -> Order:
            items = tuple(
                OrderItem(product_id=item.product_id, quantity=item.quantity, price=item.price)
                for item in dto.items
            )
            return Order(
                id=dto.id, items=items, total=dto.total, status=dto.status, timestamp=dto.timestamp
            )

        return self._guard(build, "order")

    @staticmethod
    def _parse(model: type[_M], payload: Any, label: str) -> _M:
        try:
            return model.model_validate(payload)
        except ValidationError as exc:
            raise RemoteUnavailableError(
                f"Malformed {label} payload from backend",
                context={"payload": label, "errors": exc.error_count()},
            ) from exc

    @classmethod
    def _parse_list(cls, model: type[_M], payload: Any, label: str) -> list[_M]:
        if not isinstance(payload, list):
            raise RemoteUnavailableError(
                f"Expected a list for {label} payload", context={"payload": label}
            )
        return [cls._parse(model, item, label) for item in payload]

    @staticmethod
    def _guard(build: Callable[[], _D], label: str) -> _D:
        try:
            return build()
        except ValueError as exc:
            raise RemoteUnavailableError(
                f"Backend {label} violates a domain invariant: {exc}",
                context={"payload": label},
            ) from exc
