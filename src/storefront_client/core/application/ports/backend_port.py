from abc import ABC, abstractmethod

from storefront_client.core.domain.cart import CartLine
from storefront_client.core.domain.catalog import Product, ProductDraft
from storefront_client.core.domain.identity import Role, UserProfile
from storefront_client.core.domain.orders import Order


class BackendPort(ABC):
    """Remote storefront backend. Owns persistence, stock, order ids and authorization.

    Implementations raise ``StorefrontError`` subclasses only.
    """

    # ── Catalog ──

    @abstractmethod
    async def list_products(self) -> list[Product]: ...

    @abstractmethod
    async def get_product(self, product_id: int) -> Product | None:
        """Returns None when the product does not exist."""

    @abstractmethod
    async def create_product(self, draft: ProductDraft) -> int:
        """[ADMIN] Returns the backend-assigned product id."""

    @abstractmethod
    async def update_product(self, product_id: int, draft: ProductDraft) -> None:
        """[ADMIN]"""

    @abstractmethod
    async def delete_product(self, product_id: int) -> None:
        """[ADMIN]"""

    # ── Cart ──

    @abstractmethod
    async def get_cart(self) -> list[CartLine]: ...

    @abstractmethod
    async def add_to_cart(self, product_id: int, quantity: int) -> None:
        """Creates the line or increases an existing line's quantity (backend decides)."""

    @abstractmethod
    async def update_cart_item(self, product_id: int, quantity: int) -> None: ...

    @abstractmethod
    async def remove_cart_item(self, product_id: int) -> None: ...

    # ── Orders ──

    @abstractmethod
    async def place_order(self) -> int:
        """Consumes the whole server-side cart. Returns the new order id."""

    @abstractmethod
    async def get_orders(self) -> list[Order]: ...

    # ── Caller ──

    @abstractmethod
    async def get_caller_user_profile(self) -> UserProfile | None: ...

    @abstractmethod
    async def save_caller_user_profile(self, profile: UserProfile) -> None: ...

    @abstractmethod
    async def get_caller_user_role(self) -> Role: ...

    @abstractmethod
    async def is_caller_admin(self) -> bool: ...

    async def aclose(self) -> None:
        """Release transport resources (no-op by default)."""
        return
