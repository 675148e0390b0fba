"""Wire models for the storefront backend JSON schema.

Field names follow the backend's camelCase. Integer fields accept JSON numbers
or decimal strings; pydantic's lax mode coerces both.
"""

from pydantic import BaseModel, ConfigDict, Field


class _BackendModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")


class ProductDto(_BackendModel):
    id: int
    name: str
    description: str = ""
    image_url: str = Field(default="", alias="imageUrl")
    category: str = ""
    price: int
    stock_quantity: int = Field(alias="stockQuantity")


class ProductInputDto(_BackendModel):
    name: str
    description: str
    price: int
    image_url: str = Field(alias="imageUrl")
    category: str
    stock_quantity: int = Field(alias="stockQuantity")


class CreatedProductDto(_BackendModel):
    id: int


class CartItemDto(_BackendModel):
    product_id: int = Field(alias="productId")
    quantity: int


class CartItemQuantityDto(_BackendModel):
    quantity: int


class OrderItemDto(_BackendModel):
    product_id: int = Field(alias="productId")
    quantity: int
    price: int


class OrderDto(_BackendModel):
    id: int
    items: list[OrderItemDto] = Field(default_factory=list)
    total: int
    status: str = ""
    timestamp: int


class PlacedOrderDto(_BackendModel):
    order_id: int = Field(alias="orderId")


class UserProfileDto(_BackendModel):
    name: str


class CallerRoleDto(_BackendModel):
    role: str


class IsAdminDto(_BackendModel):
    is_admin: bool = Field(alias="isAdmin")
