from .backend_dtos import (
    CallerRoleDto,
    CartItemDto,
    CartItemQuantityDto,
    CreatedProductDto,
    IsAdminDto,
    OrderDto,
    OrderItemDto,
    PlacedOrderDto,
    ProductDto,
    ProductInputDto,
    UserProfileDto,
)

__all__ = [
    "CallerRoleDto",
    "CartItemDto",
    "CartItemQuantityDto",
    "CreatedProductDto",
    "IsAdminDto",
    "OrderDto",
    "OrderItemDto",
    "PlacedOrderDto",
    "ProductDto",
    "ProductInputDto",
    "UserProfileDto",
]
