from storefront_client.infrastructure.observability.logging.storefront_schema_processor import (
    storefront_schema_processor,
)

__all__ = [
    "storefront_schema_processor",
]
