from storefront_client.core.domain.catalog.catalog_filter import (
    categories,
    filter_products,
    index_products,
)
from storefront_client.core.domain.catalog.entities.product import Product
from storefront_client.core.domain.catalog.value_objects.product_draft import ProductDraft

__all__ = ["Product", "ProductDraft", "categories", "filter_products", "index_products"]
