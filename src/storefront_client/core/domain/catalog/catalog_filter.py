"""Client-side catalog browsing: substring search and category facets."""

from collections.abc import Iterable

from storefront_client.core.domain.catalog.entities.product import Product


def index_products(products: Iterable[Product]) -> dict[int, Product]:
    return {product.id: product for product in products}


def filter_products(
    products: Iterable[Product],
    search: str = "",
    category: str | None = None,
) -> list[Product]:
    """Keep products whose name or description contains ``search`` (case-insensitive)
    and whose category equals ``category`` when one is given."""
    needle = search.strip().lower()
    matches = []
    for product in products:
        if needle and needle not in product.name.lower() and needle not in product.description.lower():
            continue
        if category and product.category != category:
            continue
        matches.append(product)
    return matches


def categories(products: Iterable[Product]) -> list[str]:
    """Distinct non-empty categories in first-seen order."""
    seen: dict[str, None] = {}
    for product in products:
        if product.category:
            seen.setdefault(product.category, None)
    return list(seen)
