from storefront_client.core.domain.pricing.price_formatter import (
    DEFAULT_CURRENCY_PREFIX,
    format_price,
)

__all__ = ["DEFAULT_CURRENCY_PREFIX", "format_price"]
