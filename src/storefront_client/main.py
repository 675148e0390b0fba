import asyncio

from storefront_client.core.application.session import StorefrontSession
from storefront_client.core.domain.pricing import format_price
from storefront_client.infrastructure.config import StorefrontSettings
from storefront_client.infrastructure.observability import (
    configure_logging,
    configure_tracing,
    get_logger,
)
from storefront_client.infrastructure.resolution.container import build_storefront_session

logger = get_logger("main")


async def _summarize(session: StorefrontSession, currency_prefix: str) -> None:
    try:
        products = await session.browse()
        if not products.ok:
            logger.warning("Catalog unavailable", error_type=products.error.kind.value)
            return
        for product in products.value:
            logger.info(
                "Catalog entry",
                product_id=product.id,
                name=product.display_name(),
                price=format_price(product.price, currency_prefix),
                in_stock=product.in_stock,
            )
        if session.is_authenticated():
            cart = await session.cart_view()
            if cart.ok:
                logger.info(
                    "Cart summary",
                    item_count=cart.value.item_count,
                    grand_total=cart.value.grand_total_display,
                )
    finally:
        await session.aclose()


def dev():
    """Print the catalog (and the cart, when a token is configured) of the configured backend."""
    settings = StorefrontSettings()
    configure_logging(settings.log_level)
    configure_tracing()
    session = build_storefront_session(settings)
    asyncio.run(_summarize(session, settings.currency_prefix))


if __name__ == "__main__":
    dev()
