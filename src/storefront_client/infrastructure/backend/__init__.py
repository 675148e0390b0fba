from .storefront_http_client import StorefrontHttpClient

__all__ = ["StorefrontHttpClient"]
