from .storefront_settings import StorefrontSettings

__all__ = ["StorefrontSettings"]
