from storefront_client.core.application.cache.query_cache import CacheEvent, QueryCache
from storefront_client.core.application.cache.query_key import QueryKey, product_key

__all__ = ["CacheEvent", "QueryCache", "QueryKey", "product_key"]
