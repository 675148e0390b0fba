from storefront_client.core.application.session.operation_result import OperationResult
from storefront_client.core.application.session.storefront_session import StorefrontSession

__all__ = ["OperationResult", "StorefrontSession"]
