from storefront_client.core.application.ports.backend_port import BackendPort
from storefront_client.core.application.ports.identity_port import IdentityPort

__all__ = ["BackendPort", "IdentityPort"]
