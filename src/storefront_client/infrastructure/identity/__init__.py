from .token_identity_provider import TokenIdentityProvider

__all__ = ["TokenIdentityProvider"]
