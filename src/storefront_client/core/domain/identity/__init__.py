from storefront_client.core.domain.identity.entities.user_profile import UserProfile
from storefront_client.core.domain.identity.value_objects.role import Role

__all__ = ["Role", "UserProfile"]
