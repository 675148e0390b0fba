import structlog

from storefront_client.core.application.cache import QueryCache, QueryKey
from storefront_client.core.application.ports import BackendPort, IdentityPort
from storefront_client.core.domain.identity import Role
from storefront_client.core.exceptions import UnauthenticatedError, UnauthorizedError

logger = structlog.get_logger()


class AccessService:
    """Caller role, always as confirmed by the backend."""

    def __init__(self, backend: BackendPort, cache: QueryCache, identity: IdentityPort) -> None:
        self._backend = backend
        self._cache = cache
        self._identity = identity

    async def caller_role(self) -> Role:
        # Anonymous callers have no backend identity to ask about.
        if not self._identity.is_authenticated():
            return Role.GUEST
        return await self._cache.get(QueryKey.ROLE, self._backend.get_caller_user_role)

    async def is_admin(self) -> bool:
        if not self._identity.is_authenticated():
            return False
        return await self._cache.get(QueryKey.IS_ADMIN, self._backend.is_caller_admin)

    async def require_admin(self, operation: str) -> None:
        if not self._identity.is_authenticated():
            raise UnauthenticatedError(
                "Sign in to manage the catalog.", context={"operation": operation}
            )
        role = await self.caller_role()
        match role:
            case Role.ADMIN:
                return
            case Role.USER | Role.GUEST:
                logger.warning("Admin operation denied", operation=operation, role=role.value)
                raise UnauthorizedError(
                    "Only administrators can manage the catalog.",
                    context={"operation": operation, "role": role.value},
                )
