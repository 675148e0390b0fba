import structlog

from storefront_client.core.application.cache import QueryCache, QueryKey
from storefront_client.core.application.common.detached import run_to_completion
from storefront_client.core.application.ports import BackendPort, IdentityPort
from storefront_client.core.domain.identity import UserProfile
from storefront_client.core.exceptions import UnauthenticatedError

logger = structlog.get_logger()


class ProfileService:
    def __init__(self, backend: BackendPort, cache: QueryCache, identity: IdentityPort) -> None:
        self._backend = backend
        self._cache = cache
        self._identity = identity

    async def get_profile(self) -> UserProfile | None:
        if not self._identity.is_authenticated():
            return None
        return await self._cache.get(QueryKey.PROFILE, self._backend.get_caller_user_profile)

    async def needs_profile_setup(self) -> bool:
        """A signed-in identity without a profile must complete setup first."""
        if not self._identity.is_authenticated():
            return False
        return await self.get_profile() is None

    async def save_profile(self, name: str) -> UserProfile:
        profile = UserProfile.from_input(name)
        if not self._identity.is_authenticated():
            raise UnauthenticatedError("Sign in to save your profile.")

        async def _save() -> None:
            await self._backend.save_caller_user_profile(profile)
            await self._cache.invalidate(QueryKey.PROFILE)

        await run_to_completion(_save())
        logger.info("Profile saved")
        return profile
