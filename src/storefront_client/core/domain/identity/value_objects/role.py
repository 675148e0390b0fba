from enum import StrEnum


class Role(StrEnum):
    """Caller role as confirmed by the backend."""

    ADMIN = "admin"
    USER = "user"
    GUEST = "guest"

    @property
    def can_manage_catalog(self) -> bool:
        match self:
            case Role.ADMIN:
                return True
            case Role.USER | Role.GUEST:
                return False
