from dataclasses import dataclass

from storefront_client.core.exceptions import ValidationFailedError


@dataclass(frozen=True)
class UserProfile:
    name: str

    @classmethod
    def from_input(cls, name: str) -> "UserProfile":
        """Profile from the setup form; the name is trimmed and must not be blank."""
        trimmed = name.strip()
        if not trimmed:
            raise ValidationFailedError("Display name is required.", context={"field": "name"})
        return cls(name=trimmed)
