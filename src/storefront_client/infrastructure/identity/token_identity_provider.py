from pydantic import SecretStr

from storefront_client.core.application.ports import IdentityPort
from storefront_client.core.exceptions import ValidationFailedError


class TokenIdentityProvider(IdentityPort):
    """Bearer-token identity. Signed in exactly when a token is held."""

    def __init__(self, token: SecretStr | None = None) -> None:
        self._token = token if token is not None and token.get_secret_value() else None

    def is_authenticated(self) -> bool:
        return self._token is not None

    def sign_in(self, credential: str) -> None:
        if not credential.strip():
            raise ValidationFailedError("A non-empty token is required to sign in.")
        self._token = SecretStr(credential.strip())

    def sign_out(self) -> None:
        self._token = None

    def authorization_header(self) -> dict[str, str]:
        if self._token is None:
            return {}
        return {"Authorization": f"Bearer {self._token.get_secret_value()}"}
