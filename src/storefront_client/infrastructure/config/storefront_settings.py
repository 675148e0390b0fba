from pydantic import Field, SecretStr, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class StorefrontSettings(BaseSettings):
    """Settings for the storefront backend connection and client behaviour."""

    app_name: str = "storefront-client"
    log_level: str = "INFO"

    # ── Backend ──
    base_url: str = "http://localhost:8000"
    api_token: SecretStr | None = None
    request_timeout_seconds: float = Field(default=10.0, gt=0)
    read_max_attempts: int = Field(default=3, ge=1)

    # ── Presentation ──
    currency_prefix: str = "$"
    notification_limit: int = Field(default=20, ge=1)

    model_config = SettingsConfigDict(env_prefix="STOREFRONT_", env_file=".env", extra="ignore")

    @field_validator("base_url")
    @classmethod
    def strip_trailing_slash(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("base_url must not be empty")
        return value.strip().rstrip("/")
