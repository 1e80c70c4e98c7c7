"""Application configuration (settings and environment).

Single source of truth for all configuration. Uses pydantic-settings
with .env support. JWT settings (JWT_KEY, JWT_ISSUER, JWT_AUDIENCE) are
required and validated at load time; get_settings() raises
ConfigurationException so the app refuses to start without them.
"""

from datetime import timedelta
from functools import lru_cache

from pydantic import SecretStr, ValidationError, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from sweem.domain.exceptions import ConfigurationException

MIN_JWT_KEY_LENGTH = 32


class Settings(BaseSettings):
    """Application settings loaded from environment and .env.

    All settings have defaults except the JWT key, issuer and audience,
    which validate_jwt rejects when empty.
    """

    # App
    app_name: str = "sweem"
    app_version: str = "1.0.0"
    debug: bool = False
    # Routes are served at the root by default (/auth/login, /clients, ...).
    api_prefix: str = ""

    # Database
    database_url: str = "sqlite+aiosqlite:///./sweem.db"
    database_echo: bool = False
    # Optional pool overrides for server databases (None = driver defaults)
    db_pool_size: int | None = None
    db_max_overflow: int | None = None
    create_schema_on_startup: bool = True

    # JWT
    jwt_key: SecretStr = SecretStr("")
    jwt_issuer: str = ""
    jwt_audience: str = ""
    access_token_expire_minutes: int = 60

    # Password hashing work factor (bcrypt log2 rounds)
    bcrypt_rounds: int = 12

    # CORS
    allowed_origins: str = "http://localhost:3000,http://localhost:8080"

    # Request / middleware
    request_timeout_seconds: int = 60
    request_id_header: str = "X-Request-ID"

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
    )

    @model_validator(mode="after")
    def validate_jwt(self) -> "Settings":
        """Validate JWT signing settings and hashing work factor.

        - JWT_KEY required, at least 32 characters.
        - JWT_ISSUER and JWT_AUDIENCE required.
        - BCRYPT_ROUNDS within bcrypt's accepted range (4..31).
        """
        key = self.jwt_key.get_secret_value()
        if not key.strip():
            raise ValueError(
                "JWT_KEY is required. Generate with: openssl rand -hex 32."
            )
        if len(key) < MIN_JWT_KEY_LENGTH:
            raise ValueError(
                f"JWT_KEY must be at least {MIN_JWT_KEY_LENGTH} characters long."
            )
        if not self.jwt_issuer.strip():
            raise ValueError("JWT_ISSUER is required.")
        if not self.jwt_audience.strip():
            raise ValueError("JWT_AUDIENCE is required.")
        if self.access_token_expire_minutes <= 0:
            raise ValueError("ACCESS_TOKEN_EXPIRE_MINUTES must be positive.")
        if not 4 <= self.bcrypt_rounds <= 31:
            raise ValueError("BCRYPT_ROUNDS must be between 4 and 31.")
        return self

    @property
    def access_token_lifetime(self) -> timedelta:
        return timedelta(minutes=self.access_token_expire_minutes)


@lru_cache
def get_settings() -> Settings:
    """Return cached application settings (single instance per process).

    Validation runs on first call, not at import time. In tests, call
    get_settings.cache_clear() before overriding env vars so the next
    get_settings() uses the new values.

    Returns:
        Loaded and validated Settings instance.

    Raises:
        ConfigurationException: If required settings are missing or invalid.
    """
    try:
        return Settings()
    except ValidationError as e:
        messages = "; ".join(err["msg"] for err in e.errors())
        raise ConfigurationException(f"Invalid configuration: {messages}") from e
