from functools import lru_cache

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # App
    app_name: str = "Lab Notebook"
    app_env: str = "development"  # development, testing, production
    debug: bool = False
    enable_openapi: bool = True

    # Security
    log_user_emails: bool = False  # Keep False in production for GDPR compliance

    # Database
    database_url: str
    database_pool_size: int = 5
    database_max_overflow: int = 10

    # Auth (tokens are issued by the identity service; we only verify them)
    jwt_secret_key: str
    jwt_algorithm: str = "HS256"
    access_token_expire_minutes: int = 30

    # CORS
    cors_origins: list[str] = ["http://localhost:3000"]

    # Metrics
    metrics_api_key: str | None = None  # If set, /metrics requires this key

    # Search
    search_limit: int = 20
    search_no_limit: int = -1
    search_query_max_length: int = 255

    # Names
    name_min_length: int = 2
    name_max_length: int = 255

    # Inventories (0 = unlimited)
    global_repositories_limit: int = 0
    team_repositories_limit: int = 0

    @field_validator("jwt_secret_key")
    @classmethod
    def validate_jwt_secret(cls, v: str) -> str:
        if v == "change-this-to-a-secure-random-string":
            raise ValueError(
                "JWT_SECRET_KEY must be changed from default value. "
                "Generate a secure secret with: openssl rand -hex 32"
            )
        if len(v) < 32:
            raise ValueError("JWT_SECRET_KEY must be at least 32 characters")
        return v

    @field_validator("cors_origins")
    @classmethod
    def validate_cors_origins(cls, v: list[str]) -> list[str]:
        """Validate CORS origins - reject wildcards when credentials are used."""
        for origin in v:
            if origin == "*":
                raise ValueError(
                    "CORS wildcard '*' is not allowed when allow_credentials=True. "
                    "Specify explicit origins instead."
                )
        return v

    @field_validator("search_limit")
    @classmethod
    def validate_search_limit(cls, v: int) -> int:
        if v < 1:
            raise ValueError("SEARCH_LIMIT must be a positive page size")
        return v

    @field_validator("search_no_limit")
    @classmethod
    def validate_search_no_limit(cls, v: int) -> int:
        # The sentinel must never collide with a real page number
        if v >= 1:
            raise ValueError("SEARCH_NO_LIMIT must be zero or negative")
        return v


@lru_cache
def get_settings() -> Settings:
    return Settings()
