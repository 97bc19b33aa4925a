from __future__ import annotations

from functools import lru_cache
from urllib.parse import quote_plus

from pydantic import AliasChoices, Field, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict


# Sections are settings classes of their own so the flat variable names
# (DATABASE_URL, OPENAI_API_KEY, ...) resolve even when AppSettings only
# builds them through default_factory.
_SECTION_CONFIG = SettingsConfigDict(
    env_file=".env",
    case_sensitive=False,
    extra="ignore",
    populate_by_name=True,
)


class DatabaseSettings(BaseSettings):
    url: str | None = Field(
        default=None,
        validation_alias=AliasChoices("DATABASE_URL", "DATABASE__URL"),
    )
    host: str = Field(
        default="localhost",
        validation_alias=AliasChoices("DB_HOST", "DATABASE__HOST"),
    )
    port: int = Field(
        default=5432,
        validation_alias=AliasChoices("DB_PORT", "DATABASE__PORT"),
    )
    name: str = Field(
        default="summarizer",
        validation_alias=AliasChoices("DB_NAME", "DATABASE__NAME"),
    )
    user: str = Field(
        default="postgres",
        validation_alias=AliasChoices("DB_USER", "DATABASE__USER"),
    )
    password: SecretStr = Field(
        default=SecretStr(""),
        validation_alias=AliasChoices("DB_PASSWORD", "DATABASE__PASSWORD"),
    )
    echo: bool = Field(
        default=False,
        validation_alias=AliasChoices("DB_ECHO", "DATABASE__ECHO"),
    )

    model_config = _SECTION_CONFIG

    def sqlalchemy_url(self) -> str:
        """Explicit DATABASE_URL wins; otherwise build a psycopg Postgres URL."""
        if self.url:
            return self.url
        user = quote_plus(self.user)
        pwd = quote_plus(self.password.get_secret_value())
        return f"postgresql+psycopg://{user}:{pwd}@{self.host}:{self.port}/{self.name}"


class OpenAISettings(BaseSettings):
    """Chat completion provider configuration (any OpenAI-compatible API)."""

    api_key: str | None = Field(
        default=None,
        validation_alias=AliasChoices("OPENAI_API_KEY", "OPENAI__API_KEY"),
    )
    base_url: str | None = Field(
        default=None,
        validation_alias=AliasChoices("OPENAI_BASE_URL", "OPENAI__BASE_URL"),
    )
    model: str = Field(
        default="gpt-4o-mini",
        validation_alias=AliasChoices("OPENAI_MODEL", "OPENAI__MODEL"),
    )
    temperature: float = Field(
        default=0.3,
        validation_alias=AliasChoices("OPENAI_TEMPERATURE", "OPENAI__TEMPERATURE"),
    )
    max_tokens: int = Field(
        default=1000,
        validation_alias=AliasChoices("OPENAI_MAX_TOKENS", "OPENAI__MAX_TOKENS"),
    )
    timeout: float = Field(
        default=60.0,
        validation_alias=AliasChoices("OPENAI_TIMEOUT", "OPENAI__TIMEOUT"),
    )

    model_config = _SECTION_CONFIG


class ScraperSettings(BaseSettings):
    user_agent: str = Field(
        default=(
            "Mozilla/5.0 (Windows NT 10.0; Win64; x64) "
            "AppleWebKit/537.36 (KHTML, like Gecko) "
            "Chrome/124.0.0.0 Safari/537.36"
        ),
        validation_alias=AliasChoices("SCRAPER_USER_AGENT", "SCRAPER__USER_AGENT"),
    )
    timeout: float = Field(
        default=30.0,
        validation_alias=AliasChoices("SCRAPER_TIMEOUT", "SCRAPER__TIMEOUT"),
    )
    min_content_length: int = Field(
        default=500,
        validation_alias=AliasChoices(
            "SCRAPER_MIN_CONTENT_LENGTH",
            "SCRAPER__MIN_CONTENT_LENGTH",
        ),
    )
    min_fallback_content_length: int = Field(
        default=100,
        validation_alias=AliasChoices(
            "SCRAPER_MIN_FALLBACK_CONTENT_LENGTH",
            "SCRAPER__MIN_FALLBACK_CONTENT_LENGTH",
        ),
    )

    model_config = _SECTION_CONFIG


class AuthSettings(BaseSettings):
    secret_key: SecretStr = Field(
        default=SecretStr("change-me-in-production"),
        validation_alias=AliasChoices("JWT_SECRET", "AUTH__SECRET_KEY"),
    )
    algorithm: str = Field(
        default="HS256",
        validation_alias=AliasChoices("JWT_ALGORITHM", "AUTH__ALGORITHM"),
    )
    token_expire_minutes: int = Field(
        default=60 * 24,
        validation_alias=AliasChoices(
            "JWT_EXPIRE_MINUTES",
            "AUTH__TOKEN_EXPIRE_MINUTES",
        ),
    )

    model_config = _SECTION_CONFIG


class AppSettings(BaseSettings):
    """Application configuration loaded from environment variables.

    Uses pydantic-settings to support .env and environment overrides.
    """

    log_level: str = Field(default="INFO", validation_alias=AliasChoices("LOG_LEVEL"))
    create_tables: bool = Field(
        default=True,
        validation_alias=AliasChoices("CREATE_TABLES"),
    )
    # Comma-separated; kept as a plain string so env values need no JSON.
    cors_origins: str = Field(default="*", validation_alias=AliasChoices("CORS_ORIGINS"))
    database: DatabaseSettings = Field(default_factory=DatabaseSettings)
    openai: OpenAISettings = Field(default_factory=OpenAISettings)
    scraper: ScraperSettings = Field(default_factory=ScraperSettings)
    auth: AuthSettings = Field(default_factory=AuthSettings)

    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="",
        case_sensitive=False,
        extra="ignore",
    )

    def cors_origin_list(self) -> list[str]:
        items = [item.strip() for item in self.cors_origins.split(",") if item.strip()]
        return items or ["*"]


@lru_cache
def get_settings() -> AppSettings:
    return AppSettings()
