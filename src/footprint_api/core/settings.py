"""Application settings and configuration.

This module defines all configuration options for the Footprint API.
Settings are loaded from environment variables with sensible defaults.
"""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings loaded from environment variables.

    Settings can be overridden via environment variables or .env files.
    """

    # Application metadata
    app_name: str = Field(default="Footprint API", alias="APP_NAME")
    app_version: str = Field(default="0.1.0", alias="APP_VERSION")
    debug: bool = Field(default=False, alias="DEBUG")
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")

    # Verification of upstream session tokens
    secret_key: str = Field(default="dev-secret-change-me-32-chars-min", alias="SECRET_KEY")
    jwt_algorithm: str = Field(default="HS256", alias="JWT_ALGORITHM")
    access_token_expire_minutes: int = Field(
        default=60 * 24 * 30,
        alias="ACCESS_TOKEN_EXPIRE_MINUTES",
    )

    # Database configuration
    database_url: str = Field(default="sqlite:///./footprint.db", alias="DATABASE_URL")
    test_database_url: str | None = Field(default=None, alias="TEST_DATABASE_URL")
    use_testing_database: bool = Field(default=False, alias="USE_TEST_DATABASE")
    sql_debug: bool = Field(default=False, alias="SQL_DEBUG")
    sqlite_busy_timeout: float = Field(default=30.0, ge=0, alias="SQLITE_BUSY_TIMEOUT")

    # Serial allocation and default page
    first_serial: int = Field(default=1002, alias="FIRST_SERIAL")
    slug_prefix: str = Field(default="fp", alias="SLUG_PREFIX")
    slug_suffix_length: int = Field(default=4, ge=1, alias="SLUG_SUFFIX_LENGTH")
    extra_page_suffix_length: int = Field(default=6, ge=1, alias="EXTRA_PAGE_SUFFIX_LENGTH")
    slug_max_attempts: int = Field(default=5, ge=1, alias="SLUG_MAX_ATTEMPTS")
    default_page_name: str = Field(default="Everything", alias="DEFAULT_PAGE_NAME")
    default_page_icon: str = Field(default="◈", alias="DEFAULT_PAGE_ICON")
    default_theme: str = Field(default="midnight", alias="DEFAULT_THEME")

    # Rooms
    default_room_names: list[str] = Field(
        default=["void", "world", "fits", "sound", "archive"],
        alias="DEFAULT_ROOM_NAMES",
    )

    # When enabled, slug-scoped tile mutations also require the verified
    # caller to own the slug.
    require_verified_tile_owner: bool = Field(
        default=False,
        alias="REQUIRE_VERIFIED_TILE_OWNER",
    )

    # Client-side draft storage
    draft_dir: str = Field(default=".drafts", alias="DRAFT_DIR")

    # CORS configuration for web frontend access
    cors_origins: list[str] = Field(default=["*"], alias="CORS_ORIGINS")
    cors_allow_credentials: bool = Field(default=True, alias="CORS_ALLOW_CREDENTIALS")
    cors_allow_methods: list[str] = Field(
        default=["GET", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"],
        alias="CORS_ALLOW_METHODS",
    )
    cors_allow_headers: list[str] = Field(default=["*"], alias="CORS_ALLOW_HEADERS")

    model_config = SettingsConfigDict(
        env_file=".env",
        validate_assignment=True,
        extra="ignore",
        populate_by_name=True,
    )

    @property
    def database_url_sync(self) -> str:
        """Return a sync-compatible database URL for tooling.

        Converts asyncpg URLs to psycopg for synchronous database operations
        like Alembic migrations.
        """
        url = self.effective_database_url
        if url.startswith("postgresql+asyncpg"):
            return url.replace("postgresql+asyncpg", "postgresql+psycopg", 1)
        return url

    @property
    def effective_database_url(self) -> str:
        """Return the database URL respecting testing overrides."""
        if self.use_testing_database and self.test_database_url:
            return self.test_database_url
        return self.database_url


settings = Settings()
