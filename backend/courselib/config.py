"""Application configuration using pydantic-settings."""

from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict

# Find .env file: check backend dir first, then project root
_BACKEND_DIR = Path(__file__).parent.parent
_PROJECT_ROOT = _BACKEND_DIR.parent
_ENV_FILE = _BACKEND_DIR / ".env" if (_BACKEND_DIR / ".env").exists() else _PROJECT_ROOT / ".env"


class Settings(BaseSettings):
    """Application settings loaded from environment variables.

    The defaults describe a local SQLite database next to the working
    directory, so the API runs without any configuration at all.
    """

    model_config = SettingsConfigDict(
        env_file=str(_ENV_FILE),
        env_file_encoding="utf-8",
        extra="ignore",
    )

    # Database
    database_url: str = "sqlite+aiosqlite:///./library.db"

    # Paging
    default_page_size: int = 10
    max_page_size: int = 20

    # Vendor tree for application/vnd.<vendor>.* media types
    media_type_vendor: str = "example"

    # CORS (comma-separated origins)
    cors_origins: str = "http://localhost:3000"

    # Application
    debug: bool = False


settings = Settings()
