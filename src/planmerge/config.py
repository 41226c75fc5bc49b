"""Configuration management for planmerge."""

import os

from dotenv import load_dotenv
from pydantic import BaseModel

load_dotenv()


def _parse_cors_origins() -> list[str]:
    """Parse CORS origins from environment variable."""
    cors_env = os.getenv("CORS_ALLOW_ORIGINS")
    if cors_env:
        return cors_env.split(",")
    return ["*"]


class Settings(BaseModel):
    """Application settings."""

    # Server settings
    host: str = os.getenv("HOST", "127.0.0.1")
    port: int = int(os.getenv("PORT", "8000"))
    debug: bool = os.getenv("DEBUG", "false").lower() == "true"

    # CORS settings (comma-separated list of allowed origins, or * for all)
    cors_allow_origins: list[str] = _parse_cors_origins()

    # Logging
    log_level: str = os.getenv("LOG_LEVEL", "INFO")

    # Import previews are kept in memory until applied or expired
    preview_ttl_minutes: int = int(os.getenv("PREVIEW_TTL_MINUTES", "30"))

    # Hard caps for pasted tables accepted over the API
    max_import_rows: int = int(os.getenv("MAX_IMPORT_ROWS", "500"))
    max_import_columns: int = int(os.getenv("MAX_IMPORT_COLUMNS", "50"))


settings = Settings()
