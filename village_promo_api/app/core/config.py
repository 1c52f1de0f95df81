"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for all fields so the
API starts with an in‑memory store and sample data when nothing is
configured.  In a deployment you should override these via
environment variables.
"""

import os
from dataclasses import dataclass


def _env_flag(name: str, default: str) -> bool:
    return os.getenv(name, default).lower() in {"1", "true", "yes"}


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "Village Promotion API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    debug: bool = _env_flag("DEBUG", "false")
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    # Optional path of a log file.  Empty means console only.
    log_file: str = os.getenv("LOG_FILE", "")

    # Which storage backend serves the API: ``memory`` keeps everything
    # in process (lost on restart), ``sqlite`` persists to ``database_url``.
    storage_backend: str = os.getenv("STORAGE_BACKEND", "memory")

    # Path to the SQLite database file.  A relative path is resolved
    # relative to the project root by the ``db`` module.
    database_url: str = os.getenv("DATABASE_URL", "village_promo.db")

    # Load the sample village (categories, businesses, profile) into an
    # empty store on startup.
    seed_sample_data: bool = _env_flag("SEED_SAMPLE_DATA", "true")

    # Comma‑separated list of allowed CORS origins.  ``*`` allows any.
    cors_origins: str = os.getenv("CORS_ORIGINS", "*")

    api_prefix: str = os.getenv("API_PREFIX", "/api")
    host: str = os.getenv("HOST", "0.0.0.0")
    port: int = int(os.getenv("PORT", "5000"))

    @property
    def cors_origin_list(self) -> list[str]:
        return [origin.strip() for origin in self.cors_origins.split(",") if origin.strip()]


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Environment variables
# should be set before importing this module.
settings = Settings()
