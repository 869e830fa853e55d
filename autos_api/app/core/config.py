"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables so that no extra settings library is needed.
Defaults are provided for all fields and are suitable for local
development.
"""

import os
from dataclasses import dataclass
from typing import Optional


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "Autos API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    # Routers are mounted under this prefix, e.g. ``/api/autos``.
    api_prefix: str = os.getenv("API_PREFIX", "/api")
    debug: bool = os.getenv("DEBUG", "false").lower() in {"1", "true", "yes"}
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    log_file: Optional[str] = os.getenv("LOG_FILE") or None

    # Path or connection string for the SQLite database.  A relative
    # path is resolved against the working directory by the ``db`` module.
    database_url: str = os.getenv("DATABASE_URL", "autos.db")

    host: str = os.getenv("HOST", "127.0.0.1")
    port: int = int(os.getenv("PORT", "8000"))


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Environment variables
# should therefore be set before importing this module.
settings = Settings()
