"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for all fields so the
service starts without any configuration; in a deployment override
them via environment variables.
"""

import os
from dataclasses import dataclass


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "Player Registry API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    debug: bool = os.getenv("DEBUG", "false").lower() in {"1", "true", "yes"}
    log_level: str = os.getenv("LOG_LEVEL", "INFO")

    # Optional path of a log file.  When empty only the console
    # handler is attached.
    log_file: str = os.getenv("LOG_FILE", "")

    # Path or connection string for the SQLite database.  If a
    # relative path is provided, it will be resolved relative to the
    # project root by the ``db`` module.
    database_url: str = os.getenv("DATABASE_URL", "players.db")

    # Number of players returned per page when ``pageSize`` is omitted.
    default_page_size: int = int(os.getenv("DEFAULT_PAGE_SIZE", "3"))

    # Bind address for ``run.py``.
    api_host: str = os.getenv("API_HOST", "0.0.0.0")
    api_port: int = int(os.getenv("API_PORT", "8000"))


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Environment variables
# must be set before importing this module.
settings = Settings()
