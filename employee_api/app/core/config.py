"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for all fields so the
service starts with an in‑memory store and no extra setup.  In a
production deployment you should override these via environment
variables.
"""

import os
from dataclasses import dataclass


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "Employee API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    debug: bool = os.getenv("DEBUG", "false").lower() in {"1", "true", "yes"}
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    log_file: str = os.getenv("LOG_FILE", "")

    # Prefix under which the employee routes are mounted.  Empty by
    # default so paths such as ``/employees`` are served literally.
    api_prefix: str = os.getenv("API_PREFIX", "")

    # Which ``EmployeeStore`` implementation to build: ``memory`` or
    # ``sqlite``.
    store_backend: str = os.getenv("STORE_BACKEND", "memory")

    # Path to the SQLite database file, used only by the ``sqlite``
    # backend.  Relative paths are resolved against the project root by
    # the ``db`` module.
    database_url: str = os.getenv("DATABASE_URL", "employees.db")

    host: str = os.getenv("HOST", "0.0.0.0")
    port: int = int(os.getenv("PORT", "8000"))


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Environment variables
# should be set before importing this module.
settings = Settings()
