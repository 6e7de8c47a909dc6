"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for all fields so the
service starts without any configuration; override them via
environment variables in a real deployment.
"""

import os
from dataclasses import dataclass


def _bool(value: str) -> bool:
    return value.strip().lower() in {"1", "true", "yes", "on"}


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "Employee API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    description: str = os.getenv("API_DESCRIPTION", "Employee CRUD API with robust filtering")
    debug: bool = _bool(os.getenv("DEBUG", "false"))
    log_level: str = os.getenv("LOG_LEVEL", "INFO")

    # Optional path of a log file.  When empty, logs only go to the
    # console.
    log_file: str = os.getenv("LOG_FILE", "")

    # Prefix under which the employee routes are mounted.  Empty by
    # default so that the resources live at ``/employees``; set e.g.
    # ``API_PREFIX=/api/v1`` to version them.
    api_prefix: str = os.getenv("API_PREFIX", "").rstrip("/")

    # Swagger UI location.
    docs_url: str = os.getenv("DOCS_URL", "/api-docs")

    # Whether a freshly created store is populated with the three
    # sample employees.
    seed_employees: bool = _bool(os.getenv("SEED_EMPLOYEES", "true"))

    host: str = os.getenv("HOST", "0.0.0.0")
    port: int = int(os.getenv("PORT", "5000"))


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Because the dataclass
# computes values at class definition time, environment variables should
# be set before importing this module.
settings = Settings()
