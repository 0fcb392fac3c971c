"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for all fields so the
service runs out of the box with the packaged seed dataset.
"""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

# Seed dataset bundled with the package.
DEFAULT_SEED_PATH = Path(__file__).resolve().parents[2] / "data" / "airports.json"


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "Airport Directory API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    debug: bool = os.getenv("DEBUG", "false").lower() in {"1", "true", "yes"}
    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    log_file: Optional[str] = os.getenv("LOG_FILE") or None

    # Prefix under which the airport routes are mounted.  Empty means the
    # routes are served from the root, e.g. ``/airports``.
    api_prefix: str = os.getenv("API_PREFIX", "")

    # JSON file holding the records loaded into the directory when the
    # application is built.
    seed_path: str = os.getenv("AIRPORTS_SEED_PATH", str(DEFAULT_SEED_PATH))

    # Page size used by ``GET /airports`` when ``pageSize`` is absent.
    default_page_size: int = int(os.getenv("DEFAULT_PAGE_SIZE", "10"))

    host: str = os.getenv("HOST", "0.0.0.0")
    port: int = int(os.getenv("PORT", "8000"))


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Environment variables
# should be set before importing this module.
settings = Settings()
