"""
Catalog configuration — all environment variables in one place.

Read from environment at import time. Command-line flags override these.
"""

from __future__ import annotations

import os


class Settings:
    """Application settings from environment variables."""

    # Directory holding users.json, categories.json, products.json.
    # Empty means the bundled sample data.
    DATA_DIR: str = os.environ.get("CATALOG_DATA_DIR", "")

    LOG_LEVEL: str = os.environ.get("CATALOG_LOG_LEVEL", "WARNING")

    # "text" or "html"
    CHANNEL: str = os.environ.get("CATALOG_CHANNEL", "text")

    PAGE_TITLE: str = os.environ.get("CATALOG_PAGE_TITLE", "Product Categories")


settings = Settings()
