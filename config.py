"""
Service configuration.

Settings are read from environment variables once, when this module is
imported, so set them before starting either service.  Relative SQLite
files live next to the code, like the default ``customer.db`` and
``product.db``.
"""

import os
from dataclasses import dataclass
from pathlib import Path

BASE_DIR = Path(__file__).resolve().parent


def _flag(name: str, default: str = "false") -> bool:
    return os.getenv(name, default).lower() in {"1", "true", "yes"}


@dataclass
class Settings:
    """Settings shared by the customer and product services."""

    customer_database_url: str = os.getenv(
        "CUSTOMER_DATABASE_URL", f"sqlite:///{BASE_DIR / 'customer.db'}"
    )
    product_database_url: str = os.getenv(
        "PRODUCT_DATABASE_URL", f"sqlite:///{BASE_DIR / 'product.db'}"
    )
    sql_echo: bool = _flag("SQL_ECHO")

    log_level: str = os.getenv("LOG_LEVEL", "INFO")
    # Optional path for a log file in addition to the console.
    log_file: str = os.getenv("LOG_FILE", "")

    host: str = os.getenv("HOST", "0.0.0.0")
    customer_service_port: int = int(os.getenv("CUSTOMER_SERVICE_PORT", "8090"))
    product_service_port: int = int(os.getenv("PRODUCT_SERVICE_PORT", "8050"))

    # Insert a few demo products on startup when the product table is empty.
    seed_demo_products: bool = _flag("SEED_DEMO_PRODUCTS")


settings = Settings()
