"""Zentrale Konfiguration der Produktdaten-API."""

from .settings import (
    CATALOG_TRACING_ENABLED,
    CORS_ORIGINS,
    DEFAULT_PRICE,
    FETCH_ATTEMPTS,
    LOG_DIR,
    LOG_LEVEL,
    PRODUCT_DATA_URL,
    REQUEST_TIMEOUT,
)

__all__ = [
    "CATALOG_TRACING_ENABLED",
    "CORS_ORIGINS",
    "DEFAULT_PRICE",
    "FETCH_ATTEMPTS",
    "LOG_DIR",
    "LOG_LEVEL",
    "PRODUCT_DATA_URL",
    "REQUEST_TIMEOUT",
]
