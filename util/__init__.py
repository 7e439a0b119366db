"""Hilfsfunktionen fuer Katalogabruf und Tracing."""

from .fetch_tracing import traced_fetch
from .url_sanitizer import clean_catalog_url

__all__ = ["clean_catalog_url", "traced_fetch"]
