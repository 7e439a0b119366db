"""Anbindung der externen Produktdaten-Quelle."""

from .catalog_client import fetch_catalog, parse_catalog

__all__ = ["fetch_catalog", "parse_catalog"]
