"""Guardrail-Hilfsfunktionen fuer Katalogdaten."""

from .catalog_guard import audit_catalog
from .schemas import CatalogAuditResult, CatalogIssue

__all__ = ["audit_catalog", "CatalogAuditResult", "CatalogIssue"]
