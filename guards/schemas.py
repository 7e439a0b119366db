"""Pydantic-Schemas fuer Guard-Routinen."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, computed_field
from pydantic.alias_generators import to_camel


class _AuditModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class CatalogIssue(_AuditModel):
    """Ein Artikel, dessen Freitextfeld nicht der Konvention entspricht."""

    product_id: int
    article_id: int
    field: str
    value: str


class CatalogAuditResult(_AuditModel):
    """Resultat der Formatpruefung eines Katalogs."""

    product_count: int = 0
    article_count: int = 0
    all_prices_in_euro_per_litre: bool = True
    issues: list[CatalogIssue] = Field(default_factory=list)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def valid(self) -> bool:
        return not self.issues
