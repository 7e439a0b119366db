"""Pydantic-Modelle fuer den Produktkatalog der Remote-Quelle.

Die Quelle liefert camelCase-Schluessel (`brandName`, `pricePerUnitText`),
deren Schreibweise aber nicht garantiert ist. Schluessel werden deshalb ohne
Beachtung von Gross-/Kleinschreibung und Unterstrichen auf die Felder
abgebildet. Preise werden als `Decimal` gefuehrt, damit Vergleiche exakt
bleiben. Literpreis und Flaschenanzahl werden erst bei der Auswertung aus den
Freitextfeldern gelesen (siehe `analysis.text_fields`)."""

from __future__ import annotations

from decimal import Decimal
from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator


def _normalize_key(key: str) -> str:
    return key.replace("_", "").lower()


class _CaseInsensitiveModel(BaseModel):
    model_config = ConfigDict(frozen=True, extra="ignore")

    @model_validator(mode="before")
    @classmethod
    def _match_keys(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return data

        lookup = {_normalize_key(name): name for name in cls.model_fields}
        matched: dict[str, Any] = {}
        for key, value in data.items():
            field_name = lookup.get(_normalize_key(str(key)))
            if field_name is not None and field_name not in matched:
                matched[field_name] = value
        return matched


class Article(_CaseInsensitiveModel):
    """Kaufbare Variante eines Produkts (Gebindegroesse/Behaelter)."""

    id: int
    short_description: str = Field(description="z. B. `20 x 0,5L (Glas)`")
    price: Decimal
    unit: str
    price_per_unit_text: str = Field(description="z. B. `(2,10 €/Liter)`")
    image: Optional[str] = None


class Product(_CaseInsensitiveModel):
    """Produkt mit Marke, Name und den zugehoerigen Artikeln."""

    id: int
    brand_name: str
    name: str
    description_text: Optional[str] = None
    articles: tuple[Article, ...] = ()

    def narrowed_to(self, article: Article) -> "Product":
        """Liefert eine neue Produktinstanz, die nur `article` enthaelt.

        Das Original bleibt unveraendert; Gewinner-Ergebnisse teilen sich
        damit keine Artikelliste mit dem Katalog.
        """

        return self.model_copy(update={"articles": (article,)})


__all__ = ["Article", "Product"]
