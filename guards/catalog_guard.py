"""Formatpruefung der Freitextfelder eines Katalogs.

Die Auswertungen lesen Literpreis und Flaschenanzahl aus Freitext und setzen
dafuer feste Konventionen voraus. Der Guard prueft diese Konventionen fuer
den gesamten Katalog und meldet alle Abweichungen, ohne etwas zu reparieren."""

from __future__ import annotations

import logging
import re
from typing import Iterable

from guards.schemas import CatalogAuditResult, CatalogIssue
from models.catalog import Product

_LOGGER = logging.getLogger(__name__)

EURO_PER_LITRE = "€/Liter"

# (2,10 €/Liter)
PRICE_PER_UNIT_PATTERN = re.compile(r"^\((\d+),(\d{2}) €/Liter\)$", re.IGNORECASE)
# 20 x 0,5L (Glas)
SHORT_DESCRIPTION_PATTERN = re.compile(
    r"^(\d+) x (\d+)(,\d+)?L \([A-Za-zÄÖÜäöüß]*\)$", re.IGNORECASE
)


def audit_catalog(products: Iterable[Product]) -> CatalogAuditResult:
    """Prueft alle Artikel gegen die erwarteten Textformate."""

    product_count = 0
    article_count = 0
    all_euro = True
    issues: list[CatalogIssue] = []

    for product in products:
        product_count += 1
        for article in product.articles:
            article_count += 1
            if EURO_PER_LITRE not in article.price_per_unit_text:
                all_euro = False
            if not PRICE_PER_UNIT_PATTERN.match(article.price_per_unit_text):
                issues.append(
                    CatalogIssue(
                        product_id=product.id,
                        article_id=article.id,
                        field="pricePerUnitText",
                        value=article.price_per_unit_text,
                    )
                )
            if not SHORT_DESCRIPTION_PATTERN.match(article.short_description):
                issues.append(
                    CatalogIssue(
                        product_id=product.id,
                        article_id=article.id,
                        field="shortDescription",
                        value=article.short_description,
                    )
                )

    if issues:
        _LOGGER.warning("Katalogpruefung: %d Abweichungen in %d Artikeln", len(issues), article_count)

    return CatalogAuditResult(
        product_count=product_count,
        article_count=article_count,
        all_prices_in_euro_per_litre=all_euro,
        issues=issues,
    )


__all__ = ["audit_catalog", "PRICE_PER_UNIT_PATTERN", "SHORT_DESCRIPTION_PATTERN"]
