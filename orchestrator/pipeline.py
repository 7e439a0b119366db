"""Verknuepfung von Katalogabruf, Auswertung und Antwortaufbereitung."""

from __future__ import annotations

from decimal import Decimal
import logging
from typing import List, Sequence

from analysis import aggregator
from models.catalog import Product
from models.views import (
    ArticleProductView,
    ArticleSummaryView,
    MinMaxPricePerLitreView,
    project_products,
)
from sources.catalog_client import fetch_catalog

_LOGGER = logging.getLogger(__name__)


def _price_extremes_view(extremes: aggregator.PriceExtremes) -> MinMaxPricePerLitreView:
    return MinMaxPricePerLitreView(
        min_price=project_products(extremes.minimum),
        max_price=project_products(extremes.maximum),
    )


def min_and_max_price_per_litre_view(catalog: Sequence[Product]) -> MinMaxPricePerLitreView:
    """Guenstigste und teuerste Artikel pro Liter als Antwortstruktur."""

    return _price_extremes_view(aggregator.min_and_max_price_per_litre(catalog))


def articles_by_price_view(catalog: Sequence[Product], price: Decimal) -> List[ArticleProductView]:
    """Artikel mit exakt `price`, guenstigster Literpreis zuerst."""

    return project_products(aggregator.articles_by_price(catalog, price))


def articles_with_most_bottles_view(catalog: Sequence[Product]) -> List[ArticleProductView]:
    """Artikel mit der groessten Flaschenanzahl."""

    return project_products(aggregator.articles_with_most_bottles(catalog))


def summary_view(catalog: Sequence[Product], price: Decimal) -> ArticleSummaryView:
    """Buendelt alle drei Auswertungen ueber denselben Katalogstand."""

    result = aggregator.summary(catalog, price)
    return ArticleSummaryView(
        min_and_max_prices_per_litre=_price_extremes_view(result.price_extremes),
        by_price=project_products(result.by_price),
        most_bottles=project_products(result.most_bottles),
    )


async def run_summary(url: str, price: Decimal) -> ArticleSummaryView:
    """Laedt den Katalog genau einmal und erstellt daraus die Zusammenfassung.

    Args:
        url: Adresse der JSON-Quelle.
        price: Gesuchter Artikelpreis.

    Raises:
        RetrievalFailure: Wenn der Katalog nicht geladen werden kann.
        EmptyCatalog: Wenn der Katalog keine Artikel enthaelt.
        MalformedTextField: Wenn ein Freitextfeld nicht lesbar ist.
    """

    catalog = await fetch_catalog(url)
    _LOGGER.info("Zusammenfassung fuer %d Produkte (Preis %s)", len(catalog), price)
    return summary_view(catalog, price)


__all__ = [
    "articles_by_price_view",
    "articles_with_most_bottles_view",
    "min_and_max_price_per_litre_view",
    "run_summary",
    "summary_view",
]
