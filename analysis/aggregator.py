"""Auswertungen ueber den kompletten Produktkatalog.

Jede Operation ist eine reine Funktion des uebergebenen Katalogs. Ergebnisse
bestehen aus neuen `Product`-Instanzen, die jeweils nur den gefundenen Artikel
enthalten; der Katalog selbst wird nie veraendert. Schlaegt das Auslesen eines
Freitextfelds fehl, bricht die gesamte Operation mit diesem Fehler ab."""

from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal
import logging
from typing import Callable, List, Sequence, Tuple, TypeVar

from analysis.errors import EmptyCatalog
from analysis.extremum import ExtremumMode, collect_extremes
from analysis.text_fields import parse_bottle_count, parse_price_per_unit
from models.catalog import Article, Product

_LOGGER = logging.getLogger(__name__)

K = TypeVar("K")
ArticlePair = Tuple[Product, Article]


@dataclass(frozen=True)
class PriceExtremes:
    """Artikel mit niedrigstem und hoechstem Literpreis."""

    minimum: List[Product] = field(default_factory=list)
    maximum: List[Product] = field(default_factory=list)


@dataclass(frozen=True)
class ArticleSummary:
    """Ergebnisse aller drei Auswertungen ueber denselben Katalogstand."""

    price_extremes: PriceExtremes
    by_price: List[Product] = field(default_factory=list)
    most_bottles: List[Product] = field(default_factory=list)


def _flatten(catalog: Sequence[Product]) -> List[ArticlePair]:
    return [(product, article) for product in catalog for article in product.articles]


def _keyed(
    pairs: Sequence[ArticlePair], derive: Callable[[Article], K]
) -> List[Tuple[ArticlePair, K]]:
    # Schluessel vorab fuer alle Paare bilden, damit ein Parse-Fehler
    # den Aufruf abbricht, bevor ein Teilergebnis entsteht.
    return [(pair, derive(pair[1])) for pair in pairs]


def _price_per_unit(article: Article) -> Decimal:
    return parse_price_per_unit(article.price_per_unit_text)


def _bottle_count(article: Article) -> int:
    return parse_bottle_count(article.short_description)


def _narrow_sorted_by_name(winners: Sequence[ArticlePair]) -> List[Product]:
    narrowed = [product.narrowed_to(article) for product, article in winners]
    return sorted(narrowed, key=lambda product: product.name)


def _require_articles(pairs: Sequence[ArticlePair]) -> None:
    if not pairs:
        raise EmptyCatalog()


def min_and_max_price_per_litre(catalog: Sequence[Product]) -> PriceExtremes:
    """Ermittelt alle Artikel mit minimalem und maximalem Literpreis.

    Args:
        catalog: Vollstaendiger Produktkatalog.

    Raises:
        EmptyCatalog: Wenn der Katalog keinen einzigen Artikel enthaelt.
        MalformedPriceText: Wenn ein Literpreis nicht gelesen werden kann.

    Returns:
        `PriceExtremes` mit je mindestens einem Gewinner, nach Produktname sortiert.
    """

    pairs = _flatten(catalog)
    _require_articles(pairs)

    keyed = _keyed(pairs, _price_per_unit)
    minimum = collect_extremes(keyed, ExtremumMode.MIN)
    maximum = collect_extremes(keyed, ExtremumMode.MAX)

    _LOGGER.debug(
        "Literpreis: %d Artikel, %d guenstigste, %d teuerste",
        len(pairs),
        len(minimum),
        len(maximum),
    )
    return PriceExtremes(
        minimum=_narrow_sorted_by_name(minimum),
        maximum=_narrow_sorted_by_name(maximum),
    )


def articles_by_price(catalog: Sequence[Product], price: Decimal) -> List[Product]:
    """Liefert alle Artikel mit exakt `price`, aufsteigend nach Literpreis.

    Ohne Treffer wird eine leere Liste geliefert.

    Raises:
        MalformedPriceText: Wenn der Literpreis eines Treffers nicht lesbar ist.
    """

    matches = [(product, article) for product, article in _flatten(catalog) if article.price == price]
    keyed = _keyed(matches, _price_per_unit)
    keyed.sort(key=lambda item: item[1])

    _LOGGER.debug("Preis %s: %d Treffer", price, len(keyed))
    return [product.narrowed_to(article) for (product, article), _ in keyed]


def articles_with_most_bottles(catalog: Sequence[Product]) -> List[Product]:
    """Ermittelt alle Artikel mit der groessten Flaschenanzahl.

    Raises:
        EmptyCatalog: Wenn der Katalog keinen einzigen Artikel enthaelt.
        MalformedDescriptionText: Wenn eine Kurzbeschreibung nicht lesbar ist.
    """

    pairs = _flatten(catalog)
    _require_articles(pairs)

    keyed = _keyed(pairs, _bottle_count)
    winners = collect_extremes(keyed, ExtremumMode.MAX)

    _LOGGER.debug("Flaschen: %d Artikel, %d mit Maximum", len(pairs), len(winners))
    return _narrow_sorted_by_name(winners)


def summary(catalog: Sequence[Product], price: Decimal) -> ArticleSummary:
    """Fuehrt alle drei Auswertungen auf demselben Katalogstand aus."""

    return ArticleSummary(
        price_extremes=min_and_max_price_per_litre(catalog),
        by_price=articles_by_price(catalog, price),
        most_bottles=articles_with_most_bottles(catalog),
    )


__all__ = [
    "ArticleSummary",
    "PriceExtremes",
    "articles_by_price",
    "articles_with_most_bottles",
    "min_and_max_price_per_litre",
    "summary",
]
