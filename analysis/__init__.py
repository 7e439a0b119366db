"""Auswertungen ueber Produktkataloge."""

from .aggregator import (
    ArticleSummary,
    PriceExtremes,
    articles_by_price,
    articles_with_most_bottles,
    min_and_max_price_per_litre,
    summary,
)
from .errors import (
    EmptyCatalog,
    MalformedDescriptionText,
    MalformedPriceText,
    MalformedTextField,
    ProductDataError,
    RetrievalFailure,
)
from .extremum import ExtremumCollector, ExtremumMode, collect_extremes

__all__ = [
    "ArticleSummary",
    "PriceExtremes",
    "articles_by_price",
    "articles_with_most_bottles",
    "min_and_max_price_per_litre",
    "summary",
    "EmptyCatalog",
    "MalformedDescriptionText",
    "MalformedPriceText",
    "MalformedTextField",
    "ProductDataError",
    "RetrievalFailure",
    "ExtremumCollector",
    "ExtremumMode",
    "collect_extremes",
]
