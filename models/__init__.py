"""Modelldatentypen fuer Katalog und Antwortstrukturen."""

from .catalog import Article, Product
from .views import (
    ArticleProductView,
    ArticleSummaryView,
    MinMaxPricePerLitreView,
    project_article,
    project_products,
)

__all__ = [
    "Article",
    "Product",
    "ArticleProductView",
    "ArticleSummaryView",
    "MinMaxPricePerLitreView",
    "project_article",
    "project_products",
]
