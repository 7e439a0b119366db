"""Flache Antwortstrukturen fuer die HTTP-Schnittstelle.

Die Modelle enthalten keine Logik; `project_article` und `project_products`
bilden (Produkt, Artikel)-Paare auf einen flachen Datensatz ab. Auf dem Draht
werden die Felder in camelCase ausgegeben."""

from __future__ import annotations

from decimal import Decimal
from typing import Annotated, Iterable, List, Optional

from pydantic import BaseModel, ConfigDict, Field, PlainSerializer
from pydantic.alias_generators import to_camel

from models.catalog import Article, Product

# JSON-Ausgabe als Zahl statt als String.
WirePrice = Annotated[Decimal, PlainSerializer(float, return_type=float, when_used="json")]


class _WireModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)


class ArticleProductView(_WireModel):
    """Artikel zusammen mit den Angaben des zugehoerigen Produkts."""

    product_id: int
    article_id: int
    product_brand_name: Optional[str] = None
    product_name: Optional[str] = None
    product_description: Optional[str] = None
    article_short_description: str
    price: WirePrice
    unit: str
    price_per_unit_text: str
    image: Optional[str] = None


class MinMaxPricePerLitreView(_WireModel):
    """Artikel mit dem niedrigsten bzw. hoechsten Literpreis."""

    min_price: List[ArticleProductView] = Field(default_factory=list)
    max_price: List[ArticleProductView] = Field(default_factory=list)


class ArticleSummaryView(_WireModel):
    """Gebuendelte Ergebnisse aller drei Auswertungen."""

    min_and_max_prices_per_litre: MinMaxPricePerLitreView
    by_price: List[ArticleProductView] = Field(default_factory=list)
    most_bottles: List[ArticleProductView] = Field(default_factory=list)


def project_article(product: Product, article: Article) -> ArticleProductView:
    """Bildet ein (Produkt, Artikel)-Paar auf einen flachen Datensatz ab."""

    return ArticleProductView(
        product_id=product.id,
        article_id=article.id,
        product_brand_name=product.brand_name,
        product_name=product.name,
        product_description=product.description_text,
        article_short_description=article.short_description,
        price=article.price,
        unit=article.unit,
        price_per_unit_text=article.price_per_unit_text,
        image=article.image,
    )


def project_products(products: Iterable[Product]) -> List[ArticleProductView]:
    """Flacht eine Produktliste in Reihenfolge auf Artikel-Datensaetze ab."""

    return [
        project_article(product, article)
        for product in products
        for article in product.articles
    ]


__all__ = [
    "ArticleProductView",
    "ArticleSummaryView",
    "MinMaxPricePerLitreView",
    "project_article",
    "project_products",
]
