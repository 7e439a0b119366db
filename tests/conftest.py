"""Gemeinsame Test-Fixtures fuer Katalogdaten."""

from __future__ import annotations

from decimal import Decimal
from typing import Any, Callable

import pytest

from models.catalog import Article, Product


def _article(
    article_id: int,
    *,
    price: str = "17.99",
    price_per_unit_text: str = "(1,80 €/Liter)",
    short_description: str = "20 x 0,5L (Glas)",
) -> Article:
    return Article(
        id=article_id,
        short_description=short_description,
        price=Decimal(price),
        unit="Liter",
        price_per_unit_text=price_per_unit_text,
        image=f"https://images.example.com/{article_id}.png",
    )


def _product(product_id: int, name: str, *articles: Article, brand: str = "Brauerei") -> Product:
    return Product(
        id=product_id,
        brand_name=brand,
        name=name,
        description_text=f"Beschreibung {name}",
        articles=articles,
    )


@pytest.fixture
def make_article() -> Callable[..., Article]:
    return _article


@pytest.fixture
def make_product() -> Callable[..., Product]:
    return _product


@pytest.fixture
def raw_catalog() -> list[dict[str, Any]]:
    """Katalog im Format der Remote-Quelle (camelCase-Schluessel)."""

    return [
        {
            "id": 556,
            "brandName": "Krombacher",
            "name": "Krombacher Pils",
            "descriptionText": "Ein Klassiker",
            "articles": [
                {
                    "id": 1001,
                    "shortDescription": "20 x 0,5L (Glas)",
                    "price": 17.99,
                    "unit": "Liter",
                    "pricePerUnitText": "(1,80 €/Liter)",
                    "image": "https://images.example.com/1001.png",
                },
                {
                    "id": 1002,
                    "shortDescription": "24 x 0,33L (Glas)",
                    "price": 19.99,
                    "unit": "Liter",
                    "pricePerUnitText": "(2,52 €/Liter)",
                    "image": "https://images.example.com/1002.png",
                },
            ],
        },
        {
            "id": 42,
            "brandName": "Adelholzener",
            "name": "Adelholzener Classic",
            "articles": [
                {
                    "id": 2001,
                    "shortDescription": "12 x 1,0L (PET)",
                    "price": 6.49,
                    "unit": "Liter",
                    "pricePerUnitText": "(0,54 €/Liter)",
                    "image": "https://images.example.com/2001.png",
                }
            ],
        },
    ]
