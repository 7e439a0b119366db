"""Tests fuer die Formatpruefung der Katalogtexte."""

from __future__ import annotations

from guards.catalog_guard import audit_catalog


def test_audit_accepts_conforming_catalog(make_product, make_article) -> None:
    catalog = [
        make_product(1, "A", make_article(11), make_article(12, short_description="6 x 1,0L (PET)")),
        make_product(2, "B", make_article(21, short_description="24 x 0,33L (Glas)")),
    ]

    result = audit_catalog(catalog)

    assert result.valid
    assert result.product_count == 2
    assert result.article_count == 3
    assert result.all_prices_in_euro_per_litre


def test_audit_flags_foreign_currency(make_product, make_article) -> None:
    catalog = [make_product(556, "Krombacher", make_article(1, price_per_unit_text="(1,00 $/Liter)"))]

    result = audit_catalog(catalog)

    assert not result.all_prices_in_euro_per_litre
    assert not result.valid
    assert result.issues[0].field == "pricePerUnitText"
    assert result.issues[0].product_id == 556


def test_audit_lists_every_deviation(make_product, make_article) -> None:
    catalog = [
        make_product(
            1,
            "A",
            make_article(11, price_per_unit_text="(1,5 €/Liter)", short_description="Kasten"),
            make_article(12, short_description="20x0,5L (Glas)"),
        )
    ]

    result = audit_catalog(catalog)

    assert [(issue.article_id, issue.field) for issue in result.issues] == [
        (11, "pricePerUnitText"),
        (11, "shortDescription"),
        (12, "shortDescription"),
    ]
    assert result.all_prices_in_euro_per_litre


def test_audit_serializes_validity(make_product, make_article) -> None:
    result = audit_catalog([make_product(1, "A", make_article(11))])

    assert result.model_dump()["valid"] is True


def test_audit_serializes_camel_case_keys(make_product, make_article) -> None:
    result = audit_catalog([make_product(7, "A", make_article(71, short_description="Kasten"))])

    dumped = result.model_dump(by_alias=True)

    assert set(dumped) == {"productCount", "articleCount", "allPricesInEuroPerLitre", "issues", "valid"}
    assert dumped["issues"][0] == {
        "productId": 7,
        "articleId": 71,
        "field": "shortDescription",
        "value": "Kasten",
    }
