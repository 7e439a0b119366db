"""HTTP-Einstiegspunkt fuer die Produktdaten-Auswertungen."""

from __future__ import annotations

from decimal import Decimal
import logging
from typing import Annotated, List

from fastapi import FastAPI, HTTPException, Query, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette import status

import config
from analysis.errors import EmptyCatalog, MalformedTextField, RetrievalFailure
from guards.catalog_guard import audit_catalog
from guards.schemas import CatalogAuditResult
from models.catalog import Product
from models.views import ArticleProductView, ArticleSummaryView, MinMaxPricePerLitreView
from orchestrator.pipeline import (
    articles_by_price_view,
    articles_with_most_bottles_view,
    min_and_max_price_per_litre_view,
    run_summary,
)
from sources.catalog_client import fetch_catalog
from util.url_sanitizer import clean_catalog_url

logging.basicConfig(level=config.LOG_LEVEL)
_LOGGER = logging.getLogger(__name__)

app = FastAPI(title="Product Data API")

app.add_middleware(
    CORSMiddleware,
    allow_origins=config.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["GET"],
    allow_headers=["*"],
)

UrlParam = Annotated[str, Query(description="URL der JSON-Produktdaten")]
PriceParam = Annotated[Decimal, Query(description="Gesuchter Artikelpreis")]


@app.exception_handler(RetrievalFailure)
async def _handle_retrieval_failure(request: Request, error: RetrievalFailure) -> JSONResponse:
    return JSONResponse(status_code=status.HTTP_502_BAD_GATEWAY, content={"detail": str(error)})


@app.exception_handler(MalformedTextField)
async def _handle_malformed_text(request: Request, error: MalformedTextField) -> JSONResponse:
    _LOGGER.error("Produktdaten nicht auswertbar: %s", error)
    return JSONResponse(status_code=status.HTTP_502_BAD_GATEWAY, content={"detail": str(error)})


@app.exception_handler(EmptyCatalog)
async def _handle_empty_catalog(request: Request, error: EmptyCatalog) -> JSONResponse:
    return JSONResponse(status_code=status.HTTP_404_NOT_FOUND, content={"detail": str(error)})


def _clean_url(url: str) -> str:
    try:
        return clean_catalog_url(url)
    except ValueError as error:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(error)) from error


async def _load_catalog(url: str) -> List[Product]:
    return await fetch_catalog(_clean_url(url))


@app.get("/health")
async def health() -> dict[str, str]:
    """Einfacher Lebenszeichen-Check."""

    return {"status": "ok"}


@app.get(
    "/productdata/article/min-and-max-price-per-litre",
    response_model=MinMaxPricePerLitreView,
)
async def get_min_and_max_price_per_litre(
    url: UrlParam = config.PRODUCT_DATA_URL,
) -> MinMaxPricePerLitreView:
    """Liefert die guenstigsten und teuersten Artikel pro Liter."""

    catalog = await _load_catalog(url)
    return min_and_max_price_per_litre_view(catalog)


@app.get("/productdata/article/price", response_model=List[ArticleProductView])
async def get_articles_by_price(
    url: UrlParam = config.PRODUCT_DATA_URL, price: PriceParam = config.DEFAULT_PRICE
) -> List[ArticleProductView]:
    """Liefert alle Artikel mit exakt diesem Preis, guenstigster Literpreis zuerst."""

    catalog = await _load_catalog(url)
    return articles_by_price_view(catalog, price)


@app.get("/productdata/article/most-bottles", response_model=List[ArticleProductView])
async def get_articles_with_most_bottles(
    url: UrlParam = config.PRODUCT_DATA_URL,
) -> List[ArticleProductView]:
    """Liefert die Artikel mit den meisten Flaschen."""

    catalog = await _load_catalog(url)
    return articles_with_most_bottles_view(catalog)


@app.get("/productdata/article/summary", response_model=ArticleSummaryView)
async def get_summary(
    url: UrlParam = config.PRODUCT_DATA_URL, price: PriceParam = config.DEFAULT_PRICE
) -> ArticleSummaryView:
    """Fuehrt alle drei Auswertungen auf einem einzigen Katalogabruf aus."""

    return await run_summary(_clean_url(url), price)


@app.get("/productdata/catalog/audit", response_model=CatalogAuditResult)
async def get_catalog_audit(
    url: UrlParam = config.PRODUCT_DATA_URL,
) -> CatalogAuditResult:
    """Prueft die Freitextfelder des Katalogs auf die erwarteten Formate."""

    catalog = await _load_catalog(url)
    return audit_catalog(catalog)
