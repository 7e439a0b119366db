"""Abruf des Produktkatalogs von der Remote-JSON-Quelle.

Jeder Fehler beim Abruf (Netzwerk, HTTP-Status, JSON, Schema) wird auf
`RetrievalFailure` abgebildet, damit Aufrufer nie mit einem halben Katalog
weiterarbeiten. Wiederholversuche sind per `FETCH_ATTEMPTS` konfigurierbar und
standardmaessig deaktiviert."""

from __future__ import annotations

import json
import logging
from decimal import Decimal
from typing import List, Optional

import httpx
from pydantic import TypeAdapter, ValidationError
from tenacity import AsyncRetrying, retry_if_exception_type, stop_after_attempt, wait_exponential_jitter

import config
from analysis.errors import RetrievalFailure
from models.catalog import Product
from util.fetch_tracing import traced_fetch

_LOGGER = logging.getLogger(__name__)
_CATALOG_ADAPTER = TypeAdapter(List[Product])
_RETRIEVAL_ERRORS = (httpx.HTTPError, ValidationError, ValueError)


def parse_catalog(payload: str | bytes) -> List[Product]:
    """Liest einen JSON-Katalog; Gleitkommazahlen werden exakt als `Decimal` gelesen.

    Raises:
        ValueError: Bei ungueltigem JSON.
        ValidationError: Wenn die Struktur nicht dem Katalogschema entspricht.
    """

    data = json.loads(payload, parse_float=Decimal)
    return _CATALOG_ADAPTER.validate_python(data)


async def _download(url: str, client: httpx.AsyncClient) -> List[Product]:
    response = await client.get(url, headers={"Accept": "application/json"})
    response.raise_for_status()
    return parse_catalog(response.content)


async def _download_with_retry(
    url: str, client: httpx.AsyncClient, attempts: int
) -> List[Product]:
    async for attempt in AsyncRetrying(
        stop=stop_after_attempt(max(1, attempts)),
        wait=wait_exponential_jitter(initial=0.5, max=2.0),
        retry=retry_if_exception_type(httpx.TransportError),
        reraise=True,
    ):
        with attempt:
            return await _download(url, client)
    raise RuntimeError("Unreachable: AsyncRetrying sollte entweder zurueckkehren oder werfen.")


async def fetch_catalog(
    url: str,
    *,
    client: Optional[httpx.AsyncClient] = None,
    attempts: Optional[int] = None,
) -> List[Product]:
    """Laedt den Produktkatalog von `url`.

    Args:
        url: Adresse der JSON-Quelle.
        client: Optionaler, bereits konfigurierter HTTP-Client (z. B. fuer Tests).
        attempts: Anzahl der Versuche bei Transportfehlern; Default aus der Konfiguration.

    Raises:
        RetrievalFailure: Bei jedem Netzwerk-, Status-, JSON- oder Schemafehler.

    Returns:
        Liste der validierten Produkte.
    """

    total_attempts = attempts if attempts is not None else config.FETCH_ATTEMPTS

    try:
        if client is not None:
            catalog = await traced_fetch(
                url, lambda: _download_with_retry(url, client, total_attempts)
            )
        else:
            async with httpx.AsyncClient(timeout=config.REQUEST_TIMEOUT) as own_client:
                catalog = await traced_fetch(
                    url, lambda: _download_with_retry(url, own_client, total_attempts)
                )
    except _RETRIEVAL_ERRORS as error:
        _LOGGER.warning("Katalog konnte nicht geladen werden (%s): %s", url, error)
        raise RetrievalFailure() from error

    _LOGGER.info(
        "Katalog geladen: %d Produkte, %d Artikel",
        len(catalog),
        sum(len(product.articles) for product in catalog),
    )
    return catalog


__all__ = ["fetch_catalog", "parse_catalog"]
