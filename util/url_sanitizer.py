"""Hilfsfunktionen zur Pruefung externer Katalog-URLs."""

from __future__ import annotations

from urllib.parse import urlparse, urlunparse

_ALLOWED_SCHEMES = ("http", "https")


def clean_catalog_url(url: str) -> str:
    """Normalisiert eine Katalog-URL und verwirft ungueltige Angaben."""

    if not url or not url.strip():
        raise ValueError("URL darf nicht leer sein")

    candidate = url.strip()
    if "://" not in candidate:
        candidate = "https://" + candidate.lstrip("/")

    parsed = urlparse(candidate)
    if parsed.scheme.lower() not in _ALLOWED_SCHEMES:
        raise ValueError("Nur http- und https-URLs sind erlaubt")
    if not parsed.netloc:
        raise ValueError("URL enthaelt keine gueltige Domain")

    cleaned = parsed._replace(
        scheme=parsed.scheme.lower(),
        netloc=parsed.netloc.lower(),
        fragment="",
    )
    return urlunparse(cleaned)


__all__ = ["clean_catalog_url"]
