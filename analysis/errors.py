"""Fehlertypen der Produktdaten-Auswertung."""

from __future__ import annotations

RETRIEVAL_FAILURE_MESSAGE = "Invalid JSON or timeout."


class ProductDataError(Exception):
    """Basisklasse aller fachlichen Fehler rund um Produktdaten."""


class RetrievalFailure(ProductDataError):
    """Katalog konnte nicht geladen werden (Netzwerk, HTTP-Status oder JSON).

    Alle Ursachen werden bewusst auf dieselbe Meldung abgebildet; die
    Originalausnahme bleibt ueber `__cause__` erreichbar.
    """

    def __init__(self, message: str = RETRIEVAL_FAILURE_MESSAGE) -> None:
        super().__init__(message)


class EmptyCatalog(ProductDataError):
    """Katalog enthaelt keine Artikel, ein Extremwert ist nicht definiert."""

    def __init__(self, message: str = "catalog contains no articles") -> None:
        super().__init__(message)


class MalformedTextField(ProductDataError):
    """Ein Freitextfeld entspricht nicht der erwarteten Konvention."""

    field_name = "text"

    def __init__(self, text: str) -> None:
        self.text = text
        super().__init__(f"malformed {self.field_name}: {text!r}")


class MalformedPriceText(MalformedTextField):
    """Preis-pro-Einheit-Text wie `(2,10 €/Liter)` ist nicht lesbar."""

    field_name = "price per unit text"


class MalformedDescriptionText(MalformedTextField):
    """Kurzbeschreibung wie `20 x 0,5L (Glas)` ist nicht lesbar."""

    field_name = "short description"


__all__ = [
    "RETRIEVAL_FAILURE_MESSAGE",
    "ProductDataError",
    "RetrievalFailure",
    "EmptyCatalog",
    "MalformedTextField",
    "MalformedPriceText",
    "MalformedDescriptionText",
]
