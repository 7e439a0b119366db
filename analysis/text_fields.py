"""Hilfsfunktionen zum Auslesen von Zahlen aus Freitextfeldern der Produktdaten.

Die Quelle liefert Preis pro Liter und Flaschenanzahl nur als Text, z. B.
`(2,10 €/Liter)` bzw. `20 x 0,5L (Glas)`. Beide Funktionen lesen jeweils das
erste Token vor dem ersten Leerzeichen und schlagen mit einem eigenen
Fehlertyp fehl, statt eine generische Parse-Exception durchzureichen."""

from __future__ import annotations

from decimal import Decimal
import re

from analysis.errors import MalformedDescriptionText, MalformedPriceText

# Nur ASCII-Ziffern, Komma als Dezimaltrenner.
_PRICE_TOKEN = re.compile(r"[0-9]+(,[0-9]+)?")
_COUNT_TOKEN = re.compile(r"[0-9]+")


def _leading_token(text: str) -> str | None:
    index = text.find(" ")
    if index < 0:
        return None
    return text[:index]


def parse_price_per_unit(text: str) -> Decimal:
    """Liest den Preis pro Einheit als `Decimal` (Komma als Dezimaltrenner).

    Raises:
        MalformedPriceText: Wenn kein Leerzeichen vorhanden ist oder die Zahl
            nicht gelesen werden kann.
    """

    token = _leading_token(text)
    if token is None:
        raise MalformedPriceText(text)

    if token.startswith("("):
        token = token[1:]

    if not _PRICE_TOKEN.fullmatch(token):
        raise MalformedPriceText(text)
    return Decimal(token.replace(",", "."))


def parse_bottle_count(text: str) -> int:
    """Liest die fuehrende Flaschenanzahl einer Kurzbeschreibung.

    Raises:
        MalformedDescriptionText: Wenn kein Leerzeichen vorhanden ist oder das
            erste Token keine Ganzzahl ist.
    """

    token = _leading_token(text)
    if token is None:
        raise MalformedDescriptionText(text)

    if not _COUNT_TOKEN.fullmatch(token):
        raise MalformedDescriptionText(text)
    return int(token)


__all__ = ["parse_price_per_unit", "parse_bottle_count"]
