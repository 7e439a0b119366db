"""CLI-Skript fuer Smoke-Tests der Produktdaten-API.

Das Skript ruft die Zusammenfassung ueber die laufende FastAPI ab, gibt je
Auswertung die Trefferzahl aus und liefert einen passenden Exit-Code."""

from __future__ import annotations

import argparse
import os
import sys
from typing import Dict, Iterable, Optional

import httpx
from dotenv import load_dotenv

# Umgebung aus .env einlesen, damit lokale Proben ohne manuelles Exportieren laufen.
load_dotenv()

SUMMARY_PATH = "/productdata/article/summary"


def fetch_summary(
    client: httpx.Client, base_url: str, catalog_url: Optional[str], price: Optional[str]
) -> Dict[str, object]:
    """Ruft die Zusammenfassung ab und liefert die JSON-Antwort."""

    params: Dict[str, str] = {}
    if catalog_url:
        params["url"] = catalog_url
    if price:
        params["price"] = price

    response = client.get(f"{base_url}{SUMMARY_PATH}", params=params)
    if response.status_code >= 400:
        detail = response.json().get("detail") if response.content else None
        raise RuntimeError(f"API antwortet mit {response.status_code}: {detail}")
    return response.json()


def describe(summary: Dict[str, object]) -> Dict[str, int]:
    """Zaehlt die Treffer je Auswertung."""

    extremes = summary.get("minAndMaxPricesPerLitre") or {}
    if not isinstance(extremes, dict):
        extremes = {}
    return {
        "minPrice": len(extremes.get("minPrice") or []),
        "maxPrice": len(extremes.get("maxPrice") or []),
        "byPrice": len(summary.get("byPrice") or []),  # type: ignore[arg-type]
        "mostBottles": len(summary.get("mostBottles") or []),  # type: ignore[arg-type]
    }


def run_probe(base_url: str, catalog_url: Optional[str], price: Optional[str], timeout: float) -> int:
    """Fuehrt die Probe aus und gibt den Exit-Code zurueck."""

    print(f"Starte Probe gegen {base_url}")
    with httpx.Client(timeout=timeout) as client:
        summary = fetch_summary(client, base_url, catalog_url, price)

    counts = describe(summary)
    for name, count in counts.items():
        print(f"{name}: {count} Artikel")

    if counts["minPrice"] == 0 or counts["maxPrice"] == 0 or counts["mostBottles"] == 0:
        print("Warnung: Extremwert-Auswertung ohne Ergebnis.")
        return 1
    return 0


def build_arg_parser() -> argparse.ArgumentParser:
    """Erzeugt den CLI-Argumentparser."""

    parser = argparse.ArgumentParser(description="Smoke-Test fuer die Produktdaten-API")
    parser.add_argument(
        "--base-url",
        default=os.getenv("API_BASE_URL", "http://127.0.0.1:8000"),
        help="Basis-URL der API",
    )
    parser.add_argument("--url", default=None, help="Optionale URL der JSON-Produktdaten")
    parser.add_argument("--price", default=None, help="Optionaler Vergleichspreis, z. B. 17.99")
    parser.add_argument("--timeout", type=float, default=30.0, help="Timeout in Sekunden")
    return parser


def main(argv: Optional[Iterable[str]] = None) -> int:
    """CLI-Einstiegspunkt fuer das Skript."""

    parser = build_arg_parser()
    args = parser.parse_args(argv)

    try:
        return run_probe(args.base_url, args.url, args.price, args.timeout)
    except Exception as error:
        print(f"Fehler bei der Probe: {error}")
        return 1


if __name__ == "__main__":  # pragma: no cover - manueller Aufruf
    sys.exit(main())
