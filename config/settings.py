"""Liest Konfigurationswerte aus der .env-Datei und stellt sie zentral bereit.

Das Modul nutzt `python-dotenv`, damit API, Skripte und Tests dieselben Werte
sehen. Alle Konstanten werden beim Import berechnet."""

from __future__ import annotations

import os
from decimal import Decimal
from pathlib import Path

from dotenv import load_dotenv  # type: ignore[import]

CONFIG_DIR = Path(__file__).resolve().parent
ROOT_ENV_FILE = CONFIG_DIR.parent / ".env"
EXAMPLE_ENV_FILE = CONFIG_DIR / ".env.example"

# Prioritaet: Projektweite .env > Beispieldatei (nur als Fallback).
if ROOT_ENV_FILE.exists():
    load_dotenv(ROOT_ENV_FILE)
elif EXAMPLE_ENV_FILE.exists():
    load_dotenv(EXAMPLE_ENV_FILE)


def _as_bool(value: str, default: bool = False) -> bool:
    """Interpretation einer Umgebungsvariable als boolescher Wert."""

    if value is None:
        return default
    return str(value).lower() in {"1", "true", "yes", "on"}


def _as_list(value: str) -> list[str]:
    """Zerlegt eine kommaseparierte Umgebungsvariable in eine Liste."""

    return [part.strip() for part in (value or "").split(",") if part.strip()]


# --- Produktdaten-Quelle ---
PRODUCT_DATA_URL = os.getenv(
    "PRODUCT_DATA_URL", "https://flapotest.blob.core.windows.net/test/ProductData.json"
)
DEFAULT_PRICE = Decimal(os.getenv("DEFAULT_PRICE", "17.99"))

REQUEST_TIMEOUT = float(os.getenv("REQUEST_TIMEOUT", "10"))
FETCH_ATTEMPTS = max(1, int(os.getenv("FETCH_ATTEMPTS", "1")))

# --- Logging/Tracing ---
CATALOG_TRACING_ENABLED = _as_bool(os.getenv("CATALOG_TRACING_ENABLED", "false"))
LOG_DIR = os.getenv("LOG_DIR", "logs")
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

# --- HTTP ---
CORS_ORIGINS = _as_list(os.getenv("CORS_ORIGINS", "http://localhost:5173"))
