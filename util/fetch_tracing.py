"""Tracing-Helfer fuer detailliertes Logging von Katalogabrufen."""

from __future__ import annotations

import json
import time
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Awaitable, Callable, Optional

import config

TRACE_FILE_NAME = "catalog.log"


def _ensure_log_dir() -> Path:
    """Stellt sicher, dass der Log-Ordner existiert."""

    log_dir = Path(config.LOG_DIR or "logs")
    log_dir.mkdir(parents=True, exist_ok=True)
    return log_dir


def _count_articles(result: Any) -> Optional[int]:
    """Zaehlt die Artikel eines geladenen Katalogs, sofern moeglich."""

    if not isinstance(result, (list, tuple)):
        return None
    return sum(len(getattr(product, "articles", ()) or ()) for product in result)


async def traced_fetch(
    url: str,
    invoke: Callable[[], Awaitable[Any]],
) -> Any:
    """Fuehrt einen Katalogabruf aus und schreibt einen Trace-Eintrag.

    Args:
        url: Abgerufene Katalog-URL.
        invoke: Coroutine-Factory, die den eigentlichen Abruf ausfuehrt.

    Returns:
        Ergebnis des Abrufs (Originalobjekt).
    """

    if not config.CATALOG_TRACING_ENABLED:
        return await invoke()

    start = time.perf_counter()

    try:
        result = await invoke()
    except Exception as exc:
        _write_trace(url, start, None, None, f"{type(exc).__name__}: {exc}")
        raise

    product_count = len(result) if isinstance(result, (list, tuple)) else None
    _write_trace(url, start, product_count, _count_articles(result), None)
    return result


def _write_trace(
    url: str,
    start: float,
    product_count: Optional[int],
    article_count: Optional[int],
    error_info: str | None,
) -> None:
    """Schreibt einen JSON-Trace-Eintrag in die Logdatei."""

    entry = {
        "ts": datetime.now(timezone.utc).isoformat(),
        "url": url,
        "duration_ms": round((time.perf_counter() - start) * 1000, 3),
        "products": product_count,
        "articles": article_count,
        "error": error_info,
    }

    log_file = _ensure_log_dir() / TRACE_FILE_NAME
    with log_file.open("a", encoding="utf-8") as file:
        file.write(json.dumps(entry, ensure_ascii=False) + "\n")


__all__ = ["traced_fetch"]
