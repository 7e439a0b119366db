"""Pipeline orchestration layer."""

from .pipeline import (
    articles_by_price_view,
    articles_with_most_bottles_view,
    min_and_max_price_per_litre_view,
    run_summary,
    summary_view,
)

__all__ = [
    "articles_by_price_view",
    "articles_with_most_bottles_view",
    "min_and_max_price_per_litre_view",
    "run_summary",
    "summary_view",
]
