"""Einpass-Auswahl von Minimum bzw. Maximum unter Erhalt aller Gleichstaende.

`ExtremumCollector` verarbeitet (Kontext, Schluessel)-Paare in Eingabereihenfolge
und haelt alle Kontexte, deren Schluessel dem bisher besten Wert entspricht.
Schluessel werden exakt verglichen; fuer Dezimalwerte daher `Decimal` statt
`float` verwenden."""

from __future__ import annotations

from enum import Enum
from typing import Generic, Iterable, List, Optional, Tuple, TypeVar

C = TypeVar("C")
K = TypeVar("K")


class ExtremumMode(str, Enum):
    """Richtung des Vergleichs."""

    MIN = "min"
    MAX = "max"


class ExtremumCollector(Generic[C, K]):
    """Sammelt alle Kontexte mit dem extremalen Schluessel in einem Durchlauf.

    Attributes:
        mode: `ExtremumMode.MIN` oder `ExtremumMode.MAX`.
    """

    def __init__(self, mode: ExtremumMode) -> None:
        self.mode = ExtremumMode(mode)
        self._best: Optional[K] = None
        self._winners: List[C] = []

    @property
    def best_key(self) -> Optional[K]:
        """Aktuell bester Schluessel oder `None`, solange nichts angeboten wurde."""

        return self._best

    @property
    def winners(self) -> List[C]:
        """Gewinner in der Reihenfolge ihres ersten Auftretens (Kopie)."""

        return list(self._winners)

    def offer(self, context: C, key: K) -> None:
        """Verarbeitet ein einzelnes Paar."""

        if not self._winners or key == self._best:
            self._winners.append(context)
            self._best = key
        elif self._improves(key):
            self._winners.clear()
            self._winners.append(context)
            self._best = key

    def _improves(self, key: K) -> bool:
        if self.mode is ExtremumMode.MIN:
            return key < self._best  # type: ignore[operator]
        return key > self._best  # type: ignore[operator]


def collect_extremes(pairs: Iterable[Tuple[C, K]], mode: ExtremumMode) -> List[C]:
    """Fuehrt einen kompletten Durchlauf aus und liefert die Gewinner."""

    collector: ExtremumCollector[C, K] = ExtremumCollector(mode)
    for context, key in pairs:
        collector.offer(context, key)
    return collector.winners


__all__ = ["ExtremumCollector", "ExtremumMode", "collect_extremes"]
