"""
Domain beinhaltet das Gerät und das Geräteregister

Dieses Modul enthält nur die Fachlogik.
Es enthält keine Ein- oder Ausgabe.

- Das Gerät ist eine Dataclass.
- Der Tagesverbrauch wird immer berechnet und nicht gespeichert.
- Das Register behält die Reihenfolge der Erfassung.
"""

from __future__ import annotations

import logging
import math
import string
from dataclasses import dataclass, field
from typing import Iterator, List

logger = logging.getLogger(__name__)

# Nur ASCII wird gefaltet, unabhängig von der Locale.
_ASCII_LOWER = str.maketrans(string.ascii_uppercase, string.ascii_lowercase)

MAX_STUNDEN = 24.0


def ascii_fold(text: str) -> str:
    """Wandelt ASCII-Großbuchstaben in Kleinbuchstaben um."""
    return text.translate(_ASCII_LOWER)


@dataclass(frozen=True, slots=True)
class Appliance:
    """
    Ein elektrisches Gerät.
    - name: nicht leer, ohne Leerzeichen am Rand
    - power_w: Leistung in Watt, größer 0
    - hours: Nutzung pro Tag, 0..24
    Unveränderlich: ein Gerät im Register bleibt immer gültig.
    """
    name: str
    power_w: float
    hours: float

    def __post_init__(self) -> None:
        """Prüft Grundregeln nach dem Erzeugen."""
        getrimmt = self.name.strip(" ")
        if not getrimmt:
            raise ValueError("name darf nicht leer sein.")
        if getrimmt != self.name:
            raise ValueError(f"name darf nicht mit Leerzeichen beginnen oder enden: {self.name!r}.")
        if not math.isfinite(self.power_w) or self.power_w <= 0:
            raise ValueError(f"power_w muss > 0 sein, ist aber {self.power_w}.")
        if not (0.0 <= self.hours <= MAX_STUNDEN):
            raise ValueError(f"hours muss im Bereich 0..24 liegen, ist aber {self.hours}.")

    def daily_energy_kwh(self) -> float:
        """Tagesverbrauch: Watt * Stunden / 1000."""
        return (self.power_w * self.hours) / 1000.0


@dataclass(slots=True)
class ApplianceRegistry:
    """
    Alle erfassten Geräte.
    - Reihenfolge = Reihenfolge der Erfassung
    - Keine Sortierung, keine Duplikatprüfung
    - Die laufende Nummer wird nur bei der Anzeige berechnet
    """
    geraete: List[Appliance] = field(default_factory=list)

    def add(self, geraet: Appliance) -> None:
        """Hängt ein Gerät hinten an."""
        self.geraete.append(geraet)
        logger.debug("Register enthält jetzt %d Geräte", len(self.geraete))

    def alle(self) -> List[Appliance]:
        """Gibt eine Kopie der Liste zurück."""
        return list(self.geraete)

    def ist_leer(self) -> bool:
        return not self.geraete

    def suche(self, key: str) -> List[Appliance]:
        """
        Sucht Geräte nach Namensteil.
        - Groß/Klein egal (ASCII)
        - Treffer irgendwo im Namen, nicht nur am Anfang
        - Ergebnis in Register-Reihenfolge
        """
        needle = ascii_fold(key)
        return [g for g in self.geraete if needle in ascii_fold(g.name)]

    def __len__(self) -> int:
        return len(self.geraete)

    def __iter__(self) -> Iterator[Appliance]:
        return iter(self.geraete)
