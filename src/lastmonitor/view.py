"""
UI layer für die Console

Diese View zeigt Menü und Gerätetabellen in der Konsole.
- Text formatieren und ausgeben
- Tabellen mit festen Spaltenbreiten bauen
- Eingaben lesen (nur über prompt)
"""

from __future__ import annotations

from typing import Iterable, List, Optional

from .config import AppConfig
from .domain import Appliance


class ConsoleApplianceView:
    """
    View für die Konsole.

    Spaltenbreiten kommen aus der AppConfig. Alle Spalten sind linksbündig.
    Zu lange Namen werden nicht gekürzt.
    """

    def __init__(self, config: Optional[AppConfig] = None) -> None:
        self._config = config or AppConfig()

    def render_menue(self) -> None:
        """Zeigt das Hauptmenü."""
        print()
        print("==============================")
        print(f" {self._config.titel}")
        print("==============================")
        print("1. Register appliance")
        print("2. View all appliances")
        print("3. Search appliance by name")
        print("0. Exit")

    def prompt(self, frage: str) -> str:
        """
        Fragt den Nutzer nach Eingabe.
        """
        return input(frage)

    def show_message(self, text: str) -> None:
        """
        Gibt eine Nachricht aus.
        """
        print(text)

    def render_tabelle(self, geraete: Iterable[Appliance]) -> None:
        """Zeichnet alle Geräte mit laufender Nummer."""
        print(self._build_tabelle(geraete))

    def render_treffer_kopf(self) -> None:
        """Kopf der Trefferliste, ohne Nummernspalte."""
        print("Found:")
        print(self._kopfzeile(mit_nummer=False))
        print("-" * self._breite(mit_nummer=False))

    def render_treffer(self, geraet: Appliance) -> None:
        print(self._zeile(geraet))

    def _build_tabelle(self, geraete: Iterable[Appliance]) -> str:
        """
        Baut die Tabelle als Text.

        Spalten:
        - No. (ab 1)
        - Name
        - Power(W), 2 Nachkommastellen
        - Hours, 2 Nachkommastellen
        - kWh/day, 3 Nachkommastellen
        """
        lines: List[str] = [
            self._kopfzeile(mit_nummer=True),
            "-" * self._breite(mit_nummer=True),
        ]
        nr_breite = self._config.spalten[0]
        for i, g in enumerate(geraete, 1):
            lines.append(str(i).ljust(nr_breite) + self._zeile(g))
        return "\n".join(lines)

    def _kopfzeile(self, mit_nummer: bool) -> str:
        nr_w, name_w, power_w, hours_w, kwh_w = self._config.spalten
        kopf = (
            "Name".ljust(name_w)
            + "Power(W)".ljust(power_w)
            + "Hours".ljust(hours_w)
            + "kWh/day".ljust(kwh_w)
        )
        return "No.".ljust(nr_w) + kopf if mit_nummer else kopf

    def _zeile(self, g: Appliance) -> str:
        """Eine Gerätezeile ohne Nummer."""
        _, name_w, power_w, hours_w, kwh_w = self._config.spalten
        return (
            g.name.ljust(name_w)
            + f"{g.power_w:.2f}".ljust(power_w)
            + f"{g.hours:.2f}".ljust(hours_w)
            + f"{g.daily_energy_kwh():.3f}".ljust(kwh_w)
        )

    def _breite(self, mit_nummer: bool) -> int:
        """Länge der Trennlinie."""
        spalten = self._config.spalten if mit_nummer else self._config.spalten[1:]
        return sum(spalten)
