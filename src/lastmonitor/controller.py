"""
Controller layer

Der LastmonitorController steuert die App. Er verbindet Register, Eingabe und View.

Aufgaben:
- Menü anzeigen und Auswahl verarbeiten
- Gerät erfassen
- Alle Geräte als Tabelle anzeigen
- Geräte nach Namen suchen
"""

from __future__ import annotations

import logging
from typing import Optional

from .domain import Appliance, ApplianceRegistry
from .eingabe import EingabeLeser
from .view import ConsoleApplianceView

logger = logging.getLogger(__name__)

KEINE_GERAETE = "No appliances registered yet."


class LastmonitorController:
    """
    Hauptcontroller für den Lastmonitor.

    Das Register gehört dem Controller und lebt so lange wie das Programm.
    Es wird nichts gespeichert.
    """

    def __init__(
        self,
        view: ConsoleApplianceView,
        register: Optional[ApplianceRegistry] = None,
        eingabe: Optional[EingabeLeser] = None,
    ) -> None:
        self._view = view
        self._register = register if register is not None else ApplianceRegistry()
        self._eingabe = eingabe or EingabeLeser(view)

    @property
    def register(self) -> ApplianceRegistry:
        return self._register

    def starte_app(self) -> None:
        """
        Menü-Schleife.
        Läuft, bis 0 gewählt wird. Das ist der einzige reguläre Ausstieg.
        """
        logger.info("Lastmonitor gestartet")

        while True:
            self._view.render_menue()
            choice = self._eingabe.lies_menue_auswahl("Choose: ")

            if choice == 1:
                self.registriere_geraet()
            elif choice == 2:
                self.zeige_alle_geraete()
            elif choice == 3:
                self.suche_geraet()
            elif choice == 0:
                self._beenden()
                break
            else:
                # Auch nicht lesbare Eingaben landen hier (choice is None).
                logger.debug("Ungültige Menüauswahl: %r", choice)
                self._view.show_message("Invalid choice. Try again.")

    def registriere_geraet(self) -> Appliance:
        """
        Erfasst ein neues Gerät.
        Name, Leistung und Stunden werden nacheinander gelesen.
        Jede Abfrage wiederholt sich selbst, die Reihenfolge startet nicht neu.
        """
        self._view.show_message("\n--- Register Appliance ---")
        name = self._eingabe.lies_text("Appliance name: ")
        power = self._eingabe.lies_positive_zahl("Power rating (W): ")
        hours = self._eingabe.lies_stunden("Daily usage (hours 0-24): ")

        geraet = Appliance(name=name, power_w=power, hours=hours)
        self._register.add(geraet)
        logger.info(
            "Gerät erfasst: %s (%.2f W, %.2f h/Tag, %.3f kWh/Tag)",
            name, power, hours, geraet.daily_energy_kwh(),
        )

        self._view.show_message(f"Saved: {name} ({power:g}W, {hours:g}h/day)")
        return geraet

    def zeige_alle_geraete(self) -> None:
        """Zeigt alle Geräte in Erfassungsreihenfolge."""
        self._view.show_message("\n--- All Registered Appliances ---")
        if self._register.ist_leer():
            self._view.show_message(KEINE_GERAETE)
            return

        self._view.render_tabelle(self._register.alle())

    def suche_geraet(self) -> None:
        """
        Sucht Geräte nach einem Namensteil.
        - Leeres Register: keine Abfrage
        - Kopf wird erst vor dem ersten Treffer ausgegeben
        - Ohne Treffer: Meldung mit dem Suchtext wie eingegeben
        """
        self._view.show_message("\n--- Search Appliance ---")
        if self._register.ist_leer():
            self._view.show_message(KEINE_GERAETE)
            return

        key = self._eingabe.lies_text("Enter name to search: ")
        treffer = self._register.suche(key)
        logger.debug("Suche nach %r: %d Treffer", key, len(treffer))

        found = False
        for g in treffer:
            if not found:
                self._view.render_treffer_kopf()
                found = True
            self._view.render_treffer(g)

        if not found:
            self._view.show_message(f"No appliance matched: {key}")

    def _beenden(self) -> None:
        """
        Beendet das Programm.
        Es gibt nichts zu speichern.
        """
        logger.info("Lastmonitor beendet (%d Geräte erfasst)", len(self._register))
        self._view.show_message("Goodbye.")
