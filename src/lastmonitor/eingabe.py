"""
Eingabeschleifen

Der EingabeLeser fragt so lange nach, bis ein gültiger Wert kommt.
- Gelesen wird immer eine ganze Zeile über die View.
- Geprüft wird mit den Funktionen aus validation.py.
- Eine fehlerhafte Zeile wird komplett verworfen, es bleibt kein Rest stehen.

Nur diese Klasse liest Eingaben vom Terminal.
"""

from __future__ import annotations

import logging
from typing import Callable, Optional, TypeVar

from .validation import (
    parse_hours,
    parse_menu_choice,
    parse_name,
    parse_positive_number,
)
from .view import ConsoleApplianceView

logger = logging.getLogger(__name__)

T = TypeVar("T")


class EingabeLeser:
    """
    Liest geprüfte Werte.
    Ungültige Eingaben führen zu einer Fehlermeldung und einer neuen Frage.
    """

    def __init__(self, view: ConsoleApplianceView) -> None:
        self._view = view

    def lies_text(self, frage: str) -> str:
        """Nicht leerer Text, Leerzeichen am Rand entfernt."""
        return self._lies_bis_gueltig(frage, parse_name)

    def lies_positive_zahl(self, frage: str) -> float:
        """Zahl größer 0."""
        return self._lies_bis_gueltig(frage, parse_positive_number)

    def lies_stunden(self, frage: str) -> float:
        """Stunden pro Tag im Bereich 0..24."""
        return self._lies_bis_gueltig(frage, parse_hours)

    def lies_menue_auswahl(self, frage: str) -> Optional[int]:
        """
        Liest die Menüauswahl.
        Hier wird nicht wiederholt: None heißt ungültig, das Menü entscheidet.
        """
        raw = self._view.prompt(frage)
        auswahl = parse_menu_choice(raw)
        if auswahl is None:
            logger.debug("Menüauswahl nicht lesbar: %r", raw)
        return auswahl

    def _lies_bis_gueltig(self, frage: str, parser: Callable[[str], T]) -> T:
        """
        Fragt, prüft und wiederholt.
        EOFError von input() wird nicht abgefangen.
        """
        while True:
            raw = self._view.prompt(frage)
            try:
                return parser(raw)
            except ValueError as e:
                logger.debug("Eingabe abgelehnt: %r (%s)", raw, e)
                self._view.show_message(str(e))
