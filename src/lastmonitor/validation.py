"""
Reine Prüf-Funktionen für Benutzereingaben.

Jede Funktion bekommt den rohen Text einer Eingabezeile.
- Gültig: der umgewandelte Wert wird zurückgegeben.
- Ungültig: ValueError mit der Meldung für den Nutzer.

Hier gibt es kein input() und kein print(). Die Schleifen liegen in eingabe.py.
"""

from __future__ import annotations

import math
from typing import Optional

from .domain import MAX_STUNDEN

MELDUNG_NAME_LEER = "Error: name must not be empty."
MELDUNG_NICHT_POSITIV = "Error: value must be greater than 0."
MELDUNG_STUNDEN = "Error: hours must be between 0 and 24."


def trim_spaces(raw: str) -> str:
    """
    Entfernt Leerzeichen am Anfang und Ende.
    Nur ' ', keine Tabs. Innere Leerzeichen bleiben.
    """
    return raw.strip(" ")


def _erstes_token(raw: str) -> Optional[str]:
    """
    Erstes Wort der Zeile. Der Rest wird verworfen.
    Nur ASCII-Zeichen ohne '_', sonst None.
    """
    teile = raw.split()
    if not teile:
        return None
    token = teile[0]
    if not token.isascii() or "_" in token:
        return None
    return token


def _parse_zahl(raw: str) -> Optional[float]:
    """Liest eine endliche Zahl oder liefert None."""
    token = _erstes_token(raw)
    if token is None:
        return None
    try:
        wert = float(token)
    except ValueError:
        return None
    if not math.isfinite(wert):
        return None
    return wert


def parse_name(raw: str) -> str:
    name = trim_spaces(raw)
    if not name:
        raise ValueError(MELDUNG_NAME_LEER)
    return name


def parse_positive_number(raw: str) -> float:
    """Zahl größer 0, z.B. eine Leistung in Watt."""
    wert = _parse_zahl(raw)
    if wert is None or wert <= 0:
        raise ValueError(MELDUNG_NICHT_POSITIV)
    return wert


def parse_hours(raw: str) -> float:
    """Stunden pro Tag, 0 und 24 sind erlaubt."""
    wert = _parse_zahl(raw)
    if wert is None or not (0.0 <= wert <= MAX_STUNDEN):
        raise ValueError(MELDUNG_STUNDEN)
    return wert


def parse_menu_choice(raw: str) -> Optional[int]:
    """
    Menüauswahl als ganze Zahl.
    None bei fehlerhafter Eingabe (z.B. Buchstaben).
    """
    token = _erstes_token(raw)
    if token is None:
        return None
    try:
        return int(token)
    except ValueError:
        return None
