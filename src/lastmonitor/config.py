"""
Feste Einstellungen der Anwendung.

Es gibt keine Argumente, keine Konfigurationsdatei und keine Umgebungsvariablen.
Die Werte stehen hier an einer Stelle und werden beim Start übergeben.
"""

from __future__ import annotations

import logging
import sys
from dataclasses import dataclass
from typing import Optional, TextIO, Tuple


@dataclass(frozen=True, slots=True)
class AppConfig:
    """
    Einstellungen für View und Logging.
    - spalten: Breiten für Nr., Name, Leistung, Stunden, kWh/Tag
    - Log-Ausgabe geht auf stderr, damit stdout nur die Tabellen enthält
    """
    titel: str = "Electrical Load Monitoring"
    spalten: Tuple[int, int, int, int, int] = (5, 25, 12, 12, 12)
    log_level: int = logging.WARNING
    log_format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    log_stream: Optional[TextIO] = None


def setup_logging(config: AppConfig) -> None:
    """Richtet das Logging einmal beim Start ein."""
    logging.basicConfig(
        level=config.log_level,
        format=config.log_format,
        stream=config.log_stream or sys.stderr,
    )
