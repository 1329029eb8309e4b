"""
Entry point für den Lastmonitor.
Dieses Modul startet die Anwendung.
"""

from __future__ import annotations

import logging
import sys

from .config import AppConfig, setup_logging
from .controller import LastmonitorController
from .view import ConsoleApplianceView

logger = logging.getLogger(__name__)


def main() -> None:
    """
    Startpunkt der Anwendung.
    Ablauf:
    - Einstellungen und Logging
    - Komponenten erstellen
    - Controller starten
    """
    config = AppConfig()
    setup_logging(config)

    try:
        view = ConsoleApplianceView(config)
        controller = LastmonitorController(view)

        # App starten.
        controller.starte_app()

    except EOFError:
        # Eingabe geschlossen (z.B. Pipe zu Ende).
        logger.warning("Eingabestrom beendet, Programm wird verlassen.")
        print("\nInput closed. Goodbye.")
        sys.exit(0)

    except KeyboardInterrupt:
        # Sauberer Abbruch per Strg+C.
        print("\nGoodbye.")
        sys.exit(0)

    except Exception as e:
        # Unerwarteter Fehler.
        logger.exception("Unerwarteter Fehler")
        print(f"\nERROR: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
