"""
Lastmonitor direkt aus dem Repository starten, ohne pip install.

    python run.py

Ist das Paket bereits installiert (z.B. pip install -e .), wird diese Version genutzt.
Sonst wird src/ vorne in den Suchpfad gestellt.
"""
from __future__ import annotations

import importlib.util
import sys
from pathlib import Path

SRC_DIR = Path(__file__).resolve().parent / "src"


def _paket_verfuegbar_machen() -> None:
    """src/ nur ergänzen, wenn lastmonitor noch nicht importierbar ist."""
    if importlib.util.find_spec("lastmonitor") is None:
        sys.path.insert(0, str(SRC_DIR))


if __name__ == "__main__":
    _paket_verfuegbar_machen()

    from lastmonitor.main import main

    main()
