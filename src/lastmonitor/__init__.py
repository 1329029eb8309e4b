"""
lastmonitor package

Dieses Paket implementiert den Konsolen-Prototyp "Electrical Load Monitoring".
Geräte werden mit Leistung und täglicher Nutzungsdauer erfasst, daraus wird der
Tagesverbrauch in kWh berechnet.

Schichtenarchitektur:
- domain.py: Gerät + Geräteregister
- validation.py: reine Prüf-Funktionen für Eingaben
- eingabe.py: Eingabeschleifen (fragen, prüfen, wiederholen)
- view.py: ASCII-Ausgabe
- controller.py: Menü-Orchestrierung
- config.py: feste Einstellungen + Logging
- main.py: Einstiegspunkt
"""

import logging

logging.getLogger(__name__).addHandler(logging.NullHandler())
