"""Gemeinsame Fixtures: vorgegebene Eingabezeilen statt Tastatur."""

import builtins

import pytest


@pytest.fixture
def eingaben(monkeypatch):
    """
    Setzt die Zeilen, die input() nacheinander liefert.
    Sind alle verbraucht, kommt EOFError wie bei einer geschlossenen Eingabe.
    """
    def _setze(*zeilen):
        rest = iter(zeilen)

        def fake_input(prompt=""):
            print(prompt, end="")
            try:
                zeile = next(rest)
            except StopIteration:
                raise EOFError from None
            print(zeile)
            return zeile

        monkeypatch.setattr(builtins, "input", fake_input)

    return _setze
