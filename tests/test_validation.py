"""Tests für die reinen Prüf-Funktionen und die Eingabeschleifen."""

import pytest

from lastmonitor.eingabe import EingabeLeser
from lastmonitor.validation import (
    MELDUNG_NAME_LEER,
    MELDUNG_NICHT_POSITIV,
    MELDUNG_STUNDEN,
    parse_hours,
    parse_menu_choice,
    parse_name,
    parse_positive_number,
    trim_spaces,
)
from lastmonitor.view import ConsoleApplianceView


def test_trim_spaces_only_strips_edge_spaces():
    assert trim_spaces("  Fan  ") == "Fan"
    assert trim_spaces("Ceiling  fan") == "Ceiling  fan"
    assert trim_spaces("\tFan\t") == "\tFan\t"


def test_parse_name_rejects_blank():
    with pytest.raises(ValueError, match=MELDUNG_NAME_LEER):
        parse_name("    ")
    assert parse_name(" Heater ") == "Heater"


@pytest.mark.parametrize("raw", ["0", "-5", "abc", "", "nan", "inf", "1_000", "\u0661", "\uff11\uff10"])
def test_parse_positive_number_rejects(raw):
    with pytest.raises(ValueError, match=MELDUNG_NICHT_POSITIV):
        parse_positive_number(raw)


def test_parse_positive_number_uses_first_token():
    assert parse_positive_number("1500") == 1500.0
    assert parse_positive_number(" 75.5 W") == 75.5


@pytest.mark.parametrize("raw", ["25", "-1", "x", "24.01", "1_0", "\u0665"])
def test_parse_hours_rejects(raw):
    with pytest.raises(ValueError, match=MELDUNG_STUNDEN):
        parse_hours(raw)


@pytest.mark.parametrize("raw, erwartet", [("0", 0.0), ("24", 24.0), ("5", 5.0)])
def test_parse_hours_accepts_closed_range(raw, erwartet):
    assert parse_hours(raw) == erwartet


@pytest.mark.parametrize(
    "raw, erwartet",
    [
        ("1", 1), (" 3 ", 3), ("0", 0), ("-2", -2), ("a", None), ("", None), ("1.5", None),
        ("1_0", None), ("\u0661", None), ("1abc", None),
    ],
)
def test_parse_menu_choice(raw, erwartet):
    assert parse_menu_choice(raw) == erwartet


def test_reader_reprompts_until_valid_power(eingaben, capsys):
    eingaben("0", "-5", "abc def", "1500")
    leser = EingabeLeser(ConsoleApplianceView())

    assert leser.lies_positive_zahl("Power rating (W): ") == 1500.0

    out = capsys.readouterr().out
    assert out.count(MELDUNG_NICHT_POSITIV) == 3
    assert out.count("Power rating (W): ") == 4


def test_reader_reprompts_until_valid_hours(eingaben, capsys):
    eingaben("25", "5")
    leser = EingabeLeser(ConsoleApplianceView())

    assert leser.lies_stunden("Hours: ") == 5.0
    assert capsys.readouterr().out.count(MELDUNG_STUNDEN) == 1


def test_reader_reprompts_on_empty_name(eingaben, capsys):
    eingaben("", "   ", "  Lamp ")
    leser = EingabeLeser(ConsoleApplianceView())

    assert leser.lies_text("Appliance name: ") == "Lamp"
    assert capsys.readouterr().out.count(MELDUNG_NAME_LEER) == 2


def test_reader_propagates_end_of_input(eingaben):
    eingaben("abc")
    leser = EingabeLeser(ConsoleApplianceView())

    with pytest.raises(EOFError):
        leser.lies_positive_zahl("Power: ")
