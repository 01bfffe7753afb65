"""
Catalog, settings parsing and config loading tests
==================================================
"""

import json

import pytest

from errors import ConfigurationError
from utilities import (
    DEFAULT_REFLECTOR,
    REFLECTORS,
    ROTORS,
    RotorName,
    format_blocks,
    load_config,
    parse_pairs,
    parse_settings,
    resolve_reflector,
    resolve_rotor,
)

# ── catalog ──────────────────────────────────────────────────────────────────
def test_catalog_has_distinct_wirings():
    assert len({spec.wiring for spec in ROTORS}) == len(ROTORS) >= 3

def test_catalog_is_read_only():
    with pytest.raises(AttributeError):
        ROTORS[0].notch = "A"

@pytest.mark.parametrize("selection, name", [
    (0, "I"),
    (RotorName.III, "III"),
    ("II", "II"),
    ("iv", "IV"),
    (" V ", "V"),
    ("2", "III"),
])
def test_resolve_rotor(selection, name):
    assert resolve_rotor(selection).name == name

@pytest.mark.parametrize("selection", [5, -1, "VI", "", None, True])
def test_resolve_rotor_rejects_unknown(selection):
    with pytest.raises(ConfigurationError):
        resolve_rotor(selection)

def test_resolve_reflector():
    assert resolve_reflector("b") is REFLECTORS[DEFAULT_REFLECTOR]
    with pytest.raises(ConfigurationError):
        resolve_reflector("D")

# ── parsing ──────────────────────────────────────────────────────────────────
@pytest.mark.parametrize("raw, expected", [
    ("ADU", [0, 3, 20]),
    ("adu", [0, 3, 20]),
    ("0 3 20", [0, 3, 20]),
    ([0, 3, 20], [0, 3, 20]),
    (["A", "D", "U"], [0, 3, 20]),
    (["0", "D", 20], [0, 3, 20]),
])
def test_parse_settings(raw, expected):
    assert parse_settings(raw, "position") == expected

@pytest.mark.parametrize("raw", ["A!C", [0, None, 1], ["AB"]])
def test_parse_settings_rejects_garbage(raw):
    with pytest.raises(ConfigurationError):
        parse_settings(raw, "position")

@pytest.mark.parametrize("raw, expected", [
    (None, []),
    ("", []),
    ("ab cd", ["AB", "CD"]),
    ("AB,CD", ["AB", "CD"]),
    ([["A", "B"], "cd"], ["AB", "CD"]),
])
def test_parse_pairs(raw, expected):
    assert parse_pairs(raw) == expected

# ── config file ──────────────────────────────────────────────────────────────
def test_load_config(tmp_path):
    path = tmp_path / "daily.json"
    path.write_text(json.dumps({
        "rotors": ["III", "I", "II"],
        "positions": "QEV",
        "rings": [1, 2, 3],
        "plugs": ["ab", "CD"],
    }), encoding="utf-8")
    cfg = load_config(path)
    assert cfg == {
        "rotors": ["III", "I", "II"],
        "positions": [16, 4, 21],
        "rings": [1, 2, 3],
        "plugs": ["AB", "CD"],
        "reflector": "B",
    }

def test_load_config_missing_keys(tmp_path):
    path = tmp_path / "daily.json"
    path.write_text(json.dumps({"rotors": [0, 1, 2]}), encoding="utf-8")
    with pytest.raises(ValueError, match="positions, rings"):
        load_config(path)

def test_load_config_not_an_object(tmp_path):
    path = tmp_path / "daily.json"
    path.write_text("[1, 2, 3]", encoding="utf-8")
    with pytest.raises(ValueError):
        load_config(path)

# ── display ──────────────────────────────────────────────────────────────────
def test_format_blocks():
    assert format_blocks("ABCDEFGHIJKL") == "ABCDE FGHIJ KL"
    assert format_blocks("AB CD!EF", 3) == "ABC DEF"
    assert format_blocks("AB CD!", 0) == "AB CD!"
    assert format_blocks("") == ""
