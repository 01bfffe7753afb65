# utilities.py
from __future__ import annotations

import json
from collections.abc import Sequence
from dataclasses import dataclass
from enum import IntEnum
from pathlib import Path
from typing import Dict, List, Tuple

from errors import ConfigurationError
from keyboard_and_plugboard import KEYBOARD
from rotor_and_reflector import Reflector

# ────────────────────────────────────────────────────────────────────────
#  0. Wheel database
# ────────────────────────────────────────────────────────────────────────


class RotorName(IntEnum):
    I = 0
    II = 1
    III = 2
    IV = 3
    V = 4


@dataclass(frozen=True, slots=True)
class RotorSpec:
    """Catalog entry; machines build their own mutable Rotor from it."""

    name: str
    wiring: str
    notch: str


# Enigma I rotors, indexed by RotorName ----------------------------------
ROTORS: Tuple[RotorSpec, ...] = (
    RotorSpec("I",   "EKMFLGDQVZNTOWYHXUSPAIBRCJ", notch="Q"),
    RotorSpec("II",  "AJDKSIRUXBLHWTMCQGZNPYFVOE", notch="E"),
    RotorSpec("III", "BDFHJLCPRTXVZNYEIWGAKMUSQO", notch="V"),
    RotorSpec("IV",  "ESOVPZJAYQUIRHXLNFTGKDCMWB", notch="J"),
    RotorSpec("V",   "VZBRGITYUPSDNHLXAWMJQOFECK", notch="Z"),
)

# Reflectors are read-only and shared by every machine -------------------
REFLECTORS: Dict[str, Reflector] = {
    "A": Reflector("EJMZALYXVBWFCRQUONTSPIKHGD"),
    "B": Reflector("YRUHQSLDPXNGOKMIEBFZCWVJAT"),
    "C": Reflector("FVPJIAOYEDRZXWGCTKUQSBNMHL"),
}
DEFAULT_REFLECTOR = "B"

DEFAULT_SETTINGS: Dict[str, object] = {
    "rotors": ["I", "II", "III"],
    "positions": [0, 0, 0],
    "rings": [0, 0, 0],
    "plugs": [],
    "reflector": DEFAULT_REFLECTOR,
}


def resolve_rotor(selection: int | str) -> RotorSpec:
    """Look up a catalog rotor by index, RotorName or roman numeral."""
    if isinstance(selection, bool):
        raise ConfigurationError(f"Unknown rotor {selection!r}")
    if isinstance(selection, int):
        if 0 <= selection < len(ROTORS):
            return ROTORS[selection]
        raise ConfigurationError(
            f"Rotor index {selection} out of range 0–{len(ROTORS) - 1}"
        )
    if isinstance(selection, str):
        key = selection.strip().upper()
        if key.isdigit():
            return resolve_rotor(int(key))
        try:
            return ROTORS[RotorName[key]]
        except KeyError:
            pass
    raise ConfigurationError(
        f"Unknown rotor {selection!r}. Expected one of {[r.name for r in ROTORS]}"
    )


def resolve_reflector(name: str) -> Reflector:
    try:
        return REFLECTORS[name.strip().upper()]
    except (KeyError, AttributeError):
        raise ConfigurationError(
            f"Unknown reflector {name!r}. Expected one of {list(REFLECTORS)}"
        )


# ────────────────────────────────────────────────────────────────────────
#  1. Settings parsing
# ────────────────────────────────────────────────────────────────────────


def parse_settings(value: str | Sequence[int | str], label: str) -> List[int]:
    """Turn "ADU", "0 3 20", [0, 3, 20] or ["A", "D", "U"] into indices."""
    if isinstance(value, str):
        text = value.strip().upper()
        items: Sequence[int | str] = text.split() if " " in text else list(text)
    elif isinstance(value, Sequence):
        items = value
    else:
        raise ConfigurationError(f"Invalid {label} setting {value!r}")

    result: List[int] = []
    for item in items:
        if isinstance(item, int) and not isinstance(item, bool):
            result.append(item)
        elif isinstance(item, str) and item.strip().isdigit():
            result.append(int(item))
        elif isinstance(item, str) and item.strip().upper() in KEYBOARD:
            result.append(KEYBOARD.forward(item.strip().upper()))
        else:
            raise ConfigurationError(f"Invalid {label} entry {item!r}")
    return result


def _is_pair_like(p: object) -> bool:
    return isinstance(p, Sequence) and all(isinstance(c, str) for c in p)


def parse_pairs(raw: str | Sequence[str | Sequence[str]] | None) -> List[str]:
    """Normalise "AB CD" or ["AB", ("C", "D")] into ["AB", "CD"]."""
    if not raw:
        return []
    if isinstance(raw, str):
        return [p.upper() for p in raw.replace(",", " ").split()]
    if not isinstance(raw, Sequence) or not all(_is_pair_like(p) for p in raw):
        raise ConfigurationError(f"Invalid plugboard pairs {raw!r}")
    return ["".join(p).upper() for p in raw]


# ────────────────────────────────────────────────────────────────────────
#  2. JSON settings file
# ────────────────────────────────────────────────────────────────────────

REQUIRED_KEYS = {"rotors", "positions", "rings"}


def _rotor_list(value: object) -> list:
    if isinstance(value, str) or not isinstance(value, Sequence):
        raise ConfigurationError(f"Invalid rotors setting {value!r}")
    return list(value)


def load_config(path: str | Path) -> dict:
    data = json.loads(Path(path).read_text(encoding="utf-8"))
    if not isinstance(data, dict):
        raise ValueError("Config file must hold a JSON object")
    missing = REQUIRED_KEYS - data.keys()
    if missing:
        raise ValueError(f"Missing keys in config: {', '.join(sorted(missing))}")

    return {
        "rotors": _rotor_list(data["rotors"]),
        "positions": parse_settings(data["positions"], "position"),
        "rings": parse_settings(data["rings"], "ring setting"),
        "plugs": parse_pairs(data.get("plugs", [])),
        "reflector": data.get("reflector", DEFAULT_REFLECTOR),
    }


# ────────────────────────────────────────────────────────────────────────
#  3. Display
# ────────────────────────────────────────────────────────────────────────


def format_blocks(text: str, block: int = 5) -> str:
    """Group the letters of *text* into blocks, dropping everything else."""
    if block <= 0:
        return text
    letters = "".join(ch for ch in text if ch in KEYBOARD)
    blocks = [letters[i : i + block] for i in range(0, len(letters), block)]
    return " ".join(blocks)


__all__ = [
    "ROTORS",
    "REFLECTORS",
    "RotorName",
    "RotorSpec",
    "resolve_rotor",
    "resolve_reflector",
    "parse_settings",
    "parse_pairs",
    "load_config",
    "format_blocks",
]
