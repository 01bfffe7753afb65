# keyboard_and_plugboard.py
from __future__ import annotations

import string
from collections.abc import Sequence

from debug import Debug
from errors import ConfigurationError

debug = Debug()

ALPHABET = string.ascii_uppercase
MAX_PAIRS = len(ALPHABET) // 2


# ── Keyboard ──────────────────────────────────────────────────────
class Keyboard:
    def __init__(self, alphabet: str = ALPHABET) -> None:
        self.alphabet: str = alphabet
        self.size: int = len(alphabet)
        self.alpha_to_index: dict[str, int] = {
            ch: i for i, ch in enumerate(alphabet)
        }

    def __contains__(self, letter: object) -> bool:
        return letter in self.alpha_to_index

    # letter → integer signal
    def forward(self, letter: str) -> int:
        try:
            return self.alpha_to_index[letter]
        except KeyError:
            raise ValueError(
                f"Invalid character {letter!r} for current alphabet."
            )

    # integer signal → letter
    def backward(self, signal: int) -> str:
        if not (0 <= signal < self.size):
            hi = self.size - 1
            raise ValueError(f"Signal {signal} out of range 0–{hi}")
        return self.alphabet[signal]


KEYBOARD = Keyboard(ALPHABET)


# ── Plugboard ─────────────────────────────────────────────────────


def _normalise_pair(raw: str | Sequence[str]) -> tuple[str, str]:
    if not isinstance(raw, Sequence) or len(raw) != 2:
        raise ConfigurationError(f"Pair {raw!r} must be exactly 2 symbols")
    a, b = raw
    return str(a).upper(), str(b).upper()


def plugboard_swap(letter: str, pairs: Sequence[str | Sequence[str]]) -> str:
    """Return the partner of *letter* in *pairs*, or *letter* itself."""
    for raw in pairs:
        a, b = _normalise_pair(raw)
        if letter == a:
            return b
        if letter == b:
            return a
    return letter


class Plugboard:
    def __init__(self, pairs: Sequence[str | Sequence[str]] = ()) -> None:
        if len(pairs) > MAX_PAIRS:
            raise ConfigurationError(
                f"Too many plugboard pairs ({len(pairs)}), max {MAX_PAIRS}"
            )

        self.mapping: dict[str, str] = {ch: ch for ch in ALPHABET}
        self._pairs: list[tuple[str, str]] = []
        used: set[str] = set()

        for raw in pairs:
            a, b = _normalise_pair(raw)

            if a == b:
                raise ConfigurationError(f"Plugboard cannot map a symbol to itself: {a}")
            if a not in KEYBOARD or b not in KEYBOARD:
                bad = a if a not in KEYBOARD else b
                raise ConfigurationError(f"Symbol {bad!r} not in alphabet")
            if a in used or b in used:
                dup = a if a in used else b
                raise ConfigurationError(f"Character {dup!r} already used in plugboard")

            # passed validation → commit swap
            self.mapping[a], self.mapping[b] = b, a
            self._pairs.append((a, b))
            used.update((a, b))

    @property
    def pairs(self) -> list[tuple[str, str]]:
        return list(self._pairs)

    # applied on the way in and again on the way out
    def swap(self, letter: str) -> str:
        mapped = self.mapping.get(letter, letter)
        debug.log("plugboard", f"{letter}->{mapped}")
        return mapped

    # nicety for debugging
    def __repr__(self) -> str:
        swaps = [f"{a}{b}" for a, b in self._pairs]
        return f"<Plugboard {' '.join(swaps)}>"
