# rotor_and_reflector.py
from __future__ import annotations

from debug import Debug
from errors import ConfigurationError
from keyboard_and_plugboard import KEYBOARD

debug = Debug()


def _check_setting(label: str, value: int, size: int) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise ConfigurationError(f"{label} must be an integer, got {value!r}")
    if not (0 <= value < size):
        raise ConfigurationError(f"{label} {value} out of range 0–{size - 1}")
    return value


class Rotor:
    def __init__(
        self,
        wiring: str,
        notch: str,
        ring_setting: int = 0,
        position: int = 0,
    ) -> None:
        alphabet = KEYBOARD.alphabet
        if sorted(wiring) != sorted(alphabet):
            raise ConfigurationError("wiring must be a permutation of alphabet")
        if len(notch) != 1 or notch not in KEYBOARD:
            raise ConfigurationError(f"Notch {notch!r} must be a single alphabet letter")

        self.size = KEYBOARD.size
        self.wiring = wiring
        self.notch = notch

        # integer lookup tables
        self._fwd = [KEYBOARD.forward(c) for c in wiring]
        self._rev = [wiring.index(c) for c in alphabet]

        self.ring_setting = _check_setting("Ring setting", ring_setting, self.size)
        self.position = _check_setting("Position", position, self.size)

    # ── stepping --------------------------------------------------
    def step(self) -> None:
        self.position = (self.position + 1) % self.size
        debug.log("rotor", f"{self.wiring[:3]}… pos {self.position}")

    def at_notch(self) -> bool:
        return self.position == KEYBOARD.forward(self.notch)

    @property
    def window(self) -> str:
        """Letter currently showing in the machine window."""
        return KEYBOARD.backward(self.position)

    # ── signal paths ---------------------------------------------
    def forward(self, letter: str) -> str:
        offset = self.position - self.ring_setting
        shift = (KEYBOARD.forward(letter) + offset) % self.size
        mapped = self._fwd[shift]
        return KEYBOARD.backward((mapped - offset) % self.size)

    def backward(self, letter: str) -> str:
        offset = self.position - self.ring_setting
        shift = (KEYBOARD.forward(letter) + offset) % self.size
        mapped = self._rev[shift]
        return KEYBOARD.backward((mapped - offset) % self.size)

    # ── niceties --------------------------------------------------
    def __repr__(self) -> str:
        return f"<Rotor pos={self.position} ring={self.ring_setting} notch={self.notch}>"


class Reflector:
    def __init__(self, wiring: str) -> None:
        alphabet = KEYBOARD.alphabet
        if len(wiring) != len(alphabet):
            raise ConfigurationError("Reflector wiring length must match alphabet length")

        # ensure involution property (w[i] = j ⇒ w[j] = i) and no self-maps
        for i, c in enumerate(wiring):
            if c not in KEYBOARD:
                raise ConfigurationError(f"Reflector symbol {c!r} not in alphabet")
            j = KEYBOARD.forward(c)
            if wiring[j] != alphabet[i] or i == j:
                raise ConfigurationError(
                    "Reflector wiring must be an involution with no fixed points"
                )

        self.wiring = wiring
        self._map = {a: b for a, b in zip(alphabet, wiring)}

    def reflect(self, letter: str) -> str:
        mapped = self._map[letter]
        debug.log("reflector", f"{letter}->{mapped}")
        return mapped

    def __repr__(self) -> str:
        return f"<Reflector {self.wiring[:6]}…>"
