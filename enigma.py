# enigma.py  ───────────────────────────────────────────────────────
from __future__ import annotations

from collections.abc import Sequence

from debug import Debug
from errors import ConfigurationError
from keyboard_and_plugboard import KEYBOARD, Plugboard
from rotor_and_reflector import Rotor
from utilities import DEFAULT_REFLECTOR, resolve_reflector, resolve_rotor

debug = Debug()

ROTOR_COUNT = 3


def _require_three(label: str, values: Sequence) -> list:
    values = list(values)
    if len(values) != ROTOR_COUNT:
        raise ConfigurationError(
            f"Need exactly {ROTOR_COUNT} {label}, got {len(values)}"
        )
    return values


class Enigma:
    """Three-rotor Enigma: rotors are held left, middle, right.

    A machine is mutable; every enciphered letter advances the rotors.
    To decipher, build a second machine with the same settings (or call
    :meth:`set_positions` with the original start positions).
    """

    def __init__(
        self,
        rotors: Sequence[int | str],
        positions: Sequence[int],
        ring_settings: Sequence[int],
        plugboard: Sequence[str | Sequence[str]] = (),
        reflector: str = DEFAULT_REFLECTOR,
    ) -> None:
        specs = [resolve_rotor(r) for r in _require_three("rotors", rotors)]
        positions = _require_three("positions", positions)
        ring_settings = _require_three("ring settings", ring_settings)

        self.rotor_names = [spec.name for spec in specs]
        self.rotors = [
            Rotor(spec.wiring, spec.notch, ring, pos)
            for spec, ring, pos in zip(specs, ring_settings, positions)
        ]
        self.plugboard = Plugboard(plugboard)
        self.reflector = resolve_reflector(reflector)

    # ── key helpers ─────────────────────────────────────────────

    def set_positions(self, positions: Sequence[int]) -> None:
        """Rotate each rotor to a new start position (validated first)."""
        positions = _require_three("positions", positions)
        for pos in positions:
            if isinstance(pos, bool) or not isinstance(pos, int) or not (0 <= pos < KEYBOARD.size):
                raise ConfigurationError(f"Position {pos!r} out of range 0–{KEYBOARD.size - 1}")
        for rotor, pos in zip(self.rotors, positions):
            rotor.position = pos

    @property
    def window(self) -> str:
        """Visible rotor letters, left to right."""
        return "".join(rotor.window for rotor in self.rotors)

    # ── stepping logic  ─────────────────────────────────────────

    def _step_rotors(self) -> None:
        """Advance rotors for one key-press, double-step included."""
        left, middle, right = self.rotors

        # snapshot before anything moves this key-press
        middle_at_notch = middle.at_notch()

        if right.at_notch():
            middle.step()
        if middle_at_notch:
            left.step()
            middle.step()
        right.step()

        debug.log("stepping", f"window {self.window}")

    # ── encipher one symbol  ────────────────────────────────────

    def encrypt_char(self, char: str) -> str:
        if char not in KEYBOARD:
            return char

        self._step_rotors()

        letter = self.plugboard.swap(char)

        for rotor in reversed(self.rotors):
            letter = rotor.forward(letter)

        letter = self.reflector.reflect(letter)

        for rotor in self.rotors:
            letter = rotor.backward(letter)

        out_ch = self.plugboard.swap(letter)
        debug.log("encipher", f"{char}->{out_ch}")
        return out_ch

    def process(self, text: str) -> str:
        return "".join(self.encrypt_char(ch) for ch in text.upper())

    def __repr__(self) -> str:
        return (
            f"<Enigma rotors={'-'.join(self.rotor_names)} window={self.window} "
            f"{self.plugboard!r}>"
        )
