"""
Rotor and Reflector tests
=========================
Run with:  python -m pytest tests/ -v
"""

import pytest

from errors import ConfigurationError
from keyboard_and_plugboard import ALPHABET
from rotor_and_reflector import Reflector, Rotor
from utilities import REFLECTORS, ROTORS, RotorName

ROTOR_I = ROTORS[RotorName.I]

# ── construction ─────────────────────────────────────────────────────────────
def test_rotor_keeps_its_settings():
    rotor = Rotor(ALPHABET, "A", 0, 5)
    assert rotor.wiring == ALPHABET
    assert rotor.notch == "A"
    assert rotor.ring_setting == 0
    assert rotor.position == 5
    assert rotor.window == "F"

@pytest.mark.parametrize("kwargs", [
    dict(wiring="ABC", notch="A"),
    dict(wiring=ALPHABET[:-1] + "A", notch="A"),
    dict(wiring=ALPHABET, notch="QQ"),
    dict(wiring=ALPHABET, notch="1"),
    dict(wiring=ALPHABET, notch="A", ring_setting=26),
    dict(wiring=ALPHABET, notch="A", ring_setting=-1),
    dict(wiring=ALPHABET, notch="A", position=26),
    dict(wiring=ALPHABET, notch="A", position="A"),
    dict(wiring=ALPHABET, notch="A", position=True),
])
def test_rotor_rejects_bad_settings(kwargs):
    with pytest.raises(ConfigurationError):
        Rotor(**kwargs)

# ── stepping ─────────────────────────────────────────────────────────────────
def test_step_wraps_around():
    rotor = Rotor(ALPHABET, "A", 0, 0)
    rotor.step()
    assert rotor.position == 1
    rotor.position = 25
    rotor.step()
    assert rotor.position == 0

def test_at_notch():
    rotor = Rotor(ALPHABET, "E", 0, 4)
    assert rotor.at_notch()
    rotor.step()
    assert not rotor.at_notch()

def test_step_returns_nothing():
    assert Rotor(ALPHABET, "A").step() is None

# ── substitution ─────────────────────────────────────────────────────────────
def test_forward_uses_wiring():
    rotor = Rotor(ROTOR_I.wiring, ROTOR_I.notch, 0, 0)
    assert rotor.forward("A") == "E"
    assert rotor.forward("B") == "K"

def test_backward_inverts_wiring():
    rotor = Rotor(ROTOR_I.wiring, ROTOR_I.notch, 0, 0)
    assert rotor.backward("E") == "A"

def test_ring_setting_shifts_wiring():
    # Rotor I with ring B at window A sends A to K
    rotor = Rotor(ROTOR_I.wiring, ROTOR_I.notch, 1, 0)
    assert rotor.forward("A") == "K"

def test_position_shifts_wiring():
    # window B: contact A meets wiring entry B (K), shifted back by one
    rotor = Rotor(ROTOR_I.wiring, ROTOR_I.notch, 0, 1)
    assert rotor.forward("A") == "J"

def test_forward_is_pure():
    rotor = Rotor(ROTOR_I.wiring, ROTOR_I.notch, 3, 7)
    rotor.forward("Q")
    rotor.backward("Q")
    assert (rotor.position, rotor.ring_setting) == (7, 3)

@pytest.mark.parametrize("spec", ROTORS, ids=lambda s: s.name)
@pytest.mark.parametrize("ring", range(26))
def test_backward_undoes_forward_everywhere(spec, ring):
    for position in range(26):
        rotor = Rotor(spec.wiring, spec.notch, ring, position)
        for letter in ALPHABET:
            assert rotor.backward(rotor.forward(letter)) == letter

# ── reflector ────────────────────────────────────────────────────────────────
@pytest.mark.parametrize("name", sorted(REFLECTORS))
def test_reflector_is_involution_without_fixed_points(name):
    reflector = REFLECTORS[name]
    for letter in ALPHABET:
        out = reflector.reflect(letter)
        assert out != letter
        assert reflector.reflect(out) == letter

def test_reflector_b_wiring():
    assert REFLECTORS["B"].reflect("A") == "Y"
    assert REFLECTORS["B"].reflect("Y") == "A"

@pytest.mark.parametrize("wiring", [
    ALPHABET,                        # every letter maps to itself
    ALPHABET[1:] + ALPHABET[0],      # a rotation is not an involution
    "YRUHQSLDPXNGOKMIEBFZCWVJA",     # too short
    "YRUHQSLDPXNGOKMIEBFZCWVJA1",    # foreign symbol
])
def test_reflector_rejects_bad_wiring(wiring):
    with pytest.raises(ConfigurationError):
        Reflector(wiring)
