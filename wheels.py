# wheels.py
"""Historical wheel tables.

Plain data: swap or extend these without touching the engine.
"""
from __future__ import annotations

from dataclasses import replace
from typing import Dict

from rotor_and_reflector import RotorSpec

# Rotors ----------------------------------------------------------------
I   = RotorSpec("EKMFLGDQVZNTOWYHXUSPAIBRCJ", "UWYGADFPVZBECKMTHXSLRINQOJ", notch="Q")
II  = RotorSpec("AJDKSIRUXBLHWTMCQGZNPYFVOE", "AJPCZWRLFBDKOTYUQGENHXMIVS", notch="E")
III = RotorSpec("BDFHJLCPRTXVZNYEIWGAKMUSQO", "TAGBPCSDQEUFVNZHYIXJWLRKOM", notch="V")
IV  = RotorSpec("ESOVPZJAYQUIRHXLNFTGKDCMWB", "HZWVARTNLGUPXQCEJMBSKDYOIF", notch="J")
V   = RotorSpec("VZBRGITYUPSDNHLXAWMJQOFECK", "QCYLXWENFTZOSMVJUDKGIARPHB", notch="Z")

# Reflectors ------------------------------------------------------------
A = "EJMZALYXVBWFCRQUONTSPIKHGD"
B = "YRUHQSLDPXNGOKMIEBFZCWVJAT"
C = "FVPJIAOYEDRZXWGCTKUQSBNMHL"

ROTORS: Dict[str, RotorSpec] = {"I": I, "II": II, "III": III, "IV": IV, "V": V}
REFLECTORS: Dict[str, str] = {"A": A, "B": B, "C": C}


def rotor_spec(name: str, window: str = "A") -> RotorSpec:
    """Return a fresh copy of the named rotor, set to *window*."""
    try:
        base = ROTORS[name.upper()]
    except KeyError:
        raise KeyError(
            f"Unknown rotor {name!r}. Expected one of {list(ROTORS)}"
        ) from None
    return replace(base, window=window)


def reflector_wiring(name: str) -> str:
    try:
        return REFLECTORS[name.upper()]
    except KeyError:
        raise KeyError(
            f"Unknown reflector {name!r}. Expected one of {list(REFLECTORS)}"
        ) from None


__all__ = ["ROTORS", "REFLECTORS", "rotor_spec", "reflector_wiring"]
