# rotor_and_reflector.py
from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass

from debug import debug
from errors import InvalidCharacterError, InvalidLengthError, InvalidWiringError
from keyboard_and_plugboard import ALPHABET, SIZE


def is_wiring_valid(forward: Sequence[int], backward: Sequence[int]) -> bool:
    """True when both tables are bijections over 0..25 and mutual inverses."""
    if len(forward) != SIZE or len(backward) != SIZE:
        return False

    full = list(range(SIZE))
    if sorted(forward) != full or sorted(backward) != full:
        return False

    return all(backward[c] == i for i, c in enumerate(forward))


def _to_indices(wiring: str) -> list[int]:
    # unknown symbols become -1 so the validator rejects them
    return [ALPHABET.find(c) for c in wiring]


def _letter_index(letter: str) -> int:
    if not isinstance(letter, str) or len(letter) != 1 or letter not in ALPHABET:
        raise InvalidCharacterError(letter)
    return ALPHABET.index(letter)


@dataclass(slots=True)
class RotorSpec:
    """Everything needed to build one rotor."""

    forward: str
    backward: str
    notch: str
    window: str = "A"


class Rotor:
    def __init__(self, forward: str, backward: str, notch: str, window: str = "A") -> None:
        self._fwd: list[int] = list(range(SIZE))
        self._rev: list[int] = list(range(SIZE))
        self.offset = 0

        self.set_wiring(forward, backward)
        self.set_notch(notch)
        self.set_window(window)

    @classmethod
    def from_spec(cls, spec: RotorSpec) -> "Rotor":
        return cls(spec.forward, spec.backward, spec.notch, spec.window)

    # ── wiring ───────────────────────────────────────────────────
    def set_wiring(self, forward: str, backward: str) -> "Rotor":
        forward, backward = forward.upper(), backward.upper()
        for w in (forward, backward):
            if len(w) != SIZE:
                raise InvalidLengthError(len(w), SIZE)

        fwd, rev = _to_indices(forward), _to_indices(backward)
        if not is_wiring_valid(fwd, rev):
            raise InvalidWiringError(forward, backward)

        self._fwd, self._rev = fwd, rev
        debug.log("rotor", f"wired {forward}")
        return self

    @property
    def wiring(self) -> str:
        return "".join(ALPHABET[i] for i in self._fwd)

    # ── window & notch helpers ──────────────────────────────────
    def set_notch(self, notch: str) -> "Rotor":
        _letter_index(notch)
        self.notch = notch
        return self

    def set_window(self, letter: str) -> "Rotor":
        self.offset = _letter_index(letter)
        return self

    @property
    def window(self) -> str:
        return ALPHABET[self.offset]

    def at_notch(self) -> bool:
        return self.window == self.notch

    # ── stepping --------------------------------------------------
    def _rotate(self, steps: int = 1) -> None:
        self.offset = (self.offset + steps) % SIZE

    def step(self) -> bool:
        """Advance one and return True if the notch was showing (turnover).

        The notch is read *before* the move, so a rotor that lands on its
        notch only carries on the following key-press.
        """
        hit = self.at_notch()
        self._rotate(1)
        debug.log("stepping", f"Rotor window {self.window}, carry={hit}")
        return hit

    # ── signal paths ---------------------------------------------
    def forward(self, sig: int) -> int:
        shift = (sig - self.offset) % SIZE
        return (self._fwd[shift] + self.offset) % SIZE

    def backward(self, sig: int) -> int:
        shift = (sig - self.offset) % SIZE
        return (self._rev[shift] + self.offset) % SIZE

    # ── niceties --------------------------------------------------
    def __repr__(self) -> str:
        return f"<Rotor window={self.window} notch={self.notch}>"


class Reflector:
    """Fixed table between the two rotor passes.

    The table is stored as given. It is the caller's job to supply an
    involution; :meth:`is_involution` is there to check one.
    """

    def __init__(self, wiring: str) -> None:
        self._map: list[int] = []
        self.set_wiring(wiring)

    def set_wiring(self, wiring: str) -> None:
        if len(wiring) != SIZE:
            raise InvalidLengthError(len(wiring), SIZE)
        self._map = [_letter_index(c) for c in wiring]

    @property
    def wiring(self) -> str:
        return "".join(ALPHABET[i] for i in self._map)

    def reflect(self, sig: int) -> int:
        mapped = self._map[sig]
        debug.log("reflector", f"{ALPHABET[sig]}->{ALPHABET[mapped]}")
        return mapped

    def is_involution(self) -> bool:
        """True if wiring[wiring[i]] == i for all i."""
        return all(self._map[j] == i for i, j in enumerate(self._map))

    def __repr__(self) -> str:
        return f"<Reflector {self.wiring}>"
