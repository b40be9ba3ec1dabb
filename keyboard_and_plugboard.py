# keyboard_and_plugboard.py
from __future__ import annotations

import string
from collections.abc import Iterable

from debug import debug
from errors import InvalidCharacterError, PlugboardConflictError, PlugboardError

ALPHABET = string.ascii_uppercase
SIZE = len(ALPHABET)

PlugWire = tuple[str, str]


# ── Keyboard ──────────────────────────────────────────────────────
class Keyboard:
    def __init__(self, alphabet: str = ALPHABET) -> None:
        self.alphabet: str = alphabet
        self.alpha_to_index: dict[str, int] = {
            ch: i for i, ch in enumerate(alphabet)
        }

    def __contains__(self, letter: object) -> bool:
        return letter in self.alpha_to_index

    # letter → integer signal
    def forward(self, letter: str) -> int:
        try:
            sig = self.alpha_to_index[letter]
        except (KeyError, TypeError):
            raise InvalidCharacterError(letter) from None
        debug.log("keyboard", f"{letter}->{sig}")
        return sig

    # integer signal → letter
    def backward(self, signal: int) -> str:
        if not (0 <= signal < len(self.alphabet)):
            hi = len(self.alphabet) - 1
            raise ValueError(f"Signal {signal} out of range 0–{hi}")
        return self.alphabet[signal]

    def validate(self, text: str) -> None:
        """Raise on the first symbol that is not on the keyboard."""
        for ch in text:
            if ch not in self:
                raise InvalidCharacterError(ch)


# ── Plugboard ─────────────────────────────────────────────────────
def normalise_wire(raw: str | Iterable[str]) -> PlugWire:
    """Accept ``"AR"`` or ``("A", "R")`` and return ``("A", "R")``."""
    if isinstance(raw, str):
        if len(raw) != 2:
            raise PlugboardError(f"Pair {raw!r} must be exactly 2 symbols")
        a, b = raw
    else:
        pair = tuple(raw)
        if len(pair) != 2:
            raise PlugboardError(f"Pair {pair!r} must be exactly 2 symbols")
        a, b = pair
    return a, b


class Plugboard:
    """Letter swaps applied once on the way in and once on the way out.

    The board starts as the identity and only ever gains wires, so the
    mapping is an involution at all times.
    """

    def __init__(self, pairs: Iterable[str | PlugWire] = ()) -> None:
        self._map: list[int] = list(range(SIZE))
        for raw in pairs:
            self.add_wire(*normalise_wire(raw))

    def add_wire(self, a: str, b: str) -> PlugWire:
        for ch in (a, b):
            if not isinstance(ch, str) or len(ch) != 1 or ch not in ALPHABET:
                raise InvalidCharacterError(ch)
        if a == b:
            raise PlugboardError(f"Plugboard cannot map a symbol to itself: {a}")

        ia, ib = ALPHABET.index(a), ALPHABET.index(b)
        if self._map[ia] != ia or self._map[ib] != ib:
            raise PlugboardConflictError((a, b))

        # passed validation → commit swap
        self._map[ia], self._map[ib] = ib, ia
        debug.log("plugboard", f"wired {a}<->{b}")
        return a, b

    def encode_index(self, signal: int) -> int:
        mapped = self._map[signal]
        debug.log("plugboard", f"{ALPHABET[signal]}->{ALPHABET[mapped]}")
        return mapped

    forward = encode_index        # alias: signal in
    backward = encode_index       # alias: signal out

    def mapped_letter(self, letter: str) -> str:
        return ALPHABET[self._map[ALPHABET.index(letter)]]

    @property
    def wires(self) -> list[PlugWire]:
        return [
            (ALPHABET[i], ALPHABET[j]) for i, j in enumerate(self._map) if i < j
        ]

    def __len__(self) -> int:
        return len(self.wires)

    # nicety for debugging
    def __repr__(self) -> str:
        swaps = [a + b for a, b in self.wires]
        return f"<Plugboard {' '.join(swaps)}>"
