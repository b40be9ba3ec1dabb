# errors.py
from __future__ import annotations


class EnigmaError(ValueError):
    """Base class for every recoverable machine error."""


# ── wiring ────────────────────────────────────────────────────────
class WiringError(EnigmaError):
    pass


class InvalidLengthError(WiringError):
    def __init__(self, length: int, expected: int = 26) -> None:
        super().__init__(f"Wiring must have {expected} symbols, got {length}")
        self.length = length
        self.expected = expected


class InvalidWiringError(WiringError):
    def __init__(self, forward: str, backward: str) -> None:
        super().__init__(
            f"Wiring {forward!r} / {backward!r} is not a permutation pair "
            "(backward must be the exact inverse of forward)"
        )
        self.forward = forward
        self.backward = backward


# ── plugboard ─────────────────────────────────────────────────────
class PlugboardError(EnigmaError):
    pass


class PlugboardConflictError(PlugboardError):
    def __init__(self, wire: tuple[str, str]) -> None:
        a, b = wire
        super().__init__(f"Plug {a}{b} rejected: {a!r} or {b!r} is already wired")
        self.wire = wire


# ── input ─────────────────────────────────────────────────────────
class InvalidCharacterError(EnigmaError):
    def __init__(self, char: str) -> None:
        super().__init__(f"Invalid character {char!r} for current alphabet.")
        self.char = char
