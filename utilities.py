# utilities.py
from __future__ import annotations

from typing import Iterable, List

from keyboard_and_plugboard import ALPHABET, PlugWire, normalise_wire
from wheels import REFLECTORS, reflector_wiring


# ────────────────────────────────────────────────────────────────────────
#  1. Text preprocessing
# ────────────────────────────────────────────────────────────────────────


def preprocess_message(msg: str, alpha: str = ALPHABET) -> str:
    """Upper-case and drop every symbol the keyboard does not carry."""
    return "".join(ch for ch in msg.upper() if ch in alpha)


def group_blocks(text: str, block: int) -> str:
    """``ABCDEFG`` → ``ABCDE FG`` for *block* = 5; 0 leaves text alone."""
    if block <= 0:
        return text
    return " ".join(text[i : i + block] for i in range(0, len(text), block))


# ────────────────────────────────────────────────────────────────────────
#  2. Settings parsing
# ────────────────────────────────────────────────────────────────────────


def parse_plug_pairs(raw: Iterable[str] | str) -> List[PlugWire]:
    """Turn ``"AB CD"`` or ``["ab", "CD"]`` into ``[("A", "B"), ("C", "D")]``.

    Only the shape is checked here; conflicts are left to the plugboard.
    """
    items = raw.split() if isinstance(raw, str) else list(raw)
    return [normalise_wire(item.strip().upper()) for item in items]


def resolve_reflector(value: str) -> str:
    """Accept a reflector name (``B``) or a literal 26-letter table."""
    if value.upper() in REFLECTORS:
        return reflector_wiring(value)
    if len(value) == len(ALPHABET):
        return value.upper()
    raise ValueError(
        f"Reflector {value!r} is neither a known name {list(REFLECTORS)} "
        f"nor a {len(ALPHABET)}-letter wiring"
    )
