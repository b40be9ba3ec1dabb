# machine.py  ─────────────────────────────────────────────────────
from __future__ import annotations

from collections.abc import Iterable, Sequence

from debug import debug
from keyboard_and_plugboard import Keyboard, Plugboard, PlugWire, normalise_wire
from rotor_and_reflector import Reflector, Rotor, RotorSpec


class Machine:
    """Rotor chain, reflector and plugboard wired into one key-press cycle.

    ``rotors[0]`` sits next to the plugboard and steps on every key-press;
    every rotor further out only moves when the one before it carries.
    """

    def __init__(
        self,
        rotor_specs: Sequence[RotorSpec],
        reflector: str,
        plugs: Iterable[str | PlugWire] = (),
    ) -> None:
        if not rotor_specs:
            raise ValueError("Machine needs at least one rotor")

        self.kb = Keyboard()
        self.rotors: list[Rotor] = [Rotor.from_spec(spec) for spec in rotor_specs]
        self.reflector = Reflector(reflector)
        self.pb = Plugboard(plugs)

    # ── key & plug helpers ──────────────────────────────────────

    def set_window(self, letters: str) -> None:
        """Rotate each rotor to its visible window letter.

        All letters are checked first, so a bad one leaves every rotor put.
        """
        self.kb.validate(letters[: len(self.rotors)])
        for rotor, letter in zip(self.rotors, letters):
            rotor.set_window(letter)

    @property
    def window(self) -> str:
        return "".join(r.window for r in self.rotors)

    def add_plug_wire(self, wire: str | PlugWire) -> PlugWire:
        return self.pb.add_wire(*normalise_wire(wire))

    def set_reflector(self, wiring: str) -> None:
        self.reflector.set_wiring(wiring)

    # ── stepping logic  ─────────────────────────────────────────

    def _step_rotors(self) -> None:
        """Advance rotors one key-press; carries run outward from rotors[0]."""
        carry = True
        for rotor in self.rotors:
            if not carry:
                break
            carry = rotor.step()        # .step() returns bool turnover

    # ── encipher one symbol  ────────────────────────────────────

    def encode_character(self, letter: str) -> str:
        signal = self.kb.forward(letter)

        self._step_rotors()
        debug.log("stepping", f"Windows {self.window}")

        signal = self.pb.forward(signal)

        for rotor in self.rotors:
            signal = rotor.forward(signal)

        signal = self.reflector.reflect(signal)

        for rotor in reversed(self.rotors):
            signal = rotor.backward(signal)

        signal = self.pb.backward(signal)
        out_ch = self.kb.backward(signal)
        debug.log("encipher", f"{letter}->{out_ch}")
        return out_ch

    def encode_str(self, text: str) -> str:
        self.kb.validate(text)
        return "".join(self.encode_character(ch) for ch in text)

    def __repr__(self) -> str:
        return f"<Machine rotors={len(self.rotors)} window={self.window} {self.pb!r}>"
