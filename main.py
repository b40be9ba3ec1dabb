# main.py
from __future__ import annotations

import argparse
import json
import os
from dataclasses import asdict, dataclass, field
from pathlib import Path
from typing import List, Sequence

from debug import debug
from errors import EnigmaError
from machine import Machine
from utilities import group_blocks, parse_plug_pairs, preprocess_message, resolve_reflector
from wheels import rotor_spec

DEFAULT_CONFIG = Path("rotor_config.json")
DEBUG_ENV = "ROTOR_DEBUG"

# ────────────────────────────────────────────────────────────────────────
#  0. Configuration
# ────────────────────────────────────────────────────────────────────────


@dataclass(slots=True)
class MachineConfig:
    """Machine settings as stored in the JSON config file."""

    rotors: List[str]               # rotors[0] sits next to the plugboard
    reflector: str                  # wheel name or literal wiring
    window: str = ""
    plugs: List[str] = field(default_factory=list)

    def __post_init__(self) -> None:
        if not self.window:
            self.window = "A" * len(self.rotors)

    @classmethod
    def from_dict(cls, data: dict) -> "MachineConfig":
        required = {"rotors", "reflector"}
        missing = required - data.keys()
        if missing:
            raise ValueError(f"Missing keys in config: {', '.join(sorted(missing))}")
        return cls(
            rotors=list(data["rotors"]),
            reflector=data["reflector"],
            window=data.get("window", ""),
            plugs=list(data.get("plugs", [])),
        )

    def to_dict(self) -> dict:
        return asdict(self)


def load_config(path: str | Path) -> MachineConfig:
    data = json.loads(Path(path).read_text(encoding="utf-8"))
    return MachineConfig.from_dict(data)


def build_machine(cfg: MachineConfig) -> Machine:
    """Build a machine and key it to ``cfg.window``."""
    specs = [rotor_spec(name) for name in cfg.rotors]
    machine = Machine(specs, resolve_reflector(cfg.reflector), parse_plug_pairs(cfg.plugs))
    machine.set_window(cfg.window.upper())
    return machine


# ────────────────────────────────────────────────────────────────────────
#  1. Encoding helpers
# ────────────────────────────────────────────────────────────────────────


def encode_message(machine: Machine, cfg: MachineConfig, text: str) -> str:
    """Rewind to the configured window and encode *text* once."""
    machine.set_window(cfg.window.upper())
    return machine.encode_str(preprocess_message(text))


# ────────────────────────────────────────────────────────────────────────
#  2. CLI helpers
# ────────────────────────────────────────────────────────────────────────


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Encode or decode with a rotor cipher machine")
    p.add_argument("-m", "--message", metavar="TEXT", help="Text to encode. If omitted, an interactive REPL starts.")
    p.add_argument("--config", metavar="FILE", help=f"Load machine settings from JSON (default: {DEFAULT_CONFIG} if present).")
    p.add_argument("--rotors", nargs="+", metavar="NAME", help="Rotor names, plugboard side first (e.g. I II III).")
    p.add_argument("--reflector", metavar="NAME|WIRING", help="Reflector name (A, B, C) or a 26-letter wiring.")
    p.add_argument("--window", metavar="LETTERS", help="Starting window letters, one per rotor.")
    p.add_argument("--plugs", nargs="*", metavar="PAIR", help="Plugboard pairs, e.g. AR QZ.")
    p.add_argument("--block", type=int, default=5, help="Output group size, 0 for none. Default: 5")
    p.add_argument(
        "--debug", nargs="+", metavar="COMPONENT",
        help="Enable debug logging for components (keyboard, plugboard, rotor, reflector, stepping, encipher, all).",
    )
    p.add_argument("--log-file", metavar="FILE", help="Also write debug logging to FILE.")
    return p.parse_args(argv)


def config_from_args(args: argparse.Namespace) -> MachineConfig:
    """File settings first, command-line flags on top."""
    cfg_path = Path(args.config) if args.config else DEFAULT_CONFIG
    if args.config or cfg_path.exists():
        cfg = load_config(cfg_path)
    else:
        cfg = MachineConfig(rotors=["I", "II", "III"], reflector="B")

    if args.rotors:
        cfg.rotors = list(args.rotors)
        if not args.window:
            cfg.window = "A" * len(cfg.rotors)
    if args.reflector:
        cfg.reflector = args.reflector
    if args.window:
        cfg.window = args.window.upper()
    if args.plugs is not None:
        cfg.plugs = list(args.plugs)
    return cfg


# ────────────────────────────────────────────────────────────────────────
#  3. Main entry point
# ────────────────────────────────────────────────────────────────────────


def main(argv: Sequence[str] | None = None) -> None:
    args = parse_args(argv)

    try:
        if args.log_file:
            debug.log_to_file(args.log_file)
        if os.environ.get(DEBUG_ENV):
            debug.enable_from_spec(os.environ[DEBUG_ENV])
        if args.debug:
            debug.enable_from_spec(args.debug)

        cfg = config_from_args(args)
        machine = build_machine(cfg)
    except (OSError, KeyError, ValueError) as exc:
        raise SystemExit(f"❌  Failed to set up machine: {exc}")

    # one‑shot mode ------------------------------------------------------
    if args.message is not None:
        try:
            out = encode_message(machine, cfg, args.message)
        except EnigmaError as exc:
            raise SystemExit(f"❌  {exc}")
        print(group_blocks(out, args.block))
        return

    # interactive REPL ---------------------------------------------------
    print(f"\nRotors {' '.join(cfg.rotors)}, reflector {cfg.reflector}, window {cfg.window}.")
    print("Type blank line to quit.\n")
    while True:
        txt = input("\nMessage > ")
        if not txt.strip():
            break
        cipher = encode_message(machine, cfg, txt)
        print("\nEncoded:", group_blocks(cipher, args.block))
        print("\nDecoded:", encode_message(machine, cfg, cipher))


if __name__ == "__main__":
    main()
