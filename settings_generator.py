# settings_generator.py
from __future__ import annotations

import argparse
import json
from pathlib import Path
from random import Random, SystemRandom
from typing import Dict, List, Sequence

from keyboard_and_plugboard import ALPHABET
from wheels import REFLECTORS, ROTORS

MAX_PAIRS = len(ALPHABET) // 2

# ── helpers ───────────────────────────────────────────────────────


def build_rng(seed: int | None) -> Random | SystemRandom:
    """Deterministic RNG when *seed* given; CSPRNG otherwise."""
    return Random(seed) if seed is not None else SystemRandom()


def choose_pairs(alpha: str, k: int, rng: Random | SystemRandom) -> List[str]:
    """Return *k* disjoint plug pairs."""
    k = min(k, len(alpha) // 2)
    pool = list(alpha)
    rng.shuffle(pool)
    return [a + b for a, b in zip(pool[::2], pool[1::2])][:k]


def generate_settings(
    rng: Random | SystemRandom,
    *,
    n_rotors: int = 3,
    n_pairs: int = 10,
) -> Dict:
    """Pick a random machine configuration in the ``main.load_config`` format."""
    if not 1 <= n_rotors <= len(ROTORS):
        raise ValueError(f"Rotor count must be 1–{len(ROTORS)}, got {n_rotors}")
    if not 0 <= n_pairs <= MAX_PAIRS:
        raise ValueError(f"Plug pairs must be 0–{MAX_PAIRS}, got {n_pairs}")

    rotors = rng.sample(sorted(ROTORS), n_rotors)
    return {
        "rotors": rotors,
        "reflector": rng.choice(sorted(REFLECTORS)),
        "window": "".join(rng.choices(ALPHABET, k=n_rotors)),
        "plugs": choose_pairs(ALPHABET, n_pairs, rng),
    }


def parse_cli(argv: Sequence[str] | None = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Generate a random machine config")
    p.add_argument("--seed", type=int, help="Deterministic seed (omit for random)")
    p.add_argument("--rotors", type=int, default=3, help="How many rotors (default 3)")
    p.add_argument("--pairs", type=int, default=10, help="How many plug pairs (default 10)")
    p.add_argument(
        "--outfile",
        type=Path,
        default=Path("rotor_config.json"),
        help="Destination JSON file (default: rotor_config.json)",
    )
    return p.parse_args(argv)


# ── main ─────────────────────────────────────────────────────────


def main(argv: Sequence[str] | None = None) -> None:
    args = parse_cli(argv)
    try:
        cfg = generate_settings(build_rng(args.seed), n_rotors=args.rotors, n_pairs=args.pairs)
    except ValueError as exc:
        raise SystemExit(f"❌  {exc}")

    args.outfile.write_text(json.dumps(cfg, indent=2), encoding="utf-8")
    print(f"✅  Wrote {args.outfile}\n"
        f"   rotors      : {cfg['rotors']}\n"
        f"   reflector   : {cfg['reflector']}\n"
        f"   window      : {cfg['window']}\n"
        f"   plug pairs  : {len(cfg['plugs'])}")


if __name__ == "__main__":
    main()
