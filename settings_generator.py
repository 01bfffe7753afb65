# settings_generator.py
from __future__ import annotations

import argparse
import json
from pathlib import Path
from random import Random, SystemRandom
from typing import Dict, List

from enigma import Enigma
from keyboard_and_plugboard import ALPHABET, MAX_PAIRS
from utilities import REFLECTORS, ROTORS

# ── helpers ───────────────────────────────────────────────────────


def build_rng(seed: int | None) -> Random | SystemRandom:
    """Deterministic RNG when *seed* given; CSPRNG otherwise."""
    return Random(seed) if seed is not None else SystemRandom()


def choose_pairs(alpha: str, k: int, rng: Random | SystemRandom) -> List[str]:
    """Return *k* disjoint plug pairs."""
    k = max(0, min(k, len(alpha) // 2))
    pool = list(alpha)
    rng.shuffle(pool)
    return [a + b for a, b in zip(pool[::2], pool[1::2])][:k]


def generate_settings(rng: Random | SystemRandom, pairs: int = 10) -> Dict:
    size = len(ALPHABET)
    settings = {
        "rotors": [spec.name for spec in rng.sample(ROTORS, 3)],
        "positions": [rng.randrange(size) for _ in range(3)],
        "rings": [rng.randrange(size) for _ in range(3)],
        "plugs": choose_pairs(ALPHABET, pairs, rng),
        "reflector": rng.choice(sorted(REFLECTORS)),
    }
    # refuse to write anything a machine would not accept
    Enigma(settings["rotors"], settings["positions"], settings["rings"],
           settings["plugs"], settings["reflector"])
    return settings


def parse_cli(argv: List[str] | None = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Generate Enigma daily settings")
    p.add_argument("--seed", type=int, help="Deterministic seed (omit for random)")
    p.add_argument(
        "--pairs",
        type=int,
        default=10,
        choices=range(0, MAX_PAIRS + 1),
        metavar=f"0-{MAX_PAIRS}",
        help="Number of plugboard pairs (default: 10)",
    )
    p.add_argument(
        "--outfile",
        type=Path,
        default=Path("enigma_config.json"),
        help="Destination JSON file (default: enigma_config.json)",
    )
    return p.parse_args(argv)


# ── main ─────────────────────────────────────────────────────────


def main(argv: List[str] | None = None) -> None:
    args = parse_cli(argv)
    rng = build_rng(args.seed)
    cfg = generate_settings(rng, args.pairs)

    args.outfile.write_text(json.dumps(cfg, indent=2), encoding="utf-8")
    print(f"✅  Wrote {args.outfile}\n"
          f"   rotors      : {cfg['rotors']}\n"
          f"   reflector   : {cfg['reflector']}\n"
          f"   positions   : {cfg['positions']}\n"
          f"   rings       : {cfg['rings']}\n"
          f"   plug pairs  : {len(cfg['plugs'])}")


if __name__ == "__main__":
    main()
