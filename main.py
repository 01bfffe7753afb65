# main.py
from __future__ import annotations

import argparse
import os
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, List

from debug import COMPONENTS, Debug
from enigma import Enigma
from utilities import (
    DEFAULT_SETTINGS,
    format_blocks,
    load_config,
    parse_pairs,
    parse_settings,
)

# ────────────────────────────────────────────────────────────────────────
#  0. Configuration & logging
# ────────────────────────────────────────────────────────────────────────


debug = Debug()

DEFAULT_CONFIG_FILE = Path("enigma_config.json")


@dataclass(slots=True)
class Config:
    """Runtime switches for console output."""

    block: int = 0                  # display block size, 0 = as typed
    verify: bool = False            # echo a fresh-machine decipher


# ────────────────────────────────────────────────────────────────────────
#  1. MachineContext – wraps an Enigma & rewind logic
# ────────────────────────────────────────────────────────────────────────


class MachineContext:
    """Keeps the daily settings so every message starts from the same key."""

    def __init__(self, settings: Dict[str, object]) -> None:
        self.rotors: List = list(settings["rotors"])
        self.positions: List[int] = list(settings["positions"])
        self.rings: List[int] = list(settings["rings"])
        self.plugs: List[str] = list(settings.get("plugs", []))
        self.reflector: str = settings.get("reflector", DEFAULT_SETTINGS["reflector"])

        self.machine = self.build()

    def build(self) -> Enigma:
        """Return a brand-new machine at the start positions."""
        return Enigma(self.rotors, self.positions, self.rings, self.plugs, self.reflector)

    # ––– helpers ––––––––––––––––––––––––––––––––––––––––––––––––

    def rewind(self) -> None:
        """Reset the machine to the configured start positions."""
        self.machine.set_positions(self.positions)

    def encipher(self, text: str) -> str:
        self.rewind()
        return self.machine.process(text)

    def decipher_fresh(self, text: str) -> str:
        """Decipher with an independent machine, as a receiver would."""
        return self.build().process(text)


# ────────────────────────────────────────────────────────────────────────
#  2. Settings resolution
# ────────────────────────────────────────────────────────────────────────


def resolve_settings(args: argparse.Namespace) -> Dict[str, object]:
    """Flags win over a config file, which wins over the defaults."""
    settings: Dict[str, object] = dict(DEFAULT_SETTINGS)

    cfg_path = args.config or os.environ.get("ENIGMA_CONFIG")
    if cfg_path:
        settings.update(load_config(cfg_path))
    elif DEFAULT_CONFIG_FILE.exists():
        settings.update(load_config(DEFAULT_CONFIG_FILE))

    if args.rotors:
        settings["rotors"] = args.rotors
    if args.positions:
        settings["positions"] = parse_settings(args.positions, "position")
    if args.rings:
        settings["rings"] = parse_settings(args.rings, "ring setting")
    if args.plugs is not None:
        settings["plugs"] = parse_pairs(args.plugs)
    if args.reflector:
        settings["reflector"] = args.reflector
    return settings


# ────────────────────────────────────────────────────────────────────────
#  3. CLI helpers
# ────────────────────────────────────────────────────────────────────────


def parse_args(argv: List[str] | None = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Encrypt or decrypt with a three-rotor Enigma")
    p.add_argument("-m", "--message", metavar="TEXT", help="Text to encipher. If omitted, an interactive loop starts.")
    p.add_argument("--config", metavar="FILE", help="Load daily settings from JSON (default: $ENIGMA_CONFIG or ./enigma_config.json).")
    p.add_argument("--rotors", nargs=3, metavar="ROTOR", help="Three rotors, left to right, e.g. I II III or 0 1 2.")
    p.add_argument("--positions", metavar="KEY", help="Start positions as letters (ADU) or numbers (\"0 3 20\").")
    p.add_argument("--rings", metavar="RINGS", help="Ring settings as letters or numbers, 0-based.")
    p.add_argument("--plugs", metavar="PAIRS", help="Plugboard pairs, e.g. \"AB CD EF\". Empty string for none.")
    p.add_argument("--reflector", choices=["A", "B", "C"], help="Reflector wiring. Default: B")
    p.add_argument("--block", type=int, default=0, help="Group output in blocks of N letters (drops spaces and punctuation). Default: 0, as typed")
    p.add_argument("--verify", action="store_true", help="Also decipher the result with a fresh machine.")
    p.add_argument("--debug", action="append", default=[], choices=[*COMPONENTS, "all"], help="Log a machine component (repeatable).")
    return p.parse_args(argv)


def emit(ctx: MachineContext, cfg: Config, text: str) -> None:
    shown = format_blocks(ctx.encipher(text), cfg.block)
    print("Encrypted:", shown)
    if cfg.verify:
        # decipher what the operator actually sees
        print("Decrypted:", ctx.decipher_fresh(shown))


# ────────────────────────────────────────────────────────────────────────
#  4. Main entry point
# ────────────────────────────────────────────────────────────────────────


def main(argv: List[str] | None = None) -> None:
    args = parse_args(argv)

    try:
        debug.enable_from_spec(",".join(args.debug) or os.environ.get("ENIGMA_DEBUG"))
        ctx = MachineContext(resolve_settings(args))
    except (OSError, ValueError) as e:
        sys.exit(f"Failed to load configuration: {e}")

    if any(debug.status().values()):
        Debug.configure()

    cfg = Config(block=args.block, verify=args.verify)

    # one‑shot mode ------------------------------------------------------
    if args.message is not None:
        emit(ctx, cfg, args.message)
        return

    # interactive loop ---------------------------------------------------
    print(f"\nLoaded {ctx.machine!r}.")
    print("Type blank line to quit.\n")
    while True:
        try:
            txt = input("Message > ")
        except EOFError:
            break
        if not txt.strip():
            break
        emit(ctx, cfg, txt)


if __name__ == "__main__":
    main()
