# enigma_cli.py
from __future__ import annotations

import argparse
import sys
from dataclasses import dataclass
from typing import List

from debug import COMPONENTS, Debug
from enigma import Enigma
from errors import ConfigurationError
from settings import MachineSettings, load_settings

# ────────────────────────────────────────────────────────────────────────
#  0. Configuration & logging
# ────────────────────────────────────────────────────────────────────────

debug = Debug()


@dataclass(slots=True)
class Config:
    """Switches for how the CLI presents output."""

    block: int = 0                  # group output in blocks of N, 0 = as typed


# ────────────────────────────────────────────────────────────────────────
#  1. Settings assembly
# ────────────────────────────────────────────────────────────────────────


def settings_from_args(args: argparse.Namespace) -> MachineSettings:
    """Config file first, then any flag given on the command line on top."""
    cfg = load_settings(args.config) if args.config else MachineSettings()

    if args.rotors is not None:
        cfg.rotors = [int(r) if r.isdigit() else r for r in args.rotors]
    if args.positions is not None:
        cfg.positions = [int(p) if p.lstrip("-").isdigit() else p for p in args.positions]
    if args.rings is not None:
        cfg.rings = [int(r) if r.lstrip("-").isdigit() else r for r in args.rings]
    if args.plugs is not None:
        cfg.plugboard = list(args.plugs)
    return cfg


def group(text: str, block: int) -> str:
    """Classic five-letter style grouping; passthrough characters are dropped."""
    if block <= 0:
        return text
    letters = "".join(ch for ch in text if ch.isalpha())
    return " ".join(letters[i : i + block] for i in range(0, len(letters), block))


# ────────────────────────────────────────────────────────────────────────
#  2. CLI helpers
# ────────────────────────────────────────────────────────────────────────


def parse_args(argv: List[str] | None = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Encrypt or decrypt with a three-rotor Enigma")
    p.add_argument("-m", "--message", metavar="TEXT", help="Text to process. If omitted, an interactive REPL starts.")
    p.add_argument("--config", metavar="FILE", help="Load machine settings from JSON.")
    p.add_argument("--rotors", nargs=3, metavar="ID", help="Rotor ids left to right, e.g. 0 1 2 or I II III")
    p.add_argument("--positions", nargs=3, metavar="POS", help="Start positions, 0-25 or letters")
    p.add_argument("--rings", nargs=3, metavar="RING", help="Ring settings, 0-25 or letters")
    p.add_argument("--plugs", nargs="*", metavar="PAIR", help="Plugboard pairs, e.g. AB CD")
    p.add_argument("--block", type=int, default=0, help="Group output in blocks of N letters (default: off)")
    p.add_argument("--debug", nargs="+", choices=COMPONENTS, metavar="COMPONENT", help=f"Trace components: {', '.join(COMPONENTS)}")
    return p.parse_args(argv)


# ────────────────────────────────────────────────────────────────────────
#  3. Main entry point
# ────────────────────────────────────────────────────────────────────────


def main(argv: List[str] | None = None) -> int:
    args = parse_args(argv)
    if args.debug:
        debug.enable(*args.debug)

    try:
        settings = settings_from_args(args)
        machine = Enigma.from_config(settings)      # fail before reading any input
    except (ConfigurationError, OSError) as exc:
        print(f"enigma: {exc}", file=sys.stderr)
        return 2

    cfg = Config(block=args.block)

    # one‑shot mode ------------------------------------------------------
    if args.message is not None:
        print(group(machine.process(args.message), cfg.block))
        return 0

    # interactive REPL ---------------------------------------------------
    print("Type blank line to quit.\n")
    while True:
        try:
            txt = input("Message: ")
        except EOFError:
            break
        if not txt.strip():
            break
        # each line is its own message, so it starts from the daily key
        print(group(Enigma.from_config(settings).process(txt), cfg.block))
    return 0


if __name__ == "__main__":
    sys.exit(main())
