# settings_generator.py
from __future__ import annotations

import argparse
from pathlib import Path
from random import Random, SystemRandom
from typing import List

from keyboard_and_plugboard import ALPHABET
from settings import MachineSettings, save_settings
from wheels import rotor_names

MAX_PAIRS = len(ALPHABET) // 2


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


def generate_settings(rng: Random | SystemRandom, max_pairs: int = 10) -> MachineSettings:
    size = len(ALPHABET)
    return MachineSettings(
        rotors=rng.sample(rotor_names(), 3),
        positions=[rng.randrange(size) for _ in range(3)],
        rings=[rng.randrange(size) for _ in range(3)],
        plugboard=sorted(choose_pairs(ALPHABET, max_pairs, rng)),
    )


def parse_cli(argv: List[str] | None = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Generate an Enigma daily key")
    p.add_argument("--seed", type=int, help="Deterministic seed (omit for random)")
    p.add_argument(
        "--pairs",
        type=int,
        default=10,
        help=f"Number of plugboard pairs, 0–{MAX_PAIRS} (default: 10)",
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
    if not 0 <= args.pairs <= MAX_PAIRS:
        raise SystemExit(f"--pairs must be between 0 and {MAX_PAIRS}")

    cfg = generate_settings(build_rng(args.seed), args.pairs)
    save_settings(cfg, args.outfile)

    print(f"Wrote {args.outfile}\n"
        f"   rotors      : {' '.join(cfg.rotors)}\n"
        f"   positions   : {cfg.positions}\n"
        f"   rings       : {cfg.rings}\n"
        f"   plug pairs  : {len(cfg.plugboard)}")


if __name__ == "__main__":
    main()
