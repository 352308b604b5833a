# keyboard_and_plugboard.py
from __future__ import annotations

import string
from collections.abc import Iterable, Sequence

from debug import Debug
from errors import ConfigurationError

debug = Debug()

ALPHABET = string.ascii_uppercase


# ── Keyboard ──────────────────────────────────────────────────────
class Keyboard:
    """Letter ↔ signal index. Lowercase keys act like their capitals."""

    def __init__(self, alphabet: str = ALPHABET) -> None:
        self.alphabet: str = alphabet
        self.alpha_to_index: dict[str, int] = {
            ch: i for i, ch in enumerate(alphabet)
        }
        for ch, i in list(self.alpha_to_index.items()):
            self.alpha_to_index.setdefault(ch.lower(), i)

    def __contains__(self, letter: object) -> bool:
        return isinstance(letter, str) and letter in self.alpha_to_index

    # letter → integer signal
    def forward(self, letter: str) -> int:
        try:
            signal = self.alpha_to_index[letter]
        except KeyError:
            raise ValueError(
                f"Invalid character {letter!r} for current alphabet."
            ) from None
        debug.log("keyboard", "%r -> %d", letter, signal)
        return signal

    # integer signal → letter
    def backward(self, signal: int) -> str:
        if not (0 <= signal < len(self.alphabet)):
            hi = len(self.alphabet) - 1
            raise ValueError(f"Signal {signal} out of range 0–{hi}")
        return self.alphabet[signal]


# ── Plugboard ─────────────────────────────────────────────────────
PairLike = str | Sequence[str]


def _normalise_pair(raw: PairLike) -> tuple[str, str]:
    if isinstance(raw, str):
        symbols = list(raw)
    else:
        try:
            symbols = list(raw)
        except TypeError:
            raise ConfigurationError(f"Pair {raw!r} is not a letter pair") from None

    if len(symbols) != 2 or not all(isinstance(s, str) for s in symbols):
        raise ConfigurationError(f"Pair {raw!r} must be exactly 2 symbols")
    a, b = (s.upper() for s in symbols)
    # each side is one letter, never a run of them
    if len(a) != 1 or len(b) != 1:
        raise ConfigurationError(f"Pair {raw!r} must hold one symbol per side")
    return a, b


class Plugboard:
    """Self-inverse letter swaps applied on the way in and out of the wheels.

    Unpaired letters map to themselves, so ``swap(swap(x)) == x`` for
    every signal. All validation happens here; ``swap`` cannot fail.
    """

    def __init__(
        self,
        pairs: Iterable[PairLike] = (),
        alphabet: str = ALPHABET,
    ) -> None:
        self.alphabet: str = alphabet
        wiring = list(range(len(alphabet)))
        used: set[str] = set()

        try:
            pairs = list(pairs)
        except TypeError:
            raise ConfigurationError(f"Plugboard pairs {pairs!r} are not a list of pairs") from None

        for raw in pairs:
            a, b = _normalise_pair(raw)

            if a not in alphabet or b not in alphabet:
                bad = a if a not in alphabet else b
                raise ConfigurationError(f"Symbol {bad!r} not in alphabet")
            if a == b:
                raise ConfigurationError(f"Plugboard cannot map a symbol to itself: {a}")
            if a in used or b in used:
                dup = a if a in used else b
                raise ConfigurationError(f"Character {dup!r} already used in plugboard")

            ia, ib = alphabet.index(a), alphabet.index(b)
            wiring[ia], wiring[ib] = ib, ia
            used.update((a, b))

        self._map: tuple[int, ...] = tuple(wiring)

    def swap(self, signal: int) -> int:
        mapped = self._map[signal]
        debug.log("plugboard", "%d -> %d", signal, mapped)
        return mapped

    @property
    def pairs(self) -> list[str]:
        """The active swaps as sorted two-letter strings, e.g. ``["AB", "CD"]``."""
        return [
            self.alphabet[i] + self.alphabet[j]
            for i, j in enumerate(self._map)
            if i < j
        ]

    def __repr__(self) -> str:
        return f"<Plugboard {' '.join(self.pairs)}>"
