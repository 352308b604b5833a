# rotor_and_reflector.py
from __future__ import annotations

from collections.abc import Iterable

from debug import Debug

debug = Debug()


def inverse_of(table: tuple[int, ...]) -> tuple[int, ...]:
    """Return the inverse permutation of *table*."""
    inv = [0] * len(table)
    for i, j in enumerate(table):
        inv[j] = i
    return tuple(inv)


class Rotor:
    """One wheel: fixed wiring, ring offset, and a position that moves.

    ``forward``/``backward`` take the ring and the current position into
    account; the wiring tables themselves never change.
    """

    __slots__ = ("name", "size", "_fwd", "_rev", "notches", "ring_setting", "position")

    def __init__(
        self,
        forward_table: tuple[int, ...],
        notches: Iterable[int],
        *,
        name: str = "?",
        position: int = 0,
        ring_setting: int = 0,
        reverse_table: tuple[int, ...] | None = None,
    ) -> None:
        if sorted(forward_table) != list(range(len(forward_table))):
            raise ValueError("wiring must be a permutation of the alphabet")

        self.name = name
        self.size = len(forward_table)

        self._fwd = forward_table
        self._rev = reverse_table if reverse_table is not None else inverse_of(forward_table)

        self.notches = frozenset(n % self.size for n in notches)
        self.position = position % self.size
        self.ring_setting = ring_setting % self.size

    # ── stepping --------------------------------------------------
    def at_notch(self) -> bool:
        """True when the window shows a notch letter (read before stepping)."""
        return self.position in self.notches

    def step(self) -> None:
        self.position = (self.position + 1) % self.size
        debug.log("rotor", "%s -> pos %d", self.name, self.position)

    # ── signal paths ---------------------------------------------
    def forward(self, sig: int) -> int:
        shift = (sig + self.position - self.ring_setting) % self.size
        mapped = self._fwd[shift]
        return (mapped - self.position + self.ring_setting) % self.size

    def backward(self, sig: int) -> int:
        shift = (sig + self.position - self.ring_setting) % self.size
        mapped = self._rev[shift]
        return (mapped - self.position + self.ring_setting) % self.size

    # ── niceties --------------------------------------------------
    @property
    def window(self) -> str:
        return chr(ord("A") + self.position) if self.size == 26 else str(self.position)

    def __repr__(self) -> str:
        return f"<Rotor {self.name} pos={self.position} ring={self.ring_setting}>"


class Reflector:
    """Fixed, fixed-point-free involution between the two rotor passes."""

    __slots__ = ("name", "_map")

    def __init__(self, table: tuple[int, ...], *, name: str = "?") -> None:
        # ensure involution property (w[i] = j ⇒ w[j] = i) and no self-maps
        for i, j in enumerate(table):
            if not (0 <= j < len(table)) or table[j] != i or i == j:
                raise ValueError("Reflector wiring must be an involution with no fixed points")

        self.name = name
        self._map = tuple(table)

    def reflect(self, sig: int) -> int:
        mapped = self._map[sig]
        debug.log("reflector", "%d -> %d", sig, mapped)
        return mapped

    def __repr__(self) -> str:
        return f"<Reflector {self.name}>"
