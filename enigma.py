# enigma.py  ───────────────────────────────────────────────────────
from __future__ import annotations

from collections.abc import Iterable, Mapping, Sequence
from typing import Any

from debug import Debug
from errors import ConfigurationError
from keyboard_and_plugboard import Keyboard, PairLike, Plugboard
from rotor_and_reflector import Rotor
from wheels import build_rotor, reflector

debug = Debug()

ROTOR_COUNT = 3


def _dial(value: Any, what: str) -> int:
    """Turn a dial setting into 0–25.

    Integers wrap modulo 26 the way a physical wheel does; a single letter
    is read as its window position.
    """
    if isinstance(value, bool):
        raise ConfigurationError(f"{what} must be an integer or a letter, got {value!r}")
    if isinstance(value, int):
        return value % 26
    if isinstance(value, str) and len(value) == 1 and value.isascii() and value.isalpha():
        return ord(value.upper()) - ord("A")
    raise ConfigurationError(f"{what} must be an integer or a letter, got {value!r}")


def _three(values: Sequence[Any], what: str, *, letters_ok: bool = False) -> list[Any]:
    # "ADU" is fine for dials, "I II III" is not a rotor list
    if isinstance(values, bytes) or (isinstance(values, str) and not letters_ok):
        raise ConfigurationError(f"{what} must be a sequence of {ROTOR_COUNT}")
    try:
        items = list(values)
    except TypeError:
        raise ConfigurationError(f"{what} must be a sequence of {ROTOR_COUNT}") from None
    if len(items) != ROTOR_COUNT:
        raise ConfigurationError(
            f"Need exactly {ROTOR_COUNT} {what}, got {len(items)}"
        )
    return items


class Enigma:
    """Three-rotor machine with a fixed UKW-B reflector.

    Rotors are listed left to right; the rightmost one moves on every
    letter. ``process`` is its own inverse: a second machine built with the
    same settings turns the ciphertext back into the plaintext.
    """

    def __init__(
        self,
        rotor_ids: Sequence[int | str] = (0, 1, 2),
        rotor_positions: Sequence[int | str] = (0, 0, 0),
        ring_settings: Sequence[int | str] = (0, 0, 0),
        plugboard_pairs: Iterable[PairLike] = (),
    ) -> None:
        ids = _three(rotor_ids, "rotors")
        positions = [
            _dial(p, "rotor position")
            for p in _three(rotor_positions, "rotor positions", letters_ok=True)
        ]
        rings = [
            _dial(r, "ring setting")
            for r in _three(ring_settings, "ring settings", letters_ok=True)
        ]

        self.kb = Keyboard()
        self.pb = Plugboard(plugboard_pairs)
        self.rotors: list[Rotor] = [
            build_rotor(rid, pos, ring) for rid, pos, ring in zip(ids, positions, rings)
        ]
        self.reflector = reflector()

        debug.log("process", "built %r", self)

    @classmethod
    def from_config(cls, cfg: Mapping[str, Any] | Any) -> "Enigma":
        """Build from a ``MachineSettings`` or a plain dict with the same keys."""
        if not isinstance(cfg, Mapping):
            cfg = cfg.to_dict()
        return cls(
            cfg.get("rotors", (0, 1, 2)),
            cfg.get("positions", (0, 0, 0)),
            cfg.get("rings", (0, 0, 0)),
            cfg.get("plugboard", ()),
        )

    # ── stepping logic  ─────────────────────────────────────────

    def _step_rotors(self) -> None:
        """Advance rotors one key-press, double-step included."""
        left, middle, right = self.rotors

        # decide from the pre-step snapshot, then move
        step_L = middle.at_notch()
        step_M = step_L or right.at_notch()

        right.step()
        if step_M:
            middle.step()
        if step_L:
            left.step()

        if debug.is_on("stepping"):
            debug.log("stepping", "window %s", self.window)

    # ── encipher one symbol  ────────────────────────────────────

    def process_char(self, ch: str) -> str:
        if ch not in self.kb:
            return ch

        self._step_rotors()

        signal = self.kb.forward(ch)
        signal = self.pb.swap(signal)

        for rotor in reversed(self.rotors):
            signal = rotor.forward(signal)

        signal = self.reflector.reflect(signal)

        for rotor in self.rotors:
            signal = rotor.backward(signal)

        signal = self.pb.swap(signal)
        out_ch = self.kb.backward(signal)
        return out_ch.lower() if ch.islower() else out_ch

    def process(self, message: str) -> str:
        """Encrypt or decrypt *message*; the two are the same operation."""
        out = "".join(self.process_char(ch) for ch in message)
        if debug.is_on("process"):
            debug.log("process", "%d chars, window now %s", len(message), self.window)
        return out

    # ── state views  ────────────────────────────────────────────

    @property
    def positions(self) -> tuple[int, ...]:
        return tuple(r.position for r in self.rotors)

    @property
    def window(self) -> str:
        return "".join(r.window for r in self.rotors)

    def __repr__(self) -> str:
        names = "-".join(r.name for r in self.rotors)
        return f"<Enigma {names} window={self.window} {self.pb!r}>"
