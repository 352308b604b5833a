# wheels.py
"""Wheel database.

Wiring strings live here and nowhere else. They are turned into integer
tables once, at import, and every machine gets fresh ``Rotor`` objects that
share those immutable tables.
"""
from __future__ import annotations

from typing import Dict, List, NamedTuple, Tuple

from errors import ConfigurationError
from keyboard_and_plugboard import ALPHABET
from rotor_and_reflector import Reflector, Rotor, inverse_of


class WheelSpec(NamedTuple):
    name: str
    forward: Tuple[int, ...]
    reverse: Tuple[int, ...]
    notches: Tuple[int, ...]


def _table(wiring: str) -> Tuple[int, ...]:
    if sorted(wiring) != sorted(ALPHABET):
        raise ValueError(f"wiring {wiring!r} is not a permutation of the alphabet")
    return tuple(ALPHABET.index(c) for c in wiring)


def _spec(name: str, wiring: str, notches: str) -> WheelSpec:
    fwd = _table(wiring)
    return WheelSpec(name, fwd, inverse_of(fwd), tuple(ALPHABET.index(n) for n in notches))


# Enigma I / M3 rotors ---------------------------------------------------
ROTORS: Tuple[WheelSpec, ...] = (
    _spec("I",    "EKMFLGDQVZNTOWYHXUSPAIBRCJ", "Q"),
    _spec("II",   "AJDKSIRUXBLHWTMCQGZNPYFVOE", "E"),
    _spec("III",  "BDFHJLCPRTXVZNYEIWGAKMUSQO", "V"),
    _spec("IV",   "ESOVPZJAYQUIRHXLNFTGKDCMWB", "J"),
    _spec("V",    "VZBRGITYUPSDNHLXAWMJQOFECK", "Z"),
    _spec("VI",   "JPGVOUMFYQBENHZRDKASXLICTW", "ZM"),
    _spec("VII",  "NZJHGRCXMYSWBOUFAIVLPEKQDT", "ZM"),
    _spec("VIII", "FKQHTLXOCBJSPDZRAMEWNIUYGV", "ZM"),
)

# UKW-B ------------------------------------------------------------------
REFLECTOR_NAME = "B"
REFLECTOR_TABLE: Tuple[int, ...] = _table("YRUHQSLDPXNGOKMIEBFZCWVJAT")

# fails at import if the table is not a fixed-point-free involution
_REFLECTOR = Reflector(REFLECTOR_TABLE, name=REFLECTOR_NAME)

_by_name: Dict[str, WheelSpec] = {spec.name: spec for spec in ROTORS}


def rotor_names() -> List[str]:
    return [spec.name for spec in ROTORS]


def lookup(rotor_id: int | str) -> WheelSpec:
    """Resolve ``0``/``"I"``/``"i"`` style identifiers to a wheel definition."""
    if isinstance(rotor_id, bool):
        raise ConfigurationError(f"Unknown rotor {rotor_id!r}")
    if isinstance(rotor_id, int):
        if 0 <= rotor_id < len(ROTORS):
            return ROTORS[rotor_id]
    elif isinstance(rotor_id, str):
        key = rotor_id.strip().upper()
        if key in _by_name:
            return _by_name[key]
        if key.isdigit() and int(key) < len(ROTORS):
            return ROTORS[int(key)]
    raise ConfigurationError(
        f"Unknown rotor {rotor_id!r}. Expected 0–{len(ROTORS) - 1} or one of {rotor_names()}"
    )


def build_rotor(rotor_id: int | str, position: int = 0, ring_setting: int = 0) -> Rotor:
    spec = lookup(rotor_id)
    return Rotor(
        spec.forward,
        spec.notches,
        name=spec.name,
        position=position,
        ring_setting=ring_setting,
        reverse_table=spec.reverse,
    )


def reflector() -> Reflector:
    """The machine's one reflector. Stateless, so sharing it is safe."""
    return _REFLECTOR


__all__ = [
    "ROTORS",
    "WheelSpec",
    "build_rotor",
    "lookup",
    "reflector",
    "rotor_names",
]
