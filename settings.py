# settings.py
from __future__ import annotations

import json
from dataclasses import asdict, dataclass, field
from pathlib import Path
from typing import Any, Dict, List

from errors import ConfigurationError

REQUIRED_KEYS = {"rotors"}


@dataclass(slots=True)
class MachineSettings:
    """Daily key for one machine: wheel order, dials, rings and plugs.

    Values are kept as given; range wrapping and validation happen when an
    ``Enigma`` is built from them.
    """

    rotors: List[int | str] = field(default_factory=lambda: [0, 1, 2])
    positions: List[int | str] = field(default_factory=lambda: [0, 0, 0])
    rings: List[int | str] = field(default_factory=lambda: [0, 0, 0])
    plugboard: List[str] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "MachineSettings":
        missing = REQUIRED_KEYS - data.keys()
        if missing:
            raise ConfigurationError(f"Missing keys in config: {', '.join(sorted(missing))}")
        defaults = cls()
        plugs = data.get("plugboard", defaults.plugboard)
        if isinstance(plugs, str):
            plugs = plugs.split()
        elif isinstance(plugs, list):
            # JSON has no tuples: ["A", "B"] and "AB" mean the same pair
            plugs = [
                "".join(map(str, p)) if isinstance(p, list) else p
                for p in plugs
            ]
        else:
            raise ConfigurationError(
                f"plugboard must be a list of pairs or a string like 'AB CD', got {plugs!r}"
            )
        return cls(
            rotors=data["rotors"],
            positions=data.get("positions", defaults.positions),
            rings=data.get("rings", defaults.rings),
            plugboard=plugs,
        )


def load_settings(path: str | Path) -> MachineSettings:
    try:
        data = json.loads(Path(path).read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise ConfigurationError(f"{path}: not valid JSON ({exc.msg}, line {exc.lineno})") from exc
    if not isinstance(data, dict):
        raise ConfigurationError(f"{path}: expected a JSON object at top level")
    return MachineSettings.from_dict(data)


def save_settings(settings: MachineSettings, path: str | Path) -> Path:
    path = Path(path)
    path.write_text(json.dumps(settings.to_dict(), indent=2), encoding="utf-8")
    return path
