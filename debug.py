# debug.py
from __future__ import annotations
import logging
from typing import Dict, Iterable

COMPONENTS = ("keyboard", "plugboard", "rotor", "reflector", "stepping", "process")


class Debug:
    """Per-component trace switches over the "ENIGMA" logger.

    Every module keeps its own ``debug = Debug()`` but the switch board is
    shared at class level, so ``Debug().enable("stepping")`` from the CLI
    lights up the trace inside ``enigma.py`` as well.
    """

    _handler_attached: bool = False
    _switches: Dict[str, bool] = {c: False for c in COMPONENTS}
    _enabled: bool = True

    def __init__(self, *, log_to: str | None = None) -> None:
        self.logger = logging.getLogger("ENIGMA")
        if not Debug._handler_attached:
            self._attach(log_to)

    def _attach(self, log_to: str | None) -> None:
        handlers: list[logging.Handler] = [logging.StreamHandler()]
        if log_to:
            handlers.append(logging.FileHandler(log_to, encoding="utf-8"))

        fmt = logging.Formatter(
            "[%(asctime)s] [%(levelname)s] [%(name)s]: %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
        for handler in handlers:
            handler.setFormatter(fmt)
            self.logger.addHandler(handler)
        self.logger.setLevel(logging.DEBUG)
        Debug._handler_attached = True

    # ── logging API ──────────────────────────────────────────────
    def log(self, component: str, message: str, *args: object) -> None:
        """Emit *message* (%-style, formatted lazily) when *component* is on."""
        if self.is_on(component):
            self.logger.debug("[%s] " + message, component.upper(), *args)

    def is_on(self, component: str) -> bool:
        return Debug._enabled and Debug._switches.get(component, False)

    # ── component toggles ────────────────────────────────────────
    def enable(self, *components: str) -> None:
        self._set(components, True)

    def disable(self, *components: str) -> None:
        self._set(components, False)

    def toggle(self, component: str) -> None:
        self._require(component)
        Debug._switches[component] = not Debug._switches[component]

    def toggle_global(self, state: bool) -> None:
        """Switch every component on/off at once."""
        Debug._enabled = state

    def reset(self) -> None:
        Debug._enabled = True
        for c in COMPONENTS:
            Debug._switches[c] = False

    def status(self) -> Dict[str, bool]:
        """Return a *copy* of the current component map."""
        return dict(Debug._switches)

    # ── helpers ──────────────────────────────────────────────────
    def _set(self, components: Iterable[str], state: bool) -> None:
        for c in components:
            self._require(c)
            Debug._switches[c] = state

    @staticmethod
    def _require(component: str) -> None:
        if component not in Debug._switches:
            raise ValueError(f"No such component: {component!r}")

    def __repr__(self) -> str:
        active = [k for k, v in Debug._switches.items() if v]
        return f"<Debug enabled={Debug._enabled} active={active}>"
