# debug.py
from __future__ import annotations
import logging
from typing import Dict

LOGGER_NAME = "ENIGMA"


class Debug:
    _root_configured: bool = False          # class-level guard
    _enabled: bool = True                   # global switch, shared
    _shared: Dict[str, bool] = {
        "alphabet":   False,
        "plugboard":  False,
        "rotor":      False,
        "reflector":  False,
        "stepping":   False,
        "encipher":   False,
        "config":     False,
    }

    def __init__(self) -> None:
        """
        Every module keeps its own Debug(); all of them share one component map
        so the CLI can switch tracing on for the whole machine at once. The
        global switch is shared the same way.
        """
        self.logger = logging.getLogger(LOGGER_NAME)
        self.components = Debug._shared

    @classmethod
    def configure(cls, *, level: int = logging.DEBUG, log_to: str | None = None) -> None:
        """
        Install the root handlers once. If `log_to` is given, messages also
        stream to that file.
        """
        if cls._root_configured:
            return
        handlers: list[logging.Handler] = [logging.StreamHandler()]
        if log_to:
            handlers.append(logging.FileHandler(log_to, encoding="utf-8"))

        logging.basicConfig(
            level=level,
            format="[%(asctime)s] [%(levelname)s] [%(name)s]: %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
            handlers=handlers,
        )
        cls._root_configured = True

    @property
    def enabled(self) -> bool:
        return Debug._enabled

    # ── logging API ──────────────────────────────────────────────
    def log(self, component: str, message: str) -> None:
        if self.enabled and self.components.get(component, False):
            self.logger.debug("[%s] %s", component.upper(), message)

    def is_on(self, component: str) -> bool:
        return self.enabled and self.components.get(component, False)

    # ── component toggles ────────────────────────────────────────
    def enable(self, *components: str) -> None:
        for c in components:
            self._require(c)
            self.components[c] = True

    def disable(self, *components: str) -> None:
        for c in components:
            self._require(c)
            self.components[c] = False

    def toggle(self, component: str) -> None:
        self._require(component)
        self.components[component] = not self.components[component]

    def toggle_global(self, state: bool) -> None:
        """Switch every component on/off at once, for every instance."""
        Debug._enabled = state

    def status(self) -> Dict[str, bool]:
        """Return a *copy* of the current component map."""
        return self.components.copy()

    # ── helpers ──────────────────────────────────────────────────
    def _require(self, component: str) -> None:
        if component not in self.components:
            raise ValueError(f"No such component: {component!r}")

    # nicety for `print(dbg)`
    def __repr__(self) -> str:
        active = [k for k, v in self.components.items() if v]
        return f"<Debug enabled={self.enabled} active={active}>"
