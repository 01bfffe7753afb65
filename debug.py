# debug.py
from __future__ import annotations
import logging
from typing import Dict

COMPONENTS = ("plugboard", "rotor", "reflector", "stepping", "encipher")


class Debug:
    _root_configured: bool = False          # class-level guard
    _enabled: bool = True                   # global switch, shared
    _components: Dict[str, bool] = {c: False for c in COMPONENTS}

    def __init__(self) -> None:
        """
        Every Debug() shares one component map, so switching a component
        on from the CLI reaches the module-level instances too.
        """
        self.logger = logging.getLogger("ENIGMA")

    @classmethod
    def configure(cls, *, log_to: str | None = None) -> None:
        """Install the root handlers once. If `log_to` is given, messages
        also stream to that file."""
        if cls._root_configured:
            return
        handlers: list[logging.Handler] = [logging.StreamHandler()]
        if log_to:
            handlers.append(logging.FileHandler(log_to, encoding="utf-8"))

        logging.basicConfig(
            level=logging.DEBUG,
            format="[%(asctime)s] [%(levelname)s] [%(name)s]: %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
            handlers=handlers,
        )
        cls._root_configured = True

    # ── logging API ──────────────────────────────────────────────
    def log(self, component: str, message: str) -> None:
        if Debug._enabled and Debug._components.get(component, False):
            self.logger.debug("[%s] %s", component.upper(), message)

    # ── component toggles ────────────────────────────────────────
    def enable(self, *components: str) -> None:
        for c in components:
            self._require(c)
        for c in components:
            Debug._components[c] = True

    def disable(self, *components: str) -> None:
        for c in components:
            self._require(c)
            Debug._components[c] = False

    def toggle(self, component: str) -> None:
        self._require(component)
        Debug._components[component] = not Debug._components[component]

    def toggle_global(self, state: bool) -> None:
        """Switch every component on/off at once."""
        Debug._enabled = state

    def enable_from_spec(self, spec: str | None) -> None:
        """Enable components named in a comma separated list ("all" for every one)."""
        if not spec:
            return
        names = [s.strip().lower() for s in spec.split(",") if s.strip()]
        if "all" in names:
            names = list(COMPONENTS)
        self.enable(*names)

    def status(self) -> Dict[str, bool]:
        """Return a *copy* of the current component map."""
        return Debug._components.copy()

    # ── helpers ──────────────────────────────────────────────────
    def _require(self, component: str) -> None:
        if component not in Debug._components:
            raise ValueError(f"No such component: {component!r}")

    # nicety for `print(dbg)`
    def __repr__(self) -> str:
        active = [k for k, v in Debug._components.items() if v]
        return f"<Debug enabled={Debug._enabled} active={active}>"
