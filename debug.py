# debug.py
from __future__ import annotations

import logging
from pathlib import Path
from typing import Dict, Iterable

COMPONENTS = ("keyboard", "plugboard", "rotor", "reflector", "stepping", "encipher")

LOG_FORMAT = "[%(asctime)s] [%(levelname)s] [%(name)s]: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


class Debug:
    """Per-component switchboard in front of the ``rotor_engine`` logger.

    Every engine module logs through the shared :data:`debug` instance, so a
    component switched on from the CLI is switched on everywhere.
    """

    _root_configured: bool = False          # class-level guard

    def __init__(self) -> None:
        self.logger = logging.getLogger("rotor_engine")
        self.enabled = True        # global switch
        self.components: Dict[str, bool] = {c: False for c in COMPONENTS}
        self._file_handlers: list[logging.FileHandler] = []

    # ── logging API ──────────────────────────────────────────────
    def log(self, component: str, message: str) -> None:
        if self.enabled and self.components.get(component, False):
            self.logger.debug("[%s] %s", component.upper(), message)

    def active(self, component: str) -> bool:
        """True if *component* would currently log."""
        return self.enabled and self.components.get(component, False)

    # ── component toggles ────────────────────────────────────────
    def enable(self, *components: str) -> None:
        for c in components:
            self._require(c)
            self.components[c] = True
        if components:
            self._configure_root()

    def disable(self, *components: str) -> None:
        for c in components:
            self._require(c)
            self.components[c] = False

    def disable_all(self) -> None:
        self.disable(*self.components)

    def toggle_global(self, state: bool) -> None:
        """Switch every component on/off at once."""
        self.enabled = state

    def log_to_file(self, path: str | Path) -> None:
        """Copy engine log records into *path* as well as the console."""
        handler = logging.FileHandler(path, encoding="utf-8")
        handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
        self.logger.addHandler(handler)
        self.logger.setLevel(logging.DEBUG)
        self._file_handlers.append(handler)

    def close_files(self) -> None:
        for handler in self._file_handlers:
            self.logger.removeHandler(handler)
            handler.close()
        self._file_handlers.clear()

    def status(self) -> Dict[str, bool]:
        """Return a *copy* of the current component map."""
        return self.components.copy()

    def enable_from_spec(self, value: str | Iterable[str]) -> None:
        """Enable components from ``"a,b"`` or an iterable; ``all`` enables every one."""
        names = value.split(",") if isinstance(value, str) else list(value)
        names = [n.strip().lower() for n in names if n.strip()]
        if "all" in names:
            names = list(self.components)
        self.enable(*names)

    # ── helpers ──────────────────────────────────────────────────
    def _require(self, component: str) -> None:
        if component not in self.components:
            raise ValueError(f"No such component: {component!r}")

    def _configure_root(self) -> None:
        if Debug._root_configured:
            return
        logging.basicConfig(level=logging.DEBUG, format=LOG_FORMAT, datefmt=DATE_FORMAT)
        self.logger.setLevel(logging.DEBUG)
        Debug._root_configured = True

    # nicety for `print(dbg)`
    def __repr__(self) -> str:
        active = [k for k, v in self.components.items() if v]
        return f"<Debug enabled={self.enabled} active={active}>"


debug = Debug()
