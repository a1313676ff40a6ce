from __future__ import annotations

import os
from pathlib import Path

CONFIG_DIR = Path.home() / ".config" / "abstk"
STYLE_FILE = CONFIG_DIR / "style.css"

APPLICATION_ID = "io.github.abstk.AbsTK"

MODE_ENV = "ABSTK_MODE"
DEFAULT_MODE = "gui"
MODES = ("gui",)
MODE_ALIASES = {"gtk": "gui"}

_mode: str | None = None

def resolve_mode(mode: str | None) -> str:
    """
    Normalise a mode name.

    None falls back to $ABSTK_MODE, then to the default mode.
    Raises ValueError for modes that have no frontend.
    """
    if not mode:
        mode = os.environ.get(MODE_ENV) or DEFAULT_MODE

    name = mode.strip().lower()
    name = MODE_ALIASES.get(name, name)
    if name not in MODES:
        raise ValueError(f"Unsupported mode: {mode!r} (available: {', '.join(MODES)})")
    return name

def set_mode(mode: str | None = None) -> str:
    global _mode
    _mode = resolve_mode(mode)
    return _mode

def get_mode() -> str:
    if _mode is None:
        return set_mode(None)
    return _mode

def reset_mode() -> None:
    global _mode
    _mode = None
