from __future__ import annotations

import logging
import os
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler

ROOT_LOGGER = "rlpath"
ENV_LEVEL = "RLPATH_LOG_LEVEL"
DEFAULT_LEVEL = "WARNING"


def _level_from_env() -> int:
    name = os.environ.get(ENV_LEVEL, DEFAULT_LEVEL).upper()
    level = logging.getLevelName(name)
    return level if isinstance(level, int) else logging.WARNING


def _ensure_root() -> logging.Logger:
    root = logging.getLogger(ROOT_LOGGER)
    # 只掛一次 handler
    if not any(isinstance(h, RichHandler) for h in root.handlers):
        handler = RichHandler(console=Console(stderr=True), show_path=False, rich_tracebacks=False)
        handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))
        root.addHandler(handler)
        root.setLevel(_level_from_env())
        root.propagate = False
    return root


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return a logger under the ``rlpath`` namespace."""
    root = _ensure_root()
    if not name or name == ROOT_LOGGER:
        return root
    if not name.startswith(ROOT_LOGGER + "."):
        name = f"{ROOT_LOGGER}.{name}"
    return logging.getLogger(name)


def set_level(level: int | str) -> None:
    _ensure_root().setLevel(level)
