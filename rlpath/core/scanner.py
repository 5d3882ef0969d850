from __future__ import annotations

import os
from pathlib import Path
from typing import Callable, Optional

from rich.console import Console

from .completer import CompletionEngine, readline_completer
from .config import DEFAULT_PROMPT
from .errors import ConfigError, InputError
from .log import get_logger

log = get_logger(__name__)


class Scanner:
    """Reads one line from the terminal with path completion on TAB.

    ``prompt`` is printed at the left edge. ``root_dir`` is where completion
    starts; empty means the current directory and a leading ``~`` is the
    user's home. With ``only_dir`` only directories are offered.
    """

    def __init__(
        self,
        prompt: str = DEFAULT_PROMPT,
        root_dir: str = "",
        only_dir: bool = False,
        console: Optional[Console] = None,
        read_line: Callable[[str], str] = input,
    ):
        self.prompt = prompt or DEFAULT_PROMPT
        self.root_dir = root_dir
        self.only_dir = only_dir
        self.console = console
        self.read_line = read_line

    def resolve_root_dir(self) -> str:
        if not self.root_dir:
            return "./"
        if self.root_dir != "~" and not self.root_dir.startswith(("~/", "~" + os.sep)):
            return self.root_dir
        try:
            home = str(Path.home())
        except (RuntimeError, KeyError) as e:
            raise ConfigError(f"cannot resolve home directory: {e}") from e
        return self.root_dir.replace("~", home, 1)

    def engine(self) -> CompletionEngine:
        root = self.resolve_root_dir()
        if not os.path.isdir(root):
            raise ConfigError(f"root directory does not exist: {root}")
        return CompletionEngine(root, self.only_dir, self.console)

    def scan(self) -> str:
        engine = self.engine()
        log.debug("scan session in %s (only_dir=%s)", engine.root_dir, self.only_dir)
        with readline_completer(engine, self.prompt):
            try:
                return self.read_line(self.prompt)
            except (EOFError, KeyboardInterrupt) as e:
                raise InputError("input ended before a line was entered") from e
