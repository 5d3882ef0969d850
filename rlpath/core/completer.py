from __future__ import annotations

import readline
import sys
from contextlib import contextmanager
from typing import Callable, Iterator, List, Optional, Tuple

from rich.console import Console

from .errors import FilesystemError, TerminalQueryError
from .layout import compute_max_per_row, query_terminal_width
from .log import get_logger
from .resolver import resolve
from .tokenizer import fragment_at
from .ui import render_candidates

log = get_logger(__name__)


class CompletionEngine:
    """Path completion for one scan session.

    ``complete(line, cursor_pos)`` answers a completion request with
    ``(insert_pos, paths)``: the offset where the fragment starts and the
    full paths that may replace it. With several candidates the names are
    also printed as a grid sized to the terminal.
    """

    def __init__(
        self,
        root_dir: str = ".",
        only_dir: bool = False,
        console: Optional[Console] = None,
        width_fn: Callable[[], int] = query_terminal_width,
    ):
        self.root_dir = root_dir or "."
        self.only_dir = only_dir
        self.console = console
        self.width_fn = width_fn

    def complete(self, line: str, cursor_pos: int) -> Tuple[int, List[str]]:
        fragment, start = fragment_at(line, cursor_pos)
        try:
            cands = resolve(fragment, self.root_dir, self.only_dir)
        except FilesystemError as e:
            # 補全失敗不中斷輸入，當作沒有候選
            log.debug("completion for %r skipped: %s", fragment, e)
            return cursor_pos, []

        if not cands:
            return cursor_pos, []
        if len(cands) == 1:
            return start, cands.paths

        self.show(cands.names)
        return start, cands.paths

    def show(self, names: List[str]) -> None:
        try:
            width = self.width_fn()
        except TerminalQueryError as e:
            log.debug("listing skipped: %s", e)
            return
        render_candidates(names, compute_max_per_row(names, width), self.console)


@contextmanager
def readline_completer(engine: CompletionEngine, prompt: str) -> Iterator[None]:
    """Install ``engine`` as the readline completer until the block exits."""
    matches: List[str] = []

    def _completion_hook(text, state):
        if state == 0:
            buf = readline.get_line_buffer()
            end = readline.get_endidx()
            start, paths = engine.complete(buf, end)
            # delimiters are empty: readline replaces buf[:end] with the match
            matches[:] = [buf[:start] + p for p in paths]
        return matches[state] if state < len(matches) else None

    def _display_hook(substitution, found, longest):
        # the engine already printed the grid, only the input line is left to redraw
        sys.stdout.write(prompt + readline.get_line_buffer())
        sys.stdout.flush()

    old_completer = readline.get_completer()
    old_delims = readline.get_completer_delims()
    readline.set_completer(_completion_hook)
    readline.set_completer_delims("")
    readline.set_completion_display_matches_hook(_display_hook)
    try:
        readline.parse_and_bind("tab: complete")
        readline.parse_and_bind("set show-all-if-ambiguous on")
        yield
    finally:
        readline.set_completer(old_completer)
        readline.set_completer_delims(old_delims)
        readline.set_completion_display_matches_hook(None)
