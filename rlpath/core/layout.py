from __future__ import annotations

import os
import sys
from typing import Optional, Sequence, TextIO

from rich.cells import cell_len

from .errors import TerminalQueryError

PADDING = 4
WIDTH_RATIO = 0.8


def query_terminal_width(stream: Optional[TextIO] = None) -> int:
    stream = stream or sys.stdout
    try:
        return os.get_terminal_size(stream.fileno()).columns
    except (AttributeError, ValueError, OSError) as e:
        raise TerminalQueryError(f"cannot determine terminal width: {e}") from e


def compute_max_per_row(names: Sequence[str], terminal_width: int) -> int:
    """How many names fit on one row of the listing.

    Counts from the longest name down, so any row (even one made only of the
    longest names) stays within about 80% of the terminal. Returns 0 when not
    even the longest name fits; render that as one name per row.
    """
    ordered = sorted(names, key=cell_len, reverse=True)
    budget = int(terminal_width * WIDTH_RATIO)
    fitted = 0
    for name in ordered:
        budget -= cell_len(name) + PADDING
        if budget <= 0:
            break
        fitted += 1
    return fitted
