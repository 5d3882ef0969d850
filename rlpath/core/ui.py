from typing import Optional, Sequence

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from .layout import PADDING

console = Console(highlight=False)

ASCII_RLPATH = r"""
       _             _   _
  _ __| |_ __   __ _| |_| |__
 | '__| | '_ \ / _` | __| '_ \
 | |  | | |_) | (_| | |_| | | |
 |_|  |_| .__/ \__,_|\__|_| |_|
        |_|
"""


def build_grid(names: Sequence[str], max_per_row: int) -> Table:
    per_row = max(max_per_row, 1)
    columns = min(per_row, len(names)) or 1
    grid = Table.grid(padding=(0, PADDING, 0, 0))
    for _ in range(columns):
        grid.add_column(justify="left", no_wrap=True)
    for i in range(0, len(names), per_row):
        row = [Text(n) for n in names[i:i + per_row]]
        row += [Text("")] * (columns - len(row))
        grid.add_row(*row)
    return grid


def render_candidates(names: Sequence[str], max_per_row: int, out: Optional[Console] = None) -> None:
    """Print the candidate listing, ``max_per_row`` names per row."""
    out = out or console
    out.print()
    out.print(build_grid(names, max_per_row))


def print_error(message: str, out: Optional[Console] = None) -> None:
    (out or console).print(Text(message, style="red"))


def print_config(cfg: dict, path: str) -> None:
    console.print(
        Panel.fit(
            Text.from_markup(
                f"[bold]prompt:[/]\t{escape(repr(cfg.get('prompt')))}\n"
                f"[bold]root_dir:[/]\t{escape(cfg.get('root_dir') or '(current directory)')}\n"
                f"[bold]only_dir:[/]\t{cfg.get('only_dir', False)}"
            ),
            title="config",
            subtitle=path,
            border_style="blue",
        )
    )
