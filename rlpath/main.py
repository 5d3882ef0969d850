from __future__ import annotations

import logging
from typing import Optional

import typer
from typer.core import TyperCommand, TyperGroup

from .core.config import (
    CONFIG_PATH,
    SUPPORTED_KEYS,
    load_config,
    normalize_with_defaults,
    save_config,
)
from .core.errors import RlpathError
from .core.log import set_level
from .core.scanner import Scanner
from .core.ui import ASCII_RLPATH, console, print_config, print_error

ANSI_BLUE_BOLD = "\033[1;34m"
ANSI_RESET = "\033[0m"


# ───────────────────────────── --help 上方固定顯示 Logo ─────────────────────────────
class BannerGroup(TyperGroup):
    def get_help(self, ctx):  # type: ignore[override]
        base = super().get_help(ctx)
        return f"{ANSI_BLUE_BOLD}{ASCII_RLPATH.strip(chr(10))}{ANSI_RESET}\n\n{base}"

class BannerCommand(TyperCommand):
    def get_help(self, ctx):  # type: ignore[override]
        base = super().get_help(ctx)
        return f"{ANSI_BLUE_BOLD}{ASCII_RLPATH.strip(chr(10))}{ANSI_RESET}\n\n{base}"


app = typer.Typer(cls=BannerGroup, add_completion=False, no_args_is_help=False)
config_app = typer.Typer(cls=BannerGroup, add_completion=False, no_args_is_help=True)
app.add_typer(config_app, name="config")


# ───────────────────────────── 設定 ─────────────────────────────
class ConfigManager:
    def __init__(self):
        self.cfg = normalize_with_defaults(load_config() or {})

    def show(self):
        print_config(self.cfg, str(CONFIG_PATH))

    def set(self, key: str, value: str):
        if key not in SUPPORTED_KEYS:
            print_error(f"unknown key: {key} (supported: {', '.join(SUPPORTED_KEYS)})")
            raise typer.Exit(1)
        self.cfg[key] = value
        self.cfg = normalize_with_defaults(self.cfg)
        save_config(self.cfg)
        console.print(f"[green]✓ updated[/] {key} = {self.cfg[key]!r}")

    def unset(self, key: str):
        if key in self.cfg:
            self.cfg.pop(key)
            self.cfg = normalize_with_defaults(self.cfg)
            save_config(self.cfg)
            console.print(f"[green]✓ reset[/] {key}")
        else:
            console.print(f"[yellow]{key} is not set, nothing changed[/]")


# ───────────────────────────── Scan ─────────────────────────────
def run_scan(prompt: Optional[str], root: Optional[str], only_dir: Optional[bool]) -> None:
    cfg = normalize_with_defaults(load_config() or {})
    scanner = Scanner(
        prompt=prompt if prompt is not None else cfg["prompt"],
        root_dir=root if root is not None else cfg["root_dir"],
        only_dir=only_dir if only_dir is not None else cfg["only_dir"],
    )
    try:
        line = scanner.scan()
    except RlpathError as e:
        print_error(f"rlpath: {e}")
        raise typer.Exit(1)
    typer.echo(line)


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log debug messages to stderr."),
):
    """Read a line from the terminal with TAB path completion."""
    if verbose:
        set_level(logging.DEBUG)
    if ctx.invoked_subcommand is not None:
        return
    run_scan(None, None, None)


@app.command(cls=BannerCommand)
def scan(
    prompt: Optional[str] = typer.Option(None, "--prompt", "-p", help="Prompt shown at the left edge."),
    root: Optional[str] = typer.Option(None, "--root", "-r", help="Directory completion starts from (~ allowed)."),
    only_dir: Optional[bool] = typer.Option(None, "--only-dir/--all", help="Offer only directories."),
):
    """Read one line and print it."""
    run_scan(prompt, root, only_dir)


# ───────────────────────────── Config 子指令 ─────────────────────────────
@config_app.command("show", cls=BannerCommand)
def config_show():
    """Show the stored defaults."""
    ConfigManager().show()


@config_app.command("set", cls=BannerCommand)
def config_set(
    key: str = typer.Argument(..., help="prompt / root_dir / only_dir"),
    value: str = typer.Argument(..., help="New value"),
):
    """Store a default for scan."""
    ConfigManager().set(key, value)


@config_app.command("unset", cls=BannerCommand)
def config_unset(
    key: str = typer.Argument(..., help="Key to reset to its default"),
):
    """Reset a stored default."""
    ConfigManager().unset(key)


if __name__ == "__main__":
    app()
