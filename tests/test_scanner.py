"""tests for the scan session."""

import readline
from pathlib import Path

import pytest

from rlpath.core.errors import ConfigError, InputError
from rlpath.core.scanner import Scanner


class TestRootDir:

    def test_empty_is_current_directory(self):
        assert Scanner().resolve_root_dir() == "./"

    def test_plain_path_untouched(self, tmp_path):
        assert Scanner(root_dir=str(tmp_path)).resolve_root_dir() == str(tmp_path)

    def test_tilde_expands_to_home(self, tmp_path, monkeypatch):
        monkeypatch.setattr("rlpath.core.scanner.Path.home", lambda: tmp_path)
        assert Scanner(root_dir="~").resolve_root_dir() == str(tmp_path)
        assert Scanner(root_dir="~/go").resolve_root_dir() == f"{tmp_path}/go"

    def test_tilde_user_not_expanded(self):
        assert Scanner(root_dir="~bob/x").resolve_root_dir() == "~bob/x"

    def test_unknown_home(self, monkeypatch):
        def no_home():
            raise RuntimeError("no home")

        monkeypatch.setattr("rlpath.core.scanner.Path.home", no_home)
        with pytest.raises(ConfigError):
            Scanner(root_dir="~/x").resolve_root_dir()


class TestScan:

    def test_returns_line_read(self, tree):
        prompts = []

        def read(prompt):
            prompts.append(prompt)
            return "cat sub/x.txt"

        assert Scanner(prompt="> ", root_dir=str(tree), read_line=read).scan() == "cat sub/x.txt"
        assert prompts == ["> "]

    def test_default_prompt(self, tree):
        scanner = Scanner(prompt="", root_dir=str(tree), read_line=lambda p: p)
        assert scanner.scan() == "$ "

    def test_completer_installed_while_reading(self, tree):
        seen = {}

        def read(prompt):
            seen["completer"] = readline.get_completer()
            return ""

        readline.set_completer(None)
        Scanner(root_dir=str(tree), read_line=read).scan()
        assert seen["completer"] is not None
        assert readline.get_completer() is None

    def test_engine_uses_root_and_only_dir(self, tree):
        engine = Scanner(root_dir=str(tree), only_dir=True).engine()
        assert engine.root_dir == str(tree)
        assert engine.only_dir is True

    @pytest.mark.parametrize("exc", [EOFError, KeyboardInterrupt])
    def test_end_of_input(self, tree, exc):
        def read(prompt):
            raise exc()

        readline.set_completer(None)
        with pytest.raises(InputError):
            Scanner(root_dir=str(tree), read_line=read).scan()
        assert readline.get_completer() is None

    def test_missing_root(self, tmp_path):
        missing = Path(tmp_path) / "nope"
        with pytest.raises(ConfigError):
            Scanner(root_dir=str(missing), read_line=lambda p: "x").scan()
