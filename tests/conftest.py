from __future__ import annotations

import io

import pytest
from rich.console import Console


@pytest.fixture
def tree(tmp_path):
    """A root with one file and one directory: x.txt, sub/."""
    (tmp_path / "x.txt").write_text("x")
    (tmp_path / "sub").mkdir()
    return tmp_path


@pytest.fixture
def out():
    return Console(file=io.StringIO(), width=120, color_system=None, highlight=False)


@pytest.fixture
def printed():
    """Lines written to a captured console, trailing blanks stripped."""
    def _lines(console: Console) -> list[str]:
        return [line.rstrip() for line in console.file.getvalue().splitlines()]
    return _lines
