from __future__ import annotations

from typing import NamedTuple


class Fragment(NamedTuple):
    text: str
    start: int


def _is_boundary(line: str, pos: int) -> bool:
    if pos == 0:
        return True
    # 空白前一個字元是反斜線 → 跳脫的空白，不算邊界
    return line[pos - 1] == " " and (pos == 1 or line[pos - 2] != "\\")


def locate_fragment_start(line: str, cursor_pos: int) -> int:
    """Offset where the path fragment under the cursor begins.

    Walks back from ``cursor_pos`` to the nearest unescaped space (or the
    start of the line). ``"a\\ b c"`` with the cursor at 6 gives 5.
    """
    pos = max(0, min(cursor_pos, len(line)))
    while not _is_boundary(line, pos):
        pos -= 1
    return pos


def fragment_at(line: str, cursor_pos: int) -> Fragment:
    end = max(0, min(cursor_pos, len(line)))
    start = locate_fragment_start(line, end)
    return Fragment(line[start:end], start)
