"""tests for the column layout and the candidate grid."""

import io
import os

import pytest

from rlpath.core.errors import TerminalQueryError
from rlpath.core.layout import PADDING, compute_max_per_row, query_terminal_width
from rlpath.core.ui import render_candidates


class TestComputeMaxPerRow:

    def test_all_fit(self):
        # budget 80, each name costs 14
        assert compute_max_per_row(["a" * 10] * 5, 100) == 5

    def test_budget_runs_out(self):
        # budget 40: 26, 12, then -2 stops
        assert compute_max_per_row(["a" * 10] * 5, 50) == 2

    def test_longest_name_counted_first(self):
        names = ["a", "b" * 30, "cc"]
        # longest first: 40 - 34 = 6, then "cc" brings it to 0 and stops
        assert compute_max_per_row(names, 50) == 1

    def test_input_not_reordered(self):
        names = ["a", "bbbb", "cc"]
        compute_max_per_row(names, 80)
        assert names == ["a", "bbbb", "cc"]

    def test_single_long_name_gives_zero(self):
        assert compute_max_per_row(["x" * 40], 50) == 0

    def test_name_filling_budget_exactly_gives_zero(self):
        # floor(50 * 0.8) - 4 = 36: remaining budget hits 0
        assert compute_max_per_row(["x" * 36], 50) == 0

    def test_zero_width(self):
        assert compute_max_per_row(["a", "b"], 0) == 0

    def test_wide_characters_use_cell_width(self):
        # each CJK char takes two cells: 4 + 4 = 8 per name, budget 16
        assert compute_max_per_row(["檔案", "目錄"], 20) == 1

    @pytest.mark.parametrize("width", [0, 10, 33, 80, 200])
    def test_uniform_names_stay_within_budget(self, width):
        names = ["n" * 7] * 12
        fitted = compute_max_per_row(names, width)
        assert fitted * (7 + PADDING) <= int(width * 0.8)


class TestQueryTerminalWidth:

    def test_not_a_terminal(self):
        with pytest.raises(TerminalQueryError):
            query_terminal_width(io.StringIO())

    def test_reads_columns(self, monkeypatch):
        class Stream:
            def fileno(self):
                return 1

        monkeypatch.setattr("rlpath.core.layout.os.get_terminal_size", lambda fd: os.terminal_size((132, 40)))
        assert query_terminal_width(Stream()) == 132


class TestRenderCandidates:

    def test_rows_break_after_max_per_row(self, out, printed):
        render_candidates(["aa/", "b", "ccc"], 2, out)
        assert printed(out) == ["", "aa/    b", "ccc"]

    def test_zero_means_one_per_row(self, out, printed):
        render_candidates(["aa/", "b", "ccc"], 0, out)
        assert printed(out) == ["", "aa/", "b", "ccc"]

    def test_markup_is_not_interpreted(self, out, printed):
        render_candidates(["[bold]x", "y"], 5, out)
        assert printed(out) == ["", "[bold]x    y"]
