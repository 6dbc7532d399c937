"""Tests for grid_builder.py."""

import pytest

from models import CellType, CrosswordLayout, Direction, Placement, Word
from grid_builder import build_clue_lists, build_grid, number_entries, number_grid


def _make_placed(answer, row, col, direction):
    return Placement(Word(answer, f"Clue for {answer}"), direction, row, col)


def _layout(placed, rows=5, cols=5):
    return CrosswordLayout(rows, cols, tuple(number_entries(placed, rows, cols)))


class TestNumberEntries:
    def test_shared_start_shares_number(self):
        placed = [
            _make_placed("CAT", 0, 0, Direction.ACROSS),
            _make_placed("COW", 0, 0, Direction.DOWN),
        ]
        entries = number_entries(placed, 5, 5)
        assert [e.id for e in entries] == ["A1", "D1"]

    def test_row_major_order(self):
        placed = [
            _make_placed("FGH", 2, 2, Direction.ACROSS),
            _make_placed("ABCDE", 0, 0, Direction.ACROSS),
            _make_placed("BPQ", 0, 1, Direction.DOWN),
        ]
        entries = number_entries(placed, 5, 5)
        assert [e.id for e in entries] == ["A3", "A1", "D2"]

    def test_preserves_placement_order(self):
        placed = [
            _make_placed("XYZ", 4, 0, Direction.ACROSS),
            _make_placed("ABC", 0, 0, Direction.DOWN),
        ]
        entries = number_entries(placed, 5, 5)
        assert [e.answer for e in entries] == ["XYZ", "ABC"]
        assert [e.number for e in entries] == [2, 1]

    def test_rectangular_scan(self):
        placed = [
            _make_placed("AB", 0, 5, Direction.ACROSS),
            _make_placed("CD", 1, 0, Direction.DOWN),
        ]
        entries = number_entries(placed, 3, 7)
        assert [e.id for e in entries] == ["A1", "D2"]


class TestBuildGrid:
    def test_basic_across(self):
        grid = build_grid(_layout([_make_placed("CAT", 0, 0, Direction.ACROSS)]))
        assert [grid.cells[0][c].letter for c in range(3)] == ["C", "A", "T"]
        assert grid.cells[0][0].cell_type == CellType.WHITE

    def test_basic_down(self):
        grid = build_grid(_layout([_make_placed("DOG", 0, 0, Direction.DOWN)]))
        assert [grid.cells[r][0].letter for r in range(3)] == ["D", "O", "G"]

    def test_rectangular(self):
        layout = _layout([_make_placed("CAT", 1, 4, Direction.ACROSS)], rows=3, cols=7)
        grid = build_grid(layout)
        assert (grid.rows, grid.cols) == (3, 7)
        assert grid.cells[1][6].letter == "T"

    def test_letter_conflict_raises(self):
        layout = _layout([
            _make_placed("CAT", 0, 0, Direction.ACROSS),
            _make_placed("DOG", 0, 0, Direction.DOWN),
        ])
        with pytest.raises(ValueError, match="Letter conflict"):
            build_grid(layout)

    def test_black_cells_remain(self):
        grid = build_grid(_layout([_make_placed("CAT", 0, 0, Direction.ACROSS)]))
        assert grid.cells[1][0].cell_type == CellType.BLACK


class TestNumberGrid:
    def test_numbers_on_start_cells(self):
        layout = _layout([
            _make_placed("ABCDE", 0, 0, Direction.ACROSS),
            _make_placed("AXY", 0, 0, Direction.DOWN),
            _make_placed("BPQ", 0, 1, Direction.DOWN),
        ])
        grid = build_grid(layout)
        number_grid(grid, layout)
        assert grid.cells[0][0].number == 1
        assert grid.cells[0][1].number == 2
        assert grid.cells[1][0].number is None


class TestBuildClueLists:
    def test_sorted_by_number(self):
        layout = _layout([
            _make_placed("FGH", 2, 2, Direction.ACROSS),
            _make_placed("ABCDE", 0, 0, Direction.ACROSS),
            _make_placed("AXY", 0, 0, Direction.DOWN),
        ])
        across, down = build_clue_lists(layout)
        assert [e.id for e in across] == ["A1", "A2"]
        assert [e.id for e in down] == ["D1"]
