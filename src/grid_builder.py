"""Number placed words, build the Grid model from a layout, build clue lists."""

from __future__ import annotations

from typing import Sequence

from models import CellType, CrosswordLayout, Entry, Grid, Placement


def number_entries(placed: Sequence[Placement], rows: int, cols: int) -> list[Entry]:
    """Scan L→R, T→B over start cells and turn each placement into an Entry.

    The n-th distinct start cell gets number n; an ACROSS and a DOWN word
    starting on the same cell share it. Placement order is preserved.
    """
    starts = {(p.row, p.col) for p in placed}
    numbers: dict[tuple[int, int], int] = {}
    counter = 1
    for r in range(rows):
        for c in range(cols):
            if (r, c) in starts:
                numbers[(r, c)] = counter
                counter += 1

    entries: list[Entry] = []
    for p in placed:
        number = numbers[(p.row, p.col)]
        entries.append(Entry(
            word=p.word, direction=p.direction, row=p.row, col=p.col,
            number=number, id=f"{p.direction.prefix}{number}",
        ))
    return entries


def build_grid(layout: CrosswordLayout) -> Grid:
    """Create a Grid and write letters from each entry."""
    grid = Grid.create(layout.rows, layout.cols)

    for entry in layout.entries:
        for (r, c), letter in zip(entry.cells(), entry.answer):
            cell = grid.cells[r][c]
            cell.cell_type = CellType.WHITE
            if cell.letter is not None and cell.letter != letter:
                raise ValueError(
                    f"Letter conflict at ({r},{c}): existing '{cell.letter}' vs '{letter}'"
                )
            cell.letter = letter

    return grid


def number_grid(grid: Grid, layout: CrosswordLayout) -> None:
    """Copy entry numbers onto their start cells."""
    for entry in layout.entries:
        grid.cells[entry.row][entry.col].number = entry.number


def build_clue_lists(layout: CrosswordLayout) -> tuple[list[Entry], list[Entry]]:
    """Return across/down entries, each sorted by number."""
    return layout.across, layout.down
