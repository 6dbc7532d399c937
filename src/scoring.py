"""Check a player's letters against a finished layout."""

from __future__ import annotations

from collections import namedtuple
from enum import Enum
from typing import Mapping

from models import TIERS, CrosswordError, CrosswordLayout, Difficulty

Letters = Mapping[tuple[int, int], str]
WordResults = namedtuple("WordResults", ["correct", "incorrect"])


class CellStatus(Enum):
    CORRECT = "CORRECT"
    WRONG = "WRONG"
    EMPTY = "EMPTY"


def expected_letters(layout: CrosswordLayout) -> dict[tuple[int, int], str]:
    return layout.letters()


def _player_letter(letters: Letters, key: tuple[int, int]) -> str:
    return (letters.get(key) or "").strip().upper()


def check_cells(layout: CrosswordLayout, letters: Letters) -> dict[tuple[int, int], CellStatus]:
    """Status of every letter cell: EMPTY if unfilled, else CORRECT/WRONG."""
    status: dict[tuple[int, int], CellStatus] = {}
    for key, expected in layout.letters().items():
        given = _player_letter(letters, key)
        if not given:
            status[key] = CellStatus.EMPTY
        elif given == expected:
            status[key] = CellStatus.CORRECT
        else:
            status[key] = CellStatus.WRONG
    return status


def all_filled(layout: CrosswordLayout, letters: Letters) -> bool:
    return all(_player_letter(letters, key) for key in layout.letters())


def is_solved(layout: CrosswordLayout, letters: Letters) -> bool:
    """True when the layout has letter cells and every one matches."""
    expected = layout.letters()
    return bool(expected) and all(
        _player_letter(letters, key) == letter for key, letter in expected.items()
    )


def word_results(layout: CrosswordLayout, letters: Letters) -> WordResults:
    """Count entries whose cells all match, and the rest."""
    correct = 0
    for entry in layout.entries:
        if all(_player_letter(letters, cell) == letter
               for cell, letter in zip(entry.cells(), entry.answer)):
            correct += 1
    return WordResults(correct, max(len(layout.entries) - correct, 0))


class PuzzleAttempt:
    """A player's letters on one layout.

    Completion points are awarded at most once per attempt, the first time
    :meth:`check` sees the grid solved.
    """

    def __init__(self, layout: CrosswordLayout, difficulty: Difficulty) -> None:
        self.layout = layout
        self.difficulty = difficulty
        self.letters: dict[tuple[int, int], str] = {}
        self.score = 0
        self._expected = layout.letters()
        self._completed = False

    @property
    def completed(self) -> bool:
        return self._completed

    def enter(self, row: int, col: int, letter: str) -> None:
        if (row, col) not in self._expected:
            raise CrosswordError(f"({row},{col}) is not a letter cell")
        self.letters[(row, col)] = letter.strip().upper()[-1:]

    def clear(self, row: int, col: int) -> None:
        self.letters.pop((row, col), None)

    def statuses(self) -> dict[tuple[int, int], CellStatus]:
        return check_cells(self.layout, self.letters)

    def results(self) -> WordResults:
        return word_results(self.layout, self.letters)

    def check(self) -> int:
        """Return the points awarded by this call (0 unless newly solved)."""
        if self._completed or not is_solved(self.layout, self.letters):
            return 0
        self._completed = True
        points = TIERS[self.difficulty].points
        self.score += points
        return points
