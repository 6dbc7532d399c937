"""Data models for the crossword layout generator."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Iterator


class CellType(Enum):
    BLACK = "BLACK"
    WHITE = "WHITE"


class Direction(Enum):
    ACROSS = "ACROSS"
    DOWN = "DOWN"

    @property
    def step(self) -> tuple[int, int]:
        """(dr, dc) for one cell along this direction."""
        return (0, 1) if self is Direction.ACROSS else (1, 0)

    @property
    def prefix(self) -> str:
        return "A" if self is Direction.ACROSS else "D"


class Difficulty(Enum):
    BASIC = "BASIC"
    INTERMEDIATE = "INTERMEDIATE"
    ADVANCED = "ADVANCED"


@dataclass(frozen=True)
class TierSpec:
    """Board size, word count, scoring and time limit bound to a difficulty."""

    rows: int
    cols: int
    word_count: int
    points: int
    time_limit: int  # seconds

    @property
    def board(self) -> BoardSize:
        return BoardSize(self.rows, self.cols)


TIERS: dict[Difficulty, TierSpec] = {
    Difficulty.BASIC: TierSpec(rows=9, cols=9, word_count=5, points=10, time_limit=600),
    Difficulty.INTERMEDIATE: TierSpec(rows=12, cols=12, word_count=10, points=15, time_limit=1200),
    Difficulty.ADVANCED: TierSpec(rows=15, cols=15, word_count=15, points=20, time_limit=1800),
}


@dataclass(frozen=True)
class Word:
    """An answer/clue pair. ``answer`` is uppercase A-Z only."""

    answer: str
    clue: str


@dataclass(frozen=True)
class BoardSize:
    rows: int
    cols: int

    def __post_init__(self) -> None:
        if self.rows <= 0 or self.cols <= 0:
            raise ValueError(f"Board dimensions must be positive, got {self.rows}x{self.cols}")

    @property
    def max_word_length(self) -> int:
        return max(self.rows, self.cols)


@dataclass(frozen=True)
class Placement:
    """A word positioned on the board; ``row``/``col`` is the start cell."""

    word: Word
    direction: Direction
    row: int
    col: int

    @property
    def answer(self) -> str:
        return self.word.answer

    @property
    def clue(self) -> str:
        return self.word.clue

    def cells(self) -> Iterator[tuple[int, int]]:
        dr, dc = self.direction.step
        for i in range(len(self.word.answer)):
            yield self.row + dr * i, self.col + dc * i


@dataclass(frozen=True)
class Entry(Placement):
    """A Placement with its grid-assigned number and display id (``A3``, ``D7``)."""

    number: int = 0
    id: str = ""


@dataclass(frozen=True)
class CrosswordLayout:
    """A finished layout. ``entries`` is empty when generation failed."""

    rows: int
    cols: int
    entries: tuple[Entry, ...] = ()

    def __len__(self) -> int:
        return len(self.entries)

    def letters(self) -> dict[tuple[int, int], str]:
        """Map every letter cell to its expected letter."""
        expected: dict[tuple[int, int], str] = {}
        for entry in self.entries:
            for (r, c), letter in zip(entry.cells(), entry.answer):
                expected[(r, c)] = letter
        return expected

    @property
    def across(self) -> list[Entry]:
        return sorted((e for e in self.entries if e.direction == Direction.ACROSS),
                      key=lambda e: e.number)

    @property
    def down(self) -> list[Entry]:
        return sorted((e for e in self.entries if e.direction == Direction.DOWN),
                      key=lambda e: e.number)


@dataclass
class Cell:
    """A single cell in the rendering grid."""

    cell_type: CellType = CellType.BLACK
    letter: str | None = None
    number: int | None = None


@dataclass
class Grid:
    """A rows x cols crossword grid of Cell objects."""

    rows: int
    cols: int
    cells: list[list[Cell]] = field(default_factory=list)

    @classmethod
    def create(cls, rows: int, cols: int | None = None) -> Grid:
        """Create a grid of all-BLACK cells. ``cols`` defaults to ``rows``."""
        if cols is None:
            cols = rows
        cells = [[Cell() for _ in range(cols)] for _ in range(rows)]
        return cls(rows=rows, cols=cols, cells=cells)


class CrosswordError(Exception):
    """Fatal error during crossword generation."""


class InsufficientWordsError(CrosswordError):
    """The usable word pool is smaller than the tier requires."""

    def __init__(self, difficulty: Difficulty, required_count: int, available: int) -> None:
        self.difficulty = difficulty
        self.required_count = required_count
        self.available = available
        super().__init__(
            f"Not enough words for {difficulty.value.lower()} level "
            f"({required_count} required, {available} usable)"
        )


class LayoutNotFoundError(CrosswordError):
    """The attempt budget ran out without a full-size layout."""

    def __init__(self, difficulty: Difficulty, required_count: int, attempts: int) -> None:
        self.difficulty = difficulty
        self.required_count = required_count
        self.attempts = attempts
        super().__init__(
            f"Could not build a {required_count}-word crossword for "
            f"{difficulty.value.lower()} level after {attempts} attempts"
        )
