"""Crossword word placement: randomized seed + depth-first backtracking with restarts."""

from __future__ import annotations

import logging
import random
from collections import namedtuple
from typing import Optional, Sequence

from grid_builder import number_entries
from models import CrosswordLayout, Direction, Placement, Word

logger = logging.getLogger(__name__)

MAX_RESTARTS = 600
SEED_OFFSETS = (0, -1, 1, -2, 2)

Candidate = namedtuple("Candidate", ["row", "col"])
WorkingGrid = list[list[Optional[str]]]
# (row, col, direction) for every cell an entry covers
Claims = frozenset[tuple[int, int, Direction]]


def generate(
    words: Sequence[Word],
    rows: int,
    cols: int,
    rng: random.Random | None = None,
    max_restarts: int = MAX_RESTARTS,
) -> CrosswordLayout | None:
    """Place every word on a *rows* x *cols* board.

    Each restart shuffles the words, alternates ACROSS/DOWN by shuffled
    position, anchors the first word at the center and extends by
    backtracking. Returns None once *max_restarts* are spent.
    """
    if not words:
        return None

    if rng is None:
        rng = random.Random()

    for restart in range(max_restarts):
        order = list(words)
        rng.shuffle(order)
        directions = [Direction.ACROSS if i % 2 == 0 else Direction.DOWN
                      for i in range(len(order))]

        placed = _single_attempt(order, directions, rows, cols, rng)
        if placed is not None and len(placed) == len(words):
            logger.debug("Placed %d words on %dx%d after %d restart(s)",
                         len(placed), rows, cols, restart + 1)
            return CrosswordLayout(rows, cols, tuple(number_entries(placed, rows, cols)))

    logger.debug("No layout for %d words on %dx%d after %d restarts",
                 len(words), rows, cols, max_restarts)
    return None


# ── Single restart ────────────────────────────────────────────────────

def _single_attempt(
    order: list[Word],
    directions: list[Direction],
    rows: int,
    cols: int,
    rng: random.Random,
) -> list[Placement] | None:
    """Anchor the first word near the center, then backtrack over the rest."""
    working: WorkingGrid = [[None] * cols for _ in range(rows)]

    first = order[0]
    first_dir = directions[0]
    start = _seed_position(first.answer, first_dir, working, rows, cols)
    if start is None:
        return None

    sr, sc = start
    _place_on_grid(first.answer, sr, sc, first_dir, working)
    seed = Placement(first, first_dir, sr, sc)

    claims = _claim(frozenset(), seed)
    return _backtrack(working, claims, 1, order, directions, [seed], rows, cols, rng)


def _seed_position(
    answer: str, direction: Direction, working: WorkingGrid, rows: int, cols: int,
) -> tuple[int, int] | None:
    """First legal start among the 25 row/column offsets around the center."""
    base_r, base_c = _seed_origin(answer, direction, rows, cols)
    for dr in SEED_OFFSETS:
        for dc in SEED_OFFSETS:
            sr, sc = base_r + dr, base_c + dc
            if _is_valid_placement(answer, sr, sc, direction, working, rows, cols):
                return sr, sc
    return None


def _seed_origin(answer: str, direction: Direction, rows: int, cols: int) -> tuple[int, int]:
    """Start cell that makes *answer* straddle the board center."""
    mid_r = rows // 2
    mid_c = cols // 2
    half = len(answer) // 2
    if direction == Direction.ACROSS:
        return mid_r, mid_c - half
    return mid_r - half, mid_c


def _backtrack(
    working: WorkingGrid,
    claims: Claims,
    idx: int,
    order: list[Word],
    directions: list[Direction],
    placed: list[Placement],
    rows: int,
    cols: int,
    rng: random.Random,
) -> list[Placement] | None:
    if idx >= len(order):
        return placed

    word = order[idx]
    direction = directions[idx]

    candidates = _find_candidates(word.answer, direction, working, rows, cols, rng)
    if not candidates:
        return None

    for cand in candidates:
        if not _is_valid_placement(word.answer, cand.row, cand.col, direction, working, rows, cols):
            continue
        if _count_intersections(word.answer, cand.row, cand.col, direction, working) < 1:
            continue
        placement = Placement(word, direction, cand.row, cand.col)
        if _overlaps_parallel(placement, claims):
            continue

        branch = _copy_grid(working)
        _place_on_grid(word.answer, cand.row, cand.col, direction, branch)

        result = _backtrack(
            branch, _claim(claims, placement), idx + 1, order, directions,
            placed + [placement],
            rows, cols, rng,
        )
        if result is not None:
            return result

    return None


# ── Candidate finding ─────────────────────────────────────────────────

def _find_candidates(
    answer: str,
    direction: Direction,
    working: WorkingGrid,
    rows: int,
    cols: int,
    rng: random.Random,
) -> list[Candidate]:
    """Start cells that would put some letter of *answer* on a matching grid letter.

    Shuffled; repeated start cells are dropped after shuffling.
    """
    dr, dc = direction.step
    candidates: list[Candidate] = []

    for r in range(rows):
        for c in range(cols):
            existing = working[r][c]
            if existing is None:
                continue
            for j, ch in enumerate(answer):
                if ch != existing:
                    continue
                candidates.append(Candidate(r - dr * j, c - dc * j))

    rng.shuffle(candidates)
    return list(dict.fromkeys(candidates))


# ── Validation ────────────────────────────────────────────────────────

def _in_bounds(r: int, c: int, rows: int, cols: int) -> bool:
    return 0 <= r < rows and 0 <= c < cols


def _is_valid_placement(
    answer: str, row: int, col: int, direction: Direction,
    working: WorkingGrid, rows: int, cols: int,
) -> bool:
    """Check bounds, letter matching, no extension, no perpendicular contact."""
    length = len(answer)
    dr, dc = direction.step

    if not _in_bounds(row, col, rows, cols):
        return False
    if not _in_bounds(row + dr * (length - 1), col + dc * (length - 1), rows, cols):
        return False

    # Cell before start must be empty/edge
    br, bc = row - dr, col - dc
    if _in_bounds(br, bc, rows, cols) and working[br][bc] is not None:
        return False

    # Cell after end must be empty/edge
    ar, ac = row + dr * length, col + dc * length
    if _in_bounds(ar, ac, rows, cols) and working[ar][ac] is not None:
        return False

    # Perpendicular offsets
    pr, pc = dc, dr

    for i, letter in enumerate(answer):
        r = row + dr * i
        c = col + dc * i
        existing = working[r][c]

        if existing is not None:
            if existing != letter:
                return False
            continue

        if _in_bounds(r + pr, c + pc, rows, cols) and working[r + pr][c + pc] is not None:
            return False
        if _in_bounds(r - pr, c - pc, rows, cols) and working[r - pr][c - pc] is not None:
            return False

    return True


# ── Grid manipulation ─────────────────────────────────────────────────

def _count_intersections(
    answer: str, row: int, col: int, direction: Direction, working: WorkingGrid,
) -> int:
    dr, dc = direction.step
    return sum(1 for i in range(len(answer)) if working[row + dr * i][col + dc * i] is not None)


def _place_on_grid(
    answer: str, row: int, col: int, direction: Direction, working: WorkingGrid,
) -> None:
    dr, dc = direction.step
    for i, letter in enumerate(answer):
        working[row + dr * i][col + dc * i] = letter


def _copy_grid(working: WorkingGrid) -> WorkingGrid:
    return [row[:] for row in working]


def _claim(claims: Claims, placement: Placement) -> Claims:
    return claims | {(r, c, placement.direction) for r, c in placement.cells()}


def _overlaps_parallel(placement: Placement, claims: Claims) -> bool:
    """True if *placement* shares a cell with an entry running the same way."""
    return any((r, c, placement.direction) in claims for r, c in placement.cells())
