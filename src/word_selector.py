"""Pick a tier-sized subset of the word pool and retry placement until it fits."""

from __future__ import annotations

import logging
import random
from dataclasses import dataclass, field
from typing import Callable, Optional, Sequence

from grid_placer import generate
from models import (
    TIERS,
    CrosswordError,
    CrosswordLayout,
    Difficulty,
    InsufficientWordsError,
    LayoutNotFoundError,
    Word,
)

logger = logging.getLogger(__name__)

MAX_SELECTION_ATTEMPTS = 300

Generator = Callable[..., Optional[CrosswordLayout]]


@dataclass
class SelectionResult:
    """Outcome of :func:`select_words`. ``error`` is set instead of raising."""

    difficulty: Difficulty
    layout: CrosswordLayout
    required_count: int
    selected: list[Word] = field(default_factory=list)
    usable: list[Word] = field(default_factory=list)
    omitted: list[Word] = field(default_factory=list)
    error: CrosswordError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


def partition_by_length(pool: Sequence[Word], max_length: int) -> tuple[list[Word], list[Word]]:
    """Split *pool* into (usable, omitted) by answer length."""
    usable = [w for w in pool if len(w.answer) <= max_length]
    omitted = [w for w in pool if len(w.answer) > max_length]
    return usable, omitted


def select_words(
    pool: Sequence[Word],
    difficulty: Difficulty,
    rng: random.Random | None = None,
    generator: Generator = generate,
    max_attempts: int = MAX_SELECTION_ATTEMPTS,
) -> SelectionResult:
    """Sample ``word_count`` words for *difficulty* until *generator* places them all.

    *generator* is called as ``generator(words, rows, cols, rng=rng)``.
    """
    tier = TIERS[difficulty]
    board = tier.board
    required = tier.word_count
    empty = CrosswordLayout(board.rows, board.cols)

    if rng is None:
        rng = random.Random()

    usable, omitted = partition_by_length(pool, board.max_word_length)
    if omitted:
        logger.warning("Omitting %d word(s) too long for %dx%d board: %s",
                       len(omitted), board.rows, board.cols,
                       ", ".join(w.answer for w in omitted))

    if len(usable) < required:
        error = InsufficientWordsError(difficulty, required, len(usable))
        logger.warning("%s", error)
        return SelectionResult(difficulty, empty, required,
                               usable=usable, omitted=omitted, error=error)

    for attempt in range(max_attempts):
        shuffled = list(usable)
        rng.shuffle(shuffled)
        selected = shuffled[:required]

        layout = generator(selected, board.rows, board.cols, rng=rng)
        if layout is not None and len(layout.entries) == required:
            logger.info("Selected words (attempt %d): %s",
                        attempt + 1, ", ".join(w.answer for w in selected))
            return SelectionResult(difficulty, layout, required, selected=selected,
                                   usable=usable, omitted=omitted)

    error = LayoutNotFoundError(difficulty, required, max_attempts)
    logger.warning("%s", error)
    return SelectionResult(difficulty, empty, required,
                           usable=usable, omitted=omitted, error=error)
