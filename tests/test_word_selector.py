"""Tests for word_selector.py."""

import functools
import random

import pytest

from models import (
    CrosswordLayout,
    Difficulty,
    InsufficientWordsError,
    LayoutNotFoundError,
    Word,
)
from grid_placer import generate
from word_selector import MAX_SELECTION_ATTEMPTS, partition_by_length, select_words

from layout_checks import assert_valid_layout


_POOL = [
    "ELEPHANT", "PRACTICE", "LAUGHTER", "HONESTY", "SILENCE",
    "ACTIONS", "REVENGE", "JUPITER", "BANANA", "MONKEY",
    "ORANGE", "PURPLE", "CASTLE", "BRIDGE", "FOREST",
    "GARDEN", "SUMMER", "WINTER", "SPRING", "PLANET",
    "ROCKET", "GUITAR", "CAMERA", "MARKET", "COFFEE",
]


def _make_words(answers):
    return [Word(a, f"Clue for {a}") for a in answers]


class CountingGenerator:
    """Wraps generate() and records how often it was called."""

    def __init__(self, inner=generate):
        self.inner = inner
        self.calls = 0

    def __call__(self, words, rows, cols, rng=None):
        self.calls += 1
        return self.inner(words, rows, cols, rng=rng)


class TestPartition:
    def test_too_long_is_omitted(self):
        words = _make_words(["A" * 16, "CAT"])
        usable, omitted = partition_by_length(words, 15)
        assert [w.answer for w in usable] == ["CAT"]
        assert [w.answer for w in omitted] == ["A" * 16]

    def test_exact_fit_is_usable(self):
        usable, omitted = partition_by_length(_make_words(["B" * 9]), 9)
        assert len(usable) == 1
        assert omitted == []


class TestSelectWords:
    def test_basic_tier_success(self):
        pool = _make_words(_POOL)
        result = select_words(pool, Difficulty.BASIC, rng=random.Random(42))

        assert result.ok
        assert result.error is None
        assert result.required_count == 5
        assert len(result.selected) == 5
        assert len(set(w.answer for w in result.selected)) == 5
        assert (result.layout.rows, result.layout.cols) == (9, 9)
        assert len(result.layout.entries) == 5
        assert_valid_layout(result.layout, result.selected)

    def test_insufficient_words_skips_placement(self):
        pool = _make_words(["CAT", "CAR", "ARC"])
        counter = CountingGenerator()
        result = select_words(pool, Difficulty.BASIC, generator=counter)

        assert counter.calls == 0
        assert not result.ok
        assert isinstance(result.error, InsufficientWordsError)
        assert result.error.required_count == 5
        assert result.layout == CrosswordLayout(9, 9)
        assert len(result.usable) == 3

    def test_omitted_words_do_not_count(self):
        pool = _make_words(["CAT", "CAR", "ARC", "TAR"] + ["LONGWORDS" + "X" * i for i in range(1, 4)])
        counter = CountingGenerator()
        result = select_words(pool, Difficulty.BASIC, generator=counter)
        assert isinstance(result.error, InsufficientWordsError)
        assert len(result.omitted) == 3
        assert counter.calls == 0

    def test_oversized_word_is_omitted(self):
        pool = _make_words(_POOL[:15] + ["A" * 16])
        result = select_words(pool, Difficulty.ADVANCED, generator=lambda *a, **k: None,
                              max_attempts=1)
        assert [w.answer for w in result.omitted] == ["A" * 16]
        assert all(len(w.answer) <= 15 for w in result.usable)

    def test_generator_gets_tier_board(self):
        seen = []

        def recording(words, rows, cols, rng=None):
            seen.append((len(words), rows, cols))
            return None

        pool = _make_words(_POOL[:12] + ["A" * 13])
        result = select_words(pool, Difficulty.INTERMEDIATE, generator=recording,
                              max_attempts=2)
        assert seen == [(10, 12, 12), (10, 12, 12)]
        assert [w.answer for w in result.omitted] == ["A" * 13]
        assert (result.layout.rows, result.layout.cols) == (12, 12)

    def test_layout_not_found(self):
        pool = _make_words([ch * 9 for ch in "ABCDE"])
        counter = CountingGenerator(functools.partial(generate, max_restarts=5))
        result = select_words(pool, Difficulty.BASIC, rng=random.Random(0),
                              generator=counter, max_attempts=4)

        assert counter.calls == 4
        assert isinstance(result.error, LayoutNotFoundError)
        assert result.error.required_count == 5
        assert result.error.difficulty is Difficulty.BASIC
        assert result.layout.entries == ()
        assert result.selected == []

    def test_short_layout_is_rejected(self):
        pool = _make_words(_POOL)

        def partial_layout(words, rows, cols, rng=None):
            full = generate(words, rows, cols, rng=rng)
            if full is None:
                return None
            return CrosswordLayout(rows, cols, full.entries[:-1])

        result = select_words(pool, Difficulty.BASIC, rng=random.Random(1),
                              generator=partial_layout, max_attempts=2)
        assert isinstance(result.error, LayoutNotFoundError)

    def test_unseeded_runs_are_structurally_valid(self):
        pool = _make_words(_POOL)
        for _ in range(2):
            result = select_words(pool, Difficulty.BASIC)
            assert result.ok
            assert_valid_layout(result.layout, result.selected)

    def test_default_attempt_budget(self):
        assert MAX_SELECTION_ATTEMPTS == 300

    @pytest.mark.slow
    def test_intermediate_tier(self):
        pool = _make_words(_POOL)
        result = select_words(pool, Difficulty.INTERMEDIATE, rng=random.Random(7))
        assert result.ok
        assert len(result.layout.entries) == 10
        assert_valid_layout(result.layout, result.selected)
