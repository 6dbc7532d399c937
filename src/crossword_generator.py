#!/usr/bin/env python3
"""CLI entry point: word list → tier-sized crossword → PDF, XLSX and SVG files.

The input is a JSON config (``palabras``/``words`` plus ``nivel``) or an XLSX
sheet with clue and answer columns.
"""

from __future__ import annotations

import argparse
import logging
import random
import sys
import time
from pathlib import Path

from models import TIERS, CrosswordError, CrosswordLayout, Difficulty, Word

logger = logging.getLogger(__name__)


def configure_logging(level: int = logging.WARNING) -> None:
    """Install a single stderr handler on the root logger."""
    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(
        fmt="%(asctime)s | %(levelname)-7s | %(name)s | %(message)s",
        datefmt="%H:%M:%S",
    ))
    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(level)


def _positive_int(value: str) -> int:
    n = int(value)
    if n < 1:
        raise argparse.ArgumentTypeError(f"must be at least 1, got {n}")
    return n


def _build_arg_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        description="Generate a crossword layout from a word list."
    )
    p.add_argument("input",
                   help="Word list: JSON config or XLSX with clue/answer columns")
    p.add_argument(
        "output",
        nargs="?",
        default=None,
        help="Output PDF path (default: input with .pdf extension)",
    )
    p.add_argument("--difficulty", choices=[d.value.lower() for d in Difficulty],
                   default=None,
                   help="Tier to build (default: config 'nivel', else basic)")
    p.add_argument("--title", default="CROSSWORD",
                   help='Title text (default: "CROSSWORD")')
    p.add_argument("--seed", type=int, default=None,
                   help="Random seed (default: random)")
    p.add_argument("--attempts", type=_positive_int, default=None,
                   help="Word selection attempts (default: 300)")
    p.add_argument("-v", "--verbose", action="store_true",
                   help="Debug logging")
    return p


def main(argv: list[str] | None = None) -> None:
    parser = _build_arg_parser()
    args = parser.parse_args(argv)

    configure_logging(logging.DEBUG if args.verbose else logging.WARNING)

    t0 = time.time()
    try:
        _run(args, t0)
    except CrosswordError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)


def _run(args, t0: float) -> None:
    from word_loader import load_config, read_words
    from word_selector import MAX_SELECTION_ATTEMPTS, select_words

    input_path = Path(args.input)
    output_path = args.output or str(input_path.with_suffix(".pdf"))

    difficulty = Difficulty.BASIC
    if input_path.suffix.lower() == ".json":
        config = load_config(input_path)
        words = config.words
        if config.difficulty is not None:
            difficulty = config.difficulty
    else:
        words = read_words(input_path)

    if args.difficulty:
        difficulty = Difficulty(args.difficulty.upper())

    tier = TIERS[difficulty]
    print(f"Read {len(words)} valid words", file=sys.stderr)
    print(f"Building {difficulty.value.lower()} crossword: "
          f"{tier.word_count} words on {tier.rows}x{tier.cols}", file=sys.stderr)

    rng = random.Random(args.seed)
    result = select_words(
        words, difficulty, rng=rng,
        max_attempts=args.attempts if args.attempts is not None else MAX_SELECTION_ATTEMPTS,
    )
    if result.error is not None:
        raise result.error

    _output_all(result.layout, args.title, output_path, omitted=result.omitted)

    elapsed = time.time() - t0
    print(
        f"Placed {len(result.layout)}/{tier.word_count} words "
        f"({len(result.omitted)} omitted as too long), "
        f"time {elapsed:.1f}s",
        file=sys.stderr,
    )


def _output_all(
    layout: CrosswordLayout,
    title: str,
    output_path: str,
    omitted: list[Word] | None = None,
) -> None:
    """Write PDF, clue XLSX, puzzle SVG and answer SVG into an 'output' folder."""
    from grid_builder import build_clue_lists, build_grid, number_grid
    from pdf_renderer import render_pdf
    from svg_renderer import render_answer_svg, render_puzzle_svg
    from xlsx_writer import write_clues_xlsx

    grid = build_grid(layout)
    number_grid(grid, layout)
    across, down = build_clue_lists(layout)

    stem = Path(output_path).stem
    out_dir = Path(output_path).parent / "output"
    out_dir.mkdir(exist_ok=True)

    pdf_path = str(out_dir / f"{stem}.pdf")
    xlsx_path = str(out_dir / f"{stem}_clues.xlsx")
    puzzle_svg_path = str(out_dir / f"{stem}_puzzle.svg")
    answer_svg_path = str(out_dir / f"{stem}_answer.svg")

    render_pdf(grid, across, down, title, pdf_path)
    write_clues_xlsx(across, down, xlsx_path, omitted=omitted)
    render_puzzle_svg(grid, puzzle_svg_path)
    render_answer_svg(grid, answer_svg_path)

    for path in (pdf_path, xlsx_path, puzzle_svg_path, answer_svg_path):
        print(f"Output: {path}", file=sys.stderr)


if __name__ == "__main__":
    main()
