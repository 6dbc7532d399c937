"""Read and normalize crossword words from a JSON config or an XLSX workbook."""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Iterable, Mapping

import openpyxl

from models import CrosswordError, Difficulty, Word

logger = logging.getLogger(__name__)

_DIFFICULTY_ALIASES = {
    "basico": Difficulty.BASIC,
    "básico": Difficulty.BASIC,
    "basic": Difficulty.BASIC,
    "intermedio": Difficulty.INTERMEDIATE,
    "intermediate": Difficulty.INTERMEDIATE,
    "avanzado": Difficulty.ADVANCED,
    "advanced": Difficulty.ADVANCED,
}


@dataclass
class PuzzleConfig:
    """Word list plus the descriptive metadata a config document may carry."""

    words: list[Word]
    difficulty: Difficulty | None = None
    author: str | None = None
    version: str | None = None
    date: str | None = None
    description: str | None = None
    app_name: str | None = None
    platforms: list[str] = field(default_factory=list)


def read_words(path: str | Path) -> list[Word]:
    """Load words from *path*, choosing the reader by file suffix."""
    path = Path(path)
    suffix = path.suffix.lower()
    if suffix == ".json":
        return load_config(path).words
    if suffix == ".xlsx":
        return read_words_xlsx(path)
    raise CrosswordError(f"Unsupported word list format: {path.suffix or path.name}")


def load_config(path: str | Path) -> PuzzleConfig:
    """Parse a JSON config document (``palabras``/``words`` plus metadata)."""
    path = Path(path)
    if not path.exists():
        raise CrosswordError(f"File not found: {path}")

    try:
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        raise CrosswordError(f"Invalid JSON in {path}: {e}") from e

    if not isinstance(data, dict):
        raise CrosswordError(f"Config root must be an object: {path}")

    items = data.get("palabras")
    if not isinstance(items, list):
        items = data.get("words")
    if not isinstance(items, list):
        items = []

    words = parse_words(items)
    if not words:
        raise CrosswordError(f"No valid words in {path}")

    nivel = data.get("nivel")
    platforms = data.get("plataformas") or []
    if not isinstance(platforms, list):
        platforms = [platforms]

    return PuzzleConfig(
        words=words,
        difficulty=normalize_difficulty(nivel) if nivel else None,
        author=data.get("autor"),
        version=data.get("version"),
        date=data.get("fecha"),
        description=data.get("descripcion"),
        app_name=data.get("nombreApp"),
        platforms=[str(p) for p in platforms],
    )


def read_words_xlsx(path: str | Path) -> list[Word]:
    """Open *path*, detect header, parse (clue, answer) rows, return words."""
    path = Path(path)
    if not path.exists():
        raise CrosswordError(f"File not found: {path}")

    wb = openpyxl.load_workbook(path, read_only=True, data_only=True)
    ws = wb.active

    header_row = _detect_header_row(ws)
    clue_col, answer_col = header_row[1] if header_row else (0, 1)
    start = header_row[0] + 1 if header_row else 1

    items: list[dict[str, Any]] = []
    for row in ws.iter_rows(min_row=start, values_only=True):
        if not row or len(row) <= max(clue_col, answer_col):
            continue
        items.append({"clue": row[clue_col], "answer": row[answer_col]})

    wb.close()

    words = parse_words(items)
    if not words:
        raise CrosswordError(f"No valid words in {path}")
    return words


def _detect_header_row(sheet) -> tuple[int, tuple[int, int]] | None:
    """Find a header row naming the clue and answer columns.

    Returns (1-based row index, (clue column, answer column)) or None, in
    which case column A is the clue and column B the answer.
    """
    clue_names = {"clue", "pista"}
    answer_names = {"answer", "palabra"}
    rows = sheet.iter_rows(min_row=1, max_row=20, values_only=True)
    for index, row in enumerate(rows, start=1):
        labels = [str(v).strip().lower() if v is not None else "" for v in row]
        clue_idx = next((i for i, v in enumerate(labels) if v in clue_names), None)
        answer_idx = next((i for i, v in enumerate(labels) if v in answer_names), None)
        if clue_idx is not None and answer_idx is not None:
            return index, (clue_idx, answer_idx)
    return None


def parse_words(items: Iterable[Mapping[str, Any]]) -> list[Word]:
    """Normalize raw items, dropping empty and duplicate answers."""
    seen_answers: set[str] = set()
    result: list[Word] = []

    for item in items:
        if not isinstance(item, Mapping):
            continue
        answer = normalize_answer(_first_present(item, "answer", "palabra"))
        clue = normalize_clue(_first_present(item, "clue", "pista"))
        if not answer or not clue:
            logger.warning("Skipping incomplete word entry: %r", dict(item))
            continue
        if answer in seen_answers:
            logger.warning("Duplicate answer '%s', skipping", answer)
            continue
        seen_answers.add(answer)
        result.append(Word(answer=answer, clue=clue))

    return result


def _first_present(item: Mapping[str, Any], *keys: str) -> Any:
    for key in keys:
        value = item.get(key)
        if value is not None:
            return value
    return ""


def normalize_answer(raw: Any) -> str:
    """Uppercase, strip everything except A-Z."""
    return "".join(c for c in str(raw).strip().upper() if "A" <= c <= "Z")


def normalize_clue(raw: Any) -> str:
    return str(raw).strip()


def normalize_difficulty(raw: str) -> Difficulty:
    """Map a Spanish or English level name to a Difficulty; unknown → BASIC."""
    return _DIFFICULTY_ALIASES.get(str(raw).strip().lower(), Difficulty.BASIC)
