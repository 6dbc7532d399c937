"""Integration tests: word list → selection → PDF/XLSX/SVG files."""

import json

import openpyxl
import pytest

from crossword_generator import _build_arg_parser, main

_WORDS = [
    ("ELEPHANT", "Large grey mammal"), ("GARDEN", "Place for flowers"),
    ("PLANET", "Orbits a star"), ("ORANGE", "Citrus fruit"),
    ("CASTLE", "Fortified home"), ("MARKET", "Place to shop"),
    ("WINTER", "Cold season"), ("ROCKET", "Goes to space"),
    ("CAMERA", "Takes pictures"), ("FOREST", "Many trees"),
    ("CANDLESTICKMAKER", "Too long for any board"),
]


def _write_config(path, nivel="basico"):
    path.write_text(json.dumps({
        "nivel": nivel,
        "palabras": [{"palabra": a, "pista": c} for a, c in _WORDS],
    }), encoding="utf-8")
    return path


class TestEndToEnd:
    def test_json_config_outputs(self, tmp_path):
        config = _write_config(tmp_path / "crucigrama.json")
        main([str(config), str(tmp_path / "puzzle.pdf"), "--seed", "42"])

        out = tmp_path / "output"
        assert (out / "puzzle.pdf").read_bytes()[:5] == b"%PDF-"
        assert (out / "puzzle_puzzle.svg").exists()
        assert (out / "puzzle_answer.svg").exists()

        wb = openpyxl.load_workbook(out / "puzzle_clues.xlsx")
        ids = [c.value for c in wb["Clues"]["A"] if c.value and c.value[0] in "AD"
               and c.value[1:].isdigit()]
        assert len(ids) == 5
        assert wb["Omitted"]["B2"].value == "CANDLESTICKMAKER"

    def test_difficulty_flag_overrides_config(self, tmp_path, capsys):
        config = _write_config(tmp_path / "crucigrama.json", nivel="avanzado")
        main([str(config), str(tmp_path / "p.pdf"), "--difficulty", "basic", "--seed", "1"])
        assert "5 words on 9x9" in capsys.readouterr().err

    def test_insufficient_words_exits(self, tmp_path, capsys):
        config = _write_config(tmp_path / "crucigrama.json", nivel="avanzado")
        with pytest.raises(SystemExit) as exc:
            main([str(config), str(tmp_path / "p.pdf")])
        assert exc.value.code == 1
        assert "Not enough words" in capsys.readouterr().err

    def test_missing_input_exits(self, tmp_path):
        with pytest.raises(SystemExit):
            main([str(tmp_path / "missing.json")])

    @pytest.mark.slow
    def test_xlsx_input(self, tmp_path):
        wb = openpyxl.Workbook()
        ws = wb.active
        ws.append(["Clue", "Answer"])
        for answer, clue in _WORDS:
            ws.append([clue, answer])
        wb.save(tmp_path / "words.xlsx")

        main([str(tmp_path / "words.xlsx"), "--seed", "3"])
        assert (tmp_path / "output" / "words.pdf").exists()


class TestArgParser:
    def test_attempts_default_is_none(self):
        args = _build_arg_parser().parse_args(["words.json"])
        assert args.attempts is None

    def test_attempts_value(self):
        args = _build_arg_parser().parse_args(["words.json", "--attempts", "3"])
        assert args.attempts == 3

    @pytest.mark.parametrize("value", ["0", "-2"])
    def test_attempts_below_one_rejected(self, tmp_path, capsys, value):
        config = _write_config(tmp_path / "crucigrama.json")
        with pytest.raises(SystemExit) as exc:
            main([str(config), "--attempts", value])
        assert exc.value.code == 2
        assert "must be at least 1" in capsys.readouterr().err
