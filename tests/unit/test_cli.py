"""
Tests for CLI

Проверяет:
- Подкоманды demo / table / sum
- JSON вывод
- Коды завершения и диагностику при невалидном вводе
"""

import io
import json
import logging

import pytest

from src.cli import EXIT_INVALID_INPUT, EXIT_OK, build_parser, main

SEPARATOR = "_" * 33


def _run(argv, stdin_text=""):
    out = io.StringIO()
    code = main(argv, stdin=io.StringIO(stdin_text), stdout=out)
    return code, out.getvalue()


class TestTableCommand:
    """Подкоманда table."""

    def test_prints_table(self):
        code, out = _run(["table"], "5\n")
        assert code == EXIT_OK
        assert out.splitlines() == [f"5 x {m} = {5 * m}" for m in range(1, 11)]

    def test_json(self):
        code, out = _run(["table", "--json"], " -3 \n")
        payload = json.loads(out)
        assert code == EXIT_OK
        assert payload["multiplicand"] == -3
        assert payload["rows"][-1] == {"multiplicand": -3, "multiplier": 10, "product": -30}

    @pytest.mark.parametrize("stdin_text", ["abc\n", "\n", ""])
    def test_invalid_input(self, stdin_text, caplog):
        with caplog.at_level(logging.ERROR):
            code, out = _run(["table"], stdin_text)
        assert code == EXIT_INVALID_INPUT
        assert out == ""
        assert any("enter valid num" in r.getMessage() for r in caplog.records)


class TestSumCommand:
    """Подкоманда sum."""

    def test_plain(self):
        assert _run(["sum", "1", "5"]) == (EXIT_OK, "6\n")

    def test_reversed(self):
        assert _run(["sum", "5", "1"]) == (EXIT_OK, "0\n")

    def test_negative_bounds(self):
        assert _run(["sum", "-7", "-1"]) == (EXIT_OK, "-12\n")

    def test_json(self):
        code, out = _run(["sum", "1", "10", "--json"])
        assert code == EXIT_OK
        assert json.loads(out) == {"bounds": {"bottom": 1, "top": 10}, "total": 30}

    def test_non_integer_bound_is_usage_error(self):
        with pytest.raises(SystemExit) as exc_info:
            build_parser().parse_args(["sum", "a", "5"])
        assert exc_info.value.code == 2


class TestDemoCommand:
    """Подкоманда demo и запуск без подкоманды."""

    def test_default_is_demo(self):
        code, out = _run([], "5\n")
        assert code == EXIT_OK
        assert "Enter a num\n5 x 1 = 5\n" in out
        assert out.endswith(SEPARATOR + "\n\n6\n")

    def test_overrides(self):
        code, out = _run(["demo", "--height", "1", "--count-limit", "2", "--top", "10"], "1\n")
        assert code == EXIT_OK
        assert out.endswith("*\n" + SEPARATOR + "\n1\n2\n" + SEPARATOR + "\n\n30\n")

    def test_invalid_input_exit_code(self):
        code, out = _run(["demo"], "abc\n")
        assert code == EXIT_INVALID_INPUT
        assert out.endswith("Enter a num\n")
