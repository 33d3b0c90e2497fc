"""
Тесты для Interactive Multiplication Table

Проверяет:
1. Строгий парсинг signed 32-bit целого (trim, знак, диапазон)
2. InvalidNumericInput для пустого, нечислового и вне диапазона ввода
3. Чтение одной строки из потока (EOF, ошибки чтения)
4. Формат и порядок строк таблицы
5. Отсутствие вывода при невалидном вводе
"""

import io

import pytest

from src.core.domain import I32_MAX, I32_MIN, MultiplicationTable
from src.table import (
    InvalidNumericInput,
    build_multiplication_table,
    format_table_lines,
    parse_multiplicand,
    print_multiplication_table,
    read_multiplicand,
)


class _BrokenStream(io.StringIO):
    """Поток, который падает при чтении"""

    def readline(self, *args):
        raise OSError("stream closed")


# =============================================================================
# ТЕСТЫ: parse_multiplicand
# =============================================================================


class TestParseMultiplicand:
    """Тесты строгого парсинга."""

    def test_plain_number(self):
        assert parse_multiplicand("5") == 5

    def test_trailing_newline(self):
        assert parse_multiplicand("42\n") == 42

    def test_surrounding_whitespace(self):
        assert parse_multiplicand("  -3  ") == -3
        assert parse_multiplicand("\t7\r\n") == 7

    def test_unicode_whitespace_trimmed(self):
        assert parse_multiplicand("\xa0" + "5" + chr(0x3000)) == 5
        assert parse_multiplicand(chr(0x2003) + "-8\x85") == -8

    @pytest.mark.parametrize("raw", ["\x1c5", "5\x1d", "\x1e5\x1f"])
    def test_information_separators_are_not_whitespace(self, raw):
        """\\x1c-\\x1f не входят в Unicode White_Space"""
        with pytest.raises(InvalidNumericInput, match="invalid digit"):
            parse_multiplicand(raw)

    def test_explicit_plus_sign(self):
        assert parse_multiplicand("+9") == 9

    def test_leading_zeros(self):
        assert parse_multiplicand("007") == 7

    def test_i32_boundaries(self):
        assert parse_multiplicand(str(I32_MAX)) == I32_MAX
        assert parse_multiplicand(str(I32_MIN)) == I32_MIN

    @pytest.mark.parametrize(
        "raw",
        ["", "\n", "   ", "abc", "5a", "1.5", "1_000", "1 2", "--1", "+", "0x10", "٣"],
    )
    def test_invalid_input_raises(self, raw):
        with pytest.raises(InvalidNumericInput):
            parse_multiplicand(raw)

    @pytest.mark.parametrize("raw", [str(I32_MAX + 1), str(I32_MIN - 1), "99999999999"])
    def test_out_of_range_raises(self, raw):
        with pytest.raises(InvalidNumericInput, match="out of range"):
            parse_multiplicand(raw)

    def test_error_carries_raw_input_and_reason(self):
        with pytest.raises(InvalidNumericInput) as exc_info:
            parse_multiplicand("abc")
        assert exc_info.value.raw_input == "abc"
        assert "invalid digit" in exc_info.value.reason

    def test_error_is_value_error(self):
        with pytest.raises(ValueError):
            parse_multiplicand("")


# =============================================================================
# ТЕСТЫ: read_multiplicand
# =============================================================================


class TestReadMultiplicand:
    """Тесты чтения одной строки из потока."""

    def test_reads_first_line_only(self):
        stream = io.StringIO("12\n34\n")
        assert read_multiplicand(stream) == 12
        assert stream.readline() == "34\n"

    def test_eof_is_invalid(self):
        with pytest.raises(InvalidNumericInput, match="empty input"):
            read_multiplicand(io.StringIO(""))

    def test_unreadable_stream_is_invalid(self):
        with pytest.raises(InvalidNumericInput, match="failed to read line"):
            read_multiplicand(_BrokenStream())


# =============================================================================
# ТЕСТЫ: build / format
# =============================================================================


class TestBuildMultiplicationTable:
    """Тесты построения таблицы."""

    def test_ten_rows_in_order(self):
        table = build_multiplication_table(5)
        assert isinstance(table, MultiplicationTable)
        assert [row.multiplier for row in table.rows] == list(range(1, 11))
        assert [row.product for row in table.rows] == [5 * m for m in range(1, 11)]

    def test_format_lines(self):
        lines = format_table_lines(build_multiplication_table(5))
        assert lines == [f"5 x {m} = {5 * m}" for m in range(1, 11)]
        assert lines[2] == "5 x 3 = 15"

    def test_zero(self):
        lines = format_table_lines(build_multiplication_table(0))
        assert lines[-1] == "0 x 10 = 0"

    def test_custom_multipliers(self):
        table = build_multiplication_table(2, range(1, 4))
        assert table.lines() == ["2 x 1 = 2", "2 x 2 = 4", "2 x 3 = 6"]

    def test_i32_max_product_not_truncated(self):
        table = build_multiplication_table(I32_MAX)
        assert table.rows[-1].product == I32_MAX * 10


# =============================================================================
# ТЕСТЫ: print_multiplication_table
# =============================================================================


class TestPrintMultiplicationTable:
    """Тесты печати таблицы."""

    def test_five(self):
        out = io.StringIO()
        print_multiplication_table("5", out=out)
        expected = "".join(f"5 x {m} = {5 * m}\n" for m in range(1, 11))
        assert out.getvalue() == expected

    def test_negative_with_whitespace(self):
        out = io.StringIO()
        table = print_multiplication_table("  -3  ", out=out)
        lines = out.getvalue().splitlines()
        assert table.multiplicand == -3
        assert len(lines) == 10
        assert lines[0] == "-3 x 1 = -3"
        assert lines[-1] == "-3 x 10 = -30"

    @pytest.mark.parametrize("raw", ["abc", ""])
    def test_invalid_input_prints_nothing(self, raw):
        out = io.StringIO()
        with pytest.raises(InvalidNumericInput):
            print_multiplication_table(raw, out=out)
        assert out.getvalue() == ""

    def test_defaults_to_stdout(self, capsys):
        print_multiplication_table("2")
        captured = capsys.readouterr()
        assert captured.out.splitlines()[1] == "2 x 2 = 4"
