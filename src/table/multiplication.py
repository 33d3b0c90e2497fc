"""
Interactive Multiplication Table — ввод числа и печать таблицы умножения

Модуль читает одну строку, парсит signed 32-bit целое и печатает
таблицу умножения для множителей 1..=10.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Парсинг строгий: после trim по Unicode White_Space допускается только [+-]?[0-9]+
2. Значение вне signed 32-bit → InvalidNumericInput
3. Ошибка ввода обнаруживается ДО печати первой строки таблицы
4. На успехе печатается ровно 10 строк, по возрастанию множителя

Ошибка ввода не восстанавливается: InvalidNumericInput пробрасывается
до CLI, который завершает процесс с ненулевым кодом.
"""

import logging
import re
import sys
from typing import Iterable, List, Optional, TextIO

from src.core.domain.multiplication import (
    DEFAULT_MULTIPLIER_FIRST,
    DEFAULT_MULTIPLIER_LAST,
    I32_MAX,
    I32_MIN,
    MultiplicationTable,
    TableRow,
)

logger = logging.getLogger(__name__)

# Десятичное целое со знаком; str.isdigit/int() принимают "1_000" и не-ASCII цифры
_INTEGER_PATTERN = re.compile(r"[+-]?[0-9]+")

# Unicode White_Space; str.strip() без аргумента срезает ещё и \x1c-\x1f
UNICODE_WHITESPACE = "".join(
    chr(code)
    for code in (
        0x09, 0x0A, 0x0B, 0x0C, 0x0D, 0x20, 0x85, 0xA0, 0x1680,
        *range(0x2000, 0x200B),
        0x2028, 0x2029, 0x202F, 0x205F, 0x3000,
    )
)

DEFAULT_MULTIPLIERS = range(DEFAULT_MULTIPLIER_FIRST, DEFAULT_MULTIPLIER_LAST + 1)


# =============================================================================
# EXCEPTIONS
# =============================================================================


class InvalidNumericInput(ValueError):
    """
    Строка ввода не является допустимым signed 32-bit целым.

    Покрывает пустой ввод, нечисловое содержимое, выход за диапазон
    и нечитаемый поток ввода. Фатальная ошибка: не восстанавливается.
    """

    def __init__(self, raw_input: Optional[str], reason: str):
        self.raw_input = raw_input
        self.reason = reason
        super().__init__(f"enter valid num: {reason} (input={raw_input!r})")


# =============================================================================
# PARSING
# =============================================================================


def parse_multiplicand(raw_input: str) -> int:
    """
    Парсинг строки ввода в signed 32-bit целое.

    Args:
        raw_input: Строка ввода (может содержать пробелы и перевод строки)

    Returns:
        Распарсенное целое

    Raises:
        InvalidNumericInput: пустая строка, нечисловое содержимое
            или значение вне [I32_MIN, I32_MAX]

    Examples:
        >>> parse_multiplicand("5\\n")
        5
        >>> parse_multiplicand("  -3  ")
        -3
        >>> parse_multiplicand("+7")
        7
    """
    text = raw_input.strip(UNICODE_WHITESPACE)

    if not text:
        raise InvalidNumericInput(raw_input, "empty input")

    if _INTEGER_PATTERN.fullmatch(text) is None:
        raise InvalidNumericInput(raw_input, "invalid digit found in string")

    value = int(text)
    if value < I32_MIN or value > I32_MAX:
        raise InvalidNumericInput(
            raw_input, f"number out of range [{I32_MIN}, {I32_MAX}]"
        )

    logger.debug("parsed multiplicand %d from %r", value, raw_input)
    return value


def read_multiplicand(stream: TextIO) -> int:
    """
    Чтение ровно одной строки из потока и парсинг.

    EOF даёт пустую строку → InvalidNumericInput.

    Raises:
        InvalidNumericInput: при невалидном вводе или ошибке чтения потока
    """
    try:
        line = stream.readline()
    except (OSError, UnicodeDecodeError) as e:
        raise InvalidNumericInput(None, f"failed to read line: {e}") from e

    return parse_multiplicand(line)


# =============================================================================
# TABLE
# =============================================================================


def build_multiplication_table(
    num: int, multipliers: Iterable[int] = DEFAULT_MULTIPLIERS
) -> MultiplicationTable:
    """
    Построение таблицы умножения.

    Args:
        num: Множимое (signed 32-bit)
        multipliers: Множители подряд с 1 (default: 1..=10)

    Returns:
        MultiplicationTable
    """
    rows = [
        TableRow(multiplicand=num, multiplier=m, product=num * m) for m in multipliers
    ]
    return MultiplicationTable(multiplicand=num, rows=rows)


def format_table_lines(table: MultiplicationTable) -> List[str]:
    """Строки вида '5 x 1 = 5' ... '5 x 10 = 50'"""
    return table.lines()


def write_table(table: MultiplicationTable, out: TextIO) -> None:
    """Печать таблицы в поток, по строке на множитель"""
    for line in format_table_lines(table):
        out.write(line + "\n")


def print_multiplication_table(
    raw_input: str,
    out: Optional[TextIO] = None,
    multipliers: Iterable[int] = DEFAULT_MULTIPLIERS,
) -> MultiplicationTable:
    """
    Парсинг строки ввода и печать таблицы умножения.

    Парсинг выполняется до любой записи в out: при ошибке ничего не печатается.

    Args:
        raw_input: Строка ввода
        out: Поток вывода (default: sys.stdout)
        multipliers: Множители (default: 1..=10)

    Returns:
        Напечатанная таблица

    Raises:
        InvalidNumericInput: если raw_input не парсится
    """
    num = parse_multiplicand(raw_input)
    table = build_multiplication_table(num, multipliers)
    write_table(table, out if out is not None else sys.stdout)
    return table
