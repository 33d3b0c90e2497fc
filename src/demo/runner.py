"""
Demo Runner — последовательный вывод всех секций демонстрации

Порядок секций фиксирован; между секциями печатается разделитель.
Единственная интерактивная секция — таблица умножения: читает одну
строку из stdin. Невалидный ввод прерывает последовательность через
InvalidNumericInput; всё напечатанное до приглашения остаётся в выводе,
после ошибки ничего не печатается.
"""

import logging
import sys
from typing import Iterable, Optional, TextIO

from src.core.math.range_sum import sum_even_in_range
from src.demo.config import DemoConfig
from src.demo.sections import (
    apply_closure,
    borrow_report,
    count_down,
    count_up,
    iterate_values,
    skip_and_break,
    triangle_pattern,
)
from src.table.multiplication import (
    build_multiplication_table,
    read_multiplicand,
    write_table,
)

logger = logging.getLogger(__name__)


def _write_lines(out: TextIO, lines: Iterable[str]) -> None:
    for line in lines:
        out.write(line + "\n")


def run_demo(
    config: Optional[DemoConfig] = None,
    stdin: Optional[TextIO] = None,
    stdout: Optional[TextIO] = None,
) -> None:
    """
    Выполнение демо-последовательности.

    Args:
        config: Параметры секций (default: DemoConfig())
        stdin: Поток ввода для таблицы умножения (default: sys.stdin)
        stdout: Поток вывода (default: sys.stdout)

    Raises:
        InvalidNumericInput: если строка ввода не парсится как signed 32-bit целое
    """
    config = config or DemoConfig()
    stdin = stdin if stdin is not None else sys.stdin
    out = stdout if stdout is not None else sys.stdout

    def separator() -> None:
        out.write(config.separator + "\n")

    logger.debug("section: loops")
    _write_lines(out, count_up(1, config.count_up_limit))
    separator()
    _write_lines(out, count_down(config.count_down_start))
    separator()
    _write_lines(out, skip_and_break(config.skip_value, config.stop_value))
    separator()

    logger.debug("section: ownership and closures")
    _write_lines(out, borrow_report(config.owner))
    separator()
    _write_lines(out, apply_closure(config.closure_argument, config.closure_offset))
    separator()
    _write_lines(out, iterate_values(config.values))
    separator()

    logger.debug("section: multiplication table")
    out.write(config.prompt + "\n")
    out.flush()
    num = read_multiplicand(stdin)
    table = build_multiplication_table(num, range(1, config.multiplier_last + 1))
    write_table(table, out)
    separator()

    logger.debug("section: patterns and counting")
    _write_lines(out, triangle_pattern(config.pattern_height, config.pattern_char))
    separator()
    _write_lines(out, count_up(1, config.count_limit))
    separator()
    out.write("\n")

    total = sum_even_in_range(config.sum_bottom, config.sum_top)
    logger.debug("sum of evens in [%d, %d] = %d", config.sum_bottom, config.sum_top, total)
    out.write(f"{total}\n")
    out.flush()
