"""Table — интерактивная таблица умножения (stdin → stdout)."""

from .multiplication import (
    DEFAULT_MULTIPLIERS,
    InvalidNumericInput,
    build_multiplication_table,
    format_table_lines,
    parse_multiplicand,
    print_multiplication_table,
    read_multiplicand,
    write_table,
)

__all__ = [
    "DEFAULT_MULTIPLIERS",
    "InvalidNumericInput",
    "build_multiplication_table",
    "format_table_lines",
    "parse_multiplicand",
    "print_multiplication_table",
    "read_multiplicand",
    "write_table",
]
