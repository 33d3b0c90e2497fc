"""DemoConfig — параметры демонстрационной последовательности."""

from dataclasses import dataclass
from typing import Tuple


SEPARATOR_WIDTH = 33


@dataclass(frozen=True)
class DemoConfig:
    """Конфигурация демо-последовательности.

    Значения по умолчанию воспроизводят исходный вывод:
    - count_up: 1..=10
    - count_down: 10..=1
    - skip_and_break: пропуск 5, остановка на 8
    - borrow: "Ibrahim"
    - closure: x + 2 для x = 5
    - values: [1, 3, 5, 7, 78, 54]
    - triangle: высота 5
    - long count: 1..=1000
    - sum: чётные в [1, 5]
    """
    count_up_limit: int = 10
    count_down_start: int = 10
    skip_value: int = 5
    stop_value: int = 8
    owner: str = "Ibrahim"
    closure_offset: int = 2
    closure_argument: int = 5
    values: Tuple[int, ...] = (1, 3, 5, 7, 78, 54)
    prompt: str = "Enter a num"
    multiplier_last: int = 10
    pattern_height: int = 5
    pattern_char: str = "*"
    count_limit: int = 1000
    sum_bottom: int = 1
    sum_top: int = 5
    separator: str = "_" * SEPARATOR_WIDTH
