"""
Range Sum — сумма чётных чисел в замкнутом диапазоне

Модуль вычисляет сумму чётных целых в диапазоне [bottom, top]:
- Closed-form расчёт через арифметическую прогрессию (O(1))
- Эталонный brute-force перебор для перекрёстной проверки
- Обёртка над доменной моделью RangeBounds → RangeSumResult

ИНВАРИАНТЫ:
1. bottom > top → пустой диапазон → 0
2. Диапазон без чётных значений → 0
3. Чётность по математическому модулю: -4 чётное, -3 нечётное
4. Функции чистые, без side effects

ФОРМУЛА:
    first = bottom, если bottom чётное, иначе bottom + 1
    last  = top, если top чётное, иначе top - 1
    n     = (last - first) / 2 + 1
    sum   = n * (first + last) / 2
"""

import logging
from typing import Optional, Tuple

from src.core.domain.range_bounds import RangeBounds, RangeSumResult

logger = logging.getLogger(__name__)


# =============================================================================
# EVEN BOUNDS
# =============================================================================


def even_bounds(bottom: int, top: int) -> Optional[Tuple[int, int]]:
    """
    Первое и последнее чётное значение в [bottom, top].

    Args:
        bottom: Нижняя граница (включительно)
        top: Верхняя граница (включительно)

    Returns:
        (first_even, last_even) или None, если чётных значений нет

    Examples:
        >>> even_bounds(1, 5)
        (2, 4)
        >>> even_bounds(-3, 3)
        (-2, 2)
        >>> even_bounds(3, 3)
        >>> even_bounds(5, 1)
    """
    # Python %: результат всегда неотрицательный для положительного делителя
    first = bottom if bottom % 2 == 0 else bottom + 1
    last = top if top % 2 == 0 else top - 1

    if first > last:
        return None

    return (first, last)


# =============================================================================
# SUM OF EVENS
# =============================================================================


def sum_even_in_range(bottom: int, top: int) -> int:
    """
    Сумма чётных целых в замкнутом диапазоне [bottom, top].

    Порядок границ не проверяется: при bottom > top диапазон пуст.

    Args:
        bottom: Нижняя граница (включительно)
        top: Верхняя граница (включительно)

    Returns:
        Сумма чётных значений; 0 для пустого диапазона или диапазона
        только из нечётных значений

    Examples:
        >>> sum_even_in_range(1, 5)
        6
        >>> sum_even_in_range(-4, 4)
        0
        >>> sum_even_in_range(5, 1)
        0
    """
    bounds = even_bounds(bottom, top)
    if bounds is None:
        return 0

    first, last = bounds
    count = (last - first) // 2 + 1

    # first + last всегда чётное, деление точное
    return count * ((first + last) // 2)


def sum_even_in_range_bruteforce(bottom: int, top: int) -> int:
    """
    Эталонная реализация: перебор диапазона с фильтром чётности.

    O(top - bottom). Используется только для перекрёстной проверки
    sum_even_in_range на небольших диапазонах.
    """
    return sum(i for i in range(bottom, top + 1) if i % 2 == 0)


def compute_range_sum(bounds: RangeBounds) -> RangeSumResult:
    """
    Вычисление суммы для валидированных границ.

    Args:
        bounds: Границы диапазона

    Returns:
        RangeSumResult с исходными границами и суммой
    """
    if bounds.is_empty():
        logger.debug("empty range [%d, %d]", bounds.bottom, bounds.top)
        return RangeSumResult(bounds=bounds, total=0)

    total = sum_even_in_range(bounds.bottom, bounds.top)
    return RangeSumResult(bounds=bounds, total=total)
