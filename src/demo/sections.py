"""
Demo Sections — печатные секции демонстрации языковых конструкций

Каждая секция — генератор строк без side effects; печать выполняет runner.
Секции независимы друг от друга и не хранят состояние.
"""

from typing import Callable, Iterable, Iterator


# =============================================================================
# LOOPS
# =============================================================================


def count_up(start: int, limit: int) -> Iterator[str]:
    """for-цикл по [start, limit] включительно"""
    for num in range(start, limit + 1):
        yield str(num)


def count_down(start: int) -> Iterator[str]:
    """while-цикл от start вниз до 1"""
    i = start
    while i >= 1:
        yield str(i)
        i -= 1


def skip_and_break(skip: int, stop: int) -> Iterator[str]:
    """
    Бесконечный цикл с continue и break.

    Считает с 1, пропускает skip, останавливается, как только счётчик
    достигает stop (stop не печатается). При skip == stop или stop < 1
    цикл тоже завершается.
    Для skip=5, stop=8: 1, 2, 3, 4, 6, 7.
    """
    num = 1
    while True:
        if num == skip:
            num += 1
            continue
        elif num >= stop:
            break
        else:
            yield str(num)
        num = num + 1


# =============================================================================
# OWNERSHIP / CLOSURES / ITERATION
# =============================================================================


def borrow_report(owner: str) -> Iterator[str]:
    """
    Чтение значения дважды через разделяемую ссылку.

    Длина — в байтах UTF-8: "Ibrâhim" → 8.

    Строка неизменяема, поэтому второе имя — просто ещё одна ссылка
    на тот же объект; владелец остаётся доступен.
    """
    borrower = owner
    yield f"{len(owner.encode('utf-8'))} {borrower}"


def make_adder(offset: int) -> Callable[[int], int]:
    """Замыкание x -> x + offset"""
    return lambda x: x + offset


def apply_closure(argument: int, offset: int = 2) -> Iterator[str]:
    """Применение замыкания make_adder(offset) к argument"""
    closure = make_adder(offset)
    yield str(closure(argument))


def iterate_values(values: Iterable[int]) -> Iterator[str]:
    """Поэлементный обход последовательности"""
    for value in values:
        yield str(value)


# =============================================================================
# PATTERNS
# =============================================================================


def triangle_pattern(height: int, char: str = "*") -> Iterator[str]:
    """
    Треугольник из вложенных циклов.

    Строка i (1..=height) содержит i символов char.
    """
    for i in range(1, height + 1):
        row = ""
        for _ in range(i):
            row += char
        yield row
