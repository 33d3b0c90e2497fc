"""Demo — последовательность печатных демонстраций языковых конструкций.

- Циклы: for / while / loop с continue и break
- Разделяемое чтение значения, замыкания, обход последовательности
- Интерактивная таблица умножения
- Вложенные циклы (треугольник), длинный счётчик, сумма чётных
"""

from .config import DemoConfig
from .runner import run_demo

__all__ = [
    "DemoConfig",
    "run_demo",
]
