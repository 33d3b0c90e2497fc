"""
Multiplication Table — Модели таблицы умножения

Immutable Pydantic модели строки и таблицы умножения.
Соответствует схеме contracts/schema/multiplication_table.json.

ИНВАРИАНТЫ:
1. multiplicand укладывается в signed 32-bit
2. product == multiplicand * multiplier для каждой строки
3. Множители идут подряд, начиная с 1, по возрастанию
4. Все строки таблицы относятся к одному multiplicand
"""

from typing import Final, List

from pydantic import BaseModel, Field, field_validator, model_validator


# =============================================================================
# CONSTANTS
# =============================================================================

# Диапазон signed 32-bit целого
I32_MIN: Final[int] = -(2**31)
I32_MAX: Final[int] = 2**31 - 1

# Множители по умолчанию: 1..=10
DEFAULT_MULTIPLIER_FIRST: Final[int] = 1
DEFAULT_MULTIPLIER_LAST: Final[int] = 10


# =============================================================================
# TABLE ROW
# =============================================================================


class TableRow(BaseModel):
    """
    Одна строка таблицы: multiplicand x multiplier = product.
    """

    multiplicand: int = Field(..., ge=I32_MIN, le=I32_MAX, description="Множимое")
    multiplier: int = Field(..., ge=1, description="Множитель (с 1)")
    product: int = Field(..., description="Произведение")

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def validate_product(self) -> "TableRow":
        """Проверка согласованности произведения"""
        expected = self.multiplicand * self.multiplier
        if self.product != expected:
            raise ValueError(
                f"product {self.product} != {self.multiplicand} * {self.multiplier} "
                f"(expected {expected})"
            )
        return self

    def format(self) -> str:
        """Текстовое представление: '5 x 3 = 15'"""
        return f"{self.multiplicand} x {self.multiplier} = {self.product}"


# =============================================================================
# MULTIPLICATION TABLE
# =============================================================================


class MultiplicationTable(BaseModel):
    """
    Таблица умножения для одного multiplicand.

    Строки упорядочены по возрастанию множителя, множители идут подряд с 1.
    """

    multiplicand: int = Field(..., ge=I32_MIN, le=I32_MAX, description="Множимое")
    rows: List[TableRow] = Field(..., min_length=1, description="Строки таблицы")

    model_config = {"frozen": True}

    @field_validator("rows")
    @classmethod
    def validate_consecutive_multipliers(cls, v: List[TableRow]) -> List[TableRow]:
        """Множители: 1, 2, 3, ... без пропусков"""
        for expected, row in enumerate(v, start=DEFAULT_MULTIPLIER_FIRST):
            if row.multiplier != expected:
                raise ValueError(
                    f"rows must have consecutive multipliers from "
                    f"{DEFAULT_MULTIPLIER_FIRST}; got {row.multiplier} at position {expected}"
                )
        return v

    @model_validator(mode="after")
    def validate_single_multiplicand(self) -> "MultiplicationTable":
        """Все строки относятся к multiplicand таблицы"""
        for row in self.rows:
            if row.multiplicand != self.multiplicand:
                raise ValueError(
                    f"row multiplicand {row.multiplicand} != table multiplicand "
                    f"{self.multiplicand}"
                )
        return self

    def lines(self) -> List[str]:
        """Строки таблицы в текстовом виде, по возрастанию множителя"""
        return [row.format() for row in self.rows]
