"""
Contract Validation Module

Модуль для валидации JSON вывода (таблица умножения, сумма диапазона).
"""

from .validators import (
    ContractValidator,
    MultiplicationTableValidator,
    RangeSumValidator,
    SCHEMA_PACKAGE,
    SchemaLoader,
    get_schema_loader,
    validate_multiplication_table,
    validate_range_sum,
)

__all__ = [
    # Constants
    "SCHEMA_PACKAGE",
    # Classes
    "SchemaLoader",
    "ContractValidator",
    "MultiplicationTableValidator",
    "RangeSumValidator",
    # Functions
    "validate_multiplication_table",
    "validate_range_sum",
    "get_schema_loader",
]
