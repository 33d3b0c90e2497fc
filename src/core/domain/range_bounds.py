"""
RangeBounds — Модель замкнутого целочисленного диапазона

Immutable Pydantic модели для входа и результата суммирования чётных
значений в диапазоне [bottom, top].
Соответствует схеме contracts/schema/range_sum.json.
"""

from pydantic import BaseModel, Field


# =============================================================================
# RANGE BOUNDS
# =============================================================================


class RangeBounds(BaseModel):
    """
    Границы замкнутого диапазона [bottom, top].

    Порядок границ не навязывается: bottom > top означает пустой диапазон.
    """

    bottom: int = Field(..., description="Нижняя граница (включительно)")
    top: int = Field(..., description="Верхняя граница (включительно)")

    model_config = {"frozen": True, "strict": True}  # Immutable, без коэрсии str → int

    def is_empty(self) -> bool:
        """True, если в диапазоне нет ни одного значения"""
        return self.bottom > self.top


# =============================================================================
# RANGE SUM RESULT
# =============================================================================


class RangeSumResult(BaseModel):
    """Результат суммирования чётных значений диапазона."""

    bounds: RangeBounds = Field(..., description="Исходные границы")
    total: int = Field(..., description="Сумма чётных значений в [bottom, top]")

    model_config = {"frozen": True}
