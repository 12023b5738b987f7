"""
Format Config — Параметры форматирования и разбора дробей

Immutable Pydantic модель (frozen=True). Все изменения конфигурации должны
создавать новый экземпляр (model_copy(update=...)).
"""

import locale
from typing import TYPE_CHECKING, Final

from pydantic import BaseModel, Field, field_validator

if TYPE_CHECKING:
    from ratiomath.core.math.fraction import Fraction


# Разделитель, который всегда принимается при разборе (помимо локального)
DEFAULT_DECIMAL_SEPARATOR: Final[str] = "."


class FormatConfig(BaseModel):
    """
    Конфигурация разбора десятичной записи и рендера дробей.

    decimal_separator=None означает "разделитель активной локали"
    (locale.localeconv()["decimal_point"]), вычисляется при каждом обращении.
    """

    decimal_separator: str | None = Field(
        None, min_length=1, max_length=1, description="Десятичный разделитель (None = локаль)"
    )
    force_fraction_form: bool = Field(
        False, description="Всегда рендерить дробь как 'N/D', даже при D == 1"
    )

    model_config = {"frozen": True}  # Immutable

    @field_validator("decimal_separator")
    @classmethod
    def validate_separator(cls, v: str | None) -> str | None:
        """Разделитель не может быть цифрой, знаком или '/'."""
        if v is not None and (v.isdigit() or v in "+-/"):
            raise ValueError(f"decimal_separator {v!r} is ambiguous")
        return v

    def effective_separator(self) -> str:
        """Фактический разделитель: явный или из активной локали."""
        if self.decimal_separator is not None:
            return self.decimal_separator
        return locale.localeconv()["decimal_point"] or DEFAULT_DECIMAL_SEPARATOR

    def render(self, fraction: "Fraction") -> str:
        return fraction.to_string(self.force_fraction_form)


DEFAULT_FORMAT_CONFIG: Final[FormatConfig] = FormatConfig()
