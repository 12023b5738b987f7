"""
Errors — Иерархия исключений ratiomath

Все ошибки поднимаются синхронно в точке нарушения и пропагируют к вызывающему.
Ни одна операция не возвращает "тихо неверный" результат (NaN вместо дроби с
нулевым знаменателем и т.п.).

Виды ошибок:
- DivisionByZero: нулевой знаменатель, обращение нуля, деление на нулевой scale
- InvalidFormat: невозможно разобрать десятичную запись
- DimensionMismatch: операции над Vector/Point разной размерности
- UnsupportedLiteralType: Literal с неподдерживаемым типом значения
"""


class RatioMathError(Exception):
    """Базовое исключение библиотеки."""

    pass


class DivisionByZero(RatioMathError, ZeroDivisionError):
    """
    Попытка создать дробь с нулевым знаменателем.

    Возникает при:
    1. Fraction(n, 0)
    2. Обращении нулевой дроби (~Fraction(0), Fraction(0) ** -1)
    3. Делении на нулевую дробь (в том числе Vector / Fraction(0))
    """

    pass


class InvalidFormat(RatioMathError, ValueError):
    """Десятичная запись не разбирается как целое после удаления разделителя."""

    def __init__(self, text: str, reason: str = "not a decimal number"):
        self.text = text
        self.reason = reason
        super().__init__(f"Invalid decimal format {text!r}: {reason}")


class DimensionMismatch(RatioMathError, ValueError):
    """
    Операция над векторами/точками с разным числом измерений.

    Attributes:
        left: Размерность левого операнда
        right: Размерность правого операнда
    """

    def __init__(self, operation: str, left: int, right: int):
        self.operation = operation
        self.left = left
        self.right = right
        super().__init__(
            f"{operation}: operands must have the same number of dimensions "
            f"(got {left} and {right})"
        )


class UnsupportedLiteralType(RatioMathError, TypeError):
    """Literal получил значение типа, для которого не определена конверсия в float."""

    def __init__(self, value_type: type):
        self.value_type = value_type
        super().__init__(
            f"Unsupported literal type {value_type.__name__!r}; "
            "expected int, float or Fraction"
        )
