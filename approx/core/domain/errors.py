"""
Errors — Исключения пакета approx

Только два пути конструирования могут завершиться ошибкой:
- from_min_max с max < min → InvalidRangeError
- parse некорректной строки → ParseError (с указанием причины)

Все остальные операции тотальны на домене float и возвращают
специальные значения IEEE-754 (inf, NaN) вместо исключений.
"""

from enum import Enum


# =============================================================================
# ENUMS
# =============================================================================


class ParseErrorCause(str, Enum):
    """Причина ошибки разбора записи value±delta"""

    VALUE = "value"  # некорректное центральное значение
    DELTA = "delta"  # некорректная погрешность
    STRUCTURE = "structure"  # неверное количество разделителей ±


# =============================================================================
# EXCEPTIONS
# =============================================================================


class ApproxError(Exception):
    """Базовое исключение пакета approx."""

    pass


class InvalidRangeError(ApproxError, ValueError):
    """
    Интервал [min, max] задан с max < min.

    Единственный случай, когда конструирование из чисел невозможно.
    """

    def __init__(self, min_value: float, max_value: float):
        self.min_value = min_value
        self.max_value = max_value
        super().__init__(
            f"min must be less than or equal to max: min={min_value!r}, max={max_value!r}"
        )


class ParseError(ApproxError, ValueError):
    """
    Строка не является корректной записью approximate number.

    Атрибуты:
        text: Исходная строка (до удаления пробелов)
        cause: ParseErrorCause, какая часть записи некорректна
    """

    def __init__(self, text: str, cause: ParseErrorCause, detail: str):
        self.text = text
        self.cause = cause
        super().__init__(f"could not parse {text!r} as approximate number ({cause.value}): {detail}")
