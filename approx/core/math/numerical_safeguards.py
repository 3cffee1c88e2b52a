"""
Numerical Safeguards — IEEE-754 Total Math Primitives

Модуль обеспечивает тотальность всех численных операций над approximate numbers:
- Деление по правилам IEEE-754 (x/0 → ±inf, 0/0 → NaN) вместо ZeroDivisionError
- Логарифм и экспонента без ValueError/OverflowError на границах домена
- Проверка валидности float (не NaN, не Inf)
- Epsilon-сравнения float с учётом машинной точности

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. Ни одна функция модуля не бросает исключение на float-входе
2. NaN/Inf НЕ санитизируются: они являются частью контракта результата
3. Все операции детерминированы и воспроизводимы
"""

import math
from typing import Final

# =============================================================================
# EPSILON-ПАРАМЕТРЫ
# =============================================================================

# Epsilon для сравнения float (относительная толерантность)
# Используется в is_close для относительных сравнений
EPS_FLOAT_COMPARE_REL: Final[float] = 1e-9

# Epsilon для сравнения float (абсолютная толерантность)
# Используется в is_close для абсолютных сравнений
EPS_FLOAT_COMPARE_ABS: Final[float] = 1e-12


# =============================================================================
# IEEE-754 ДЕЛЕНИЕ
# =============================================================================


def ieee_divide(numerator: float, denominator: float) -> float:
    """
    Деление с семантикой IEEE-754.

    Python бросает ZeroDivisionError там, где IEEE-754 возвращает
    бесконечность или NaN. Эта функция восстанавливает IEEE-поведение:
    - x / ±0 → ±inf (знак = знак x * знак нуля)
    - 0 / 0 → NaN
    - NaN / 0 → NaN

    Args:
        numerator: Числитель
        denominator: Знаменатель

    Returns:
        Частное (может быть ±inf или NaN)

    Examples:
        >>> ieee_divide(1.0, 4.0)
        0.25
        >>> ieee_divide(1.0, 0.0)
        inf
        >>> ieee_divide(-1.0, 0.0)
        -inf
        >>> ieee_divide(1.0, -0.0)
        -inf
        >>> ieee_divide(0.0, 0.0)
        nan
    """
    try:
        return numerator / denominator
    except ZeroDivisionError:
        if numerator == 0 or math.isnan(numerator):
            return math.nan
        sign = math.copysign(1.0, numerator) * math.copysign(1.0, denominator)
        return math.copysign(math.inf, sign)


# =============================================================================
# ЭЛЕМЕНТАРНЫЕ ФУНКЦИИ
# =============================================================================


def ieee_log(value: float) -> float:
    """
    Натуральный логарифм с семантикой IEEE-754.

    math.log бросает ValueError для value <= 0; здесь:
    - log(0) → -inf
    - log(x < 0) → NaN
    - log(NaN) → NaN
    - log(inf) → inf

    Examples:
        >>> ieee_log(1.0)
        0.0
        >>> ieee_log(0.0)
        -inf
        >>> ieee_log(-1.0)
        nan
    """
    if math.isnan(value) or value < 0:
        return math.nan
    if value == 0:
        return -math.inf
    return math.log(value)


def ieee_exp(value: float) -> float:
    """
    Экспонента с семантикой IEEE-754.

    math.exp бросает OverflowError для больших аргументов; здесь → +inf.

    Examples:
        >>> ieee_exp(0.0)
        1.0
        >>> ieee_exp(1000.0)
        inf
        >>> ieee_exp(-math.inf)
        0.0
    """
    try:
        return math.exp(value)
    except OverflowError:
        return math.inf


# =============================================================================
# ПРОВЕРКИ И СРАВНЕНИЯ FLOAT
# =============================================================================


def is_valid_float(value: float) -> bool:
    """
    Проверка, является ли float валидным (не NaN, не Inf).

    Args:
        value: Проверяемое значение

    Returns:
        True если значение валидное (finite), False если NaN или Inf
    """
    return math.isfinite(value)


def is_close(
    a: float,
    b: float,
    rel_tol: float = EPS_FLOAT_COMPARE_REL,
    abs_tol: float = EPS_FLOAT_COMPARE_ABS,
) -> bool:
    """
    Сравнение float с учётом машинной точности.

    Алгоритм:
        abs(a - b) <= max(rel_tol * max(abs(a), abs(b)), abs_tol)

    Args:
        a: Первое значение
        b: Второе значение
        rel_tol: Относительная толерантность (default: 1e-9)
        abs_tol: Абсолютная толерантность (default: 1e-12)

    Returns:
        True если значения близки с учётом толерантности

    Examples:
        >>> is_close(1.0, 1.0 + 1e-10)
        True
        >>> is_close(1.0, 1.1)
        False
    """
    return math.isclose(a, b, rel_tol=rel_tol, abs_tol=abs_tol)
