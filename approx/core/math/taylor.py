"""
Taylor — First-Order Propagation Through Scalar Functions

Модуль поддерживает применение функции f: float → float к approximate number
через разложение Тейлора первого порядка вокруг центра x:

    f(x + dx) ≈ f(x) + f'(x) * dx

Производная f'(x) получается:
- аналитически для известных функций (FunctionKind.LOG, FunctionKind.EXP)
- численно центральной разностью для остальных (FunctionKind.GENERIC):

    f'(x) ≈ (f(x + eps) - f(x - eps)) / (2 * eps)

Выбор eps остаётся за вызывающим кодом:
- слишком малый eps → ошибка вычитания близких чисел (cancellation)
- слишком большой eps → ошибка линеаризации
Автоподбор eps не выполняется, и eps не валидируется: как и остальные
операции, применение функции тотально (eps = 0 → NaN-погрешность).
"""

import math
from enum import Enum
from types import MappingProxyType
from typing import Callable, Final, Mapping, Optional

from approx.core.math.numerical_safeguards import ieee_divide


# =============================================================================
# ТИПЫ
# =============================================================================


class FunctionKind(str, Enum):
    """Способ получения производной при применении функции"""

    GENERIC = "generic"  # центральная разность
    LOG = "log"  # d/dx ln(x) = 1/x
    EXP = "exp"  # d/dx e^x = e^x


ScalarFunction = Callable[[float], float]


# =============================================================================
# РЕЕСТР ИЗВЕСТНЫХ ФУНКЦИЙ
# =============================================================================

# Read-only: безопасен для одновременного чтения из нескольких потоков
KNOWN_FUNCTIONS: Final[Mapping[ScalarFunction, FunctionKind]] = MappingProxyType(
    {
        math.log: FunctionKind.LOG,
        math.exp: FunctionKind.EXP,
    }
)


def resolve_function_kind(
    fn: ScalarFunction, kind: Optional[FunctionKind] = None
) -> FunctionKind:
    """
    Определение FunctionKind для функции.

    Явно переданный kind всегда имеет приоритет. Иначе функция ищется
    в KNOWN_FUNCTIONS; неизвестные функции → GENERIC.

    Args:
        fn: Применяемая функция
        kind: Явный выбор (optional)

    Returns:
        FunctionKind

    Examples:
        >>> resolve_function_kind(math.log)
        <FunctionKind.LOG: 'log'>
        >>> resolve_function_kind(lambda x: x * x)
        <FunctionKind.GENERIC: 'generic'>
        >>> resolve_function_kind(math.log, FunctionKind.GENERIC)
        <FunctionKind.GENERIC: 'generic'>
    """
    if kind is not None:
        return FunctionKind(kind)

    try:
        return KNOWN_FUNCTIONS.get(fn, FunctionKind.GENERIC)
    except TypeError:
        # unhashable callable не может быть в реестре
        return FunctionKind.GENERIC


# =============================================================================
# ЧИСЛЕННАЯ ПРОИЗВОДНАЯ
# =============================================================================


def central_difference(fn: ScalarFunction, x: float, epsilon: float) -> float:
    """
    Численная производная центральной разностью.

    f'(x) ≈ (f(x + eps) - f(x - eps)) / (2 * eps)

    Знак epsilon не важен: отрицательный шаг даёт ту же оценку.
    epsilon == 0 не бросает исключение, а даёт 0/0 → NaN.

    Args:
        fn: Функция float → float
        x: Точка дифференцирования
        epsilon: Полуширина шага

    Returns:
        Оценка f'(x) (NaN или ±inf для вырожденного шага)

    Examples:
        >>> round(central_difference(lambda v: v * v, 10.0, 1e-3), 6)
        20.0
        >>> round(central_difference(lambda v: v * v, 10.0, -1e-3), 6)
        20.0
        >>> central_difference(lambda v: v * v, 10.0, 0.0)
        nan
    """
    f_plus = fn(x + epsilon)
    f_minus = fn(x - epsilon)
    return ieee_divide(f_plus - f_minus, 2 * epsilon)
