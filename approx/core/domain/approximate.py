"""
ApproximateNumber — Число с явной погрешностью измерения

Immutable Pydantic модель: центральное значение value и неотрицательная
погрешность delta. Каждый экземпляр задаёт замкнутый интервал
[value - delta, value + delta], в котором лежит истинная величина.

Распространение погрешности — худший случай (interval analysis), не
статистическое (не root-sum-square):

    add(a, b):  value = a + b,  delta = da + db
    sub(a, b):  value = a - b,  delta = da + db   (погрешности складываются!)
    mul(a, b):  rel = |da/a| + |db/b|,  value = a*b,  delta = |a*b * rel|
    div(a, b):  rel = |da/a| + |db/b|,  value = a/b,  delta = |a/b * rel|

mul/div — линеаризация первого порядка, не точное интервальное произведение.

Сравнения определены на интервалах и консервативны ("definitely"):
для пересекающихся интервалов lt/le/gt/ge возвращают False, а overlap → True.

КРИТИЧЕСКИЕ ИНВАРИАНТЫ:
1. delta >= 0 всегда (нормализация через abs при любом конструировании)
2. Экземпляр никогда не изменяется; каждая операция создаёт новый
3. ApproximateNumber() == точный ноль (value=0, delta=0), а не "не задано"
4. Арифметика тотальна: деление на ноль → inf/NaN по IEEE-754, без исключений
5. Все функции чистые и потокобезопасные
"""

import logging
from typing import Any, Dict, Optional

from pydantic import BaseModel, Field, field_validator

from approx.core.contracts.validators import validate_approximate_number
from approx.core.domain.errors import InvalidRangeError
from approx.core.domain.notation import format_notation, split_notation
from approx.core.math.numerical_safeguards import (
    EPS_FLOAT_COMPARE_ABS,
    EPS_FLOAT_COMPARE_REL,
    ieee_divide,
    ieee_exp,
    ieee_log,
    is_close,
    is_valid_float,
)
from approx.core.math.taylor import (
    FunctionKind,
    ScalarFunction,
    central_difference,
    resolve_function_kind,
)

logger = logging.getLogger(__name__)


# =============================================================================
# APPROXIMATE NUMBER MODEL
# =============================================================================


class ApproximateNumber(BaseModel):
    """
    Approximate number: value ± delta.

    Immutable модель (frozen=True). Все операции создают новый экземпляр.
    Два экземпляра равны, если равны оба поля, поэтому
    new(10, 1) == new(10, -1).
    """

    value: float = Field(0.0, description="Центральное значение (оценка)")
    delta: float = Field(0.0, description="Полуширина интервала погрешности (>= 0)")

    model_config = {"frozen": True}

    @field_validator("delta")
    @classmethod
    def normalize_delta(cls, v: float) -> float:
        """Погрешность хранится только как abs(delta)."""
        return abs(v)

    # -------------------------------------------------------------------------
    # Accessors
    # -------------------------------------------------------------------------

    @property
    def min(self) -> float:
        """Нижняя граница интервала: value - delta."""
        return self.value - self.delta

    @property
    def max(self) -> float:
        """Верхняя граница интервала: value + delta."""
        return self.value + self.delta

    @property
    def interval(self) -> tuple[float, float]:
        """Интервал (min, max)."""
        return (self.min, self.max)

    @property
    def relative_delta(self) -> float:
        """
        Относительная погрешность |delta / value|.

        Для value == 0:
        - delta != 0 → +inf
        - delta == 0 → NaN (0/0)
        """
        return abs(ieee_divide(self.delta, self.value))

    @property
    def is_exact(self) -> bool:
        """True если погрешность нулевая."""
        return self.delta == 0

    def is_close(
        self,
        other: "ApproximateNumber",
        rel_tol: float = EPS_FLOAT_COMPARE_REL,
        abs_tol: float = EPS_FLOAT_COMPARE_ABS,
    ) -> bool:
        """Сравнение value и delta с учётом машинной точности."""
        return is_close(self.value, other.value, rel_tol=rel_tol, abs_tol=abs_tol) and is_close(
            self.delta, other.delta, rel_tol=rel_tol, abs_tol=abs_tol
        )

    # -------------------------------------------------------------------------
    # Construction / serialization
    # -------------------------------------------------------------------------

    @classmethod
    def parse(cls, text: str) -> "ApproximateNumber":
        """Разбор записи "value±delta" (см. approx.core.domain.notation)."""
        return parse(text)

    def to_contract(self) -> Dict[str, float]:
        """Сериализация в контракт approximate_number."""
        return {"value": self.value, "delta": self.delta}

    @classmethod
    def from_contract(cls, data: Dict[str, Any]) -> "ApproximateNumber":
        """
        Десериализация из контракта approximate_number.

        Raises:
            jsonschema.ValidationError: Если данные не соответствуют схеме
        """
        validate_approximate_number(data)
        return new(data["value"], data["delta"])

    def __str__(self) -> str:
        return format_approximate(self)

    # -------------------------------------------------------------------------
    # Methods
    # -------------------------------------------------------------------------

    def mul(self, c: float) -> "ApproximateNumber":
        """Умножение на точный скаляр c (погрешность скаляра = 0)."""
        return scale(self, c)

    def lt(self, other: "ApproximateNumber") -> bool:
        """self definitely меньше other."""
        return lt(self, other)

    def le(self, other: "ApproximateNumber") -> bool:
        """self definitely меньше или равен other."""
        return le(self, other)

    def gt(self, other: "ApproximateNumber") -> bool:
        """self definitely больше other."""
        return gt(self, other)

    def ge(self, other: "ApproximateNumber") -> bool:
        """self definitely больше или равен other."""
        return ge(self, other)

    def overlaps(self, other: "ApproximateNumber") -> bool:
        """Интервалы self и other могут пересекаться."""
        return overlap(self, other)

    def apply(
        self,
        fn: ScalarFunction,
        epsilon: float,
        kind: Optional[FunctionKind] = None,
    ) -> "ApproximateNumber":
        """Применение функции fn (см. apply)."""
        return apply(fn, self, epsilon, kind)

    # -------------------------------------------------------------------------
    # Python operators
    # -------------------------------------------------------------------------

    def __add__(self, other: Any) -> "ApproximateNumber":
        rhs = _coerce(other)
        if rhs is None:
            return NotImplemented
        return add(self, rhs)

    def __radd__(self, other: Any) -> "ApproximateNumber":
        lhs = _coerce(other)
        if lhs is None:
            return NotImplemented
        return add(lhs, self)

    def __sub__(self, other: Any) -> "ApproximateNumber":
        rhs = _coerce(other)
        if rhs is None:
            return NotImplemented
        return sub(self, rhs)

    def __rsub__(self, other: Any) -> "ApproximateNumber":
        lhs = _coerce(other)
        if lhs is None:
            return NotImplemented
        return sub(lhs, self)

    def __mul__(self, other: Any) -> "ApproximateNumber":
        if isinstance(other, ApproximateNumber):
            return mul(self, other)
        if _is_scalar(other):
            return scale(self, other)
        return NotImplemented

    def __rmul__(self, other: Any) -> "ApproximateNumber":
        if _is_scalar(other):
            return scale(self, other)
        return NotImplemented

    def __truediv__(self, other: Any) -> "ApproximateNumber":
        if isinstance(other, ApproximateNumber):
            return div(self, other)
        if _is_scalar(other):
            # Точный делитель: относительная погрешность не меняется
            return new(ieee_divide(self.value, other), ieee_divide(self.delta, other))
        return NotImplemented

    def __rtruediv__(self, other: Any) -> "ApproximateNumber":
        if _is_scalar(other):
            # Точный делимый: вклад в относительную погрешность = 0
            quotient = ieee_divide(other, self.value)
            return new(quotient, quotient * self.relative_delta)
        return NotImplemented

    def __neg__(self) -> "ApproximateNumber":
        return new(-self.value, self.delta)

    def __pos__(self) -> "ApproximateNumber":
        return self

    def __lt__(self, other: Any) -> bool:
        rhs = _coerce(other)
        if rhs is None:
            return NotImplemented
        return lt(self, rhs)

    def __le__(self, other: Any) -> bool:
        rhs = _coerce(other)
        if rhs is None:
            return NotImplemented
        return le(self, rhs)

    def __gt__(self, other: Any) -> bool:
        rhs = _coerce(other)
        if rhs is None:
            return NotImplemented
        return gt(self, rhs)

    def __ge__(self, other: Any) -> bool:
        rhs = _coerce(other)
        if rhs is None:
            return NotImplemented
        return ge(self, rhs)


def _is_scalar(obj: Any) -> bool:
    return isinstance(obj, (int, float)) and not isinstance(obj, bool)


def _coerce(obj: Any) -> Optional[ApproximateNumber]:
    """Точный скаляр → ApproximateNumber(delta=0); прочие типы → None."""
    if isinstance(obj, ApproximateNumber):
        return obj
    if _is_scalar(obj):
        return new(obj)
    return None


# =============================================================================
# КОНСТРУИРОВАНИЕ
# =============================================================================


def new(value: float, delta: float = 0.0) -> ApproximateNumber:
    """
    Конструирование из центрального значения и погрешности.

    Погрешность нормализуется через abs, поэтому new(10, 1) == new(10, -1).
    Всегда успешно.

    Examples:
        >>> new(10, -1)
        ApproximateNumber(value=10.0, delta=1.0)
    """
    return ApproximateNumber(value=value, delta=delta)


def from_min_max(min_value: float, max_value: float) -> ApproximateNumber:
    """
    Конструирование из границ интервала [min_value, max_value].

    value = (min + max) / 2, delta = |(max - min) / 2|

    Args:
        min_value: Нижняя граница
        max_value: Верхняя граница (>= min_value)

    Returns:
        ApproximateNumber с интервалом ровно [min_value, max_value]

    Raises:
        InvalidRangeError: Если max_value < min_value

    Examples:
        >>> from_min_max(1, 10)
        ApproximateNumber(value=5.5, delta=4.5)
    """
    if max_value < min_value:
        logger.debug("Invalid range: min=%r > max=%r", min_value, max_value)
        raise InvalidRangeError(min_value, max_value)

    value = (min_value + max_value) / 2
    delta = abs((max_value - min_value) / 2)
    return new(value, delta)


def parse(text: str) -> ApproximateNumber:
    """
    Разбор записи "value±delta" или "value".

    Raises:
        ParseError: cause различает value / delta / structure

    Examples:
        >>> parse("4.2±0.3")
        ApproximateNumber(value=4.2, delta=0.3)
    """
    value, delta = split_notation(text)
    return new(value, delta)


def format_approximate(x: ApproximateNumber) -> str:
    """
    Базовое представление "value±delta".

    Не является стабильным форматом; для собственного форматирования
    используйте x.value и x.delta.
    """
    return format_notation(x.value, x.delta)


# =============================================================================
# АРИФМЕТИКА
# =============================================================================


def _relative_error_sum(a: ApproximateNumber, b: ApproximateNumber) -> float:
    return abs(ieee_divide(a.delta, a.value)) + abs(ieee_divide(b.delta, b.value))


def add(a: ApproximateNumber, b: ApproximateNumber) -> ApproximateNumber:
    """Сумма: значения складываются, погрешности складываются."""
    return new(a.value + b.value, a.delta + b.delta)


def sub(a: ApproximateNumber, b: ApproximateNumber) -> ApproximateNumber:
    """
    Разность a - b.

    Значения вычитаются, но погрешности СКЛАДЫВАЮТСЯ: в худшем случае
    ошибки измерений направлены в противоположные стороны.
    """
    return new(a.value - b.value, a.delta + b.delta)


def mul(a: ApproximateNumber, b: ApproximateNumber) -> ApproximateNumber:
    """
    Произведение через сумму относительных погрешностей.

    rel = |da/a| + |db/b|, value = a*b, delta = |value * rel|

    Линеаризация первого порядка. Нулевой сомножитель даёт бесконечную
    относительную погрешность и, как следствие, delta = NaN (0 * inf).

    Examples:
        >>> mul(new(1, 2), new(3, 4))
        ApproximateNumber(value=3.0, delta=10.0)
    """
    rel = _relative_error_sum(a, b)
    value = a.value * b.value
    result = new(value, abs(value * rel))
    if not is_valid_float(result.delta):
        logger.debug("mul(%s, %s) produced non-finite delta %r", a, b, result.delta)
    return result


def div(a: ApproximateNumber, b: ApproximateNumber) -> ApproximateNumber:
    """
    Частное через сумму относительных погрешностей.

    rel = |da/a| + |db/b|, value = a/b, delta = |value * rel|

    Деление на нулевое значение даёт бесконечности по IEEE-754,
    а не ZeroDivisionError.
    """
    rel = _relative_error_sum(a, b)
    value = ieee_divide(a.value, b.value)
    result = new(value, abs(value * rel))
    if not is_valid_float(result.delta):
        logger.debug("div(%s, %s) produced non-finite delta %r", a, b, result.delta)
    return result


def scale(x: ApproximateNumber, c: float) -> ApproximateNumber:
    """
    Умножение на точный скаляр: value = c*value, delta = |c*delta|.

    Отличается от mul тем, что скаляр не имеет погрешности.
    """
    return new(c * x.value, abs(c * x.delta))


# =============================================================================
# СРАВНЕНИЯ
# =============================================================================


def lt(f: ApproximateNumber, t: ApproximateNumber) -> bool:
    """f definitely меньше t: интервалы не пересекаются и f целиком ниже."""
    return f.max < t.min


def le(f: ApproximateNumber, t: ApproximateNumber) -> bool:
    """f definitely меньше или равен t: f.max <= t.min."""
    return f.max <= t.min


def gt(f: ApproximateNumber, t: ApproximateNumber) -> bool:
    """f definitely больше t. Определено как le(t, f)."""
    return le(t, f)


def ge(f: ApproximateNumber, t: ApproximateNumber) -> bool:
    """f definitely больше или равен t. Определено как lt(t, f)."""
    return lt(t, f)


def overlap(f: ApproximateNumber, t: ApproximateNumber) -> bool:
    """
    Интервалы f и t могут пересекаться: ни один не упорядочен до другого.

    Для пересекающихся интервалов lt/le/gt/ge все возвращают False:
    при такой погрешности никакое утверждение о порядке не безопасно.
    """
    return not le(f, t) and not le(t, f)


# =============================================================================
# ПРИМЕНЕНИЕ ФУНКЦИЙ
# =============================================================================


def _apply_log(x: ApproximateNumber) -> ApproximateNumber:
    # ln(x + dx) = ln(x) + dx / x; abs не берётся, знак снимает new()
    delta = ieee_divide(x.delta, x.value)
    return new(ieee_log(x.value), delta)


def _apply_exp(x: ApproximateNumber) -> ApproximateNumber:
    # e^(x + dx) = e^x + e^x * dx
    value = ieee_exp(x.value)
    return new(value, value * x.delta)


def apply(
    fn: ScalarFunction,
    x: ApproximateNumber,
    epsilon: float,
    kind: Optional[FunctionKind] = None,
) -> ApproximateNumber:
    """
    Применение функции fn к approximate number x.

    Разложение Тейлора первого порядка вокруг x.value:
        fn(x + dx) ≈ fn(x) + fn'(x) * dx
        value = fn(x.value), delta = |fn'(x.value) * x.delta|

    Для FunctionKind.LOG и FunctionKind.EXP производная аналитическая,
    epsilon игнорируется, а fn не вызывается. Для GENERIC fn' оценивается
    центральной разностью с шагом epsilon.

    Args:
        fn: Функция float → float
        x: Аргумент
        epsilon: Шаг численной производной (обязателен, знак не важен).
            Малый шаг → cancellation error, большой → ошибка линеаризации,
            нулевой → NaN-погрешность.
        kind: Явный выбор FunctionKind. Если не задан, определяется по
            реестру KNOWN_FUNCTIONS (math.log, math.exp), иначе GENERIC.

    Returns:
        Новый ApproximateNumber

    Examples:
        >>> import math
        >>> apply(math.log, new(1, 0.1), 1e-3)
        ApproximateNumber(value=0.0, delta=0.1)
    """
    resolved = resolve_function_kind(fn, kind)
    logger.debug("apply %r to %s as %s", fn, x, resolved.value)

    if resolved is FunctionKind.LOG:
        return _apply_log(x)
    if resolved is FunctionKind.EXP:
        return _apply_exp(x)

    slope = central_difference(fn, x.value, epsilon)
    return new(fn(x.value), abs(slope * x.delta))
