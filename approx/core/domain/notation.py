"""
Notation — Текстовая запись approximate number

Формат: "<value>" или "<value>±<delta>", где разделитель — символ ± (U+00B1),
а не ASCII "+-".

Правила разбора:
- Все пробельные символы (в любом месте строки) удаляются до разбора
- value и delta — десятичные литералы float (знак, дробная часть, экспонента)
- Знак delta отбрасывается (берётся abs)
- Ровно один разделитель → неточное число; ноль → точное (delta = 0)
- Больше одного разделителя → ParseError(STRUCTURE)

Формат вывода иллюстративный, не стабильный wire format.
"""

import logging
import re
from typing import Final

from approx.core.domain.errors import ParseError, ParseErrorCause

logger = logging.getLogger(__name__)

# =============================================================================
# ПАРАМЕТРЫ НОТАЦИИ
# =============================================================================

# Разделитель value и delta
UNCERTAINTY_SIGN: Final[str] = "±"

# Десятичный литерал float. Только ASCII-цифры, без "_" (в отличие от float())
_FLOAT_LITERAL: Final[re.Pattern[str]] = re.compile(
    r"[+-]?(?:(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?|inf(?:inity)?|nan)",
    re.IGNORECASE,
)


# =============================================================================
# РАЗБОР
# =============================================================================


def _parse_float(token: str) -> float | None:
    if _FLOAT_LITERAL.fullmatch(token) is None:
        return None
    return float(token)


def split_notation(text: str) -> tuple[float, float]:
    """
    Разбор записи value±delta в пару (value, delta).

    Args:
        text: Строка вида "4.2±0.3", "4.2 ± -0.3" или "-1.23"

    Returns:
        (value, abs(delta)); delta = 0.0 для точной записи

    Raises:
        ParseError: cause=VALUE / DELTA для некорректного литерала,
            cause=STRUCTURE для более чем одного разделителя

    Examples:
        >>> split_notation("4.2±0.3")
        (4.2, 0.3)
        >>> split_notation("4.2±-0.3")
        (4.2, 0.3)
        >>> split_notation("-1.23")
        (-1.23, 0.0)
    """
    compact = "".join(text.split())
    parts = compact.split(UNCERTAINTY_SIGN)

    if len(parts) > 2:
        logger.debug("Rejected %r: %d separators", text, len(parts) - 1)
        raise ParseError(
            text,
            ParseErrorCause.STRUCTURE,
            f"expected at most one {UNCERTAINTY_SIGN!r}, got {len(parts) - 1}",
        )

    value = _parse_float(parts[0])
    if value is None:
        logger.debug("Rejected %r: malformed value %r", text, parts[0])
        raise ParseError(text, ParseErrorCause.VALUE, f"malformed value {parts[0]!r}")

    if len(parts) == 1:
        return value, 0.0

    delta = _parse_float(parts[1])
    if delta is None:
        logger.debug("Rejected %r: malformed delta %r", text, parts[1])
        raise ParseError(text, ParseErrorCause.DELTA, f"malformed delta {parts[1]!r}")

    return value, abs(delta)


# =============================================================================
# ФОРМАТИРОВАНИЕ
# =============================================================================


def format_notation(value: float, delta: float) -> str:
    """
    Базовое форматирование "<value>±<delta>".

    Использует repr (кратчайшее представление, которое разбирается обратно).
    Для специального форматирования используйте value/delta напрямую.

    Examples:
        >>> format_notation(4.2, 0.3)
        '4.2±0.3'
    """
    return f"{value!r}{UNCERTAINTY_SIGN}{delta!r}"
