"""Rounding primitives.

Binary floats cannot hold most decimal fractions exactly, so naive scaling
misrounds half-way values (``1.005 * 100 == 100.49999999999999``). Half-way
rounding here scales the shortest decimal representation of the value with
``Decimal.scaleb`` instead of multiplying floats.

Preconditions shared by the functions in this module: ``precision`` is a
non-negative ``int`` and ``value`` is finite. Inputs outside those bounds are
returned unchanged; callers validate at their own boundary.
"""

from __future__ import annotations

import math
from decimal import Decimal, ROUND_CEILING, ROUND_FLOOR, ROUND_HALF_UP, localcontext

from compactnum.errors import InvalidRoundingModeError
from compactnum.types import RoundingMode


def _is_roundable(value: float, precision: int) -> bool:
    return (
        math.isfinite(value)
        and isinstance(precision, int)
        and not isinstance(precision, bool)
        and precision >= 0
    )


def _quantize(value: float, precision: int, rounding: str) -> float:
    scaled = Decimal(repr(float(value))).scaleb(precision)
    with localcontext() as ctx:
        ctx.prec = max(ctx.prec, scaled.adjusted() + 2)
        rounded = scaled.quantize(Decimal(1), rounding=rounding)
    return float(rounded.scaleb(-precision))


def round_decimal(value: float, precision: int) -> float:
    """Round half away from zero at ``precision`` decimal places.

    Example:
        round_decimal(1.005, 2)      # 1.01
        round_decimal(-1.25, 1)      # -1.3
        round_decimal(0.1 + 0.2, 10)  # 0.3
    """
    if not _is_roundable(value, precision):
        return value

    sign = -1.0 if value < 0 else 1.0
    return _quantize(abs(value), precision, ROUND_HALF_UP) * sign


def round_value(value: float, precision: int, mode: RoundingMode | str) -> float:
    """Round ``value`` at ``precision`` decimal places using ``mode``.

    All modes share the decimal scaling of ``round_decimal``, so any
    non-negative precision is accepted.

    Raises:
        InvalidRoundingModeError: If ``mode`` is not a known rounding mode.
    """
    if not _is_roundable(value, precision):
        return value

    if mode == RoundingMode.FLOOR:
        return _quantize(value, precision, ROUND_FLOOR)
    elif mode == RoundingMode.CEIL:
        return _quantize(value, precision, ROUND_CEILING)
    elif mode == RoundingMode.ROUND:
        return round_decimal(value, precision)
    raise InvalidRoundingModeError(mode)


def pre_scale(value: float, divisor: float, digit_count: int) -> float:
    """Shift ``value`` into the leading digits a tier template renders.

    Example:
        pre_scale(1234, 1000, 1)    # 1.234 -> "1.2K"
        pre_scale(11234, 10000, 2)  # 11.234 -> "11.2K"
    """
    return (value / divisor) * 10 ** (digit_count - 1)


def format_fixed(
    value: float,
    minimum_fraction_digits: int,
    maximum_fraction_digits: int,
) -> str:
    """Render ``value`` with at most ``maximum_fraction_digits`` decimals.

    Trailing fractional zeros are trimmed down to ``minimum_fraction_digits``
    and a bare decimal point is dropped. Negative zero renders as "0".
    """
    if value == 0:
        value = 0.0
    fixed = f"{value:.{maximum_fraction_digits}f}"

    int_part, dot, frac_part = fixed.partition(".")
    if not dot:
        if minimum_fraction_digits > 0:
            return f"{int_part}.{'0' * minimum_fraction_digits}"
        return int_part

    while len(frac_part) > minimum_fraction_digits and frac_part.endswith("0"):
        frac_part = frac_part[:-1]

    if frac_part:
        return f"{int_part}.{frac_part}"
    return int_part


__all__ = [
    "round_decimal",
    "round_value",
    "pre_scale",
    "format_fixed",
]
