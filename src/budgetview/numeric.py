"""Safe numeric coercion and the shared rounding policy.

Upstream payloads deliver amounts as numbers, numeric strings, ``None`` or not
at all. Every service funnels those values through :func:`to_number` so a bad
field degrades to zero instead of raising or leaking ``NaN`` into a view model.
"""

from __future__ import annotations

import logging
import math
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation
from typing import Any

logger = logging.getLogger(__name__)

_CURRENCY_PREFIXES = ("$", "€", "£", "¥")


def to_number(value: Any, default: float = 0.0) -> float:
    """Return ``value`` as a finite float, or ``default`` when it cannot be read.

    Accepts ints, floats, Decimals and numeric strings. Strings may carry
    surrounding whitespace, thousands separators and a leading currency symbol
    (``"-$1,200.50"``). Booleans, NaN, infinities and anything unparsable map to
    ``default``.
    """

    if value is None or isinstance(value, bool):
        return default

    if isinstance(value, (int, float, Decimal)):
        number = float(value)
    elif isinstance(value, str):
        text = value.strip().replace(",", "")
        if not text:
            return default
        sign = ""
        if text[0] in "+-":
            sign, text = text[0], text[1:]
        if text.startswith(_CURRENCY_PREFIXES):
            text = text[1:]
        try:
            number = float(sign + text)
        except ValueError:
            logger.debug("Unparsable numeric value %r coerced to %s", value, default)
            return default
    else:
        try:
            number = float(value)
        except (TypeError, ValueError):
            logger.debug("Unsupported numeric value %r coerced to %s", value, default)
            return default

    if not math.isfinite(number):
        return default
    return number


def round_half_up(value: float, places: int = 0) -> float:
    """Round half away from zero, matching the dashboard's percentage labels."""

    quantum = Decimal(1).scaleb(-places)
    try:
        rounded = Decimal(str(value)).quantize(quantum, rounding=ROUND_HALF_UP)
    except InvalidOperation:
        return 0.0
    # "or" folds -0.0 into 0.0 so labels never read "-0"
    return float(rounded) or 0.0


def safe_ratio(numerator: float, denominator: float) -> float:
    """Divide, returning 0 when the denominator is zero."""

    if not denominator:
        return 0.0
    return numerator / denominator
