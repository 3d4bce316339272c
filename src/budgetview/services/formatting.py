"""Display formatting for amounts and percentages."""

from __future__ import annotations

from typing import Any

from ..numeric import round_half_up, to_number


def format_amount(amount: Any) -> str:
    """Thousands-separated magnitude with at most two decimals, trailing zeros dropped."""

    value = abs(round_half_up(to_number(amount), 2))
    text = f"{value:,.2f}"
    if text.endswith(".00"):
        return text[:-3]
    return text.rstrip("0") if "." in text else text


def format_currency(amount: Any, currency: str = "$") -> str:
    """``-$1,234.5`` style: sign first, then symbol, then magnitude."""

    value = round_half_up(to_number(amount), 2)
    sign = "-" if value < 0 else ""
    return f"{sign}{currency}{format_amount(value)}"


def format_percent(value: Any) -> str:
    return f"{int(round_half_up(to_number(value)))}%"
