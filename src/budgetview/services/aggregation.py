"""Category percentage aggregation."""

from __future__ import annotations

import logging
from typing import Any, Iterable, Literal, Mapping, Union

from ..models.category import CategoryRecord, CategoryShare
from ..numeric import round_half_up, safe_ratio

logger = logging.getLogger(__name__)

BreakdownKind = Literal["expense", "income"]

PALETTES: dict[str, tuple[str, ...]] = {
    "expense": ("#EF4444", "#F59E0B", "#10B981", "#3B82F6", "#8B5CF6", "#F97316"),
    "income": ("#10B981", "#3B82F6", "#8B5CF6", "#F59E0B", "#EF4444", "#06B6D4"),
}

CategoryInput = Union[CategoryRecord, Mapping[str, Any]]


def coerce_records(records: Iterable[CategoryInput]) -> list[CategoryRecord]:
    """Accept records or raw mappings and return records in the same order."""

    return [
        rec if isinstance(rec, CategoryRecord) else CategoryRecord.from_raw(rec)
        for rec in records
    ]


def category_total(records: Iterable[CategoryInput]) -> float:
    """Grand total shown in the donut centre."""

    return sum(rec.total_amount for rec in coerce_records(records))


def compute_percentages(records: Iterable[CategoryInput]) -> list[CategoryShare]:
    """Attach a whole-number percentage of the grand total to each category.

    Each share is rounded on its own, so the percentages may add up to
    slightly more or less than 100. A zero total yields 0 for every row.
    """

    items = coerce_records(records)
    total = sum(rec.total_amount for rec in items)
    shares = [
        CategoryShare(
            name=rec.category,
            amount=rec.total_amount,
            percentage=int(round_half_up(safe_ratio(rec.total_amount, total) * 100)),
        )
        for rec in items
    ]
    logger.debug("Aggregated %d categories (total=%s)", len(shares), total)
    return shares


def percentage_drift(shares: Iterable[CategoryShare]) -> int:
    """How far the rounded percentages stray from 100 (0 when empty)."""

    items = list(shares)
    if not items:
        return 0
    return sum(share.percentage for share in items) - 100


def assign_colors(shares: Iterable[CategoryShare], kind: BreakdownKind = "expense") -> list[CategoryShare]:
    """Return copies of ``shares`` coloured from the palette for ``kind``, cycling as needed."""

    try:
        palette = PALETTES[kind]
    except KeyError as exc:
        raise ValueError(f"Unknown breakdown kind '{kind}'; expected one of {sorted(PALETTES)}") from exc
    return [
        CategoryShare(
            name=share.name,
            amount=share.amount,
            percentage=share.percentage,
            color=palette[idx % len(palette)],
        )
        for idx, share in enumerate(shares)
    ]


def build_breakdown(records: Iterable[CategoryInput], kind: BreakdownKind = "expense") -> list[CategoryShare]:
    """Percentages plus palette colours, ready for the legend and the donut."""

    return assign_colors(compute_percentages(records), kind)
