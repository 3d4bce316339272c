"""Spread an aggregate total across time buckets without losing a cent."""

from __future__ import annotations

import logging
import random
from typing import Any, Protocol, Sequence

from ..numeric import round_half_up, to_number
from .trend import MONTH_LABELS, TrendPoint

logger = logging.getLogger(__name__)

DEFAULT_BUCKETS = 12
DEFAULT_VARIANCE = 0.2


class RandomSource(Protocol):
    """Anything exposing ``uniform``; ``random.Random`` satisfies it."""

    def uniform(self, a: float, b: float) -> float:  # pragma: no cover - interface
        ...


def seeded_source(seed: int | None) -> RandomSource:
    """Deterministic source for a seed, system randomness for ``None``."""

    if seed is None:
        return random.SystemRandom()
    return random.Random(seed)


def distribute_total(
    total: Any,
    buckets: int = DEFAULT_BUCKETS,
    *,
    rng: RandomSource | None = None,
    variance: float = DEFAULT_VARIANCE,
) -> list[float]:
    """Split ``total`` into ``buckets`` jittered, non-negative values summing to it exactly.

    The first ``buckets - 1`` values are the even share scaled by an
    independent factor in ``[-variance, +variance]``, floored at zero and
    rounded to whole units. The last bucket absorbs the remainder, which keeps
    the sum equal to ``total`` whatever jitter came before. A zero total
    returns zeros without consulting ``rng``.
    """

    if buckets < 1:
        raise ValueError(f"buckets must be at least 1, got {buckets}")
    if not 0 <= variance <= 1:
        raise ValueError(f"variance must be within [0, 1], got {variance}")

    amount = max(0.0, to_number(total))
    if amount == 0:
        return [0.0] * buckets

    source = rng if rng is not None else random.SystemRandom()
    base = amount / buckets
    values: list[float] = []
    for _ in range(buckets - 1):
        factor = 1 + source.uniform(-variance, variance)
        values.append(round_half_up(max(0.0, base * factor)))

    allotted = sum(values)
    if allotted > amount:
        # Rounding pushed the jittered buckets past a small total; trim the
        # overshoot from the latest buckets so none goes negative.
        overshoot = allotted - amount
        for idx in range(len(values) - 1, -1, -1):
            cut = min(values[idx], overshoot)
            values[idx] -= cut
            overshoot -= cut
            if overshoot <= 0:
                break
        allotted = sum(values)

    values.append(max(0.0, amount - allotted))
    logger.debug("Distributed %s across %d buckets", amount, buckets)
    return values


def label_buckets(
    values: Sequence[float], start_month: int = 1, year: int | None = None
) -> list[TrendPoint]:
    """Pair bucket values with month labels starting at ``start_month`` (1-12).

    Labels wrap past December; ``year`` advances with them when given.
    """

    if not 1 <= start_month <= 12:
        raise ValueError(f"start_month must be within 1..12, got {start_month}")
    points: list[TrendPoint] = []
    for offset, value in enumerate(values):
        month_index = (start_month - 1 + offset) % 12
        point_year = None
        if year is not None:
            point_year = year + (start_month - 1 + offset) // 12
        points.append(TrendPoint(month=MONTH_LABELS[month_index], value=value, year=point_year))
    return points
