"""Budget plan progress classification and period summaries."""

from __future__ import annotations

import logging
from typing import Any, Iterable, Mapping, Union

from ..models.budget import BudgetPlanSnapshot, BudgetSummary, ProgressInfo, ProgressState
from ..models.category import CategoryShare
from ..numeric import round_half_up, safe_ratio, to_number

logger = logging.getLogger(__name__)

# Colour tokens; the renderer maps them onto its own palette.
NEUTRAL = "neutral"
ALERT = "alert"
ACCENT = "accent"

_LABELS: dict[ProgressState, tuple[str, str]] = {
    ProgressState.NO_DATA: ("No Data", NEUTRAL),
    ProgressState.NEGATIVE: ("Budget", ALERT),
    ProgressState.OVER_TARGET: ("Gain", ACCENT),
    ProgressState.ON_TRACK: ("Gain", ACCENT),
}

SnapshotInput = Union[BudgetPlanSnapshot, Mapping[str, Any]]


def classify_progress(snapshot: SnapshotInput) -> ProgressInfo:
    """Derive the status label, colour and percentage for a plan.

    Branches are checked in order: no activity, negative balance, above
    target, then the positive default. Over-target and on-track plans share the
    "Gain" label; ``is_over_target`` tells them apart. ``progress_percent`` is
    left unclamped, see :func:`clamp_percent`.
    """

    plan = _coerce_snapshot(snapshot)
    target, net = plan.target, plan.net_amount

    is_negative = net < 0
    is_over_target = net > target and net > 0
    progress_percent = abs(safe_ratio(net, target) * 100) if target > 0 else 0.0

    if plan.income == 0 and plan.expenses == 0:
        state = ProgressState.NO_DATA
    elif is_negative:
        state = ProgressState.NEGATIVE
    elif is_over_target:
        state = ProgressState.OVER_TARGET
    else:
        state = ProgressState.ON_TRACK

    status, color = _LABELS[state]
    return ProgressInfo(
        state=state,
        status=status,
        color=color,
        progress_percent=progress_percent,
        is_negative=is_negative,
        is_over_target=is_over_target,
        remaining=target - net,
    )


def clamp_percent(value: float, ceiling: float = 100) -> float:
    """Clamp a progress percentage into ``[0, ceiling]`` for a bar width."""

    return min(max(to_number(value), 0.0), ceiling)


def summarize_budget(
    income: Iterable[CategoryShare],
    expenses: Iterable[CategoryShare],
    *,
    budget_amount: Any = 0,
    income_goal: Any = 0,
) -> BudgetSummary:
    """Roll up a period's income and expense breakdowns against its budget and income goal."""

    total_income = sum(share.amount for share in income)
    total_expenses = sum(share.amount for share in expenses)
    budget = to_number(budget_amount)
    goal = to_number(income_goal)

    income_progress = int(round_half_up(total_income / goal * 100)) if goal > 0 else 0
    return BudgetSummary(
        total_income=total_income,
        total_expenses=total_expenses,
        net_amount=total_income - total_expenses,
        budget_remaining=max(0.0, budget - total_expenses),
        is_over_budget=total_expenses > budget and budget > 0,
        income_progress=income_progress,
    )


def _coerce_snapshot(snapshot: SnapshotInput) -> BudgetPlanSnapshot:
    if isinstance(snapshot, BudgetPlanSnapshot):
        return BudgetPlanSnapshot(
            target=to_number(snapshot.target),
            net_amount=to_number(snapshot.net_amount),
            income=to_number(snapshot.income),
            expenses=to_number(snapshot.expenses),
        )
    net = snapshot.get("net_amount", snapshot.get("netAmount", snapshot.get("balance")))
    plan = BudgetPlanSnapshot(
        target=to_number(snapshot.get("target")),
        net_amount=to_number(net),
        income=to_number(snapshot.get("income")),
        expenses=to_number(snapshot.get("expenses")),
    )
    logger.debug("Coerced raw plan snapshot %s", plan)
    return plan
