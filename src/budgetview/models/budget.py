"""Budget plan snapshots and the progress view models derived from them."""

from __future__ import annotations

from dataclasses import asdict, dataclass
from enum import Enum
from typing import Any, Mapping

from ..numeric import to_number


class ProgressState(str, Enum):
    """Branch taken by the progress classifier."""

    NO_DATA = "no_data"
    NEGATIVE = "negative"
    OVER_TARGET = "over_target"
    ON_TRACK = "on_track"


@dataclass(frozen=True, slots=True)
class BudgetPlanSnapshot:
    """Target and actuals for one budget plan at a point in time."""

    target: float
    net_amount: float
    income: float
    expenses: float

    @classmethod
    def from_plan(cls, raw: Mapping[str, Any]) -> "BudgetPlanSnapshot":
        """Summarize a plan payload.

        Income and expense lines may sit at the top level or under ``data``;
        each line contributes its ``amount`` (or ``value``) coerced to a number.
        """

        nested = raw.get("data")
        nested = nested if isinstance(nested, Mapping) else {}
        income_lines = _lines(raw.get("income")) or _lines(nested.get("income"))
        expense_lines = _lines(raw.get("expense")) or _lines(nested.get("expense"))

        income = sum(_line_amount(line) for line in income_lines)
        expenses = sum(_line_amount(line) for line in expense_lines)
        target = raw.get("budget_amount")
        if target in (None, "", 0):
            target = raw.get("target")
        return cls(
            target=to_number(target),
            net_amount=income - expenses,
            income=income,
            expenses=expenses,
        )


@dataclass(frozen=True, slots=True)
class ProgressInfo:
    """Status label, colour token and percentage for a plan's progress bar.

    ``is_negative`` and ``is_over_target`` are kept apart even though both the
    over-target and the on-track branches display "Gain".
    """

    state: ProgressState
    status: str
    color: str
    progress_percent: float
    is_negative: bool
    is_over_target: bool
    remaining: float

    def to_dict(self) -> dict[str, Any]:
        data = asdict(self)
        data["state"] = self.state.value
        return data


@dataclass(frozen=True, slots=True)
class BudgetSummary:
    """Period-level roll-up shown next to the income/expense breakdowns."""

    total_income: float
    total_expenses: float
    net_amount: float
    budget_remaining: float
    is_over_budget: bool
    income_progress: int

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


def _lines(value: Any) -> list[Any]:
    if isinstance(value, (list, tuple)):
        return list(value)
    return []


def _line_amount(line: Any) -> float:
    if not isinstance(line, Mapping):
        return to_number(line)
    amount = line.get("amount")
    if amount in (None, "", 0):
        amount = line.get("value")
    return to_number(amount)
