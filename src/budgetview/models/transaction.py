"""Immutable transaction rows consumed by the query engine."""

from __future__ import annotations

import logging
from dataclasses import asdict, dataclass
from datetime import date, datetime, time
from typing import Any, ClassVar, Literal, Mapping, Optional

from ..numeric import to_number

logger = logging.getLogger(__name__)

TransactionStatus = Literal["completed", "pending", "failed"]
TransactionType = Literal["income", "expense"]


@dataclass(frozen=True, slots=True)
class TransactionRecord:
    """A single ledger row as delivered by the data source.

    ``date`` is an ISO date string and ``time`` an optional ``HH:MM:SS`` string.
    Positive amounts are inflows, negative amounts outflows.
    """

    STATUSES: ClassVar[tuple[str, ...]] = ("completed", "pending", "failed")
    TYPES: ClassVar[tuple[str, ...]] = ("income", "expense")

    id: str
    name: str
    date: str
    amount: float
    status: TransactionStatus = "completed"
    type: TransactionType = "expense"
    time: Optional[str] = None
    description: Optional[str] = None
    category: Optional[str] = None
    account: Optional[str] = None

    @property
    def occurred_at(self) -> datetime:
        """Combined date and time; a missing time means midnight.

        Unparsable dates sort first (``datetime.min``) rather than raising.
        """

        try:
            day = date.fromisoformat(self.date.strip()[:10])
        except (AttributeError, ValueError):
            return datetime.min
        moment = time()
        if self.time:
            try:
                moment = time.fromisoformat(self.time.strip())
            except ValueError:
                moment = time()
        return datetime.combine(day, moment.replace(tzinfo=None))

    @classmethod
    def from_raw(cls, raw: Mapping[str, Any]) -> "TransactionRecord":
        """Normalize an API or CSV row.

        Handles the deposit feed shape (``created_at`` timestamp, ``detail``
        text) as well as already-split ``date``/``time`` fields.
        """

        day = raw.get("date")
        moment = raw.get("time")
        created_at = raw.get("created_at")
        if not day and isinstance(created_at, str) and created_at:
            day, _, rest = created_at.partition("T")
            if rest:
                moment = rest.split(".")[0].rstrip("Z") or None

        amount = to_number(raw.get("amount"))
        status = str(raw.get("status") or "completed").strip().lower()
        if status not in cls.STATUSES:
            logger.debug("Unknown status %r on transaction %r read as pending", raw.get("status"), raw.get("id"))
            status = "pending"
        kind = str(raw.get("type") or "").strip().lower()
        if kind not in cls.TYPES:
            kind = "income" if amount >= 0 else "expense"

        detail = raw.get("detail")
        name = raw.get("name") or detail or ""
        description = raw.get("description")
        if description is None and detail is not None:
            description = detail

        return cls(
            id=str(raw.get("id") or ""),
            name=str(name),
            date=str(day or ""),
            time=_optional_text(moment),
            amount=amount,
            description=_optional_text(description),
            status=status,  # type: ignore[arg-type]
            category=_optional_text(raw.get("category")),
            type=kind,  # type: ignore[arg-type]
            account=_optional_text(raw.get("account")),
        )

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


def _optional_text(value: Any) -> Optional[str]:
    if value is None:
        return None
    # pandas hands missing cells over as float NaN
    if isinstance(value, float) and value != value:
        return None
    text = str(value).strip()
    return text or None
