"""Category totals and the derived donut-chart segments."""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Mapping

from ..numeric import to_number


@dataclass(frozen=True, slots=True)
class CategoryRecord:
    """One spending or income category total for a period.

    Labels are expected to arrive de-duplicated from the data source.
    """

    category: str
    total_amount: float

    @classmethod
    def from_raw(cls, raw: Mapping[str, Any]) -> "CategoryRecord":
        """Build a record from an API/CSV row, tolerating missing or string amounts."""

        name = raw.get("category")
        if name in (None, ""):
            name = raw.get("name", "")
        amount = raw.get("total_amount")
        if amount is None:
            amount = raw.get("totalAmount", raw.get("amount"))
        return cls(category=str(name or "Uncategorized"), total_amount=to_number(amount))


@dataclass(frozen=True, slots=True)
class CategoryShare:
    """A category with its whole-number share of the grand total."""

    name: str
    amount: float
    percentage: int
    color: str | None = None

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True, slots=True)
class WedgeGeometry:
    """Corner points and arc flag for one donut wedge.

    Points are ``(x, y)`` pairs on a canvas centred at the origin, with 0°
    pointing up and angles growing clockwise.
    """

    outer_start: tuple[float, float]
    outer_end: tuple[float, float]
    inner_end: tuple[float, float]
    inner_start: tuple[float, float]
    large_arc: bool
    outer_radius: float
    inner_radius: float
    collapsed: bool = False

    @property
    def path(self) -> str:
        """SVG path data for the wedge outline."""

        flag = 1 if self.large_arc else 0
        x1, y1 = self.outer_start
        x2, y2 = self.outer_end
        x3, y3 = self.inner_end
        x4, y4 = self.inner_start
        r, ir = self.outer_radius, self.inner_radius
        return (
            f"M {x1} {y1} A {r} {r} 0 {flag} 1 {x2} {y2} "
            f"L {x3} {y3} A {ir} {ir} 0 {flag} 0 {x4} {y4} Z"
        )

    def to_dict(self) -> dict[str, Any]:
        data = asdict(self)
        data["path"] = self.path
        return data


@dataclass(frozen=True, slots=True)
class PieSegment:
    """A render-ready donut segment; rebuilt wholesale on every input change."""

    name: str
    amount: float
    color: str | None
    percentage: int
    start_angle: float
    end_angle: float
    geometry: WedgeGeometry | None = None

    @property
    def sweep(self) -> float:
        return self.end_angle - self.start_angle

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.name,
            "amount": self.amount,
            "color": self.color,
            "percentage": self.percentage,
            "start_angle": self.start_angle,
            "end_angle": self.end_angle,
            "geometry": self.geometry.to_dict() if self.geometry else None,
        }
