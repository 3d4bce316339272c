"""Monthly trend points, period windows and sparkline geometry."""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Sequence

from ..numeric import to_number

MONTH_LABELS = ("Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")

# trailing number of points kept for each period filter
PERIOD_LENGTHS = {"1y": 12, "6m": 6, "3m": 3, "1m": 1}


@dataclass(frozen=True, slots=True)
class TrendPoint:
    month: str
    value: float
    year: int | None = None

    def to_dict(self) -> dict[str, Any]:
        return asdict(self)


def window(points: Sequence[TrendPoint], period: str) -> list[TrendPoint]:
    """Keep the trailing points for ``period``; unknown periods keep everything."""

    length = PERIOD_LENGTHS.get(period)
    if length is None:
        return list(points)
    return list(points[-length:])


def sparkline_points(
    points: Sequence[TrendPoint], *, height: float = 160, max_y: float = 50000
) -> list[tuple[float, float]]:
    """Map values onto a 0-100 wide canvas, highest value at the top."""

    if not points:
        return []
    ceiling = max_y if max_y > 0 else 1
    step = 100 / (len(points) - 1) if len(points) > 1 else 100
    return [
        (idx * step, (1 - to_number(point.value) / ceiling) * height)
        for idx, point in enumerate(points)
    ]


def sparkline_path(points: Sequence[TrendPoint], *, height: float = 160, max_y: float = 50000) -> str:
    coords = sparkline_points(points, height=height, max_y=max_y)
    return " ".join(
        f"{'M' if idx == 0 else 'L'} {x},{y}" for idx, (x, y) in enumerate(coords)
    )


def fill_path(points: Sequence[TrendPoint], *, height: float = 160, max_y: float = 50000) -> str:
    """Sparkline closed down to the baseline, for the shaded area."""

    line = sparkline_path(points, height=height, max_y=max_y)
    if not line:
        return ""
    last_x = sparkline_points(points, height=height, max_y=max_y)[-1][0]
    return f"{line} L {last_x},{height} L 0,{height} Z"
