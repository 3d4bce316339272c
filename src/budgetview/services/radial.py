"""Donut chart angles and wedge geometry.

Angles are in degrees on a 0-360 scale (100% == 360°), measured clockwise
from twelve o'clock. Wedges are separated by a fixed angular gap.
"""

from __future__ import annotations

import logging
import math
from typing import Any, Iterable, Mapping, Union

from ..models.category import CategoryShare, PieSegment, WedgeGeometry
from ..numeric import to_number
from .aggregation import BreakdownKind, CategoryInput, build_breakdown

logger = logging.getLogger(__name__)

DEGREES_PER_PERCENT = 3.6
DEFAULT_OUTER_RADIUS = 90.0
DEFAULT_INNER_RADIUS = 40.0
DEFAULT_GAP = 2.0
# narrowest wedge drawn when the gap swallows a segment
MIN_SLIVER = 0.5

ShareInput = Union[CategoryShare, Mapping[str, Any]]


def _as_share(item: ShareInput) -> CategoryShare:
    if isinstance(item, CategoryShare):
        return item
    return CategoryShare(
        name=str(item.get("name", "")),
        amount=to_number(item.get("amount")),
        percentage=to_number(item.get("percentage")),  # type: ignore[arg-type]
        color=item.get("color"),
    )


def assign_angles(shares: Iterable[ShareInput]) -> list[PieSegment]:
    """Give each share a start/end angle from the running percentage total."""

    segments: list[PieSegment] = []
    cumulative = 0.0
    for item in shares:
        share = _as_share(item)
        start = cumulative * DEGREES_PER_PERCENT
        end = start + share.percentage * DEGREES_PER_PERCENT
        segments.append(
            PieSegment(
                name=share.name,
                amount=share.amount,
                color=share.color,
                percentage=share.percentage,
                start_angle=start,
                end_angle=end,
            )
        )
        cumulative += share.percentage
    return segments


def _point(radius: float, radians: float) -> tuple[float, float]:
    return (radius * math.cos(radians), radius * math.sin(radians))


def wedge_geometry(
    start_angle: float,
    end_angle: float,
    *,
    outer_radius: float = DEFAULT_OUTER_RADIUS,
    inner_radius: float = DEFAULT_INNER_RADIUS,
    gap: float = DEFAULT_GAP,
) -> WedgeGeometry:
    """Corner points and arc flag for the wedge between two angles.

    Half the gap is shaved off each side. If that leaves less than
    :data:`MIN_SLIVER` degrees the wedge collapses to a sliver of that width
    centred on the segment.
    """

    first = start_angle + gap / 2
    last = end_angle - gap / 2
    collapsed = last - first < MIN_SLIVER
    if collapsed:
        middle = (start_angle + end_angle) / 2
        first, last = middle - MIN_SLIVER / 2, middle + MIN_SLIVER / 2

    a1 = math.radians(first - 90)
    a2 = math.radians(last - 90)
    return WedgeGeometry(
        outer_start=_point(outer_radius, a1),
        outer_end=_point(outer_radius, a2),
        inner_end=_point(inner_radius, a2),
        inner_start=_point(inner_radius, a1),
        large_arc=(last - first) > 180,
        outer_radius=outer_radius,
        inner_radius=inner_radius,
        collapsed=collapsed,
    )


def attach_geometry(
    segments: Iterable[PieSegment],
    *,
    outer_radius: float = DEFAULT_OUTER_RADIUS,
    inner_radius: float = DEFAULT_INNER_RADIUS,
    gap: float = DEFAULT_GAP,
) -> list[PieSegment]:
    """Return copies of ``segments`` carrying their wedge geometry."""

    if inner_radius < 0 or inner_radius >= outer_radius:
        raise ValueError(
            f"inner_radius must be within [0, outer_radius); got {inner_radius} / {outer_radius}"
        )
    result = []
    for seg in segments:
        geometry = wedge_geometry(
            seg.start_angle,
            seg.end_angle,
            outer_radius=outer_radius,
            inner_radius=inner_radius,
            gap=gap,
        )
        if geometry.collapsed:
            logger.debug("Segment %r narrower than the gap; drawn as a sliver", seg.name)
        result.append(
            PieSegment(
                name=seg.name,
                amount=seg.amount,
                color=seg.color,
                percentage=seg.percentage,
                start_angle=seg.start_angle,
                end_angle=seg.end_angle,
                geometry=geometry,
            )
        )
    return result


def build_segments(
    records: Iterable[CategoryInput],
    kind: BreakdownKind = "expense",
    *,
    outer_radius: float = DEFAULT_OUTER_RADIUS,
    inner_radius: float = DEFAULT_INNER_RADIUS,
    gap: float = DEFAULT_GAP,
) -> list[PieSegment]:
    """Category totals in, fully drawn donut segments out."""

    segments = assign_angles(build_breakdown(records, kind))
    return attach_geometry(segments, outer_radius=outer_radius, inner_radius=inner_radius, gap=gap)
