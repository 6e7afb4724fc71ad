from __future__ import annotations

from typing import TYPE_CHECKING

from src.bezier_curve.errors import InvalidSampleCount
from src.bezier_curve.models import SubdivisionSettings
from src.bezier_curve.point import PointVector
from src.bezier_curve.subdivide import subdivide

if TYPE_CHECKING:
    from src.bezier_curve.curve import BezierCurve


def sample_fixed_count(curve: BezierCurve, count: int) -> list[PointVector]:
    """``count`` points for evenly spaced values of ``t``, both ends included."""
    if int(count) != count or count < 2:
        raise InvalidSampleCount(count)
    count = int(count)
    return [curve.evaluate(i / (count - 1)) for i in range(count)]


def sample_by_tolerance(
    curve: BezierCurve,
    tolerance: float | None = None,
    settings: SubdivisionSettings | None = None,
) -> list[PointVector]:
    """Polyline whose adjoining edges turn by no more than ``tolerance`` radians."""
    segments = subdivide(curve, tolerance, settings=settings)
    return [segment.first for segment in segments] + [segments[-1].last]
