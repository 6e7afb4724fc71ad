from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Sequence

import numpy as np

from src.bezier_curve.bernstein import bezier_curve
from src.bezier_curve.errors import (
    BezierError,
    DimensionMismatch,
    InsufficientControlPoints,
    InvalidComponent,
    ZeroDimension,
)
from src.bezier_curve.models import SubdivisionSettings
from src.bezier_curve.point import PointVector, interpolate
from src.bezier_curve.sampling import sample_by_tolerance, sample_fixed_count

PointLike = PointVector | Sequence[float] | np.ndarray


def validate_control_points(points: Sequence[PointLike]) -> BezierError | None:
    """Return the first violated construction rule, or None.

    Dimension rules are checked before the count rule.
    """
    sizes = []
    for point in points:
        try:
            sizes.append(len(point))
        except TypeError:
            return InvalidComponent(point)
    if sizes:
        if sizes[0] == 0:
            return ZeroDimension()
        for size in sizes[1:]:
            if size != sizes[0]:
                return DimensionMismatch(sizes[0], size)
    if len(points) < 2:
        return InsufficientControlPoints(len(points))
    return None


def _reduce(points: Sequence[PointVector], t: float) -> list[PointVector]:
    return [interpolate(points[i], points[i + 1], t) for i in range(len(points) - 1)]


class BezierCurve:
    """A Bezier curve of any degree in any number of dimensions.

    Usage::

        c = BezierCurve([[0, 0], [0, 1], [1, 1]])
        c.first            # PointVector([0.0, 0.0])
        c[0.375]           # PointVector([0.140625, 0.609375])
        c.points()         # polyline within pi/64 radians of smooth
        c.points(count=10) # 10 points for evenly spaced values of t
    """

    def __init__(self, points: Iterable[PointLike] | np.ndarray) -> None:
        points = list(points)
        error = validate_control_points(points)
        if error is not None:
            raise error
        self._controls: tuple[PointVector, ...] = tuple(PointVector.coerce(p) for p in points)

    def __repr__(self) -> str:
        return f"BezierCurve({[list(p) for p in self._controls]!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, BezierCurve):
            return NotImplemented
        return self._controls == other._controls

    def __hash__(self) -> int:
        return hash(self._controls)

    @property
    def controls(self) -> tuple[PointVector, ...]:
        return self._controls

    @property
    def first(self) -> PointVector:
        return self._controls[0]

    @property
    def last(self) -> PointVector:
        return self._controls[-1]

    start = first
    end = last

    @property
    def degree(self) -> int:
        return len(self._controls) - 1

    order = degree

    @property
    def dimension(self) -> int:
        return len(self._controls[0])

    dimensions = dimension

    def to_array(self) -> np.ndarray:
        return np.array([p.components for p in self._controls], dtype=float)

    def evaluate(self, t: float) -> PointVector:
        """Point at parameter ``t`` by de Casteljau reduction."""
        points: list[PointVector] = list(self._controls)
        while len(points) > 1:
            points = _reduce(points, t)
        return points[0]

    def __getitem__(self, t: float) -> PointVector:
        return self.evaluate(t)

    def evaluate_many(self, ts: Sequence[float] | np.ndarray) -> np.ndarray:
        """Points for every ``t`` in ``ts`` as an array of shape (len(ts), dimension)."""
        return bezier_curve(self.to_array(), np.asarray(ts, dtype=float))

    def split_at(self, t: float) -> tuple[BezierCurve, BezierCurve]:
        """Divide the curve at ``t`` into two curves of the same degree."""
        points: list[PointVector] = list(self._controls)
        left = [points[0]]
        right = [points[-1]]
        while len(points) > 1:
            points = _reduce(points, t)
            left.append(points[0])
            right.append(points[-1])
        right.reverse()
        return BezierCurve(left), BezierCurve(right)

    def points(
        self,
        count: int | None = None,
        tolerance: float | None = None,
        settings: SubdivisionSettings | None = None,
    ) -> list[PointVector]:
        """Points on the curve.

        With ``count``, that many points for evenly spaced values of ``t``.
        Otherwise a polyline where no two adjoining edges deviate from a
        straight line by more than ``tolerance`` radians (default pi/64).
        """
        if count is not None:
            return sample_fixed_count(self, count)
        return sample_by_tolerance(self, tolerance, settings=settings)


@dataclass(frozen=True)
class CurveResult:
    curve: BezierCurve | None = None
    error: BezierError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None


def build_curve(points: Iterable[PointLike] | np.ndarray) -> CurveResult:
    """Construct a curve without raising for invalid control points.

    The result carries either the curve or the error. ``points`` itself must
    be iterable.
    """
    points = list(points)
    error = validate_control_points(points)
    if error is not None:
        return CurveResult(error=error)
    try:
        return CurveResult(curve=BezierCurve(points))
    except InvalidComponent as exc:
        return CurveResult(error=exc)
