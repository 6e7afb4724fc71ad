from __future__ import annotations

from dataclasses import dataclass
from math import asin, sqrt
from typing import Iterable, Iterator

import numpy as np

from src.bezier_curve.errors import DimensionMismatch, InvalidComponent, ZeroDimension


def _to_float(value: object) -> float:
    try:
        return float(value)
    except (TypeError, ValueError) as exc:
        raise InvalidComponent(value) from exc


@dataclass(frozen=True)
class PointVector:
    """An immutable point in n-dimensional space.

    Every operation returns a new instance; components are stored as a
    tuple of floats and never change after construction.
    """

    components: tuple[float, ...]

    def __init__(self, components: Iterable[float]) -> None:
        values = tuple(_to_float(value) for value in components)
        if not values:
            raise ZeroDimension()
        object.__setattr__(self, "components", values)

    @classmethod
    def coerce(cls, value: PointVector | Iterable[float]) -> PointVector:
        if isinstance(value, PointVector):
            return value
        return cls(value)

    def __len__(self) -> int:
        return len(self.components)

    def __iter__(self) -> Iterator[float]:
        return iter(self.components)

    def __getitem__(self, index: int) -> float:
        return self.components[index]

    def __repr__(self) -> str:
        return f"PointVector({list(self.components)!r})"

    @property
    def dimension(self) -> int:
        return len(self.components)

    @property
    def x(self) -> float:
        return self.components[0]

    @property
    def y(self) -> float:
        return self.components[1]

    @property
    def z(self) -> float:
        return self.components[2]

    def as_tuple(self) -> tuple[float, ...]:
        return self.components

    def to_array(self) -> np.ndarray:
        return np.array(self.components, dtype=float)

    def distance_to(self, other: PointVector | Iterable[float]) -> float:
        return distance(self, other)

    def interpolate(self, other: PointVector | Iterable[float], t: float) -> PointVector:
        return interpolate(self, other, t)

    def turning_angle(self, vertex: PointVector | Iterable[float], following: PointVector | Iterable[float]) -> float:
        return turning_angle(self, vertex, following)


def _check_dimensions(a: PointVector, b: PointVector) -> None:
    if len(a) != len(b):
        raise DimensionMismatch(len(a), len(b))


def distance(a: PointVector | Iterable[float], b: PointVector | Iterable[float]) -> float:
    a = PointVector.coerce(a)
    b = PointVector.coerce(b)
    _check_dimensions(a, b)
    return sqrt(sum((p - q) ** 2 for p, q in zip(a, b)))


def interpolate(a: PointVector | Iterable[float], b: PointVector | Iterable[float], t: float) -> PointVector:
    """Point on the line through ``a`` and ``b``; ``t`` outside [0, 1] extrapolates.

    ``(1 - t) * a + t * b`` keeps ``t == 0`` and ``t == 1`` bit-exact.
    """
    a = PointVector.coerce(a)
    b = PointVector.coerce(b)
    _check_dimensions(a, b)
    s = 1.0 - t
    return PointVector(s * p + t * q for p, q in zip(a, b))


def turning_angle(
    p0: PointVector | Iterable[float],
    p1: PointVector | Iterable[float],
    p2: PointVector | Iterable[float],
) -> float:
    """Exterior angle at ``p1`` of the path p0 -> p1 -> p2, in radians.

    The incoming edge is extended past ``p1`` by the length of the outgoing
    edge; the chord between that extension and ``p2`` gives the angle
    without needing a dot product, so it works in any dimension. A
    zero-length edge has no direction and yields 0.
    """
    p0 = PointVector.coerce(p0)
    p1 = PointVector.coerce(p1)
    p2 = PointVector.coerce(p2)
    d0 = distance(p0, p1)
    d1 = distance(p1, p2)
    if d0 == 0.0 or d1 == 0.0:
        return 0.0
    extended = interpolate(p0, p1, 1.0 + d1 / d0)
    chord = distance(extended, p2)
    return 2.0 * asin(min(1.0, chord / (2.0 * d1)))
